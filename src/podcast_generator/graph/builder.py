"""StateGraph definition — scriptwriter, then an optional narrator."""

from __future__ import annotations

from langgraph.graph import END, StateGraph

from podcast_generator.graph.edges import route_after_script
from podcast_generator.graph.state import GenerationState
from podcast_generator.nodes.narrator import make_narrator
from podcast_generator.nodes.scriptwriter import make_scriptwriter
from podcast_generator.tools.interfaces import SpeechSynthesizer, TextGenerator


def build_graph(
    text_generator: TextGenerator,
    speech_synthesizer: SpeechSynthesizer,
    system_prompt: str,
):
    """Build and compile the podcast generation graph.

    Args:
        text_generator: Collaborator used by the scriptwriter node.
        speech_synthesizer: Collaborator used by the narrator node.
        system_prompt: Fixed system instruction for script generation.

    Returns:
        Compiled StateGraph. No checkpointer: state lives for one request.
    """
    graph = StateGraph(GenerationState)

    graph.add_node("scriptwriter", make_scriptwriter(text_generator, system_prompt))
    graph.add_node("narrator", make_narrator(speech_synthesizer))

    graph.set_entry_point("scriptwriter")

    graph.add_conditional_edges(
        "scriptwriter",
        route_after_script,
        {
            "narrator": "narrator",
            END: END,
        },
    )
    graph.add_edge("narrator", END)

    return graph.compile()
