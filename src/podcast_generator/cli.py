"""Command-line interface for podcast-generator."""

from __future__ import annotations

import argparse
import asyncio
import sys

import httpx

from podcast_generator.client.form import PodcastForm
from podcast_generator.client.session import PodcastSession
from podcast_generator.config import get_settings
from podcast_generator.logging_config import configure_logging
from podcast_generator.models.request import DEFAULT_MINUTES, DIALOGUE_MODE, SOLO_MODE


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podcast-generator",
        description="Generate podcast scripts and audio with OpenAI and ElevenLabs",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server and web client")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    generate = subparsers.add_parser("generate", help="Request a podcast from a running server")
    generate.add_argument("-t", "--topic", default="", help="Podcast topic")
    generate.add_argument(
        "-m", "--mode",
        default=SOLO_MODE,
        choices=[SOLO_MODE, DIALOGUE_MODE],
        help="Podcast format (default: solo)",
    )
    generate.add_argument("-n", "--name", default="", help="Voice role / name (solo)")
    generate.add_argument("-a", "--speaker-a", default="", help="First speaker (dialogue)")
    generate.add_argument("-b", "--speaker-b", default="", help="Second speaker (dialogue)")
    generate.add_argument(
        "--minutes",
        type=int,
        default=DEFAULT_MINUTES,
        help=f"Target length in minutes, 1-60 (default: {DEFAULT_MINUTES})",
    )
    generate.add_argument(
        "--url",
        default="http://127.0.0.1:8000",
        help="API server base URL",
    )
    generate.add_argument("-o", "--output", default=None, help="Where to save the MP3")
    return parser


async def _generate(
    args: argparse.Namespace,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    form = PodcastForm(
        mode=args.mode,
        topic=args.topic,
        name=args.name,
        speaker_a=args.speaker_a,
        speaker_b=args.speaker_b,
        minutes=args.minutes,
    )
    print(f"Target length: {form.minutes} min (~{form.estimated_words} words)", file=sys.stderr)

    # Script + audio generation can take minutes
    async with httpx.AsyncClient(base_url=args.url, timeout=None, transport=transport) as http:
        session = PodcastSession(http, form)
        ok = await session.submit()

    if not ok:
        print(f"Error: {session.error}", file=sys.stderr)
        return 1

    print(session.script)

    if session.synthesis_warning:
        print(
            f"\nScript generated, but audio failed: {session.synthesis_warning}",
            file=sys.stderr,
        )

    if session.audio is not None:
        if args.output:
            saved = session.audio.save(args.output)
            print(f"\nAudio saved: {saved}", file=sys.stderr)
        else:
            print(f"\nAudio: {session.audio.url}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level, settings.log_json)

    if args.command == "serve":
        import uvicorn

        from podcast_generator.main import create_app

        uvicorn.run(create_app(settings), host=args.host, port=args.port)
        return

    sys.exit(asyncio.run(_generate(args)))


if __name__ == "__main__":
    main()
