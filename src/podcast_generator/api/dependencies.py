"""FastAPI dependency injection — settings and orchestrator instances."""

from __future__ import annotations

from fastapi import Request

from podcast_generator.config import Settings
from podcast_generator.orchestrator import PodcastOrchestrator


def get_app_settings(request: Request) -> Settings:
    """Return the settings the app was created with."""
    return request.app.state.settings


def get_orchestrator(request: Request) -> PodcastOrchestrator:
    """Return the app's shared orchestrator."""
    return request.app.state.orchestrator
