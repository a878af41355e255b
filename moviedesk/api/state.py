"""Shared application state (injected into routes)."""
from typing import Optional

from moviedesk.core.movie_client import MovieService
from moviedesk.core.movie_editor import MovieEditor


class AppState:
    def __init__(self, service: Optional[MovieService] = None) -> None:
        self.service = service or MovieService()
        self.editor = MovieEditor(self.service)


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState()
    return _state
