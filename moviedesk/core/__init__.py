"""Core services: movie API client and the editor that drives it."""
from moviedesk.core.movie_client import MovieService
from moviedesk.core.movie_editor import MovieEditor

__all__ = ["MovieEditor", "MovieService"]
