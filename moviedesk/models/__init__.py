"""Data models for movies, the form draft, and editor state."""
from moviedesk.models.editor import EditorMode, EditorState, Operation
from moviedesk.models.movie import EMPTY_DRAFT, Draft, Movie, SelectedImage

__all__ = [
    "Draft",
    "EMPTY_DRAFT",
    "EditorMode",
    "EditorState",
    "Movie",
    "Operation",
    "SelectedImage",
]
