"""Editor transitions: each takes the current EditorState and returns the next one."""
from dataclasses import replace
from typing import Iterable

from moviedesk.models.editor import EditorState, Operation
from moviedesk.models.movie import EMPTY_DRAFT, Movie, SelectedImage

_UNSET = object()


def start_edit(state: EditorState, movie: Movie) -> EditorState:
    """Enter edit mode for movie; its image is shown as preview, not loaded into the file slot."""
    draft = replace(
        EMPTY_DRAFT,
        name=movie.name,
        rating=movie.rating,
        description=movie.description,
        preview=movie.image,
    )
    return replace(state, draft=draft, editing_id=movie.id)


def update_draft(
    state: EditorState,
    *,
    name=_UNSET,
    rating=_UNSET,
    description=_UNSET,
) -> EditorState:
    """Set the given fields; omitted ones keep their value (rating=None clears it)."""
    fields = {"name": name, "rating": rating, "description": description}
    changes = {k: v for k, v in fields.items() if v is not _UNSET}
    if not changes:
        return state
    return replace(state, draft=replace(state.draft, **changes))


def image_selected(state: EditorState, image: SelectedImage, preview: str) -> EditorState:
    # File and preview always change together
    return replace(state, draft=replace(state.draft, image_file=image, preview=preview))


def submit_succeeded(state: EditorState) -> EditorState:
    """Back to create mode with an empty draft (after create or update)."""
    return replace(state, draft=EMPTY_DRAFT, editing_id=None)


def movies_loaded(state: EditorState, movies: Iterable[Movie]) -> EditorState:
    return replace(state, movies=tuple(movies))


def movie_deleted(state: EditorState, movie_id: str) -> EditorState:
    return replace(state, movies=tuple(m for m in state.movies if m.id != movie_id))


def begin(state: EditorState, op: Operation) -> EditorState:
    return replace(state, in_flight=state.in_flight | {op})


def finish(state: EditorState, op: Operation) -> EditorState:
    return replace(state, in_flight=state.in_flight - {op})


def defer_refresh(state: EditorState) -> EditorState:
    return replace(state, refresh_pending=True)


def restart_fetch(state: EditorState) -> EditorState:
    """Consume a pending refresh; the fetch flag stays set for the next round."""
    return replace(state, refresh_pending=False)
