from __future__ import annotations

from conftest import DUNE, HEAT
from moviedesk.core import editor_reducer as reducer
from moviedesk.models.editor import EditorMode, EditorState, Operation
from moviedesk.models.movie import EMPTY_DRAFT, SelectedImage


def test_update_draft_changes_only_given_fields() -> None:
    state = reducer.update_draft(EditorState(), name="Arrival", rating=8)
    state = reducer.update_draft(state, description="first contact")
    assert (state.draft.name, state.draft.rating, state.draft.description) == ("Arrival", 8, "first contact")

    cleared = reducer.update_draft(state, rating=None)
    assert cleared.draft.rating is None
    assert cleared.draft.name == "Arrival"

    assert reducer.update_draft(state) is state


def test_submit_succeeded_resets_edit_mode_and_draft() -> None:
    state = reducer.start_edit(EditorState(movies=(DUNE,)), DUNE)
    assert state.mode is EditorMode.EDIT

    done = reducer.submit_succeeded(state)
    assert done.mode is EditorMode.CREATE
    assert done.draft == EMPTY_DRAFT
    assert done.movies == (DUNE,)


def test_image_selected_keeps_fields() -> None:
    state = reducer.update_draft(EditorState(), name="Arrival")
    image = SelectedImage("a.png", b"x", "image/png")
    state = reducer.image_selected(state, image, "data:image/png;base64,eA==")
    assert state.draft.name == "Arrival"
    assert state.draft.image_file == image
    assert state.draft.preview == "data:image/png;base64,eA=="


def test_movie_deleted_removes_matching_id_only() -> None:
    state = EditorState(movies=(DUNE, HEAT))
    assert reducer.movie_deleted(state, "2").movies == (DUNE,)
    assert reducer.movie_deleted(state, "404").movies == (DUNE, HEAT)


def test_begin_and_finish_track_in_flight_operations() -> None:
    state = reducer.begin(EditorState(), Operation.FETCH)
    state = reducer.begin(state, Operation.DELETE)
    assert state.in_flight == {Operation.FETCH, Operation.DELETE}
    assert reducer.finish(state, Operation.FETCH).in_flight == {Operation.DELETE}


def test_update_draft_can_clear_text_fields() -> None:
    state = reducer.update_draft(EditorState(), name="Arrival", description="first contact")
    state = reducer.update_draft(state, name="")
    assert state.draft.name == ""
    assert state.draft.description == "first contact"


def test_pending_refresh_is_consumed_with_fetch_still_running() -> None:
    state = reducer.defer_refresh(reducer.begin(EditorState(), Operation.FETCH))
    assert state.refresh_pending

    restarted = reducer.restart_fetch(state)
    assert not restarted.refresh_pending
    assert restarted.in_flight == {Operation.FETCH}
