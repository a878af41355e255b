"""Form editor: draft fields, image pick, edit mode, submit."""
from typing import Optional, Union

from fastapi import APIRouter, Body, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel

from moviedesk.api.serializers import state_to_dict
from moviedesk.api.state import AppState, get_state

router = APIRouter()


class DraftBody(BaseModel):
    """Form field edits; omitted fields keep their value, a null rating clears it."""
    name: str = ""
    rating: Optional[Union[int, float]] = None
    description: str = ""


def _apply_fields(state: AppState, body: Optional[DraftBody]) -> None:
    if body is None:
        return
    # rating=None clears the number input; unset fields are left alone
    state.editor.update_draft(**body.model_dump(exclude_unset=True))


@router.get("")
def get_editor(state: AppState = Depends(get_state)):
    """Return mode, draft, and cached movies."""
    return state_to_dict(state.editor.state)


@router.patch("/draft")
def patch_draft(body: DraftBody, state: AppState = Depends(get_state)):
    _apply_fields(state, body)
    return state_to_dict(state.editor.state)


@router.post("/image")
async def select_image(
    file: UploadFile = File(...),
    state: AppState = Depends(get_state),
):
    """Attach an image to the draft and show its preview."""
    content = await file.read()
    state.editor.select_image(file.filename or "image", content, file.content_type)
    return state_to_dict(state.editor.state)


@router.post("/edit/{movie_id}")
def start_edit(movie_id: str, state: AppState = Depends(get_state)):
    """Load a cached movie into the draft and switch to edit mode."""
    movie = state.editor.get_movie(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    state.editor.start_edit(movie)
    return state_to_dict(state.editor.state)


@router.post("/submit")
def submit(
    body: DraftBody | None = Body(None),
    state: AppState = Depends(get_state),
):
    """Create or update from the draft (optional field edits applied first)."""
    _apply_fields(state, body)
    state.editor.submit()
    return state_to_dict(state.editor.state)
