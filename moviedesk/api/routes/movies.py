"""Cached movie list: read, refresh from the server, delete."""
from fastapi import APIRouter, Depends

from moviedesk.api.serializers import movie_to_dict, state_to_dict
from moviedesk.api.state import AppState, get_state

router = APIRouter()


@router.get("")
def list_movies(state: AppState = Depends(get_state)):
    """Return the movies as last fetched."""
    return [movie_to_dict(m) for m in state.editor.state.movies]


@router.post("/refresh")
def refresh_movies(state: AppState = Depends(get_state)):
    """Re-fetch the list from the movie API. On failure the old list stays."""
    state.editor.fetch_all()
    return state_to_dict(state.editor.state)


@router.delete("/{movie_id}")
def delete_movie(movie_id: str, state: AppState = Depends(get_state)):
    """Delete a movie; it leaves the list only once the server confirms."""
    state.editor.delete_movie(movie_id)
    return state_to_dict(state.editor.state)
