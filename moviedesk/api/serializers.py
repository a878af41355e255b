"""Editor state to JSON-ready dicts."""
from moviedesk.models.editor import EditorState
from moviedesk.models.movie import Draft, Movie


def movie_to_dict(m: Movie) -> dict:
    return {
        "id": m.id,
        "name": m.name,
        "rating": m.rating,
        "description": m.description,
        "image": m.image,
    }


def draft_to_dict(d: Draft) -> dict:
    return {
        "name": d.name,
        "rating": d.rating,
        "description": d.description,
        "image_filename": d.image_file.filename if d.image_file else None,
        "preview": d.preview,
    }


def state_to_dict(state: EditorState) -> dict:
    return {
        "mode": state.mode.value,
        "editing_id": state.editing_id,
        "draft": draft_to_dict(state.draft),
        "movies": [movie_to_dict(m) for m in state.movies],
        "busy": sorted(op.value for op in state.in_flight),
    }
