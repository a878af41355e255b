from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from moviedesk.core.errors import MovieServiceError, NetworkFailure, ServerError
from moviedesk.core.movie_editor import MovieEditor
from moviedesk.models.movie import Draft, Movie


class FakeMovieService:
    """In-memory stand-in for MovieService; set `fail[op]` to make a call raise."""

    def __init__(self, movies: list[Movie] | None = None) -> None:
        self.movies: list[Movie] = list(movies or [])
        self.calls: list[tuple[str, Any]] = []
        self.fail: dict[str, MovieServiceError] = {}
        self.closed = False
        self._next_id = 100

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail:
            raise self.fail[op]

    def list(self) -> list[Movie]:
        self.calls.append(("list", None))
        self._maybe_fail("list")
        return list(self.movies)

    def create(self, draft: Draft) -> Movie:
        self.calls.append(("create", draft))
        self._maybe_fail("create")
        self._next_id += 1
        movie = Movie(
            id=str(self._next_id),
            name=draft.name,
            rating=draft.rating,
            description=draft.description,
            image=draft.preview if draft.image_file else None,
        )
        self.movies.append(movie)
        return movie

    def update(self, movie_id: str, draft: Draft) -> Movie:
        self.calls.append(("update", (movie_id, draft)))
        self._maybe_fail("update")
        for i, m in enumerate(self.movies):
            if m.id == movie_id:
                image = draft.preview if draft.image_file else m.image
                self.movies[i] = Movie(movie_id, draft.name, draft.rating, draft.description, image)
                return self.movies[i]
        raise ServerError(404, "Movie not found")

    def delete(self, movie_id: str) -> dict:
        self.calls.append(("delete", movie_id))
        self._maybe_fail("delete")
        self.movies = [m for m in self.movies if m.id != movie_id]
        return {"message": "Movie deleted"}

    def close(self) -> None:
        self.closed = True

    def ops(self) -> list[str]:
        return [name for name, _ in self.calls]


DUNE = Movie(
    id="1",
    name="Dune",
    rating=9,
    description="desert planet",
    image="data:image/jpeg;base64,/9j/4AAQ",
)
HEAT = Movie(id="2", name="Heat", rating=8, description="bank job", image=None)


@pytest.fixture()
def service() -> FakeMovieService:
    return FakeMovieService([DUNE, HEAT])


@pytest.fixture()
def editor(service: FakeMovieService) -> MovieEditor:
    editor = MovieEditor(service)
    assert editor.fetch_all()
    service.calls.clear()
    return editor


@pytest.fixture()
def network_down() -> NetworkFailure:
    return NetworkFailure("GET http://movies.test: connection refused")
