"""Movie editor: form draft, cached movie list, and the calls that reconcile them.

Remote calls run outside the lock; their outcome comes back as a
ServiceResult and is applied through the transitions in editor_reducer.
Failures are logged and dropped so the caller always gets a usable state.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from moviedesk.core import editor_reducer as reducer
from moviedesk.core.errors import MovieServiceError, ServerError
from moviedesk.core.images import read_selected_image
from moviedesk.core.movie_client import MovieService
from moviedesk.models.editor import EditorState, Operation
from moviedesk.models.movie import Movie

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of one remote call: value on success, error on failure."""
    value: Optional[T] = None
    error: Optional[MovieServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def call_service(fn: Callable[..., T], *args) -> ServiceResult[T]:
    try:
        return ServiceResult(value=fn(*args))
    except MovieServiceError as exc:
        return ServiceResult(error=exc)


def _log_failure(action: str, error: MovieServiceError) -> None:
    logger.error("Error %s: %s", action, error)
    if isinstance(error, ServerError) and error.message:
        logger.error("Response error (%s): %s", error.status_code, error.message)


class MovieEditor:
    """Owns EditorState; at most one fetch, submit and delete run at a time."""

    def __init__(self, service: MovieService) -> None:
        self._service = service
        self._state = EditorState()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def state(self) -> EditorState:
        with self._lock:
            return self._state

    def _apply(self, transition: Callable[..., EditorState], *args, **kwargs) -> None:
        with self._lock:
            self._state = transition(self._state, *args, **kwargs)

    def _begin(self, op: Operation) -> bool:
        with self._lock:
            if self._closed:
                logger.debug("Editor closed; ignoring %s", op.value)
                return False
            if op in self._state.in_flight:
                logger.warning("A %s request is already in flight; ignoring this one", op.value)
                return False
            self._state = reducer.begin(self._state, op)
            return True

    def _settle(self, op: Operation, result: ServiceResult, on_success: Callable[[EditorState], EditorState]) -> bool:
        """Clear the in-flight flag and apply on_success if the call succeeded and the editor is still open."""
        with self._lock:
            if self._closed:
                logger.debug("Discarding %s result that arrived after close", op.value)
                return False
            state = reducer.finish(self._state, op)
            if result.ok:
                state = on_success(state)
            self._state = state
        return result.ok

    # --- form ---

    def start_edit(self, movie: Movie) -> None:
        """Switch to editing movie (replaces any current draft)."""
        self._apply(reducer.start_edit, movie)

    def update_draft(self, **fields: Any) -> None:
        """Apply form field edits: name, rating, description."""
        self._apply(reducer.update_draft, **fields)

    def select_image(self, filename: str, content: bytes, content_type: Optional[str] = None) -> None:
        """Attach a picked image file and its preview to the draft."""
        image, preview = read_selected_image(filename, content, content_type)
        self._apply(reducer.image_selected, image, preview)

    def get_movie(self, movie_id: str) -> Optional[Movie]:
        for movie in self.state.movies:
            if movie.id == movie_id:
                return movie
        return None

    # --- remote calls ---

    def fetch_all(self) -> bool:
        """Replace the cached list with the server's. Returns True on success."""
        if not self._begin(Operation.FETCH):
            return False
        return self._run_fetch()

    def _run_fetch(self) -> bool:
        """Fetch until no refresh is pending; the FETCH flag is already set."""
        while True:
            result = call_service(self._service.list)
            if not result.ok:
                _log_failure("fetching movies", result.error)
            with self._lock:
                if self._closed:
                    logger.debug("Discarding fetch result that arrived after close")
                    return False
                state = self._state
                if result.ok:
                    state = reducer.movies_loaded(state, result.value)
                if not state.refresh_pending:
                    self._state = reducer.finish(state, Operation.FETCH)
                    return result.ok
                logger.debug("Movie list changed during fetch; fetching again")
                self._state = reducer.restart_fetch(state)

    def _refresh_after_save(self) -> None:
        with self._lock:
            if self._closed:
                return
            if Operation.FETCH in self._state.in_flight:
                # The running fetch may predate the save
                self._state = reducer.defer_refresh(self._state)
                return
            self._state = reducer.begin(self._state, Operation.FETCH)
        self._run_fetch()

    def submit(self) -> bool:
        """Create or update from the draft, then refresh the list. Returns True if the save succeeded."""
        with self._lock:
            state = self._state
        if not state.draft.is_complete():
            logger.info("Draft is missing name, rating or description; not submitting")
            return False
        if not self._begin(Operation.SUBMIT):
            return False
        draft, editing_id = state.draft, state.editing_id
        logger.debug(
            "Submitting movie %r (%s, new image: %s)",
            draft.name,
            f"update {editing_id}" if editing_id else "create",
            draft.image_file is not None,
        )
        if editing_id is not None:
            result = call_service(self._service.update, editing_id, draft)
        else:
            result = call_service(self._service.create, draft)
        if not result.ok:
            _log_failure("submitting movie form", result.error)
        if not self._settle(Operation.SUBMIT, result, reducer.submit_succeeded):
            return False
        self._refresh_after_save()
        return True

    def delete_movie(self, movie_id: str) -> bool:
        """Delete on the server, then drop it from the cached list. Returns True on success."""
        if not self._begin(Operation.DELETE):
            return False
        result = call_service(self._service.delete, movie_id)
        if not result.ok:
            _log_failure("deleting movie", result.error)
        return self._settle(
            Operation.DELETE, result, lambda s: reducer.movie_deleted(s, movie_id)
        )

    def close(self) -> None:
        """Stop applying results; in-flight calls finish but are discarded."""
        with self._lock:
            self._closed = True
        self._service.close()
