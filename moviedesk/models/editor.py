"""Editor state: mode, draft, cached movie list."""
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from moviedesk.models.movie import EMPTY_DRAFT, Draft, Movie


class EditorMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class Operation(str, Enum):
    """Kinds of remote call; at most one of each kind runs at a time."""
    FETCH = "fetch"
    SUBMIT = "submit"
    DELETE = "delete"


@dataclass(frozen=True)
class EditorState:
    draft: Draft = EMPTY_DRAFT
    movies: Tuple[Movie, ...] = ()
    editing_id: Optional[str] = None  # None = create mode
    in_flight: FrozenSet[Operation] = field(default_factory=frozenset)
    # A save finished while a fetch was running; fetch again once it settles
    refresh_pending: bool = False

    @property
    def mode(self) -> EditorMode:
        return EditorMode.CREATE if self.editing_id is None else EditorMode.EDIT
