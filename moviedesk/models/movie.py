"""Movie records as cached from the remote API, and the unsaved form draft."""
from dataclasses import dataclass
from typing import Optional, Union

Rating = Union[int, float]


@dataclass(frozen=True)
class Movie:
    """Cached copy of a server-owned movie record."""
    id: str
    name: str
    rating: Rating
    description: str
    image: Optional[str] = None  # display-ready data URI


@dataclass(frozen=True)
class SelectedImage:
    """Image file picked locally, not yet uploaded."""
    filename: str
    content: bytes
    content_type: str


@dataclass(frozen=True)
class Draft:
    """In-progress form values for creating or editing a movie."""
    name: str = ""
    rating: Optional[Rating] = None
    description: str = ""
    image_file: Optional[SelectedImage] = None
    preview: Optional[str] = None

    def is_complete(self) -> bool:
        """True when every required form field has a value."""
        return bool(self.name) and self.rating is not None and bool(self.description)


EMPTY_DRAFT = Draft()
