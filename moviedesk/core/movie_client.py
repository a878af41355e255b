"""Movie API client: list, create, update, delete over HTTP (requests)."""
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from moviedesk.config import HTTP_TIMEOUT_SEC, MOVIE_API_URL
from moviedesk.core.errors import NetworkFailure, ServerError
from moviedesk.core.images import display_image
from moviedesk.models.movie import Draft, Movie

logger = logging.getLogger(__name__)

# Multipart part as requests expects it: (filename, content[, content_type])
_Part = Tuple[Any, ...]


def movie_from_json(item: Dict[str, Any]) -> Movie:
    """Map an API record to Movie, applying the image presentation transform."""
    return Movie(
        id=str(item["_id"]),
        name=item.get("movie_name") or "",
        rating=_parse_rating(item.get("movie_rating")),
        description=item.get("description") or "",
        image=display_image(item.get("image")),
    )


def _parse_rating(value: Any):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return int(number) if number.is_integer() else number


def _format_rating(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_payload(draft: Draft) -> List[Tuple[str, _Part]]:
    """Multipart parts for create/update. The image part is sent only for a newly picked file."""
    parts: List[Tuple[str, _Part]] = [
        ("movie_name", (None, draft.name)),
        ("movie_rating", (None, _format_rating(draft.rating))),
        ("description", (None, draft.description)),
    ]
    if draft.image_file is not None:
        image = draft.image_file
        parts.append(("image", (image.filename, image.content, image.content_type)))
    return parts


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("message") or body.get("error") or body)
    return str(body)


class MovieService:
    """Client for the remote movie API. Failures raise NetworkFailure or ServerError."""

    def __init__(
        self,
        base_url: str = MOVIE_API_URL,
        *,
        timeout: float = HTTP_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str = "", **kwargs) -> Any:
        """Send a request; return decoded JSON (None for an empty body)."""
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise NetworkFailure(f"{method} {url}: {exc}") from exc
        if not response.ok:
            raise ServerError(response.status_code, _error_message(response))
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            # Plain-text confirmations (e.g. "Movie deleted") are fine for delete
            if method == "DELETE":
                return response.text
            raise ServerError(response.status_code, "Response is not valid JSON") from exc

    def list(self) -> List[Movie]:
        """Return all movies, images already turned into data URIs."""
        data = self._request("GET")
        if not isinstance(data, list):
            raise ServerError(200, "Expected a list of movies")
        movies = []
        for item in data:
            try:
                movies.append(movie_from_json(item))
            except (KeyError, TypeError):
                logger.warning("Skipping malformed movie record: %r", item)
        return movies

    def _parse_saved(self, data: Any) -> Optional[Movie]:
        if not isinstance(data, dict):
            return None
        try:
            return movie_from_json(data)
        except (KeyError, TypeError):
            return None

    def create(self, draft: Draft) -> Optional[Movie]:
        """POST a new movie; return the created record when the server echoes it."""
        data = self._request("POST", files=build_payload(draft))
        return self._parse_saved(data)

    def update(self, movie_id: str, draft: Draft) -> Optional[Movie]:
        """PUT new values for a movie; without a new image the stored one is kept."""
        data = self._request("PUT", f"/{movie_id}", files=build_payload(draft))
        return self._parse_saved(data)

    def delete(self, movie_id: str) -> Any:
        """DELETE a movie; return the server's confirmation."""
        return self._request("DELETE", f"/{movie_id}")

    def close(self) -> None:
        self.session.close()
