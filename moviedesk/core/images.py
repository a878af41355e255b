"""Image presentation: stored bytes and picked files to embeddable data URIs."""
import base64
import mimetypes
from typing import Any, Optional, Tuple

from moviedesk.config import IMAGE_MIME
from moviedesk.models.movie import SelectedImage

_FALLBACK_MIME = "application/octet-stream"


def to_data_uri(content: bytes, mime: str = IMAGE_MIME) -> str:
    """Return e.g. 'data:image/jpeg;base64,/9j/...'."""
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"


def decode_image_field(value: Any) -> Optional[bytes]:
    """Return raw bytes from a serialised buffer ({"type": "Buffer", "data": [...]}) or a bare byte list."""
    data = value.get("data") if isinstance(value, dict) else value
    if not isinstance(data, list):
        return None
    try:
        return bytes(data)
    except (TypeError, ValueError):
        return None


def display_image(value: Any) -> Optional[str]:
    """Presentation transform for an image field from the movie API.

    Byte buffers become data URIs, an empty buffer included (it yields a
    URI with no payload); strings (already a URL or data URI) pass through;
    anything else means no image.
    """
    if isinstance(value, str):
        return value or None
    content = decode_image_field(value)
    if content is None:
        return None
    return to_data_uri(content)


def guess_content_type(filename: str, content_type: Optional[str] = None) -> str:
    if content_type and content_type != _FALLBACK_MIME:
        return content_type
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or content_type or _FALLBACK_MIME


def read_selected_image(
    filename: str, content: bytes, content_type: Optional[str] = None
) -> Tuple[SelectedImage, str]:
    """Return the picked file and its preview data URI."""
    mime = guess_content_type(filename, content_type)
    image = SelectedImage(filename=filename, content=content, content_type=mime)
    return image, to_data_uri(content, mime)
