"""Configuration: env, remote movie API, local server."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of moviedesk package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so MOVIEDESK_API_URL etc. are set
load_dotenv(BASE_DIR / ".env")

# Remote movie API (list/create/update/delete live under this path)
MOVIE_API_URL = os.getenv(
    "MOVIEDESK_API_URL", "https://fullstackproject-gilt.vercel.app/api/movie"
)
HTTP_TIMEOUT_SEC = float(os.getenv("MOVIEDESK_HTTP_TIMEOUT", "15"))

# Stored images come back as raw bytes without a content type
IMAGE_MIME = os.getenv("MOVIEDESK_IMAGE_MIME", "image/jpeg")

# Local API
API_HOST = os.getenv("MOVIEDESK_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("MOVIEDESK_API_PORT", "8000"))
# Front end allowed by CORS (e.g. http://localhost:5173 for Vite dev)
MOVIEDESK_WEB_ORIGIN = os.getenv("MOVIEDESK_WEB_ORIGIN", "*")

LOG_LEVEL = os.getenv("MOVIEDESK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"
