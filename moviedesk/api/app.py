"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from moviedesk.api.routes import editor, movies
from moviedesk.api.state import AppState, get_state
from moviedesk.config import LOG_FORMAT, LOG_LEVEL, MOVIEDESK_WEB_ORIGIN

# Configure logging in the worker process (uvicorn --reload imports this module fresh)
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

logger = logging.getLogger(__name__)

__all__ = ["app", "create_app", "AppState", "get_state"]


def create_app(state: Optional[AppState] = None) -> FastAPI:
    """Build the app; pass state to use a specific editor (tests)."""

    def _state() -> AppState:
        return state if state is not None else get_state()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        current = _state()
        # Initial load, like opening the page
        if await run_in_threadpool(current.editor.fetch_all):
            logger.info("Loaded %d movies", len(current.editor.state.movies))
        yield
        current.editor.close()

    app = FastAPI(
        title="Moviedesk API",
        description="Local editor API for a remote movie collection",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[MOVIEDESK_WEB_ORIGIN],
        allow_credentials=MOVIEDESK_WEB_ORIGIN != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if state is not None:
        app.dependency_overrides[get_state] = _state

    app.include_router(movies.router, prefix="/api/movies", tags=["movies"])
    app.include_router(editor.router, prefix="/api/editor", tags=["editor"])
    return app


app = create_app()
