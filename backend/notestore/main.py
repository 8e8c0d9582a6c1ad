"""
Note Store: FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) returns a configured FastAPI instance. The
       settings object and the NoteStore built from it live on app.state.
Who:   Called by notestore.cli before handing the app to uvicorn, and by
       the test suite with a temporary cache directory.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌────────────┐ │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│   CORS *   │ │
    │  └──────────┘ └──────────┘ └──────┘ └────────────┘ │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────┐ ┌───────────────┐ │
    │  │/notes, /write│ │ /, /Upload │ │ GET /health   │ │
    │  └──────────────┘ └────────────┘ └───────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐  │
    │  │ NotFound→404 │ AlreadyExists/Name→400 │ *→500│  │
    │  └──────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notestore import __version__
from notestore.config import Settings
from notestore.exceptions import NoteStoreError
from notestore.middleware.logging import RequestLoggingMiddleware
from notestore.middleware.request_id import RequestIDMiddleware, request_id_var
from notestore.routes import health, notes, pages
from notestore.services.note_store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Called by the launcher before anything else, so that configuration
    errors are already logged in the final format.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    store: NoteStore = app.state.note_store

    logger.info("=" * 60)
    logger.info("Note Store %s starting up...", __version__)
    logger.info("Cache directory: %s", store.root)
    logger.info("Server ready at %s/", settings.base_url)
    logger.info("API docs: %s/docs", settings.base_url)
    logger.info("=" * 60)

    yield

    logger.info("Note Store shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        NoteStoreError subclasses → exc.status_code, body = exc.message
        HTTPException (routing)   → exc.status_code, body = exc.detail
        Exception (fallback)      → 500, generic body, traceback logged

    Bodies are plain text to match the rest of the note API.
    """

    @app.exception_handler(NoteStoreError)
    async def handle_note_store_error(request: Request, exc: NoteStoreError):
        rid = request_id_var.get("")
        logger.info(
            "[%s] %s %s -> %d %s | Context: %s",
            rid,
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
            exc.context,
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Routing-level errors (unmatched path, wrong method) in plain text.

        A /notes/... path that matched no route names a note that cannot
        exist, e.g. /notes/a%2Fb decodes to two segments.
        """
        if exc.status_code == 404 and request.url.path.startswith("/notes/"):
            body = "Note not found"
        else:
            body = str(exc.detail)
        return PlainTextResponse(body, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for filesystem faults and anything else unexpected.

        The traceback is logged server-side only.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return PlainTextResponse("Internal Server Error", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Settings) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Validated configuration; its cache_dir becomes the
                  NoteStore root for the lifetime of the app.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Note API",
        description="Plain-text notes stored as individual files in a directory.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.note_store = NoteStore(settings.cache_dir)

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost)

    # "*" with credentials would be rejected by browsers, so credentials stay off
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Listings of many notes compress well
    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(pages.router)
    app.include_router(health.router)

    return app
