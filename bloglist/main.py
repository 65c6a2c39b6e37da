"""
Bloglist Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers;
       the module-level `app` is what uvicorn serves
       (uvicorn bloglist.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ /api/blogs   │ │ /api/users   │ │ /health     │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation/MalformedId→400 │ Storage→500     │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Every error response body is `{"error": <message>}`.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bloglist import __version__
from bloglist.config import settings
from bloglist.database import dispose_engine
from bloglist.exceptions import SOMETHING_WENT_WRONG, BloglistError
from bloglist.middleware.logging import RequestLoggingMiddleware
from bloglist.middleware.request_id import RequestIDLogFilter, RequestIDMiddleware
from bloglist.routes import blogs, health, users

logger = logging.getLogger(__name__)

MALFORMATTED_REQUEST = "malformatted request"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole application.

    Called once from the lifespan, before anything else logs.
    Format: %(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s

    The request ID filter sits on the handler, so records propagated from
    any logger (ours or a library's) get `request_id` before formatting.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Third-party loggers that log every operation at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce the bind address.
    Shutdown: dispose the database engine (closes pooled connections).

    Tables are created by Alembic (`alembic upgrade head`), not here.
    """
    setup_logging()
    logger.info("Bloglist Backend %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Bloglist Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to `{"error": <message>}` responses.

    Handler hierarchy:
        BloglistError subclasses → their own status_code (400 or 500)
        RequestValidationError   → 400 "malformatted request"
        Exception (fallback)     → 500 "something went wrong..."

    Context dicts and stack traces go to the server log only.
    """

    @app.exception_handler(BloglistError)
    async def handle_bloglist_error(request: Request, exc: BloglistError):
        if exc.status_code >= 500:
            logger.error("%s: %s | Context: %s", type(exc).__name__, exc.message, exc.context)
        else:
            logger.warning("%s: %s", type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Unparseable JSON or wrongly typed fields (e.g. negative likes)."""
        # loc/msg only: the raw `input` may be a plaintext password
        problems = [(err.get("loc"), err.get("msg")) for err in exc.errors()]
        logger.warning("Request validation failed: %s", problems)
        return JSONResponse(status_code=400, content={"error": MALFORMATTED_REQUEST})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs outside the middleware stack, after the ContextVar is reset
        rid = getattr(request.state, "request_id", "-")
        logger.error("Unexpected error in request %s: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": SOMETHING_WENT_WRONG})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, exception handlers and routers into a FastAPI app."""
    app = FastAPI(
        title="Bloglist API",
        description="Blogs and users over a small JSON API.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(blogs.router)
    app.include_router(users.router)
    app.include_router(health.router)

    return app


app = create_app()
