"""FastAPI application factory.

Versioned endpoints live under ``/api/v1``; ``/health`` and ``/`` stay
unversioned for load balancers and discovery.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booklists.domain.shared.exceptions import StoreUnavailableError
from booklists.presentation.api.dependencies import get_list_store
from booklists.presentation.api.exception_handlers import setup_exception_handlers
from booklists.presentation.api.routers import auth_router, lists_router, users_router
from booklists.presentation.api.schemas.common import HealthResponse
from booklists_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": (
            "Registration, login and token refresh. Passwords are stored as "
            "bcrypt hashes and accounts lock after repeated failed logins."
        ),
    },
    {
        "name": "Lists",
        "description": """Book lists with books, likes and comments.

Reading is public; every change needs a bearer token. Only the owner may
delete a list and only the author may delete a comment. Nested
collections are returned newest first.
""",
    },
    {"name": "Users", "description": "Profiles, about entries, account deletion."},
    {"name": "Health", "description": "Liveness check."},
    {"name": "Info", "description": "Discovery."},
]


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Log to stdout once per process at the configured level."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in ("booklists", "booklists_auth"):
        logging.getLogger(name).setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Open the shared list store before serving; dispose it on shutdown."""
    logger.info("Starting Booklists API v%s", API_VERSION)
    store = get_list_store()
    try:
        await store.open()
    except StoreUnavailableError:
        logger.critical("Database unreachable, refusing to start")
        raise SystemExit(1) from None

    yield

    await store.close()
    logger.info("Booklists API stopped")


def create_v1_router() -> APIRouter:
    router = APIRouter()
    router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    router.include_router(lists_router, prefix="/lists", tags=["Lists"])
    router.include_router(users_router, prefix="/users", tags=["Users"])
    return router


def _add_service_routes(app: FastAPI, settings: Settings) -> None:
    title = app.title

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        return {
            "name": title,
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                **{
                    name: f"{API_V1_PREFIX}/{name}"
                    for name in ("auth", "lists", "users")
                },
            },
        }


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Parameters
    ----------
    settings
        Used instead of the process settings, mainly by tests. Request
        dependencies still read ``get_api_settings`` and are overridden
        separately.
    """
    _configure_logging()
    settings = settings or get_settings()
    docs = settings.api_debug

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Curated **book lists** with likes and comments.",
        version=API_VERSION,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)
    _add_service_routes(app, settings)
    return app


# Module-level instance for ``uvicorn booklists.presentation.api.app:app``
app = create_app()
