"""
Roster API - FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own set of lesson repositories on app.state.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).
When:  Once at server startup, and once per test for isolated stores.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                     FastAPI App                      │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌────┐ ┌────────────┐ ┌──────────┐ ┌──────────────┐ │
    │  │CORS│→│  Req ID    │→│ Logging  │→│ Error catch  │ │
    │  └────┘ └────────────┘ └──────────┘ └──────────────┘ │
    │                                                      │
    │  Routes:                                             │
    │  /api1 .. /api5  basics    /api6  CRUD               │
    │  /api7  search             /api8  service (DI)       │
    │  /api9  error              /api10 pagination         │
    │  /health                                             │
    │                                                      │
    │  Exception Handlers:                                 │
    │  InvalidUserId→400 │ Validation→400 │ NotFound→404   │
    │  RequestValidation→400                               │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Log the configured address

    Shutdown:
    1. Log shutdown complete (in-memory stores are simply dropped)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from app import __version__
from app.config import settings
from app.dependencies import build_repositories
from app.exceptions import InvalidUserIdError, NotFoundError, ValidationError
from app.middleware.errors import ErrorHandlingMiddleware, error_response
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import basics, crud, diagnostics, health, pagination, search, service
from app.schemas.user import ApiResponse, UserIdErrorResponse

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    When:    Called once during app startup, before anything else logs.
    Format:  %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that log every request at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown hooks: code before yield runs on startup, after yield on shutdown."""
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info(
        "Demo data: %s",
        "seeded" if settings.seed_demo_users else "empty stores",
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("%s shutting down...", settings.app_name)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register handlers for the typed application errors.

    Handler hierarchy (most specific wins, by exception MRO):
        InvalidUserIdError      → 400 {"error": message}
        ValidationError         → 400 {"statusCode": 400, "message": ..., "data": null}
        NotFoundError           → 404 (empty body)
        RequestValidationError  → 400 {"Error": "Bad Request", "Message": ...}

    Everything else propagates to ErrorHandlingMiddleware.
    """

    @app.exception_handler(InvalidUserIdError)
    async def handle_invalid_user_id(request: Request, exc: InvalidUserIdError):
        logger.warning("[%s] Invalid user id %r: %s", request_id_var.get(""), exc.raw_value, exc.message)
        return JSONResponse(
            status_code=400,
            content=UserIdErrorResponse(error=exc.message).model_dump(),
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        body = ApiResponse[str](status_code=400, message=exc.message, data=None)
        return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info("[%s] %s", request_id_var.get(""), exc.message)
        return Response(status_code=404)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Malformed JSON, wrong parameter types, out-of-range query values."""
        message = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in exc.errors()
        )
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), message)
        return error_response(400, "Bad Request", message)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance with fresh, independent
             lesson repositories.
    """
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Tutorial web API in ten lessons: routing, request parsing, validation, "
            "in-memory CRUD, dependency injection, global error handling, search "
            "and pagination."
        ),
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.state.repositories = build_repositories(seed=settings.seed_demo_users)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute. Execution order:
    # CORS → RequestID → Logging → ErrorHandling → router
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for router in basics.routers:
        app.include_router(router)
    app.include_router(crud.router)
    app.include_router(search.router)
    app.include_router(service.router)
    app.include_router(diagnostics.router)
    app.include_router(pagination.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `app.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
