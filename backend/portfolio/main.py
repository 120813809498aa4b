"""
Portfolio Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn portfolio.main:app).

Application Architecture:
    ┌───────────────────────────────────────────────────────────┐
    │                      FastAPI App                          │
    │                                                           │
    │  Middleware: RequestID → RateLimit → Logging → GZip → CORS│
    │                                                           │
    │  Public:   /api/career  /api/skills  /api/stations        │
    │            /api/education  /api/aqicn/*  /api/contact     │
    │            /api/health                                    │
    │  Admin:    /api/admin/*  (bearer secret)                  │
    │  SPA:      everything else → STATIC_DIR (index.html)      │
    └───────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Report missing secrets (logged, not fatal)
    3. Create missing tables when AUTO_CREATE_SCHEMA is on (fatal on failure)

    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse, JSONResponse

from portfolio import __version__
from portfolio.config import settings
from portfolio.database import create_schema, dispose_engine
from portfolio.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CircuitBreakerOpenError,
    ConfigurationError,
    DatabaseError,
    NotFoundError,
    PortfolioError,
    RateLimitExceededError,
    UpstreamServiceError,
    ValidationError,
)
from portfolio.middleware.logging import RequestLoggingMiddleware
from portfolio.middleware.rate_limit import RateLimitMiddleware
from portfolio.middleware.request_id import RequestIDMiddleware, request_id_var
from portfolio.routes import admin, aqicn, career, contact, education, health, skills, stations

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    When:    Called once during app startup, before anything else logs.
    Format:  2024-01-15T10:30:00 [INFO] portfolio.access: GET /api/career 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries log every operation at INFO/DEBUG
    for noisy in ("uvicorn.access", "sqlalchemy.engine", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Portfolio backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Public pages work without the secrets; only the features that
        # need them answer 500.
        logger.error("Configuration error: %s", str(e))

    if settings.auto_create_schema:
        try:
            await create_schema()
        except Exception:
            logger.critical("Failed to initialize database", exc_info=True)
            raise
        logger.info("Database schema ready")

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        logger.info("Serving SPA from %s", static_dir.resolve())
    else:
        logger.info("No SPA bundle at %s; serving the API only", static_dir)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Portfolio backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
    headers: Optional[Dict[str, str]] = None,
    request_id: Optional[str] = None,
) -> JSONResponse:
    content = {
        "error": error,
        "message": message,
        "request_id": request_id or request_id_var.get(""),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map the exception hierarchy onto HTTP responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        AuthenticationError     → 401 Unauthorized
        AuthorizationError      → 403 Forbidden
        NotFoundError           → 404 Not Found
        RateLimitExceededError  → 429 Too Many Requests
        ConfigurationError      → 500 (message names the missing feature)
        DatabaseError           → 500 (generic message)
        UpstreamServiceError    → 503 Service Unavailable
        CircuitBreakerOpenError → 503 Service Unavailable
        PortfolioError (base)   → 500
        Exception (fallback)    → 500

    Stack traces, SQL and secrets are logged server-side only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, details=exc.context)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(
            401, "unauthorized", exc.message, headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(AuthorizationError)
    async def handle_authorization_error(request: Request, exc: AuthorizationError):
        return _error_response(403, "forbidden", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(RateLimitExceededError)
    async def handle_rate_limit(request: Request, exc: RateLimitExceededError):
        return _error_response(
            429,
            "rate_limit_exceeded",
            exc.message,
            details=exc.context,
            headers={"Retry-After": str(exc.retry_after)},
        )

    @app.exception_handler(ConfigurationError)
    async def handle_configuration_error(request: Request, exc: ConfigurationError):
        logger.error("[%s] Configuration error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "not_configured", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(
            500, "server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(UpstreamServiceError)
    async def handle_upstream_error(request: Request, exc: UpstreamServiceError):
        logger.error(
            "[%s] Upstream error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        headers = {"Retry-After": str(exc.retry_after)} if exc.retry_after else None
        return _error_response(503, "upstream_unavailable", exc.message, headers=headers)

    @app.exception_handler(CircuitBreakerOpenError)
    async def handle_circuit_breaker(request: Request, exc: CircuitBreakerOpenError):
        logger.warning("[%s] Circuit breaker open: %s", request_id_var.get(""), exc.message)
        return _error_response(
            503,
            "service_unavailable",
            exc.message,
            details={"recovery_time": exc.recovery_time},
            headers={"Retry-After": str(exc.recovery_time)},
        )

    @app.exception_handler(PortfolioError)
    async def handle_portfolio_error(request: Request, exc: PortfolioError):
        logger.error("[%s] %s: %s", request_id_var.get(""), type(exc).__name__, exc.message)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs outside the middleware stack, so the ContextVar may be unset
        rid = (
            request_id_var.get("")
            or getattr(request.state, "request_id", "")
            or uuid.uuid4().hex[:8]
        )
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again later.",
            headers={"X-Request-ID": rid},
            request_id=rid,
        )


# ══════════════════════════════════════════════════════════════════════════
# Single-Page App Hosting
# ══════════════════════════════════════════════════════════════════════════

def register_spa(app: FastAPI, static_dir: Path) -> None:
    """
    Serve the built frontend for every non-API GET.

    Existing files (JS bundles, images, the resume PDF) are returned as-is;
    any other path gets index.html so client-side routing can take over.
    Unknown /api paths answer 404 in the error envelope for every method.
    Must be registered after the API routers.
    """
    root = static_dir.resolve()
    index = root / "index.html"

    @app.api_route(
        "/{full_path:path}",
        methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
    async def spa(request: Request, full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            raise NotFoundError(resource="endpoint", resource_id=f"/{full_path}")
        if request.method not in ("GET", "HEAD"):
            raise NotFoundError(resource="page")

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        if index.is_file():
            return FileResponse(index)
        raise NotFoundError(resource="page")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(static_dir: Optional[str] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        static_dir: SPA bundle location; defaults to STATIC_DIR. Not served
                    when the directory does not exist.
    """
    app = FastAPI(
        title="Portfolio API",
        description=(
            "Backend for a personal portfolio site: career history, skills, "
            "education, an air-quality map demo and a contact form."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition:
    # RequestID → RateLimit → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        # Admin auth is a bearer header, never a cookie
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for module in (career, skills, stations, education, admin, aqicn, contact, health):
        app.include_router(module.router)

    spa_dir = Path(static_dir or settings.static_dir)
    if spa_dir.is_dir():
        register_spa(app, spa_dir)

    return app


# uvicorn expects `portfolio.main:app` to be importable
app = create_app()
