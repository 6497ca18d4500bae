"""
FitLab Auth Backend - FastAPI Application

User registration, login and token verification backed by MongoDB.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from fitlab_auth.config import Settings, get_settings
from fitlab_auth.core.context import AppContext, build_context
from fitlab_auth.core.errors import AuthServiceError, StorageError, ValidationError
from fitlab_auth.database.databases import auth_db
from fitlab_auth.routers import auth, health

logger = logging.getLogger("fitlab_auth")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Build the application context (MongoDB client, signing secret)
      unless one was supplied to create_app
    - Create indexes; startup fails if MongoDB rejects them

    Shutdown:
    - Close the MongoDB client if this lifespan opened it
    """
    logger.info("Starting up FitLab Auth Backend...")

    owns_context = getattr(app.state, "context", None) is None
    if owns_context:
        app.state.context = build_context(app.state.settings)
    context: AppContext = app.state.context

    # Register relies on the unique email index; refuse to serve without it.
    try:
        await auth_db.create_indexes(context.db)
    except PyMongoError as e:
        logger.error("Database initialization failed: %s", e)
        if owns_context:
            context.close()
            app.state.context = None
        raise

    logger.info("Ready to accept requests")
    yield

    logger.info("Shutting down FitLab Auth Backend...")
    if owns_context:
        context.close()
        app.state.context = None
        logger.info("MongoDB connection closed")


async def auth_service_error_handler(request: Request, exc: AuthServiceError) -> JSONResponse:
    """Render workflow errors as ``{success, kind, message}``."""
    content = {"success": False, "kind": exc.kind, "message": exc.message}

    context: Optional[AppContext] = getattr(request.app.state, "context", None)
    if (
        isinstance(exc, StorageError)
        and exc.__cause__ is not None
        and context is not None
        and context.expose_errors
    ):
        content["error"] = str(exc.__cause__)

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 without echoing input values."""
    errors = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={
            "success": False,
            "kind": ValidationError.__name__,
            "message": ValidationError.default_message,
            "errors": errors,
        },
    )


def create_app(
    settings: Optional[Settings] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use, defaults to the environment
        context: Pre-built context; when given the lifespan neither builds
            nor closes one

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="FitLab Auth API",
        description="""
## FitLab Authentication API

### Endpoints
- `POST /api/auth/register`: create an account and receive a token
- `POST /api/auth/login`: exchange email and password for a token
- `GET /api/auth/verify`: resolve a token to its user

### Authentication
Send the token as a bearer credential:
```
Authorization: Bearer <token>
```
Tokens expire after 7 days.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Method and path only; bodies carry passwords.
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    app.add_exception_handler(AuthServiceError, auth_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(health.router)
    app.include_router(auth.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with service information."""
        return {
            "message": "FitLab Server is running!",
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app
