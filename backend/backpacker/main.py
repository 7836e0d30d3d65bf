"""
FastAPI entrypoint for the Budget Backpacker API.

``create_app`` wires settings, logging, the database session factory
and the routers together; ``app`` is the default instance for::

    uvicorn backpacker.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from backpacker.core.config import Settings, settings as default_settings
from backpacker.core.errors import (
    BackpackerError, InvalidReference, MissingFields, ServerError, ValidationError,
)
from backpacker.core.logging_config import setup_logging
from backpacker.core.utils import format_error
from backpacker.db.session import build_engine, build_session_factory, init_db
from backpacker.api.router import api_router
from backpacker.schemas.common import (
    INVALID_REFERENCE_ERROR, field_errors, is_missing_error, missing_fields,
)

logger = logging.getLogger(__name__)


def _error_response(exc: BackpackerError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error(exc.code.value, exc.message, exc.errors),
        headers=headers,
    )


async def handle_app_error(request: Request, exc: BackpackerError) -> JSONResponse:
    return _error_response(exc)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map request parsing failures: missing fields, then bad references, then values."""
    errors = exc.errors()

    missing = missing_fields(errors)
    if missing:
        return _error_response(MissingFields(
            f"Missing required fields: {', '.join(missing)}.",
            errors={name: "Field is required" for name in missing},
        ))

    for error in errors:
        if error.get("type") == INVALID_REFERENCE_ERROR:
            return _error_response(InvalidReference(error.get("msg", "Invalid ID format.")))

    return _error_response(ValidationError(
        "Validation Error",
        errors=field_errors(e for e in errors if not is_missing_error(e)),
    ))


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return _error_response(ValidationError(
        "Validation Error",
        errors={"record": "Record conflicts with an existing record or is incomplete."},
    ))


async def handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error_response(ServerError("Server error while processing the request."))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error_response(ServerError("Server error while processing the request."))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its store dependencies."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.CREATE_TABLES_ON_STARTUP:
            init_db(engine)
        logger.info(f"{settings.APP_NAME} API started")
        yield
        engine.dispose()
        logger.info(f"{settings.APP_NAME} API stopped")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Backend API for saved trips and location reviews",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BackpackerError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {"message": f"{settings.APP_NAME} API is running"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
