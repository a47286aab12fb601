"""
Redis Test Drive Application Entry Point

FastAPI application main entry, including router registration and application configuration.
"""

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRouter

from redis_test_drive import __version__
from redis_test_drive.api import geo_router, set_router, strings_router
from redis_test_drive.api.responses import error_response
from redis_test_drive.common.errors import AppError, RequestValidationFailed, UnexpectedError
from redis_test_drive.config import get_settings
from redis_test_drive.db.redis import close_redis, init_redis
from redis_test_drive.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Initialize logging configuration
setup_logging()


# Application Lifecycle Management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application Lifecycle Management

    Open the per-namespace Redis clients on startup, close them on shutdown.
    """
    # Startup
    app.state.redis = await init_redis(get_settings())
    yield
    # Shutdown
    await close_redis(app.state.redis)


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["Content-Type"],
)


# Global Exception Handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Handle application custom exceptions"""
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors

    Model-level failures (missing fields, empty strings, out of range coordinates) map to 400.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))

    logger.warning("Validation error on %s: %s", request.url.path, errors)
    return error_response(RequestValidationFailed(errors=errors))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions

    The raw exception message is returned to the client.
    """
    logger.error(
        "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
        str(exc),
        request.url.path,
        traceback.format_exc(),
    )
    return error_response(UnexpectedError(f"Unexpected error: {exc}"))


# Health Check Endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health Check

    Used for service liveness probe.
    """
    return {"status": "healthy"}


@app.get("/", tags=["Health"])
async def root():
    """Basic service information"""
    return {
        "name": settings.APP_NAME,
        "version": __version__,
        "description": settings.APP_DESCRIPTION,
    }


# Register Namespace Routers
api_router = APIRouter(prefix=settings.API_PREFIX)
api_router.include_router(strings_router)
api_router.include_router(set_router)
api_router.include_router(geo_router)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "redis_test_drive.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
