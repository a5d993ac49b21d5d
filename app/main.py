"""
Blogverse content API - FastAPI Application
Serves blog entries stored as MDX files as read-only JSON.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import config
from app.content_store import ContentStore
from app.errors import ApiError
from app.formatting import cors_headers, error_envelope
from app.api.middleware import register_middleware
from app.api.routes import api_routers, health_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Validates configuration on startup. Content is read per request, so
    nothing is loaded here.
    """
    logger.info("Starting Blogverse API...")

    try:
        config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise

    store = ContentStore(config.CONTENT_PATH, config.CONTENT_EXTENSION)
    if not config.CONTENT_PATH.is_dir():
        logger.warning(f"Content directory not found, serving an empty blog: {config.CONTENT_PATH}")
    else:
        logger.info(f"Content path: {config.CONTENT_PATH} ({len(store.list_identifiers())} entries)")

    yield

    logger.info("Blogverse API stopped")


# Create FastAPI app
app = FastAPI(
    title="Blogverse API",
    description="Read-only JSON API for blog entries, tags and statistics",
    version=config.API_VERSION,
    lifespan=lifespan
)

register_middleware(app)

for router in api_routers:
    app.include_router(router, prefix=config.API_PREFIX)
app.include_router(health_router)


# Exception handlers
@app.exception_handler(ApiError)
async def api_error_handler(request, exc: ApiError):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, exc.message, exc.details),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=error_envelope(400, "Invalid request", jsonable_encoder(exc.errors())),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_envelope(500, "Internal server error"),
        headers=cors_headers(),
    )


# Entry point for running with uvicorn directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=False,
        log_level=config.LOG_LEVEL.lower()
    )
