"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.api import auth
from backend.config import get_settings
from backend.errors import ApiError
from backend.log_config import REQUEST_LOGGER, configure_logging, iso_timestamp
from backend.schemas.auth import MessageResponse
from backend.services.user_store import UserStore

settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)
request_logger = logging.getLogger(REQUEST_LOGGER)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    app.state.user_store = UserStore()
    logger.info(f"Backend running on port {settings.port}")
    logger.info(f"API base URL: http://localhost:{settings.port}/api")
    yield


app = FastAPI(
    title="Open Auth Backend",
    description="Signup, login and a token-gated home endpoint over an in-memory user list",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request as ``[timestamp] METHOD url``."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    request_logger.info(f"[{iso_timestamp()}] {request.method} {url}")
    return await call_next(request)


# Outermost layer: preflight requests never reach the request logger
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Invalid body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


# Register routers
app.include_router(auth.router)


@app.get("/api/ping", response_model=MessageResponse)
async def ping():
    """Health check endpoint."""
    return {"message": "pong"}


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
