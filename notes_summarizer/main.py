from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from contextlib import asynccontextmanager

from notes_summarizer.utils.config import get_settings
from notes_summarizer.utils.http_client import create_http_client
from notes_summarizer.utils.logging import setup_logging
from notes_summarizer.utils.responses import error_response
from notes_summarizer.routers import email, frontend, summary

import logging

# Load configuration
settings = get_settings()

# Configure logging
setup_logging(settings.log_level, settings.log_format)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    # Startup
    logging.info(
        f"🚀 Notes Summarizer starting on http://{settings.host}:{settings.port}"
    )
    logging.info(f"Environment: {settings.app_env}")
    logging.info(
        f"HF_API_KEY configured: {bool(settings.hf_api_key)}, "
        f"BREVO_API_KEY configured: {bool(settings.brevo_api_key)}, "
        f"BREVO_SENDER_EMAIL configured: {bool(settings.brevo_sender_email)}"
    )
    app.state.http_client = create_http_client(settings)
    yield
    # Shutdown
    await app.state.http_client.aclose()


app = FastAPI(title="Notes Summarizer", lifespan=lifespan)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all failing requests."""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logging.error(
                f"Request failed: {request.method} {request.url.path} - {type(e).__name__}: {e}"
            )
            raise


app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health endpoint
@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}


def format_validation_errors(errors) -> str:
    """Renders validation errors as `loc: msg` pairs, without source locations."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in errors
    )


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.warning(
        f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}"
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request body",
        details=format_validation_errors(exc.errors()),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logging.error(
        f"Unhandled exception for {request.method} {request.url.path}: {type(exc).__name__}",
        exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
    )


app.include_router(summary.router)
app.include_router(email.router)
# Catch-all GET route, must be registered last
app.include_router(frontend.router)
