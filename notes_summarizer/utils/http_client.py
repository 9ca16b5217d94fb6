import httpx
from fastapi import Request

from notes_summarizer.utils.config import Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Builds the shared outbound client used by both provider adapters."""
    return httpx.AsyncClient(timeout=settings.request_timeout_seconds)


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
