import logging

import httpx
from fastapi import APIRouter, Body, Depends, File, UploadFile, status

from notes_summarizer.schemas.summary import (
    DEFAULT_INSTRUCTION,
    SummarizeTextRequest,
    SummaryResponse,
)
from notes_summarizer.services.summary.hf_utils import generate_summary
from notes_summarizer.utils.config import Settings, get_settings
from notes_summarizer.utils.http_client import get_http_client
from notes_summarizer.utils.responses import error_response


router = APIRouter(tags=["summary"])


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_file(
    file: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Summarizes an uploaded transcript file."""
    try:
        transcript = ""
        if file is not None:
            raw = await file.read()
            transcript = raw.decode("utf-8", errors="replace")
        summary = await generate_summary(transcript, settings=settings, client=client)
        return SummaryResponse(summary=summary)
    except Exception as e:
        logging.error(f"Summarize file error: {e}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Summarization failed"
        )


@router.post("/summarize-text", response_model=SummaryResponse)
async def summarize_text(
    request: SummarizeTextRequest | None = Body(None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Summarizes text typed into the frontend."""
    if request is None:
        request = SummarizeTextRequest()
    if not request.text:
        return error_response(status.HTTP_400_BAD_REQUEST, "No text provided")

    try:
        summary = await generate_summary(
            request.text,
            request.instruction or DEFAULT_INSTRUCTION,
            settings=settings,
            client=client,
        )
        return SummaryResponse(summary=summary)
    except Exception as e:
        logging.error(f"Summarize text error: {e}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to summarize text"
        )
