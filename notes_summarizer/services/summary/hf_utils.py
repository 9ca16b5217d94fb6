import logging
from typing import Any

import httpx

from notes_summarizer.schemas.summary import (
    DEFAULT_INSTRUCTION,
    SummaryOutcome,
    SummaryStatus,
)
from notes_summarizer.utils.config import Settings


def build_payload(text: str, instruction: str, settings: Settings) -> dict:
    """Builds the Hugging Face Inference request body."""
    return {
        "inputs": f"{instruction}\n\n{text}",
        "parameters": {
            "max_length": settings.hf_max_length,
            "min_length": settings.hf_min_length,
        },
    }


def parse_response(data: Any) -> SummaryOutcome:
    """Maps a decoded provider response onto a summary outcome."""
    if isinstance(data, list) and data:
        first = data[0]
        if isinstance(first, dict) and first.get("summary_text"):
            return SummaryOutcome(
                status=SummaryStatus.OK, text=str(first["summary_text"])
            )
    if isinstance(data, dict) and data.get("error"):
        # e.g. "Model facebook/bart-large-cnn is currently loading"
        return SummaryOutcome(
            status=SummaryStatus.UPSTREAM_ERROR, text=str(data["error"])
        )
    return SummaryOutcome(status=SummaryStatus.UNEXPECTED_SHAPE)


async def request_summary(
    text: str | None,
    instruction: str = DEFAULT_INSTRUCTION,
    *,
    settings: Settings,
    client: httpx.AsyncClient,
) -> SummaryOutcome:
    """
    Calls the summarization provider once and returns a tagged outcome.

    Never raises: missing input, missing credentials, provider errors and
    transport failures are all reported through the outcome status.
    """
    if not text or not text.strip():
        return SummaryOutcome(status=SummaryStatus.NO_INPUT)

    if not settings.hf_api_key:
        logging.warning("HF_API_KEY is not set. Cannot generate summary.")
        return SummaryOutcome(status=SummaryStatus.CONFIG_MISSING)

    try:
        response = await client.post(
            settings.hf_api_url,
            headers={
                "Authorization": f"Bearer {settings.hf_api_key}",
                "Content-Type": "application/json",
            },
            json=build_payload(text, instruction, settings),
        )
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logging.error(f"HF request failed: {e}", exc_info=True)
        return SummaryOutcome(status=SummaryStatus.TRANSPORT_FAILURE)

    outcome = parse_response(data)
    if outcome.status != SummaryStatus.OK:
        logging.warning(
            f"HF returned no summary (status {response.status_code}): {outcome.status.value}"
        )
    return outcome


async def generate_summary(
    text: str | None,
    instruction: str = DEFAULT_INSTRUCTION,
    *,
    settings: Settings,
    client: httpx.AsyncClient,
) -> str:
    """Returns the summary text, or a human-readable message on failure."""
    outcome = await request_summary(
        text, instruction, settings=settings, client=client
    )
    return outcome.render()
