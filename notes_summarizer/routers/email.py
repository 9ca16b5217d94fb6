import logging
from typing import Any, List

import httpx
from fastapi import APIRouter, Body, Depends, status

from notes_summarizer.schemas.common import MessageResponse
from notes_summarizer.schemas.email import (
    DEFAULT_SUBJECT,
    SendEmailRequest,
    ShareRequest,
    ShareResponse,
)
from notes_summarizer.services.email.brevo_utils import send_email
from notes_summarizer.utils.config import Settings, get_settings
from notes_summarizer.utils.http_client import get_http_client
from notes_summarizer.utils.responses import error_response


SUCCESS_MESSAGE = "Email sent successfully"

router = APIRouter(tags=["email"])


def is_missing(value: Any) -> bool:
    """True for absent or falsy scalars. Empty lists and objects count as given."""
    return not isinstance(value, (list, dict)) and not value


def normalize_recipients(recipients: Any) -> List[str]:
    """
    Splits a comma-separated string into trimmed, non-empty addresses.
    Lists of strings are kept as-is; any other value yields no recipients.
    """
    if isinstance(recipients, str):
        return [r.strip() for r in recipients.split(",") if r.strip()]
    if isinstance(recipients, list) and all(isinstance(r, str) for r in recipients):
        return list(recipients)
    return []


@router.post("/share", response_model=ShareResponse)
async def share_summary(
    request: ShareRequest | None = Body(None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Emails a summary to one or more recipients."""
    if request is None:
        request = ShareRequest()
    if is_missing(request.recipients):
        return error_response(status.HTTP_400_BAD_REQUEST, "No recipients provided")

    recipients = normalize_recipients(request.recipients)
    if not recipients:
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Recipients must be a non-empty list"
        )

    try:
        result = await send_email(
            recipients,
            DEFAULT_SUBJECT,
            request.content or "",
            settings=settings,
            client=client,
        )
    except Exception as e:
        logging.error(f"Email /share error: {e}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Email failed", details=str(e)
        )

    logging.info(f"Brevo sent to {len(recipients)} recipient(s): {result}")
    return ShareResponse(message=SUCCESS_MESSAGE, brevo=result)


@router.post("/send-email", response_model=MessageResponse)
async def send_single_email(
    request: SendEmailRequest | None = Body(None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Sends an email to a single recipient given as `to`."""
    if request is None:
        request = SendEmailRequest()
    if not request.to or not request.to.strip():
        return error_response(status.HTTP_400_BAD_REQUEST, "No recipient provided")

    try:
        result = await send_email(
            [request.to.strip()],
            request.subject,
            request.text,
            settings=settings,
            client=client,
        )
    except Exception as e:
        logging.error(f"Email /send-email error: {e}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to send email",
            details=str(e),
        )

    logging.info(f"Brevo sent to {request.to.strip()}: {result}")
    return MessageResponse(message=SUCCESS_MESSAGE)
