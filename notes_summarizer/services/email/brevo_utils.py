import logging
from typing import Any, Dict, Sequence

import httpx

from notes_summarizer.schemas.email import DEFAULT_SUBJECT
from notes_summarizer.utils.config import Settings


class EmailError(Exception):
    """Base class for failures while sending an email through Brevo."""

    pass


class ConfigError(EmailError):
    """Raised when the Brevo credential or verified sender is not configured."""

    pass


class ProviderError(EmailError):
    """Raised when Brevo answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Brevo API error: {status_code} {body}")


class EmailTransportError(EmailError):
    """Raised when the request to Brevo could not be completed."""

    pass


def build_payload(
    recipients: Sequence[str],
    subject: str | None,
    text: str | None,
    settings: Settings,
) -> dict:
    return {
        "sender": {
            "name": settings.brevo_sender_name,
            "email": settings.brevo_sender_email,
        },
        "to": [{"email": email} for email in recipients],
        "subject": subject or DEFAULT_SUBJECT,
        "textContent": text or "",
    }


async def send_email(
    recipients: Sequence[str],
    subject: str | None,
    text: str | None,
    *,
    settings: Settings,
    client: httpx.AsyncClient,
) -> Dict[str, Any]:
    """
    Sends one transactional email to all recipients in a single Brevo call.

    Returns:
        Brevo's acknowledgment payload (contains `messageId`).

    Raises:
        ConfigError: If the API key or sender address is missing.
        ProviderError: If Brevo responds with a non-2xx status.
        EmailTransportError: If the request itself fails.
    """
    if not settings.brevo_api_key:
        raise ConfigError("BREVO_API_KEY missing")
    if not settings.brevo_sender_email:
        raise ConfigError(
            "BREVO_SENDER_EMAIL missing (must be a verified sender in Brevo)"
        )

    try:
        response = await client.post(
            settings.brevo_api_url,
            headers={
                "accept": "application/json",
                "content-type": "application/json",
                "api-key": settings.brevo_api_key,
            },
            json=build_payload(recipients, subject, text, settings),
        )
    except httpx.HTTPError as e:
        logging.error(f"Brevo request failed: {e}", exc_info=True)
        raise EmailTransportError(f"Brevo request failed: {e}") from e

    if not response.is_success:
        raise ProviderError(response.status_code, response.text)

    return response.json()
