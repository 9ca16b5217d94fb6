from typing import Any, Dict

from pydantic import BaseModel


DEFAULT_SUBJECT = "Meeting Summary"


class ShareRequest(BaseModel):
    """
    Body of a share request. `recipients` may be a comma-separated string
    or a list of addresses; any other JSON value is rejected by the handler.
    """

    recipients: Any = None
    content: str | None = None


class ShareResponse(BaseModel):
    message: str
    brevo: Dict[str, Any]


class SendEmailRequest(BaseModel):
    to: str | None = None
    subject: str | None = None
    text: str | None = None
