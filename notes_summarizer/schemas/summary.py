from enum import Enum

from pydantic import BaseModel


DEFAULT_INSTRUCTION = "Summarize this text"


class SummarizeTextRequest(BaseModel):
    text: str | None = None
    instruction: str | None = None


class SummaryResponse(BaseModel):
    summary: str


class SummaryStatus(str, Enum):
    OK = "ok"
    NO_INPUT = "no_input"
    CONFIG_MISSING = "config_missing"
    UPSTREAM_ERROR = "upstream_error"
    UNEXPECTED_SHAPE = "unexpected_shape"
    TRANSPORT_FAILURE = "transport_failure"


class SummaryOutcome(BaseModel):
    """
    Result of a single summarization attempt.

    For OK and UPSTREAM_ERROR, `text` holds the provider's summary or error
    message. The other statuses carry no text of their own.
    """

    status: SummaryStatus
    text: str = ""

    def render(self) -> str:
        """Renders the outcome as the string returned to HTTP callers."""
        if self.status == SummaryStatus.OK:
            return self.text
        if self.status == SummaryStatus.UPSTREAM_ERROR:
            return f"HF Error: {self.text}"
        return _MESSAGES[self.status]


_MESSAGES = {
    SummaryStatus.NO_INPUT: "No input text provided.",
    SummaryStatus.CONFIG_MISSING: (
        "Error: HF_API_KEY missing in server. Add it to your .env."
    ),
    SummaryStatus.UNEXPECTED_SHAPE: "No summary generated (unexpected response).",
    SummaryStatus.TRANSPORT_FAILURE: "No summary generated (network/request failed).",
}
