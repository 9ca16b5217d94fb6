from fastapi.responses import JSONResponse

from notes_summarizer.schemas.common import ErrorResponse


def error_response(
    status_code: int, message: str, details: str | None = None
) -> JSONResponse:
    """Builds an `{error[, details]}` JSON response."""
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )
