from pathlib import Path

from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse

from notes_summarizer.utils.config import Settings, get_settings
from notes_summarizer.utils.responses import error_response


router = APIRouter(tags=["frontend"])


def resolve_static_file(static_dir: str, path: str) -> Path | None:
    """
    Returns the file under `static_dir` named by `path`, falling back to
    `index.html`. Paths resolving outside `static_dir` are ignored.
    """
    root = Path(static_dir).resolve()
    if path and "\x00" not in path:
        try:
            candidate = (root / path).resolve()
        except (OSError, ValueError):
            candidate = None
        if candidate and candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    index = root / "index.html"
    if index.is_file():
        return index
    return None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, settings: Settings = Depends(get_settings)):
    """Serves the static frontend, with index.html for any unknown path."""
    file_path = resolve_static_file(settings.static_dir, full_path)
    if file_path is None:
        return error_response(status.HTTP_404_NOT_FOUND, "Not found")
    return FileResponse(file_path)
