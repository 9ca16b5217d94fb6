import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env, overriding any existing ones
load_dotenv(override=True)

from notes_summarizer.utils.config import get_settings  # noqa: E402


def start():
    """Launches the Uvicorn server."""
    settings = get_settings()
    uvicorn.run("notes_summarizer.main:app", host=settings.host, port=settings.port)
