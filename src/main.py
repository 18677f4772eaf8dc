"""Main application entry point.

Runs the NiceGUI chat interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Serves the chat page on HOST:PORT (default 0.0.0.0:8080).
    """
    from nicegui import ui
    from pydantic import ValidationError

    from src.agent.config import get_gemini_config
    from src.ui.chat_page import APP_TITLE, chat_page  # noqa: F401 - Registers the page

    try:
        config = get_gemini_config()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise SystemExit(1) from e

    if not config.has_api_key:
        logger.warning("GEMINI_API_KEY is not set; requests will fail until it is configured")

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Starting {APP_TITLE} on http://{host}:{port} using {config.model_name}")

    ui.run(
        title=APP_TITLE,
        host=host,
        port=port,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chat-secret"),
    )


if __name__ == "__main__":
    main()
