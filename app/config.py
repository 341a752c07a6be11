"""
Configuration settings for the Truth Engine profile viewer.

Values come from the environment (or a local .env file). The handle selects
which remote profile is shown; without it the viewer renders the
"Profile Unavailable" panel instead of failing.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# Environment variable names
HANDLE_ENV_VAR = "TRUTH_ENGINE_HANDLE"
API_URL_ENV_VAR = "TRUTH_ENGINE_API_URL"

# Truth Engine origin used when TRUTH_ENGINE_API_URL is not set
DEFAULT_API_BASE = "https://ryanguidry.com"

# Hosting platforms may serve a cached page for this long before refetching
REVALIDATE_SECONDS = 60

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_handle() -> str | None:
    """Return the configured profile handle, or None when unset or empty."""
    return os.getenv(HANDLE_ENV_VAR) or None


def get_api_base() -> str:
    """Return the Truth Engine API origin."""
    return os.getenv(API_URL_ENV_VAR) or DEFAULT_API_BASE


def get_server_address() -> tuple[str, int]:
    host = os.getenv("VIEWER_HOST", DEFAULT_HOST)
    raw_port = os.getenv("VIEWER_PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"VIEWER_PORT must be an integer port number, got {raw_port!r}.") from None
    return host, port


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for an entry point (CLI, server, GUI)."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
