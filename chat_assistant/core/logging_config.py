import logging
import re
import sys
from typing import Optional

from chat_assistant.core.config import get_settings


_configured = False

# Gemini authenticates with a ?key= query parameter, so request URLs carry the secret.
_API_KEY_PARAM = re.compile(r"([?&]key=)[^&\s\"']+")


def redact_api_key(text: str) -> str:
    """Mask the value of any ``key=`` query parameter in ``text``."""
    return _API_KEY_PARAM.sub(r"\1***", text)


class ApiKeyRedactingFilter(logging.Filter):
    """Rewrites log records so Gemini request URLs never reach a handler with their key."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def configure_logging(level_override: Optional[str] = None) -> None:
    """
    Configure logging for the service.

    This is idempotent and safe to call multiple times.
    """
    global _configured

    if _configured:
        return

    settings = get_settings()
    log_level = (level_override or settings.log_level).upper()

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )

    redacting_filter = ApiKeyRedactingFilter()
    for handler in logging.getLogger().handlers:
        handler.addFilter(redacting_filter)

    # httpx logs one INFO line per request; the chat service logs its own.
    for noisy_logger in ("uvicorn", "uvicorn.access", "httpx", "httpcore"):
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    _configured = True
