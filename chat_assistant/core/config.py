from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (parent of chat_assistant/) for .env loading
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

LOCAL_PROVIDER = "local"
GEMINI_PROVIDER = "gemini"


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables and .env.

    Variable names are unprefixed (CURRENT_MODEL, GEMINI_API_KEY, ...).
    """

    # Core app settings
    app_name: str = Field(default="chat_assistant")
    environment: str = Field(default="development")  # development | staging | production

    # HTTP server
    api_prefix: str = Field(default="/assistant/api")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)

    # Observability
    log_level: str = Field(default="INFO")

    # Backend selection: "local" selects the local server, anything else Gemini
    current_model: str = Field(
        default=GEMINI_PROVIDER,
        description="Chat backend selector. 'local' or anything else for Gemini.",
    )

    # Gemini (cloud)
    gemini_api_key: Optional[str] = Field(
        default=None,
        description="Gemini API key. Required unless CURRENT_MODEL=local.",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash-latest",
        description="Gemini model name used in the generateContent URL.",
    )
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Gemini API host.",
    )
    gemini_timeout_seconds: float = Field(default=30.0)

    # Local inference server (Ollama /api/generate compatible)
    local_llm_url: Optional[str] = Field(
        default=None,
        description="Full URL of the local generate endpoint. Required when CURRENT_MODEL=local.",
    )
    local_model: str = Field(
        default="llama3",
        description="Model name sent to the local server.",
    )
    local_timeout_seconds: float = Field(default=30.0)

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def provider_name(self) -> str:
        """Name of the backend the current configuration selects."""
        return LOCAL_PROVIDER if self.current_model == LOCAL_PROVIDER else GEMINI_PROVIDER


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached settings instance for process-level concerns.
    """
    return Settings()


def load_settings() -> Settings:
    """
    Read configuration afresh. Used per chat request so that backend
    settings changes apply without a restart.
    """
    return Settings()
