import pytest

from chat_assistant.core.config import Settings
from helpers import make_settings


@pytest.fixture
def gemini_settings() -> Settings:
    return make_settings(current_model="gemini", gemini_api_key="test-key")


@pytest.fixture
def local_settings() -> Settings:
    return make_settings(current_model="local", local_llm_url="http://localhost:11434/api/generate")
