import asyncio

from httpx import ASGITransport, AsyncClient

from chat_assistant.core.config import get_settings
from chat_assistant.main import create_app


async def _get_health():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(f"{get_settings().api_prefix}/health")


def test_health_ok():
    response = asyncio.run(_get_health())
    assert response.status_code == 200
    body = response.json()
    assert body.get("status") == "ok"
    assert "service" in body
    assert "environment" in body
    assert body.get("provider") in ("gemini", "local")


def test_health_does_not_leak_api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "super-secret-key")
    response = asyncio.run(_get_health())
    assert response.status_code == 200
    assert "super-secret-key" not in response.text
