from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

import gateway_providers.config as config_mod
from gateway_providers.base.errors import RegistryInitializationError
from gateway_providers.base.identity import ProviderIdentity
from gateway_providers.base.registry import ProviderRegistry
from gateway_providers.service import ChatGateway
from gateway_providers.service import app as app_mod


def _frames(text: str) -> List[Any]:
    out: List[Any] = []
    for block in text.split("\n\n"):
        block = block.strip()
        if not block:
            continue
        assert block.startswith("data: ")
        body = block[len("data: "):]
        out.append(body if body == "[DONE]" else json.loads(body))
    return out


@pytest.fixture()
def together(recording_provider):
    return recording_provider(ProviderIdentity.TOGETHER)


@pytest.fixture()
def client(together) -> TestClient:
    registry = ProviderRegistry()
    registry.register(ProviderIdentity.TOGETHER, together)
    return TestClient(app_mod.create_app(ChatGateway(registry)))


def test_stream_is_default_and_sse_framed(client):
    response = client.post("/api/messages/chat", json={"messages": []})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.headers["cache-control"] == "no-cache"
    assert response.headers["x-accel-buffering"] == "no"

    frames = _frames(response.text)
    assert frames[-1] == "[DONE]"
    events: List[Dict[str, Any]] = frames[:-1]
    assert events[0]["type"] == "start"
    assert events[-1]["type"] == "finish"
    chunks = "".join(e["content"] for e in events if e["type"] == "chunk")
    assert events[-1]["full_content"] == chunks
    assert events[-1]["content_length"] == len(chunks)
    assert all("timestamp" in e for e in events)


def test_stream_unknown_model(client, together):
    response = client.post("/api/messages/chat", json={"model": "unknown-model-xyz", "stream": True})
    assert response.status_code == 200
    frames = _frames(response.text)
    assert [f if isinstance(f, str) else f["type"] for f in frames] == ["error", "[DONE]"]
    assert together.calls == []


def test_non_stream_success_envelope(client, together):
    body = {
        "messages": [{"role": "user", "content": "hi"}],
        "model": "deepseek-ai/DeepSeek-V3",
        "options": {"maxTokens": 32, "temperature": 0},
        "stream": False,
    }
    response = client.post("/api/messages/chat", json=body)
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["content"] == together.content
    assert payload["model"] == "deepseek-ai/DeepSeek-V3"
    assert "timestamp" in payload
    assert "error" not in payload
    options = together.calls[0]["options"]
    assert options.max_tokens == 32
    assert options.temperature == 0


def test_non_stream_resolution_error_is_400(client):
    response = client.post("/api/messages/chat", json={"model": "unknown-model-xyz", "stream": False})
    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["model"] == "error"
    assert payload["error_code"] == "unsupported_model"
    assert payload["response_length"] == 0


def test_non_stream_backend_error_is_502(recording_provider):
    registry = ProviderRegistry()
    registry.register(ProviderIdentity.OPENAI, recording_provider(ProviderIdentity.OPENAI, fail_with=RuntimeError("down")))
    client = TestClient(app_mod.create_app(ChatGateway(registry)))
    response = client.post("/api/messages/chat", json={"model": "gpt-4o", "stream": False})
    assert response.status_code == 502
    assert response.json()["model"] == "gpt-4o"


@pytest.mark.parametrize(
    "body",
    [
        {"messages": [{"role": "tool", "content": "x"}]},
        {"options": {"temperature": 5}},
        {"messages": "not a list"},
    ],
)
def test_invalid_body_is_422(client, body):
    assert client.post("/api/messages/chat", json=body).status_code == 422


def test_health_and_status_endpoints(client):
    health = client.get("/api/health").json()
    assert health["ok"] is True
    assert health["available_providers"] == ["together"]
    status = client.get("/api/providers/status").json()
    assert status["provider_status"]["together"] is True
    assert status["provider_status"]["sql_api"] is False


def test_cors_default_origins(client):
    response = client.get("/api/health", headers={"Origin": "http://localhost:3000"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in (
        "TOGETHER_API_KEY",
        "OPENAI_API_KEY",
        "CLAUDE_API_KEY",
        "ANTHROPIC_API_KEY",
        "TC_API_KEY",
        "SQL_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setattr(config_mod, "_DOTENV_LOADED", False)


def test_get_app_fails_without_credentials(monkeypatch: pytest.MonkeyPatch, tmp_path):
    _isolate_env(monkeypatch, tmp_path)
    with pytest.raises(RegistryInitializationError):
        app_mod.get_app()


def test_get_app_builds_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    _isolate_env(monkeypatch, tmp_path)
    monkeypatch.setenv("TOGETHER_API_KEY", "tk")
    client = TestClient(app_mod.get_app())
    assert client.get("/api/health").json()["available_providers"] == ["together"]
