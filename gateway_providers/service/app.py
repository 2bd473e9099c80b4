"""FastAPI application exposing the chat gateway.

Routes
------
- ``POST /api/messages/chat``: streaming (SSE, default) or single JSON response.
- ``GET /api/health``: registry health.
- ``GET /api/providers/status``: per-backend availability and init errors.

Streaming model
---------------
The gateway writes frames into a :class:`QueueSink` from a dedicated daemon
thread; the response iterates the sink. When the client goes away the
iterator's ``finally`` cancels the sink, so later writes become no-ops while
the backend call runs to completion.

Composition
-----------
``create_app(gateway)`` wires an explicit gateway (tests pass one built from
fakes). ``get_app()`` is the uvicorn factory: it builds the registry from the
environment and fails startup when no backend can be initialized.
"""

from __future__ import annotations

import os
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse

from ..base.constants import ERROR_MODEL_NAME
from ..base.dto import ChatRequestDTO
from ..base.log_support import ISO
from ..base.streaming import QueueSink
from ..config.defaults import GATEWAY_SERVICE_CORS_DEFAULT_ORIGINS
from .gateway import ChatGateway

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def _cors_origins() -> list[str]:
    raw = os.getenv("GATEWAY_CORS_ORIGINS", GATEWAY_SERVICE_CORS_DEFAULT_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def _now_iso() -> str:
    return datetime.now(timezone.utc).strftime(ISO)


def _stream_frames(gateway: ChatGateway, body: ChatRequestDTO) -> Iterator[str]:
    sink = QueueSink()
    worker = threading.Thread(
        target=gateway.chat_stream,
        args=(body.domain_messages(), body.model, body.domain_options(), sink),
        name="gateway-stream",
        daemon=True,
    )
    worker.start()
    try:
        yield from sink
    finally:
        sink.cancel()


def create_app(gateway: ChatGateway) -> FastAPI:
    """Build the FastAPI application around ``gateway``."""
    app = FastAPI(title="Chat Gateway", version="0.1.0")
    app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/messages/chat")
    def post_chat(body: ChatRequestDTO):
        """Chat completion; SSE stream unless ``stream`` is false.

        Non-streaming status codes: 200 on success, 400 when the model cannot
        be resolved, 502 when the backend failed.
        """
        if body.stream:
            return StreamingResponse(
                _stream_frames(gateway, body),
                media_type="text/event-stream",
                headers=SSE_HEADERS,
            )
        response = gateway.chat(body.domain_messages(), body.model, body.domain_options())
        payload: Dict[str, Any] = {
            "success": not response.is_error,
            **response.to_dict(),
            "timestamp": _now_iso(),
        }
        if not response.is_error:
            status = 200
        elif response.model == ERROR_MODEL_NAME:
            status = 400
        else:
            status = 502
        return JSONResponse(content=payload, status_code=status)

    @app.get("/api/health")
    def health() -> Dict[str, Any]:
        report = gateway.health()
        return {"ok": report["is_healthy"], **report}

    @app.get("/api/providers/status")
    def providers_status() -> Dict[str, Any]:
        return gateway.status()

    return app


def get_app() -> FastAPI:
    """uvicorn factory: build the gateway from the environment.

    Raises:
        RegistryInitializationError: When no backend credentials are usable.
    """
    return create_app(ChatGateway.from_env())


__all__ = ["create_app", "get_app", "SSE_HEADERS"]
