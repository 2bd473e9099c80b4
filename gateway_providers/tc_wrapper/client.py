"""TC Wrapper adapter: REST chat backend with OpenAI-like stream lines.

Endpoints (under ``TC_BASE_URL``):
    POST /chat/stream  ``data:`` lines carrying ``choices[0].delta.content``
    POST /chat         JSON with ``content`` | ``message`` | ``choices[0].message.content``
"""

from __future__ import annotations

from ..base.identity import ProviderIdentity
from ..base.rest_style_parts import BaseRestProvider

__all__ = ["TCWrapperProvider"]


class TCWrapperProvider(BaseRestProvider):
    identity = ProviderIdentity.TC_WRAPPER
    api_key_env = "TC_API_KEY"
    base_url_env = "TC_BASE_URL"
    chat_path = "/chat"
    stream_path = "/chat/stream"
    stream_content_paths = (("choices", 0, "delta", "content"),)
    chat_content_paths = (
        ("content",),
        ("message",),
        ("choices", 0, "message", "content"),
    )
    timeout_field = "rest_timeout_seconds"
    passthrough_choices = True
