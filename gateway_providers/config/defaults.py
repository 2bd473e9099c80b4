"""gateway_providers.config.defaults
=================================

Central place for small, stable default values used across the gateway
package and the thin service layer. Values can be overridden via environment
variables where noted, but provide sensible fallbacks for local development
and tests.

This module intentionally avoids importing from other gateway packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Service / HTTP layer ----

# Comma-separated list of allowed origins for the dev server.
GATEWAY_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"
GATEWAY_SERVICE_DEFAULT_HOST = "127.0.0.1"
GATEWAY_SERVICE_DEFAULT_PORT = 3001


# ---- Routing ----

# Model used when a request omits one.
DEFAULT_MODEL = "deepseek-ai/DeepSeek-V3"


# ---- Prompts ----

DEFAULT_USER_PROMPT = "What are the top 3 things to do in New York?"
DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Provide detailed, comprehensive, and thorough responses. "
    "When answering questions, be extensive in your explanations and include relevant "
    "examples, context, and elaboration."
)
# Used by the messages family when the conversation carries no system message.
GENERIC_SYSTEM_PROMPT = "You are a helpful assistant."


# ---- Backend endpoints ----

TOGETHER_DEFAULT_BASE_URL = "https://api.together.xyz/v1"
# ``None`` lets the OpenAI SDK use its own default endpoint.
OPENAI_DEFAULT_BASE_URL = None


# ---- Sampling defaults per backend ----

OPENAI_DEFAULT_OPTIONS = {
    "max_tokens": 4096,
    "temperature": 0.7,
    "top_p": 0.9,
    "presence_penalty": 0,
    "frequency_penalty": 0,
}

TOGETHER_DEFAULT_OPTIONS = {
    "max_tokens": 4096,
    "temperature": 0.7,
    "top_p": 0.9,
    "top_k": 50,
    "repetition_penalty": 1.1,
    "min_p": 0.01,
    "presence_penalty": 0.1,
    "frequency_penalty": 0.1,
}

CLAUDE_DEFAULT_OPTIONS = {
    "max_tokens": 4096,
    "temperature": 0.7,
    "top_p": 0.9,
}


# ---- Timeouts (seconds) ----

REST_CHAT_DEFAULT_TIMEOUT_SECONDS = 30.0
REST_SQL_DEFAULT_TIMEOUT_SECONDS = 60.0


__all__ = [
    "GATEWAY_SERVICE_CORS_DEFAULT_ORIGINS",
    "GATEWAY_SERVICE_DEFAULT_HOST",
    "GATEWAY_SERVICE_DEFAULT_PORT",
    "DEFAULT_MODEL",
    "DEFAULT_USER_PROMPT",
    "DEFAULT_SYSTEM_PROMPT",
    "GENERIC_SYSTEM_PROMPT",
    "TOGETHER_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_OPTIONS",
    "TOGETHER_DEFAULT_OPTIONS",
    "CLAUDE_DEFAULT_OPTIONS",
    "REST_CHAT_DEFAULT_TIMEOUT_SECONDS",
    "REST_SQL_DEFAULT_TIMEOUT_SECONDS",
]
