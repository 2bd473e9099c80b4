"""REST adapter building blocks (base class and request/line helpers)."""

from .base import BaseRestProvider
from .helpers import build_headers, build_request_body, iter_response_lines, iter_response_payloads, make_payload_translator

__all__ = [
    "BaseRestProvider",
    "build_headers",
    "build_request_body",
    "iter_response_lines",
    "iter_response_payloads",
    "make_payload_translator",
]
