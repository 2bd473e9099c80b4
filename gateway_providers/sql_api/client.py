"""Text-to-SQL adapter: REST backend whose output is a SQL statement.

Endpoints (under ``SQL_BASE_URL``):
    POST /text-to-sql/stream  ``data:`` lines with ``sql`` | ``content`` | ``delta``
    POST /text-to-sql         JSON with ``sql`` | ``content`` | ``query``

The generated statement is always wrapped as a single assistant choice.
SQL generation is slow, so the longer SQL timeout applies.
"""

from __future__ import annotations

from ..base.identity import ProviderIdentity
from ..base.rest_style_parts import BaseRestProvider

__all__ = ["SQLAPIProvider"]


class SQLAPIProvider(BaseRestProvider):
    identity = ProviderIdentity.SQL_API
    api_key_env = "SQL_API_KEY"
    base_url_env = "SQL_BASE_URL"
    chat_path = "/text-to-sql"
    stream_path = "/text-to-sql/stream"
    stream_content_paths = (("sql",), ("content",), ("delta",))
    chat_content_paths = (("sql",), ("content",), ("query",))
    timeout_field = "sql_timeout_seconds"
    passthrough_choices = False
