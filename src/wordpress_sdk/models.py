"""Canonical Pydantic models shared across wordpress_sdk modules.

**Configuration models** -- built by :func:`~wordpress_sdk.config.load_config`
or by hand and handed to :meth:`~wordpress_sdk.wordpress.WordPress.from_config`:
    :class:`RequestConfig` and :class:`ClientConfig`.

**Request models** -- produced per call by the dispatcher:
    :class:`HTTPMethod`, :class:`Credentials`, and :class:`Endpoint`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wordpress_sdk import __version__

DEFAULT_USER_AGENT = f"WordPress Python SDK V{__version__}"


# --- Configuration ---


class RequestConfig(BaseModel):
    """Default HTTP settings applied to every call made through a session."""

    timeout: float = Field(default=60.0, description="Overall request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    http_errors: bool = Field(
        default=True,
        description="Raise httpx.HTTPStatusError for 4xx/5xx responses",
    )


class ClientConfig(BaseModel):
    """Everything needed to build a configured :class:`~wordpress_sdk.wordpress.WordPress`.

    Example::

        ClientConfig(
            server="https://blog.example.com",
            username="editor",
            application_password="abcd efgh ijkl mnop",
        )
    """

    server: str = Field(description="Base URL of the WordPress site")
    access_token: Optional[str] = None
    username: Optional[str] = None
    application_password: Optional[str] = None
    raw_output: bool = False
    output_as_object: bool = True
    request: RequestConfig = Field(default_factory=RequestConfig)

    @field_validator("server")
    @classmethod
    def _server_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("server must not be empty")
        return value


# --- Request models ---


class HTTPMethod(str, enum.Enum):
    """HTTP verbs the dispatcher knows how to send."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


class Credentials(BaseModel):
    """Frozen snapshot of a session's auth state, consumed by auth plugins."""

    model_config = ConfigDict(frozen=True)

    access_token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


class Endpoint(BaseModel):
    """A single outgoing call: verb, path, and optional payload.

    ``data`` is either ``None``, a mapping sent as JSON (or as a query
    string for GET), or a mapping with a ``multipart`` key holding a list
    of form parts.
    """

    method: HTTPMethod
    path: str
    data: Optional[Any] = None

    @property
    def is_multipart(self) -> bool:
        return isinstance(self.data, dict) and "multipart" in self.data
