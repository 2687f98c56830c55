"""Exception hierarchy for wordpress_sdk.

All SDK exceptions inherit from :class:`WordPressError`, which carries the
HTTP ``status_code`` and, where the server sent one, the
:class:`httpx.Response` so callers can inspect the body.

Subclass hierarchy::

    WordPressError
    +-- ServerError         (5xx, or an unexpected handled status)
    +-- UnauthorizedError   (401, 403)
    +-- NotFoundError       (404)
    +-- ValidationError     (400, 422)
    +-- DecodeError         (response body is not valid JSON)
    +-- ConnectionError_    (timeout, DNS resolution, connection refused)
    +-- ConfigError         (invalid configuration or credential source)

Client errors outside this table (e.g. 405, 409, 429) are not wrapped: the
original :class:`httpx.HTTPStatusError` reaches the caller unchanged.
"""

from __future__ import annotations

from typing import Optional

import httpx


class WordPressError(Exception):
    """Base exception for all wordpress_sdk errors.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code that triggered the error, if any.
        response: The server response, when it is available for inspection.
    """

    def __init__(
        self,
        message: str = "",
        status_code: Optional[int] = None,
        response: Optional[httpx.Response] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    @property
    def body(self) -> Optional[str]:
        """Raw text of the attached response, or ``None`` if there is none."""
        if self.response is None:
            return None
        return self.response.text


class ServerError(WordPressError):
    """Raised when the API returns a 5xx error or an unexpected status code."""


class UnauthorizedError(WordPressError):
    """Raised when the API rejects the request's credentials (401 / 403)."""


class NotFoundError(WordPressError):
    """Raised when the API returns HTTP 404 (resource not found)."""


class ValidationError(WordPressError):
    """Raised when the API rejects the request payload (400 / 422).

    The response is always attached; WordPress puts the offending
    parameters under ``data.params`` in the JSON body.
    """


class DecodeError(WordPressError):
    """Raised when a successful response body cannot be decoded as JSON."""


class ConnectionError_(WordPressError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """


class ConfigError(WordPressError):
    """Raised for configuration problems (invalid JSON, bad credential sources)."""
