"""Classify HTTP failures into SDK errors or a retry decision.

:func:`classify_failure` never raises. It looks at an
:class:`httpx.HTTPStatusError` and returns what the dispatcher should do:

* :class:`RetryOnce` -- the fallback URL was adopted, reissue the call;
* :class:`Raise` -- raise the carried exception.

Mapping when no retry is available:

=========  ============================================================
Status     Result
=========  ============================================================
5xx        :class:`~wordpress_sdk.exceptions.ServerError` (message, code, response)
401        :class:`~wordpress_sdk.exceptions.UnauthorizedError` with the response
403        :class:`~wordpress_sdk.exceptions.UnauthorizedError` with the code only
404        :class:`~wordpress_sdk.exceptions.NotFoundError`
400, 422   :class:`~wordpress_sdk.exceptions.ValidationError` with the response
other 4xx  the original :class:`httpx.HTTPStatusError`, unchanged
=========  ============================================================

A 401 keeps the WordPress error body; a 403 reports only its status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import httpx

from wordpress_sdk.exceptions import (
    NotFoundError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)


@dataclass(frozen=True)
class RetryOnce:
    """Reissue the identical call once against the rewritten base URL."""


@dataclass(frozen=True)
class Raise:
    """Stop and raise :attr:`error`."""

    error: Exception


Decision = Union[RetryOnce, Raise]


def classify_failure(exc: httpx.HTTPStatusError, retry_available: bool) -> Decision:
    """Decide how to handle a 4xx/5xx raised by the transport layer.

    Args:
        exc: The status error raised for the response.
        retry_available: Whether the fallback strategy just enabled a retry.

    Returns:
        A :class:`RetryOnce` or :class:`Raise` decision.
    """
    if retry_available:
        return RetryOnce()

    response = exc.response
    status = response.status_code

    if status >= 500:
        return Raise(ServerError(str(exc), status_code=status, response=response))
    if status == 401:
        return Raise(UnauthorizedError(str(exc), status_code=status, response=response))
    if status == 403:
        return Raise(UnauthorizedError(str(exc), status_code=status))
    if status == 404:
        return Raise(NotFoundError(str(exc), status_code=status))
    if status in (400, 422):
        return Raise(ValidationError(str(exc), status_code=status, response=response))
    return Raise(exc)


def classify_response(response: httpx.Response) -> Exception:
    """Map a handled, non-accepted response to an SDK error.

    Used when the transport did not raise (``http_errors`` disabled, or a
    status outside 4xx/5xx such as 204 or 302). A handled 401 carries no
    body; every other status becomes a :class:`ServerError` with an empty
    message.
    """
    if response.status_code == 401:
        return UnauthorizedError(status_code=401)
    return ServerError("", status_code=response.status_code)
