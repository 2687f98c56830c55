"""Abstract base class for authentication plugins.

This module defines the two foundational types of the auth subsystem:

- :class:`AuthResult` -- a plain container for the HTTP headers and the
  transport-level basic-auth pair that an auth plugin produces.
- :class:`AuthPlugin` -- the abstract base class that every authentication
  strategy must extend.

Plugins never touch the network or the session. They receive a frozen
:class:`~wordpress_sdk.models.Credentials` snapshot and return what should
be attached to the next request, so building auth is a pure function of
session state.

See Also:
    :mod:`wordpress_sdk.auth.manager` for plugin registration and merging.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from wordpress_sdk.models import Credentials


class AuthResult:
    """Container for authentication artifacts to inject into HTTP requests.

    Args:
        headers: HTTP headers to add (e.g. ``{"Authorization": "Bearer ..."}``).
        basic: ``(username, password)`` handed to httpx as transport-level
            basic auth, or ``None``.

    Example::

        result = AuthResult(headers={"Authorization": "Bearer tok123"})
        assert result.basic is None
    """

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        basic: Optional[tuple[str, str]] = None,
    ):
        self.headers = headers or {}
        self.basic = basic

    def merge(self, other: AuthResult) -> AuthResult:
        """Return a new result combining *self* with *other*; *other* wins on conflicts."""
        return AuthResult(
            headers={**self.headers, **other.headers},
            basic=other.basic if other.basic is not None else self.basic,
        )

    def __bool__(self) -> bool:
        return bool(self.headers) or self.basic is not None


class AuthPlugin(ABC):
    """Abstract base class for authentication plugins.

    Every concrete strategy must provide:

    1. An :attr:`auth_type` property returning a unique string identifier.
    2. :meth:`applies`, telling the manager whether the credentials contain
       what this strategy needs.
    3. :meth:`authenticate`, turning those credentials into an
       :class:`AuthResult`.
    """

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Return the unique auth type identifier this plugin handles."""
        ...

    @abstractmethod
    def applies(self, credentials: Credentials) -> bool:
        """Return ``True`` if *credentials* hold what this plugin needs."""
        ...

    @abstractmethod
    def authenticate(self, credentials: Credentials) -> AuthResult:
        """Build the auth artifacts for one request.

        Only called when :meth:`applies` returned ``True``.
        """
        ...
