"""HTTP Basic authentication plugin for WordPress application passwords.

This module provides :class:`BasicAuthPlugin`, which implements the
``basic`` auth type. The username and application password are not turned
into a header here: they are returned as a pair and handed to httpx as
transport-level auth, which encodes them per :rfc:`7617`.

See Also:
    :class:`wordpress_sdk.auth.base.AuthPlugin` for the base interface.
"""

from __future__ import annotations

from wordpress_sdk.auth.base import AuthPlugin, AuthResult
from wordpress_sdk.models import Credentials


class BasicAuthPlugin(AuthPlugin):
    """Authenticate via HTTP Basic with a username and application password.

    Both values must be non-empty; a username without a password (or the
    reverse) sends no credentials at all.
    """

    @property
    def auth_type(self) -> str:
        return "basic"

    def applies(self, credentials: Credentials) -> bool:
        return bool(credentials.username) and bool(credentials.password)

    def authenticate(self, credentials: Credentials) -> AuthResult:
        """Return the ``(username, password)`` pair as transport-level auth.

        Args:
            credentials: Snapshot of the session's auth state with both
                ``username`` and ``password`` set.

        Returns:
            An :class:`~wordpress_sdk.auth.base.AuthResult` whose ``basic``
            field holds the pair.
        """
        assert credentials.username is not None and credentials.password is not None
        return AuthResult(basic=(credentials.username, credentials.password))
