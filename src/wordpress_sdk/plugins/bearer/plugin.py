"""Bearer token authentication plugin.

This module provides :class:`BearerAuthPlugin`, which implements the
``bearer`` auth type. The session's access token (set directly or stored
by :meth:`~wordpress_sdk.wordpress.WordPress.login`) is sent as an
``Authorization: Bearer <token>`` header.

No token exchange or refresh happens here; the JWT endpoint is hit once by
``login`` and the token is reused until the caller replaces it.

See Also:
    :class:`wordpress_sdk.auth.base.AuthPlugin` for the base interface.
"""

from __future__ import annotations

from wordpress_sdk.auth.base import AuthPlugin, AuthResult
from wordpress_sdk.models import Credentials


class BearerAuthPlugin(AuthPlugin):
    """Authenticate via Bearer token in the Authorization header."""

    @property
    def auth_type(self) -> str:
        return "bearer"

    def applies(self, credentials: Credentials) -> bool:
        return bool(credentials.access_token)

    def authenticate(self, credentials: Credentials) -> AuthResult:
        """Return an ``Authorization: Bearer <token>`` header.

        Args:
            credentials: Snapshot of the session's auth state. The
                ``access_token`` field must be set.

        Returns:
            An :class:`~wordpress_sdk.auth.base.AuthResult` holding the header.
        """
        return AuthResult(headers={"Authorization": f"Bearer {credentials.access_token}"})
