"""Bearer token authentication plugin.

Implements the ``bearer`` auth type, which sends the session's access token
as an ``Authorization: Bearer`` header.

See Also:
    :class:`~wordpress_sdk.plugins.bearer.plugin.BearerAuthPlugin`
    :mod:`wordpress_sdk.auth.base` for the plugin interface contract.
"""

from wordpress_sdk.plugins.bearer.plugin import BearerAuthPlugin

__all__ = ["BearerAuthPlugin"]
