"""HTTP Basic authentication plugin.

Implements the ``basic`` auth type, which sends a username and WordPress
application password as transport-level basic auth per :rfc:`7617`.

See Also:
    :class:`~wordpress_sdk.plugins.basic.plugin.BasicAuthPlugin`
    :mod:`wordpress_sdk.auth.base` for the plugin interface contract.
"""

from wordpress_sdk.plugins.basic.plugin import BasicAuthPlugin

__all__ = ["BasicAuthPlugin"]
