"""Plugin-based header builder for wordpress_sdk.

The main entry points are:

- :class:`AuthPlugin` -- abstract base class for auth strategies.
- :class:`AuthManager` -- registry that runs every applicable plugin
  against a :class:`~wordpress_sdk.models.Credentials` snapshot.
- :func:`create_default_manager` -- factory pre-loaded with the bearer and
  basic plugins.

Typical usage::

    from wordpress_sdk.auth import create_default_manager

    manager = create_default_manager()
    auth = manager.build(session.credentials)
    # auth.headers and auth.basic are ready to attach to a request.
"""

from wordpress_sdk.auth.base import AuthPlugin, AuthResult
from wordpress_sdk.auth.manager import AuthManager, create_default_manager

__all__ = [
    "AuthPlugin",
    "AuthResult",
    "AuthManager",
    "create_default_manager",
]
