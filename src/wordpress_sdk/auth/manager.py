"""Auth manager -- registry for auth plugins and the per-request header builder.

The :class:`AuthManager` maintains a mapping from auth-type strings
(``"bearer"``, ``"basic"``) to :class:`~wordpress_sdk.auth.base.AuthPlugin`
instances. Unlike a profile-driven setup where one strategy is chosen, a
WordPress session may hold a bearer token *and* an application password at
the same time, so :meth:`AuthManager.build` runs every plugin that applies
and merges their results.

See Also:
    :class:`~wordpress_sdk.client.sync_client.SyncClient` -- consumes the
    :class:`~wordpress_sdk.auth.base.AuthResult` produced here.
"""

from __future__ import annotations

from wordpress_sdk.auth.base import AuthPlugin, AuthResult
from wordpress_sdk.exceptions import ConfigError
from wordpress_sdk.models import Credentials


class AuthManager:
    """Registry of authentication plugins and builder of per-request auth.

    Plugins run in registration order; a later plugin's headers win over an
    earlier plugin's on conflicting names.

    Example::

        manager = AuthManager()
        manager.register(BearerAuthPlugin())
        result = manager.build(Credentials(access_token="tok"))
    """

    def __init__(self) -> None:
        self._plugins: dict[str, AuthPlugin] = {}

    def register(self, plugin: AuthPlugin) -> None:
        """Register a plugin, replacing any plugin with the same ``auth_type``."""
        self._plugins[plugin.auth_type] = plugin

    def get_plugin(self, auth_type: str) -> AuthPlugin:
        """Retrieve a registered plugin by its auth type identifier.

        Raises:
            ConfigError: If no plugin is registered for *auth_type*.
        """
        plugin = self._plugins.get(auth_type)
        if plugin is None:
            available = ", ".join(sorted(self._plugins)) or "(none)"
            raise ConfigError(
                f"No auth plugin registered for type '{auth_type}'. "
                f"Available types: {available}"
            )
        return plugin

    def build(self, credentials: Credentials) -> AuthResult:
        """Build the auth artifacts for one request.

        Args:
            credentials: Snapshot of the session's auth state.

        Returns:
            The merged :class:`~wordpress_sdk.auth.base.AuthResult` of every
            plugin whose :meth:`~AuthPlugin.applies` returned ``True``; an
            empty result when none did.
        """
        result = AuthResult()
        for plugin in self._plugins.values():
            if plugin.applies(credentials):
                result = result.merge(plugin.authenticate(credentials))
        return result

    def list_types(self) -> list[str]:
        """Return the identifiers of all registered auth types, sorted."""
        return sorted(self._plugins.keys())


def create_default_manager() -> AuthManager:
    """Create an :class:`AuthManager` with the built-in plugins.

    - ``bearer`` -- JWT / bearer token header.
    - ``basic`` -- username + application password.
    """
    from wordpress_sdk.plugins.basic import BasicAuthPlugin
    from wordpress_sdk.plugins.bearer import BearerAuthPlugin

    manager = AuthManager()
    manager.register(BearerAuthPlugin())
    manager.register(BasicAuthPlugin())
    return manager
