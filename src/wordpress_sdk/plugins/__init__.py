"""Built-in authentication strategies.

* :class:`~wordpress_sdk.plugins.bearer.BearerAuthPlugin` -- JWT / bearer token.
* :class:`~wordpress_sdk.plugins.basic.BasicAuthPlugin` -- username and
  application password.

Both are registered by :func:`wordpress_sdk.auth.create_default_manager`.
"""
