"""wordpress_sdk -- a synchronous client for the WordPress REST API.

The SDK wraps :mod:`httpx` with bearer-token and application-password
authentication, JSON marshaling, typed errors for HTTP failures, and a
one-time fallback to ``index.php/`` URLs for sites without pretty
permalinks.

Typical usage::

    from wordpress_sdk import WordPress

    with WordPress("https://blog.example.com") as wp:
        wp.login("editor@example.com", "secret")
        tags = wp.tag().list({"per_page": 50})

Modules:
    wordpress: The :class:`WordPress` entry point.
    session: Mutable connection state shared by the dispatcher and facades.
    client: Request dispatcher, error classifier, and URL fallback.
    resources: CRUD accessors for REST collections.
    auth: Header builder plugins.
    models: Pydantic models for configuration and requests.
    config: Configuration loading and credential resolution.
    exceptions: Exception hierarchy.
    output: stderr diagnostics with Rich support.
"""

__version__ = "1.4.0"

from wordpress_sdk.wordpress import WordPress  # noqa: E402

__all__ = ["WordPress", "__version__"]
