"""HTTP dispatch for wordpress_sdk.

Classes and functions:
    :class:`SyncClient` -- the request dispatcher every call goes through.
    :class:`FrontControllerFallback` -- one-time ``index.php/`` URL rewrite.
    :func:`classify_failure` -- maps HTTP failures to errors or a retry.

Example::

    from wordpress_sdk.client import SyncClient
    from wordpress_sdk.session import Session

    client = SyncClient(Session("https://blog.example.com"))
    posts = client.get("/wp-json/wp/v2/posts")
"""

from wordpress_sdk.client.errors import Raise, RetryOnce, classify_failure
from wordpress_sdk.client.fallback import FrontControllerFallback
from wordpress_sdk.client.sync_client import SyncClient

__all__ = [
    "SyncClient",
    "FrontControllerFallback",
    "Raise",
    "RetryOnce",
    "classify_failure",
]
