"""CRUD accessors for WordPress REST collections.

Every collection (tags, posts, users, any custom post type) exposes the
same five operations, so a single :class:`Resource` bound to a collection
path covers them all:

============  ================================
Method        Request
============  ================================
``list``      ``GET    <path>`` (query from *data*)
``create``    ``POST   <path>``
``get``       ``GET    <path>/<id>``
``update``    ``POST   <path>/<id>``
``delete``    ``DELETE <path>/<id>``
============  ================================
"""

from __future__ import annotations

from typing import Any, Optional

from wordpress_sdk.client.sync_client import SyncClient

API_PREFIX = "/wp-json/wp/v2"


class Resource:
    """A REST collection such as ``/wp-json/wp/v2/tags``.

    Args:
        client: Dispatcher used for every call.
        path: Collection path relative to the site root.
    """

    def __init__(self, client: SyncClient, path: str) -> None:
        self.client = client
        self.path = "/" + path.strip("/")

    @classmethod
    def for_type(cls, client: SyncClient, name: str) -> Resource:
        """Build the accessor for ``/wp-json/wp/v2/<name>``."""
        return cls(client, f"{API_PREFIX}/{name.strip('/')}")

    def _item(self, id: Any) -> str:
        return f"{self.path}/{id}"

    def list(self, data: Optional[dict[str, Any]] = None) -> Any:
        """List the collection; *data* is sent as query parameters."""
        return self.client.get(self.path, data)

    def create(self, data: dict[str, Any]) -> Any:
        return self.client.post(self.path, data)

    def get(self, id: Any) -> Any:
        return self.client.get(self._item(id))

    def update(self, id: Any, data: dict[str, Any]) -> Any:
        return self.client.post(self._item(id), data)

    def delete(self, id: Any) -> Any:
        return self.client.delete(self._item(id))

    def __repr__(self) -> str:
        return f"Resource({self.path!r})"
