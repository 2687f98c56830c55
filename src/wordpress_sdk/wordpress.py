"""The :class:`WordPress` entry point.

:class:`WordPress` ties a :class:`~wordpress_sdk.session.Session` to a
:class:`~wordpress_sdk.client.sync_client.SyncClient` and exposes the
session configuration surface, generic verb helpers, JWT login, and the
resource accessors.

Example::

    from wordpress_sdk import WordPress

    wp = WordPress("https://blog.example.com")
    wp.set_username("editor").set_application_password("abcd efgh ijkl mnop")

    post = wp.post().create({"title": "Hello", "status": "draft"})
    print(post.id, wp.get_latest_header()["X-WP-Total"])
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from wordpress_sdk.client.response import field
from wordpress_sdk.client.sync_client import SyncClient
from wordpress_sdk.exceptions import UnauthorizedError
from wordpress_sdk.models import ClientConfig, RequestConfig
from wordpress_sdk.resources import Resource
from wordpress_sdk.session import Session

LOGIN_PATH = "/wp-json/jwt-auth/v1/token"


class WordPress:
    """Client for one WordPress site.

    Args:
        server: Base URL of the site, e.g. ``https://blog.example.com``.
        client: Optional pre-built :class:`httpx.Client`. Its ``base_url``
            should match *server*.
        request_config: HTTP settings used when the SDK builds its own client.
        transport: Optional httpx transport for the SDK-built client.

    Instances can be used as context managers; on exit the HTTP client is
    closed unless it was supplied by the caller.
    """

    def __init__(
        self,
        server: str,
        client: Optional[httpx.Client] = None,
        request_config: Optional[RequestConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.session = Session(server, client, request_config=request_config, transport=transport)
        self._client = SyncClient(self.session)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> WordPress:
        """Build a configured instance from a :class:`~wordpress_sdk.models.ClientConfig`."""
        wp = cls(config.server, request_config=config.request, transport=transport)
        wp.set_access_token(config.access_token)
        wp.set_username(config.username)
        wp.set_application_password(config.application_password)
        wp.raw_output(config.raw_output)
        wp.output_as_object(config.output_as_object)
        return wp

    def __enter__(self) -> WordPress:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------ #
    # Session configuration
    # ------------------------------------------------------------------ #

    def set_server(self, url: str, client: Optional[httpx.Client] = None) -> WordPress:
        self.session.set_server(url, client)
        return self

    def get_server(self) -> str:
        return self.session.server

    def set_client(self, client: httpx.Client) -> None:
        self.session.set_client(client)

    def get_client(self) -> Optional[httpx.Client]:
        return self.session.client

    def set_access_token(self, access_token: Optional[str]) -> None:
        self.session.access_token = access_token

    def get_access_token(self) -> Optional[str]:
        return self.session.access_token

    def set_username(self, username: Optional[str]) -> WordPress:
        self.session.username = username
        return self

    def set_application_password(self, password: Optional[str]) -> WordPress:
        self.session.password = password
        return self

    def get_latest_header(self) -> Optional[httpx.Headers]:
        """Headers of the most recent accepted response (e.g. ``X-WP-Total``)."""
        return self.session.latest_header

    def output_as_object(self, output_as_object: bool) -> None:
        """Decode JSON objects to attribute-style objects (True) or dicts (False)."""
        self.session.output_as_object = output_as_object

    def raw_output(self, raw_output: bool) -> None:
        """Return response bodies as text instead of decoding them."""
        self.session.raw_output = raw_output

    # ------------------------------------------------------------------ #
    # Generic calls
    # ------------------------------------------------------------------ #

    def get_call(self, endpoint: str, data: Any = None) -> Any:
        return self._client.get(endpoint, data)

    def post_call(self, endpoint: str, data: Any) -> Any:
        return self._client.post(endpoint, data)

    def put_call(self, endpoint: str, data: Any) -> Any:
        return self._client.put(endpoint, data)

    def delete_call(self, endpoint: str) -> Any:
        return self._client.delete(endpoint)

    def options_call(self, endpoint: str) -> Any:
        return self._client.options(endpoint)

    # ------------------------------------------------------------------ #
    # Login and resources
    # ------------------------------------------------------------------ #

    def login(self, email: str, password: str) -> Any:
        """Obtain a JWT from the *JWT Authentication* plugin.

        On success the returned token becomes the session's bearer token, so
        every following call carries ``Authorization: Bearer <token>``.

        Returns:
            The decoded token response (containing ``token``).

        Raises:
            UnauthorizedError: If the credentials are rejected or the
                response holds no token.
        """
        result = self._client.post(LOGIN_PATH, {"username": email, "password": password})

        token = field(result, "token")
        if not token:
            raise UnauthorizedError("Login response did not include a token")
        self.set_access_token(token)

        return result

    def user(self) -> Resource:
        return Resource.for_type(self._client, "users")

    def post(self) -> Resource:
        return Resource.for_type(self._client, "posts")

    def custom_post(self, post_type: str) -> Resource:
        """Accessor for a custom post type's REST base, e.g. ``"products"``."""
        return Resource.for_type(self._client, post_type)

    def tag(self) -> Resource:
        return Resource.for_type(self._client, "tags")
