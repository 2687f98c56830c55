"""Mutable connection state shared by the dispatcher, fallback, and facades.

A :class:`Session` holds everything that survives between calls: the base
server URL, the :class:`httpx.Client` used to reach it, the auth state,
the output-mode flags, and the headers of the latest successful response.

The session is not thread-safe. The ``index.php/`` fallback rewrites
:attr:`Session.server` and re-points the client in place, so concurrent
callers sharing one session must synchronise externally.
"""

from __future__ import annotations

from typing import Optional

import httpx

from wordpress_sdk.models import Credentials, RequestConfig


def normalize_server(url: str) -> str:
    """Return *url* with exactly one trailing slash."""
    return url.rstrip("/") + "/"


def build_http_client(
    base_url: str,
    config: RequestConfig,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create the default :class:`httpx.Client` for a WordPress site."""
    return httpx.Client(
        base_url=base_url,
        timeout=config.timeout,
        headers={
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        },
        verify=config.verify_ssl,
        follow_redirects=True,
        transport=transport,
    )


class Session:
    """Connection state for one WordPress site.

    Args:
        server: Base URL of the site. A trailing slash is enforced.
        client: Optional pre-built :class:`httpx.Client`. When omitted, one
            is built from *request_config*.
        request_config: Timeout, TLS, user-agent and error-raising settings.
        transport: Optional httpx transport used when the session builds its
            own client (handy for :class:`httpx.MockTransport` in tests).
    """

    def __init__(
        self,
        server: str,
        client: Optional[httpx.Client] = None,
        request_config: Optional[RequestConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self._transport = transport
        self.server = ""
        self.client: Optional[httpx.Client] = None
        self._owns_client = False

        self.access_token: Optional[str] = None
        self.username: Optional[str] = None
        self.password: Optional[str] = None

        self.raw_output = False
        self.output_as_object = True
        self.latest_header: Optional[httpx.Headers] = None

        self.set_server(server, client)

    def set_server(self, url: str, client: Optional[httpx.Client] = None) -> Session:
        """Point the session at *url*.

        Without *client* a fresh :class:`httpx.Client` is built from the
        session's request config; with one, it is adopted as is.
        """
        self.server = normalize_server(url)
        if client is None:
            self._replace_client(
                build_http_client(self.server, self.request_config, self._transport),
                owned=True,
            )
        else:
            self.set_client(client)
        return self

    def set_client(self, client: httpx.Client) -> None:
        """Adopt a caller-supplied client. The caller stays responsible for closing it."""
        self._replace_client(client, owned=self._owns_client and client is self.client)

    def _replace_client(self, client: httpx.Client, owned: bool) -> None:
        # Only clients built here are closed; caller-supplied ones are left alone.
        previous = self.client
        if previous is not None and previous is not client and self._owns_client:
            previous.close()
        self.client = client
        self._owns_client = owned

    def rebase(self, url: str) -> None:
        """Move the session and its existing client to a new base URL.

        The client object is re-pointed in place, so its headers, timeout,
        auth, transport and connection pool all carry over.
        """
        client = self.http_client
        server = normalize_server(url)
        client.base_url = server
        self.set_server(server, client)

    @property
    def http_client(self) -> httpx.Client:
        if self.client is None:
            raise RuntimeError("Session has no HTTP client")
        return self.client

    @property
    def credentials(self) -> Credentials:
        """Frozen snapshot of the current auth state."""
        return Credentials(
            access_token=self.access_token,
            username=self.username,
            password=self.password,
        )

    def close(self) -> None:
        """Close the HTTP client if the session built it."""
        if self.client is not None and self._owns_client:
            self.client.close()
