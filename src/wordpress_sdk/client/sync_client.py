"""Synchronous request dispatcher with auth, error mapping, and URL fallback.

This module provides :class:`SyncClient`, the single path every SDK call
goes through. It wraps the session's :class:`httpx.Client` and layers on:

- **Payload routing** -- JSON body, multipart body, or query string via
  :func:`~wordpress_sdk.client.request.build_request`.
- **Auth injection** -- bearer header and/or basic auth from
  :class:`~wordpress_sdk.auth.manager.AuthManager`, rebuilt per request.
- **Error mapping** -- 4xx/5xx raised by the transport go through
  :func:`~wordpress_sdk.client.errors.classify_failure`.
- **One-shot fallback** -- the first failure moves the session to its
  ``index.php/`` URL and reissues the call once
  (:class:`~wordpress_sdk.client.fallback.FrontControllerFallback`).
- **Decoding** -- BOM stripping and raw/object/dict output modes via
  :mod:`wordpress_sdk.client.response`.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from wordpress_sdk.auth.manager import AuthManager, create_default_manager
from wordpress_sdk.client.errors import Raise, RetryOnce, classify_failure, classify_response
from wordpress_sdk.client.fallback import FrontControllerFallback
from wordpress_sdk.client.request import build_request
from wordpress_sdk.client.response import decode_body, strip_bom
from wordpress_sdk.exceptions import ConnectionError_
from wordpress_sdk.models import Endpoint, HTTPMethod
from wordpress_sdk.output import get_output
from wordpress_sdk.session import Session

ACCEPTED_STATUS = (200, 201)
SAFE_METHODS = (HTTPMethod.GET, HTTPMethod.OPTIONS)


class SyncClient:
    """Blocking dispatcher bound to one :class:`~wordpress_sdk.session.Session`.

    Args:
        session: The connection state to read from and update.
        auth_manager: Header builder; defaults to
            :func:`~wordpress_sdk.auth.manager.create_default_manager`.
        fallback: Retry strategy; defaults to
            :class:`~wordpress_sdk.client.fallback.FrontControllerFallback`.

    Example::

        client = SyncClient(Session("https://blog.example.com"))
        tags = client.get("/wp-json/wp/v2/tags", {"per_page": 5})
    """

    def __init__(
        self,
        session: Session,
        auth_manager: Optional[AuthManager] = None,
        fallback: Optional[FrontControllerFallback] = None,
    ) -> None:
        self.session = session
        self._auth_manager = auth_manager or create_default_manager()
        self._fallback = fallback or FrontControllerFallback()

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def call(self, method: str | HTTPMethod, path: str, data: Any = None) -> Any:
        """Execute one API call and return the decoded result.

        Args:
            method: HTTP verb (GET, POST, PUT, DELETE, OPTIONS).
            path: Endpoint path relative to the site root, e.g.
                ``/wp-json/wp/v2/tags``.
            data: JSON payload, multipart payload (``{"multipart": [...]}``),
                or query parameters for GET.

        Returns:
            The body text in raw mode, otherwise the decoded JSON.

        Raises:
            ServerError: On 5xx, or an unexpected handled status.
            UnauthorizedError: On 401 / 403.
            NotFoundError: On 404.
            ValidationError: On 400 / 422.
            httpx.HTTPStatusError: On any other 4xx.
            ConnectionError_: On network / timeout errors.
            DecodeError: If the body is not valid JSON.
        """
        endpoint = Endpoint(method=HTTPMethod(method.upper()), path=path, data=data)
        url, kwargs = build_request(endpoint)

        auth = self._auth_manager.build(self.session.credentials)
        if auth.headers:
            kwargs["headers"] = auth.headers
        if auth.basic is not None:
            kwargs["auth"] = auth.basic

        try:
            response = self._send(endpoint.method.value, url, kwargs)
        except httpx.HTTPStatusError as exc:
            decision = classify_failure(exc, self._fallback.try_rewrite(self.session))
            if isinstance(decision, RetryOnce):
                if endpoint.method not in SAFE_METHODS:
                    get_output().warning(
                        f"Retrying {endpoint.method.value} {endpoint.path} via {self.session.server}; "
                        "the first attempt may already have been applied"
                    )
                return self.call(method, path, data)
            assert isinstance(decision, Raise)
            if decision.error is exc:
                raise
            raise decision.error from exc

        return self._handle_response(response)

    def get(self, path: str, data: Any = None) -> Any:
        """Send a GET request; *data* becomes the query string."""
        return self.call(HTTPMethod.GET, path, data)

    def post(self, path: str, data: Any = None) -> Any:
        """Send a POST request with *data* as the body."""
        return self.call(HTTPMethod.POST, path, data)

    def put(self, path: str, data: Any = None) -> Any:
        """Send a PUT request with *data* as the body."""
        return self.call(HTTPMethod.PUT, path, data)

    def delete(self, path: str) -> Any:
        """Send a DELETE request."""
        return self.call(HTTPMethod.DELETE, path)

    def options(self, path: str) -> Any:
        """Send an OPTIONS request (WordPress answers with the route schema)."""
        return self.call(HTTPMethod.OPTIONS, path)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _send(self, method: str, url: str, kwargs: dict[str, Any]) -> httpx.Response:
        """Issue the request, raising for 4xx/5xx when ``http_errors`` is on."""
        client = self.session.http_client
        output = get_output()
        output.debug(f"{method} {client.base_url}{url}")

        try:
            response = client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            raise ConnectionError_(f"Connection failed: {exc}") from exc

        output.debug(f"HTTP {response.status_code} {response.reason_phrase}")
        if self.session.request_config.http_errors and (
            response.is_client_error or response.is_server_error
        ):
            kind = "Client" if response.is_client_error else "Server"
            raise httpx.HTTPStatusError(
                f"{kind} error '{response.status_code} {response.reason_phrase}' "
                f"for url '{response.url}'",
                request=response.request,
                response=response,
            )
        return response

    def _handle_response(self, response: httpx.Response) -> Any:
        """Accept 200/201, record headers, and decode the body."""
        if response.status_code not in ACCEPTED_STATUS:
            raise classify_response(response)

        body = strip_bom(response.text)
        self.session.latest_header = response.headers

        return decode_body(
            body,
            raw=self.session.raw_output,
            as_object=self.session.output_as_object,
            response=response,
        )
