"""Tests for the WordPress entry point: login, resources, and session surface."""

from __future__ import annotations

import httpx
import pytest

from wordpress_sdk import WordPress
from wordpress_sdk.exceptions import UnauthorizedError
from wordpress_sdk.models import ClientConfig, RequestConfig
from wordpress_sdk.resources import Resource


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


class TestLogin:
    def test_login_stores_token(self, server, wp) -> None:
        server.queue(
            httpx.Response(200, json={"token": "jwt-123", "user_email": "a@b.com"}),
            httpx.Response(200, json=[]),
        )

        result = wp.login("a@b.com", "pw")

        assert result.token == "jwt-123"
        assert wp.get_access_token() == "jwt-123"
        login_request = server.requests[0]
        assert login_request.method == "POST"
        assert login_request.url.path == "/wp-json/jwt-auth/v1/token"
        assert server.json_body(0) == {"username": "a@b.com", "password": "pw"}
        assert "authorization" not in login_request.headers

        wp.tag().list()
        assert server.requests[1].headers["authorization"] == "Bearer jwt-123"

    def test_login_in_map_mode(self, server, wp) -> None:
        server.queue(httpx.Response(200, json={"token": "jwt-123"}))
        wp.output_as_object(False)
        assert wp.login("a@b.com", "pw") == {"token": "jwt-123"}
        assert wp.get_access_token() == "jwt-123"

    def test_login_in_raw_mode(self, server, wp) -> None:
        server.queue(httpx.Response(200, content=b'{"token": "jwt-123"}'))
        wp.raw_output(True)
        assert wp.login("a@b.com", "pw") == '{"token": "jwt-123"}'
        assert wp.get_access_token() == "jwt-123"

    def test_login_without_token(self, server, wp) -> None:
        server.queue(httpx.Response(200, json={"message": "hmm"}))
        with pytest.raises(UnauthorizedError):
            wp.login("a@b.com", "pw")
        assert wp.get_access_token() is None

    def test_login_rejected(self, server) -> None:
        server.queue(httpx.Response(403, json={"code": "[jwt_auth] incorrect_password"}))
        wp = WordPress("https://site.example/index.php", transport=httpx.MockTransport(server))
        with pytest.raises(UnauthorizedError) as exc_info:
            wp.login("a@b.com", "wrong")
        assert exc_info.value.status_code == 403
        assert wp.get_access_token() is None


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


class TestResources:
    @pytest.mark.parametrize(
        "accessor,path",
        [
            (lambda wp: wp.tag(), "/wp-json/wp/v2/tags"),
            (lambda wp: wp.post(), "/wp-json/wp/v2/posts"),
            (lambda wp: wp.user(), "/wp-json/wp/v2/users"),
            (lambda wp: wp.custom_post("products"), "/wp-json/wp/v2/products"),
        ],
    )
    def test_accessor_paths(self, wp, accessor, path) -> None:
        resource = accessor(wp)
        assert isinstance(resource, Resource)
        assert resource.path == path

    def test_crud_mapping(self, server, wp) -> None:
        server.queue(httpx.Response(200, json={}))
        tags = wp.tag()

        tags.list({"per_page": 2})
        tags.create({"name": "news"})
        tags.get(5)
        tags.update(5, {"name": "updates"})
        tags.delete(5)

        assert [(r.method, r.url.path) for r in server.requests] == [
            ("GET", "/wp-json/wp/v2/tags"),
            ("POST", "/wp-json/wp/v2/tags"),
            ("GET", "/wp-json/wp/v2/tags/5"),
            ("POST", "/wp-json/wp/v2/tags/5"),
            ("DELETE", "/wp-json/wp/v2/tags/5"),
        ]
        assert server.requests[0].url.params["per_page"] == "2"
        assert server.json_body(1) == {"name": "news"}
        assert server.json_body(3) == {"name": "updates"}

    def test_list_without_query(self, server, wp) -> None:
        server.queue(httpx.Response(200, json=[]))
        wp.post().list()
        assert str(server.requests[0].url) == "https://site.example/wp-json/wp/v2/posts"

    def test_repr(self, wp) -> None:
        assert repr(wp.tag()) == "Resource('/wp-json/wp/v2/tags')"


# ---------------------------------------------------------------------------
# Session surface
# ---------------------------------------------------------------------------


class TestSessionSurface:
    def test_server_trailing_slash(self) -> None:
        with WordPress("https://site.example///") as wp:
            assert wp.get_server() == "https://site.example/"
            wp.set_server("https://other.example")
            assert wp.get_server() == "https://other.example/"
            assert str(wp.get_client().base_url) == "https://other.example/"

    def test_set_client(self) -> None:
        client = httpx.Client(base_url="https://site.example/")
        with WordPress("https://site.example") as wp:
            wp.set_client(client)
            assert wp.get_client() is client

    def test_constructor_client_used_as_is(self) -> None:
        client = httpx.Client(base_url="https://site.example/", timeout=5)
        with WordPress("https://site.example", client) as wp:
            assert wp.get_client() is client

    def test_setters_chain(self) -> None:
        with WordPress("https://site.example") as wp:
            assert wp.set_username("u") is wp
            assert wp.set_application_password("p") is wp
            assert wp.session.credentials.username == "u"
            assert wp.session.credentials.password == "p"

    def test_close_closes_client(self) -> None:
        wp = WordPress("https://site.example")
        wp.close()
        assert wp.get_client().is_closed

    def test_request_config_applied(self) -> None:
        config = RequestConfig(timeout=12.5, user_agent="custom/1.0")
        with WordPress("https://site.example", request_config=config) as wp:
            client = wp.get_client()
            assert client.timeout.read == 12.5
            assert client.headers["user-agent"] == "custom/1.0"

    def test_from_config(self, server) -> None:
        server.queue(httpx.Response(200, content=b"[]"))
        config = ClientConfig(
            server="https://site.example",
            access_token="tok",
            raw_output=True,
        )
        with WordPress.from_config(config, transport=httpx.MockTransport(server)) as wp:
            assert wp.tag().list() == "[]"
        assert server.requests[0].headers["authorization"] == "Bearer tok"
