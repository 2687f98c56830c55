"""Tests for wordpress_sdk.config: credential sources and precedence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wordpress_sdk.config import load_config, load_config_file, resolve_credential
from wordpress_sdk.exceptions import ConfigError


def _write_config(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "wordpress.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ------------------------------------------------------------------ #
# resolve_credential
# ------------------------------------------------------------------ #


class TestResolveCredential:
    def test_literal(self) -> None:
        assert resolve_credential("abcd efgh") == "abcd efgh"

    def test_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WP_TEST_SECRET", "s3cret")
        assert resolve_credential("env:WP_TEST_SECRET") == "s3cret"

    def test_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WP_TEST_SECRET", raising=False)
        with pytest.raises(ConfigError, match="WP_TEST_SECRET"):
            resolve_credential("env:WP_TEST_SECRET")

    def test_file_is_stripped(self, tmp_path: Path) -> None:
        secret = tmp_path / "secret.txt"
        secret.write_text("  tok123\n", encoding="utf-8")
        assert resolve_credential(f"file:{secret}") == "tok123"

    def test_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            resolve_credential(f"file:{tmp_path / 'nope.txt'}")


# ------------------------------------------------------------------ #
# load_config_file
# ------------------------------------------------------------------ #


class TestLoadConfigFile:
    def test_reads_object(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, {"server": "https://site.example"})
        assert load_config_file(path) == {"server": "https://site.example"}

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config file"):
            load_config_file(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, ["https://site.example"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config_file(path)


# ------------------------------------------------------------------ #
# load_config
# ------------------------------------------------------------------ #


class TestLoadConfig:
    def test_overrides_only(self, isolated_env: pytest.MonkeyPatch) -> None:
        config = load_config(server="https://site.example")
        assert config.server == "https://site.example"
        assert config.access_token is None
        assert config.output_as_object is True
        assert config.request.timeout == 60.0

    def test_file_values(self, isolated_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = _write_config(
            tmp_path,
            {
                "server": "https://file.example",
                "username": "editor",
                "application_password": "abcd efgh",
                "raw_output": True,
                "request": {"timeout": 30, "verify_ssl": False},
            },
        )
        config = load_config(path)
        assert config.server == "https://file.example"
        assert config.username == "editor"
        assert config.application_password == "abcd efgh"
        assert config.raw_output is True
        assert config.request.timeout == 30.0
        assert config.request.verify_ssl is False

    def test_env_beats_file(self, isolated_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = _write_config(tmp_path, {"server": "https://file.example", "request": {"timeout": 30}})
        isolated_env.setenv("WORDPRESS_SDK_SERVER", "https://env.example")
        isolated_env.setenv("WORDPRESS_SDK_TOKEN", "env-token")
        isolated_env.setenv("WORDPRESS_SDK_TIMEOUT", "15")

        config = load_config(path)

        assert config.server == "https://env.example"
        assert config.access_token == "env-token"
        assert config.request.timeout == 15.0

    def test_overrides_beat_env(self, isolated_env: pytest.MonkeyPatch) -> None:
        isolated_env.setenv("WORDPRESS_SDK_SERVER", "https://env.example")
        isolated_env.setenv("WORDPRESS_SDK_USERNAME", "env-user")
        config = load_config(server="https://arg.example", username=None)
        assert config.server == "https://arg.example"
        assert config.username == "env-user"

    def test_credential_sources_resolved(
        self, isolated_env: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        secret = tmp_path / "app_password"
        secret.write_text("abcd efgh\n", encoding="utf-8")
        isolated_env.setenv("WP_JWT", "jwt-123")
        path = _write_config(
            tmp_path,
            {
                "server": "https://site.example",
                "access_token": "env:WP_JWT",
                "application_password": f"file:{secret}",
            },
        )

        config = load_config(path)

        assert config.access_token == "jwt-123"
        assert config.application_password == "abcd efgh"

    def test_missing_server(self, isolated_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config()

    def test_blank_server(self, isolated_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(ConfigError, match="server must not be empty"):
            load_config(server="   ")
