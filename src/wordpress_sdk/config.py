"""Configuration loading with precedence resolution and credential sources.

* **Precedence resolution** -- :func:`load_config` merges keyword
  overrides, ``WORDPRESS_SDK_*`` environment variables, and an optional JSON
  config file into a validated :class:`~wordpress_sdk.models.ClientConfig`.
* **Credential resolution** -- :func:`resolve_credential` reads secrets from
  environment variables or files so they never have to be written into a
  config file in plain text.

Example config file::

    {
        "server": "https://blog.example.com",
        "username": "editor",
        "application_password": "env:WP_APP_PASSWORD",
        "request": {"timeout": 30}
    }
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from wordpress_sdk.exceptions import ConfigError
from wordpress_sdk.models import ClientConfig

ENV_PREFIX = "WORDPRESS_SDK_"

# Environment variable suffix -> ClientConfig field.
_ENV_FIELDS = {
    "SERVER": "server",
    "TOKEN": "access_token",
    "USERNAME": "username",
    "APP_PASSWORD": "application_password",
}

_CREDENTIAL_FIELDS = ("access_token", "username", "application_password")


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - anything else -- returned as the literal credential

    Args:
        source: The source descriptor string.

    Returns:
        The resolved credential string.

    Raises:
        ConfigError: If the variable is unset or the file can't be read.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    return source


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON config file into a plain dict.

    Raises:
        ConfigError: If the file is missing, not valid JSON, or not an object.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise ConfigError(f"Config file not found at {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Invalid config file at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file at {path} must contain a JSON object")
    return data


def _env_values() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for suffix, field in _ENV_FIELDS.items():
        value = os.environ.get(ENV_PREFIX + suffix)
        if value:
            values[field] = value
    return values


def load_config(path: Optional[str | Path] = None, **overrides: Any) -> ClientConfig:
    """Resolve a :class:`~wordpress_sdk.models.ClientConfig`.

    Precedence (high to low):
        1. Keyword ``overrides`` (``None`` values are ignored)
        2. Environment variables (``WORDPRESS_SDK_SERVER``,
           ``WORDPRESS_SDK_TOKEN``, ``WORDPRESS_SDK_USERNAME``,
           ``WORDPRESS_SDK_APP_PASSWORD``, ``WORDPRESS_SDK_TIMEOUT``)
        3. The JSON file at *path*
        4. Defaults

    Credential fields are then run through :func:`resolve_credential`, so
    ``"env:..."`` and ``"file:..."`` descriptors work at every level.

    Raises:
        ConfigError: If the file is invalid, a credential source can't be
            resolved, or the merged values fail validation.
    """
    data: dict[str, Any] = load_config_file(path) if path is not None else {}

    data.update(_env_values())
    timeout = os.environ.get(ENV_PREFIX + "TIMEOUT")
    if timeout:
        request = dict(data.get("request") or {})
        request["timeout"] = timeout
        data["request"] = request

    data.update({key: value for key, value in overrides.items() if value is not None})

    for field in _CREDENTIAL_FIELDS:
        value = data.get(field)
        if isinstance(value, str) and value:
            data[field] = resolve_credential(value)

    try:
        return ClientConfig.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
