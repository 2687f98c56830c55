"""Turn an :class:`~wordpress_sdk.models.Endpoint` into httpx request arguments.

The payload of a call is routed one of four ways:

* a mapping with a ``multipart`` key is sent as ``multipart/form-data``;
* any other payload on a non-GET verb is sent as a JSON body;
* a payload on GET is encoded into the query string, never into a body;
* no payload means no body.

Query strings follow PHP's ``http_build_query`` conventions because that is
what the WordPress REST API parses: nested values use bracket notation
(``categories[0]=3``), booleans become ``1``/``0``, and ``None`` is dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus

from wordpress_sdk.models import Endpoint, HTTPMethod


def normalize_path(path: str) -> str:
    """Return *path* with exactly one leading slash."""
    return "/" + path.lstrip("/")


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _flatten(prefix: str, value: Any) -> list[tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (list, tuple)):
        items = enumerate(value)
    else:
        return [(prefix, _scalar(value))]

    pairs: list[tuple[str, str]] = []
    for key, item in items:
        pairs.extend(_flatten(f"{prefix}[{key}]", item))
    return pairs


def build_query(data: Mapping[str, Any] | list[Any] | tuple[Any, ...]) -> str:
    """Encode *data* as a URL query string in ``http_build_query`` style.

    A top-level list is keyed by position, as PHP does (``[3, 4]`` becomes
    ``0=3&1=4``).

    Example::

        >>> build_query({"per_page": 10, "include": [4, 7], "hide_empty": True})
        'per_page=10&include%5B0%5D=4&include%5B1%5D=7&hide_empty=1'
    """
    pairs: list[tuple[str, str]] = []
    items = data.items() if isinstance(data, Mapping) else enumerate(data)
    for key, value in items:
        pairs.extend(_flatten(str(key), value))
    return "&".join(f"{quote_plus(k)}={quote_plus(v)}" for k, v in pairs)


def _multipart_files(parts: list[Mapping[str, Any]]) -> list[tuple[str, tuple[Any, ...]]]:
    """Convert ``{"name", "contents", "filename", "content_type"}`` parts for httpx."""
    files: list[tuple[str, tuple[Any, ...]]] = []
    for part in parts:
        entry: tuple[Any, ...] = (part.get("filename"), part["contents"])
        if part.get("content_type"):
            entry += (part["content_type"],)
        files.append((part["name"], entry))
    return files


def build_request(endpoint: Endpoint) -> tuple[str, dict[str, Any]]:
    """Return ``(url, kwargs)`` for :meth:`httpx.Client.request`.

    The returned URL has its leading slash stripped so that httpx resolves
    it *below* the base URL, keeping an ``index.php/`` prefix intact.
    """
    path = normalize_path(endpoint.path)
    data = endpoint.data
    kwargs: dict[str, Any] = {}

    if data is not None and endpoint.is_multipart:
        kwargs["files"] = _multipart_files(data["multipart"])
    elif data is not None and endpoint.method is not HTTPMethod.GET:
        kwargs["json"] = data
    elif data is not None:
        query = build_query(data)
        if query:
            separator = "&" if "?" in path else "?"
            path = f"{path}{separator}{query}"

    return path.lstrip("/"), kwargs
