"""Response body handling: BOM stripping and JSON decoding.

Some WordPress plugins emit a UTF-8 byte-order mark before (or after) the
JSON payload, which breaks strict JSON parsers. :func:`strip_bom` removes
one leading and one trailing U+FEFF; :func:`decode_body` then returns the
text as is (raw mode) or decodes it into attribute-style objects or plain
dicts depending on the session's output mode.
"""

from __future__ import annotations

import json
import re
from types import SimpleNamespace
from typing import Any

import httpx

from wordpress_sdk.exceptions import DecodeError

_BOM_RE = re.compile("^\ufeff|\ufeff$")


def strip_bom(text: str) -> str:
    """Remove a leading and a trailing UTF-8 byte-order mark from *text*."""
    return _BOM_RE.sub("", text)


def _as_namespace(obj: dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(**obj)


def decode_body(
    text: str,
    raw: bool = False,
    as_object: bool = True,
    response: httpx.Response | None = None,
) -> Any:
    """Decode an already BOM-stripped response body.

    Args:
        text: Body text.
        raw: Return *text* untouched.
        as_object: Decode JSON objects into :class:`types.SimpleNamespace`
            (``post.title.rendered``) instead of dicts (``post["title"]["rendered"]``).
        response: The originating response, attached to :class:`DecodeError`.

    Returns:
        The raw text, the decoded JSON value, or ``None`` for an empty body.

    Raises:
        DecodeError: If *text* is not valid JSON.
    """
    if raw:
        return text
    if not text.strip():
        return None
    try:
        if as_object:
            return json.loads(text, object_hook=_as_namespace)
        return json.loads(text)
    except json.JSONDecodeError as exc:
        status = response.status_code if response is not None else None
        raise DecodeError(
            f"Response body is not valid JSON: {exc}",
            status_code=status,
            response=response,
        ) from exc


def field(result: Any, name: str) -> Any:
    """Read *name* from a decoded result in any output mode.

    Works on :class:`~types.SimpleNamespace` objects, dicts, and raw JSON
    text. Returns ``None`` when the field is absent.
    """
    if isinstance(result, str):
        try:
            result = json.loads(strip_bom(result))
        except json.JSONDecodeError:
            return None
    if isinstance(result, SimpleNamespace):
        return getattr(result, name, None)
    if isinstance(result, dict):
        return result.get(name)
    return None
