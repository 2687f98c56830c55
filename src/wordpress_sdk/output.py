"""Diagnostics for the SDK, written to stderr.

Return values are the SDK's only data channel, so nothing here touches
stdout. Messages go through a process-wide :class:`OutputManager`; install
a configured one with :func:`set_output` (for instance ``verbose=True`` to
trace every request and the ``index.php/`` fallback).

Colour follows `clig.dev <https://clig.dev/>`_: ``NO_COLOR`` (any value) or
``TERM=dumb`` turns it off, and so does ``no_color=True``. Without colour
each message is a plain ``print`` to stderr.

Warnings always print; they flag a write that the ``index.php/`` fallback
retried and that may therefore have been applied twice.

Tokens and passwords are never passed to this module.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

# level -> (prefix, rich style)
_LEVELS = {
    "warning": ("Warning: ", "yellow"),
    "debug": ("[debug] ", "dim"),
}


class OutputManager:
    """Routes SDK messages to stderr.

    Args:
        no_color: Disable colour and markup.
        verbose: Show ``debug`` messages (request and fallback tracing).
        console: Rich console to write to; defaults to one bound to stderr.
    """

    def __init__(
        self,
        no_color: bool = False,
        verbose: bool = False,
        console: Optional[Console] = None,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._verbose = verbose
        self._console = console or Console(
            stderr=True,
            no_color=self._no_color,
            highlight=False,
        )

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    def _emit(self, level: str, message: str) -> None:
        prefix, style = _LEVELS[level]
        if self._no_color:
            print(f"{prefix}{message}", file=sys.stderr, flush=True)
            return
        self._console.print(f"[{style}]{escape(prefix)}[/{style}]{escape(message)}")

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def debug(self, message: str) -> None:
        """Emit *message* with a ``[debug]`` prefix, in verbose mode only."""
        if self._verbose:
            self._emit("debug", message)


def _should_disable_color() -> bool:
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the process-wide manager, creating a default (non-verbose) one on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager; the next :func:`get_output` builds a fresh one."""
    global _output
    _output = None
