"""Request and cache diagnostics for the cuentica client.

Clients report what they do (outgoing requests, cache hits, error
statuses) as debug lines on **stderr**, never on stdout. Nothing is
printed unless the manager is verbose; ``NO_COLOR`` and ``TERM=dumb``
turn Rich styling off.

A client created with ``debug=True`` owns a verbose manager. Every other
client falls back to the process-wide one from :func:`get_output`.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Stderr sink for client debug lines.

    Args:
        no_color: Print plain text instead of dimmed Rich markup.
        verbose: Emit debug lines at all.
    """

    def __init__(self, no_color: bool = False, verbose: bool = False) -> None:
        self._plain = no_color or _color_disabled_by_env()
        self._verbose = verbose
        self._console = Console(file=sys.stderr, no_color=self._plain, stderr=True)

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    def debug(self, message: str) -> None:
        """Write ``[debug] <message>`` to stderr when verbose."""
        if not self._verbose:
            return
        if self._plain:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._console.print(f"[dim]\\[debug] {escape(message)}[/dim]")


def _color_disabled_by_env() -> bool:
    # NO_COLOR counts when present, even if empty.
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Process-wide manager
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the shared manager, creating a silent one on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Replace the shared manager."""
    global _output
    _output = output


def reset_output() -> None:
    """Forget the shared manager so the next :func:`get_output` builds a fresh one."""
    global _output
    _output = None
