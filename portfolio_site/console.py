"""Rich console output for build progress.

Progress lines are user-facing only; diagnostics go through ``logging``.
No other module should import Rich directly.

Canonical Usage
---------------
>>> from portfolio_site.console import rprint
>>> rprint("  -> index.html")
"""

from __future__ import annotations

from typing import Any

from rich.console import Console

_CONSOLE = Console(highlight=False)
_ERR_CONSOLE = Console(stderr=True, highlight=False)


def rprint(*objects: Any, **kwargs: Any) -> None:
    """Print to the shared Rich console.

    Parameters
    ----------
    *objects : Any
        Renderables or strings, forwarded to ``Console.print``.
    **kwargs : Any
        Extra keyword arguments for ``Console.print`` (``style``, ``end``...).
        Markup is off unless ``markup=True`` is passed, so slugs and paths
        print literally.
    """
    kwargs.setdefault("markup", False)
    _CONSOLE.print(*objects, **kwargs)


def eprint(message: str) -> None:
    """Print a fatal error message to stderr in bold red."""
    _ERR_CONSOLE.print(message, style="bold red", markup=False)


__all__ = ["eprint", "rprint"]
