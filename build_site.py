"""Minimal launcher for the site build.

Its single responsibility is to delegate to ``portfolio_site.cli`` so the site
can be built from a checkout without installing the package. Run it from the
checkout root, or pass ``--root``.

Usage:
    python build_site.py [--root DIR] [--output DIR] [--log-level LEVEL]

"""

from __future__ import annotations

import sys


def entry_point(argv: list[str] | None = None) -> int:
    """Run the site build and return its exit code."""
    # Lazy import so `python build_site.py --help` stays cheap
    from portfolio_site.cli import main

    return main(argv)


if __name__ == "__main__":
    sys.exit(entry_point())
