"""Command line entry point for the site build.

Runs with no arguments: inputs are read from ``data/``, ``templates/`` and
``static/`` under the current working directory and the site is written to
``dist/`` there. Exit code is 0 on success and 1 when the build aborts.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from portfolio_site.pipeline.site_generator.runner import configure_logging, run_from_config


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line args.

    Parameters
    ----------
    argv : list[str] | None
        Optional argv to parse. When ``None`` the real CLI args are used.

    Returns
    -------
    argparse.Namespace
        Parsed arguments with fields ``root``, ``output`` and ``log_level``.
    """
    parser = argparse.ArgumentParser(
        description="Build the static portfolio site into a deployable directory."
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Site source root with data/, templates/ and static/ (default: current directory)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Output directory")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one build and return the process exit code."""
    args = parse_cli_args(argv)
    configure_logging(
        args.log_level, enable_file=not bool(os.environ.get("DISABLE_FILE_LOGS"))
    )
    root = args.root if args.root is not None else Path.cwd()
    ok = run_from_config(root=root, output_dir=args.output)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
