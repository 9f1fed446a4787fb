"""Site generator runner.

This module provides the programmatic entrypoint and logging configuration
for the site build. It is the boundary between the CLI and the pipeline:
``run_from_config`` fills in project defaults, runs ``build_site`` and turns
any failure into a logged ``False`` so the caller can pick an exit code.

Examples
--------
>>> from portfolio_site.pipeline.site_generator.runner import configure_logging, run_from_config
>>> configure_logging(log_level="INFO", enable_file=False)
>>> success = run_from_config()
>>> assert isinstance(success, bool)
"""

from __future__ import annotations

import logging
from pathlib import Path

from portfolio_site.config import LOG_DIR, LOG_FILENAME_BUILD_SITE, LOG_FORMAT, BuildConfig
from portfolio_site.console import eprint
from portfolio_site.exceptions import AppError

from .builder import build_site

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging for a site build.

    Sets up a stream handler and, optionally, an append-mode file handler in
    ``LOG_DIR``. Existing root handlers are removed first, so repeated calls
    do not stack handlers.

    Parameters
    ----------
    log_level : str, optional
        The logging level name (e.g., "INFO", "DEBUG"). Unknown names fall
        back to INFO.
    enable_file : bool, optional
        Whether to also log to ``LOG_DIR / LOG_FILENAME_BUILD_SITE``.

    Notes
    -----
    A log directory that cannot be created only disables the file handler;
    logging setup never aborts a build.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_BUILD_SITE, mode="a")
            )
        except OSError as exc:
            logging.getLogger(__name__).warning("File logging disabled: %s", exc)
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def run_from_config(
    root: Path | None = None,
    output_dir: Path | None = None,
    config: BuildConfig | None = None,
) -> bool:
    """Build the site from an explicit config, a site root, or project defaults.

    Parameters
    ----------
    root : pathlib.Path or None, optional
        Site source root laid out as ``data/``, ``templates/``, ``static/``.
        If ``None``, project-level defaults from ``portfolio_site.config`` are used.
    output_dir : pathlib.Path or None, optional
        Override for the output directory.
    config : BuildConfig or None, optional
        Complete config; takes precedence over ``root`` and ``output_dir``.

    Returns
    -------
    bool
        ``True`` if the whole site was written; ``False`` if the build
        aborted (the error is logged and printed).
    """
    if config is None:
        if root is not None:
            config = BuildConfig.from_root(Path(root), output_dir)
        else:
            config = BuildConfig.from_defaults(output_dir=output_dir)
    try:
        build_site(config)
        return True
    except AppError as exc:
        logger.error("Build failed: %s", exc, extra={"error": exc.to_dict()})
        eprint(f"Build failed: {exc}")
        return False
    except OSError as exc:
        logger.exception("Build failed with an I/O error")
        eprint(f"Build failed: {exc}")
        return False


__all__ = ["configure_logging", "run_from_config"]
