"""Static asset copy for the site build."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from portfolio_site.config import FAVICON_FILENAME, STATIC_OUTPUT_DIR
from portfolio_site.exceptions import ConfigurationError, FilesystemError

logger = logging.getLogger(__name__)


def copy_static_assets(static_dir: Path, output_dir: Path) -> list[Path]:
    r"""Copy the static source tree to ``<output>/static`` and the favicon to the root.

    Parameters
    ----------
    static_dir : Path
        Static asset source directory.
    output_dir : Path
        Build output root.

    Returns
    -------
    list[Path]
        Copied top-level targets relative to ``output_dir`` (``static`` and,
        when present, ``favicon.svg``).

    Raises
    ------
    ConfigurationError
        If ``static_dir`` does not exist.
    FilesystemError
        If any copy fails.
    """
    if not static_dir.is_dir():
        raise ConfigurationError(
            f"Static asset directory not found: {static_dir}",
            context={"path": str(static_dir)},
        )
    copied: list[Path] = []
    try:
        shutil.copytree(static_dir, output_dir / STATIC_OUTPUT_DIR, dirs_exist_ok=True)
        copied.append(Path(STATIC_OUTPUT_DIR))
        favicon = static_dir / FAVICON_FILENAME
        if favicon.is_file():
            shutil.copyfile(favicon, output_dir / FAVICON_FILENAME)
            copied.append(Path(FAVICON_FILENAME))
    except (OSError, shutil.Error) as exc:
        raise FilesystemError(
            f"Could not copy static assets from {static_dir}: {exc}",
            context={"source": str(static_dir), "target": str(output_dir)},
        ) from exc
    logger.debug("Copied static assets: %s", copied)
    return copied
