"""Filesystem utilities to validate and safely remove the build output tree.

The site build starts by deleting the previous output directory. This module
makes sure that directory can never be one that holds the build's own inputs
(or something broader, like a filesystem root or the home directory).

Functions
---------
- ``create_safe_output_path``: Validate and stamp an output path as safe for removal.
- ``safe_rmtree``: Remove a validated directory tree.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import NewType

from portfolio_site.exceptions import FilesystemError

logger = logging.getLogger(__name__)

# NewType used as a static "seal" to indicate the path is validated for removal.
_ValidatedPath = NewType("_ValidatedPath", Path)


def create_safe_output_path(
    path_to_validate: Path, protected: Iterable[Path] = ()
) -> _ValidatedPath:
    r"""Validate and stamp an output directory as safe for destructive operations.

    Safety checks:
    - Never allows deletion of a filesystem root or the user's home directory.
    - Never allows deletion of a directory that is, or contains, one of the
      ``protected`` input paths (data files, templates, static sources).

    Parameters
    ----------
    path_to_validate : Path
        The output directory to be validated for removal.
    protected : Iterable[Path], optional
        Input paths that must survive the clean.

    Returns
    -------
    _ValidatedPath
        The resolved path, stamped for use by ``safe_rmtree``.

    Raises
    ------
    FilesystemError
        If the path is a root, the home directory, or would swallow an input.

    Examples
    --------
    >>> from pathlib import Path
    >>> create_safe_output_path(Path("/"))  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    FilesystemError: FILESYSTEM_ERROR: SECURITY STOP: ...
    """
    target_path = Path(path_to_validate).resolve()

    if target_path == Path(target_path.anchor) or target_path == Path.home().resolve():
        raise FilesystemError(
            f"SECURITY STOP: Refusing to delete '{target_path}'.",
            context={"path": str(target_path)},
        )

    for input_path in protected:
        resolved = Path(input_path).resolve()
        if resolved == target_path or resolved.is_relative_to(target_path):
            raise FilesystemError(
                f"SECURITY STOP: Output directory '{target_path}' contains build "
                f"input '{resolved}'.",
                context={"path": str(target_path), "input": str(resolved)},
            )

    return _ValidatedPath(target_path)


def safe_rmtree(safe_path: _ValidatedPath | Path, protected: Iterable[Path] = ()) -> None:
    r"""Remove a directory tree after validating it with ``create_safe_output_path``.

    Parameters
    ----------
    safe_path : Path or _ValidatedPath
        The target directory (stamped or raw Path; validation always runs).
    protected : Iterable[Path], optional
        Input paths that must survive the removal.

    Raises
    ------
    FilesystemError
        If validation fails or the removal itself raises ``OSError``.

    Notes
    -----
    If the path does not exist, the function is a no-op.
    """
    validated = create_safe_output_path(Path(safe_path), protected)
    if not validated.exists():
        logger.debug("Path '%s' does not exist; nothing to remove.", validated)
        return
    logger.info("Removing previous output: %s", validated)
    try:
        shutil.rmtree(validated)
    except OSError as exc:
        raise FilesystemError(
            f"Could not remove '{validated}': {exc}", context={"path": str(validated)}
        ) from exc


__all__ = ["create_safe_output_path", "safe_rmtree"]
