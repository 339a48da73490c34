"""
Temporary directory utilities.

Each export and import call works in a freshly created directory below
the configured work directory:

    - export staging for per-type CSV files
    - import sandboxes for extracted archive entries

Cleanup is best-effort and never masks the error of the call it follows.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def ensure_temp_dir(
    prefix: str = "csvpack_",
    parent: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Create and return a fresh temporary directory.

    Parameters
    ----------
    prefix : str
        Prefix for the directory name. Defaults to "csvpack_".
    parent : Optional[str | Path]
        Directory to create it in (created if missing). Defaults to the
        system temp root.

    Returns
    -------
    Path
        Newly created directory, already resolved.

    Caller is responsible for invoking cleanup_temp_dir() when finished.
    """
    if parent is not None:
        Path(parent).mkdir(parents=True, exist_ok=True)
        return Path(tempfile.mkdtemp(prefix=prefix, dir=str(parent))).resolve()
    return Path(tempfile.mkdtemp(prefix=prefix)).resolve()


def cleanup_temp_dir(path: Optional[Path]) -> None:
    """
    Remove a temporary directory and all its contents.

    Parameters
    ----------
    path : Optional[Path]
        Directory to remove. If None, does nothing.
    """
    if not path:
        return

    shutil.rmtree(path, ignore_errors=True)
    if Path(path).exists():
        logger.warning("Could not fully remove temporary directory %s", path)


__all__ = [
    "ensure_temp_dir",
    "cleanup_temp_dir",
]
