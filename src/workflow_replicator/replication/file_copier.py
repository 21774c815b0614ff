"""
Staging of replicated files into a target working copy.
"""

import shutil
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Union

from ..error_handling import FileCopyError

logger = logging.getLogger(__name__)


def _copy_path(source: Path, target: Path) -> None:
    """Copy a file or a directory tree, creating parents and overwriting."""
    target.parent.mkdir(parents=True, exist_ok=True)

    if source.is_dir():
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        shutil.copy2(source, target)


def copy_changed_files(
    paths: Iterable[str],
    destination: Union[str, Path],
    source_root: Optional[Union[str, Path]] = None,
    max_workers: Optional[int] = None
) -> None:
    """
    Copy files from the workspace into ``destination`` keeping their relative paths.

    All copies are started before any result is awaited. The first failing
    copy, in the order of ``paths``, is raised; copies that already succeeded
    stay in place.

    Args:
        paths: Relative paths of the files to copy
        destination: Root of the target working copy
        source_root: Root the paths are relative to, defaults to the current directory
        max_workers: Thread pool size

    Raises:
        FileCopyError: If any copy fails
    """
    source_root = Path(source_root) if source_root else Path.cwd()
    destination = Path(destination)
    paths = list(paths)

    if not paths:
        return

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            (path, executor.submit(_copy_path, source_root / path, destination / path))
            for path in paths
        ]

    for path, future in futures:
        error = future.exception()
        if error is not None:
            raise FileCopyError(
                f"Failed to copy {path}",
                source=str(source_root / path),
                destination=str(destination / path),
                cause=error
            ) from error

    logger.info(f"Copied {len(paths)} files to {destination}")
