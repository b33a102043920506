"""Recursive directory listing for the source asset trees."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .errors import WalkError

logger = logging.getLogger(__name__)


def get_all_paths(root: Union[str, Path], paths: Optional[List[str]] = None) -> List[str]:
    """Collect every file under ``root``, depth first.

    Entries of a directory are visited in name order. Symlinked directories
    are not followed and show up as plain entries.

    Args:
        root: Directory to walk
        paths: Accumulator to append to; a new list is used when omitted

    Returns:
        List of absolute file paths

    Raises:
        WalkError: a directory could not be listed
    """
    if paths is None:
        paths = []

    root = Path(root).absolute()
    try:
        entries = sorted(root.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise WalkError(f"Cannot read directory {root}: {e}") from e

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            get_all_paths(entry, paths)
        else:
            paths.append(str(entry))

    logger.debug(f"Walked {root}: {len(paths)} files so far")
    return paths
