"""Path normalization shared by the inspectors."""

import os
from typing import Iterable, Set


def absolute_path(path) -> str:
    """Normalized absolute form used as the deduplication key."""
    return os.path.abspath(os.fspath(path))


def existing_paths(paths: Iterable) -> Set[str]:
    """Absolute forms of the given paths that exist on disk."""
    return {absolute_path(p) for p in paths if p and os.path.exists(p)}
