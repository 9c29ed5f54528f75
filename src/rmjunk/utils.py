"""Shared utility functions."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

log = logging.getLogger(__name__)


def remove_path(path: Path, *, is_dir: bool) -> None:
    """Remove a single entry, a whole subtree when ``is_dir`` is set.

    ``is_dir`` must come from a non-following type check so that a symlink
    to a directory is unlinked instead of having its target emptied.

    Raises:
        OSError: if the entry (or part of the subtree) cannot be removed.
    """
    if is_dir:
        shutil.rmtree(path)
    else:
        path.unlink()
    log.debug("Removed %s", path)
