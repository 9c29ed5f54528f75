"""Junk removal traversal engine."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from rmjunk.core.classifier import match_junk
from rmjunk.models.traversal import RemovalResult, TraversalConfig
from rmjunk.utils import remove_path

log = logging.getLogger(__name__)

RemovedCallback = Callable[[str], None]
ErrorCallback = Callable[[str, OSError, str], None]  # (path, error, "removal" | "reading")


class JunkRemover:
    """Walks a directory tree depth-first and removes junk entries.

    Children are visited in the order ``os.scandir`` yields them, which is
    not stable across platforms or filesystems. Symbolic links are never
    followed; a link is only checked by its own name.
    """

    def __init__(
        self,
        config: TraversalConfig,
        on_removed: RemovedCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self.config = config
        self._on_removed = on_removed
        self._on_error = on_error

    def run(self, directory: Path | str) -> RemovalResult:
        """Remove junk under ``directory``.

        Reported paths are ``directory`` joined with entry names, spelled
        the way ``directory`` was given (``./``, trailing slash and all).

        Args:
            directory: Directory to clean. Must exist and be readable.

        Returns:
            Removed paths and per-entry failures.

        Raises:
            OSError: if ``directory`` itself cannot be listed.
        """
        result = RemovalResult(dry_run=self.config.dry_run)
        self._remove_in_dir(os.fspath(directory), result, top=True)
        log.info(
            "Finished %s: %d removed, %d error(s)%s",
            directory,
            len(result.removed),
            len(result.errors),
            " (dry run)" if self.config.dry_run else "",
        )
        return result

    def _remove_in_dir(self, directory: str, result: RemovalResult, *, top: bool = False) -> None:
        log.debug("Scanning %s", directory)
        try:
            it = os.scandir(directory)
        except OSError as e:
            if top:
                raise
            self._report_unreadable(directory, e, result)
            return

        with it:
            while True:
                # Only listing failures are caught here, never callback errors
                try:
                    entry = next(it, None)
                    if entry is None:
                        break
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError as e:
                    if top:
                        raise
                    self._report_unreadable(directory, e, result)
                    return

                pattern = match_junk(entry.name)
                if pattern is not None:
                    log.debug("Matched %s: %s", pattern.name, entry.path)
                    self._remove_entry(entry.path, is_dir, result)
                elif is_dir and self.config.recursive:
                    self._remove_in_dir(entry.path, result)

    def _remove_entry(self, path: str, is_dir: bool, result: RemovalResult) -> None:
        if not self.config.dry_run:
            try:
                remove_path(Path(path), is_dir=is_dir)
            except OSError as e:
                log.debug("Failed to remove %s: %s", path, e)
                self._report_error(path, e, "removal", result)
                return

        result.removed.append(path)
        if self._on_removed:
            self._on_removed(path)

    def _report_unreadable(self, directory: str, error: OSError, result: RemovalResult) -> None:
        log.debug("Cannot read %s: %s", directory, error)
        self._report_error(directory, error, "reading", result)

    def _report_error(self, path: str, error: OSError, operation: str, result: RemovalResult) -> None:
        result.errors.append(f"{path}: {error}")
        if self._on_error:
            self._on_error(path, error, operation)


def remove_junk(
    directory: Path | str,
    config: TraversalConfig,
    *,
    on_removed: RemovedCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> RemovalResult:
    """Remove junk entries from ``directory`` according to ``config``.

    Deletion failures and unreadable subdirectories are reported through
    ``on_error`` and the returned result; they never stop the traversal.
    Only a failure to list ``directory`` itself is raised.
    """
    remover = JunkRemover(config, on_removed=on_removed, on_error=on_error)
    return remover.run(directory)
