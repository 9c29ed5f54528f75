"""Traversal configuration and result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TraversalConfig:
    """Flags controlling a junk removal run."""

    recursive: bool = False
    dry_run: bool = False


@dataclass(slots=True)
class RemovalResult:
    """Outcome of a junk removal run.

    In dry-run mode ``removed`` lists what would have been removed. Paths
    keep the spelling of the directory the run was started from.
    """

    dry_run: bool = False
    removed: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
