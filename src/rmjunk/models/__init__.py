"""rmjunk data models."""

from rmjunk.models.junk_pattern import JunkPattern
from rmjunk.models.traversal import RemovalResult, TraversalConfig

__all__ = [
    "JunkPattern",
    "RemovalResult",
    "TraversalConfig",
]
