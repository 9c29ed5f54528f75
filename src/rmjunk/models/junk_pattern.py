"""Junk pattern dataclass."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class JunkPattern:
    """One entry of the junk table.

    ``regex`` is searched against a base filename, never a full path.
    Anchors are part of the expression itself.
    """

    name: str
    regex: re.Pattern[str]
    description: str = ""

    def matches(self, name: str) -> bool:
        return self.regex.search(name) is not None
