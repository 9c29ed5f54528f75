"""Junk filename classification.

Every name is checked against ``JUNK_PATTERNS``, the single table of known
junk artifacts. Matching is case-sensitive and applies to the base filename
only: ``Thumbs.db`` is junk, ``thumbs.db`` is not.
"""

from __future__ import annotations

import re

from rmjunk.models.junk_pattern import JunkPattern


def _pattern(name: str, expr: str, description: str) -> JunkPattern:
    return JunkPattern(name=name, regex=re.compile(expr), description=description)


JUNK_PATTERNS: tuple[JunkPattern, ...] = (
    _pattern("npm-debug.log", r"^npm-debug\.log$", "npm crash log"),
    _pattern("*.swp", r"^\..*\.swp$", "Vim swap file"),
    # macOS
    _pattern(".DS_Store", r"^\.DS_Store$", "Finder folder metadata"),
    _pattern(".AppleDouble", r"^\.AppleDouble$", "AppleDouble resource fork directory"),
    _pattern(".LSOverride", r"^\.LSOverride$", "Launch Services override"),
    _pattern("Icon\\r", r"^Icon\r$", "Custom folder icon"),
    _pattern("._*", r"^\._.*", "AppleDouble sidecar file"),
    _pattern(".Spotlight-V100", r"^\.Spotlight-V100$", "Spotlight index"),
    _pattern(".Trashes", r"^\.Trashes$", "Per-volume trash"),
    _pattern("__MACOSX", r"^__MACOSX$", "Resource forks extracted from a zip archive"),
    # Editors
    _pattern("*~", r"~$", "Editor backup file"),
    # Windows
    _pattern("Thumbs.db", r"^Thumbs\.db$", "Explorer thumbnail cache"),
    _pattern("ehthumbs.db", r"^ehthumbs\.db$", "Media Center thumbnail cache"),
    _pattern("desktop.ini", r"^[Dd]esktop\.ini$", "Explorer folder settings"),
    # Synology
    _pattern("@eaDir", r"@eaDir$", "Synology extended attribute directory"),
)


def match_junk(name: str) -> JunkPattern | None:
    """Return the first junk pattern matching ``name``, or None."""
    for pattern in JUNK_PATTERNS:
        if pattern.matches(name):
            return pattern
    return None


def is_junk(name: str) -> bool:
    """Whether ``name`` is a known junk filename."""
    return match_junk(name) is not None


def is_not_junk(name: str) -> bool:
    return not is_junk(name)
