"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def snapshot(root: Path) -> list[str]:
    """Every path under root, relative and sorted."""
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


@pytest.fixture
def scenario_tree(tmp_path):
    """.DS_Store, photo.jpg, and sub/Thumbs.db."""
    root = tmp_path / "root"
    root.mkdir()
    (root / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    (root / "photo.jpg").write_bytes(b"\xff\xd8\xff" + b"j" * 100)
    sub = root / "sub"
    sub.mkdir()
    (sub / "Thumbs.db").write_bytes(b"t" * 64)
    return root


@pytest.fixture
def junk_tree(scenario_tree):
    """Scenario tree plus deeper levels and junk of several kinds."""
    root = scenario_tree
    deeper = root / "sub" / "deeper"
    deeper.mkdir()
    (deeper / "._photo.jpg").write_bytes(b"a" * 10)
    (deeper / "desktop.ini").write_text("[.ShellClassInfo]\n")
    (deeper / "notes.txt").write_text("keep me\n")
    (deeper / "notes.txt~").write_text("keep me?\n")

    spotlight = root / ".Spotlight-V100"
    (spotlight / "Store-V2").mkdir(parents=True)
    (spotlight / "Store-V2" / "index").write_bytes(b"i" * 200)
    (spotlight / ".DS_Store").write_bytes(b"d")

    (root / "docs").mkdir()
    (root / "docs" / "report.pdf").write_bytes(b"%PDF")
    return root
