"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console
from rmds.cleaner.reporter import Reporter
from rmds.core.theme import get_theme


@dataclass
class CapturedOutput:
    """Stdout/stderr buffers behind a Reporter built for tests."""

    out: io.StringIO
    err: io.StringIO

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()

    def console(self, buffer: io.StringIO) -> Console:
        return Console(file=buffer, theme=get_theme(), width=200, color_system=None)

    def reporter(self, *, quiet: bool = False, verbose: bool = False) -> Reporter:
        return Reporter(
            quiet=quiet,
            verbose=verbose,
            out=self.console(self.out),
            err=self.console(self.err),
        )


@pytest.fixture
def captured() -> CapturedOutput:
    """Buffers for building Reporters whose output can be inspected."""
    return CapturedOutput(out=io.StringIO(), err=io.StringIO())


@pytest.fixture
def ds_tree(tmp_path: Path) -> Path:
    """Create a small tree with .DS_Store files at depths 0, 1 and 2.

    Layout::

        root/.DS_Store
        root/keep.txt
        root/a/.DS_Store
        root/a/other.c
        root/a/b/.DS_Store
    """
    root = tmp_path / "root"
    (root / "a" / "b").mkdir(parents=True)
    (root / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    (root / "keep.txt").write_text("keep me")
    (root / "a" / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    (root / "a" / "other.c").write_text("int main(void) { return 0; }\n")
    (root / "a" / "b" / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    return root


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty directory so user settings never leak in."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home

