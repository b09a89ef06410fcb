"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Iterable, Optional

import pytest

from g13profile.models import Mode, ModeSettings, Profile

BASE_NAV_TOML = """\
[meta]

[mode.base.keys]
g1 = "KEY_A"

[mode.nav.keys]
g1 = ">mode base"
"""


class FakeChannel:
    """In-memory DaemonChannel: replays scripted lines, records sent batches."""

    def __init__(self, lines: Iterable[str] = ()):
        self._lines = list(lines)
        self.batches: list[list[str]] = []
        self.closed = False

    def send(self, lines: Iterable[str]) -> None:
        self.batches.append(list(lines))

    def read_line(self) -> Optional[str]:
        if not self._lines:
            return None
        return self._lines.pop(0)

    def close(self) -> None:
        self.closed = True

    @property
    def sent(self) -> list[str]:
        """All lines sent, flattened."""
        return [line for batch in self.batches for line in batch]


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_profile(temp_dir):
    """Write a profile file into temp_dir and return its path."""

    def _write(name: str, content: str) -> Path:
        path = temp_dir / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def base_nav_profile():
    """Two modes, no startingMode, default color."""
    return Profile(
        modes={
            "base": Mode(keys={"g1": "KEY_A"}),
            "nav": Mode(keys={"g1": ">mode base"}),
        }
    )


@pytest.fixture
def three_mode_profile():
    """Three modes in a fixed order for relative switching."""
    return Profile(
        modes={
            "one": Mode(keys={"g1": "KEY_1"}),
            "two": Mode(keys={"g1": "KEY_2"}, settings=ModeSettings(rgb=[0, 255, 0])),
            "three": Mode(keys={"g1": "KEY_3"}),
        }
    )


@pytest.fixture
def fake_channel():
    """Factory for FakeChannel with scripted daemon lines."""

    def _make(*lines: str) -> FakeChannel:
        return FakeChannel(lines)

    return _make


@pytest.fixture
def base_nav_toml():
    """TOML text of the two-mode base/nav profile."""
    return BASE_NAV_TOML
