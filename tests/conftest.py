"""
Pytest configuration and fixtures.
"""

from pathlib import Path
from typing import Callable

import pytest


EXAMPLE_LNX = """\
interface if0 10.0.0.2/24 127.0.0.1:5001
neighbor 10.0.0.1 at 127.0.0.1:5000 via if0
routing rip
rip advertise-to 10.0.0.1
"""


@pytest.fixture
def example_source() -> str:
    """Minimal host configuration from the format description."""
    return EXAMPLE_LNX


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example config shipped with the repository."""
    return Path(__file__).parent.parent / "config.example.lnx"


@pytest.fixture
def write_lnx(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing lnx text to a file in a temporary directory."""

    def _write(source: str, name: str = "node.lnx") -> Path:
        path = tmp_path / name
        path.write_text(source)
        return path

    return _write
