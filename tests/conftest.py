"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[1]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def save_image(path: Path, size=(64, 64), color=(255, 0, 0, 255), mode="RGBA", format=None) -> Path:
    Image.new(mode, size, color[: len(mode)]).save(path, format=format)
    return path


@pytest.fixture
def square_png(tmp_path):
    """A 300x300 opaque red PNG."""
    return save_image(tmp_path / "square.png", size=(300, 300))


@pytest.fixture
def tall_png(tmp_path):
    """A 100x200 opaque blue PNG."""
    return save_image(tmp_path / "tall.png", size=(100, 200), color=(0, 0, 255, 255))


@pytest.fixture
def corrupt_png(tmp_path):
    """A noisy PNG cut off halfway through its image data."""
    full = tmp_path / "full.png"
    Image.frombytes("RGB", (64, 64), os.urandom(64 * 64 * 3)).save(full)
    data = full.read_bytes()
    path = tmp_path / "corrupt.png"
    path.write_bytes(data[: len(data) // 2])
    return path
