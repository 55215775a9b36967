"""Shared pytest fixtures for the tricheck test suite.

Fixtures:
    circle_config: default PathConfig with a circular box
    square_config: default PathConfig with a rounded-rectangle box (size 24)
    big_square_config: size 100 / line 2 / corner 10 rounded rectangle
    isolated_cwd: CWD inside tmp_path so no tricheck_settings.json leaks in

Markers:
    qt: test needs PySide6
"""

import os
import sys
from pathlib import Path

import pytest

# Repo root importable without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from tricheck.core.models import BoxType, MarkType, PathConfig  # noqa: E402


@pytest.fixture
def circle_config():
    return PathConfig(size=24.0, box_line_width=1.0, box_type=BoxType.CIRCLE)


@pytest.fixture
def square_config():
    return PathConfig(
        size=24.0,
        box_line_width=1.0,
        corner_radius=3.0,
        box_type=BoxType.ROUNDED_RECT,
        mark_type=MarkType.CHECKMARK,
    )


@pytest.fixture
def big_square_config():
    return PathConfig(size=100.0, box_line_width=2.0, corner_radius=10.0, box_type=BoxType.ROUNDED_RECT)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("TRICHECK_"):
            monkeypatch.delenv(key, raising=False)
    return tmp_path
