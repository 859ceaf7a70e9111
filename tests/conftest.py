"""Test bootstrap: ensure the project root is on sys.path and share fixtures.

This allows absolute imports like `modules.dungeon.gen` and `config.config_loader`
without installing the project.
"""
import os
import sys

import pytest

PACKAGE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from modules.dungeon.gen import GenerationConfig, get_rng  # noqa: E402
from modules.dungeon.grid import TileGrid  # noqa: E402


@pytest.fixture
def config():
    return GenerationConfig()


@pytest.fixture
def rng():
    return get_rng(1234)


@pytest.fixture
def grid():
    return TileGrid()
