import sys, os

import pytest

# Ensure the repository root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tetro_board import Board
from tetro_config import CONFIG


@pytest.fixture
def board():
    return Board(16, 10)


@pytest.fixture
def config():
    """Restore CONFIG after tests that tweak it."""
    saved = dict(CONFIG)
    yield CONFIG
    CONFIG.clear()
    CONFIG.update(saved)
