# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the top-level modules import without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def classic_puzzle():
    return [
        2, 0, 7, 0, 1, 0, 5, 0, 8,
        0, 0, 0, 6, 7, 8, 0, 0, 0,
        8, 0, 0, 0, 0, 0, 0, 0, 6,
        0, 7, 0, 9, 0, 6, 0, 5, 0,
        4, 9, 0, 0, 0, 0, 0, 1, 3,
        0, 3, 0, 4, 0, 1, 0, 2, 0,
        5, 0, 0, 0, 0, 0, 0, 0, 1,
        0, 0, 0, 2, 9, 4, 0, 0, 0,
        3, 0, 6, 0, 8, 0, 4, 0, 9,
    ]


@pytest.fixture
def s_doku_puzzle():
    return [
        4, 0, 0, 0, 6, 0, 0, 0, 3,
        0, 9, 0, 1, 0, 7, 0, 2, 0,
        3, 0, 0, 0, 0, 0, 0, 0, 8,
        0, 8, 0, 0, 0, 0, 0, 4, 0,
        5, 0, 0, 0, 0, 0, 0, 0, 2,
        0, 1, 0, 0, 0, 0, 0, 7, 0,
        7, 0, 0, 0, 0, 0, 0, 0, 1,
        0, 6, 0, 0, 0, 0, 0, 3, 0,
        1, 0, 0, 0, 2, 0, 0, 0, 6,
    ]


@pytest.fixture
def s_doku_2_puzzle():
    return [
        0, 0, 0, 0, 0, 3, 0, 0, 0,
        0, 0, 0, 0, 6, 0, 0, 0, 0,
        0, 0, 0, 4, 0, 0, 0, 0, 0,
        0, 0, 8, 0, 0, 0, 0, 0, 0,
        4, 0, 0, 2, 0, 0, 0, 0, 0,
        0, 0, 0, 9, 0, 0, 0, 0, 0,
        0, 0, 0, 5, 0, 0, 0, 0, 0,
        0, 0, 0, 0, 7, 0, 8, 0, 0,
        0, 0, 0, 0, 0, 1, 0, 0, 0,
    ]


@pytest.fixture
def solved_grid():
    # Each row is the previous one shifted; a valid classic Sudoku.
    return [(3 * (r % 3) + r // 3 + c) % 9 + 1 for r in range(9) for c in range(9)]
