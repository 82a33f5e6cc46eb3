import logging
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))
from src import sweep  # noqa: E402


def test_sample_board() -> None:
    assert sweep.run_sweep(5) == [
        [4, 4, 2, 8],
        [4, 2, 4, 4],
        [2, 4, -1, -1],
        [8, 4, -1, 1],
    ]


def test_two_by_two() -> None:
    assert sweep.run_sweep(2) == [[1]]


@pytest.mark.parametrize("n", [2, 3, 4, 7, 10])
def test_matrix_is_symmetric(n: int) -> None:
    matrix = sweep.run_sweep(n)
    assert len(matrix) == n - 1
    for i in range(n - 1):
        assert len(matrix[i]) == n - 1
        for j in range(n - 1):
            assert matrix[i][j] == matrix[j][i]


def test_search_count() -> None:
    assert sweep.count_shapes(4) == 6
    assert sweep.count_shapes(2) == 1
    _, stats = sweep.run_sweep(4, return_stats=True)
    assert stats["searches"] == 6
    assert stats["expanded"] > 0
    assert stats["elapsedMs"] >= 0.0


def test_debug_log_per_shape(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="src.sweep"):
        sweep.run_sweep(3)
    messages = [r.getMessage() for r in caplog.records]
    assert any("KnightL(1, 2)" in m for m in messages)
    assert sum("KnightL(" in m for m in messages) == 3
