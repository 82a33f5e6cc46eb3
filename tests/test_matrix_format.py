from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))
from src.matrix_format import matrix_to_ascii  # noqa: E402


def test_columns_padded_to_widest_entry() -> None:
    text = matrix_to_ascii([[4, -1], [-1, 10]])
    assert text.splitlines() == [" |  4 -1 |", " | -1 10 |"]


def test_single_digit_matrix() -> None:
    assert matrix_to_ascii([[2, 4], [4, 1]]) == " | 2 4 |\n | 4 1 |"


def test_empty_matrix() -> None:
    assert matrix_to_ascii([]) == ""
