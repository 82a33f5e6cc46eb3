from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))
from src import validator  # noqa: E402


@pytest.mark.parametrize("value", [2, 50, "7", " 12 "])
def test_valid_sizes(value: int | str) -> None:
    assert validator.validate_board_size(value) == int(value)


@pytest.mark.parametrize("value", [1, 0, -3, 51, "abc", "", "2.5", True, 3.5, 4.0, None])
def test_invalid_sizes(value: object) -> None:
    with pytest.raises(ValueError):
        validator.validate_board_size(value)


def test_prompt_repeats_until_valid() -> None:
    answers = iter(["x", "1", "60", "6"])
    printed = []
    n = validator.prompt_board_size(lambda _: next(answers), printed.append)
    assert n == 6
    assert printed[0] == validator.FIRST_PROMPT
    assert printed[1:] == [validator.RETRY_PROMPT] * 3
