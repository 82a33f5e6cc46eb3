from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))
from src import cli  # noqa: E402


def test_main_with_argument(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:2] == [" | 2 4 |", " | 4 1 |"]
    assert out[2].startswith("Total elapsed time (ms): ")


def test_main_interactive(capsys: pytest.CaptureFixture[str]) -> None:
    answers = iter(["hello", "51", "2"])
    assert cli.main([], input_func=lambda _: next(answers)) == 0
    out = capsys.readouterr().out
    assert "Please input the size n of the chessboard" in out
    assert out.count("Your input is NOT valid!") == 2
    assert " | 1 |" in out


def test_main_rejects_invalid_argument() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["1"])
    assert excinfo.value.code == 2
