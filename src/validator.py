"""盤面サイズの入力を検証するモジュール"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from src.constants import MAX_BOARD_SIZE, MIN_BOARD_SIZE
else:
    try:
        # パッケージとして実行された場合の相対インポート
        from .constants import MAX_BOARD_SIZE, MIN_BOARD_SIZE
    except ImportError:  # pragma: no cover - スクリプト実行時のフォールバック
        from constants import MAX_BOARD_SIZE, MIN_BOARD_SIZE

FIRST_PROMPT = (
    f"Please input the size n of the chessboard "
    f"(n*n, {MIN_BOARD_SIZE - 1}<n<={MAX_BOARD_SIZE}): "
)
RETRY_PROMPT = (
    f"Your input is NOT valid! Please input the size n, "
    f"s.t. {MIN_BOARD_SIZE - 1}<n<={MAX_BOARD_SIZE}: "
)


def validate_board_size(value: object) -> int:
    """盤面サイズを整数に変換し、範囲外なら ValueError を送出する"""

    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValueError(f"整数ではありません: {value!r}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("盤面サイズには整数を指定してください")
    if not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
        raise ValueError(
            f"盤面サイズは {MIN_BOARD_SIZE} 以上 {MAX_BOARD_SIZE} 以下にしてください: {value}"
        )
    return value


def prompt_board_size(
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> int:
    """有効な値が入力されるまで盤面サイズを尋ね続ける"""

    output_func(FIRST_PROMPT)
    while True:
        try:
            return validate_board_size(input_func(""))
        except ValueError:
            output_func(RETRY_PROMPT)


__all__ = ["validate_board_size", "prompt_board_size", "FIRST_PROMPT", "RETRY_PROMPT"]
