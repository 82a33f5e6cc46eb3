"""共通定数を定義するモジュール"""

from __future__ import annotations

from typing import Tuple

# 対話入力で受け付ける盤面サイズの範囲 (1 < n <= 50)
# 探索処理自体はこの上限に依存しない
MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 50

# ゴールに到達できない L 字形を表す値
UNREACHABLE = -1

# (k, l) から 8 方向のオフセットを作るための符号パターン
# (swap, 行方向の符号, 列方向の符号) の順で、探索時の展開順もこの並びに従う
MOVE_SIGNS: Tuple[Tuple[bool, int, int], ...] = (
    (False, 1, 1),
    (False, 1, -1),
    (False, -1, 1),
    (False, -1, -1),
    (True, 1, 1),
    (True, 1, -1),
    (True, -1, 1),
    (True, -1, -1),
)


__all__ = ["MIN_BOARD_SIZE", "MAX_BOARD_SIZE", "UNREACHABLE", "MOVE_SIGNS"]
