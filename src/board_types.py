"""盤面や L 字形を表す共通の型をまとめたモジュール

Python 標準ライブラリの ``types`` モジュールと名前が衝突しないよう、
このファイル名を ``board_types`` としている。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

try:
    # パッケージとして実行された場合の相対インポート
    from .constants import MOVE_SIGNS
except ImportError:  # pragma: no cover - スクリプト実行時のフォールバック
    from constants import MOVE_SIGNS

# 盤面上のマス (row, col)
Square = Tuple[int, int]

# (n-1)x(n-1) の最短手数行列。到達不能は -1
ResultMatrix = List[List[int]]


@dataclass(frozen=True)
class MoveShape:
    """KnightL(k, l) の L 字形を表すデータクラス"""

    k: int
    l: int  # noqa: E741

    def offsets(self) -> List[Square]:
        """8 方向のオフセットを決まった順番で返す"""
        result: List[Square] = []
        for swap, dr, dc in MOVE_SIGNS:
            a, b = (self.l, self.k) if swap else (self.k, self.l)
            result.append((dr * a, dc * b))
        return result


__all__ = ["Square", "ResultMatrix", "MoveShape"]
