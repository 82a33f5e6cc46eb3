# KnightL 用の最短手数探索モジュール

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from src.board_types import MoveShape, Square
    from src.constants import UNREACHABLE
else:
    try:
        # パッケージとして実行された場合の相対インポート
        from .board_types import MoveShape, Square
        from .constants import UNREACHABLE
    except ImportError:  # pragma: no cover - スクリプト実行時のフォールバック
        from board_types import MoveShape, Square
        from constants import UNREACHABLE


class SearchStatus(enum.Enum):
    """探索全体の状態"""

    IDLE = "idle"  # まだ reset されていない
    READY = "ready"
    RUNNING = "running"
    SUCCESS = "success"
    EXHAUSTED = "exhausted"


@dataclass
class SearchState:
    """1 回の探索で使う状態を保持するデータクラス"""

    visited: List[List[bool]]
    enqueued: List[List[bool]]
    distance: List[List[int]]
    frontier: Deque[Square] = field(default_factory=deque)


def _init_state(n: int) -> SearchState:
    """n x n の SearchState を初期化して返す"""
    visited = [[False for _ in range(n)] for _ in range(n)]
    enqueued = [[False for _ in range(n)] for _ in range(n)]
    distance = [[0 for _ in range(n)] for _ in range(n)]
    return SearchState(visited, enqueued, distance)


class PathSeeker:
    """右下のマスから左上のマスまでの最短手数を幅優先探索で求めるクラス

    ``reset`` で L 字形を設定し、``search`` で探索を実行する。
    同じインスタンスを L 字形ごとに使い回す前提で、状態は ``reset`` のたびに
    作り直す。n, k, l の範囲チェックは呼び出し側の責任とする。
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self.shape: Optional[MoveShape] = None
        self.state: Optional[SearchState] = None
        self.status = SearchStatus.IDLE
        self.result = UNREACHABLE
        # 直近の探索で展開したマスの数
        self.expanded = 0

    @property
    def start(self) -> Square:
        return (self.n - 1, self.n - 1)

    @property
    def goal(self) -> Square:
        return (0, 0)

    def reset(self, k: int, l: int) -> None:  # noqa: E741
        """L 字形を設定し、探索状態を初期化する"""
        self.shape = MoveShape(k, l)
        self.state = _init_state(self.n)
        self.status = SearchStatus.READY
        self.result = UNREACHABLE
        self.expanded = 0

    def _relax(self, state: SearchState, p: int, q: int, base: int) -> bool:
        """候補マス (p, q) を 1 つ処理し、ゴールに到達したら True を返す"""
        if p < 0 or q < 0 or p >= self.n or q >= self.n:
            return False
        if state.visited[p][q]:
            state.distance[p][q] = min(state.distance[p][q], base + 1)
            return False
        if (p, q) == self.goal:
            state.distance[p][q] = base + 1
            state.visited[p][q] = True
            return True
        if state.enqueued[p][q]:
            # 既にキューにあるマスの手数は増やさない
            state.distance[p][q] = min(state.distance[p][q], base + 1)
        else:
            state.distance[p][q] = base + 1
            state.frontier.append((p, q))
            state.enqueued[p][q] = True
        return False

    def search(self) -> int:
        """幅優先探索を実行して最短手数を返す

        ゴールに到達できない場合は -1 を返す。到達不能は通常の結果であり
        例外は送出しない。

        :return: 最短手数、または -1
        """

        if self.state is None or self.shape is None:
            raise RuntimeError("search の前に reset を呼び出してください")
        if self.status in (SearchStatus.SUCCESS, SearchStatus.EXHAUSTED):
            return self.result

        state = self.state
        offsets = self.shape.offsets()
        self.status = SearchStatus.RUNNING

        sr, sc = self.start
        state.frontier.append((sr, sc))
        state.enqueued[sr][sc] = True

        reached = False
        while state.frontier and not reached:
            x, y = state.frontier.popleft()
            state.visited[x][y] = True
            self.expanded += 1
            base = state.distance[x][y]
            for dx, dy in offsets:
                if self._relax(state, x + dx, y + dy, base):
                    reached = True
                    break

        gr, gc = self.goal
        if state.visited[gr][gc]:
            self.status = SearchStatus.SUCCESS
            self.result = state.distance[gr][gc]
        else:
            self.status = SearchStatus.EXHAUSTED
            self.result = UNREACHABLE
        return self.result


__all__ = ["SearchStatus", "SearchState", "PathSeeker"]
