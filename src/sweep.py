"""全ての L 字形について最短手数を求め、結果行列を組み立てるモジュール"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from src.board_types import ResultMatrix
    from src.seeker import PathSeeker
else:
    try:
        # パッケージとして実行された場合の相対インポート
        from .board_types import ResultMatrix
        from .seeker import PathSeeker
    except ImportError:  # pragma: no cover - スクリプト実行時のフォールバック
        from board_types import ResultMatrix
        from seeker import PathSeeker

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """ログ出力の設定を行う関数

    ``logging.basicConfig`` を使ってフォーマットと出力レベルを
    まとめて設定します。

    :param level: 表示するログの重要度。``logging.INFO`` などを指定
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def count_shapes(n: int) -> int:
    """サイズ n の盤面で調べる L 字形 (k <= l) の個数を返す"""
    return sum(n - k for k in range(1, n))


def run_sweep(
    n: int, *, return_stats: bool = False
) -> ResultMatrix | tuple[ResultMatrix, Dict[str, float]]:
    """1 <= k <= l <= n-1 の全 L 字形で探索し、対称な結果行列を返す

    (k, l) と (l, k) は同じ動きなので探索は片側だけ行い、
    結果を両方の位置に書き込む。

    :param n: 盤面サイズ。範囲チェックは呼び出し側で済ませておく
    :param return_stats: True なら探索回数などの統計も返す
    :return: (n-1)x(n-1) の行列。到達不能は -1
    """

    start = time.perf_counter()
    logger.info("探索開始: %dx%d", n, n)

    matrix: List[List[int]] = [[0 for _ in range(n - 1)] for _ in range(n - 1)]
    seeker = PathSeeker(n)
    searches = 0
    expanded = 0
    for k in range(1, n):
        for l in range(k, n):  # noqa: E741
            seeker.reset(k, l)
            moves = seeker.search()
            matrix[k - 1][l - 1] = moves
            matrix[l - 1][k - 1] = moves
            searches += 1
            expanded += seeker.expanded
            logger.debug(
                "KnightL(%d, %d): %d 手 (展開 %d マス)", k, l, moves, seeker.expanded
            )

    elapsed = time.perf_counter() - start
    logger.info("探索完了: %d 通り %.3f 秒", searches, elapsed)
    if return_stats:
        stats: Dict[str, float] = {
            "searches": searches,
            "expanded": expanded,
            "elapsedMs": elapsed * 1000.0,
        }
        return matrix, stats
    return matrix


__all__ = ["setup_logging", "count_shapes", "run_sweep"]
