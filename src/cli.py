"""盤面サイズを受け取り、KnightL の結果行列を表示するスクリプト"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from src.matrix_format import matrix_to_ascii
    from src.sweep import run_sweep, setup_logging
    from src.validator import prompt_board_size, validate_board_size
else:
    try:
        # パッケージ実行時は相対インポート
        from .matrix_format import matrix_to_ascii
        from .sweep import run_sweep, setup_logging
        from .validator import prompt_board_size, validate_board_size
    except ImportError:  # pragma: no cover - スクリプト実行時のフォールバック
        from matrix_format import matrix_to_ascii
        from sweep import run_sweep, setup_logging
        from validator import prompt_board_size, validate_board_size


def _board_size(text: str) -> int:
    """argparse 用の型変換関数"""
    try:
        return validate_board_size(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="KnightL(k, l) が右下から左上へ移動する最短手数を一覧表示します"
    )
    parser.add_argument(
        "n",
        type=_board_size,
        nargs="?",
        default=None,
        help="盤面サイズ (省略時は対話入力)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="ログの出力レベル",
    )
    return parser


# コマンドラインから実行される関数
def main(
    argv: Optional[List[str]] = None,
    *,
    input_func: Callable[[str], str] = input,
) -> int:
    """引数を解釈して全 L 字形を探索し、結果と経過時間を表示する"""

    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    n = args.n if args.n is not None else prompt_board_size(input_func)
    matrix, stats = run_sweep(n, return_stats=True)
    print(matrix_to_ascii(matrix))
    print(f"Total elapsed time (ms): {int(stats['elapsedMs'])}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
