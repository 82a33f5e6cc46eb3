"""探索や整形モジュールの関数を公開するパッケージ用モジュール"""

from importlib import import_module
from typing import Any

__all__ = [
    "PathSeeker",
    "MoveShape",
    "run_sweep",
    "count_shapes",
    "matrix_to_ascii",
    "validate_board_size",
    "prompt_board_size",
]


def __getattr__(name: str) -> Any:
    """必要になったタイミングで対象モジュールを読み込む"""

    if name == "PathSeeker":
        module = import_module(".seeker", __name__)
        return getattr(module, name)

    if name == "MoveShape":
        module = import_module(".board_types", __name__)
        return getattr(module, name)

    if name in {"run_sweep", "count_shapes"}:
        module = import_module(".sweep", __name__)
        return getattr(module, name)

    if name == "matrix_to_ascii":
        module = import_module(".matrix_format", __name__)
        return getattr(module, name)

    if name in {"validate_board_size", "prompt_board_size"}:
        module = import_module(".validator", __name__)
        return getattr(module, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name}")
