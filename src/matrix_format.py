"""結果行列をテキストに整形するモジュール"""

from __future__ import annotations

from typing import List, Sequence


def matrix_to_ascii(matrix: Sequence[Sequence[int]]) -> str:
    """列ごとに幅をそろえ、行の両端に ``|`` を付けた文字列を返す"""

    if not matrix:
        return ""
    cols = len(matrix[0])
    # -1 も含めて列内で最も長い値の桁数に合わせる
    widths = [max(len(str(row[c])) for row in matrix) for c in range(cols)]

    lines: List[str] = []
    for row in matrix:
        line = " |"
        for c, value in enumerate(row):
            line += str(value).rjust(widths[c] + 1)
        line += " |"
        lines.append(line)
    return "\n".join(lines)


__all__ = ["matrix_to_ascii"]
