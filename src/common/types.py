"""
どこで: `common` の型定義。
何を: Vec3/RGB8/MatrixLike などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from typing import Sequence

Number = float | int
Vec3 = tuple[float, float, float]
RGB8 = tuple[int, int, int]
MatrixLike = Sequence[Sequence[Number]]


__all__ = ["Number", "Vec3", "RGB8", "MatrixLike"]
