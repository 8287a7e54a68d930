"""
どこで: `engine.core.ray`。
何を: 原点（点）と方向（ベクトル）からなるパラメトリック直線 `Ray`。
なぜ: 交差判定など将来の処理が共有する、最小で検証済みのレイ表現を提供するため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .matrix import Matrix
from .transform import Transform
from .tuples import Tuple


@dataclass(frozen=True, slots=True)
class Ray:
    """`origin + direction * t` で表されるレイ（不変）。

    生成時に `origin.is_point()` と `direction.is_vector()` を検証し、
    満たさなければ `ValueError` で即座に失敗する。
    """

    origin: Tuple
    direction: Tuple

    # 成分の Tuple が近似等価で hash を持たないため、Ray も hash しない
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Tuple) or not self.origin.is_point():
            raise ValueError(f"Ray の origin は点（w=1）である必要があります: {self.origin!r}")
        if not isinstance(self.direction, Tuple) or not self.direction.is_vector():
            raise ValueError(
                f"Ray の direction はベクトル（w=0）である必要があります: {self.direction!r}"
            )

    def position(self, t: float) -> Tuple:
        """距離 `t` の位置。負の `t` は後方への延長、`t=0` は origin。"""
        return self.origin + self.direction * t

    def transform(self, m: Matrix | Transform) -> "Ray":
        """4×4 行列（または 3D Transform）で原点と方向を変換した新しいレイ。"""
        if isinstance(m, Transform):
            if m.dims != 3:
                raise ValueError("Ray の変換には 3D Transform が必要です")
            m = m.matrix()
        return Ray(m @ self.origin, m @ self.direction)  # type: ignore[arg-type]


__all__ = ["Ray"]
