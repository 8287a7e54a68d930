"""
どこで: `engine.core.tuples`。
何を: 同次座標 4 成分の値型 `Tuple` と、点/ベクトルの生成関数 `point()` / `vector()`。
なぜ: 変換行列・レイ・デモの全てが共有する最小の幾何値型を 1 か所に定義するため。

データモデル（不変条件）:
- `w == 1.0` は点、`w == 0.0` はベクトル。その他の `w` も表現はできる
  （点 + 点 は `w == 2` になる）が、意味は持たない。
- 不変（frozen）。すべての演算は新しいインスタンスを返す。
- `==` は成分ごとの近似比較（`engine.core.approx`）。近似等価なので hash は提供しない。

使用例:
    p = point(1, 2, 3)
    v = vector(4, 5, 6)
    q = p + v * 0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .approx import almost_equal


@dataclass(frozen=True, slots=True, eq=False)
class Tuple:
    """同次座標 `(x, y, z, w)`。"""

    x: float
    y: float
    z: float
    w: float

    # ── ファクトリ ───────────────────
    @classmethod
    def point(cls, x: float, y: float, z: float) -> "Tuple":
        return cls(float(x), float(y), float(z), 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> "Tuple":
        return cls(float(x), float(y), float(z), 0.0)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Tuple":
        """長さ 4 の配列から生成する。形状不正は `ValueError`。"""
        a = np.asarray(arr, dtype=np.float64)
        if a.shape != (4,):
            raise ValueError(f"Tuple には長さ 4 の 1 次元配列が必要です: {a.shape}")
        return cls(float(a[0]), float(a[1]), float(a[2]), float(a[3]))

    # ── 種別判定 ─────────────────────
    def is_point(self) -> bool:
        """`w == 1.0` の厳密比較。演算後の値では当てにしないこと。"""
        return self.w == 1.0

    def is_vector(self) -> bool:
        """`w == 0.0` の厳密比較。"""
        return self.w == 0.0

    # ── 算術（すべて純粋） ───────────
    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> "Tuple":
        if isinstance(scalar, Tuple):
            return NotImplemented
        s = float(scalar)
        return Tuple(self.x * s, self.y * s, self.z * s, self.w * s)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tuple":
        # 0 除算は特別扱いしない（ZeroDivisionError がそのまま伝播する）
        s = float(scalar)
        return Tuple(self.x / s, self.y / s, self.z / s, self.w / s)

    def magnitude(self) -> float:
        """4 成分すべて（w を含む）のユークリッドノルム。"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Tuple":
        """各成分を大きさで割る。ゼロタプルは NaN 成分になる（例外にはしない）。"""
        m = self.magnitude()
        if m == 0.0:
            nan = float("nan")
            return Tuple(nan, nan, nan, nan)
        return Tuple(self.x / m, self.y / m, self.z / m, self.w / m)

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        """3 次元の外積。入力の w に関わらず結果はベクトル（w=0）。"""
        return Tuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # ── 変換/比較 ─────────────────────
    def as_array(self) -> np.ndarray:
        """`(x, y, z, w)` の float64 配列（新規確保）。"""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            almost_equal(self.x, other.x)
            and almost_equal(self.y, other.y)
            and almost_equal(self.z, other.z)
            and almost_equal(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        kind = "point" if self.is_point() else "vector" if self.is_vector() else "tuple"
        return f"Tuple({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g}; {kind})"


def point(x: float, y: float, z: float) -> Tuple:
    """`w=1` の点を返す。"""
    return Tuple.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    """`w=0` のベクトルを返す。"""
    return Tuple.vector(x, y, z)


__all__ = ["Tuple", "point", "vector"]
