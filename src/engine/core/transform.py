"""
どこで: `engine.core.transform`。
何を: 2D（3×3 同次）/3D（4×4 同次）の名前付き変換ビルダ `Transform` と、複合変換 `transform_combined()`。
なぜ: 呼び出し側が行列の添字を意識せずに変換を組み立て・合成・逆変換できるようにするため。

合成規約:
- `A @ B` は行列積。`(A @ B @ C) @ p` は C → B → A の順に適用される。
- `A.then(B)` は「A の後に B」を表す糖衣で、`B @ A` と同じ。

2D 変換の適用:
- 3×3 行列を `(x, y, w)` に掛け、`z` はそのまま通す。

逆変換:
- `Transform.inverse()` は特異なら `SingularMatrixError`（`ValueError` 派生）。
  `Matrix.inverse()` は None を返すが、変換として使う側は可逆を前提にしているため
  ここでは黙って None を流さず例外で止める。
"""

from __future__ import annotations

import math

import numpy as np

from common.types import Vec3

from .matrix import Matrix
from .tuples import Tuple


class SingularMatrixError(ValueError):
    """逆変換を要求された変換行列が特異（行列式 ≈ 0）。"""


_AXES = ("x", "y", "z")


class Transform:
    """次元（2 または 3）を伴う変換行列の薄いラッパ（不変）。"""

    __slots__ = ("_matrix", "_dims")

    _matrix: Matrix
    _dims: int

    def __init__(self, matrix: Matrix | object, dims: int = 3) -> None:
        if dims not in (2, 3):
            raise ValueError(f"dims は 2 または 3 である必要があります: {dims}")
        m = matrix if isinstance(matrix, Matrix) else Matrix(matrix)
        size = dims + 1
        if m.shape != (size, size):
            raise ValueError(f"{dims}D 変換には {size}×{size} 行列が必要です: shape={m.shape}")
        self._matrix = m
        self._dims = dims

    # ── ビルダ ───────────────────────
    @classmethod
    def identity(cls, dims: int = 3) -> "Transform":
        return cls(Matrix.identity(dims + 1), dims)

    @classmethod
    def translation(cls, x: float, y: float, z: float | None = None) -> "Transform":
        """平行移動。`z` 省略時は 2D。"""
        if z is None:
            return cls([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]], 2)
        return cls(Matrix.translation(x, y, z), 3)

    @classmethod
    def scaling(cls, x: float, y: float, z: float | None = None) -> "Transform":
        """拡大縮小。`z` 省略時は 2D。"""
        if z is None:
            return cls([[x, 0.0, 0.0], [0.0, y, 0.0], [0.0, 0.0, 1.0]], 2)
        return cls(Matrix.scaling(x, y, z), 3)

    @classmethod
    def rotation(cls, angle: float, axis: str | None = None) -> "Transform":
        """回転（ラジアン、右手系）。`axis` 省略時は 2D の原点回り回転。"""
        if axis is None:
            c, s = math.cos(angle), math.sin(angle)
            return cls([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], 2)
        key = axis.lower()
        if key == "x":
            return cls(Matrix.rotation_x(angle), 3)
        if key == "y":
            return cls(Matrix.rotation_y(angle), 3)
        if key == "z":
            return cls(Matrix.rotation_z(angle), 3)
        raise ValueError(f"axis は {_AXES} のいずれかである必要があります: {axis!r}")

    @classmethod
    def shearing(
        cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> "Transform":
        return cls(Matrix.shearing(xy, xz, yx, yz, zx, zy), 3)

    @classmethod
    def shearing_2d(cls, xy: float, yx: float) -> "Transform":
        return cls([[1.0, xy, 0.0], [yx, 1.0, 0.0], [0.0, 0.0, 1.0]], 2)

    # ── 参照 ─────────────────────────
    @property
    def dims(self) -> int:
        return self._dims

    def matrix(self) -> Matrix:
        """内部の変換行列（不変なのでそのまま返す）。"""
        return self._matrix

    def inverse(self) -> "Transform":
        """逆変換。特異なら `SingularMatrixError`。

        判定は `Matrix.inverse()` と同じ絶対 epsilon なので、極端に小さい拡大縮小
        （行列式が epsilon 未満）も特異として扱われる。
        """
        inv = self._matrix.inverse()
        if inv is None:
            raise SingularMatrixError(f"特異な変換は逆変換できません:\n{self._matrix}")
        return Transform(inv, self._dims)

    # ── 合成/適用 ─────────────────────
    def __matmul__(self, other: "Transform | Tuple") -> "Transform | Tuple":
        if isinstance(other, Tuple):
            return self.apply(other)
        if not isinstance(other, Transform):
            return NotImplemented
        if other._dims != self._dims:
            raise ValueError(f"次元の異なる変換は合成できません: {self._dims}D @ {other._dims}D")
        return Transform(self._matrix @ other._matrix, self._dims)

    def then(self, other: "Transform") -> "Transform":
        """`self` を適用した後に `other` を適用する変換（`other @ self`）。"""
        return other @ self  # type: ignore[return-value]

    def apply(self, t: Tuple) -> Tuple:
        if self._dims == 3:
            return self._matrix @ t  # type: ignore[return-value]
        x, y, w = self._matrix.rows @ np.array([t.x, t.y, t.w], dtype=np.float64)
        return Tuple(float(x), float(y), t.z, float(w))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self._dims == other._dims and self._matrix == other._matrix

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Transform({self._dims}D, {self._matrix.rows.tolist()!r})"


def transform_combined(
    center: Vec3 = (0.0, 0.0, 0.0),
    scale_factors: Vec3 = (1.0, 1.0, 1.0),
    rotate_angles: Vec3 = (0.0, 0.0, 0.0),
) -> Transform:
    """複合変換：スケール → 回転（X→Y→Z） → 移動 を 1 つの 3D 変換にまとめる。

    引数:
        center: 最終的な中心位置
        scale_factors: (sx, sy, sz) スケール係数
        rotate_angles: (rx, ry, rz) 回転角度（ラジアン）

    返り値:
        `translation @ rz @ ry @ rx @ scaling` に相当する Transform
    """
    result = Transform.identity(3)

    # 1. スケール変換（原点中心）
    sx, sy, sz = scale_factors
    if sx != 1 or sy != 1 or sz != 1:
        result = result.then(Transform.scaling(sx, sy, sz))

    # 2. 回転変換（原点中心）
    for axis, angle in zip(_AXES, rotate_angles):
        if angle != 0:
            result = result.then(Transform.rotation(angle, axis))

    # 3. 移動変換（最終位置へ）
    cx, cy, cz = center
    if cx != 0 or cy != 0 or cz != 0:
        result = result.then(Transform.translation(cx, cy, cz))

    return result


__all__ = ["Transform", "SingularMatrixError", "transform_combined"]
