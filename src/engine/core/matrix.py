"""
どこで: `engine.core.matrix`。
何を: 正方行列を中心とした値型 `Matrix`（行列式/余因子/逆行列）と 4×4 同次変換ビルダ。
なぜ: 変換の合成・適用を素朴な行列演算だけで表現し、レイトレーサの土台にするため。

データモデル（不変条件）:
- 行優先の `float64 ndarray (N, M)` を 1 つだけ保持する（読み取り専用）。
- 列ビュー `columns` は保持せず、要求時に転置ビューとして返す。行と列の表現が
  ずれる経路は存在しない。
- 空入力は `0×0` 行列。行長が揃わない入力は `ValueError`。

数値方針:
- 行列式は 1×1/2×2 を直接、それ以上は第 1 行に沿った余因子展開（Laplace）で求める。
  階乗オーダだが、使用サイズは 4 以下。
- 特異判定は `engine.core.approx.is_zero`（単一の epsilon）で行う。
- 逆行列は `inverse[i][j] = cofactor(j, i) / det` を直接計算する（余因子行列は作らない）。

変換の合成順:
    T = translation(...) @ scaling(...) @ rotation_x(...)
    T @ p は rotation → scaling → translation の順に適用される（右から左）。
"""

from __future__ import annotations

import logging
import math

import numpy as np

from common.types import MatrixLike

from .approx import arrays_almost_equal, is_zero
from .tuples import Tuple

logger = logging.getLogger(__name__)


def _normalize_rows(rows: "MatrixLike | np.ndarray | Matrix") -> np.ndarray:
    """`Matrix` 生成時の内部正規化ヘルパ。"""
    if isinstance(rows, Matrix):
        return rows._rows
    try:
        arr = np.array(rows, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"行列の各行は同じ長さの数値列である必要があります: {e}") from e
    if arr.size == 0:
        arr = np.empty((0, 0), dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError(f"行列は 2 次元である必要があります: ndim={arr.ndim}")
    arr.setflags(write=False)
    return arr


class Matrix:
    """行優先ストア 1 本で表す行列（不変）。

    フィールド:
    - `rows (N, M) float64`: 読み取り専用の行優先配列。

    演算子:
    - `A @ B`: 行列積。`M @ t`（`t: Tuple`）は 4×4 のみ。
    - `A + B` / `A - B`: 要素ごとの和/差（同形状のみ）。
    - `M * s`: スカラー倍。
    - `A == B`: 要素ごとの近似比較（形状が異なれば False）。
    """

    __slots__ = ("_rows",)

    _rows: np.ndarray

    def __init__(self, rows: "MatrixLike | np.ndarray | Matrix" = ()) -> None:
        self._rows = _normalize_rows(rows)

    # ── ファクトリ ───────────────────
    @classmethod
    def identity(cls, size: int) -> "Matrix":
        if size < 0:
            raise ValueError(f"size は 0 以上である必要があります: {size}")
        return cls(np.eye(int(size), dtype=np.float64))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Matrix":
        return cls(
            [
                [1.0, 0.0, 0.0, x],
                [0.0, 1.0, 0.0, y],
                [0.0, 0.0, 1.0, z],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> "Matrix":
        return cls(
            [
                [x, 0.0, 0.0, 0.0],
                [0.0, y, 0.0, 0.0],
                [0.0, 0.0, z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_x(cls, radians: float) -> "Matrix":
        c, s = math.cos(radians), math.sin(radians)
        return cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_y(cls, radians: float) -> "Matrix":
        c, s = math.cos(radians), math.sin(radians)
        return cls(
            [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_z(cls, radians: float) -> "Matrix":
        c, s = math.cos(radians), math.sin(radians)
        return cls(
            [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def shearing(
        cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> "Matrix":
        """せん断。`xy` は「y に比例して x を動かす」係数（以下同様）。"""
        return cls(
            [
                [1.0, xy, xz, 0.0],
                [yx, 1.0, yz, 0.0],
                [zx, zy, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    # ── 形状/アクセス ─────────────────
    @property
    def rows(self) -> np.ndarray:
        """行優先の読み取り専用配列。"""
        return self._rows

    @property
    def columns(self) -> np.ndarray:
        """列優先ビュー（転置の読み取り専用ビュー。都度導出）。"""
        return self._rows.T

    @property
    def shape(self) -> tuple[int, int]:
        return (int(self._rows.shape[0]), int(self._rows.shape[1]))

    @property
    def size(self) -> int:
        """行数（正方行列なら N）。"""
        return int(self._rows.shape[0])

    @property
    def is_square(self) -> bool:
        n, m = self.shape
        return n == m

    def as_array(self, *, copy: bool = False) -> np.ndarray:
        """内部配列を返す。`copy=False` は読み取り専用ビュー、`copy=True` は書込み可能な複製。"""
        if copy:
            return self._rows.copy()
        return self._rows.view()

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = index
        return float(self._rows[r, c])

    def __len__(self) -> int:
        return self.size

    # ── 行列式/余因子 ─────────────────
    def _require_square(self, op: str) -> int:
        n, m = self.shape
        if n == 0 or n != m:
            raise ValueError(f"{op} は空でない正方行列のみ対応です: shape={self.shape}")
        return n

    def transpose(self) -> "Matrix":
        return Matrix(self.columns)

    def submatrix(self, row: int, column: int) -> "Matrix":
        """`row` 行と `column` 列を取り除いた行列。範囲外は `IndexError`。"""
        n, m = self.shape
        if not (0 <= row < n) or not (0 <= column < m):
            raise IndexError(f"submatrix({row}, {column}) は範囲外です: shape={self.shape}")
        out = np.delete(np.delete(self._rows, row, axis=0), column, axis=1)
        return Matrix(out)

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return minor if (row + column) % 2 == 0 else -minor

    def determinant(self) -> float:
        n = self._require_square("determinant")
        a = self._rows
        if n == 1:
            return float(a[0, 0])
        if n == 2:
            return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])
        total = 0.0
        for c in range(n):
            total += float(a[0, c]) * self.cofactor(0, c)
        return total

    def is_invertible(self) -> bool:
        return not is_zero(self.determinant())

    def inverse(self) -> "Matrix | None":
        """逆行列。行列式が（epsilon 内で）0 の場合は None。

        特異判定は絶対値 `|det| < epsilon` で行う。成分の小さい行列は可逆でも特異扱いになる
        （例: `scaling(0.001, 0.001, 0.0005)` は det=5e-10 < 1e-9 で None）。
        そうした縮尺を扱う場合は `PXR_EPSILON` を下げる。
        """
        n = self._require_square("inverse")
        det = self.determinant()
        if is_zero(det):
            logger.debug("singular matrix (det=%r), shape=%s", det, self.shape)
            return None
        if n == 1:
            return Matrix([[1.0 / det]])
        out = np.empty((n, n), dtype=np.float64)
        for i in range(n):
            for j in range(n):
                out[i, j] = self.cofactor(j, i) / det
        return Matrix(out)

    # ── 演算子 ─────────────────────────
    def __matmul__(self, other: "Matrix | Tuple") -> "Matrix | Tuple":
        if isinstance(other, Tuple):
            return self._apply(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError(f"行列積の内側の次元が一致しません: {self.shape} @ {other.shape}")
        # (i, j) = 左の i 行と右の j 列の内積
        return Matrix(self._rows @ other._rows)

    def _apply(self, t: Tuple) -> Tuple:
        if self.shape != (4, 4):
            raise ValueError(f"Tuple への適用は 4×4 行列のみ対応です: shape={self.shape}")
        return Tuple.from_array(self._rows @ t.as_array())

    def _elementwise(self, other: "Matrix", sign: float) -> "Matrix":
        if self.shape != other.shape:
            raise ValueError(f"形状が一致しません: {self.shape} vs {other.shape}")
        return Matrix(self._rows + sign * other._rows)

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, 1.0)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, -1.0)

    def __mul__(self, scalar: float) -> "Matrix":
        if isinstance(scalar, (Matrix, Tuple)):
            return NotImplemented
        return Matrix(self._rows * float(scalar))

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return arrays_almost_equal(self._rows, other._rows)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join("".join(f"{v:.3f}\t" for v in row) + "\n" for row in self._rows)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        n, m = self.shape
        return f"Matrix({n}x{m}, {self._rows.tolist()!r})"


identity = Matrix.identity
translation = Matrix.translation
scaling = Matrix.scaling
rotation_x = Matrix.rotation_x
rotation_y = Matrix.rotation_y
rotation_z = Matrix.rotation_z
shearing = Matrix.shearing


__all__ = [
    "Matrix",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
]
