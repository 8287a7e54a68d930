"""
どこで: `engine.core.approx`。
何を: 浮動小数の近似比較ヘルパ（`almost_equal` / `is_zero` / 配列版）。
なぜ: Tuple/Color/Matrix の等価判定と特異判定を、単一の epsilon で一貫させるため。

epsilon は `common.settings.get().EPSILON`（既定 1e-9、`PXR_EPSILON` で上書き可）。
呼び出し毎に設定を参照するので、テストから `reload_from_env()` で差し替えられる。
"""

from __future__ import annotations

import numpy as np

from common import settings


def epsilon() -> float:
    """現在の比較許容誤差を返す。"""
    return float(settings.get().EPSILON)


def almost_equal(a: float, b: float) -> bool:
    """`|a - b| < eps` で近似等価を判定する。"""
    return abs(float(a) - float(b)) < epsilon()


def is_zero(value: float) -> bool:
    """`|value| < eps` で実質ゼロかを判定する（行列式の特異判定用）。"""
    return abs(float(value)) < epsilon()


def arrays_almost_equal(a: np.ndarray, b: np.ndarray) -> bool:
    """同形状の配列を要素ごとに近似比較する。形状が異なれば False。"""
    if a.shape != b.shape:
        return False
    return bool(np.all(np.abs(a - b) < epsilon()))


__all__ = ["epsilon", "almost_equal", "is_zero", "arrays_almost_equal"]
