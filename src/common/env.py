"""
どこで: `common.env`
何を: 環境変数の読み取りヘルパ（浮動小数/パス）。
なぜ: 不正値を既定値へ落とす規則を 1 か所に置き、`common.settings` から使うため。
"""

from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Optional


def env_float(name: str, default: float, *, positive: bool = False) -> float:
    """浮動小数の環境変数を返す。

    Parameters
    ----------
    name : str
        環境変数名。
    default : float
        未設定・解釈不能・非有限値のときに返す値。
    positive : bool
        True なら 0 以下の値も `default` に置き換える（epsilon 用）。

    Returns
    -------
    float
        取得した値、または `default`。
    """
    raw = os.getenv(name)
    if raw is None:
        return float(default)
    try:
        val = float(raw)
    except ValueError:
        return float(default)
    if not math.isfinite(val) or (positive and val <= 0.0):
        return float(default)
    return val


def env_path(name: str) -> Optional[Path]:
    """パス環境変数を取得する（空文字/未設定は None）。`~` は展開する。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


__all__ = ["env_float", "env_path"]
