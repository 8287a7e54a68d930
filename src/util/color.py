"""
どこで: `util.color`。
何を: 色指定の正規化（Hex / RGB 0–1 / RGB 0–255 → `Color`）と、0–255 への量子化。
なぜ: 設定ファイル（YAML）からの色指定と PPM 書き出しで、同一の受理仕様と丸め規則を使うため。

量子化規則:
- `round_half_up(channel * 255)` を [0, 255] にクランプ（負値/過飽和は端に張り付く）。
- NaN は 0 とみなす（正規化できないベクトル由来の値で PPM が壊れないように）。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from common.types import RGB8
from engine.core.color import Color


def parse_hex_color_str(s: str) -> Color:
    """Hex 文字列から `Color`（0–1）を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB"（末尾 AA 付きも受理し、アルファは無視）。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        if len(t) == 8:
            int(t[6:8], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return Color(r / 255.0, g / 255.0, b / 255.0)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def normalize_color(value: object) -> Color:
    """色を `Color` へ正規化する。

    - 受理: `Color`, Hex 文字列, (r, g, b)（0–1 の float または 0–255 の int）
    - 0–255 とみなすのは、全要素が int で、いずれかが 1 を超える場合のみ
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) != 3:
        raise ValueError("color tuple/list must be length 3")
    try:
        rgb = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(isinstance(v, int) for v in seq) and any(v > 1 for v in rgb):
        return Color(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)
    return Color(rgb[0], rgb[1], rgb[2])


def quantize_channels(values: np.ndarray, max_value: int = 255) -> np.ndarray:
    """浮動小数チャンネル配列を [0, max_value] の整数配列へ量子化する（形状は保持）。"""
    arr = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0)
    scaled = np.floor(arr * float(max_value) + 0.5)
    return np.clip(scaled, 0, max_value).astype(np.int64)


def to_u8_rgb(value: object) -> RGB8:
    """色を RGB(0–255) の整数タプルへ変換する。"""
    c = normalize_color(value)
    r, g, b = quantize_channels(c.as_array()).tolist()
    return (int(r), int(g), int(b))


__all__ = [
    "parse_hex_color_str",
    "normalize_color",
    "quantize_channels",
    "to_u8_rgb",
]
