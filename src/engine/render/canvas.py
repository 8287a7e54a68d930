"""
どこで: `engine.render.canvas`。
何を: `Color` の 2 次元グリッド `Canvas`（原点は左上、行優先）と PPM 書き出しの入口。
なぜ: レンダリング 1 回分の画素を 1 か所で保持し、書き込み範囲外を安全に無視するため。

データモデル:
- `pixels: float64 ndarray (height, width, 3)`。初期値は黒 (0, 0, 0)。
- 唯一の可変リソース。書き手は 1 つ（ロックなし）。
"""

from __future__ import annotations

import logging
import operator
from pathlib import Path
from typing import Iterator

import numpy as np

from engine.core.color import Color
from engine.export.ppm import canvas_to_ppm, write_ppm

logger = logging.getLogger(__name__)


class Canvas:
    """幅 `width` × 高さ `height` の画素グリッド。"""

    __slots__ = ("width", "height", "_pixels")

    width: int
    height: int
    _pixels: np.ndarray

    def __init__(self, width: int, height: int) -> None:
        w, h = int(width), int(height)
        if w < 0 or h < 0:
            raise ValueError(f"Canvas のサイズは 0 以上である必要があります: {w}x{h}")
        self.width = w
        self.height = h
        self._pixels = np.zeros((h, w, 3), dtype=np.float64)

    @staticmethod
    def _coords(x: int, y: int) -> tuple[int, int]:
        """座標を整数へ。`int`/`numpy` 整数以外（float など）は `TypeError`。"""
        try:
            return operator.index(x), operator.index(y)
        except TypeError as e:
            raise TypeError(f"画素座標は整数である必要があります: ({x!r}, {y!r})") from e

    def in_bounds(self, x: int, y: int) -> bool:
        x, y = self._coords(x, y)
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """画素を書き込む。範囲外は黙って無視する（例外にしない）。"""
        if not self.in_bounds(x, y):
            logger.debug("write_pixel ignored out of range (%s, %s) on %dx%d", x, y, self.width, self.height)
            return
        self._pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        """画素を読む。範囲外は `IndexError`（範囲内の読み出しのみが契約）。"""
        if not self.in_bounds(x, y):
            raise IndexError(f"pixel_at({x}, {y}) は範囲外です: {self.width}x{self.height}")
        r, g, b = self._pixels[y, x].tolist()
        return Color(r, g, b)

    def fill(self, color: Color) -> None:
        self._pixels[:, :] = (color.red, color.green, color.blue)

    def pixels(self) -> Iterator[tuple[int, int, Color]]:
        """`(x, y, color)` を行優先で列挙する。"""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.pixel_at(x, y)

    def as_array(self, *, copy: bool = False) -> np.ndarray:
        """画素配列 `(height, width, 3)`。`copy=False` は読み取り専用ビュー。"""
        if copy:
            return self._pixels.copy()
        view = self._pixels.view()
        view.setflags(write=False)
        return view

    # ── 書き出し ─────────────────────
    def to_ppm(self) -> str:
        return canvas_to_ppm(self)

    def to_file(self, path: str | Path) -> Path:
        """PPM として保存する。失敗は `engine.export.ppm.PPMWriteError`。"""
        return write_ppm(self, path)

    canvas_to_ppm = to_ppm
    canvas_to_file = to_file

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Canvas({self.width}x{self.height})"
