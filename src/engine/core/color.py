"""
どこで: `engine.core.color`。
何を: RGB 3 成分の値型 `Color`（クランプしない浮動小数）。
なぜ: 合成の途中で [0, 1] を外れる値を許し、量子化は書き出し側（PPM）に任せるため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .approx import almost_equal


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    red: float
    green: float
    blue: float

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: "Color | float") -> "Color":
        """スカラー倍、または Color 同士のアダマール積（成分ごとの積）。"""
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        s = float(other)
        return Color(self.red * s, self.green * s, self.blue * s)

    def __rmul__(self, scalar: float) -> "Color":
        return self * float(scalar)

    def as_array(self) -> np.ndarray:
        return np.array([self.red, self.green, self.blue], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.red, self.green, self.blue))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            almost_equal(self.red, other.red)
            and almost_equal(self.green, other.green)
            and almost_equal(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


__all__ = ["Color", "BLACK", "WHITE"]
