"""
どこで: `demos.clock`。
何を: 回転行列を繰り返し合成して時計の目盛り（主 12 + 副 48）を描くデモ。
なぜ: 平行移動/回転の合成順（右から左）を目で確かめられる利用例として。
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Iterator, Mapping

from engine.core.color import Color
from engine.core.matrix import Matrix
from engine.core.tuples import Tuple, point
from engine.render.canvas import Canvas
from util.color import normalize_color
from util.paths import resolve_output_path

from .projectile import plot_block

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, Any] = {
    "width": 600,
    "height": 600,
    "ticks": 60,
    "major_every": 5,
    "major_color": "#FFFFFF",
    "minor_color": "#FF00FF",
    "output": "clock.ppm",
}


def step(transform: Matrix, rotation: Matrix) -> Matrix:
    """1 目盛り分回す（状態 → 状態）。"""
    return transform @ rotation  # type: ignore[return-value]


def tick_positions(width: int, height: int, ticks: int = 60) -> Iterator[tuple[int, Tuple]]:
    """各目盛りの画面座標を `(index, point)` で返す。index 0 は 12 時の位置。

    半径は `height / 3`。中心への平行移動に、回転を右から 1 つずつ掛けていく
    （`translation @ rz @ rz @ ...`）ので、点はまず回転し最後に中心へ移る。
    """
    if ticks <= 0:
        return
    center = Matrix.translation(width / 2.0, height / 2.0, 0.0)
    rotation = Matrix.rotation_z(2.0 * math.pi / ticks)
    hand = point(0.0, -height / 3.0, 0.0)
    transform = center
    for index in range(ticks):
        yield index, transform @ hand  # type: ignore[misc]
        transform = step(transform, rotation)


def render_clock(
    canvas: Canvas,
    major_color: Color,
    minor_color: Color,
    *,
    ticks: int = 60,
    major_every: int = 5,
) -> tuple[int, int]:
    """目盛りを描き、(主目盛り数, 副目盛り数) を返す。"""
    majors = minors = 0
    for index, p in tick_positions(canvas.width, canvas.height, ticks):
        if major_every > 0 and index % major_every == 0:
            color = major_color
            majors += 1
        else:
            color = minor_color
            minors += 1
        plot_block(canvas, int(p.x), int(p.y), color)
    return majors, minors


def run(cfg: Mapping[str, Any] | None = None, out: str | Path | None = None) -> Path:
    """デモを実行して PPM を保存し、保存先を返す。"""
    c = {**DEFAULTS, **(cfg or {})}
    canvas = Canvas(int(c["width"]), int(c["height"]))
    majors, minors = render_clock(
        canvas,
        normalize_color(c["major_color"]),
        normalize_color(c["minor_color"]),
        ticks=int(c["ticks"]),
        major_every=int(c["major_every"]),
    )
    logger.info("clock: %d major / %d minor ticks", majors, minors)
    target = Path(out) if out is not None else resolve_output_path(str(c["output"]))
    return canvas.to_file(target)


__all__ = ["step", "tick_positions", "render_clock", "run"]
