"""
どこで: `demos.projectile`。
何を: 重力と風の中を飛ぶ投射体の軌跡をキャンバスに描き、PPM に保存するデモ。
なぜ: Tuple の加算/正規化と Canvas の書き込み/書き出しを端から端まで使う最小の利用例として。

構成:
- `tick(env, proj)` は 1 ステップ分の純関数（状態 → 状態）。
- `in_flight(proj, width)` が終了判定。ループ方針（上限ステップ数）は `simulate()` 側が持つ。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Mapping

from engine.core.color import Color
from engine.core.tuples import Tuple, point, vector
from engine.render.canvas import Canvas
from util.color import normalize_color
from util.paths import resolve_output_path

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, Any] = {
    "width": 900,
    "height": 550,
    "color": "#FFFF00",
    "start": [0.0, 1.0, 0.0],
    "velocity": [1.0, 1.8, 0.0],
    "speed": 11.25,
    "gravity": [0.0, -0.1, 0.0],
    "wind": [-0.01, 0.0, 0.0],
    "max_steps": 10_000,
    "output": "projectile.ppm",
}


@dataclass(frozen=True)
class Projectile:
    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(env: Environment, proj: Projectile) -> Projectile:
    """1 ステップ進める: 位置 += 速度、速度 += 重力 + 風。"""
    position = proj.position + proj.velocity
    velocity = proj.velocity + env.gravity + env.wind
    return Projectile(position, velocity)


def in_flight(proj: Projectile, width: float) -> bool:
    """地面（y=0）より上で、かつキャンバス右端より左にいる間は飛行中。"""
    return proj.position.y > 0 and proj.position.x < width


def simulate(
    env: Environment, proj: Projectile, width: float, *, max_steps: int = 10_000
) -> Iterator[Projectile]:
    """飛行中の状態を順に返す（`max_steps` で打ち切り）。"""
    current = proj
    for _ in range(max_steps):
        if not in_flight(current, width):
            return
        yield current
        current = tick(env, current)
    logger.warning("projectile simulation stopped after max_steps=%d", max_steps)


def plot_block(canvas: Canvas, x: int, y: int, color: Color) -> None:
    """(x, y) を左上とする 2×2 画素を塗る（はみ出した分は Canvas が無視する）。"""
    canvas.write_pixel(x, y, color)
    canvas.write_pixel(x + 1, y, color)
    canvas.write_pixel(x, y + 1, color)
    canvas.write_pixel(x + 1, y + 1, color)


def render_projectile(
    canvas: Canvas,
    env: Environment,
    proj: Projectile,
    color: Color,
    *,
    max_steps: int = 10_000,
) -> int:
    """軌跡を描画し、描いた位置の数を返す。Y は上向き → 画面座標（下向き）へ反転する。"""
    count = 0
    for state in simulate(env, proj, canvas.width, max_steps=max_steps):
        x = int(state.position.x)
        y = canvas.height - int(state.position.y)
        plot_block(canvas, x, y, color)
        count += 1
    return count


def _vec3(values: Any) -> tuple[float, float, float]:
    x, y, z = (float(v) for v in values)
    return x, y, z


def build_scene(cfg: Mapping[str, Any] | None = None) -> tuple[Canvas, Environment, Projectile, Color]:
    """構成辞書（`configs/default.yaml` の `projectile:` 節）から初期状態を組み立てる。"""
    c = {**DEFAULTS, **(cfg or {})}
    canvas = Canvas(int(c["width"]), int(c["height"]))
    start = point(*_vec3(c["start"]))
    velocity = vector(*_vec3(c["velocity"])).normalize() * float(c["speed"])
    env = Environment(gravity=vector(*_vec3(c["gravity"])), wind=vector(*_vec3(c["wind"])))
    return canvas, env, Projectile(start, velocity), normalize_color(c["color"])


def run(cfg: Mapping[str, Any] | None = None, out: str | Path | None = None) -> Path:
    """デモを実行して PPM を保存し、保存先を返す。"""
    c = {**DEFAULTS, **(cfg or {})}
    canvas, env, proj, color = build_scene(c)
    n = render_projectile(canvas, env, proj, color, max_steps=int(c["max_steps"]))
    logger.info("projectile: plotted %d positions on %dx%d", n, canvas.width, canvas.height)
    target = Path(out) if out is not None else resolve_output_path(str(c["output"]))
    return canvas.to_file(target)


__all__ = [
    "Projectile",
    "Environment",
    "tick",
    "in_flight",
    "simulate",
    "plot_block",
    "render_projectile",
    "build_scene",
    "run",
]
