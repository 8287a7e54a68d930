from __future__ import annotations

from pathlib import Path

from engine.core.color import BLACK, Color
from engine.core.tuples import point, vector
from engine.render.canvas import Canvas
from demos.projectile import (
    Environment,
    Projectile,
    build_scene,
    in_flight,
    render_projectile,
    run,
    simulate,
    tick,
)

ENV = Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))


def test_tick_applies_velocity_then_forces() -> None:
    p = tick(ENV, Projectile(point(0, 1, 0), vector(1, 1, 0)))
    assert p.position == point(1, 2, 0)
    assert p.velocity == vector(0.99, 0.9, 0)


def test_in_flight_bounds() -> None:
    assert in_flight(Projectile(point(0, 1, 0), vector(1, 1, 0)), 10)
    assert not in_flight(Projectile(point(0, 0, 0), vector(1, 1, 0)), 10)
    assert not in_flight(Projectile(point(10, 5, 0), vector(1, 1, 0)), 10)


def test_simulate_lands_and_respects_max_steps() -> None:
    start = Projectile(point(0, 1, 0), vector(1, 1, 0).normalize())
    states = list(simulate(ENV, start, 1000))
    assert states[0] == start
    assert 1 < len(states) < 100
    assert all(s.position.y > 0 for s in states)
    assert len(list(simulate(ENV, start, 1000, max_steps=3))) == 3


def test_render_projectile_plots_blocks() -> None:
    canvas = Canvas(20, 10)
    color = Color(1, 1, 0)
    start = Projectile(point(0, 1, 0), vector(1, 1, 0))
    n = render_projectile(canvas, ENV, start, color)
    assert n > 0
    # 初期位置 (0, 1) は画面座標 (0, height - 1)
    assert canvas.pixel_at(0, 9) == color
    assert canvas.pixel_at(19, 0) == BLACK


def test_build_scene_from_defaults() -> None:
    canvas, env, proj, color = build_scene()
    assert (canvas.width, canvas.height) == (900, 550)
    assert color == Color(1, 1, 0)
    assert proj.position == point(0, 1, 0)
    assert abs(proj.velocity.magnitude() - 11.25) < 1e-9
    assert env.gravity == vector(0, -0.1, 0)


def test_run_writes_ppm_to_output_dir(output_dir: Path) -> None:
    out = run({"width": 60, "height": 40, "speed": 2.0})
    assert out == output_dir / "projectile.ppm"
    text = out.read_text(encoding="ascii")
    assert text.startswith("P3\n60 40\n255\n")
    assert "255 255 0 " in text
