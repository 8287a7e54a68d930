from __future__ import annotations

from pathlib import Path

import api

# What this tests
# - The public facade re-exports every name in `__all__`.
# - A minimal flow point -> transform -> canvas -> PPM works through `api` alone.


def test_api_all_names_resolve():
    for name in api.__all__:
        assert hasattr(api, name), name
    assert api.__version__ == "0.1.0"


def test_api_min_flow(tmp_path: Path):
    canvas = api.Canvas(20, 20)
    m = api.Matrix.translation(10, 10, 0) @ api.Matrix.rotation_z(0.5)
    p = m @ api.point(0, -5, 0)
    canvas.write_pixel(int(p.x), int(p.y), api.WHITE)
    out = api.write_ppm(canvas, tmp_path / "out.ppm")
    assert "255 255 255 " in out.read_text(encoding="ascii")
