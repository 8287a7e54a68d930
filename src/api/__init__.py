"""
どこで: `api` 入口（高レベル公開 API）。
何を: Tuple/Color/Matrix/Transform/Ray/Canvas と変換ビルダ・PPM 書き出しを再輸出。
なぜ: 利用者が単一名前空間から 点の生成 → 変換 → 描画 → 保存 まで完結できるようにするため。

Usage:
    from api import Canvas, Color, Matrix, point

    canvas = Canvas(100, 100)
    m = Matrix.translation(50, 50, 0) @ Matrix.rotation_z(0.5)
    p = m @ point(0, -30, 0)
    canvas.write_pixel(int(p.x), int(p.y), Color(1, 1, 1))
    canvas.to_file("out.ppm")
"""

from engine.core.color import BLACK, WHITE, Color
from engine.core.matrix import (
    Matrix,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from engine.core.ray import Ray
from engine.core.transform import SingularMatrixError, Transform, transform_combined
from engine.core.tuples import Tuple, point, vector
from engine.export.ppm import PPMWriteError, PPMWriter, canvas_to_ppm, write_ppm
from engine.render.canvas import Canvas

__all__ = [
    # 値型
    "Tuple",
    "point",
    "vector",
    "Color",
    "BLACK",
    "WHITE",
    # 行列/変換
    "Matrix",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "Transform",
    "transform_combined",
    "SingularMatrixError",
    # レイ
    "Ray",
    # 画素/書き出し
    "Canvas",
    "PPMWriter",
    "PPMWriteError",
    "canvas_to_ppm",
    "write_ppm",
]

# バージョン情報
__version__ = "0.1.0"
