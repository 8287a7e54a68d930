"""
どこで: `engine.core` サブパッケージ。
何を: 同次座標 Tuple・Color・Matrix・Transform・Ray と近似比較ヘルパを提供。
なぜ: 描画/書き出し/デモの全てが依存する数値カーネルを最内層に集約するため。
"""

from .color import BLACK, WHITE, Color
from .matrix import Matrix
from .ray import Ray
from .transform import SingularMatrixError, Transform, transform_combined
from .tuples import Tuple, point, vector

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "Matrix",
    "Ray",
    "SingularMatrixError",
    "Transform",
    "Tuple",
    "point",
    "transform_combined",
    "vector",
]
