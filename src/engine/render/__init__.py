"""
どこで: `engine.render` サブパッケージ。
何を: 画素グリッド `Canvas` を提供する。
なぜ: 数値カーネル（core）と画素の保持/書き出しの責務を分離するため。
"""

from .canvas import Canvas

__all__ = ["Canvas"]
