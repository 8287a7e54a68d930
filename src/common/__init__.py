"""
どこで: `common` パッケージ。
何を: ロギング/環境変数/設定/型エイリアスといった最内層の共通基盤。
なぜ: engine/util/demos のどこからでも依存できる場所に置き、依存の向きを単純化するため。
"""

from . import settings
from .logging import setup_default_logging

__all__ = [
    "settings",
    "setup_default_logging",
]
