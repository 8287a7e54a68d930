"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する（ライブラリ側では設定しない）。
- CLI/デモなどのエントリポイントだけが `setup_default_logging()` を 1 度呼ぶ。
- 任意でファイルにも書き出せる（デモの長時間レンダリング記録用）。
"""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str = "INFO", log_file: str | Path | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `log_file` 指定時はコンソールに加えてファイルにも出力する
    """
    lvl = _resolve_level(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(str(log_file), mode="w", encoding="utf-8"))
    logging.basicConfig(level=lvl, format=_FORMAT, handlers=handlers)


__all__ = ["setup_default_logging"]
