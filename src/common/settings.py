"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: 比較許容誤差や出力先などを 1 か所で決め、テストから差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import env_float, env_path

DEFAULT_EPSILON = 1e-9


@dataclass
class _Settings:
    # 数値比較（近似等価・特異判定で共通）
    EPSILON: float = DEFAULT_EPSILON

    # PPM 出力
    PPM_MAX_LINE_LENGTH: int = 70
    PPM_MAX_COLOR: int = 255

    # 出力先（None はプロジェクト既定 `data/ppm/`）
    OUTPUT_DIR: Path | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `PXR_EPSILON`: 正の有限値のみ受理（不正値は既定 1e-9）。
    - `PXR_OUTPUT_DIR`: 出力ディレクトリ。
    - PPM の行長/最大値はフォーマット仕様なので環境変数では変更しない。
    """
    _settings.EPSILON = env_float("PXR_EPSILON", DEFAULT_EPSILON, positive=True)
    _settings.OUTPUT_DIR = env_path("PXR_OUTPUT_DIR")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "DEFAULT_EPSILON"]
