"""
どこで: `util.paths`。
何を: 画像（PPM）保存先ディレクトリの生成と解決ユーティリティを提供する。
なぜ: デモ/CLI から簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from common import settings

from .utils import _find_project_root


def ensure_output_dir() -> Path:
    """PPM 出力先を作成して返す。

    - `PXR_OUTPUT_DIR`（settings.OUTPUT_DIR）があればそれを使う。
    - 無ければプロジェクトルート直下の `data/ppm/`。
    - 既存の場合もそのまま Path を返す。並行呼び出しに対して `exist_ok=True` で安全。
    """
    configured = settings.get().OUTPUT_DIR
    if configured is not None:
        out = Path(configured)
    else:
        root = _find_project_root(Path(__file__).parent)
        out = root / "data" / "ppm"
    out.mkdir(parents=True, exist_ok=True)
    return out


def resolve_output_path(name: str | Path) -> Path:
    """出力ファイル名を解決する。絶対パスや親ディレクトリ付きはそのまま、素のファイル名は出力先へ。"""
    p = Path(name)
    if p.is_absolute() or p.parent != Path("."):
        return p
    return ensure_output_dir() / p
