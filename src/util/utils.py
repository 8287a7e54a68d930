"""
どこで: `util.utils`。
何を: プロジェクトルートの推定と YAML 構成の読み込み（フェイルソフト）。
なぜ: デモの既定値（キャンバス寸法/色/出力名）をコードから切り離して差し替え可能にするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

_ROOT_MARKERS = (".git", "pyproject.toml", "configs")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    """1 ファイルを読み、トップレベルが辞書でなければ空辞書を返す。"""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("failed to load config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("ignoring config %s: top level is %s, not a mapping", path, type(data).__name__)
        return {}
    return data


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、`_ROOT_MARKERS` のいずれかを含む最初のディレクトリを返す。

    見つからなければ `start.parent.parent`（`<repo>/src/util` → `<repo>` 相当）。
    """
    cur = start.resolve()
    for candidate in (cur, *cur.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return cur.parent.parent


def config_paths(root: Path | None = None) -> list[Path]:
    """既定の構成ファイル候補（後ろほど優先）。"""
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    return [base / "configs" / "default.yaml", base / "config.yaml"]


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """構成を辞書で返す（フェイルソフト）。

    - `path` 指定時はそのファイルだけを読む。
    - 未指定時は `config_paths()` を順に読み、存在するものをトップレベル単位で上書きする
      （`configs/default.yaml` をルートの `config.yaml` が上書き）。
    - 読めない/不正なファイルは警告を出して空扱い。
    """
    if path is not None:
        return _safe_load_yaml(Path(path))

    merged: Dict[str, Any] = {}
    for candidate in config_paths():
        if candidate.is_file():
            merged.update(_safe_load_yaml(candidate))
    return merged
