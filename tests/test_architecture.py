"""
アーキテクチャテスト

- レイヤ: 外側 → 内側の import のみ許可（同層は可）
- 禁止エッジ: engine/common/util → api/demos、engine.export → engine.render、common → 他パッケージ
- `src/` 配下モジュール間の import 循環
"""

from __future__ import annotations

import ast
import pathlib
from graphlib import CycleError, TopologicalSorter

import pytest

SRC_DIR = pathlib.Path(__file__).resolve().parents[1] / "src"

# 数値が小さいほど内側
LAYERS = {
    "common": 0,
    "util": 0,
    "engine.core": 0,
    "engine.render": 2,
    "engine.export": 2,
    "api": 3,
    "demos": 3,
}

FORBIDDEN = [
    # (import 元の接頭辞, import 先の接頭辞)
    ("engine", "api"),
    ("engine", "demos"),
    ("common", "api"),
    ("common", "demos"),
    ("common", "engine"),
    ("common", "util"),
    ("util", "api"),
    ("util", "demos"),
    ("engine.export", "engine.render"),
]


def _within(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def _layer(module: str) -> int | None:
    for prefix in sorted(LAYERS, key=len, reverse=True):
        if _within(module, prefix):
            return LAYERS[prefix]
    return None


def _modules() -> dict[str, pathlib.Path]:
    """モジュール名 → ファイル。`pkg/__init__.py` は `pkg` として登録する。"""
    out: dict[str, pathlib.Path] = {}
    for path in SRC_DIR.rglob("*.py"):
        if "__pycache__" in path.parts:
            continue
        parts = path.relative_to(SRC_DIR).with_suffix("").parts
        if parts[-1] == "__init__":
            parts = parts[:-1]
        out[".".join(parts)] = path
    return out


def _imports(module: str, path: pathlib.Path) -> set[str]:
    """ファイル内の全 import（関数内の遅延 import も含む）を絶対モジュール名で返す。"""
    package = module if path.name == "__init__.py" else module.rpartition(".")[0]
    found: set[str] = set()
    for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"), filename=str(path))):
        if isinstance(node, ast.Import):
            found.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                base = package.split(".")[: len(package.split(".")) - (node.level - 1)]
                target = ".".join(base + ([node.module] if node.module else []))
            else:
                target = node.module or ""
            found.add(target)
            # `from pkg import mod` はサブモジュールへの依存として数える
            found.update(f"{target}.{alias.name}" for alias in node.names)
    return found


def _graph() -> dict[str, set[str]]:
    modules = _modules()
    return {mod: {t for t in _imports(mod, path) if t in modules and t != mod} for mod, path in modules.items()}


@pytest.mark.smoke
def test_layering_and_forbidden_edges() -> None:
    violations: list[str] = []
    for src, targets in sorted(_graph().items()):
        for tgt in sorted(targets):
            s_layer, t_layer = _layer(src), _layer(tgt)
            if s_layer is not None and t_layer is not None and s_layer < t_layer:
                violations.append(f"layer: {src} (L{s_layer}) -> {tgt} (L{t_layer})")
            for s_prefix, t_prefix in FORBIDDEN:
                if _within(src, s_prefix) and _within(tgt, t_prefix):
                    violations.append(f"forbidden: {src} -> {tgt}")
    assert not violations, "\n".join(violations)


@pytest.mark.smoke
def test_no_import_cycles() -> None:
    graph = _graph()
    # パッケージ __init__ → 自身のサブモジュールは再輸出なので循環扱いしない
    edges = {
        src: {t for t in targets if not (_within(t, src) and src in graph)}
        for src, targets in graph.items()
    }
    try:
        tuple(TopologicalSorter(edges).static_order())
    except CycleError as e:
        pytest.fail(f"import cycle: {' -> '.join(e.args[1])}")
