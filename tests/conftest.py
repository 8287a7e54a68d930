"""共通フィクスチャ。

- 設定（epsilon/出力先）の差し替えと復元
- 小さな Canvas 試料
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest

from common import settings
from engine.render.canvas import Canvas


@pytest.fixture()
def set_epsilon(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """`PXR_EPSILON` を設定して再読込する。テスト後は既定値へ戻す。"""

    def _set(value: str) -> None:
        monkeypatch.setenv("PXR_EPSILON", value)
        settings.reload_from_env()

    yield _set
    monkeypatch.delenv("PXR_EPSILON", raising=False)
    settings.reload_from_env()


@pytest.fixture()
def output_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """`PXR_OUTPUT_DIR` を tmp 配下へ向ける。"""
    out = tmp_path / "ppm"
    monkeypatch.setenv("PXR_OUTPUT_DIR", str(out))
    settings.reload_from_env()
    yield out
    monkeypatch.delenv("PXR_OUTPUT_DIR", raising=False)
    settings.reload_from_env()


@pytest.fixture()
def canvas_5x3() -> Canvas:
    return Canvas(5, 3)


@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item: pytest.Item) -> Iterator[None]:
    """`bare_root_logger` 使用テストでは、pytest の logging プラグインが
    呼び出しフェーズで追加するハンドラもテスト本体の間だけ外す。"""
    if "bare_root_logger" not in getattr(item, "fixturenames", ()):
        yield
        return
    import logging

    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers.clear()
    try:
        yield
    finally:
        for h in root.handlers:
            if h not in saved:
                h.close()
        root.handlers[:] = saved
