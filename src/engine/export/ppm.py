"""
どこで: `engine.export.ppm`。
何を: キャンバス内容を PPM（P3, ASCII）としてテキスト出力する書き出しクラスと関数群。
なぜ: 外部ビューアで確認できる最小の画像形式を、依存なしで確実に保存するため。

出力形式:
    P3
    <width> <height>
    255
    <各行の "R G B " を並べた本文>

- 各チャンネルは `util.color.quantize_channels`（四捨五入 + [0, 255] クランプ）。
- 1 行は 70 文字を超えない。次の画素を足すと超える場合は先に改行し、
  1 画素の "R G B " を行を跨いで分割しない。
- キャンバスの各行の終わりでは必ず改行する。
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Protocol

import numpy as np

from common import settings
from util.color import quantize_channels

logger = logging.getLogger(__name__)


class PPMWriteError(RuntimeError):
    """PPM ファイルの作成/書き込みに失敗（元の `OSError` を `__cause__` に保持）。"""


class PixelSource(Protocol):
    """書き出し対象の最小インタフェース（`engine.render.canvas.Canvas` が満たす）。"""

    width: int
    height: int

    def as_array(self, *, copy: bool = False) -> np.ndarray: ...


class PPMWriter:
    """PPM（P3）書き出しクラス。

    `canvas.as_array()`（形状 `(height, width, 3)` の float 配列）を量子化し、
    ヘッダと本文を `fp` へテキスト出力する。
    """

    def __init__(self, *, max_line_length: int | None = None, max_color: int | None = None) -> None:
        s = settings.get()
        self.max_line_length = int(max_line_length or s.PPM_MAX_LINE_LENGTH)
        self.max_color = int(max_color or s.PPM_MAX_COLOR)

    def header(self, width: int, height: int) -> str:
        return f"P3\n{width} {height}\n{self.max_color}\n"

    def write(self, canvas: PixelSource, fp: IO[str]) -> None:
        """与えられたキャンバスを PPM として `fp` に書き出す。

        引数:
            canvas: `width`/`height`/`as_array()` を持つ画素ソース。
            fp: テキスト書き出し先（開かれたファイルオブジェクト）。
        """
        fp.write(self.header(canvas.width, canvas.height))
        q = quantize_channels(canvas.as_array(), self.max_color)
        limit = self.max_line_length
        for row in q:
            line_len = 0
            for r, g, b in row.tolist():
                token = f"{r} {g} {b} "
                if line_len and line_len + len(token) > limit:
                    fp.write("\n")
                    line_len = 0
                fp.write(token)
                line_len += len(token)
            fp.write("\n")


def canvas_to_ppm(canvas: PixelSource) -> str:
    """PPM テキスト全体を文字列で返す。"""
    fp = io.StringIO()
    PPMWriter().write(canvas, fp)
    return fp.getvalue()


def write_ppm(canvas: PixelSource, path: str | Path) -> Path:
    """PPM をファイルへ書き出し、保存先パスを返す。

    - 親ディレクトリが無ければ作成する。
    - ファイルは `with` で開くため、失敗時も必ず閉じられる。
    - 作成/書き込みの `OSError` は `PPMWriteError` として呼び出し側へ伝える。
    """
    out = Path(path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", encoding="ascii", newline="\n") as fp:
            PPMWriter().write(canvas, fp)
    except OSError as e:
        raise PPMWriteError(f"PPM 書き出しに失敗: {out}: {e}") from e
    logger.info("wrote PPM %dx%d -> %s", canvas.width, canvas.height, out)
    return out


__all__ = ["PPMWriteError", "PPMWriter", "PixelSource", "canvas_to_ppm", "write_ppm"]
