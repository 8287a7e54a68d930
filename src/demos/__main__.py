"""
Headless demo runner.

Renders one of the bundled demos to a PPM file.

Usage (from repo root, after `pip install -e .`):
    python -m demos projectile
    python -m demos clock --out /tmp/clock.ppm --log-level DEBUG
    python -m demos clock --config my_config.yaml

Notes:
    - Defaults come from `configs/default.yaml` (section per demo).
    - Without `--out` the file goes to `data/ppm/` (or `$PXR_OUTPUT_DIR`).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from common.logging import setup_default_logging
from engine.export.ppm import PPMWriteError
from util.utils import load_config

from . import clock, projectile

logger = logging.getLogger("demos")

DEMOS: dict[str, Callable[..., object]] = {
    "projectile": projectile.run,
    "clock": clock.run,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="python -m demos", description="Render a demo to PPM.")
    p.add_argument("demo", choices=sorted(DEMOS), help="demo to render")
    p.add_argument("--out", default=None, help="output .ppm path (default: data/ppm/<demo>.ppm)")
    p.add_argument("--config", default=None, help="YAML config file (default: configs/default.yaml)")
    p.add_argument("--log-level", default="INFO", help="logging level (DEBUG, INFO, ...)")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    config = load_config(args.config)
    section = config.get(args.demo)
    cfg = section if isinstance(section, dict) else {}

    try:
        path = DEMOS[args.demo](cfg, args.out)
    except PPMWriteError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
