#!/usr/bin/env uv run
"""Render fleck textures for every configured seed and post-process the SVGs."""

import argparse
import os
from pathlib import Path

import svgwrite

from fleck_cover.pattern.surface import SvgSurface
from fleck_cover.pattern.tiles import paint
from fleck_cover.py_helper import variables
from fleck_cover.py_helper.config import (
    FleckConfig,
    load_config,
    params_from_config,
    resolve_seed,
    resolve_seeds,
)
from fleck_cover.py_helper.file_utils import finalize_output


def generate_svg(out_file: str, cfg: FleckConfig) -> int:
    """Paint one fleck texture into out_file; returns the number of blobs."""
    dwg = svgwrite.Drawing(out_file, size=(cfg.width, cfg.height))
    if cfg.background:
        dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill=cfg.background))

    count = paint(SvgSurface(dwg), cfg.width, cfg.height, cfg.params, cfg.grid_size)
    dwg.save()
    return count


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    root = Path(__file__).resolve().parent
    parser = argparse.ArgumentParser(description="Render seeded fleck textures.")
    parser.add_argument("--config", type=Path, default=root / variables.CONFIG)
    parser.add_argument("--output", type=Path, default=root / variables.OUTPUT)
    parser.add_argument("--seed", type=int, help="Render only this seed.")
    parser.add_argument("--width", type=int, help="Override [canvas].width.")
    parser.add_argument("--height", type=int, help="Override [canvas].height.")
    parser.add_argument(
        "--no-png", action="store_true", help="Keep SVG output, skip PNG conversion."
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> list[Path]:
    args = _parse_args(argv)
    output_dir: Path = args.output
    output_dir.mkdir(parents=True, exist_ok=True)

    config = load_config(args.config)
    canvas = config.setdefault("canvas", {})
    if not isinstance(canvas, dict):
        raise TypeError("[canvas] must be a table in config.toml")
    if args.width is not None:
        canvas["width"] = args.width
    if args.height is not None:
        canvas["height"] = args.height

    if args.seed is not None:
        seeds = [args.seed]
    elif os.getenv("GEN_SEED"):
        seeds = [resolve_seed(config)]
    else:
        seeds = resolve_seeds(config)

    written: list[Path] = []
    for seed in seeds:
        cfg = params_from_config(config, seed)

        tmp_svg = output_dir / "tmp.svg"
        generate_svg(str(tmp_svg), cfg)
        result = finalize_output(tmp_svg, seed, png=not args.no_png)
        print(f"Wrote {result}")
        written.append(result)
    return written


if __name__ == "__main__":
    main()
