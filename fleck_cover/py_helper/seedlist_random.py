#!/usr/bin/env uv run
"""Generate a random seedlist and store it in config.toml."""

import argparse
import random
from pathlib import Path

from fleck_cover.py_helper import variables
from fleck_cover.py_helper.config import load_config


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(item) for item in value) + "]"
    raise TypeError(f"Unsupported TOML value: {type(value).__name__}")


def _write_toml(data: dict, path: Path) -> None:
    lines: list[str] = []

    root_items = [(k, v) for k, v in data.items() if not isinstance(v, dict)]
    for key, value in root_items:
        lines.append(f"{key} = {_format_value(value)}")
    if root_items:
        lines.append("")

    section_order = [k for k, v in data.items() if isinstance(v, dict)]
    for idx, section in enumerate(section_order):
        table = data[section]
        lines.append(f"[{section}]")
        for key in sorted(table.keys()):
            lines.append(f"    {key} = {_format_value(table[key])}")
        if idx != len(section_order) - 1:
            lines.append("")
            lines.append("")

    path.write_text("\n".join(lines).rstrip() + "\n", encoding="utf-8")


def make_seedlist(
    count: int, min_value: int, max_value: int, rng: random.Random | None = None
) -> list[int]:
    if count <= 0:
        raise ValueError("count must be a positive integer")
    if min_value > max_value:
        raise ValueError("--min must be <= --max")
    rng = rng or random.Random()
    return [rng.randint(min_value, max_value) for _ in range(count)]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create a random seed list.")
    parser.add_argument("count", type=int, help="How many seeds to generate.")
    parser.add_argument(
        "--min",
        dest="min_value",
        type=int,
        default=0,
        help="Minimum random value (inclusive).",
    )
    parser.add_argument(
        "--max",
        dest="max_value",
        type=int,
        default=9999,
        help="Maximum random value (inclusive).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(__file__).resolve().parents[1] / variables.CONFIG,
        help="config.toml to update.",
    )
    args = parser.parse_args(argv)

    seeds = make_seedlist(args.count, args.min_value, args.max_value)

    config = load_config(args.config)
    style = config.get("style")
    if style is None:
        style = {}
    if not isinstance(style, dict):
        raise TypeError("[style] must be a table in config.toml")

    style["seedlist"] = seeds
    config["style"] = style

    _write_toml(config, args.config)
    print(f"Wrote {len(seeds)} seeds to {args.config}")


if __name__ == "__main__":
    main()
