"""Read config.toml and turn it into validated pattern parameters."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from fleck_cover.pattern.tiles import GRID_SIZE, FleckParams


@dataclass
class FleckConfig:
    params: FleckParams
    width: int = 1200
    height: int = 1200
    grid_size: int = GRID_SIZE
    background: str | None = None


def load_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("rb") as f:
        return tomllib.load(f)


def _table(config: Mapping[str, object], name: str) -> dict:
    table = config.get(name, {})
    if not isinstance(table, dict):
        raise TypeError(f"[{name}] must be a table in config.toml")
    return table


def resolve_seed(config: Mapping[str, object]) -> int:
    env_seed = os.getenv("GEN_SEED")
    if env_seed:
        return int(env_seed)
    style = _table(config, "style")
    if style.get("seed") is not None:
        return int(style["seed"])
    seed_list = style.get("seedlist")
    if isinstance(seed_list, list) and seed_list:
        return int(seed_list[0])
    raise ValueError("Missing [style].seed or [style].seedlist in config.toml")


def resolve_seeds(config: Mapping[str, object]) -> list[int]:
    seed_list = _table(config, "style").get("seedlist")
    if seed_list is None:
        raise ValueError("Missing [style].seedlist in config.toml")
    if not isinstance(seed_list, list) or not seed_list:
        raise ValueError("[style].seedlist must be a non-empty list in config.toml")
    return [int(value) for value in seed_list]


def _positive_int(value: object, name: str, *, allow_zero: bool = False) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise ValueError(f"{name} must be {bound}, got {value}")
    return value


def params_from_config(config: Mapping[str, object], seed: int) -> FleckConfig:
    """
    Validate the [style], [canvas] and [colors] tables.
    The pattern core trusts these values, so every check happens here.
    """
    style = _table(config, "style")
    canvas = _table(config, "canvas")
    colors = _table(config, "colors")

    density = _positive_int(style.get("density"), "density", allow_zero=True)

    size_base = style.get("size_base")
    if isinstance(size_base, bool) or not isinstance(size_base, (int, float)):
        raise ValueError(f"size_base must be a number, got {size_base!r}")
    if size_base <= 0:
        raise ValueError(f"size_base must be > 0, got {size_base}")

    palette = colors.get("palette")
    if not isinstance(palette, list) or not palette:
        raise ValueError("[colors].palette must be a non-empty list in config.toml")
    if not all(isinstance(c, str) for c in palette):
        raise ValueError("[colors].palette entries must be strings")

    return FleckConfig(
        width=_positive_int(canvas.get("width", 1200), "width"),
        height=_positive_int(canvas.get("height", 1200), "height"),
        grid_size=_positive_int(style.get("grid_size", GRID_SIZE), "grid_size"),
        background=colors.get("bg"),
        params=FleckParams(
            seed=seed,
            density=density,
            size_base=float(size_base),
            colors=list(palette),
        ),
    )
