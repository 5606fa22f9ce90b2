"""Grid tiling: one forked stream per column, cell and blob."""

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from .blob import Blob, make_blob
from .halton import HaltonStream
from .random_stream import SeededRandom
from .surface import Surface

GRID_SIZE = 300

MIN_RADIUS = 1.0
MAX_RADIUS = 24.0
RADIUS_SCALE = 0.7


@dataclass
class FleckParams:
    seed: int
    density: int
    size_base: float
    colors: Sequence[str]


def _steps(extent: float, grid_size: float) -> Iterator[float]:
    pos = 0
    while pos < extent:
        yield pos
        pos += grid_size


def pick_radius(random: SeededRandom, size_base: float) -> float:
    """Base radius with two independent size tiers, clamped to [1, 24]."""
    radius = size_base
    if random.next() > 0.125:
        radius /= 2
    # both tiers can fire: rare large flecks
    if random.next() > 0.925:
        radius *= 4
    return max(MIN_RADIUS, min(radius, MAX_RADIUS))


def iter_blobs(
    width: float, height: float, params: FleckParams, grid_size: float = GRID_SIZE
) -> Iterator[Blob]:
    """
    Yield every blob covering width x height in paint order.
    Columns fork from the root in ascending x, cells from their column in
    ascending y, so growing the canvas never changes existing cells.
    """
    random_x = SeededRandom(params.seed)

    for x in _steps(width, grid_size):
        random_y = random_x.fork()

        for y in _steps(height, grid_size):
            cell = random_y.fork()
            halton_x = HaltonStream(cell.next(), 2)
            halton_y = HaltonStream(cell.next(), 3)

            for _ in range(params.density):
                item = cell.fork()
                radius = pick_radius(item, params.size_base) * RADIUS_SCALE
                color = params.colors[
                    math.floor(item.between(0, len(params.colors)))
                ]
                yield make_blob(
                    item,
                    x + halton_x.between(0, grid_size),
                    y + halton_y.between(0, grid_size),
                    radius,
                    color,
                )


def paint(
    surface: Surface,
    width: float,
    height: float,
    params: FleckParams,
    grid_size: float = GRID_SIZE,
) -> int:
    count = 0
    for blob in iter_blobs(width, height, params, grid_size):
        blob.draw(surface)
        count += 1
    return count
