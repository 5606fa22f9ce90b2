"""Seven point bezier blobs: randomized unit circles emitted as closed paths."""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .random_stream import SeededRandom
from .surface import Surface

# [cp1x, cp1y, px, py, cp2x, cp2y]
BlobPoint = Tuple[float, float, float, float, float, float]

MAX_POINT_DISTANCE = 0.5

# -------------------------
# Template
# -------------------------

# Bezier points for a seven point circle, to 3 decimal places
SEVEN_POINT_CIRCLE: Tuple[BlobPoint, ...] = (
    (-0.304, -1.0, 0.0, -1.0, 0.304, -1.0),
    (0.592, -0.861, 0.782, -0.623, 0.972, -0.386),
    (1.043, -0.074, 0.975, 0.223, 0.907, 0.519),
    (0.708, 0.769, 0.434, 0.901, 0.16, 1.033),
    (-0.16, 1.033, -0.434, 0.901, -0.708, 0.769),
    (-0.907, 0.519, -0.975, 0.223, -1.043, -0.074),
    (-0.972, -0.386, -0.782, -0.623, -0.592, -0.861),
)


def bezier_circle_points(points: int) -> List[BlobPoint]:
    """
    Unit circle as `points` cubic segments, starting at the top (0, -1)
    and rotating clockwise in screen coordinates. SEVEN_POINT_CIRCLE is
    bezier_circle_points(7) rounded.
    """
    angle_per_point = 2 * math.pi / points
    control_distance = (4 / 3) * math.tan(math.pi / (2 * points))
    base = ((-control_distance, -1.0), (0.0, -1.0), (control_distance, -1.0))

    rows: List[BlobPoint] = []
    for i in range(points):
        c = math.cos(angle_per_point * i)
        s = math.sin(angle_per_point * i)
        row: List[float] = []
        for x, y in base:
            row.extend((x * c - y * s, x * s + y * c))
        rows.append(tuple(row))  # type: ignore[arg-type]
    return rows


# -------------------------
# Randomisation + path emission
# -------------------------


def randomise_point(point: Sequence[float], random: SeededRandom) -> BlobPoint:
    """Shift the whole row (cp1, point, cp2) by one random vector."""
    distance = random.next() * MAX_POINT_DISTANCE
    angle = random.next() * math.pi * 2
    x_shift = math.sin(angle) * distance
    y_shift = math.cos(angle) * distance
    return (
        point[0] + x_shift,
        point[1] + y_shift,
        point[2] + x_shift,
        point[3] + y_shift,
        point[4] + x_shift,
        point[5] + y_shift,
    )


def randomise_points(
    random: SeededRandom, template: Sequence[Sequence[float]] = SEVEN_POINT_CIRCLE
) -> List[BlobPoint]:
    # template order is draw order
    return [randomise_point(point, random) for point in template]


def draw_points(surface: Surface, points: Sequence[Sequence[float]]) -> None:
    n = len(points)
    surface.begin_path()
    surface.move_to(points[0][2], points[0][3])
    for i in range(n):
        nxt = points[(i + 1) % n]
        surface.bezier_curve_to(
            points[i][4], points[i][5], nxt[0], nxt[1], nxt[2], nxt[3]
        )
    surface.close_path()


@dataclass(frozen=True)
class Blob:
    points: Tuple[BlobPoint, ...]
    x: float
    y: float
    size: float
    color: str

    def draw(self, surface: Surface) -> None:
        surface.save()
        try:
            surface.translate(self.x, self.y)
            surface.scale(self.size, self.size)
            draw_points(surface, self.points)
            surface.fill(self.color)
        finally:
            surface.restore()


def make_blob(
    random: SeededRandom, x: float, y: float, size: float, color: str
) -> Blob:
    return Blob(tuple(randomise_points(random)), x, y, size, color)


def draw_blob(
    surface: Surface,
    *,
    random: SeededRandom,
    x: float,
    y: float,
    size: float,
    color: str,
) -> None:
    make_blob(random, x, y, size, color).draw(surface)
