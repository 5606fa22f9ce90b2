"""Seeded fleck pattern: forkable streams, Halton jitter, bezier blobs on a grid."""

from .blob import SEVEN_POINT_CIRCLE, Blob, draw_blob, draw_points
from .halton import HaltonStream, RandomRangeError, halton
from .primes import nth_prime
from .random_stream import SeededRandom
from .surface import RecordingSurface, Surface, SvgSurface
from .tiles import GRID_SIZE, FleckParams, iter_blobs, paint

__all__ = [
    "GRID_SIZE",
    "SEVEN_POINT_CIRCLE",
    "Blob",
    "FleckParams",
    "HaltonStream",
    "RandomRangeError",
    "RecordingSurface",
    "SeededRandom",
    "Surface",
    "SvgSurface",
    "draw_blob",
    "draw_points",
    "halton",
    "iter_blobs",
    "nth_prime",
    "paint",
]
