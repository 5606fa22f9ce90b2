"""Halton (radical inverse) jitter streams."""

import math

from .primes import TOTAL_PRIMES, nth_prime


class RandomRangeError(AssertionError):
    """A selection value outside [0, 1] reached the prime picker."""

    def __init__(self, value: float) -> None:
        super().__init__(f"invalid random: {value!r} (expected 0 <= random <= 1)")
        self.value = value


def halton(index: int, base: int) -> float:
    """
    Radical inverse of index + base in the given base.
    https://en.wikipedia.org/wiki/Halton_sequence
    """
    # the first terms look irregular for some primes, so skip `base` of them
    index = index + base
    fraction = 1.0
    result = 0.0
    while index > 0:
        fraction /= base
        result += fraction * (index % base)
        index //= base
    return result


class HaltonStream:
    def __init__(self, random: float, base: int) -> None:
        if not 0 <= random <= 1:
            raise RandomRangeError(random)
        self.prime = nth_prime(math.floor(random * TOTAL_PRIMES))
        self.base = base
        self.cursor = 0

    def next(self) -> float:
        value = halton(self.cursor, self.base)
        self.cursor += 1
        return value

    def between(self, lo: float, hi: float) -> float:
        return self.next() * (hi - lo) + lo
