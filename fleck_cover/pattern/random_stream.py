"""Forkable seeded random stream (mulberry32 mix over a 32-bit state)."""

from dataclasses import dataclass

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


@dataclass
class SeededRandom:
    """
    Uniform random stream carrying only its 32-bit signed state.
    Same seed => same sequence of next() values, bit for bit.
    """

    state: int

    def __post_init__(self) -> None:
        self.state = _to_int32(int(self.state))

    def next(self) -> float:
        state = (self.state + _INCREMENT) & _MASK
        self.state = _to_int32(state)

        t = _imul(state ^ (state >> 15), 1 | state)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & _MASK) ^ t
        return (t ^ (t >> 14)) / 4294967296

    def between(self, lo: float, hi: float) -> float:
        return self.next() * (hi - lo) + lo

    def fork(self) -> "SeededRandom":
        # consumes one draw of this stream
        return SeededRandom(int(self.next() * 2**32))
