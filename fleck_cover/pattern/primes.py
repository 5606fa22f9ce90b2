"""Cyclic table of the first primes, used to pick a jitter prime."""

from typing import Tuple

TOTAL_PRIMES = 2000


def first_primes(limit: int) -> Tuple[int, ...]:
    primes: list[int] = []
    candidate = 2
    while len(primes) < limit:
        if all(candidate % p for p in primes if p * p <= candidate):
            primes.append(candidate)
        candidate += 1
    return tuple(primes)


PRIMES = first_primes(TOTAL_PRIMES)


def nth_prime(index: int) -> int:
    return PRIMES[index % len(PRIMES)]
