"""Miller–Rabin probabilistic primality test."""

from __future__ import annotations

import random
from typing import Tuple

from naive_rsa.config import MILLER_RABIN_ROUNDS, SMALL_PRIMES, default_rng
from naive_rsa.number_theory import mod_pow


def decompose(n: int) -> Tuple[int, int]:
    """Write ``n - 1`` as ``d * 2**s`` with ``d`` odd and return ``(d, s)``."""

    if n < 3:
        raise ValueError("decompose expects an integer greater than 2")

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return d, s


def passes_round(a: int, n: int, d: int, s: int) -> bool:
    """Return ``True`` when witness ``a`` fails to prove ``n`` composite."""

    x = mod_pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = mod_pow(x, 2, n)
        if x == n - 1:
            return True
        if x == 1:
            # Non-trivial square root of 1.
            return False
    return False


def is_probable_prime(
    n: int,
    rounds: int = MILLER_RABIN_ROUNDS,
    rng: random.Random | None = None,
) -> bool:
    """Return ``True`` when ``n`` is probably prime using Miller–Rabin.

    A composite survives ``rounds`` independent witnesses with probability at
    most ``4**-rounds``.  Witnesses are drawn from *rng*, so a seeded
    ``random.Random`` makes the verdict reproducible.
    """

    if rounds < 1:
        raise ValueError("At least one Miller–Rabin round is required")
    if n < 2:
        return False

    # Small primes settle n < 31; the witness range [2, n-2] needs n >= 5.
    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    rng = default_rng(rng)
    d, s = decompose(n)
    for _ in range(rounds):
        a = rng.randrange(2, n - 1)  # 2 <= a <= n-2
        if not passes_round(a, n, d, s):
            return False
    return True


__all__ = ["decompose", "passes_round", "is_probable_prime"]
