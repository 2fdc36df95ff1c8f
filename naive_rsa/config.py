"""Fixed parameters of the demo and the default randomness source."""

from __future__ import annotations

import random
import secrets

# Largest known Fermat prime, 2**2**4 + 1.
PUBLIC_EXPONENT = 65537
PRIME_BITS = 256
MILLER_RABIN_ROUNDS = 10
MAX_PRIME_ATTEMPTS = 10_000

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)


def default_rng(rng: random.Random | None = None) -> random.Random:
    """Return *rng* unchanged, or a CSPRNG-backed source when it is ``None``."""

    if rng is None:
        return secrets.SystemRandom()
    return rng


__all__ = [
    "PUBLIC_EXPONENT",
    "PRIME_BITS",
    "MILLER_RABIN_ROUNDS",
    "MAX_PRIME_ATTEMPTS",
    "SMALL_PRIMES",
    "default_rng",
]
