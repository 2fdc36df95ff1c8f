"""Prime search and RSA key derivation."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from naive_rsa.config import (
    MAX_PRIME_ATTEMPTS,
    MILLER_RABIN_ROUNDS,
    PRIME_BITS,
    PUBLIC_EXPONENT,
    default_rng,
)
from naive_rsa.errors import PrimeGenerationExhausted
from naive_rsa.number_theory import gcd, lcm, mod_inverse
from naive_rsa.primality import is_probable_prime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyMaterial:
    """Everything derived for one demo run: both primes, n, λ(n), e and d."""

    prime_a: int
    prime_b: int
    modulus: int
    totient: int
    public_exponent: int
    private_exponent: int

    @property
    def bit_length(self) -> int:
        return self.modulus.bit_length()

    @property
    def max_message_bytes(self) -> int:
        """Longest byte string whose integer value is always below the modulus."""
        return (self.modulus.bit_length() - 1) // 8


def generate_prime(
    bit_length: int,
    rng: random.Random | None = None,
    *,
    rounds: int = MILLER_RABIN_ROUNDS,
    max_attempts: int = MAX_PRIME_ATTEMPTS,
) -> int:
    """Generate a random probable prime with exactly ``bit_length`` bits."""

    if bit_length < 2:
        raise ValueError("Prime size must be at least 2 bits")

    rng = default_rng(rng)
    for attempt in range(1, max_attempts + 1):
        cand = rng.getrandbits(bit_length)
        # Ensure the number has the requested size and is odd.
        cand |= (1 << (bit_length - 1)) | 1
        if is_probable_prime(cand, rounds, rng):
            logger.debug("Found %d-bit prime after %d candidate(s)", bit_length, attempt)
            return cand

    raise PrimeGenerationExhausted(
        f"No {bit_length}-bit prime found in {max_attempts} candidates"
    )


def key_from_primes(prime_a: int, prime_b: int, public_exponent: int = PUBLIC_EXPONENT) -> KeyMaterial:
    """Derive the modulus, Carmichael totient and private exponent from two primes.

    Raises :class:`~naive_rsa.errors.NoInverseExists` when ``public_exponent``
    is not coprime to ``lcm(prime_a - 1, prime_b - 1)``.
    """

    if prime_a == prime_b:
        raise ValueError("The two primes must be distinct")

    modulus = prime_a * prime_b
    totient = lcm(prime_a - 1, prime_b - 1)
    private_exponent = mod_inverse(public_exponent, totient)
    return KeyMaterial(
        prime_a=prime_a,
        prime_b=prime_b,
        modulus=modulus,
        totient=totient,
        public_exponent=public_exponent,
        private_exponent=private_exponent,
    )


def generate_keypair(
    bit_length: int = PRIME_BITS,
    rng: random.Random | None = None,
    *,
    public_exponent: int = PUBLIC_EXPONENT,
    rounds: int = MILLER_RABIN_ROUNDS,
    max_attempts: int = MAX_PRIME_ATTEMPTS,
) -> KeyMaterial:
    """Generate two independent ``bit_length``-bit primes and the keys built on them.

    Pairs are redrawn when the primes collide or when ``public_exponent``
    shares a factor with the totient; after ``max_attempts`` pairs the search
    gives up with :class:`~naive_rsa.errors.PrimeGenerationExhausted`.
    """

    if public_exponent % 2 == 0:
        raise ValueError("Public exponent must be odd")

    rng = default_rng(rng)
    for attempt in range(1, max_attempts + 1):
        a = generate_prime(bit_length, rng, rounds=rounds, max_attempts=max_attempts)
        b = generate_prime(bit_length, rng, rounds=rounds, max_attempts=max_attempts)
        if a == b:
            logger.info("Attempt %d: both primes equal, retrying", attempt)
            continue
        totient = lcm(a - 1, b - 1)
        if gcd(public_exponent, totient) != 1:
            logger.info("Attempt %d: e=%d not coprime to λ(n), retrying", attempt, public_exponent)
            continue
        keys = key_from_primes(a, b, public_exponent)
        logger.info("Generated %d-bit modulus after %d attempt(s)", keys.bit_length, attempt)
        return keys

    raise PrimeGenerationExhausted(
        f"No usable prime pair of {bit_length} bits found in {max_attempts} attempts"
    )


__all__ = ["KeyMaterial", "generate_prime", "key_from_primes", "generate_keypair"]
