"""Integer arithmetic underpinning RSA: GCD, LCM, modular powers and inverses.

Every routine takes all of its operands as arguments and returns a fresh
``int``; nothing here touches module state.
"""

from __future__ import annotations

from typing import Tuple

from naive_rsa.errors import InvalidModulus, NoInverseExists


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers (iterative Euclid)."""

    if a < 0 or b < 0:
        raise ValueError("gcd is defined for non-negative integers only")

    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero when either argument is zero."""

    if a == 0 or b == 0:
        return 0
    # Divide first so the intermediate never exceeds the result.
    return (a // gcd(a, b)) * b


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base**exponent mod modulus`` by right-to-left square-and-multiply."""

    if modulus < 1:
        raise InvalidModulus(f"Modulus must be at least 1, got {modulus}")
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus == 1:
        return 0

    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return ``(g, x, y)`` such that ``a*x + b*y == g == gcd(a, b)``."""

    x0, x1 = 1, 0
    y0, y1 = 0, 1
    while b != 0:
        q, rem = divmod(a, b)
        a, b = b, rem
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def mod_inverse(a: int, modulus: int) -> int:
    """Return ``x`` in ``[0, modulus)`` with ``(a * x) % modulus == 1``.

    Runs Euclid on ``(modulus, a)`` while carrying only the coefficient of
    ``a``.  Raises :class:`NoInverseExists` when the two share a factor.
    """

    if modulus < 1:
        raise InvalidModulus(f"Modulus must be at least 1, got {modulus}")
    if modulus == 1:
        return 0

    r0, r1 = modulus, a % modulus
    t0, t1 = 0, 1
    while r1 != 0:
        q, rem = divmod(r0, r1)
        r0, r1 = r1, rem
        t0, t1 = t1, t0 - q * t1

    if r0 != 1:
        raise NoInverseExists(f"{a} has no inverse modulo {modulus} (gcd={r0})")
    # |t0| < modulus at termination, one correction is enough.
    if t0 < 0:
        t0 += modulus
    return t0


__all__ = ["gcd", "lcm", "mod_pow", "egcd", "mod_inverse"]
