"""Textbook RSA built on a from-scratch number-theory kernel."""

from naive_rsa.codec import RoundTrip, decode, decrypt, encode, encrypt, roundtrip
from naive_rsa.errors import (
    InvalidModulus,
    MessageTooLarge,
    NoInverseExists,
    PrimeGenerationExhausted,
    RsaError,
    ValueTooLarge,
)
from naive_rsa.keygen import KeyMaterial, generate_keypair, generate_prime, key_from_primes
from naive_rsa.number_theory import egcd, gcd, lcm, mod_inverse, mod_pow
from naive_rsa.primality import is_probable_prime

__all__ = [
    "RoundTrip",
    "decode",
    "decrypt",
    "encode",
    "encrypt",
    "roundtrip",
    "InvalidModulus",
    "MessageTooLarge",
    "NoInverseExists",
    "PrimeGenerationExhausted",
    "RsaError",
    "ValueTooLarge",
    "KeyMaterial",
    "generate_keypair",
    "generate_prime",
    "key_from_primes",
    "egcd",
    "gcd",
    "lcm",
    "mod_inverse",
    "mod_pow",
    "is_probable_prime",
]
