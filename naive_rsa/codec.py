"""Byte/integer conversion and the textbook RSA primitives.

``decode`` returns the minimal big-endian form unless a length is given, so
leading zero bytes of a message do not survive the round-trip.  No padding is
applied: a message must encode to an integer below the modulus.
"""

from __future__ import annotations

from dataclasses import dataclass

from naive_rsa.errors import MessageTooLarge, ValueTooLarge
from naive_rsa.keygen import KeyMaterial
from naive_rsa.number_theory import mod_pow


def encode(data: bytes | bytearray | memoryview) -> int:
    """Convert a byte-string into its non-negative integer representation."""

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    return int.from_bytes(bytes(data), "big", signed=False)


def decode(value: int, length: int | None = None) -> bytes:
    """Big-endian bytes of *value*, minimal width unless *length* is given."""

    if value < 0:
        raise ValueTooLarge("Negative integers have no byte representation")

    width = (value.bit_length() + 7) // 8 if length is None else length
    try:
        return value.to_bytes(width, "big")
    except OverflowError as exc:
        raise ValueTooLarge(f"{value.bit_length()}-bit integer does not fit {width} byte(s)") from exc


def encrypt(plaintext_int: int, public_exponent: int, modulus: int) -> int:
    if not (0 <= plaintext_int < modulus):
        raise MessageTooLarge("Message representative out of range [0, n)")
    return mod_pow(plaintext_int, public_exponent, modulus)


def decrypt(ciphertext_int: int, private_exponent: int, modulus: int) -> int:
    return mod_pow(ciphertext_int, private_exponent, modulus)


@dataclass(frozen=True)
class RoundTrip:
    """Intermediate values of one encode/encrypt/decrypt/decode pass."""

    message: bytes
    plaintext_int: int
    ciphertext: int
    decrypted_int: int
    recovered: bytes

    @property
    def ok(self) -> bool:
        return self.recovered == self.message


def roundtrip(message: bytes, keys: KeyMaterial) -> RoundTrip:
    """Encrypt *message* under *keys* and decrypt it again."""

    m = encode(message)
    c = encrypt(m, keys.public_exponent, keys.modulus)
    dec = decrypt(c, keys.private_exponent, keys.modulus)
    return RoundTrip(
        message=bytes(message),
        plaintext_int=m,
        ciphertext=c,
        decrypted_int=dec,
        recovered=decode(dec),
    )


__all__ = ["encode", "decode", "encrypt", "decrypt", "RoundTrip", "roundtrip"]
