#!/usr/bin/env python3
"""
Naive RSA demo – generate a key pair and round-trip one line of text.

Usage:
  Interactive (prompts for the message):
    python rsa_demo_cli.py

  Non-interactive:
    python rsa_demo_cli.py --message "hello"
    python rsa_demo_cli.py --message "hello" --bits 128 --seed 42 --plain
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import random
import sys
import textwrap
import time
from typing import Optional, Sequence

# Ensure relative repo imports work even if executed from another directory.
sys.path.insert(0, str(pathlib.Path(__file__).parent.resolve()))

from naive_rsa.codec import RoundTrip, encrypt, roundtrip
from naive_rsa.config import MILLER_RABIN_ROUNDS, PRIME_BITS
from naive_rsa.errors import MessageTooLarge, RsaError
from naive_rsa.keygen import KeyMaterial, generate_keypair
from utils import console_ui

logger = logging.getLogger(__name__)


def _print_summary(threat: str, misuse: str, evidence: str, remedy: str) -> None:
    console_ui.kv("Threat model", threat)
    console_ui.kv("Misuse shown", misuse)
    console_ui.kv("Evidence", evidence)
    console_ui.kv("Remedy", remedy)


def _print_keys(keys: KeyMaterial) -> None:
    console_ui.section("Key Generation")
    console_ui.kv("a", str(keys.prime_a))
    console_ui.kv("b", str(keys.prime_b))
    console_ui.kv("a * b", str(keys.modulus))
    console_ui.kv("λ(a*b)", str(keys.totient))
    console_ui.kv("e", str(keys.public_exponent))
    console_ui.kv("Modular Multiplicative Inverse of e", str(keys.private_exponent))
    console_ui.kv("Modulus size", f"{keys.bit_length} bits (max {keys.max_message_bytes} message bytes)")


def _read_message(message: Optional[str]) -> bytes:
    if message is None:
        try:
            message = input("Enter message to encrypt: ")
        except EOFError:
            # stdin closed before a line arrived: encrypt the empty message.
            message = ""
    return message.rstrip("\r\n").encode("utf-8")


def run_demo(
    message: bytes,
    *,
    bits: int = PRIME_BITS,
    rounds: int = MILLER_RABIN_ROUNDS,
    rng: random.Random | None = None,
) -> RoundTrip:
    """Generate keys, print every intermediate value and return the round-trip result."""

    start = time.perf_counter()
    keys = generate_keypair(bits, rng, rounds=rounds)
    logger.info("Key generation took %.2fs", time.perf_counter() - start)
    _print_keys(keys)

    result = roundtrip(message, keys)
    console_ui.section("Round-trip")
    console_ui.kv("Message", repr(result.message))
    console_ui.kv("Message as integer", str(result.plaintext_int))
    console_ui.kv("Encrypted Message", str(result.ciphertext))
    console_ui.kv("Decrypted Message", str(result.decrypted_int))
    console_ui.kv("Recovered text", result.recovered.decode("utf-8", errors="replace"))
    console_ui.kv("Round-trip OK", str(result.ok))
    if result.ok:
        console_ui.success("Decrypted message matches the input.")
    elif result.decrypted_int == result.plaintext_int:
        console_ui.warning("Integer recovered but leading zero bytes were lost.")
    else:
        console_ui.error("RSA round-trip failed.")

    deterministic = encrypt(result.plaintext_int, keys.public_exponent, keys.modulus) == result.ciphertext
    console_ui.section("Summary")
    _print_summary(
        "attacker can choose plaintexts/ciphertexts",
        "Textbook RSA without padding is deterministic",
        f"encrypt(m) repeated -> same ciphertext: {deterministic}",
        "Use randomized padding (OAEP) and constant-time arithmetic",
    )
    return result


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Naive RSA: generate two probable primes and round-trip one message.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          python rsa_demo_cli.py
          python rsa_demo_cli.py --message "hi rsa"
          python rsa_demo_cli.py --message "hi rsa" --seed 7 --plain
        """),
    )
    ap.add_argument("--message", help="Text to encrypt (prompted for when omitted).")
    ap.add_argument(
        "--bits",
        type=int,
        default=PRIME_BITS,
        help=f"Bit length of each prime (default {PRIME_BITS}).",
    )
    ap.add_argument(
        "--rounds",
        type=int,
        default=MILLER_RABIN_ROUNDS,
        help=f"Miller–Rabin rounds per candidate (default {MILLER_RABIN_ROUNDS}).",
    )
    ap.add_argument("--seed", type=int, help="Seed a deterministic random source.")
    ap.add_argument(
        "--plain",
        action="store_true",
        help="Disable colors/banners; print plain ASCII.",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging verbosity (DEBUG, INFO, WARNING, ...)",
    )
    args = ap.parse_args(argv)
    if args.bits < 2:
        ap.error("--bits must be at least 2")
    if args.rounds < 1:
        ap.error("--rounds must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    console_ui.init(plain=args.plain)
    console_ui.banner("Naive RSA")

    rng = random.Random(args.seed) if args.seed is not None else None
    message = _read_message(args.message)
    try:
        result = run_demo(message, bits=args.bits, rounds=args.rounds, rng=rng)
    except MessageTooLarge:
        console_ui.error("Message too large for the modulus; use a shorter message or more --bits.")
        return 1
    except RsaError as exc:
        console_ui.error(f"Demo failed: {exc}")
        return 1
    # Lost leading zero bytes are a known codec limitation, not a failure.
    return 0 if result.decrypted_int == result.plaintext_int else 1


if __name__ == "__main__":
    sys.exit(main())
