import pytest
from Crypto.Util.number import bytes_to_long, long_to_bytes

from naive_rsa.codec import RoundTrip, decode, decrypt, encode, encrypt, roundtrip
from naive_rsa.errors import MessageTooLarge, ValueTooLarge
from naive_rsa.keygen import generate_keypair, key_from_primes


@pytest.mark.parametrize("data", [b"A", b"hi rsa", "héllo wörld".encode("utf-8"), bytes(range(1, 200))])
def test_encode_decode_match_pycryptodome(data):
    value = encode(data)
    assert value == bytes_to_long(data)
    assert decode(value) == long_to_bytes(value) == data


def test_encode_accepts_bytes_like():
    assert encode(bytearray(b"\x01\x00")) == 256
    assert encode(memoryview(b"\xff")) == 255
    assert encode(b"") == 0
    with pytest.raises(TypeError):
        encode("text")


def test_decode_zero_and_explicit_length():
    assert decode(0) == b""
    assert decode(0, 2) == b"\x00\x00"
    assert decode(1, 4) == b"\x00\x00\x00\x01"


def test_leading_zero_bytes_are_lost_without_length():
    data = b"\x00\x00abc"
    assert decode(encode(data)) == b"abc"
    assert decode(encode(data), len(data)) == data


def test_decode_rejects_values_that_do_not_fit():
    with pytest.raises(ValueTooLarge):
        decode(256, 1)
    with pytest.raises(ValueTooLarge):
        decode(-1)


def test_textbook_encrypt_decrypt():
    assert encrypt(65, 17, 3233) == 2790
    assert decrypt(2790, 413, 3233) == 65


def test_every_plaintext_roundtrips_under_small_key():
    keys = key_from_primes(61, 53, 17)
    e, d, n = keys.public_exponent, keys.private_exponent, keys.modulus
    for p in range(n):
        assert decrypt(encrypt(p, e, n), d, n) == p


def test_plaintext_must_be_below_modulus():
    with pytest.raises(MessageTooLarge):
        encrypt(3233, 17, 3233)
    with pytest.raises(MessageTooLarge):
        encrypt(-1, 17, 3233)
    assert encrypt(3232, 17, 3233) == pow(3232, 17, 3233)


def test_roundtrip_reports_intermediate_values(rng):
    keys = generate_keypair(64, rng)
    message = b"hello, rsa"
    result = roundtrip(message, keys)
    assert isinstance(result, RoundTrip)
    assert result.ok
    assert result.plaintext_int == encode(message)
    assert result.ciphertext == pow(result.plaintext_int, keys.public_exponent, keys.modulus)
    assert result.decrypted_int == result.plaintext_int
    assert result.recovered == message


def test_roundtrip_of_message_at_size_limit(rng):
    keys = generate_keypair(64, rng)
    message = b"\xff" * keys.max_message_bytes
    assert roundtrip(message, keys).ok
    with pytest.raises(MessageTooLarge):
        roundtrip(b"\xff" * (keys.modulus.bit_length() // 8 + 1), keys)
