def test_rsa_roundtrip(rng):
    from naive_rsa.codec import roundtrip
    from naive_rsa.keygen import generate_keypair

    keys = generate_keypair(128, rng)
    result = roundtrip(b"hi rsa", keys)
    assert result.ok and all(
        isinstance(value, int) for value in (keys.modulus, keys.public_exponent, keys.private_exponent)
    )


def test_default_parameters_produce_512_bit_modulus():
    from naive_rsa.config import PUBLIC_EXPONENT
    from naive_rsa.keygen import generate_keypair

    keys = generate_keypair()
    assert keys.prime_a.bit_length() == 256 and keys.prime_b.bit_length() == 256
    assert keys.modulus.bit_length() in (511, 512)
    assert keys.public_exponent == PUBLIC_EXPONENT


def test_textbook_example():
    from naive_rsa.codec import decrypt, encrypt
    from naive_rsa.keygen import key_from_primes

    keys = key_from_primes(61, 53, 17)
    assert keys.modulus == 3233
    assert keys.totient == 780
    assert keys.private_exponent == 413
    assert encrypt(65, 17, 3233) == 2790
    assert decrypt(2790, 413, 3233) == 65
