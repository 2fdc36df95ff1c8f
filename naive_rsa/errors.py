"""Exceptions raised by the RSA kernel."""


class RsaError(ValueError):
    """Base class for every arithmetic or key-generation failure."""


class NoInverseExists(RsaError):
    """Raised when a modular inverse is requested for non-coprime inputs."""


class MessageTooLarge(RsaError):
    """Raised when a plaintext representative is not below the modulus."""


class InvalidModulus(RsaError):
    """Raised when a modulus smaller than 1 reaches modular arithmetic."""


class PrimeGenerationExhausted(RsaError):
    """Raised when a bounded prime or key search runs out of attempts."""


class ValueTooLarge(RsaError):
    """Raised when an integer cannot be turned back into the requested bytes."""
