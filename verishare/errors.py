class SecretSharingError(ValueError):
    """Base class for every error raised by verishare."""


class InvalidConfig(SecretSharingError):
    """Scheme parameters that can never produce a working split."""


class SecretOutOfRange(SecretSharingError):
    """Secret is not a field element of the scheme's modulus."""


class InsufficientShares(SecretSharingError):
    """Fewer shares than the threshold were presented for reconstruction."""

    def __init__(self, required, received):
        self.required = required
        self.received = received
        super().__init__(f"Not enough shares. Need {required}, got {received}")


class NoModularInverse(SecretSharingError):
    """
    Raised when a value has no inverse modulo the field prime.

    During reconstruction this means two shares carry the same x coordinate,
    or the modulus is not prime.
    """

    def __init__(self, value, modulus):
        self.value = value
        self.modulus = modulus
        super().__init__(f"{value} has no modular inverse modulo {modulus}")


class MalformedCommitmentSet(SecretSharingError):
    """Commitment set does not match the scheme it is checked against."""
