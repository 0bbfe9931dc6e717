import logging
import config
from verishare.commitments import generate_commitments, verify_share
from verishare.crypto import check_scheme, evaluate_shares, reconstruct_secret
from verishare.errors import SecretOutOfRange
from verishare.field import PrimeField
from verishare.polynomial import generate_polynomial

logger = logging.getLogger(__name__)

class ShamirSecretSharing:
    """Implementation of Shamir's Secret Sharing scheme"""

    def __init__(self, threshold: int, total_shares: int, prime: int = None, rng=None):
        if prime is None:
            prime = config.Config.SHAMIR_PRIME
        check_scheme(threshold, total_shares, prime)

        self._threshold = threshold
        self._total_shares = total_shares
        self._field = PrimeField(prime)
        self._rng = rng

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def total_shares(self) -> int:
        return self._total_shares

    @property
    def prime(self) -> int:
        return self._field.prime

    def __repr__(self):
        return (f"ShamirSecretSharing(threshold={self._threshold}, "
                f"total_shares={self._total_shares}, prime={self.prime})")

    def _polynomial(self, secret: int):
        if not self._field.contains(secret):
            raise SecretOutOfRange("Secret is too large for the chosen prime")
        return generate_polynomial(secret, self._threshold, self._field, self._rng)

    def split_secret(self, secret: int) -> list:
        """Split secret into shares (x, y) for x = 1..total_shares"""
        shares = evaluate_shares(self._polynomial(secret), self._total_shares)
        logger.debug("Split secret into %d shares", len(shares))
        return shares

    def split_with_commitments(self, secret: int):
        """Split secret and return the shares with the polynomial's commitments"""
        polynomial = self._polynomial(secret)
        commitments = generate_commitments(polynomial.coefficients, self.prime)
        return evaluate_shares(polynomial, self._total_shares), commitments

    def verify_share(self, share, commitments) -> bool:
        """Check one (x, y) share against this scheme's commitments"""
        x, y = share
        return verify_share(x, y, commitments, self.prime, threshold=self._threshold)

    def recover_secret(self, shares) -> int:
        """Recover secret from shares using Lagrange interpolation"""
        return reconstruct_secret(shares, self.prime, threshold=self._threshold)

    @property
    def max_secret_bytes(self) -> int:
        """Longest byte string split_bytes accepts for this prime"""
        # 0x01 marker plus the secret must stay below 2**(bits-1) <= prime
        return max((self.prime.bit_length() - 2) // 8, 0)

    def split_bytes(self, secret: bytes) -> list:
        """Split a byte string; recover_bytes returns it unchanged, leading zeros included"""
        if len(secret) > self.max_secret_bytes:
            raise SecretOutOfRange(
                f"Secret is {len(secret)} bytes, at most {self.max_secret_bytes} fit the chosen prime"
            )
        return self.split_secret(int.from_bytes(b"\x01" + secret, 'big'))

    def recover_bytes(self, shares) -> bytes:
        """Recover a secret split with split_bytes"""
        secret_int = self.recover_secret(shares)
        encoded = secret_int.to_bytes((secret_int.bit_length() + 7) // 8, 'big')
        if encoded[:1] != b"\x01":
            raise SecretOutOfRange("Shares do not encode a byte secret")
        return encoded[1:]
