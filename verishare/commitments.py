import logging
from collections.abc import Sequence

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend

from verishare.errors import MalformedCommitmentSet
from verishare.field import PrimeField

logger = logging.getLogger(__name__)


class CommitmentSet(Sequence):
    """
    Public per-coefficient commitments of a sharing polynomial.

    Each entry is ``coefficient mod p``. This is a checksum that lets a share
    holder confirm their share lies on the dealer's polynomial. It is NOT a
    hiding commitment: entry 0 is the secret itself, so the set must only be
    given to parties that may learn the secret. A Feldman-style scheme
    committing to g^coefficient is required for real confidentiality.
    """

    __slots__ = ("_values", "_prime")

    def __init__(self, values, prime: int):
        field = PrimeField(prime)
        self._values = tuple(values)
        self._prime = prime
        for i, value in enumerate(self._values):
            if not field.contains(value):
                raise MalformedCommitmentSet(f"Commitment {i} is not a field element: {value}")

    @property
    def prime(self) -> int:
        return self._prime

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if isinstance(other, CommitmentSet):
            return self._prime == other._prime and self._values == other._values
        return NotImplemented

    def __hash__(self):
        return hash((self._prime, self._values))

    def __repr__(self):
        return f"CommitmentSet(threshold={len(self._values)}, prime={self._prime})"

    def fingerprint(self) -> str:
        """SHA-256 over modulus and entries, for comparing sets out of band."""
        width = (self._prime.bit_length() + 7) // 8
        digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
        digest.update(self._prime.to_bytes(width, 'big'))
        digest.update(len(self._values).to_bytes(4, 'big'))
        for value in self._values:
            digest.update(value.to_bytes(width, 'big'))
        return digest.finalize().hex()


def generate_commitments(coefficients, prime: int) -> CommitmentSet:
    """One commitment per coefficient: coefficient mod p."""
    return CommitmentSet((c % prime for c in coefficients), prime)


def _check_commitments(commitments, field, threshold):
    if isinstance(commitments, CommitmentSet) and commitments.prime != field.prime:
        raise MalformedCommitmentSet(
            f"Commitments are bound to modulus {commitments.prime}, not {field.prime}"
        )
    if len(commitments) == 0:
        raise MalformedCommitmentSet("Commitment set is empty")
    if threshold is not None and len(commitments) != threshold:
        raise MalformedCommitmentSet(
            f"Expected {threshold} commitments, got {len(commitments)}"
        )
    for i, value in enumerate(commitments):
        if not field.contains(value):
            raise MalformedCommitmentSet(f"Commitment {i} is not a field element: {value}")


def verify_share(x: int, y: int, commitments, prime: int, threshold=None) -> bool:
    """
    Check a share against the dealer's commitments.

    Returns False when the share does not lie on the committed polynomial.
    A commitment set that cannot be checked at all raises
    MalformedCommitmentSet instead.
    """
    field = PrimeField(prime)
    _check_commitments(commitments, field, threshold)

    expected = 0
    for i, commitment in enumerate(commitments):
        expected = field.add(expected, field.mul(commitment, field.pow(x, i)))

    if expected != y:
        logger.warning("Share x=%d failed verification against %d commitments", x, len(commitments))
        return False
    return True
