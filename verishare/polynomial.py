import logging
import random

logger = logging.getLogger(__name__)


def default_random_source():
    """Randomness source used when the caller does not inject one (os.urandom backed)."""
    return random.SystemRandom()


class Polynomial:
    """
    Coefficients of a sharing polynomial over a prime field.

    Index 0 is the secret, higher indices the random coefficients. The
    coefficient tuple is never handed out by the public API, only the
    polynomial's evaluations and commitments.
    """

    __slots__ = ("_coefficients", "_field")

    def __init__(self, coefficients, field):
        if not coefficients:
            raise ValueError("A polynomial needs at least one coefficient")
        self._coefficients = tuple(field.normalize(c) for c in coefficients)
        self._field = field

    @property
    def coefficients(self):
        return self._coefficients

    @property
    def field(self):
        return self._field

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def __len__(self):
        return len(self._coefficients)

    def __call__(self, x: int) -> int:
        return evaluate(self._coefficients, x, self._field)

    def __repr__(self):
        # Keep coefficients out of reprs and tracebacks
        return f"Polynomial(degree={self.degree}, prime={self._field.prime})"


def evaluate(coefficients, x: int, field) -> int:
    """Evaluate the polynomial at x with Horner's method, reducing every step."""
    result = 0
    for coefficient in reversed(coefficients):
        result = field.add(field.mul(result, x), coefficient)
    return result


def generate_polynomial(secret: int, threshold: int, field, rng=None) -> Polynomial:
    """
    Build a degree threshold-1 polynomial whose constant term is the secret.

    The remaining coefficients are drawn uniformly from [0, p) with
    ``rng.randrange``. Any ``random.Random``-compatible object works; pass a
    seeded ``random.Random`` for reproducible splits.
    """
    if threshold < 1:
        raise ValueError(f"Threshold must be at least 1, got {threshold}")
    if rng is None:
        rng = default_random_source()

    coefficients = [field.normalize(secret)] + [
        rng.randrange(0, field.prime)
        for _ in range(threshold - 1)
    ]
    logger.debug("Generated degree %d polynomial over p=%d", threshold - 1, field.prime)
    return Polynomial(coefficients, field)
