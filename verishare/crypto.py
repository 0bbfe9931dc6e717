import logging
from collections import namedtuple

import config
from verishare.commitments import generate_commitments
from verishare.errors import InsufficientShares, InvalidConfig
from verishare.field import PrimeField
from verishare.polynomial import evaluate, generate_polynomial

logger = logging.getLogger(__name__)

# Default field for the module level helpers
PRIME = config.Config.SHAMIR_PRIME

Share = namedtuple("Share", ["x", "y"])
Share.__doc__ = "A participant's point (x, f(x) mod p) on the sharing polynomial."


def evaluate_shares(polynomial, num_shares):
    """Evaluate the polynomial at x = 1..num_shares."""
    field = polynomial.field
    return [
        Share(x, evaluate(polynomial.coefficients, x, field))
        for x in range(1, num_shares + 1)
    ]


def check_scheme(threshold, num_shares, prime):
    """Raise InvalidConfig for parameters that cannot produce a working split."""
    if threshold < 1:
        raise InvalidConfig(f"Threshold must be at least 1, got {threshold}")
    if threshold > num_shares:
        logger.warning("Rejected scheme: threshold %d > total shares %d", threshold, num_shares)
        raise InvalidConfig("Threshold cannot be greater than the number of shares.")
    if prime <= num_shares:
        raise InvalidConfig(f"Prime {prime} must exceed the number of shares {num_shares}")


def split_secret(secret, threshold, num_shares, prime=PRIME, rng=None):
    """
    Splits a secret into num_shares shares, any threshold of which recover it.
    """
    check_scheme(threshold, num_shares, prime)
    field = PrimeField(prime)
    polynomial = generate_polynomial(secret, threshold, field, rng)
    shares = evaluate_shares(polynomial, num_shares)
    logger.debug("Split secret into %d shares (threshold %d)", num_shares, threshold)
    return shares


def generate_shares(secret, threshold, num_shares, prime=PRIME, rng=None):
    """
    Splits a secret and commits to the polynomial it was split with.

    Returns ``({x: y}, commitments)``; the commitment set lets every holder
    check their own share with ``verify_share``.
    """
    check_scheme(threshold, num_shares, prime)
    field = PrimeField(prime)
    polynomial = generate_polynomial(secret, threshold, field, rng)
    commitments = generate_commitments(polynomial.coefficients, prime)
    shares = dict(evaluate_shares(polynomial, num_shares))
    logger.debug("Generated %d shares with %d commitments", num_shares, len(commitments))
    return shares, commitments


def _as_points(shares):
    if hasattr(shares, "items"):
        return [Share(x, y) for x, y in shares.items()]
    return [Share(x, y) for x, y in shares]


def lagrange_coefficient(i, xs, field):
    """Lagrange basis polynomial L_i evaluated at x = 0."""
    x_i = xs[i]
    numerator = 1
    denominator = 1
    for j, x_j in enumerate(xs):
        if j == i:
            continue
        numerator = field.mul(numerator, field.neg(x_j))
        denominator = field.mul(denominator, field.sub(x_i, x_j))
    # Duplicate x coordinates make the denominator 0 and raise here
    return field.mul(numerator, field.inverse(denominator))


def reconstruct_secret(shares, prime=PRIME, threshold=None):
    """
    Reconstructs the secret from shares using Lagrange interpolation at x = 0.

    ``shares`` is a list of ``(x, y)`` pairs or a ``{x: y}`` mapping. Supplying
    more shares than the threshold gives the same result. Shares from different
    splits give a meaningless value, not an error.
    """
    points = _as_points(shares)
    required = max(threshold or 1, 1)
    if len(points) < required:
        raise InsufficientShares(required, len(points))

    field = PrimeField(prime)
    xs = [field.normalize(x) for x, _ in points]

    secret = 0
    for i, (_, y_i) in enumerate(points):
        term = field.mul(y_i, lagrange_coefficient(i, xs, field))
        secret = field.add(secret, term)

    logger.debug("Reconstructed secret from %d shares", len(points))
    return secret
