# verishare/__init__.py
from .errors import (
    SecretSharingError,
    InvalidConfig,
    SecretOutOfRange,
    InsufficientShares,
    NoModularInverse,
    MalformedCommitmentSet,
)
from .field import PrimeField
from .polynomial import Polynomial, evaluate, generate_polynomial, default_random_source
from .commitments import CommitmentSet, generate_commitments, verify_share
from .crypto import Share, check_scheme, evaluate_shares, split_secret, generate_shares, reconstruct_secret
