# ----- main.py -----
import argparse
import logging
import random
import sys
from tabulate import tabulate

import config
from shamir import ShamirSecretSharing
from verishare import SecretSharingError, generate_shares, reconstruct_secret, verify_share

logger = logging.getLogger(__name__)

# --- Helper Functions ---
def print_header(title):
    print("\n" + "="*50)
    print(f"{title}")
    print("="*50)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Split a secret into verifiable Shamir shares and recover it.")
    parser.add_argument("--secret", type=int, default=123456789)
    parser.add_argument("--threshold", type=int, default=config.Config.DEFAULT_THRESHOLD)
    parser.add_argument("--shares", type=int, default=config.Config.DEFAULT_TOTAL_SHARES)
    parser.add_argument("--prime", type=int, default=config.Config.DEMO_PRIME)
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed a deterministic random source (demo use only)")
    return parser.parse_args(argv)

def run_commitment_demo(secret, threshold, num_shares, prime, rng=None):
    """Split with commitments, verify every share, recover from the first threshold shares."""
    print_header(f"Verifiable split: {threshold}-of-{num_shares} over p={prime}")
    shares, commitments = generate_shares(secret, threshold, num_shares, prime, rng)

    rows = []
    for x, y in sorted(shares.items()):
        rows.append([x, y, verify_share(x, y, commitments, prime, threshold)])
    print(tabulate(rows, headers=["x", "share", "verified"]))

    print()
    print(tabulate(list(enumerate(commitments)), headers=["i", "commitment"]))
    print(f"Commitment fingerprint: {commitments.fingerprint()}")

    subset = {x: shares[x] for x in sorted(shares)[:threshold]}
    recovered = reconstruct_secret(subset, prime, threshold)
    print(f"\nReconstructed secret from shares {sorted(subset)}: {recovered}")
    return recovered

def run_subset_demo(secret, threshold, num_shares, prime, rng=None):
    """Split with the scheme object and recover from each sliding window of shares."""
    print_header(f"Scheme split: secret={secret}, {threshold}-of-{num_shares} over p={prime}")
    scheme = ShamirSecretSharing(threshold, num_shares, prime, rng=rng)
    shares = scheme.split_secret(secret)
    print(tabulate(shares, headers=["x", "share"]))

    rows = []
    for start in range(num_shares - threshold + 1):
        subset = shares[start:start + threshold]
        rows.append([", ".join(str(s.x) for s in subset), scheme.recover_secret(subset)])
    print()
    print(tabulate(rows, headers=["shares used", "recovered"]))
    return rows

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=config.Config.log_level(), format=config.Config.LOG_FORMAT)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        recovered = run_commitment_demo(args.secret, args.threshold, args.shares, args.prime, rng)
        run_subset_demo(42, config.Config.DEFAULT_THRESHOLD, config.Config.DEFAULT_TOTAL_SHARES,
                        config.Config.SMALL_PRIME, rng)
    except SecretSharingError as e:
        logger.error("Demo failed: %s", e)
        print(f"\n❌ ERROR: {e}")
        return 1

    if recovered != args.secret % args.prime:
        print("\n❌ Reconstructed secret does not match")
        return 1
    print("\n✅ Secret recovered")
    return 0

if __name__ == "__main__":
    sys.exit(main())
