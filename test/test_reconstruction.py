import itertools
import random
import unittest
import config
from verishare.crypto import Share, generate_shares, reconstruct_secret, split_secret
from verishare.errors import InsufficientShares, InvalidConfig, NoModularInverse

class ReconstructionTest(unittest.TestCase):
    def test_every_threshold_subset(self):
        """prime 97, 3-of-5, secret 42"""
        prime = config.Config.SMALL_PRIME
        shares = split_secret(42, 3, 5, prime, random.Random(7))
        self.assertEqual([s.x for s in shares], [1, 2, 3, 4, 5])
        for subset in itertools.combinations(shares, 3):
            self.assertEqual(reconstruct_secret(list(subset), prime, threshold=3), 42)

    def test_superset_matches_subset(self):
        prime = config.Config.SHAMIR_PRIME
        secret = random.Random(3).randrange(prime)
        shares = split_secret(secret, 4, 7, prime, random.Random(11))
        for size in range(4, 8):
            for subset in itertools.combinations(shares, size):
                self.assertEqual(reconstruct_secret(subset, prime), secret)

    def test_order_does_not_matter(self):
        prime = config.Config.SMALL_PRIME
        shares = split_secret(13, 3, 5, prime, random.Random(5))
        self.assertEqual(reconstruct_secret([shares[4], shares[0], shares[2]], prime), 13)

    def test_mapping_input(self):
        """Scenario with commitments: first three by index recover the secret"""
        prime = config.Config.DEMO_PRIME
        shares, _ = generate_shares(123456789, 3, 5, prime, random.Random(99))
        first_three = {x: shares[x] for x in sorted(shares)[:3]}
        self.assertEqual(reconstruct_secret(first_three, prime, threshold=3), 123456789)

    def test_threshold_one(self):
        shares = split_secret(9, 1, 3, 97)
        for share in shares:
            self.assertEqual(share.y, 9)
            self.assertEqual(reconstruct_secret([share], 97, threshold=1), 9)

    def test_insufficient_shares(self):
        shares = split_secret(42, 3, 5, 97, random.Random(1))
        with self.assertRaises(InsufficientShares) as ctx:
            reconstruct_secret(shares[:2], 97, threshold=3)
        self.assertEqual(ctx.exception.required, 3)
        self.assertEqual(ctx.exception.received, 2)

    def test_no_shares(self):
        with self.assertRaises(InsufficientShares):
            reconstruct_secret([], 97)
        with self.assertRaises(ValueError):
            reconstruct_secret({}, 97)

    def test_duplicate_x_rejected(self):
        shares = [Share(1, 10), Share(1, 20), Share(2, 30)]
        with self.assertRaises(NoModularInverse):
            reconstruct_secret(shares, 97, threshold=3)

    def test_composite_modulus_rejected(self):
        """x_1 - x_3 = -2 shares the factor 2 with modulus 4"""
        with self.assertRaises(NoModularInverse) as ctx:
            reconstruct_secret([(1, 2), (3, 1)], 4, threshold=2)
        self.assertEqual(ctx.exception.modulus, 4)

    def test_x_congruent_mod_prime_rejected(self):
        with self.assertRaises(NoModularInverse):
            reconstruct_secret([(1, 10), (98, 20)], 97)

    def test_mixed_splits_give_a_value(self):
        """Shares from different polynomials are not detected without commitments"""
        a = split_secret(10, 2, 3, 97, random.Random(1))
        b = split_secret(20, 2, 3, 97, random.Random(2))
        value = reconstruct_secret([a[0], b[1]], 97, threshold=2)
        self.assertTrue(0 <= value < 97)

    def test_invalid_parameters(self):
        with self.assertRaises(InvalidConfig):
            split_secret(1, 4, 3, 97)
        with self.assertRaises(InvalidConfig):
            generate_shares(1, 0, 3, 97)
        with self.assertRaises(InvalidConfig):
            split_secret(1, 2, 5, 5)

if __name__ == '__main__':
    unittest.main()
