from verishare.errors import InvalidConfig, NoModularInverse


class PrimeField:
    """
    Arithmetic over the integers modulo a prime.

    Primality of the modulus is not checked. A composite modulus shows up
    later as NoModularInverse when a denominator shares a factor with it.
    """

    def __init__(self, prime: int):
        if prime < 2:
            raise InvalidConfig(f"Field modulus must be at least 2, got {prime}")
        self._prime = prime

    @property
    def prime(self) -> int:
        return self._prime

    def __eq__(self, other):
        return isinstance(other, PrimeField) and other._prime == self._prime

    def __hash__(self):
        return hash(self._prime)

    def __repr__(self):
        return f"PrimeField({self._prime})"

    def normalize(self, a: int) -> int:
        return a % self._prime

    def contains(self, a: int) -> bool:
        """True if a is already a reduced field element."""
        return 0 <= a < self._prime

    def add(self, a: int, b: int) -> int:
        return (a + b) % self._prime

    def sub(self, a: int, b: int) -> int:
        # Python's % already returns a value in [0, p) for a negative left side
        return (a - b) % self._prime

    def neg(self, a: int) -> int:
        return -a % self._prime

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self._prime

    def pow(self, base: int, exp: int) -> int:
        """Modular exponentiation by repeated squaring."""
        if exp < 0:
            raise ValueError(f"Exponent must be non-negative, got {exp}")
        return pow(base % self._prime, exp, self._prime)

    def inverse(self, a: int) -> int:
        """Inverse of a using the extended Euclidean algorithm."""
        old_r, r = self._prime, a % self._prime
        old_t, t = 0, 1
        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_t, t = t, old_t - quotient * t

        # old_r is gcd(p, a); a == 0 leaves it at p
        if old_r != 1:
            raise NoModularInverse(a, self._prime)
        return old_t % self._prime

    def fermat_inverse(self, a: int) -> int:
        """Inverse of a as a^(p-2). Only correct when the modulus is prime."""
        if a % self._prime == 0:
            raise NoModularInverse(a, self._prime)
        return self.pow(a, self._prime - 2)
