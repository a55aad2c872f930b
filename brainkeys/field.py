"""Arithmetic in a prime field of at most 256 bits."""

from __future__ import annotations

from .intbits import size_in_words

__all__ = ["PrimeField"]

_MAX_BITS = 256
_LIMB_BITS = 64


class PrimeField:
    """Integers modulo an odd modulus p.

    Elements are plain ints in the range [0, p). The Montgomery radix R is
    2 to the power of 64 times half the modulus size in 32-bit words (at
    least one 64-bit limb); its first powers modulo p are kept as r, r2,
    r3 and r4.
    """

    def __init__(self, p: int) -> None:
        if p < 3 or p % 2 == 0:
            raise ValueError(f"field characteristic must be an odd integer above 2, got {p}")
        if p.bit_length() > _MAX_BITS:
            raise ValueError(f"field characteristic exceeds {_MAX_BITS} bits")
        self.p = p
        limbs = max(1, size_in_words(p) // 2)
        self.montgomery_bits = _LIMB_BITS * limbs
        self.r = pow(2, self.montgomery_bits, p)
        self.r2 = self.r * self.r % p
        self.r3 = self.r2 * self.r % p
        self.r4 = self.r3 * self.r % p
        self._r_inv = pow(self.r, -1, p)

    def __repr__(self) -> str:
        return f"PrimeField(p={self.p:#x})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self) -> int:
        return hash(self.p)

    def add(self, a: int, b: int) -> int:
        """Return a + b mod p."""
        return (a + b) % self.p

    def sub(self, a: int, b: int) -> int:
        """Return a - b mod p."""
        return (a - b) % self.p

    def neg(self, a: int) -> int:
        """Return -a mod p."""
        return -a % self.p

    def double(self, a: int) -> int:
        """Return 2a mod p."""
        return 2 * a % self.p

    def mul(self, a: int, b: int) -> int:
        """Return a * b mod p."""
        return a * b % self.p

    def square(self, a: int) -> int:
        """Return a^2 mod p."""
        return a * a % self.p

    def cube(self, a: int) -> int:
        """Return a^3 mod p."""
        return a * a % self.p * a % self.p

    def inv(self, a: int) -> int:
        """Return the inverse of a mod p; raise ZeroDivisionError if none exists."""
        a %= self.p
        if a == 0:
            raise ZeroDivisionError("zero has no inverse")
        try:
            return pow(a, -1, self.p)
        except ValueError:
            raise ZeroDivisionError(f"{a} has no inverse modulo {self.p}") from None

    def exp(self, a: int, e: int) -> int:
        """Return a^e mod p for a non-negative exponent."""
        if e < 0:
            raise ValueError("exponent must not be negative")
        return pow(a, e, self.p)

    def has_sqrt(self, a: int) -> bool:
        """Euler's criterion: True when a is a non-zero quadratic residue."""
        return self.exp(a, (self.p - 1) // 2) == 1

    def sqrt(self, a: int) -> int:
        """Return a square root of a mod p; raise ValueError if there is none."""
        if not self.has_sqrt(a):
            raise ValueError(f"{a} has no square root modulo {self.p}")
        p = self.p
        a %= p
        if p % 4 == 3:
            return pow(a, (p + 1) // 4, p)

        # Tonelli-Shanks
        s = p - 1
        e = 0
        while s % 2 == 0:
            s //= 2
            e += 1
        q = 2
        while self.has_sqrt(q):
            q += 1
        c = pow(q, s, p)
        t = pow(a, s, p)
        r = pow(a, (s + 1) // 2, p)
        m = e
        while t != 1:
            t2 = t
            i = 0
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
            b = c
            for _ in range(m - i - 1):
                b = b * b % p
            m = i
            c = b * b % p
            t = t * c % p
            r = r * b % p
        return r

    def montgomery_mult(self, a: int, b: int) -> int:
        """Return a * b * R^-1 mod p."""
        return a * b % self.p * self._r_inv % self.p