"""
rng.py
Defines the narrow randomness capability rollers depend on, plus WyRand, a small seedable generator whose output is
stable across platforms and Python versions.
Related modules:
- rollers/rng_roller.py: RngRoller draws positions from any RandomSource.
- config.py: RollerConfig selects which generator a seeded roller uses.

Usage:
    rng = WyRand(7194422452970863838)
    rng.randint(0, 19)  # -> 9, on every platform
"""

import random
from abc import ABC, abstractmethod

_MASK64 = (1 << 64) - 1
_WY_INCREMENT = 0xA0761D6478BD642F
_WY_XOR = 0xE7037ED1A0B428DB


class RandomSource(ABC):
    """
    Anything that can draw a uniformly distributed integer from an inclusive range.
    random.Random is registered as a virtual subclass; any object with a compatible randint(a, b) works with the
    rollers whether or not it inherits from this class.
    """

    @abstractmethod
    def randint(self, a: int, b: int) -> int:
        """
        Return a uniformly distributed integer N with a <= N <= b.
        """
        raise NotImplementedError


RandomSource.register(random.Random)


class WyRand(RandomSource):
    """
    64-bit wyrand generator, producing the same stream as the Rust `fastrand` 1.x crate for the same seed.
    Range sampling uses multiply-high with rejection, so results are unbiased.

    Each draw advances internal state; share an instance between threads only behind the caller's own lock.
    """

    def __init__(self, seed: int):
        self._seed = seed
        self._state = seed & _MASK64

    @property
    def seed(self) -> int:
        return self._seed

    def next_u64(self) -> int:
        """
        Advance the generator and return the next raw 64-bit output.
        """
        self._state = (self._state + _WY_INCREMENT) & _MASK64
        t = self._state * (self._state ^ _WY_XOR)
        return (t ^ (t >> 64)) & _MASK64

    def below(self, n: int) -> int:
        """
        Draw a uniformly distributed integer in [0, n).
        Args:
            n (int): Exclusive upper bound, 1 <= n <= 2**64.
        Returns:
            int: The drawn integer.
        """
        if not (1 <= n <= 1 << 64):
            raise ValueError(f"bound must be between 1 and 2**64, got {n}")
        r = self.next_u64()
        m = r * n
        lo = m & _MASK64
        if lo < n:
            threshold = ((-n) & _MASK64) % n
            while lo < threshold:
                r = self.next_u64()
                m = r * n
                lo = m & _MASK64
        return m >> 64

    def randint(self, a: int, b: int) -> int:
        if a > b:
            raise ValueError(f"empty range for randint({a}, {b})")
        return a + self.below(b - a + 1)

    def getstate(self) -> int:
        return self._state

    def setstate(self, state: int) -> None:
        self._state = state & _MASK64
