import random

from .base import Roller
from ..core.rng import WyRand
from . import register_roller


@register_roller("rng")
class RngRoller(Roller):
    """
    Rolls dice with a random number generator: each roll picks an absolute position uniformly over all faces,
    independent of the face currently showing (staying put is as likely as any other face).
    The generator is any object offering randint(a, b) over an inclusive range, such as random.Random or WyRand.
    """
    def __init__(self, rng=None):
        """
        Args:
            rng: Optional random source. Defaults to an unseeded random.Random().
        """
        self.rng = rng or random.Random()

    @classmethod
    def from_seed(cls, seed: int) -> "RngRoller":
        """
        Create a deterministic roller backed by WyRand(seed). The same seed and the same sequence of rolls
        always give the same results, on any platform.
        """
        return cls(WyRand(seed))

    @classmethod
    def from_config(cls, config) -> "RngRoller":
        if config.rng_seed is None:
            return cls()
        if config.generator == "random":
            return cls(random.Random(config.rng_seed))
        return cls.from_seed(config.rng_seed)

    def select_position(self, die) -> int:
        return self.rng.randint(0, die.faces() - 1)
