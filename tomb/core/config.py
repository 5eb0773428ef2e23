"""
config.py
Defines the RollerConfig dataclass, which centralizes how a roller is built and seeded.
Related modules:
- rollers/__init__.py: make_roller builds a roller from a RollerConfig.
- rollers/rng_roller.py: RngRoller.from_config reads the seed and generator choice.
"""

from dataclasses import dataclass
from typing import Optional

GENERATORS = ("wyrand", "random")


@dataclass(frozen=True)
class RollerConfig:
    """
    Centralizes the options used to build a roller.
    Fields:
        roller (str): Registered roller name (see ROLLER_MAP), e.g. "rng" or "nop".
        rng_seed (int|None): Seed for deterministic rolls. None draws from system entropy.
        generator (str): Seeded generator to use: "wyrand" (platform-stable WyRand) or "random" (random.Random).
    """
    roller: str = "rng"
    rng_seed: Optional[int] = None
    generator: str = "wyrand"

    def validate(self) -> None:
        """
        Raises:
            ValueError: If the generator name is unknown.
        """
        if self.generator not in GENERATORS:
            raise ValueError(f"generator must be one of {GENERATORS}, got {self.generator!r}")
