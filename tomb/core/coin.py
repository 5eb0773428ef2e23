"""
coin.py
Defines SimpleCoin, a two-faced die showing either heads or tails.
Related modules:
- die.py / rotate.py: SimpleCoin is a Die with the Rotate capability; swapping is a rotation by one.
"""

from enum import Enum
from typing import Tuple

from .die import Die, InvalidFaceError
from .rotate import Rotate


class CoinFacing(Enum):
    HEADS = 0
    TAILS = 1


class SimpleCoin(Die, Rotate):
    """
    A coin: a die with the faces (HEADS, TAILS), starting on HEADS by default.
    Rotating by any odd amount flips it, any even amount leaves it as is.
    """
    FACINGS: Tuple[CoinFacing, CoinFacing] = (CoinFacing.HEADS, CoinFacing.TAILS)

    def __init__(self, facing: CoinFacing = CoinFacing.HEADS):
        if not isinstance(facing, CoinFacing):
            raise InvalidFaceError(f"{facing!r} is not a coin facing")
        self._facing = facing

    @classmethod
    def heads(cls) -> "SimpleCoin":
        return cls(CoinFacing.HEADS)

    @classmethod
    def tails(cls) -> "SimpleCoin":
        return cls(CoinFacing.TAILS)

    def is_heads(self) -> bool:
        return self._facing is CoinFacing.HEADS

    def is_tails(self) -> bool:
        return self._facing is CoinFacing.TAILS

    def faces(self) -> int:
        return 2

    def position(self) -> int:
        return self._facing.value

    def face_at(self, position: int) -> CoinFacing:
        return self.FACINGS[position]

    def _place(self, position: int) -> None:
        self._facing = self.FACINGS[position]

    def copy(self) -> "SimpleCoin":
        return type(self)(self._facing)

    def swap(self) -> "SimpleCoin":
        """Return a coin showing the opposite side."""
        return self.next()

    def swap_mut(self) -> CoinFacing:
        """
        Flip this coin in place.
        Returns:
            CoinFacing: The side now showing.
        """
        self.advance()
        return self._facing

    def __eq__(self, other):
        if not isinstance(other, SimpleCoin):
            return NotImplemented
        return self._facing is other._facing

    __hash__ = None

    def __repr__(self):
        return f"SimpleCoin({self._facing.name})"
