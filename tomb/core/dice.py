"""
dice.py
Defines the concrete dice: NumericDie (faces 1..N) with conventional D4-D100 shorthands, and SliceDie, whose faces are an
externally supplied ordered sequence.
Related modules:
- die.py: Die base class and InvalidFaceError.
- rotate.py: Rotate mixin providing rotate/rotated/advance/rewind/next/back.
- rollers/: Rollers pick new positions for these dice.
"""

import functools
from typing import Generic, Sequence, TypeVar

from .die import Die, InvalidFaceError
from .rotate import Rotate

T = TypeVar("T")


@functools.total_ordering
class NumericDie(Die, Rotate):
    """
    A die whose faces are the integers 1..sides. At runtime it is just a position; value() is position + 1.
    Prefer the shorthands (D4, D6, ...) for conventional dice.
    """

    def __init__(self, sides: int, value: int = 1):
        """
        Args:
            sides (int): Number of faces (>= 1).
            value (int): Face to start on, in 1..sides. Defaults to 1.
        Raises:
            InvalidFaceError: If sides < 1 or value is not a face of the die.
        """
        if isinstance(sides, bool) or not isinstance(sides, int) or sides < 1:
            raise InvalidFaceError(f"a numeric die needs at least one face, got {sides!r}")
        self._sides = sides
        if isinstance(value, bool) or not isinstance(value, int) or not (1 <= value <= sides):
            raise InvalidFaceError(f"value {value!r} is not a face of a D{sides}")
        self._position = value - 1

    def faces(self) -> int:
        return self._sides

    def position(self) -> int:
        return self._position

    def face_at(self, position: int) -> int:
        return position + 1

    def _place(self, position: int) -> None:
        self._position = position

    def copy(self) -> "NumericDie":
        other = object.__new__(type(self))
        other._sides = self._sides
        other._position = self._position
        return other

    def __eq__(self, other):
        if not isinstance(other, NumericDie):
            return NotImplemented
        return (self._sides, self._position) == (other._sides, other._position)

    def __lt__(self, other):
        if not isinstance(other, NumericDie):
            return NotImplemented
        return (self._sides, self._position) < (other._sides, other._position)

    __hash__ = None

    def __repr__(self):
        return f"D{self._sides}:{self.value()}"


class D4(NumericDie):
    """A 4-sided numeric die."""
    def __init__(self, value: int = 1):
        super().__init__(4, value)


class D6(NumericDie):
    """A 6-sided numeric die."""
    def __init__(self, value: int = 1):
        super().__init__(6, value)


class D8(NumericDie):
    """An 8-sided numeric die."""
    def __init__(self, value: int = 1):
        super().__init__(8, value)


class D10(NumericDie):
    """A 10-sided numeric die."""
    def __init__(self, value: int = 1):
        super().__init__(10, value)


class D12(NumericDie):
    """A 12-sided numeric die."""
    def __init__(self, value: int = 1):
        super().__init__(12, value)


class D20(NumericDie):
    """A 20-sided numeric die."""
    def __init__(self, value: int = 1):
        super().__init__(20, value)


class D100(NumericDie):
    """A 100-sided (percentile) numeric die."""
    def __init__(self, value: int = 1):
        super().__init__(100, value)


class SliceDie(Die, Rotate, Generic[T]):
    """
    A die with a known, fixed, ordered set of faces of any type, and a position pointing at the current one.
    Useful when a roll maps to something other than a number: grades, enum members, or a weighted set where
    some faces repeat.

    The face sequence is held by reference and never copied. The caller owns it and must keep its length
    unchanged for as long as the die is used; the face count is captured at construction.
    """

    def __init__(self, elements: Sequence[T], position: int = 0):
        """
        Args:
            elements (Sequence): Ordered faces. Must not be empty.
            position (int): Index of the starting face. Defaults to 0.
        Raises:
            InvalidFaceError: If elements is empty or position is out of range.
        """
        faces = len(elements)
        if faces == 0:
            raise InvalidFaceError("a slice die needs at least one face")
        self._elements = elements
        self._faces = faces
        if not self.is_valid_position(position):
            raise InvalidFaceError(f"position {position!r} out of range for {faces} faces")
        self._position = position

    @classmethod
    def with_position(cls, elements: Sequence[T], position: int) -> "SliceDie[T]":
        """
        Create a die over `elements` showing the face at `position`.
        Raises:
            InvalidFaceError: If elements is empty or position is out of range.
        """
        return cls(elements, position)

    def faces(self) -> int:
        return self._faces

    def position(self) -> int:
        return self._position

    def face_at(self, position: int) -> T:
        return self._elements[position]

    def sides(self) -> Sequence[T]:
        return self._elements

    def _place(self, position: int) -> None:
        self._position = position

    def copy(self) -> "SliceDie[T]":
        # shares the backing sequence
        other = object.__new__(type(self))
        other._elements = self._elements
        other._faces = self._faces
        other._position = self._position
        return other

    def __eq__(self, other):
        if not isinstance(other, SliceDie):
            return NotImplemented
        if self._position != other._position:
            return False
        return self._elements is other._elements or list(self._elements) == list(other._elements)

    __hash__ = None

    def __repr__(self):
        return f"SliceDie({self.value()!r} @ {self._position}/{self._faces})"
