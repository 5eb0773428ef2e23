"""
die.py
Defines the Die abstraction: an entity with N >= 1 ordered faces and a current position in [0, N).
Related modules:
- dice.py: Concrete NumericDie and SliceDie implementations.
- coin.py: SimpleCoin, a two-faced die.
- rollers/base.py: Rollers read faces() and call set_position() when rolling.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence


class InvalidFaceError(ValueError):
    """
    Raised when a die would be constructed or moved to a face it does not have
    (empty face set, position out of range, value not on the die).
    """
    pass


class Die(ABC):
    """
    Abstract base class for all dice.
    A die always points at a valid face: implementations validate in their constructor and in
    set_position(), so value() and face_at() never fail afterwards.
    """

    @abstractmethod
    def faces(self) -> int:
        """
        Returns:
            int: Number of faces. Fixed for the lifetime of the die.
        """
        raise NotImplementedError

    @abstractmethod
    def position(self) -> int:
        """
        Returns:
            int: Index of the current face, in [0, faces()).
        """
        raise NotImplementedError

    @abstractmethod
    def face_at(self, position: int) -> Any:
        """
        Return the face found at `position` without moving the die.
        Args:
            position (int): Index in [0, faces()).
        Returns:
            The face value at that index.
        """
        raise NotImplementedError

    @abstractmethod
    def copy(self) -> "Die":
        """
        Returns:
            Die: An independent die of the same kind showing the same face.
        """
        raise NotImplementedError

    @abstractmethod
    def _place(self, position: int) -> None:
        """
        Internal: store an already validated position.
        """
        raise NotImplementedError

    def value(self) -> Any:
        """
        Returns:
            The face the die currently shows.
        """
        return self.face_at(self.position())

    def sides(self) -> Sequence[Any]:
        """
        Returns:
            Sequence: All faces in order; the first one is the default face.
        """
        return [self.face_at(p) for p in range(self.faces())]

    def is_valid_position(self, position: int) -> bool:
        if isinstance(position, bool) or not isinstance(position, int):
            return False
        return 0 <= position < self.faces()

    def set_position(self, position: int) -> None:
        """
        Move the die to show the face at `position`.
        Args:
            position (int): Index in [0, faces()).
        Raises:
            InvalidFaceError: If the position is out of range.
        """
        if not self.is_valid_position(position):
            raise InvalidFaceError(f"position {position!r} out of range for a {self.faces()}-faced die")
        self._place(position)
