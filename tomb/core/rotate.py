"""
rotate.py
Defines the rotation contract: moving a die's current face forwards or backwards by a signed offset, with wraparound.
Related modules:
- die.py: Die supplies the position/faces accessors rotation works on.
- dice.py: NumericDie and SliceDie mix in Rotate.
- coin.py: SimpleCoin builds swap on top of rotation.
"""

from abc import ABC, abstractmethod


def wrap_position(position: int, offset: int, faces: int) -> int:
    """
    Compute the position reached by rotating `offset` faces away from `position`.
    Args:
        position (int): Current position, in [0, faces).
        offset (int): Signed amount to rotate by. Positive advances, negative rewinds.
        faces (int): Number of faces (>= 1).
    Returns:
        int: New position, always in [0, faces).
    """
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"rotation offset must be an int, got {type(offset).__name__}")
    # Python's % already returns a result with the sign of the divisor
    return (position + offset) % faces


class Rotate(ABC):
    """
    Capability for entities with a finite, cyclic set of faces.
    Implementers provide position(), faces(), set_position() and copy(); the stepping and rotating
    operations are derived from those. Mutating operations change the receiver in place, the others
    return a new entity and leave the receiver untouched.
    """

    @abstractmethod
    def position(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def faces(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def set_position(self, position: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def copy(self):
        raise NotImplementedError

    def rotate(self, offset: int) -> None:
        """
        Rotate in place by a signed offset. Any integer is valid, e.g. -7 on six faces equals -1.
        Args:
            offset (int): Faces to move. Negative values rotate backwards.
        """
        self.set_position(wrap_position(self.position(), offset, self.faces()))

    def rotated(self, offset: int):
        """
        Return a copy rotated by `offset`; the receiver keeps its face.
        """
        other = self.copy()
        other.rotate(offset)
        return other

    def advance(self) -> None:
        """Step forward one face, wrapping from the last face to the first."""
        self.rotate(1)

    def rewind(self) -> None:
        """Step back one face, wrapping from the first face to the last."""
        self.rotate(-1)

    def next(self):
        return self.rotated(1)

    def back(self):
        return self.rotated(-1)
