import logging
from abc import ABC, abstractmethod

from ..core.die import Die, InvalidFaceError
from ..core.rolled import RolledValue

logger = logging.getLogger(__name__)


class Roller(ABC):
    """
    Abstract base class for all rollers.
    A roller decides which face a die lands on; the die itself only knows how to show it. Subclasses implement
    select_position(die), and get both rolling flavours from it:
      - roll(die): report a fresh result without touching the die.
      - roll_mut(die): move the die to the chosen face and report it.
    Rollers keep no per-die memory. Any state they hold (e.g. a generator) is not locked; callers sharing a
    roller across threads must serialize access themselves.
    """

    @abstractmethod
    def select_position(self, die: Die) -> int:
        """
        Choose the position the die should land on.
        Args:
            die (Die): The die being rolled. Must not be modified.
        Returns:
            int: A position in [0, die.faces()).
        """
        raise NotImplementedError

    @classmethod
    def from_config(cls, config):
        """
        Build the roller from a RollerConfig. Rollers with no options ignore it.
        """
        return cls()

    def _checked_position(self, die: Die) -> int:
        position = self.select_position(die)
        if not die.is_valid_position(position):
            raise InvalidFaceError(
                f"{type(self).__name__} selected position {position!r} for a {die.faces()}-faced die")
        return position

    def roll(self, die: Die) -> RolledValue:
        """
        Roll without mutating: the die keeps showing its current face.
        Every call makes a fresh selection, so repeated calls may differ.
        Args:
            die (Die): Die to roll.
        Returns:
            RolledValue: The face that came up, with a copy of the die resting on it.
        """
        position = self._checked_position(die)
        rolled = die.copy()
        rolled.set_position(position)
        logger.debug("roll %r -> position %d", die, position)
        return RolledValue(value=rolled.value(), position=position, faces=die.faces(), die=rolled)

    def roll_mut(self, die: Die) -> RolledValue:
        """
        Roll and leave the die on the face that came up.
        Args:
            die (Die): Die to roll; its position is updated in place.
        Returns:
            RolledValue: The face now showing.
        """
        position = self._checked_position(die)
        die.set_position(position)
        logger.debug("roll_mut -> %r", die)
        return RolledValue(value=die.value(), position=position, faces=die.faces(), die=die.copy())
