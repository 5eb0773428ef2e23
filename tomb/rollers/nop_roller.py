from .base import Roller
from . import register_roller


@register_roller("nop")
class NopRoller(Roller):
    """Declares that it rolls dice, but every die lands on the face it already shows."""

    def select_position(self, die) -> int:
        return die.position()
