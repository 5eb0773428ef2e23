"""
rolled.py
Defines RolledValue, the immutable record returned by every roll.
Related modules:
- rollers/base.py: Roller.roll and Roller.roll_mut build RolledValue instances.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RolledValue:
    """
    Snapshot of a single roll, taken right after the face was chosen.
    Fields:
        value: Face showing after the roll.
        position (int): Index of that face, in [0, faces).
        faces (int): Number of faces on the rolled die.
        die: Independent copy of the die resting on the rolled face. Later changes to the rolled die do not
            affect it, and it is not part of equality.
    """
    value: Any
    position: int
    faces: int
    die: Any = field(default=None, compare=False, repr=False)
