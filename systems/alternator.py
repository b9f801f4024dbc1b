"""
Left/right foot alternation for Dynamic Footsteps.
"""

from enum import Enum


class FootSide(Enum):
    """Which half of a sound pair plays."""
    LEFT = 'left'
    RIGHT = 'right'


class FootAlternator:
    """Holds the 'next foot is left' cursor.

    advance() must be called once for every step that reached the
    footstep pipeline, even when nothing ends up playing, so the gait
    stays in step through silent tiles.
    """

    def __init__(self, start_left: bool = True):
        self._next_left = start_left

    def current_side(self) -> FootSide:
        """Side that plays on the current step."""
        return FootSide.LEFT if self._next_left else FootSide.RIGHT

    def advance(self):
        """Flip to the other foot."""
        self._next_left = not self._next_left

    def reset(self):
        """Start a new session on the left foot."""
        self._next_left = True
