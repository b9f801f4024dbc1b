"""
Game State container for Dynamic Footsteps.

Holds the external state the footstep engine reads: switches,
variables, the stepping character and the motion/input view used by
the suppression rules.
"""

from typing import Dict, Optional


class Switches:
    """Boolean game switches. Unset switches read as OFF."""

    def __init__(self):
        self._data: Dict[int, bool] = {}

    def value(self, switch_id: int) -> bool:
        return self._data.get(switch_id, False)

    def set_value(self, switch_id: int, value: bool):
        if switch_id > 0:
            self._data[switch_id] = bool(value)

    def toggle(self, switch_id: int) -> bool:
        """Flip a switch. Returns the new value."""
        self.set_value(switch_id, not self.value(switch_id))
        return self.value(switch_id)

    def clear(self):
        self._data.clear()


class Variables:
    """Integer game variables. Unset variables read as 0."""

    def __init__(self):
        self._data: Dict[int, int] = {}

    def value(self, variable_id: int) -> int:
        return self._data.get(variable_id, 0)

    def set_value(self, variable_id: int, value: int):
        if variable_id > 0:
            self._data[variable_id] = int(value)

    def clear(self):
        self._data.clear()


class JumpState:
    """Jump/fall capability attached to characters that can leave the ground."""

    def __init__(self):
        self.falling = False
        self.land_time = 0

    def start(self, current_time: int, duration: int):
        """Begin a jump that lands after duration milliseconds."""
        self.falling = True
        self.land_time = current_time + duration

    def update(self, current_time: int):
        if self.falling and current_time >= self.land_time:
            self.falling = False


class Character:
    """A character moving over the tile map."""

    def __init__(self, x: int = 0, y: int = 0, jump: Optional[JumpState] = None):
        """Initialize the character.

        Args:
            x: Tile column
            y: Tile row
            jump: Optional jump capability; None for characters that
                never leave the ground
        """
        self.x = x
        self.y = y
        self.jump = jump
        self.steps = 0
        self.vehicle = None
        self.move_route_forcing = False
        self.terrain_map = None

    def is_normal(self) -> bool:
        """True when walking on foot (not riding a vehicle)."""
        return self.vehicle is None

    def is_move_route_forcing(self) -> bool:
        return self.move_route_forcing

    def terrain_tag(self) -> int:
        """Terrain tag of the tile under the character, 0 if untagged."""
        if not self.terrain_map:
            return 0
        if 0 <= self.y < len(self.terrain_map) and 0 <= self.x < len(self.terrain_map[self.y]):
            return self.terrain_map[self.y][self.x]
        return 0

    def increase_steps(self):
        self.steps += 1


class MotionState:
    """Input and airborne queries for the suppression rules."""

    def __init__(self, input_state=None):
        """Initialize the motion view.

        Args:
            input_state: Object with is_triggered(symbol), e.g. InputState.
                None means no input device (never triggered).
        """
        self.input = input_state

    def is_jump_triggered(self, symbol: str) -> bool:
        """True if the jump input went down this frame."""
        if self.input is None or not symbol:
            return False
        return self.input.is_triggered(symbol)

    def is_airborne(self, character: Character) -> bool:
        """True if the character has a jump capability and is mid-air."""
        jump = character.jump
        return jump is not None and jump.falling


class GameState:
    """Container for all mutable game state."""

    def __init__(self):
        """Initialize game state with default values."""
        self.switches = Switches()
        self.variables = Variables()
        self.reset()

    def reset(self):
        """Reset all game state to initial values."""
        self.switches.clear()
        self.variables.clear()
        self.event_running = False

    def is_event_running(self) -> bool:
        """True while a blocking map event is executing."""
        return self.event_running
