"""
Keyboard input state for Dynamic Footsteps.

Maps named input symbols ('jump', 'ok', ...) to pygame keys and tracks
which symbols were triggered (pressed down) during the current frame.
"""

import pygame
from typing import Dict, Iterable, Set

from state.constants import KEY_MAPPER


def resolve_keys(names: Iterable[str]) -> Set[int]:
    """Turn key constant suffixes ('SPACE', 'z') into pygame key codes.

    Unknown names are ignored.
    """
    keys = set()
    for name in names:
        code = getattr(pygame, f'K_{name}', None)
        if code is not None:
            keys.add(code)
    return keys


class InputState:
    """Per-frame keyboard state keyed by input symbol."""

    def __init__(self, key_mapper: Dict[str, Iterable[str]] = None):
        """Initialize the input state.

        Args:
            key_mapper: Symbol -> key names; defaults to KEY_MAPPER
        """
        mapper = key_mapper if key_mapper is not None else KEY_MAPPER
        self._symbols_by_key: Dict[int, Set[str]] = {}
        for symbol, names in mapper.items():
            for key in resolve_keys(names):
                self._symbols_by_key.setdefault(key, set()).add(symbol)
        self._pressed: Set[str] = set()
        self._triggered: Set[str] = set()

    def begin_frame(self):
        """Forget last frame's triggers. Call before handling events."""
        self._triggered.clear()

    def handle_event(self, event):
        """Update state from a pygame event."""
        if event.type == pygame.KEYDOWN:
            for symbol in self._symbols_by_key.get(event.key, ()):
                if symbol not in self._pressed:
                    self._triggered.add(symbol)
                self._pressed.add(symbol)
        elif event.type == pygame.KEYUP:
            for symbol in self._symbols_by_key.get(event.key, ()):
                self._pressed.discard(symbol)

    def is_triggered(self, symbol: str) -> bool:
        """True only in the frame the symbol's key went down."""
        return symbol in self._triggered

    def is_pressed(self, symbol: str) -> bool:
        """True while the symbol's key is held."""
        return symbol in self._pressed
