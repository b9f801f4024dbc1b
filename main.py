"""
Demo loop for Dynamic Footsteps.

Walks a character over a small terrain-tagged grid with the arrow keys
and plays footsteps through FMOD.

Controls:
    Arrows      - walk one tile per step
    Space       - jump (footsteps are suppressed in the air)
    M           - toggle the master switch (if configured)
    PgUp/PgDn   - change the master volume variable (if configured)
    F12         - toggle footstep debug logging
    Esc         - quit
"""

import os
import sys

import pygame

from state.constants import (
    WINDOW_SIZE, WINDOW_TITLE, FPS, TILE_SIZE, STEP_INTERVAL, JUMP_DURATION,
    DEMO_MAP, DEMO_MASTER_SWITCH_KEY, DEMO_VOLUME_UP_KEY, DEMO_VOLUME_DOWN_KEY,
    DEMO_VOLUME_STEP, DEFAULT_CONFIG_FILE, UNSET_ID
)
from state.config import FootstepConfig, load_config
from state.game_state import Character, GameState, JumpState, MotionState
from audio.logging import AudioLogger
from audio.manager import AudioManager
from systems.footsteps import FootstepSystem, StepEvent
from ui.input import InputState

DIRECTIONS = {
    'up': (0, -1),
    'down': (0, 1),
    'left': (-1, 0),
    'right': (1, 0),
}

MASTER_SWITCH_KEY = getattr(pygame, f'K_{DEMO_MASTER_SWITCH_KEY}')
VOLUME_UP = getattr(pygame, f'K_{DEMO_VOLUME_UP_KEY}')
VOLUME_DOWN = getattr(pygame, f'K_{DEMO_VOLUME_DOWN_KEY}')

# Per-terrain tile colors for the demo view
TERRAIN_COLORS = [
    (70, 70, 70), (40, 120, 40), (150, 110, 60), (60, 90, 160),
    (200, 200, 210), (120, 120, 120), (170, 150, 90), (90, 60, 40),
]


class GridWalker:
    """Moves a character tile by tile and reports completed steps."""

    def __init__(self, character: Character, terrain_map, step_interval: int = STEP_INTERVAL):
        self.character = character
        self.character.terrain_map = terrain_map
        self.step_interval = step_interval
        self.listeners = []
        self._last_step_time = -step_interval

    def add_listener(self, listener):
        self.listeners.append(listener)

    def _passable(self, x: int, y: int) -> bool:
        rows = self.character.terrain_map
        return 0 <= y < len(rows) and 0 <= x < len(rows[y])

    def update(self, direction, current_time: int) -> bool:
        """Advance one tile if a direction is held and the step timer allows.

        Returns:
            True if the character stepped
        """
        if direction is None or current_time - self._last_step_time < self.step_interval:
            return False

        dx, dy = DIRECTIONS[direction]
        x, y = self.character.x + dx, self.character.y + dy
        if not self._passable(x, y):
            return False

        self.character.x, self.character.y = x, y
        self.character.increase_steps()
        self._last_step_time = current_time
        event = StepEvent(character=self.character, current_time=current_time)
        for listener in self.listeners:
            listener.on_step_advanced(event)
        return True


class Game:
    """Demo harness that wires the footstep system to pygame and FMOD."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_FILE):
        """Initialize the demo."""
        pygame.init()
        self.screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        if os.path.exists(config_path):
            self.config = load_config(config_path)
        else:
            print(f"{config_path} not found, footsteps disabled")
            self.config = FootstepConfig()

        self.audio = AudioManager()
        self.audio.init()

        self.input = InputState()
        self.state = GameState()
        if self.config.master_switch_id != UNSET_ID:
            self.state.switches.set_value(self.config.master_switch_id, True)
        if self.config.volume_variable_id != UNSET_ID:
            self.state.variables.set_value(self.config.volume_variable_id, 100)

        self.player = Character(jump=JumpState())
        self.walker = GridWalker(self.player, DEMO_MAP)
        self.footsteps = FootstepSystem(self.config, self.state, MotionState(self.input), self.audio)
        self.walker.add_listener(self.footsteps)

        self.logger = AudioLogger.get_instance()
        self.logger.set_level('DEBUG')
        self.running = True

    def _held_direction(self):
        for direction in DIRECTIONS:
            if self.input.is_pressed(direction):
                return direction
        return None

    def _handle_demo_keys(self, event):
        if event.type != pygame.KEYDOWN:
            return
        if event.key == MASTER_SWITCH_KEY:
            if self.config.master_switch_id != UNSET_ID:
                on = self.state.switches.toggle(self.config.master_switch_id)
                print(f"Master switch {'ON' if on else 'OFF'}")
        elif event.key in (VOLUME_UP, VOLUME_DOWN):
            var_id = self.config.volume_variable_id
            if var_id != UNSET_ID:
                delta = DEMO_VOLUME_STEP if event.key == VOLUME_UP else -DEMO_VOLUME_STEP
                level = max(0, min(100, self.state.variables.value(var_id) + delta))
                self.state.variables.set_value(var_id, level)
                print(f"Footstep volume: {level}")

    def update(self, current_time: int):
        """Process one frame of input and movement."""
        self.input.begin_frame()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            self.input.handle_event(event)
            self._handle_demo_keys(event)

        if self.input.is_triggered('cancel'):
            self.running = False
        if self.input.is_triggered('debug'):
            self.logger.toggle()

        jump = self.player.jump
        jump.update(current_time)
        # Step first so a jump pressed this frame suppresses the footstep
        self.walker.update(self._held_direction(), current_time)
        if self.input.is_triggered(self.config.jump_symbol) and not jump.falling:
            jump.start(current_time, JUMP_DURATION)

        self.audio.update()

    def draw(self):
        for y, row in enumerate(DEMO_MAP):
            for x, tag in enumerate(row):
                color = TERRAIN_COLORS[tag % len(TERRAIN_COLORS)]
                rect = (x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE - 1, TILE_SIZE - 1)
                pygame.draw.rect(self.screen, color, rect)
        center = (self.player.x * TILE_SIZE + TILE_SIZE // 2,
                  self.player.y * TILE_SIZE + TILE_SIZE // 2)
        radius = TILE_SIZE // 3 if not self.player.jump.falling else TILE_SIZE // 2
        pygame.draw.circle(self.screen, (240, 220, 60), center, radius)
        pygame.display.flip()

    def run(self):
        """Run the main loop until quit."""
        while self.running:
            self.clock.tick(FPS)
            self.update(pygame.time.get_ticks())
            self.draw()
        self.cleanup()

    def cleanup(self):
        self.audio.cleanup()
        pygame.quit()


def main():
    config_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_FILE
    Game(config_path).run()


if __name__ == '__main__':
    main()
