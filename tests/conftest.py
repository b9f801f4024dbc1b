"""Shared fixtures for footstep tests.

- recording audio sink
- characters standing on a given terrain tag
- seeded mixer
"""

import random

import pytest

from audio.logging import AudioLogger
from audio.sink import AudioSink
from state.config import FootstepConfig
from state.game_state import Character, GameState, JumpState, MotionState
from systems.footsteps import FootstepSystem
from systems.mixer import MixerConfig, SoundMixer
from systems.profiles import SoundProfile


class RecordingSink(AudioSink):
    """AudioSink that remembers every effect it receives."""

    def __init__(self):
        self.played = []

    def play_se(self, effect):
        self.played.append(effect)


class FakeInput:
    """Stand-in for InputState with a fixed set of triggered symbols."""

    def __init__(self, triggered=()):
        self.triggered = set(triggered)

    def is_triggered(self, symbol):
        return symbol in self.triggered


@pytest.fixture(autouse=True)
def quiet_logger():
    logger = AudioLogger.get_instance()
    logger.set_level('WARNING')
    logger.enabled = False
    logger.clear_buffer()
    yield logger
    logger.clear_buffer()


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def fake_input() -> FakeInput:
    return FakeInput()


@pytest.fixture()
def game_state() -> GameState:
    return GameState()


@pytest.fixture()
def make_character():
    def _make(terrain: int = 0, jump: bool = True) -> Character:
        character = Character(jump=JumpState() if jump else None)
        character.terrain_map = [[terrain]]
        return character
    return _make


@pytest.fixture()
def grass_profile() -> SoundProfile:
    return SoundProfile(left_sound='footL2', right_sound='footR2', volume=90, pitch=100)


@pytest.fixture()
def default_profile() -> SoundProfile:
    return SoundProfile(left_sound='stepL', right_sound='stepR', volume=90, pitch=100)


@pytest.fixture()
def config(grass_profile, default_profile) -> FootstepConfig:
    return FootstepConfig(
        terrain_table={2: grass_profile},
        default_profile=default_profile,
        mixer=MixerConfig(pitch_variation=8, volume_variation=5),
    )


@pytest.fixture()
def make_system(game_state, fake_input, sink):
    def _make(config: FootstepConfig, seed: int = 12345) -> FootstepSystem:
        return FootstepSystem(
            config, game_state, MotionState(fake_input), sink,
            mixer=SoundMixer(random.Random(seed)),
        )
    return _make
