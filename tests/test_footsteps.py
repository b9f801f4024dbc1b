from dataclasses import replace

import pytest

from audio.sink import AudioSink
from state.config import FootstepConfig
from state.constants import (
    STEP_SUPPRESSED, STEP_NO_PROFILE, STEP_CONDITION_FAILED, STEP_SILENT, STEP_PLAYED,
    STEP_FAILED
)
from state.game_state import MotionState
from systems.alternator import FootAlternator, FootSide
from systems.footsteps import FootstepSystem, StepEvent
from systems.mixer import MixerConfig
from systems.profiles import Operator, PlayCondition, SoundProfile


def step(system, character):
    return system.on_step_advanced(StepEvent(character=character))


def test_alternator_flips_and_resets():
    feet = FootAlternator()
    assert feet.current_side() is FootSide.LEFT
    feet.advance()
    assert feet.current_side() is FootSide.RIGHT
    feet.advance()
    assert feet.current_side() is FootSide.LEFT
    feet.advance()
    feet.reset()
    assert feet.current_side() is FootSide.LEFT


def test_grass_step_plays_left_then_cursor_is_right(make_system, config, make_character, sink):
    system = make_system(config)
    assert step(system, make_character(terrain=2)) == STEP_PLAYED

    assert len(sink.played) == 1
    effect = sink.played[0]
    assert effect.name == 'footL2'
    assert 92 <= effect.pitch <= 108
    assert 85 <= effect.volume <= 95
    assert effect.pan == 0
    assert system.feet.current_side() is FootSide.RIGHT


def test_jump_triggered_suppresses_without_alternating(make_system, config, make_character,
                                                       sink, fake_input):
    system = make_system(config)
    fake_input.triggered.add('jump')

    assert step(system, make_character(terrain=2)) == STEP_SUPPRESSED
    assert sink.played == []
    assert system.feet.current_side() is FootSide.LEFT


def test_airborne_suppresses(make_system, config, make_character, sink):
    system = make_system(config)
    character = make_character(terrain=2)
    character.jump.falling = True

    assert step(system, character) == STEP_SUPPRESSED
    assert sink.played == []
    assert system.feet.current_side() is FootSide.LEFT


def test_master_switch_off_suppresses(make_system, config, make_character, sink, game_state):
    system = make_system(replace(config, master_switch_id=3))
    character = make_character(terrain=2)

    assert step(system, character) == STEP_SUPPRESSED
    game_state.switches.set_value(3, True)
    assert step(system, character) == STEP_PLAYED
    assert len(sink.played) == 1


def test_blocking_event_suppresses(make_system, config, make_character, sink, game_state):
    system = make_system(config)
    game_state.event_running = True
    assert step(system, make_character(terrain=2)) == STEP_SUPPRESSED
    assert sink.played == []


def test_unmatched_terrain_uses_default(make_system, config, make_character, sink):
    system = make_system(config)
    step(system, make_character(terrain=3))
    assert sink.played[0].name == 'stepL'


def test_no_profile_is_noop_without_alternating(make_system, config, make_character, sink):
    system = make_system(replace(config, default_profile=None))

    assert step(system, make_character(terrain=3)) == STEP_NO_PROFILE
    assert sink.played == []
    assert system.feet.current_side() is FootSide.LEFT


def test_alternation_survives_silent_steps(make_system, config, make_character, sink, game_state):
    gated = SoundProfile(
        left_sound='snowL', right_sound='snowR',
        condition=PlayCondition(enabled=True, variable_id=9, operator=Operator.GE, value=1),
    )
    left_only = SoundProfile(left_sound='mudL', right_sound='')
    table = {**config.terrain_table, 4: gated, 5: left_only}
    system = make_system(replace(config, terrain_table=table))

    terrains = [2, 4, 4, 5, 5, 3, 2, 4]
    outcomes = []
    sides = []
    for terrain in terrains:
        sides.append(system.feet.current_side())
        outcomes.append(step(system, make_character(terrain=terrain)))

    assert sides == [FootSide.LEFT, FootSide.RIGHT] * 4
    assert outcomes == [
        STEP_PLAYED, STEP_CONDITION_FAILED, STEP_CONDITION_FAILED,
        STEP_SILENT, STEP_PLAYED, STEP_PLAYED, STEP_PLAYED, STEP_CONDITION_FAILED,
    ]
    # Each played step keeps the foot it would have had with no silence
    assert [e.name for e in sink.played] == ['footL2', 'mudL', 'stepR', 'footL2']
    assert system.feet.current_side() is FootSide.LEFT


def test_suppressed_steps_do_not_shift_gait(make_system, config, make_character, sink, fake_input):
    system = make_system(config)
    character = make_character(terrain=2)

    step(system, character)
    fake_input.triggered.add('jump')
    step(system, character)
    step(system, character)
    fake_input.triggered.clear()
    step(system, character)

    assert [e.name for e in sink.played] == ['footL2', 'footR2']


def test_condition_reads_live_variable(make_system, config, make_character, sink, game_state):
    gated = replace(config.default_profile, condition=PlayCondition(
        enabled=True, variable_id=5, operator=Operator.GE, value=10))
    system = make_system(replace(config, default_profile=gated))
    character = make_character(terrain=0)

    game_state.variables.set_value(5, 9)
    assert step(system, character) == STEP_CONDITION_FAILED
    game_state.variables.set_value(5, 10)
    assert step(system, character) == STEP_PLAYED
    assert sink.played[0].name == 'stepR'


def test_condition_without_variable_never_plays(make_system, config, make_character, sink):
    gated = replace(config.default_profile, condition=PlayCondition(enabled=True, variable_id=0))
    system = make_system(replace(config, default_profile=gated))

    assert step(system, make_character()) == STEP_CONDITION_FAILED
    assert sink.played == []
    assert system.feet.current_side() is FootSide.RIGHT


def test_master_volume_variable_scales(make_system, make_character, sink, game_state):
    profile = SoundProfile(left_sound='a', right_sound='b', volume=90, pitch=100)
    config = FootstepConfig(
        default_profile=profile,
        mixer=MixerConfig(pitch_variation=0, volume_variation=0, volume_variable_id=2),
    )
    system = make_system(config)
    game_state.variables.set_value(2, 50)

    step(system, make_character())
    assert sink.played[0].volume == 45
    assert sink.played[0].pitch == 100


def test_reset_returns_to_left(make_system, config, make_character, sink):
    system = make_system(config)
    step(system, make_character(terrain=2))
    system.reset()
    step(system, make_character(terrain=2))
    assert [e.name for e in sink.played] == ['footL2', 'footL2']


def test_step_decisions_are_logged(make_system, config, make_character, quiet_logger):
    quiet_logger.set_level('DEBUG')
    system = make_system(config)
    step(system, make_character(terrain=2))

    entry = quiet_logger.get_recent_logs(1)[0]
    assert entry['message'] == "Footstep"
    assert entry['context']['side'] == 'left'
    assert entry['context']['terrain'] == 2


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_seeded_mixers_are_reproducible(make_system, config, make_character, sink, seed):
    first = make_system(config, seed=seed)
    second = make_system(config, seed=seed)
    for _ in range(4):
        step(first, make_character(terrain=2))
        step(second, make_character(terrain=2))
    assert sink.played[0::2] == sink.played[1::2]


class FailingSink(AudioSink):
    def __init__(self):
        self.attempts = 0

    def play_se(self, effect):
        self.attempts += 1
        raise RuntimeError("device lost")


def test_sink_failure_is_logged_and_gait_still_alternates(config, game_state, fake_input,
                                                          make_character, quiet_logger):
    failing = FailingSink()
    system = FootstepSystem(config, game_state, MotionState(fake_input), failing)

    assert step(system, make_character(terrain=2)) == STEP_FAILED
    assert system.feet.current_side() is FootSide.RIGHT
    assert step(system, make_character(terrain=2)) == STEP_FAILED
    assert system.feet.current_side() is FootSide.LEFT
    assert failing.attempts == 2

    entry = quiet_logger.get_recent_logs(1)[0]
    assert entry['level'] == 'ERROR'
    assert entry['message'] == "Footstep playback failed"
    assert entry['context']['side'] == 'right'
    assert isinstance(entry['context']['error'], RuntimeError)
