"""
Footstep System for Dynamic Footsteps.

Plays alternating left/right footsteps when a character completes a
step, choosing the sound pair from the terrain under it.
"""

from dataclasses import dataclass

from audio.logging import audio_log
from state.constants import (
    UNSET_ID, STEP_SUPPRESSED, STEP_NO_PROFILE, STEP_CONDITION_FAILED,
    STEP_SILENT, STEP_PLAYED, STEP_FAILED
)
from . import conditions, profiles, suppression
from .alternator import FootAlternator
from .mixer import SoundMixer


@dataclass(frozen=True)
class StepEvent:
    """A character finished moving one tile."""
    character: object
    current_time: int = 0


class StepListener:
    """Receives step events from the movement simulation."""

    def on_step_advanced(self, event: StepEvent):
        raise NotImplementedError


class FootstepSystem(StepListener):
    """Decides and plays the footstep for each step event."""

    def __init__(self, config, game_state, motion, sink, mixer: SoundMixer = None):
        """Initialize the footstep system.

        Args:
            config: FootstepConfig
            game_state: GameState for switches, variables and events
            motion: MotionState for jump input and airborne checks
            sink: AudioSink that plays the sounds
            mixer: Optional SoundMixer (inject a seeded one for tests)
        """
        self.config = config
        self.state = game_state
        self.motion = motion
        self.sink = sink
        self.mixer = mixer if mixer is not None else SoundMixer()
        self.feet = FootAlternator()

    def reset(self):
        """Start a new session; the next footstep is the left foot."""
        self.feet.reset()
        audio_log('INFO', "Footstep session reset")

    def can_play_footstep(self, character) -> bool:
        """Check the suppression rules for a character's step."""
        context = suppression.build_context(
            character, self.motion, self.state,
            self.config.jump_symbol, self.config.master_switch_id
        )
        return suppression.should_attempt(context, self.config.master_switch_id != UNSET_ID)

    def on_step_advanced(self, event: StepEvent) -> str:
        """Handle one completed step.

        Args:
            event: The step event

        Returns:
            Outcome string (one of the STEP_* constants)
        """
        character = event.character
        if not self.can_play_footstep(character):
            audio_log('DEBUG', "Step suppressed")
            return STEP_SUPPRESSED

        terrain = character.terrain_tag()
        profile = profiles.resolve(terrain, self.config.terrain_table, self.config.default_profile)
        if profile is None:
            audio_log('DEBUG', "No footstep profile", {'terrain': terrain})
            return STEP_NO_PROFILE

        side = self.feet.current_side()
        try:
            return self._play_footstep(profile, side, terrain)
        finally:
            self.feet.advance()

    def _play_footstep(self, profile, side, terrain: int) -> str:
        """Gate, mix and emit the sound for one foot."""
        condition = profile.condition
        current_value = None
        if condition is not None and condition.variable_id != UNSET_ID:
            current_value = self.state.variables.value(condition.variable_id)
        if not conditions.evaluates(condition, current_value):
            audio_log('DEBUG', "Play condition not met", {
                'terrain': terrain, 'side': side.value, 'value': current_value
            })
            return STEP_CONDITION_FAILED

        master_volume = None
        if self.config.mixer.has_master_volume:
            master_volume = self.state.variables.value(self.config.mixer.volume_variable_id)

        effect = self.mixer.compute(profile, side, self.config.mixer, master_volume)
        if effect is None:
            audio_log('DEBUG', "No sound for foot", {'terrain': terrain, 'side': side.value})
            return STEP_SILENT

        try:
            self.sink.play_se(effect)
        except Exception as e:
            audio_log('ERROR', "Footstep playback failed", {
                'terrain': terrain, 'side': side.value, 'name': effect.name, 'error': e
            })
            return STEP_FAILED

        audio_log('DEBUG', "Footstep", {
            'terrain': terrain, 'side': side.value, 'name': effect.name,
            'pitch': effect.pitch, 'volume': effect.volume
        })
        return STEP_PLAYED
