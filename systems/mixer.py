"""
Footstep mixing for Dynamic Footsteps.

Turns a SoundProfile and a foot side into a concrete SoundEffect:
random pitch/volume variation, an optional master volume variable, and
clamping into the playable ranges.
"""

import random
from dataclasses import dataclass
from typing import Optional

from audio.sink import SoundEffect
from state.constants import (
    PITCH_MIN, PITCH_MAX, VOLUME_MIN, VOLUME_MAX, PAN_CENTER,
    DEFAULT_PITCH_VARIATION, DEFAULT_VOLUME_VARIATION, UNSET_ID
)
from utils.helpers import clamp, round_half_up
from .alternator import FootSide
from .profiles import SoundProfile


@dataclass(frozen=True)
class MixerConfig:
    """Variation ranges and the master volume source."""
    pitch_variation: int = DEFAULT_PITCH_VARIATION
    volume_variation: int = DEFAULT_VOLUME_VARIATION
    volume_variable_id: int = UNSET_ID

    @property
    def has_master_volume(self) -> bool:
        return self.volume_variable_id != UNSET_ID


class SoundMixer:
    """Computes final footstep parameters."""

    def __init__(self, rng=None):
        """Initialize the mixer.

        Args:
            rng: Object with uniform(a, b); defaults to the random module.
                Pass a seeded random.Random for reproducible output.
        """
        self._rng = rng if rng is not None else random

    def _jitter(self, variation: int) -> float:
        if variation <= 0:
            return 0.0
        return self._rng.uniform(-variation, variation)

    def compute(self, profile: SoundProfile, side: FootSide, config: MixerConfig,
                master_volume: Optional[int] = None) -> Optional[SoundEffect]:
        """Build the SoundEffect for one footstep.

        Args:
            profile: Resolved sound profile
            side: Foot that is stepping
            config: Mixer configuration
            master_volume: Value of the master volume variable (0-100),
                ignored unless the config names a volume variable

        Returns:
            SoundEffect, or None if the profile has no sound for this foot
        """
        name = profile.left_sound if side is FootSide.LEFT else profile.right_sound
        if not name:
            return None

        pitch = round_half_up(profile.pitch + self._jitter(config.pitch_variation))
        pitch = clamp(pitch, PITCH_MIN, PITCH_MAX)

        volume = profile.volume + self._jitter(config.volume_variation)
        if config.has_master_volume:
            level = master_volume if master_volume is not None else 0
            volume *= clamp(level, VOLUME_MIN, VOLUME_MAX) / 100
        volume = clamp(round_half_up(volume), VOLUME_MIN, VOLUME_MAX)

        return SoundEffect(name=name, pitch=pitch, volume=volume, pan=PAN_CENTER)
