"""
Audio sink interface for Dynamic Footsteps.

The footstep engine emits SoundEffect values; an AudioSink turns them
into actual playback. SoundEffect uses the editor's units (volume 0-100,
pitch 50-150 percent, pan -100..100).
"""

from dataclasses import dataclass

from state.constants import PAN_CENTER


@dataclass(frozen=True)
class SoundEffect:
    """A single sound effect request."""
    name: str
    pitch: int
    volume: int
    pan: int = PAN_CENTER


class AudioSink:
    """Receives footstep sounds. Fire-and-forget."""

    def play_se(self, effect: SoundEffect):
        raise NotImplementedError


def to_fmod_params(effect: SoundEffect) -> tuple:
    """Convert a SoundEffect to FMOD channel parameters.

    Args:
        effect: SoundEffect in editor units

    Returns:
        Tuple of (volume 0.0-1.0, pitch multiplier, pan -1.0-1.0)
    """
    volume = max(0.0, min(1.0, effect.volume / 100.0))
    pitch = max(0.01, effect.pitch / 100.0)
    pan = max(-1.0, min(1.0, effect.pan / 100.0))
    return volume, pitch, pan
