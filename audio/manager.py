"""
Audio Manager for Dynamic Footsteps.

Wraps the fmod_audio.StepAudio class and acts as the AudioSink for the
footstep system: sound effects are looked up by name in the SE
directory on first use and played on the footsteps channel group.
"""

import os

from state.constants import (
    FOOTSTEP_GROUP, FOOTSTEP_GROUP_VOLUME, MASTER_VOLUME_DEFAULT,
    MAX_CHANNELS, SE_DIRECTORY, SE_EXTENSIONS
)
from .logging import audio_log
from .sink import AudioSink, SoundEffect, to_fmod_params


class AudioManager(AudioSink):
    """FMOD-backed sound effect playback."""

    def __init__(self, se_directory: str = SE_DIRECTORY, fmod=None):
        """Initialize the manager.

        Args:
            se_directory: Directory holding sound effect files
            fmod: Playback backend; defaults to a new fmod_audio.StepAudio
        """
        if fmod is None:
            from fmod_audio import StepAudio
            fmod = StepAudio()
        self._fmod = fmod
        self.se_directory = se_directory
        self.master_volume = MASTER_VOLUME_DEFAULT
        self._missing = set()  # Names already reported as missing
        self._initialized = False

    def init(self, max_channels: int = MAX_CHANNELS):
        """Initialize the audio system."""
        if self._initialized:
            return
        self._fmod.init(max_channels=max_channels,
                        groups=[(FOOTSTEP_GROUP, FOOTSTEP_GROUP_VOLUME)])
        self._fmod.set_master_volume(self.master_volume)
        self._initialized = True

    def _find_file(self, name: str):
        for ext in SE_EXTENSIONS:
            path = os.path.join(self.se_directory, name + ext)
            if os.path.exists(path):
                return path
        return None

    def _ensure_sound(self, name: str) -> bool:
        """Load a sound effect by name if it is not loaded yet."""
        if self._fmod.get_sound(name) is not None:
            return True
        if name in self._missing:
            return False

        path = self._find_file(name)
        if path is None or self._fmod.load_sound(path, name) is None:
            self._missing.add(name)
            audio_log('WARNING', "Missing sound effect", {'name': name, 'dir': self.se_directory})
            return False
        return True

    def play_se(self, effect: SoundEffect):
        """Play a footstep sound effect. Missing files are skipped."""
        if not self._initialized or not self._ensure_sound(effect.name):
            return
        volume, pitch, pan = to_fmod_params(effect)
        self._fmod.play_sound(effect.name, FOOTSTEP_GROUP, volume=volume, pitch=pitch, pan=pan)

    def update(self):
        """Update audio system (call each frame)."""
        self._fmod.update()

    def cleanup(self):
        """Clean up audio resources."""
        if self._initialized:
            self._fmod.cleanup()
            self._initialized = False
