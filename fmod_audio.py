"""
FMOD Audio Module for Dynamic Footsteps

Thin abstraction over pyfmodex (FMOD Python bindings) for playing
short one-shot sound effects with per-play volume, pitch and pan.

Usage:
    from fmod_audio import StepAudio

    audio = StepAudio()
    audio.init(max_channels=32)
    audio.load_sound('audio/se/footL2.ogg', 'footL2')
    audio.play_sound('footL2', 'footsteps', volume=0.9, pitch=1.0, pan=0.0)

    # In main loop:
    audio.update()

    # Cleanup:
    audio.cleanup()
"""

import os
import pyfmodex
from pyfmodex.flags import MODE

from audio.logging import AudioLogger


class StepAudio:
    """Audio system wrapper for FMOD/pyfmodex."""

    def __init__(self):
        self.system = None
        self.master_group = None
        self.channel_groups = {}
        self.sounds = {}
        self.master_volume = 1.0
        self._initialized = False
        self._log = AudioLogger.get_instance()

    def init(self, max_channels=32, groups=None):
        """Initialize the FMOD system.

        Args:
            max_channels: Maximum number of virtual channels
            groups: List of (group_name, base_volume) to create
        """
        if self._initialized:
            return

        # Ensure DLLs can be found from project directory
        dll_path = os.path.dirname(os.path.abspath(__file__))
        try:
            os.add_dll_directory(dll_path)
        except (AttributeError, OSError):
            pass  # add_dll_directory not available or failed

        self.system = pyfmodex.System()
        self.system.init(maxchannels=max_channels)
        self.master_group = self.system.master_channel_group

        for name, base_vol in (groups or []):
            self.create_channel_group(name, base_vol)

        self._initialized = True
        print(f"FMOD initialized: version {hex(self.system.version)}")

    def create_channel_group(self, name, base_volume=1.0):
        """Create a named channel group for volume control."""
        group = self.system.create_channel_group(name)
        group.volume = base_volume
        self.channel_groups[name] = {
            'group': group,
            'base_volume': base_volume
        }

    def load_sound(self, path, name):
        """Load a one-shot 2D sound into memory.

        Args:
            path: Path to the sound file
            name: Unique name to reference this sound

        Returns:
            The loaded Sound object, or None if loading failed
        """
        mode = MODE.CREATESAMPLE | MODE.TWOD | MODE.LOOP_OFF
        try:
            sound = self.system.create_sound(path, mode)
            self.sounds[name] = sound
            return sound
        except Exception as e:
            self._log.error(f"Failed to load sound '{name}'", {'path': path, 'error': e})
            return None

    def get_sound(self, name):
        """Get a loaded sound by name, or None."""
        return self.sounds.get(name)

    def play_sound(self, sound_name, group_name=None, volume=1.0, pitch=1.0, pan=0.0):
        """Play a loaded sound once.

        The channel starts paused so volume, pitch and pan are in place
        before the first sample is heard.

        Args:
            sound_name: Name of the loaded sound to play
            group_name: Optional channel group name
            volume: Channel volume (0.0 to 1.0)
            pitch: Playback rate multiplier (1.0 = normal)
            pan: Stereo pan (-1.0 = left, 1.0 = right)

        Returns:
            The Channel object, or None if playback failed
        """
        sound = self.sounds.get(sound_name)
        if sound is None:
            self._log.warning(f"Sound not found: {sound_name}")
            return None

        group = None
        if group_name and group_name in self.channel_groups:
            group = self.channel_groups[group_name]['group']

        try:
            channel = self.system.play_sound(sound, group, True)
            channel.volume = volume
            channel.pitch = pitch
            channel.set_pan(pan)
            channel.paused = False
            return channel
        except Exception as e:
            self._log.error(f"Failed to play sound '{sound_name}'", {'error': e})
            return None

    def set_master_volume(self, volume):
        """Set master volume affecting all sounds (0.0 to 1.0)."""
        self.master_volume = max(0.0, min(1.0, volume))
        if self.master_group:
            self.master_group.volume = self.master_volume

    def update(self):
        """Update FMOD system. Must be called every frame."""
        if self.system:
            try:
                self.system.update()
            except Exception as e:
                self._log.error("FMOD update failed", {'error': e})

    def cleanup(self):
        """Release all FMOD resources. Call before exiting."""
        if not self._initialized:
            return

        for name, sound in self.sounds.items():
            try:
                sound.release()
            except Exception as e:
                self._log.warning(f"Failed to release sound '{name}'", {'error': e})
        self.sounds.clear()

        for name, data in self.channel_groups.items():
            try:
                data['group'].release()
            except Exception as e:
                self._log.warning(f"Failed to release group '{name}'", {'error': e})
        self.channel_groups.clear()

        if self.system:
            try:
                self.system.close()
                self.system.release()
            except Exception as e:
                self._log.warning("Failed to release FMOD system", {'error': e})
            self.system = None

        self._initialized = False
        print("FMOD audio system released")
