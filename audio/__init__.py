"""Audio module for Dynamic Footsteps - sink interface, FMOD playback and logging."""

from .logging import AudioLogger, audio_log
from .sink import AudioSink, SoundEffect
