"""Footstep debug logging for Dynamic Footsteps.

Keeps a short history of footstep decisions (suppressed steps, terrain
fallbacks, failed play conditions, emitted sounds) and prints them when
enabled. Toggle with F12 in the demo.
"""

import time
from typing import Optional, Dict, Any, List


class AudioLogger:
    """Singleton logger for footstep and audio events."""

    LEVELS = {
        'ERROR': 0,    # Audio backend failures
        'WARNING': 1,  # Configuration fallbacks
        'INFO': 2,     # Session and config changes
        'DEBUG': 3     # Per-step decisions
    }

    _instance = None

    @classmethod
    def get_instance(cls) -> 'AudioLogger':
        """Get the shared AudioLogger instance."""
        if cls._instance is None:
            cls._instance = AudioLogger()
        return cls._instance

    def __init__(self, level: str = 'WARNING', enabled: bool = False, max_buffer: int = 100):
        """Initialize the logger.

        Args:
            level: Minimum level kept ('ERROR', 'WARNING', 'INFO', 'DEBUG')
            enabled: Whether entries are also printed to the console
            max_buffer: Number of recent entries retained
        """
        self.level_threshold = self.LEVELS.get(level, 1)
        self.enabled = enabled
        self._log_buffer: List[Dict[str, Any]] = []
        self._max_buffer = max_buffer
        self._start_time = time.time()

    def set_level(self, level: str):
        """Set the minimum level that is recorded."""
        self.level_threshold = self.LEVELS.get(level, 1)

    def enable(self, enabled: bool = True):
        """Turn console output on or off."""
        self.enabled = enabled
        state = "ENABLED" if enabled else "DISABLED"
        print(f"[FOOTSTEPS] Debug logging {state} (F12 to toggle)")

    def toggle(self) -> bool:
        """Toggle console output. Returns the new state."""
        self.enable(not self.enabled)
        return self.enabled

    def log(self, level: str, message: str, context: Optional[Dict[str, Any]] = None):
        """Record an event.

        Args:
            level: Log level ('ERROR', 'WARNING', 'INFO', 'DEBUG')
            message: Short description of the event
            context: Optional key/value details (terrain, side, pitch...)
        """
        if self.LEVELS.get(level, 1) > self.level_threshold:
            return

        elapsed = time.time() - self._start_time
        self._log_buffer.append({
            'time': elapsed,
            'level': level,
            'message': message,
            'context': context
        })
        if len(self._log_buffer) > self._max_buffer:
            del self._log_buffer[0]

        if self.enabled:
            details = ""
            if context:
                details = " | " + ", ".join(f"{k}={v}" for k, v in context.items())
            print(f"[FOOTSTEPS:{level}] {elapsed:.3f}s {message}{details}")

    def error(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.log('ERROR', message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.log('WARNING', message, context)

    def get_recent_logs(self, count: int = 20) -> List[Dict[str, Any]]:
        """Get the most recent entries, oldest first."""
        return self._log_buffer[-count:]

    def clear_buffer(self):
        """Forget all recorded entries."""
        self._log_buffer.clear()


def audio_log(level: str, message: str, context: Optional[Dict[str, Any]] = None):
    """Log an event through the shared AudioLogger."""
    AudioLogger.get_instance().log(level, message, context)
