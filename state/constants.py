"""
Constants and defaults for Dynamic Footsteps.

All tunable parameters and constant values are centralized here
for easy modification and balancing.
"""

# =============================================================================
# DISPLAY (demo harness)
# =============================================================================
WINDOW_SIZE = (320, 240)
WINDOW_TITLE = "Dynamic Footsteps"
FPS = 60
TILE_SIZE = 32

# =============================================================================
# MOVEMENT (demo harness)
# =============================================================================
STEP_INTERVAL = 250   # Milliseconds to cross one tile
JUMP_DURATION = 500   # Milliseconds spent airborne per jump

# =============================================================================
# SOUND RANGES
# =============================================================================
PITCH_MIN = 50
PITCH_MAX = 150
VOLUME_MIN = 0
VOLUME_MAX = 100
PAN_CENTER = 0

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================
DEFAULT_VOLUME = 90
DEFAULT_PITCH = 100
DEFAULT_PITCH_VARIATION = 8
DEFAULT_VOLUME_VARIATION = 5
DEFAULT_JUMP_SYMBOL = 'jump'
DEFAULT_OPERATOR = '=='
DEFAULT_CONFIG_FILE = 'footsteps.json'

# Switch/variable id meaning "not configured"
UNSET_ID = 0

# =============================================================================
# STEP OUTCOMES
# =============================================================================
STEP_SUPPRESSED = 'suppressed'
STEP_NO_PROFILE = 'no_profile'
STEP_CONDITION_FAILED = 'condition_failed'
STEP_SILENT = 'silent'
STEP_PLAYED = 'played'
STEP_FAILED = 'failed'   # Sink raised while playing

# =============================================================================
# AUDIO BACKEND
# =============================================================================
SE_DIRECTORY = 'audio/se'
SE_EXTENSIONS = ('.ogg', '.wav')
FOOTSTEP_GROUP = 'footsteps'
FOOTSTEP_GROUP_VOLUME = 1.0
MASTER_VOLUME_DEFAULT = 1.0
MAX_CHANNELS = 32

# =============================================================================
# INPUT
# =============================================================================
# Input symbol -> pygame key constant suffixes (pygame.K_<name>)
KEY_MAPPER = {
    'ok': ('RETURN', 'z'),
    'cancel': ('ESCAPE', 'x'),
    'jump': ('SPACE',),
    'shift': ('LSHIFT', 'RSHIFT'),
    'up': ('UP',),
    'down': ('DOWN',),
    'left': ('LEFT',),
    'right': ('RIGHT',),
    'debug': ('F12',),
}

# =============================================================================
# DEMO MAP
# =============================================================================
# Terrain tags per tile; 0 means untagged (default footsteps)
DEMO_MAP = [
    [0, 0, 0, 1, 1, 1, 0, 0, 0, 0],
    [0, 2, 2, 1, 1, 1, 0, 3, 3, 0],
    [0, 2, 2, 0, 0, 0, 0, 3, 3, 0],
    [0, 0, 0, 0, 4, 4, 0, 0, 0, 0],
    [5, 5, 0, 0, 4, 4, 0, 0, 6, 6],
    [5, 5, 0, 0, 0, 0, 0, 0, 6, 6],
    [0, 0, 0, 7, 7, 7, 7, 0, 0, 0],
]
DEMO_MASTER_SWITCH_KEY = 'm'     # Toggles the configured master switch
DEMO_VOLUME_UP_KEY = 'PAGEUP'     # Raises the configured volume variable
DEMO_VOLUME_DOWN_KEY = 'PAGEDOWN'
DEMO_VOLUME_STEP = 10
