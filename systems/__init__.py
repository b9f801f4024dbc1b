"""Systems module for Dynamic Footsteps - the footstep decision engine."""

from .alternator import FootAlternator, FootSide
from .footsteps import FootstepSystem, StepEvent, StepListener
from .mixer import MixerConfig, SoundMixer
from .profiles import Operator, PlayCondition, SoundProfile
from .suppression import SuppressionContext
