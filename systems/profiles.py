"""
Sound profiles and terrain resolution for Dynamic Footsteps.

A SoundProfile describes one left/right footstep pair, its base volume
and pitch, and an optional play condition. Profiles are keyed by terrain
tag in a TerrainSoundTable, with a default profile for everything else.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from audio.logging import audio_log
from state.constants import DEFAULT_PITCH, DEFAULT_VOLUME, UNSET_ID


class Operator(Enum):
    """Comparison operators for play conditions."""
    EQ = '=='
    NE = '!='
    GT = '>'
    LT = '<'
    GE = '>='
    LE = '<='

    @classmethod
    def parse(cls, text) -> Optional['Operator']:
        """Parse an operator from its symbol ('>=') or name ('GE').

        Returns:
            The Operator, or None if the text is not a known operator
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            return None
        text = text.strip()
        for op in cls:
            if text == op.value or text.upper() == op.name:
                return op
        return None


@dataclass(frozen=True)
class PlayCondition:
    """Gate comparing a game variable against a fixed value.

    An enabled condition with variable_id 0 can never be satisfied.
    operator is None when the configured operator was not recognised.
    """
    enabled: bool = False
    variable_id: int = UNSET_ID
    operator: Optional[Operator] = Operator.EQ
    value: int = 0


@dataclass(frozen=True)
class SoundProfile:
    """One candidate footstep sound pair."""
    left_sound: str = ''
    right_sound: str = ''
    volume: int = DEFAULT_VOLUME
    pitch: int = DEFAULT_PITCH
    condition: Optional[PlayCondition] = None

    @property
    def has_sound(self) -> bool:
        """True if at least one foot has a sound assigned."""
        return bool(self.left_sound or self.right_sound)


# Terrain tag -> SoundProfile
TerrainSoundTable = Mapping[int, SoundProfile]


def build_terrain_table(entries: Iterable[Tuple[int, Optional[SoundProfile]]]) -> TerrainSoundTable:
    """Build a terrain table, dropping unusable entries.

    Entries with a terrain tag <= 0, a missing profile, or no sound on
    either foot are skipped. A later entry for the same tag replaces an
    earlier one.

    Args:
        entries: Iterable of (terrain_tag, profile) pairs

    Returns:
        Read-only mapping of terrain tag to SoundProfile
    """
    table = {}
    for tag, profile in entries:
        if tag <= 0:
            audio_log('WARNING', "Dropped terrain entry with non-positive tag", {'tag': tag})
            continue
        if profile is None or not profile.has_sound:
            audio_log('WARNING', "Dropped terrain entry without sounds", {'tag': tag})
            continue
        table[tag] = profile
    return MappingProxyType(table)


def resolve(terrain_code: int, table: TerrainSoundTable,
            default_profile: Optional[SoundProfile]) -> Optional[SoundProfile]:
    """Pick the profile for a terrain tag.

    Args:
        terrain_code: Terrain tag under the character
        table: Terrain sound table
        default_profile: Fallback profile, may be None

    Returns:
        The terrain's profile, else the default, else None
    """
    profile = table.get(terrain_code)
    if profile is not None:
        return profile
    return default_profile
