"""
Footstep configuration loading for Dynamic Footsteps.

Reads plugin-parameter style JSON: every value may be a plain JSON value
or a string, and struct/list parameters may be JSON documents encoded
inside strings. Malformed pieces fall back to defaults or are dropped;
loading never fails because of a bad sound entry.
"""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from audio.logging import audio_log
from systems.mixer import MixerConfig
from systems.profiles import (
    Operator, PlayCondition, SoundProfile, TerrainSoundTable, build_terrain_table
)
from utils.helpers import clamp, to_bool, to_int
from .constants import (
    DEFAULT_VOLUME, DEFAULT_PITCH, DEFAULT_PITCH_VARIATION,
    DEFAULT_VOLUME_VARIATION, DEFAULT_JUMP_SYMBOL, DEFAULT_OPERATOR,
    PITCH_MIN, PITCH_MAX, VOLUME_MIN, VOLUME_MAX, UNSET_ID
)


@dataclass(frozen=True)
class FootstepConfig:
    """Immutable footstep engine configuration."""
    master_switch_id: int = UNSET_ID
    jump_symbol: str = DEFAULT_JUMP_SYMBOL
    terrain_table: TerrainSoundTable = field(default_factory=lambda: MappingProxyType({}))
    default_profile: Optional[SoundProfile] = None
    mixer: MixerConfig = field(default_factory=MixerConfig)

    @property
    def volume_variable_id(self) -> int:
        return self.mixer.volume_variable_id


def _decode(raw):
    """Decode a value that may be a JSON document stored in a string.

    Returns:
        The decoded value, or None if it is empty or not valid JSON
    """
    if raw is None or raw == '':
        return None
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except ValueError:
        return None


def parse_condition(data: dict) -> Optional[PlayCondition]:
    """Read the play condition fields of a sound struct.

    Returns:
        PlayCondition, or None if the condition is disabled
    """
    if not to_bool(data.get('playConditionEnabled'), False):
        return None

    raw_operator = data.get('playConditionOperator') or DEFAULT_OPERATOR
    operator = Operator.parse(raw_operator)
    if operator is None:
        audio_log('WARNING', "Unknown play condition operator", {'operator': raw_operator})

    variable_id = to_int(data.get('playConditionVariableId'), UNSET_ID)
    if variable_id == UNSET_ID:
        audio_log('WARNING', "Play condition enabled without a variable; sound will never play")

    return PlayCondition(
        enabled=True,
        variable_id=variable_id,
        operator=operator,
        value=to_int(data.get('playConditionValue'), 0),
    )


def parse_sound_config(raw) -> Optional[SoundProfile]:
    """Parse a SoundConfigLR struct.

    Args:
        raw: Dict or JSON string with nameLeft, nameRight, volume,
            pitch and the playCondition* fields

    Returns:
        SoundProfile, or None if the struct is empty or malformed
    """
    data = _decode(raw)
    if not isinstance(data, dict):
        return None

    return SoundProfile(
        left_sound=str(data.get('nameLeft') or ''),
        right_sound=str(data.get('nameRight') or ''),
        volume=clamp(to_int(data.get('volume'), DEFAULT_VOLUME), VOLUME_MIN, VOLUME_MAX),
        pitch=clamp(to_int(data.get('pitch'), DEFAULT_PITCH), PITCH_MIN, PITCH_MAX),
        condition=parse_condition(data),
    )


def parse_terrain_map(raw) -> TerrainSoundTable:
    """Parse the terrainSoundMap list of {terrainTag, sound} structs."""
    items = _decode(raw)
    if not isinstance(items, list):
        if items is not None:
            audio_log('WARNING', "terrainSoundMap is not a list; ignoring it")
        return build_terrain_table([])

    entries = []
    for item in items:
        entry = _decode(item)
        if not isinstance(entry, dict):
            audio_log('WARNING', "Skipped malformed terrain entry", {'entry': item})
            continue
        tag = to_int(entry.get('terrainTag'), 0)
        entries.append((tag, parse_sound_config(entry.get('sound'))))
    return build_terrain_table(entries)


def parse_params(params: dict) -> FootstepConfig:
    """Build a FootstepConfig from a plugin parameter dict.

    Args:
        params: Parameter mapping (see module docstring)

    Returns:
        FootstepConfig
    """
    jump_symbol = params.get('jumpInputSymbol', DEFAULT_JUMP_SYMBOL)
    jump_symbol = '' if jump_symbol is None else str(jump_symbol).strip()

    mixer = MixerConfig(
        pitch_variation=max(0, to_int(params.get('pitchVariation'), DEFAULT_PITCH_VARIATION)),
        volume_variation=max(0, to_int(params.get('volumeVariation'), DEFAULT_VOLUME_VARIATION)),
        volume_variable_id=max(UNSET_ID, to_int(params.get('volumeVariableId'), UNSET_ID)),
    )

    config = FootstepConfig(
        master_switch_id=max(UNSET_ID, to_int(params.get('masterSwitchId'), UNSET_ID)),
        jump_symbol=jump_symbol,
        terrain_table=parse_terrain_map(params.get('terrainSoundMap')),
        default_profile=parse_sound_config(params.get('defaultFootsteps')),
        mixer=mixer,
    )
    audio_log('INFO', "Footstep config loaded", {
        'terrains': sorted(config.terrain_table),
        'default': config.default_profile is not None,
        'master_switch': config.master_switch_id,
        'volume_variable': config.volume_variable_id,
    })
    return config


def load_config(path: str) -> FootstepConfig:
    """Load a FootstepConfig from a JSON file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a JSON object
    """
    with open(path, 'r', encoding='utf-8') as f:
        params = json.load(f)
    if not isinstance(params, dict):
        raise ValueError(f"{path}: expected a JSON object of parameters")
    return parse_params(params)
