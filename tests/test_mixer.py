import random

import pytest

from audio.sink import SoundEffect
from systems.alternator import FootSide
from systems.mixer import MixerConfig, SoundMixer
from systems.profiles import SoundProfile


@pytest.fixture()
def mixer() -> SoundMixer:
    return SoundMixer(random.Random(12345))


def test_selects_sound_by_side(mixer, grass_profile):
    config = MixerConfig(pitch_variation=0, volume_variation=0)
    left = mixer.compute(grass_profile, FootSide.LEFT, config)
    right = mixer.compute(grass_profile, FootSide.RIGHT, config)
    assert left == SoundEffect(name='footL2', pitch=100, volume=90, pan=0)
    assert right.name == 'footR2'


def test_empty_sound_for_side_is_none(mixer):
    profile = SoundProfile(left_sound='sandL', right_sound='')
    config = MixerConfig()
    assert mixer.compute(profile, FootSide.RIGHT, config) is None
    assert mixer.compute(profile, FootSide.LEFT, config).name == 'sandL'


def test_pitch_stays_within_variation(mixer):
    profile = SoundProfile(left_sound='a', right_sound='b', pitch=100)
    config = MixerConfig(pitch_variation=8, volume_variation=0)
    pitches = {mixer.compute(profile, FootSide.LEFT, config).pitch for _ in range(10000)}
    assert min(pitches) >= 92
    assert max(pitches) <= 108
    assert len(pitches) > 1


def test_pitch_clamped_at_maximum(mixer):
    profile = SoundProfile(left_sound='a', pitch=148)
    config = MixerConfig(pitch_variation=8, volume_variation=0)
    for _ in range(10000):
        assert mixer.compute(profile, FootSide.LEFT, config).pitch <= 150


def test_pitch_clamped_at_minimum(mixer):
    profile = SoundProfile(left_sound='a', pitch=50)
    config = MixerConfig(pitch_variation=8, volume_variation=0)
    for _ in range(1000):
        assert mixer.compute(profile, FootSide.LEFT, config).pitch >= 50


def test_volume_stays_within_variation_and_bounds(mixer):
    config = MixerConfig(pitch_variation=0, volume_variation=5)
    for base, low, high in ((90, 85, 95), (98, 93, 100), (2, 0, 7)):
        profile = SoundProfile(left_sound='a', volume=base)
        for _ in range(2000):
            volume = mixer.compute(profile, FootSide.LEFT, config).volume
            assert low <= volume <= high


def test_master_volume_scaling_is_exact_without_jitter(mixer):
    profile = SoundProfile(left_sound='a', volume=90)
    config = MixerConfig(pitch_variation=0, volume_variation=0, volume_variable_id=4)
    assert mixer.compute(profile, FootSide.LEFT, config, master_volume=50).volume == 45


def test_master_volume_clamped(mixer):
    profile = SoundProfile(left_sound='a', volume=90)
    config = MixerConfig(pitch_variation=0, volume_variation=0, volume_variable_id=4)
    assert mixer.compute(profile, FootSide.LEFT, config, master_volume=250).volume == 90
    assert mixer.compute(profile, FootSide.LEFT, config, master_volume=-20).volume == 0


def test_master_volume_ignored_when_not_configured(mixer):
    profile = SoundProfile(left_sound='a', volume=90)
    config = MixerConfig(pitch_variation=0, volume_variation=0)
    assert mixer.compute(profile, FootSide.LEFT, config, master_volume=10).volume == 90


def test_halves_round_up(mixer):
    profile = SoundProfile(left_sound='a', volume=85)
    config = MixerConfig(pitch_variation=0, volume_variation=0, volume_variable_id=1)
    # 85 * 0.5 = 42.5
    assert mixer.compute(profile, FootSide.LEFT, config, master_volume=50).volume == 43


def test_default_mixer_uses_module_random(grass_profile):
    effect = SoundMixer().compute(grass_profile, FootSide.LEFT, MixerConfig())
    assert 92 <= effect.pitch <= 108
    assert 85 <= effect.volume <= 95
