import os
import sys

import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import biomes
from errors import ConfigurationError

SEA_LEVELS = [-0.99, -0.75, -0.5, -0.125, 0.0, 0.3, 0.6, 0.95, 0.999]
ORDER = ['tile.water.deep', 'tile.water.shallow', 'tile.beach', 'tile.plains', 'tile.forest']


def test_biome_order_matches_config():
    assert [b.name for b in biomes.BIOMES] == ORDER
    assert [biomes.BIOME_ID[name] for name in ORDER] == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("sea_level", SEA_LEVELS)
def test_bands_partition_the_unit_interval(sea_level):
    bands = biomes.biome_bands(sea_level)
    assert [name for _, _, name in bands] == ORDER
    assert bands[0][0] == -1.0
    assert bands[-1][1] == 1.0
    for (lo_a, hi_a, _), (lo_b, hi_b, _) in zip(bands, bands[1:]):
        assert lo_b == hi_a, f"gap or overlap at {hi_a} (sea level {sea_level})"
    for lower, upper, name in bands:
        assert lower < upper, f"empty band {name} at sea level {sea_level}"


@pytest.mark.parametrize("sea_level", SEA_LEVELS)
def test_interval_endpoints(sea_level):
    assert biomes.classify(-1.0, sea_level) == 'tile.water.deep'
    # Top band is closed: exactly 1.0 is forest, not "no biome".
    assert biomes.classify(1.0, sea_level) == 'tile.forest'


def test_sea_level_splits_water_from_land():
    sea = -0.125
    assert biomes.classify(sea - 1e-9, sea) == 'tile.water.shallow'
    assert biomes.classify(sea, sea) == 'tile.beach'


def test_default_sea_level_thresholds():
    # below = 0.875, above = 1.125
    bands = biomes.biome_bands(-0.125)
    uppers = [upper for _, upper, _ in bands]
    assert uppers == pytest.approx([-0.5625, -0.125, 0.015625, 0.4375, 1.0])
    assert biomes.classify(-0.6, -0.125) == 'tile.water.deep'
    assert biomes.classify(-0.5625, -0.125) == 'tile.water.shallow'
    assert biomes.classify(0.0, -0.125) == 'tile.beach'
    assert biomes.classify(0.2, -0.125) == 'tile.plains'
    assert biomes.classify(0.4375, -0.125) == 'tile.forest'


def test_classify_defaults_to_configured_sea_level():
    assert biomes.classify(0.2) == biomes.classify(0.2, biomes.config.SEA_LEVEL)


def test_classify_rejects_out_of_range_samples():
    for bad in (-1.0001, 1.0001, float("nan")):
        with pytest.raises(ValueError):
            biomes.classify(bad, 0.0)


@pytest.mark.parametrize("sea_level", [-1.0, 1.0, 1.5, -2.0])
def test_sea_level_must_be_inside_open_interval(sea_level):
    with pytest.raises(ConfigurationError):
        biomes.biome_bands(sea_level)


def test_classify_grid_matches_classify():
    rng = np.random.RandomState(1337)
    for sea_level in (-0.125, 0.4, -0.8):
        samples = np.concatenate([rng.uniform(-1.0, 1.0, size=500),
            [-1.0, 1.0] + [upper for _, upper, _ in biomes.biome_bands(sea_level)]])
        index = biomes.classify_grid(samples, sea_level)
        for sample, i in zip(samples, index):
            assert biomes.BIOMES[i].name == biomes.classify(float(sample), sea_level), (sample, sea_level)


def test_load_biomes_requires_tile_definitions():
    with pytest.raises(ConfigurationError):
        biomes.load_biomes(ORDER[:4] + ['tile.swamp'])
    with pytest.raises(ConfigurationError):
        biomes.load_biomes(ORDER[:4])
    with pytest.raises(ConfigurationError):
        biomes.load_biomes(ORDER[:4] + ['tile.plains'])


def test_water_flags():
    assert biomes.is_water('tile.water.deep')
    assert biomes.is_water('tile.water.shallow')
    assert not biomes.is_water('tile.beach')
    assert not biomes.is_water('tile.forest')
