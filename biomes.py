import math
import numpy

import config
from errors import ConfigurationError


class Biome(object):
    name = None
    # RGBA used for the minimap preview.
    color = (255, 255, 255, 255)
    water = False
    # Fraction of the sea-level span this band ends at, and which span
    # ('below' sea level or 'above' it) the fraction is taken from.
    span = None
    fraction = 0.0

class DeepWater(Biome):
    name = 'tile.water.deep'
    color = (47, 40, 112, 255)
    water = True
    span = 'below'
    fraction = 0.5

class ShallowWater(Biome):
    name = 'tile.water.shallow'
    color = (85, 77, 235, 255)
    water = True
    span = 'below'
    fraction = 1.0

class Beach(Biome):
    name = 'tile.beach'
    color = (255, 220, 78, 255)
    span = 'above'
    fraction = 0.125

class Plains(Biome):
    name = 'tile.plains'
    color = (97, 133, 20, 255)
    span = 'above'
    fraction = 0.5

class Forest(Biome):
    name = 'tile.forest'
    color = (37, 67, 16, 255)
    span = 'above'
    fraction = 1.0


BIOME_CLASSES = [
    DeepWater,
    ShallowWater,
    Beach,
    Plains,
    Forest,
]
TILE_BIOMES = {}
for x in BIOME_CLASSES:
    TILE_BIOMES[x.name] = x


def load_biomes(names):
    """Resolve configured biome names to their classes, ascending order preserved."""
    biomes = []
    for name in names:
        if name not in TILE_BIOMES:
            raise ConfigurationError(f"biome {name!r} has no tile definition")
        if TILE_BIOMES[name] in biomes:
            raise ConfigurationError(f"biome {name!r} listed twice")
        biomes.append(TILE_BIOMES[name])
    if len(biomes) != len(BIOME_CLASSES):
        raise ConfigurationError(f"expected {len(BIOME_CLASSES)} biomes, got {len(biomes)}")
    return biomes


BIOMES = load_biomes(config.BIOMES)
BIOME_ID = {}
i = 0
for x in BIOMES:
    BIOME_ID[x.name] = i
    i += 1
DEEP_WATER = BIOMES[0].name
FOREST = BIOMES[-1].name


def check_sea_level(sea_level):
    if not (-1.0 < sea_level < 1.0):
        raise ConfigurationError(f"sea level must lie strictly inside (-1, 1), got {sea_level}")


def biome_bands(sea_level=None):
    """ Return the classification bands for `sea_level` as a list of
    (lower, upper, biome name) in ascending order.

    Water bands split the span from -1 up to sea level, land bands split the
    span from sea level up to 1. Each band starts where the previous ended,
    so the bands cover [-1, 1] without gaps.

    """
    if sea_level is None:
        sea_level = config.SEA_LEVEL
    check_sea_level(sea_level)
    below = abs(-1.0 - sea_level)
    above = abs(sea_level - 1.0)
    bands = []
    lower = -1.0
    for biome in BIOMES:
        if biome.span == 'below':
            upper = -1.0 + below * biome.fraction
        else:
            upper = -1.0 + below + above * biome.fraction
        bands.append((lower, upper, biome.name))
        lower = upper
    # The last band always closes at exactly 1.0.
    lo, _, name = bands[-1]
    bands[-1] = (lo, 1.0, name)
    return bands


def classify(sample, sea_level=None):
    """ Map an elevation `sample` in [-1, 1] to a biome name.

    Bands are half-open [lower, upper) except the top band, which also
    includes 1.0 itself.

    """
    if math.isnan(sample) or sample < -1.0 or sample > 1.0:
        raise ValueError(f"biome sample must lie in [-1, 1], got {sample}")
    bands = biome_bands(sea_level)
    for lower, upper, name in bands:
        if lower <= sample < upper:
            return name
    return bands[-1][2]


def classify_grid(samples, sea_level=None):
    """Vectorised `classify`: return an int array of indices into BIOMES."""
    samples = numpy.asarray(samples, dtype=numpy.float64)
    if numpy.isnan(samples).any() or (samples < -1.0).any() or (samples > 1.0).any():
        raise ValueError("biome samples must lie in [-1, 1]")
    uppers = numpy.array([upper for _, upper, _ in biome_bands(sea_level)])
    index = numpy.searchsorted(uppers, samples, side='right')
    return numpy.minimum(index, len(BIOMES) - 1)


def is_water(biome_name):
    return TILE_BIOMES[biome_name].water


def biome_color(biome_name):
    return TILE_BIOMES[biome_name].color
