#std/external libs
import time
import numpy

#local libs
import config
import biomes
import logutil
import noise
import scatter
import tile_entities
from errors import ConfigurationError
from tiles import Layer, Tile
from world import World


class WorldGenerator:
    """Assembles a World from an ocean mask, an octave terrain field and the scatter tables.

    All randomness (both permutation tables, entity draws, heights and jitter
    seeds) comes from one numpy Generator built from `seed`, so a seed fixes
    the whole world. The ocean and terrain channels are separate noise fields;
    either may be replaced by any object with a `noise(x, y)` method.
    """

    def __init__(self, seed=None, sea_level=None, scatter_tables=None, ocean=None, terrain=None):
        if seed is None:
            seed = getattr(config, 'WORLD_SEED', None)
        if seed is None:
            seed = int(time.time())
        self.seed = seed
        self.rng = noise.make_rng(seed)
        self.sea_level = config.SEA_LEVEL if sea_level is None else sea_level
        biomes.check_sea_level(self.sea_level)
        if biomes.load_biomes(config.BIOMES) != biomes.BIOMES:
            raise ConfigurationError(f"biome order {tuple(config.BIOMES)} differs from the loaded order "
                f"{tuple(b.name for b in biomes.BIOMES)}")
        self.scatter_tables = config.ENTITY_SCATTER if scatter_tables is None else scatter_tables
        scatter.validate_scatter_tables(self.scatter_tables, biomes.BIOME_ID, tile_entities.TILE_ENTITIES)
        # Elevation field settings.
        self.ocean_scale = float(getattr(config, 'OCEAN_SCALE', 0.00625))
        self.octaves = int(getattr(config, 'TERRAIN_OCTAVES', 5))
        self.amplitude = float(getattr(config, 'TERRAIN_AMPLITUDE', 1.0))
        self.frequency = float(getattr(config, 'TERRAIN_FREQUENCY', 0.03125))
        self.persistence = float(getattr(config, 'TERRAIN_PERSISTENCE', 0.5))
        self.lacunarity = float(getattr(config, 'TERRAIN_LACUNARITY', 2.0))
        self.terrain_gain = float(getattr(config, 'TERRAIN_GAIN', 0.6))
        self.terrain_bias = float(getattr(config, 'TERRAIN_BIAS', 0.4))
        if self.octaves < 1:
            raise ConfigurationError(f"TERRAIN_OCTAVES must be at least 1, got {self.octaves}")
        # Separate fields for the two channels, both drawn from self.rng (ocean first).
        self.ocean = ocean if ocean is not None else noise.SimplexNoise(self.rng)
        self.terrain = terrain if terrain is not None else noise.SimplexNoise(self.rng)

    def ocean_sample(self, x, y):
        # Square of the [0,1] remap, stretched back to [-1,1].
        v = self.ocean.noise(x * self.ocean_scale, y * self.ocean_scale) * 0.5 + 0.5
        return v * v * 2 - 1

    def terrain_sample(self, x, y):
        t = noise.interpolated_octave(self.terrain, x, y, self.octaves, self.amplitude,
            self.frequency, self.persistence, self.lacunarity)
        return t * self.terrain_gain + self.terrain_bias

    def elevation(self, x, y):
        """Combined elevation in [-1, 1]; below sea level the ocean mask deepens the terrain."""
        ocean = self.ocean_sample(x, y)
        terrain = self.terrain_sample(x, y)
        combined = numpy.clip(numpy.where(ocean < self.sea_level, terrain + ocean, terrain), -1.0, 1.0)
        if numpy.ndim(combined) == 0:
            return float(combined)
        return combined

    def elevation_grid(self, width, height):
        """Elevation for every tile as a (width, height) array indexed [x, y]."""
        xs, ys = numpy.meshgrid(numpy.arange(width, dtype=numpy.float64),
            numpy.arange(height, dtype=numpy.float64), indexing='ij')
        return numpy.broadcast_to(self.elevation(xs, ys), (width, height))

    def generate(self, width=None, height=None):
        """ Build a World of `width` x `height` tiles.

        Elevation and biomes are computed for the whole grid at once; entity
        draws then walk the grid row by row (y outer, x inner), drawing one
        uniform per tile plus the placement draws for any scattered entity.

        """
        if width is None:
            width = config.WORLD_WIDTH
        if height is None:
            height = config.WORLD_HEIGHT
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"world size must be positive, got {width}x{height}")
        logutil.log("WORLDGEN", f"generating {width}x{height} world seed={self.seed} sea_level={self.sea_level}")
        t = time.time()
        elevation = self.elevation_grid(width, height)
        biome_index = biomes.classify_grid(elevation, self.sea_level)
        logutil.log("WORLDGEN", f"elevation and biomes ms={(time.time() - t) * 1000.0:.1f}", level="DEBUG")

        t = time.time()
        names = [b.name for b in biomes.BIOMES]
        tables = {name: scatter.scatter_table(name, self.scatter_tables) for name in names}
        tiles = [[None] * height for _ in range(width)]
        placed = 0
        for y in range(height):
            for x in range(width):
                biome = names[biome_index[x, y]]
                entity = scatter.draw_entity(tables[biome], self.rng.random())
                if entity is not None:
                    tiles[x][y] = Tile(biome, scatter.place_entity(entity, self.rng), Layer.GROUND_WITH_ENTITY)
                    placed += 1
                else:
                    tiles[x][y] = Tile(biome, None, Layer.GROUND)
        logutil.log("WORLDGEN", f"scattered {placed} entities ms={(time.time() - t) * 1000.0:.1f}", level="DEBUG")
        return World(width, height, tiles)


def generate_world(width=None, height=None, seed=None, **kwargs):
    """Generate a world with a fresh WorldGenerator; `kwargs` go to the generator."""
    return WorldGenerator(seed=seed, **kwargs).generate(width, height)
