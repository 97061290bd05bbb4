'''
world.py -- the generated tile grid and the single mutation gameplay is allowed on it
'''
import numbers
from collections import Counter

import config
import biomes
import tile_entities
from errors import ConfigurationError, TileBoundsError
from noise import make_rng
from tiles import match_occupant


class World(object):
    """
    Fixed-size grid of Tiles indexed by (x, y).

    Built once by the generator and afterwards changed only through
    `set_entity`. Access is single-writer: the game's update step is the only
    caller expected to mutate tiles.
    """
    def __init__(self, width, height, tiles):
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"world size must be positive, got {width}x{height}")
        if len(tiles) != width or any(len(column) != height for column in tiles):
            raise ConfigurationError(f"tile grid does not match world size {width}x{height}")
        self._width = width
        self._height = height
        # tiles[x][y]
        self.tiles = tiles

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def size(self):
        return (self._width, self._height)

    def in_bounds(self, position):
        x, y = position
        return 0 <= x < self._width and 0 <= y < self._height

    def _check(self, position):
        x, y = position
        if not isinstance(x, numbers.Integral) or not isinstance(y, numbers.Integral):
            raise TypeError(f"tile position must be a pair of integers, got {tuple(position)!r}")
        if not self.in_bounds(position):
            raise TileBoundsError(tuple(position), self.size)
        return int(x), int(y)

    def get(self, position):
        x, y = self._check(position)
        return self.tiles[x][y]

    def set_entity(self, position, occupant):
        """Replace the occupant at `position` (None clears it). Biome and ground layer are untouched."""
        x, y = self._check(position)
        self.tiles[x][y].entity = occupant

    def is_passable(self, position):
        """ Returns True when a player may stand on `position`: not water and
        not blocked by a colliding resource entity. Dropped stacks never block.

        """
        tile = self.get(position)
        if biomes.is_water(tile.id):
            return False
        return not match_occupant(
            tile.entity,
            resource=lambda entity: tile_entities.collides(entity.id),
            dropped=lambda stack: False,
            empty=lambda: False,
        )

    def find_spawn(self, rng=None, max_attempts=None):
        """ Returns a passable position, trying the world centre first and
        then uniformly random tiles.

        """
        if max_attempts is None:
            max_attempts = getattr(config, 'SPAWN_MAX_ATTEMPTS', 10000)
        rng = make_rng(rng)
        position = (self._width // 2, self._height // 2)
        for _ in range(max_attempts):
            if self.is_passable(position):
                return position
            position = (int(rng.integers(0, self._width)), int(rng.integers(0, self._height)))
        raise ConfigurationError(f"no passable spawn tile found after {max_attempts} attempts")

    def iter_tiles(self):
        for x in range(self._width):
            column = self.tiles[x]
            for y in range(self._height):
                yield (x, y), column[y]

    def biome_counts(self):
        return Counter(tile.id for _, tile in self.iter_tiles())

    def entity_counts(self):
        return Counter(tile.entity.id for _, tile in self.iter_tiles() if tile.entity is not None)
