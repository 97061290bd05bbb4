'''
scatter.py -- weighted per-biome resource draws and the placement rules for a drawn entity
'''
import math

import config
import tile_entities
from errors import ConfigurationError
from tiles import Layer, PositionJitter, TileEntity, Resource


def scatter_table(biome, tables=None):
    """ Return the ordered (entity, probability) pairs for `biome`, or an
    empty tuple when the biome scatters nothing.

    """
    if tables is None:
        tables = config.ENTITY_SCATTER
    for name, table in tables:
        if name == biome:
            return table
    return ()


def draw_entity(table, prn):
    """ Pick an entity from an ordered scatter `table` for a uniform draw `prn`.

    The first entity whose running probability total exceeds `prn` wins, so
    declaration order settles overlaps. Draws at or above the table total
    (the residual probability mass) return None.

    """
    if not table:
        return None
    cumulative = 0.0
    for entity, probability in table:
        cumulative += probability
        if prn < cumulative:
            return entity
    return None


def validate_scatter_tables(tables, biome_names, entity_names):
    """Reject scatter settings the generator cannot honour. Draws assume these checks passed."""
    seen = set()
    for biome, table in tables:
        if biome not in biome_names:
            raise ConfigurationError(f"scatter table for unknown biome {biome!r}")
        if biome in seen:
            raise ConfigurationError(f"duplicate scatter table for biome {biome!r}")
        seen.add(biome)
        total = 0.0
        for entity, probability in table:
            if entity not in entity_names:
                raise ConfigurationError(f"unknown tile entity {entity!r} in {biome!r} scatter table")
            if not (probability >= 0.0) or math.isinf(probability):
                raise ConfigurationError(f"bad probability {probability!r} for {entity!r} in {biome!r}")
            total += probability
        if total > 1.0 + 1e-9:
            raise ConfigurationError(f"scatter probabilities for {biome!r} sum to {total:.4f} > 1")


def entity_height(entity_type, rng):
    if entity_type.height_random is None:
        return float(entity_type.height)
    lo, hi = entity_type.height_random
    return float(entity_type.height * (rng.random() * (hi - lo) + lo))


def randomized_position(entity_type, rng):
    tl = entity_type.jitter_tl
    br = entity_type.jitter_br
    seed = (float(rng.random()), float(rng.random()))
    return PositionJitter(
        enabled=entity_type.jitter,
        offset=tl,
        range=(br[0] - tl[0], br[1] - tl[1]),
        seed=seed,
    )


def entity_layer(height):
    # Tall entities draw above the player, flat ones below.
    return Layer.ENTITY_ABOVE if height > 1 else Layer.ENTITY_BELOW


def place_entity(name, rng):
    """ Build the occupant for a freshly scattered entity of type `name`.

    Draws from `rng` in a fixed order: the height scale (only for types with
    a random height), then the x and y jitter seeds.

    """
    entity_type = tile_entities.get_type(name)
    height = entity_height(entity_type, rng)
    jitter = randomized_position(entity_type, rng)
    return Resource(TileEntity(name, entity_layer(height), height, jitter))
