import os
import sys

import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from errors import ConfigurationError, TileBoundsError
from tiles import (Dropped, ItemStack, Layer, PositionJitter, Resource, Tile,
    TileEntity, match_occupant)
from world import World


def _world(width=3, height=2, biome='tile.plains'):
    tiles = [[Tile(biome, None, Layer.GROUND) for _ in range(height)] for _ in range(width)]
    return World(width, height, tiles)


def test_size_accessors():
    world = _world(3, 2)
    assert world.width == 3
    assert world.height == 2
    assert world.size == (3, 2)


def test_tiles_are_indexed_by_x_then_y():
    tiles = [[Tile('tile.plains' if x == 2 else 'tile.beach') for y in range(2)] for x in range(3)]
    world = World(3, 2, tiles)
    assert world.get((2, 1)).id == 'tile.plains'
    assert world.get((0, 1)).id == 'tile.beach'
    assert world.get((2, 0)) is tiles[2][0]


def test_set_entity_round_trip():
    world = _world()
    occupant = Resource(TileEntity('tile.entity.tree', Layer.ENTITY_ABOVE, 1.8))
    world.set_entity((1, 1), occupant)
    assert world.get((1, 1)).entity == occupant
    world.set_entity((1, 1), None)
    assert world.get((1, 1)).entity is None


def test_set_entity_keeps_biome_and_ground_layer():
    world = _world()
    before = world.get((0, 0))
    world.set_entity((0, 0), Dropped(ItemStack('item.wood', 3)))
    after = world.get((0, 0))
    assert after is before
    assert after.id == 'tile.plains'
    assert after.layer == Layer.GROUND
    assert after.entity.id == 'item.wood'
    with pytest.raises(AttributeError):
        after.id = 'tile.beach'
    with pytest.raises(AttributeError):
        after.layer = Layer.GROUND_WITH_ENTITY


def test_bounds_are_checked():
    world = _world(3, 2)
    for position in [(-1, 0), (0, -1), (3, 0), (0, 2), (10, 10)]:
        assert not world.in_bounds(position)
        with pytest.raises(TileBoundsError):
            world.get(position)
        with pytest.raises(TileBoundsError):
            world.set_entity(position, None)
    # Bounds errors are IndexErrors for callers that only know the builtin.
    with pytest.raises(IndexError):
        world.get((3, 0))


def test_world_rejects_bad_shapes():
    with pytest.raises(ConfigurationError):
        World(0, 2, [])
    with pytest.raises(ConfigurationError):
        World(2, 2, [[Tile('tile.beach')] * 2])


def test_occupant_dispatch():
    entity = TileEntity('tile.entity.stones', Layer.ENTITY_BELOW, 1.0)
    stack = ItemStack('item.stone', 5)
    describe = dict(
        resource=lambda e: ('resource', e.id),
        dropped=lambda s: ('dropped', s.id, s.count),
        empty=lambda: ('empty',),
    )
    assert match_occupant(Resource(entity), **describe) == ('resource', 'tile.entity.stones')
    assert match_occupant(Dropped(stack), **describe) == ('dropped', 'item.stone', 5)
    assert match_occupant(None, **describe) == ('empty',)


def test_occupants_share_a_read_interface():
    resource = Resource(TileEntity('tile.entity.tree', Layer.ENTITY_ABOVE, 1.5))
    dropped = Dropped(ItemStack('item.wood'))
    assert (resource.kind, resource.id, resource.layer, resource.height) == \
        ('resource', 'tile.entity.tree', Layer.ENTITY_ABOVE, 1.5)
    assert (dropped.kind, dropped.id, dropped.layer) == ('dropped', 'item.wood', Layer.GROUND)


def test_item_stack_size_comes_from_config():
    assert ItemStack('item.wood').max == 64
    assert ItemStack('item.workbench').max == 1
    assert ItemStack('item.wood', 2, 10).max == 10


def test_tile_entity_is_read_only():
    entity = TileEntity('tile.entity.grass', Layer.ENTITY_BELOW, 1.0, PositionJitter(True, (0.25, 0.25), (0.5, 0.5), (0.5, 0.5)))
    assert entity.randomized_position.position() == (0.5, 0.5)
    with pytest.raises(AttributeError):
        entity.height = 3.0


def test_passability():
    world = _world(3, 1)
    world.tiles[0][0] = Tile('tile.water.shallow')
    world.set_entity((1, 0), Resource(TileEntity('tile.entity.tree', Layer.ENTITY_ABOVE, 2.0)))
    assert not world.is_passable((0, 0))
    assert not world.is_passable((1, 0))
    assert world.is_passable((2, 0))
    world.set_entity((2, 0), Dropped(ItemStack('item.stone')))
    assert world.is_passable((2, 0))
    world.set_entity((1, 0), Resource(TileEntity('tile.entity.grass', Layer.ENTITY_BELOW, 1.0)))
    assert world.is_passable((1, 0))


def test_find_spawn_prefers_centre():
    world = _world(5, 5)
    assert world.find_spawn(1) == (2, 2)


def test_find_spawn_searches_for_land():
    world = _world(5, 5, biome='tile.water.deep')
    world.tiles[4][0] = Tile('tile.beach')
    assert world.find_spawn(3) == (4, 0)


def test_find_spawn_gives_up():
    world = _world(2, 2, biome='tile.water.deep')
    with pytest.raises(ConfigurationError):
        world.find_spawn(3, max_attempts=50)


def test_counts():
    world = _world(2, 2)
    world.tiles[0][0] = Tile('tile.beach')
    world.set_entity((1, 1), Resource(TileEntity('tile.entity.stones', Layer.ENTITY_BELOW, 1.0)))
    assert world.biome_counts() == {'tile.plains': 3, 'tile.beach': 1}
    assert world.entity_counts() == {'tile.entity.stones': 1}


def test_positions_must_be_integers():
    world = _world(3, 2)
    for position in [(1.7, 0), (0, 0.5), (1.0, 1)]:
        with pytest.raises(TypeError):
            world.get(position)
        with pytest.raises(TypeError):
            world.set_entity(position, None)
    assert world.get((np.int64(2), np.int32(1))) is world.tiles[2][1]
