'''
tiles.py -- per-cell world data: tiles, the entities that occupy them and their draw layers
'''
from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple, Union

import config

Vec2 = Tuple[float, float]


class Layer(IntEnum):
    """Draw order consumed by the renderer, lowest first.

    Ground under an entity < bare ground < flat entities < player < tall entities.
    """
    GROUND_WITH_ENTITY = -3
    GROUND = -2
    ENTITY_BELOW = -1
    PLAYER = 0
    ENTITY_ABOVE = 1


class PositionJitter(object):
    """Fixed sub-tile draw offset: `offset + range * seed`, seed drawn once at placement."""
    __slots__ = ('enabled', 'offset', 'range', 'seed')

    def __init__(self, enabled=False, offset=(0.0, 0.0), range=(0.0, 0.0), seed=(0.0, 0.0)):
        self.enabled = bool(enabled)
        self.offset = tuple(offset)
        self.range = tuple(range)
        self.seed = tuple(seed)

    def position(self) -> Vec2:
        if not self.enabled:
            return (0.5, 0.5)
        return (self.offset[0] + self.range[0] * self.seed[0],
                self.offset[1] + self.range[1] * self.seed[1])

    def __eq__(self, other):
        if not isinstance(other, PositionJitter):
            return NotImplemented
        return (self.enabled, self.offset, self.range, self.seed) == \
            (other.enabled, other.offset, other.range, other.seed)

    def __repr__(self):
        return f"PositionJitter(enabled={self.enabled}, offset={self.offset}, range={self.range}, seed={self.seed})"


class TileEntity(object):
    """A placed resource node. Read-only; gameplay replaces the whole occupant instead."""

    def __init__(self, id: str, layer: Layer = Layer.ENTITY_ABOVE, height: float = 1.0,
                 randomized_position: Optional[PositionJitter] = None):
        self._id = id
        self._layer = Layer(layer)
        self._height = float(height)
        self._randomized_position = randomized_position if randomized_position is not None else PositionJitter()

    @property
    def id(self):
        return self._id

    @property
    def layer(self):
        return self._layer

    @property
    def height(self):
        return self._height

    @property
    def randomized_position(self):
        return self._randomized_position

    def __repr__(self):
        return f"TileEntity({self._id!r}, layer={self._layer.name}, height={self._height:.3f})"


class ItemStack(object):
    def __init__(self, id: str, count: int = 1, max: Optional[int] = None):
        self.id = id
        self.count = count
        if max is None:
            max = config.ITEM_STACK_SIZE.get(id, getattr(config, 'DEFAULT_STACK_SIZE', 64))
        self.max = max

    def __eq__(self, other):
        if not isinstance(other, ItemStack):
            return NotImplemented
        return (self.id, self.count, self.max) == (other.id, other.count, other.max)

    def __repr__(self):
        return f"ItemStack({self.id!r}, {self.count}/{self.max})"


class Resource(object):
    """Occupant variant: a generated or placed tile entity."""
    kind = 'resource'
    __slots__ = ('entity',)

    def __init__(self, entity: TileEntity):
        self.entity = entity

    @property
    def id(self):
        return self.entity.id

    @property
    def layer(self):
        return self.entity.layer

    @property
    def height(self):
        return self.entity.height

    def __eq__(self, other):
        return isinstance(other, Resource) and other.entity is self.entity

    def __hash__(self):
        return id(self.entity)

    def __repr__(self):
        return f"Resource({self.entity!r})"


class Dropped(object):
    """Occupant variant: an item stack the player dropped on the tile."""
    kind = 'dropped'
    __slots__ = ('stack',)

    layer = Layer.GROUND
    height = 1.0

    def __init__(self, stack: ItemStack):
        self.stack = stack

    @property
    def id(self):
        return self.stack.id

    def __eq__(self, other):
        return isinstance(other, Dropped) and other.stack is self.stack

    def __hash__(self):
        return id(self.stack)

    def __repr__(self):
        return f"Dropped({self.stack!r})"


Occupant = Union[Resource, Dropped]
OCCUPANT_KINDS = (Resource.kind, Dropped.kind)


def match_occupant(occupant, resource, dropped, empty=None):
    """Dispatch on the occupant variant.

    `resource` is called with the TileEntity, `dropped` with the ItemStack and
    `empty` (or a None result) when the tile is unoccupied.
    """
    if occupant is None:
        return empty() if empty is not None else None
    if occupant.kind == Resource.kind:
        return resource(occupant.entity)
    if occupant.kind == Dropped.kind:
        return dropped(occupant.stack)
    raise TypeError(f"unknown occupant kind {occupant.kind!r}")


class Tile(object):
    """One grid cell. `id` and the ground `layer` are fixed; `entity` is the occupant slot."""
    __slots__ = ('_id', '_layer', 'entity')

    def __init__(self, id: str, entity: Optional[Occupant] = None, layer: Layer = Layer.GROUND):
        self._id = id
        self._layer = Layer(layer)
        self.entity = entity

    @property
    def id(self):
        return self._id

    @property
    def layer(self):
        return self._layer

    def __repr__(self):
        return f"Tile({self._id!r}, entity={self.entity!r}, layer={self._layer.name})"
