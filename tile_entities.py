'''
tile_entities.py -- static placement settings for the resource entities scattered onto tiles
'''


class TileEntityType(object):
    name = None
    item = None
    color = (255, 255, 255, 255)
    # Blocks player movement onto the tile.
    collision = False
    # Visual height; when height_random is set the value is scaled by uniform(min, max).
    height = 1.0
    height_random = None
    # Normalized sub-tile window (top-left, bottom-right) the entity is drawn inside.
    jitter = True
    jitter_tl = (0.45, 0.45)
    jitter_br = (0.55, 0.55)

class Stick(TileEntityType):
    name = 'tile.entity.stick'
    item = 'item.wood'
    color = (63, 31, 31, 255)

class Stones(TileEntityType):
    name = 'tile.entity.stones'
    item = 'item.stone'
    color = (33, 33, 33, 255)

class LargeStone(TileEntityType):
    name = 'tile.entity.large_stone'
    item = 'item.stone'
    color = (63, 63, 63, 255)
    collision = True

class Tree(TileEntityType):
    name = 'tile.entity.tree'
    item = 'item.wood'
    color = (80, 120, 30, 255)
    collision = True
    height = 2.0
    height_random = (0.6, 1.0)
    jitter_tl = (0.25, 0.25)
    jitter_br = (0.75, 0.75)

class Grass(TileEntityType):
    name = 'tile.entity.grass'
    item = 'item.fibers'
    color = (100, 150, 50, 255)
    jitter_tl = (0.25, 0.25)
    jitter_br = (0.75, 0.75)

class CopperOre(TileEntityType):
    name = 'tile.entity.copper_ore'
    item = 'item.copper_ore'
    color = (31, 127, 63, 255)
    collision = True

class IronOre(TileEntityType):
    name = 'tile.entity.iron_ore'
    item = 'item.iron_ore'
    color = (63, 31, 31, 255)
    collision = True

class Workbench(TileEntityType):
    name = 'tile.entity.workbench'
    item = 'item.workbench'
    color = (63, 31, 127, 255)
    collision = True
    jitter = False
    jitter_tl = (0.0, 0.0)
    jitter_br = (0.0, 0.0)


TILE_ENTITY_CLASSES = [
    Stick,
    Stones,
    LargeStone,
    Tree,
    Grass,
    CopperOre,
    IronOre,
    Workbench,
]
TILE_ENTITIES = {}
for x in TILE_ENTITY_CLASSES:
    TILE_ENTITIES[x.name] = x


def get_type(name):
    try:
        return TILE_ENTITIES[name]
    except KeyError:
        raise KeyError(f"unknown tile entity type {name!r}") from None


def collides(name):
    entity_type = TILE_ENTITIES.get(name)
    return entity_type is not None and entity_type.collision
