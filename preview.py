'''
preview.py -- minimap snapshot of a generated world
'''
import numpy
from PIL import Image

import config
import biomes
import tile_entities

# Magenta marks ids with no registered colour.
DEFAULT_COLOR = (255, 0, 255, 255)


def tile_color(tile, show_entities=False):
    if show_entities and tile.entity is not None:
        entity_type = tile_entities.TILE_ENTITIES.get(tile.entity.id)
        return entity_type.color if entity_type is not None else DEFAULT_COLOR
    biome = biomes.TILE_BIOMES.get(tile.id)
    return biome.color if biome is not None else DEFAULT_COLOR


def minimap_array(world, scale=None, show_entities=False):
    """RGBA uint8 array of shape (height*scale, width*scale, 4); row index is y."""
    if scale is None:
        scale = getattr(config, 'PREVIEW_SCALE', 1)
    pixels = numpy.zeros((world.height, world.width, 4), dtype=numpy.uint8)
    for (x, y), tile in world.iter_tiles():
        pixels[y, x] = tile_color(tile, show_entities)
    if scale > 1:
        pixels = pixels.repeat(scale, axis=0).repeat(scale, axis=1)
    return pixels


def minimap_image(world, scale=None, show_entities=False):
    return Image.fromarray(minimap_array(world, scale, show_entities))


def save_minimap(world, path, scale=None, show_entities=False):
    im = minimap_image(world, scale, show_entities)
    im.save(path)
    return im.size
