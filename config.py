# World size in tiles (x, y).
WORLD_WIDTH = 257
WORLD_HEIGHT = 257

# Seed for the world generator's random stream; None seeds from the clock.
WORLD_SEED = None

# Terrain generation
SEA_LEVEL = -0.125
# Ocean mask is raw simplex noise sampled at this scale (no octaves, sharper coasts).
OCEAN_SCALE = 0.00625
# Terrain elevation: interpolated octave noise, then sample * GAIN + BIAS.
TERRAIN_OCTAVES = 5
TERRAIN_AMPLITUDE = 1.0
TERRAIN_FREQUENCY = 0.03125
TERRAIN_PERSISTENCE = 0.5
TERRAIN_LACUNARITY = 2.0
TERRAIN_GAIN = 0.6
TERRAIN_BIAS = 0.4

# Biomes in ascending elevation order; every name needs a class in biomes.py.
BIOMES = (
    'tile.water.deep',
    'tile.water.shallow',
    'tile.beach',
    'tile.plains',
    'tile.forest',
)

# Per-biome resource scatter. Order matters: the first entity whose running
# probability total exceeds the draw wins. Leftover probability means no entity.
ENTITY_SCATTER = (
    ('tile.beach', (
        ('tile.entity.stones', 0.05),
    )),
    ('tile.plains', (
        ('tile.entity.stick', 0.0025),
        ('tile.entity.stones', 0.025),
        ('tile.entity.large_stone', 0.00125),
        ('tile.entity.tree', 0.001),
        ('tile.entity.grass', 0.1),
        ('tile.entity.copper_ore', 0.0075),
    )),
    ('tile.forest', (
        ('tile.entity.stick', 0.05),
        ('tile.entity.stones', 0.025),
        ('tile.entity.large_stone', 0.00625),
        ('tile.entity.tree', 0.2),
        ('tile.entity.copper_ore', 0.01),
        ('tile.entity.iron_ore', 0.0075),
    )),
)

# Maximum stack size per item id (dropped stacks on tiles).
ITEM_STACK_SIZE = {
    'item.workbench': 1,
    'item.stone': 64,
    'item.fibers': 64,
    'item.wood': 64,
    'item.copper_ore': 64,
    'item.iron_ore': 64,
    'item.stone_knife': 1,
    'item.stone_pickaxe': 1,
    'item.stone_sword': 1,
    'item.stone_axe': 1,
    'item.copper_pickaxe': 1,
    'item.copper_sword': 1,
    'item.copper_axe': 1,
    'item.iron_pickaxe': 1,
    'item.iron_sword': 1,
    'item.iron_axe': 1,
}
DEFAULT_STACK_SIZE = 64

# Spawn search: random retries before giving up on finding a passable tile.
SPAWN_MAX_ATTEMPTS = 10000

# Minimap preview: pixels per tile.
PREVIEW_SCALE = 2

# Enable ANSI colors in logs.
LOG_COLOR = True

# Emit DEBUG level log lines.
LOG_DEBUG = False

# Log world generation phases and summary.
LOG_WORLDGEN = True
