import sys
import time

# local module imports
import config
import logutil
import worldgen


def summarize(world):
    total = world.width * world.height
    for name, count in sorted(world.biome_counts().items()):
        logutil.log("MAIN", f"biome {name}: {count} tiles ({count / total:.1%})")
    for name, count in sorted(world.entity_counts().items()):
        logutil.log("MAIN", f"entity {name}: {count}")


def main(argv=None):
    """ Generate a world and log what it contains.

    Usage: main.py [seed] [preview.png]

    """
    if argv is None:
        argv = sys.argv[1:]
    seed = config.WORLD_SEED
    preview_path = None
    if len(argv) > 0:
        try:
            seed = int(argv[0])
        except ValueError:
            logutil.log("MAIN", f"seed must be an integer, got {argv[0]!r}", level="ERROR")
            return 2
    if len(argv) > 1:
        preview_path = argv[1]
    t = time.time()
    world = worldgen.generate_world(config.WORLD_WIDTH, config.WORLD_HEIGHT, seed=seed)
    logutil.log("MAIN", f"generated {world.width}x{world.height} world in {time.time() - t:.2f}s")
    summarize(world)
    spawn = world.find_spawn(seed)
    logutil.log("MAIN", f"spawn tile {spawn}")
    if preview_path:
        import preview
        size = preview.save_minimap(world, preview_path)
        logutil.log("MAIN", f"wrote minimap {preview_path} size={size}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
