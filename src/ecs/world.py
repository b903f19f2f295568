import random

from esper import World

from ecs.components.tile_palette import TilePalette


def create_world(
    *,
    rng: random.Random | None = None,
    palette: TilePalette | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Single palette entity shared by every renderer.
    world.create_entity(palette or TilePalette())
    return world
