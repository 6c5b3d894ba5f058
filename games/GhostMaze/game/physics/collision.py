"""Collision detection and movement resolution for GhostMaze.

Every check works on (left, top, right, bottom) bounds. Walls are static,
so a move is resolved by trying the new position against the tile map and
restoring the old one when it is blocked.
"""

from typing import TYPE_CHECKING, Iterable, List, Optional

from models import Direction

if TYPE_CHECKING:
    from ..entities.entity import Bounds, Entity, Mover
    from ..tile_map import TileMap


def overlaps(a: 'Bounds', b: 'Bounds') -> bool:
    """Check if two boxes intersect.

    Touching edges do not count as a collision.
    """
    return a[0] < b[2] and a[2] > b[0] and a[1] < b[3] and a[3] > b[1]


def entities_overlap(a: 'Entity', b: 'Entity') -> bool:
    return overlaps(a.get_bounds(), b.get_bounds())


def moved_bounds(bounds: 'Bounds', direction: Direction, distance: float) -> 'Bounds':
    """Bounds shifted along a direction."""
    dx, dy = direction.vector
    ox, oy = dx * distance, dy * distance
    return (bounds[0] + ox, bounds[1] + oy, bounds[2] + ox, bounds[3] + oy)


def can_travel(
    entity: 'Mover',
    direction: Direction,
    tile_map: 'TileMap',
    distance: Optional[float] = None,
) -> bool:
    """Check a move without touching the entity.

    Args:
        entity: Mover to check
        direction: Direction to check
        tile_map: Level map
        distance: Trial distance (defaults to the entity's step length)
    """
    if distance is None:
        distance = entity.speed
    return not tile_map.blocks(moved_bounds(entity.get_bounds(), direction, distance))


def attempt_move(
    entity: 'Mover',
    tile_map: 'TileMap',
    distance: Optional[float] = None,
) -> bool:
    """Move along the entity's facing direction.

    A blocked move leaves both position and direction unchanged.

    Returns:
        True if the entity moved
    """
    if distance is None:
        distance = entity.speed
    if distance == 0:
        return True

    old_x, old_y = entity.x, entity.y
    dx, dy = entity.direction.vector
    entity.set_position(old_x + dx * distance, old_y + dy * distance)

    if tile_map.blocks(entity.get_bounds()):
        entity.set_position(old_x, old_y)
        return False
    return True


def free_directions(
    entity: 'Mover',
    tile_map: 'TileMap',
    distance: Optional[float] = None,
    exclude: Iterable[Direction] = (),
) -> List[Direction]:
    """Directions the entity could travel right now, in Direction order."""
    excluded = set(exclude)
    return [
        direction for direction in Direction
        if direction not in excluded and can_travel(entity, direction, tile_map, distance)
    ]


def wrap_portal(entity: 'Entity', tile_map: 'TileMap') -> bool:
    """Wrap an entity across the portal row.

    Only entities fully inside the portal band wrap, and only once their
    center has crossed a vertical board edge.

    Returns:
        True if the entity was wrapped
    """
    if not tile_map.in_portal_band(entity.get_bounds()):
        return False

    center_x = entity.center[0]
    if center_x < 0:
        entity.set_position(entity.x + tile_map.width, entity.y)
        return True
    if center_x >= tile_map.width:
        entity.set_position(entity.x - tile_map.width, entity.y)
        return True
    return False
