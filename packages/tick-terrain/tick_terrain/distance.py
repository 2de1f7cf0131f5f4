"""Coordinate-level route and distance queries over a GridWorld."""
from __future__ import annotations

import logging

from tick_terrain.cell import Cell
from tick_terrain.grid import GridWorld
from tick_terrain.pathfind import pathfind
from tick_terrain.types import PathResult, TerrainKind

logger = logging.getLogger(__name__)


def route(
    world: GridWorld, from_x: int, from_y: int, to_x: int, to_y: int
) -> PathResult[Cell]:
    """Search between two coordinates.

    The endpoints are throwaway PLAIN cells; they are never stored in
    `world`. The goal only counts as reached through a stored,
    non-blocking cell at (to_x, to_y), unless start and goal coincide.
    """
    logger.debug(f"Route ({from_x}, {from_y}) -> ({to_x}, {to_y})")
    start = Cell(from_x, from_y, TerrainKind.PLAIN)
    goal = Cell(to_x, to_y, TerrainKind.PLAIN)
    result = pathfind(world, start, goal)
    if result.found:
        logger.debug(f"Route found: cost={result.cost:.3f}, steps={len(result) - 1}")
    else:
        logger.debug(f"No route from ({from_x}, {from_y}) to ({to_x}, {to_y})")
    return result


def distance(
    world: GridWorld, from_x: int, from_y: int, to_x: int, to_y: int
) -> tuple[float, bool]:
    """Return (total_cost, found). total_cost is inf when found is False."""
    result = route(world, from_x, from_y, to_x, to_y)
    return result.cost, result.found
