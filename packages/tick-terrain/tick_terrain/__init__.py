"""tick-terrain - Weighted terrain grids for A* pathfinding."""
from __future__ import annotations

from tick_terrain.types import (
    Coord,
    MapParseError,
    NotAdjacentError,
    PathGraph,
    PathResult,
    TerrainError,
    TerrainKind,
    UnknownSymbolError,
)
from tick_terrain.registry import cost_of, kind_of_symbol, symbol_of
from tick_terrain.config import GridConfig
from tick_terrain.cell import Cell
from tick_terrain.grid import GridWorld
from tick_terrain.pathfind import pathfind
from tick_terrain.distance import distance, route
from tick_terrain.textmap import parse_world, render

__all__ = [
    "Coord",
    "TerrainKind",
    "PathGraph",
    "PathResult",
    "TerrainError",
    "UnknownSymbolError",
    "MapParseError",
    "NotAdjacentError",
    "cost_of",
    "symbol_of",
    "kind_of_symbol",
    "GridConfig",
    "Cell",
    "GridWorld",
    "pathfind",
    "distance",
    "route",
    "parse_world",
    "render",
]
