"""Text map adapters: build a GridWorld from symbols and render one back."""
from __future__ import annotations

import logging
from typing import Iterable

from tick_terrain.cell import Cell
from tick_terrain.config import GridConfig
from tick_terrain.grid import GridWorld
from tick_terrain.registry import kind_of_symbol, symbol_of
from tick_terrain.types import MapParseError, TerrainKind, UnknownSymbolError

logger = logging.getLogger(__name__)

# Marks a coordinate with no cell in either direction.
EMPTY = " "


def parse_world(text: str, config: GridConfig | None = None) -> GridWorld:
    """Build a GridWorld from rows of terrain symbols.

    Row index is y, column index is x. Leading and trailing blank lines
    are dropped; spaces leave the coordinate empty.

    Raises MapParseError on any other unrecognized symbol.
    """
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    world = GridWorld(config)
    for y, line in enumerate(lines):
        for x, symbol in enumerate(line):
            if symbol == EMPTY:
                continue
            try:
                kind = kind_of_symbol(symbol)
            except UnknownSymbolError:
                raise MapParseError(symbol, x, y) from None
            world.set_cell_kind(kind, x, y)
    logger.debug(f"Parsed {len(world)} cells from {len(lines)} rows")
    return world


def render(world: GridWorld, path: Iterable[Cell] | None = None) -> str:
    """Draw the world's bounding box, one row per y.

    Cells on `path` are drawn with the PATH symbol; `world` is not
    modified. Trailing spaces are stripped from each row.
    """
    on_path = {cell.coord for cell in path} if path is not None else set()
    corners = list(on_path)
    box = world.bounds()
    if box is not None:
        corners.extend(box)
    if not corners:
        return ""
    min_x = min(x for x, _ in corners)
    max_x = max(x for x, _ in corners)
    min_y = min(y for _, y in corners)
    max_y = max(y for _, y in corners)

    marker = symbol_of(TerrainKind.PATH)
    rows: list[str] = []
    for y in range(min_y, max_y + 1):
        row: list[str] = []
        for x in range(min_x, max_x + 1):
            cell = world.cell_at(x, y)
            if (x, y) in on_path:
                row.append(marker)
            elif cell is None:
                row.append(EMPTY)
            else:
                row.append(symbol_of(cell.kind))
        rows.append("".join(row).rstrip())
    return "\n".join(rows)
