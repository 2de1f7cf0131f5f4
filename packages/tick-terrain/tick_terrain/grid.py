"""GridWorld - sparse 2D store of terrain cells."""
from __future__ import annotations

from typing import Any, Iterator

from tick_terrain.cell import Cell
from tick_terrain.config import GridConfig
from tick_terrain.registry import is_input_kind, kind_of_symbol, symbol_of
from tick_terrain.types import Coord, TerrainKind


class GridWorld:
    """Maps (x, y) coordinates to Cells.

    Sparse storage: only explicitly set coordinates hold a cell. An absent
    coordinate is "no cell", which is distinct from a BLOCKER cell.

    Also implements the PathGraph protocol so it can be handed straight
    to pathfind(). Not safe for mutation during a search.
    """

    def __init__(self, config: GridConfig | None = None) -> None:
        self._config = config if config is not None else GridConfig()
        self._cells: dict[Coord, Cell] = {}

    @property
    def config(self) -> GridConfig:
        return self._config

    # --- Mutation ---

    def set_cell(self, blocker: bool, x: int, y: int) -> Cell:
        """Create or overwrite a BLOCKER (if `blocker`) or PLAIN cell."""
        kind = TerrainKind.BLOCKER if blocker else TerrainKind.PLAIN
        return self.set_cell_kind(kind, x, y)

    def set_cell_kind(self, kind: TerrainKind, x: int, y: int) -> Cell:
        """Create or overwrite the cell at (x, y) with any input kind.

        The previous cell, if any, is discarded. Raises ValueError for the
        output-only PATH kind.
        """
        if not is_input_kind(kind):
            raise ValueError(f"{kind.name} is output-only and cannot be stored")
        cell = Cell(x, y, kind)
        self._cells[(x, y)] = cell
        return cell

    def remove(self, x: int, y: int) -> None:
        self._cells.pop((x, y), None)

    def clear(self) -> None:
        self._cells.clear()

    def fill_rect(
        self,
        kind: TerrainKind,
        corner1: Coord,
        corner2: Coord,
    ) -> None:
        """Fill a rectangle (inclusive) with a terrain kind."""
        x1, y1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        x2, y2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        for x in range(x1, x2 + 1):
            for y in range(y1, y2 + 1):
                self.set_cell_kind(kind, x, y)

    # --- Queries ---

    def cell_at(self, x: int, y: int) -> Cell | None:
        return self._cells.get((x, y))

    def coords(self) -> list[Coord]:
        return list(self._cells.keys())

    def bounds(self) -> tuple[Coord, Coord] | None:
        """Inclusive bounding box of stored cells, or None if empty."""
        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return (min(xs), min(ys)), (max(xs), max(ys))

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._cells.values()))

    # --- PathGraph ---

    def neighbors(self, node: Cell) -> list[Cell]:
        return node.neighbors(self, diagonal=self._config.allow_diagonal)

    def neighbor_cost(self, a: Cell, b: Cell) -> float:
        return a.neighbor_cost(b, diagonal_penalty=self._config.diagonal_penalty)

    def estimated_cost(self, a: Cell, b: Cell) -> float:
        return a.estimated_cost(b)

    def same_point(self, a: Cell, b: Cell) -> bool:
        return a.same_point(b)

    # --- Snapshot / Restore ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize stored cells as {'cells': {'x,y': symbol}}."""
        cells: dict[str, str] = {}
        for (x, y), cell in self._cells.items():
            cells[f"{x},{y}"] = symbol_of(cell.kind)
        return {"cells": cells}

    def restore(self, data: dict[str, Any]) -> None:
        """Replace all cells from snapshot data.

        Raises UnknownSymbolError for symbols outside the input table; the
        world is left unchanged in that case.
        """
        restored: dict[Coord, Cell] = {}
        for coord_str, symbol in data.get("cells", {}).items():
            x_str, y_str = coord_str.split(",")
            x, y = int(x_str), int(y_str)
            restored[(x, y)] = Cell(x, y, kind_of_symbol(symbol))
        self._cells = restored

    # --- Debug ---

    def dump(self) -> str:
        """One '(x,y)=KIND' entry per stored cell, in no particular order."""
        return "  ".join(
            f"({cell.x},{cell.y})={cell.kind.name}" for cell in self._cells.values()
        )

    def __repr__(self) -> str:
        return f"GridWorld(cells={len(self._cells)}, config={self._config!r})"
