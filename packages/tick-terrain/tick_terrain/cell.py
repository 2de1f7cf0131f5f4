"""Cell - a single terrain tile addressed by integer coordinates."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tick_terrain.config import DIAGONAL_PENALTY
from tick_terrain.registry import cost_of
from tick_terrain.types import Coord, NotAdjacentError, TerrainKind

if TYPE_CHECKING:
    from tick_terrain.grid import GridWorld

_ORTHOGONAL_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1)]
_DIAGONAL_OFFSETS = [(-1, -1), (1, -1), (-1, 1), (1, 1)]


@dataclass(frozen=True)
class Cell:
    """Immutable tile value.

    Identity is the coordinate pair: two cells at the same (x, y) compare
    and hash equal whatever their kinds. A cell never references the
    world that stores it; lookups take the world as an argument.
    """

    x: int
    y: int
    kind: TerrainKind = field(default=TerrainKind.PLAIN, compare=False)

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def neighbors(self, world: GridWorld, diagonal: bool = True) -> list[Cell]:
        """Stored, non-blocking cells adjacent to this one.

        Absent coordinates are skipped.
        """
        offsets = _ORTHOGONAL_OFFSETS + _DIAGONAL_OFFSETS if diagonal else _ORTHOGONAL_OFFSETS
        result: list[Cell] = []
        for dx, dy in offsets:
            n = world.cell_at(self.x + dx, self.y + dy)
            if n is not None and n.kind is not TerrainKind.BLOCKER:
                result.append(n)
        return result

    def neighbor_cost(self, to: Cell, diagonal_penalty: float = DIAGONAL_PENALTY) -> float:
        """Cost of stepping from this cell onto the adjacent cell `to`.

        Raises NotAdjacentError unless `to` is one of the eight surrounding
        cells, and TerrainError if `to` cannot be entered.
        """
        dx = abs(self.x - to.x)
        dy = abs(self.y - to.y)
        if max(dx, dy) != 1:
            raise NotAdjacentError(
                f"({to.x}, {to.y}) is not adjacent to ({self.x}, {self.y})"
            )
        cost = cost_of(to.kind)
        if dx == 1 and dy == 1:
            return cost * diagonal_penalty
        return cost

    def estimated_cost(self, to: Cell) -> float:
        # Manhattan distance; overestimates on diagonal-heavy routes.
        return float(abs(to.x - self.x) + abs(to.y - self.y))

    def same_point(self, to: Cell) -> bool:
        return self.x == to.x and self.y == to.y
