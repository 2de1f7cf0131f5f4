"""Shared types, protocols, and errors for tick-terrain."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Hashable, Protocol, TypeVar

Coord = tuple[int, int]

N = TypeVar("N", bound=Hashable)


class TerrainKind(Enum):
    PLAIN = 0
    RIVER = 1
    MOUNTAIN = 2
    BLOCKER = 3
    # Output-only: marks a solved route when rendering.
    PATH = 4


class TerrainError(KeyError):
    """Raised when a terrain kind has no entry in a lookup table."""

    def __init__(self, kind: TerrainKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class UnknownSymbolError(ValueError):
    """Raised when a map symbol does not name an input terrain kind."""

    def __init__(self, symbol: str, message: str) -> None:
        self.symbol = symbol
        super().__init__(message)


class MapParseError(UnknownSymbolError):
    """Raised on an unrecognized symbol while parsing a text map."""

    def __init__(self, symbol: str, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(symbol, f"Unknown map symbol {symbol!r} at ({x}, {y})")


class NotAdjacentError(ValueError):
    """Raised when a move cost is requested between non-adjacent cells."""


class PathGraph(Protocol[N]):
    """Node capability consumed by pathfind().

    Nodes must hash and compare equal exactly when same_point() is true.
    """

    def neighbors(self, node: N) -> list[N]: ...
    def neighbor_cost(self, a: N, b: N) -> float: ...
    def estimated_cost(self, a: N, b: N) -> float: ...
    def same_point(self, a: N, b: N) -> bool: ...


@dataclass(frozen=True)
class PathResult(Generic[N]):
    """Outcome of a search.

    Attributes:
        path: Nodes from start to goal inclusive; empty when not found.
        cost: Sum of neighbor costs along the path; inf when not found.
        found: Whether a route exists. Check before trusting cost.
    """

    path: list[N] = field(default_factory=list)
    cost: float = float("inf")
    found: bool = False

    def __len__(self) -> int:
        return len(self.path)
