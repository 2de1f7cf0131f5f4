"""Terrain cost and symbol tables."""
from __future__ import annotations

from types import MappingProxyType

from tick_terrain.types import TerrainError, TerrainKind, UnknownSymbolError

KIND_COSTS = MappingProxyType({
    TerrainKind.PLAIN: 1.0,
    TerrainKind.RIVER: 2.0,
    TerrainKind.MOUNTAIN: 3.0,
})

KIND_SYMBOLS = MappingProxyType({
    TerrainKind.PLAIN: ".",
    TerrainKind.RIVER: "~",
    TerrainKind.MOUNTAIN: "M",
    TerrainKind.BLOCKER: "X",
    TerrainKind.PATH: "●",
})

SYMBOL_KINDS = MappingProxyType({
    symbol: kind
    for kind, symbol in KIND_SYMBOLS.items()
    if kind is not TerrainKind.PATH
})


def cost_of(kind: TerrainKind) -> float:
    """Baseline cost of entering a cell of this kind orthogonally.

    Raises TerrainError for kinds that cannot be entered (BLOCKER, PATH).
    """
    try:
        return KIND_COSTS[kind]
    except KeyError:
        raise TerrainError(kind, f"{kind.name} has no movement cost") from None


def symbol_of(kind: TerrainKind) -> str:
    return KIND_SYMBOLS[kind]


def kind_of_symbol(symbol: str) -> TerrainKind:
    """Parse an input symbol. Raises UnknownSymbolError if unrecognized."""
    kind = SYMBOL_KINDS.get(symbol)
    if kind is None:
        raise UnknownSymbolError(symbol, f"Unknown terrain symbol {symbol!r}")
    return kind


def is_input_kind(kind: TerrainKind) -> bool:
    return kind is not TerrainKind.PATH
