"""Grid movement configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass

DIAGONAL_PENALTY = 1.414


@dataclass(frozen=True)
class GridConfig:
    """Immutable movement rules for a GridWorld.

    Attributes:
        diagonal_penalty: Multiplier on a diagonal step's baseline cost.
            Approximates sqrt(2); must be finite and >= 1.0.
        allow_diagonal: Probe the four diagonal offsets when enumerating
            neighbors. With False, Manhattan estimates are admissible.
    """

    diagonal_penalty: float = DIAGONAL_PENALTY
    allow_diagonal: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.diagonal_penalty) or self.diagonal_penalty < 1.0:
            raise ValueError(
                f"diagonal_penalty must be finite and >= 1.0, got {self.diagonal_penalty}"
            )
