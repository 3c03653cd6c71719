"""Configuration classes for aspectgraph components."""

from dataclasses import dataclass
from typing import get_args

from aspectgraph.types import SearchStrategy


@dataclass
class SolverConfig:
    """Defaults shared by the solver, research-path planning and the CLI."""

    # Weight assigned to every primal aspect
    primal_weight: float = 1

    # Marker for an empty slot in a research path
    spacer: str = "hex"

    # Edge count between two real aspects with no spacers between them
    adjacent_distance: int = 2

    # "dfs" (branch and bound) or "layered" (dynamic programming)
    strategy: SearchStrategy = "dfs"

    def __post_init__(self) -> None:
        if self.strategy not in get_args(SearchStrategy):
            raise ValueError(f"Unknown search strategy: {self.strategy!r}")

    def distance_for_gap(self, spacers: int) -> int:
        """Return the walk length spanning ``spacers`` empty slots."""
        if spacers < 0:
            raise ValueError(f"Spacer count must be non-negative, got {spacers}")
        return self.adjacent_distance + spacers


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
