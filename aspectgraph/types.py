"""Request and result containers for research path searches.

Defines the aspect identifier alias and the immutable problem/solution pair
exchanged between callers and ``ResearchSolver``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple

# Aspect identifier as it appears in recipe tables (e.g. "ignis")
Aspect = str

# Walk search strategy: depth-first branch and bound, or layered dynamic programming
SearchStrategy = Literal["dfs", "layered"]

# Weight reported when no walk of the requested length exists
NO_SOLUTION_WEIGHT = math.inf


@dataclass(frozen=True)
class ResearchProblem:
    """Request for a walk of exactly ``distance`` edges from ``start`` to ``end``.

    Attributes:
        start: Aspect the walk begins at.
        end: Aspect the walk must finish at.
        distance: Number of edges in the walk (vertices = distance + 1).
    """

    start: Aspect
    end: Aspect
    distance: int


@dataclass(frozen=True)
class ResearchSolution:
    """Outcome of a single research problem.

    Attributes:
        path: Visited aspects from start to end inclusive, or None when no walk
            of the requested length exists.
        weight: Total effective weight of ``path``; ``math.inf`` when no walk
            was found.
    """

    path: Optional[Tuple[Aspect, ...]]
    weight: float

    @classmethod
    def not_found(cls) -> ResearchSolution:
        """Return the result signalling that no walk exists."""
        return cls(path=None, weight=NO_SOLUTION_WEIGHT)

    @property
    def found(self) -> bool:
        return self.path is not None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation.

        Infinite weight is emitted as ``None`` since JSON has no infinity.
        """
        return {
            "path": list(self.path) if self.path is not None else None,
            "weight": self.weight if math.isfinite(self.weight) else None,
        }
