"""Research path planning.

A research path is the user's linear sequence of slots: real aspects
interleaved with spacer markers for empty slots. Each pair of consecutive real
aspects becomes one `ResearchProblem` whose distance grows by one edge per
spacer between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, List, Optional, Sequence

from aspectgraph.config import SOLVER_CONFIG, SolverConfig
from aspectgraph.logging import get_logger
from aspectgraph.solver import ResearchSolver
from aspectgraph.types import Aspect, ResearchProblem, ResearchSolution, SearchStrategy

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlannedSolution:
    """A decomposed problem paired with its solution."""

    problem: ResearchProblem
    solution: ResearchSolution

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.problem.start,
            "end": self.problem.end,
            "distance": self.problem.distance,
            **self.solution.to_dict(),
        }


def decompose_research_path(
    sequence: Sequence[str],
    spacer: Optional[str] = None,
    config: Optional[SolverConfig] = None,
) -> List[ResearchProblem]:
    """Split a research path into problems between consecutive real aspects.

    Args:
        sequence: Slots in order; entries equal to ``spacer`` are empty slots.
        spacer: Empty-slot marker; defaults to ``config.spacer``.
        config: Supplies the spacer and the distance between adjacent aspects.

    Returns:
        One problem per pair of consecutive real aspects. Leading spacers are
        skipped and trailing spacers produce nothing.

    Examples:
        >>> decompose_research_path(["ignis", "hex", "aer"])
        [ResearchProblem(start='ignis', end='aer', distance=3)]
    """
    config = config or SOLVER_CONFIG
    spacer = config.spacer if spacer is None else spacer

    problems: List[ResearchProblem] = []
    previous: Optional[Aspect] = None
    gap = 0
    for slot in sequence:
        if slot == spacer:
            gap += 1
            continue
        if previous is not None:
            problems.append(
                ResearchProblem(previous, slot, config.distance_for_gap(gap))
            )
        previous = slot
        gap = 0
    return problems


def solve_research_path(
    solver: ResearchSolver,
    sequence: Sequence[str],
    preferred: AbstractSet[Aspect] = frozenset(),
    spacer: Optional[str] = None,
    strategy: Optional[SearchStrategy] = None,
) -> List[PlannedSolution]:
    """Decompose ``sequence`` and solve every problem in order.

    Raises:
        InvalidAspectError: If a real slot is not a declared aspect.
    """
    preferred = frozenset(preferred)
    problems = decompose_research_path(sequence, spacer=spacer, config=solver.config)
    logger.debug("Research path decomposed into %d problem(s)", len(problems))
    return [
        PlannedSolution(problem, solver.find_solution(problem, preferred, strategy))
        for problem in problems
    ]
