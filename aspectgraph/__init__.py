"""aspectgraph: lightest aspect combination paths.

aspectgraph builds an undirected connection graph from a recipe table of
primal and compound aspects, weighs every aspect by the primal aspects it is
made of, and searches for the lightest walk of an exact number of steps
between two aspects.

Primary API:
    ResearchSolver - Built once from a RecipeBook; answers ResearchProblem requests
    ResearchProblem, ResearchSolution - Request/result pair for a single search
    PreferredAspects - Mutable set of aspects treated as free during searches
    decompose_research_path() - Turn a slot sequence into ResearchProblems
    solve_research_path() - Decompose and solve a slot sequence

Example:
    from aspectgraph import ResearchProblem, ResearchSolver

    solver = ResearchSolver.default()
    solution = solver.find_solution(ResearchProblem("ignis", "aer", 2))
    print(solution.path, solution.weight)
"""

from __future__ import annotations

from aspectgraph import cli, logging
from aspectgraph._version import __version__
from aspectgraph.config import SOLVER_CONFIG, SolverConfig
from aspectgraph.errors import InvalidAspectError, InvalidProblemError
from aspectgraph.graph import ConnectionGraph
from aspectgraph.model import RecipeBook, load_recipe_book, load_recipe_yaml
from aspectgraph.planning import (
    PlannedSolution,
    decompose_research_path,
    solve_research_path,
)
from aspectgraph.solver import PreferredAspects, ResearchSolver
from aspectgraph.types import ResearchProblem, ResearchSolution

__all__ = [
    # Version
    "__version__",
    # Model
    "RecipeBook",
    "load_recipe_book",
    "load_recipe_yaml",
    "ConnectionGraph",
    # Solver
    "ResearchSolver",
    "PreferredAspects",
    "ResearchProblem",
    "ResearchSolution",
    # Planning
    "PlannedSolution",
    "decompose_research_path",
    "solve_research_path",
    # Configuration and errors
    "SolverConfig",
    "SOLVER_CONFIG",
    "InvalidProblemError",
    "InvalidAspectError",
    # Utilities
    "cli",
    "logging",
]
