"""Research path solver.

`ResearchSolver` owns the read-only state derived from a recipe table: the
connection graph, per-aspect weights and the set of declared aspects. It is
built once and answers any number of `ResearchProblem` requests. The caller's
preferred aspects are passed to every search explicitly; `PreferredAspects`
is a small mutable holder for callers that toggle them interactively.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from types import MappingProxyType
from typing import (
    AbstractSet,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Union,
)

from aspectgraph.algorithms.walk import WeightFunc, min_weight_walk
from aspectgraph.algorithms.weights import compute_aspect_weights
from aspectgraph.config import SOLVER_CONFIG, SolverConfig
from aspectgraph.errors import InvalidAspectError, InvalidProblemError
from aspectgraph.graph.connection_graph import ConnectionGraph
from aspectgraph.logging import get_logger
from aspectgraph.model.loader import load_default_recipe_book, load_recipe_book
from aspectgraph.model.recipes import RecipeBook
from aspectgraph.types import (
    Aspect,
    ResearchProblem,
    ResearchSolution,
    SearchStrategy,
)

logger = get_logger(__name__)


class PreferredAspects:
    """Mutable set of aspects whose weight is ignored during searches.

    Searches never read this object directly; pass ``snapshot()`` to
    ``ResearchSolver.find_solution`` so a toggle cannot affect a search that
    is already running.
    """

    def __init__(self, aspects: Iterable[Aspect] = ()) -> None:
        self._aspects = set(aspects)

    def add(self, aspect: Aspect) -> None:
        self._aspects.add(aspect)

    def remove(self, aspect: Aspect) -> None:
        """Unmark ``aspect``; unmarked aspects are ignored."""
        self._aspects.discard(aspect)

    def toggle(self, aspect: Aspect) -> bool:
        """Flip membership of ``aspect`` and return whether it is now preferred."""
        if aspect in self._aspects:
            self._aspects.remove(aspect)
            return False
        self._aspects.add(aspect)
        return True

    def clear(self) -> None:
        self._aspects.clear()

    def snapshot(self) -> FrozenSet[Aspect]:
        return frozenset(self._aspects)

    def __contains__(self, aspect: object) -> bool:
        return aspect in self._aspects

    def __iter__(self) -> Iterator[Aspect]:
        return iter(sorted(self._aspects))

    def __len__(self) -> int:
        return len(self._aspects)

    def __repr__(self) -> str:
        return f"PreferredAspects({sorted(self._aspects)!r})"


class ResearchSolver:
    """Find the lightest aspect walks of an exact length.

    Attributes:
        recipes: Recipe table the solver was built from.
        graph: Undirected connection multigraph over every referenced aspect.
        weights: Read-only mapping of aspect to precomputed weight.
        config: Configuration supplying the default search strategy.
    """

    def __init__(
        self,
        recipes: RecipeBook,
        graph: ConnectionGraph,
        weights: Mapping[Aspect, float],
        config: Optional[SolverConfig] = None,
    ) -> None:
        self.recipes = recipes
        self.graph = graph
        self.weights: Mapping[Aspect, float] = MappingProxyType(dict(weights))
        self.config = config or SOLVER_CONFIG
        self._valid: FrozenSet[Aspect] = recipes.declared

    @classmethod
    def build(
        cls, recipes: RecipeBook, config: Optional[SolverConfig] = None
    ) -> ResearchSolver:
        """Derive the connection graph and weights from a recipe table.

        Every declared aspect gets a node, even without edges. Identifiers that
        only appear inside recipes become nodes with weights too, but remain
        invalid as search endpoints. This never raises.
        """
        config = config or SOLVER_CONFIG
        graph = ConnectionGraph.from_recipes(
            recipes.combinations, nodes=[*recipes.primal, *recipes.compound]
        )
        weights = compute_aspect_weights(
            recipes.combinations,
            primal=recipes.primal,
            order=[*recipes.compound, *recipes.referenced()],
            primal_weight=config.primal_weight,
        )
        for aspect, aspect_weight in weights.items():
            graph.nodes[aspect]["weight"] = aspect_weight

        undeclared = recipes.undeclared()
        if undeclared:
            logger.warning(
                "Recipes reference %d undeclared aspect(s): %s",
                len(undeclared),
                ", ".join(undeclared),
            )
        logger.debug(
            "Built connection graph: %d nodes, %d edges",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return cls(recipes, graph, weights, config)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], config: Optional[SolverConfig] = None
    ) -> ResearchSolver:
        """Load a recipe file and build a solver from it."""
        return cls.build(load_recipe_book(path), config)

    @classmethod
    def default(cls, config: Optional[SolverConfig] = None) -> ResearchSolver:
        """Build a solver from the packaged aspect table."""
        return cls.build(load_default_recipe_book(), config)

    @property
    def aspects(self) -> List[Aspect]:
        """Declared aspects: primal first, then compound, in declaration order."""
        return [*self.recipes.primal, *self.recipes.compound]

    def is_valid_aspect(self, aspect: Aspect) -> bool:
        """Return True if ``aspect`` is declared primal or compound."""
        return aspect in self._valid

    def connections(self, aspect: Aspect) -> List[Aspect]:
        """Neighbors of ``aspect`` in search order, duplicates included."""
        return list(self.graph.neighbors_ordered(aspect))

    def effective_weight(
        self, aspect: Aspect, preferred: AbstractSet[Aspect] = frozenset()
    ) -> float:
        """Weight of visiting ``aspect``: 0 if preferred or unknown."""
        if aspect in preferred:
            return 0
        return self.weights.get(aspect, 0)

    def weight_function(self, preferred: AbstractSet[Aspect] = frozenset()) -> WeightFunc:
        """Return a vertex weight function bound to a preferred-set snapshot."""
        return partial(self.effective_weight, preferred=frozenset(preferred))

    def path_weight(
        self, path: Iterable[Aspect], preferred: AbstractSet[Aspect] = frozenset()
    ) -> float:
        """Sum of effective weights along ``path``."""
        return sum(self.effective_weight(aspect, preferred) for aspect in path)

    def find_solution(
        self,
        problem: ResearchProblem,
        preferred: AbstractSet[Aspect] = frozenset(),
        strategy: Optional[SearchStrategy] = None,
    ) -> ResearchSolution:
        """Find the lightest walk of exactly ``problem.distance`` edges.

        Args:
            problem: Endpoints and edge count.
            preferred: Aspects that weigh 0 for this search.
            strategy: ``"dfs"`` or ``"layered"``; defaults to ``config.strategy``.

        Returns:
            The lightest walk and its weight, or a solution with ``path=None``
            and infinite weight when no walk of that length exists.

        Raises:
            InvalidAspectError: If start or end is not a declared aspect.
            InvalidProblemError: If distance is not a positive integer.
        """
        for aspect in (problem.start, problem.end):
            if not self.is_valid_aspect(aspect):
                raise InvalidAspectError(aspect)
        distance = problem.distance
        if isinstance(distance, bool) or not isinstance(distance, int) or distance < 1:
            raise InvalidProblemError(
                f"Distance must be a positive integer, got {distance!r}"
            )

        solution = min_weight_walk(
            self.graph,
            problem.start,
            problem.end,
            distance,
            self.weight_function(preferred),
            strategy=strategy or self.config.strategy,
        )
        if solution.found:
            logger.debug(
                "Solved %s -> %s in %d steps: weight %s",
                problem.start,
                problem.end,
                distance,
                solution.weight,
            )
        else:
            logger.debug(
                "No %d-step walk from %s to %s", distance, problem.start, problem.end
            )
        return solution

    def solve(
        self,
        start: Aspect,
        end: Aspect,
        distance: int,
        preferred: AbstractSet[Aspect] = frozenset(),
        strategy: Optional[SearchStrategy] = None,
    ) -> ResearchSolution:
        """Shorthand for ``find_solution(ResearchProblem(start, end, distance))``."""
        return self.find_solution(
            ResearchProblem(start, end, distance), preferred, strategy
        )

    def describe(self) -> Dict[str, int]:
        """Counts of declared aspects, graph nodes and edges."""
        return {
            "primal": len(self.recipes.primal),
            "compound": len(self.recipes.compound),
            "nodes": self.graph.number_of_nodes(),
            "edges": self.graph.number_of_edges(),
        }
