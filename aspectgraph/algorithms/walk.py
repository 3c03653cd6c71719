"""Minimum-weight walks of an exact edge count.

A walk ``v0, v1, ..., vk`` follows graph edges and may revisit vertices. Its
weight is the sum of ``weight(v)`` over every visited vertex, endpoints
included, so a vertex visited twice counts twice.

Two strategies share one contract:

- ``dfs``: exhaustive depth-first enumeration with branch and bound, driven
  by an explicit stack so walk length is not capped by recursion. Neighbors
  are tried in ``ConnectionGraph.neighbors_ordered`` order and only a strictly
  lighter walk replaces the current best, so among equal-weight walks the
  first one enumerated wins.
- ``layered``: dynamic programming over ``(vertex, edges used)``. It returns
  the same minimum weight in polynomial time; among equal-weight walks it keeps
  the first predecessor reached, which may pick a different path than ``dfs``.

Notes:
    Pruning relies on weights being non-negative: a partial walk's weight
    never decreases as it is extended, so a branch whose weight already
    reaches the best complete walk cannot improve on it.
"""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterator, List, Optional, Tuple

from aspectgraph.graph.connection_graph import ConnectionGraph
from aspectgraph.types import NO_SOLUTION_WEIGHT, ResearchSolution, SearchStrategy

NodeID = Hashable
WeightFunc = Callable[[NodeID], float]


def min_weight_walk(
    graph: ConnectionGraph,
    start: NodeID,
    end: NodeID,
    distance: int,
    weight: WeightFunc,
    strategy: SearchStrategy = "dfs",
) -> ResearchSolution:
    """Find the lightest walk of exactly ``distance`` edges from start to end.

    Args:
        graph: Connection graph. ``start`` must be a node of it.
        start: First vertex of the walk.
        end: Last vertex of the walk.
        distance: Number of edges; 0 yields the single-vertex walk when
            ``start == end``.
        weight: Weight of a single vertex visit; must be non-negative.
        strategy: ``"dfs"`` or ``"layered"``.

    Returns:
        ResearchSolution with the walk (``distance + 1`` vertices) and its
        weight, or ``ResearchSolution.not_found()``.

    Raises:
        ValueError: If ``strategy`` is unknown or ``distance`` is negative.
    """
    if distance < 0:
        raise ValueError(f"Walk distance must be non-negative, got {distance}")
    if strategy == "dfs":
        return _dfs_walk(graph, start, end, distance, weight)
    if strategy == "layered":
        return _layered_walk(graph, start, end, distance, weight)
    raise ValueError(f"Unknown search strategy: {strategy!r}")


def _dfs_walk(
    graph: ConnectionGraph,
    start: NodeID,
    end: NodeID,
    distance: int,
    weight: WeightFunc,
) -> ResearchSolution:
    start_weight = weight(start)
    if distance == 0:
        if start == end:
            return ResearchSolution(path=(start,), weight=start_weight)
        return ResearchSolution.not_found()

    best_weight = NO_SOLUTION_WEIGHT
    best_path: Optional[tuple] = None

    # path[i] is the vertex after i edges; frames[i] resumes its neighbor scan
    path: List[NodeID] = [start]
    frames: List[Tuple[float, Iterator[NodeID]]] = [
        (start_weight, iter(graph.neighbors_ordered(start)))
    ]

    while frames:
        walk_weight, neighbors = frames[-1]
        for neighbor in neighbors:
            next_weight = walk_weight + weight(neighbor)
            if next_weight >= best_weight:
                continue
            if len(path) == distance:
                if neighbor == end:
                    best_weight = next_weight
                    best_path = (*path, neighbor)
                continue
            path.append(neighbor)
            frames.append((next_weight, iter(graph.neighbors_ordered(neighbor))))
            break
        else:
            frames.pop()
            path.pop()

    if best_path is None:
        return ResearchSolution.not_found()
    return ResearchSolution(path=best_path, weight=best_weight)


def _layered_walk(
    graph: ConnectionGraph,
    start: NodeID,
    end: NodeID,
    distance: int,
    weight: WeightFunc,
) -> ResearchSolution:
    # layers[k][v] = lightest weight of a k-edge walk from start ending at v
    layers: List[Dict[NodeID, float]] = [{start: weight(start)}]
    parents: List[Dict[NodeID, NodeID]] = [{}]

    for _ in range(distance):
        previous = layers[-1]
        current: Dict[NodeID, float] = {}
        current_parents: Dict[NodeID, NodeID] = {}
        for node, node_weight in previous.items():
            for neighbor in graph.neighbors_ordered(node):
                candidate = node_weight + weight(neighbor)
                if neighbor not in current or candidate < current[neighbor]:
                    current[neighbor] = candidate
                    current_parents[neighbor] = node
        if not current:
            return ResearchSolution.not_found()
        layers.append(current)
        parents.append(current_parents)

    if end not in layers[distance]:
        return ResearchSolution.not_found()

    path = [end]
    for step in range(distance, 0, -1):
        path.append(parents[step][path[-1]])
    path.reverse()
    return ResearchSolution(path=tuple(path), weight=layers[distance][end])
