"""Undirected aspect connection multigraph with ordered adjacency.

`ConnectionGraph` extends `networkx.MultiGraph` with monotonically increasing
integer edge keys. ``neighbors_ordered`` reads networkx's own adjacency and
orders every edge endpoint by key, duplicates included, so the listing
follows edge insertion and stays consistent with any networkx mutator. It is
the branching order used by the walk search.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

import networkx as nx

NodeID = Hashable
EdgeID = int


class ConnectionGraph(nx.MultiGraph):
    """Undirected multigraph connecting each compound aspect to its components.

    This class enforces:
      - Parallel edges are kept; each recipe occurrence adds its own edge.
      - Edge keys are integers assigned in insertion order.
      - ``neighbors_ordered(n)`` lists neighbors in edge-key order,
        repeating a neighbor once per parallel edge (twice for a self-loop).

    Inherits from:
        networkx.MultiGraph
    """

    def __init__(self, **attr: Any) -> None:
        self._next_edge_id: int = 0
        super().__init__(**attr)

    @classmethod
    def from_recipes(
        cls,
        combinations: Mapping[NodeID, Sequence[NodeID]],
        nodes: Iterable[NodeID] = (),
    ) -> ConnectionGraph:
        """Build a graph from a recipe table.

        Args:
            combinations: Mapping of compound aspect to its ordered components.
            nodes: Nodes to create up front, in order, even if no recipe
                mentions them.

        Returns:
            ConnectionGraph with one edge per (compound, component) pair.
        """
        graph = cls()
        graph.add_nodes_from(nodes)
        for compound, components in combinations.items():
            for component in components:
                graph.add_edge(compound, component)
        return graph

    def new_edge_key(self, u: NodeID, v: NodeID) -> EdgeID:  # type: ignore[override]
        """Return the next unused integer edge key."""
        key = self._next_edge_id
        self._next_edge_id += 1
        return key

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an undirected edge, creating missing endpoints on demand.

        An explicit integer ``key`` (as passed by ``copy``) moves the key
        counter past it so later edges still sort after it.

        Returns:
            EdgeID: The key of the edge.
        """
        if isinstance(key, int) and key >= self._next_edge_id:
            self._next_edge_id = key + 1
        return super().add_edge(u_for_edge, v_for_edge, key=key, **attr)

    def neighbors_ordered(self, n: NodeID) -> List[NodeID]:
        """Return neighbors of ``n`` in edge-key order, duplicates included.

        Raises:
            KeyError: If ``n`` is not in the graph.
        """
        try:
            incident = self._adj[n]
        except KeyError:
            raise KeyError(n) from None

        endpoints: List[Tuple[EdgeID, NodeID]] = []
        for neighbor, keys in incident.items():
            for key in keys:
                endpoints.append((key, neighbor))
                if neighbor == n:
                    # A self-loop is stored once but has two endpoints at n
                    endpoints.append((key, neighbor))
        endpoints.sort(key=lambda endpoint: endpoint[0])
        return [neighbor for _, neighbor in endpoints]
