"""Graph primitives.

This package provides the undirected aspect multigraph `ConnectionGraph`.
"""

from aspectgraph.graph.connection_graph import ConnectionGraph, EdgeID, NodeID

__all__ = ["ConnectionGraph", "EdgeID", "NodeID"]
