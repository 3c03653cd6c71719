"""Graph algorithms: aspect weights and exact-length walk search."""

from aspectgraph.algorithms.walk import WeightFunc, min_weight_walk
from aspectgraph.algorithms.weights import compute_aspect_weights

__all__ = ["WeightFunc", "compute_aspect_weights", "min_weight_walk"]
