"""Random graph models sampled into storage-agnostic graphs."""

from .distributions import (
    BinomialGraphDistribution,
    DistributionError,
    GraphDistribution,
    InvalidProbability,
    TooManyEdges,
    UniformGraphDistribution,
    get_distribution,
)
from .graph import (
    AdjacencySetGraph,
    Edge,
    EdgeListGraph,
    GraphError,
    GraphLike,
    InvalidEdge,
    MissingNode,
    NetworkXGraph,
)
from .randomness import NumpyRandomSource, RandomSource, make_rng

__all__ = [
    "BinomialGraphDistribution",
    "DistributionError",
    "GraphDistribution",
    "InvalidProbability",
    "TooManyEdges",
    "UniformGraphDistribution",
    "get_distribution",
    "AdjacencySetGraph",
    "Edge",
    "EdgeListGraph",
    "GraphError",
    "GraphLike",
    "InvalidEdge",
    "MissingNode",
    "NetworkXGraph",
    "NumpyRandomSource",
    "RandomSource",
    "make_rng",
]
