from .base import GraphDistribution, max_simple_edges
from .binomial import BinomialGraphDistribution
from .errors import DistributionError, InvalidProbability, TooManyEdges
from .registry import (
    BinomialGraphParams,
    UniformGraphParams,
    available_models,
    get_distribution,
)
from .uniform import UniformGraphDistribution

__all__ = [
    "GraphDistribution",
    "max_simple_edges",
    "BinomialGraphDistribution",
    "UniformGraphDistribution",
    "DistributionError",
    "InvalidProbability",
    "TooManyEdges",
    "BinomialGraphParams",
    "UniformGraphParams",
    "available_models",
    "get_distribution",
]
