"""Storage-agnostic graph contract and concrete storage strategies."""

from .base import Edge, GraphLike
from .errors import GraphError, InvalidEdge, MissingNode
from .adjacency import AdjacencySetGraph, EdgeListGraph
from .networkx_graph import NetworkXGraph

__all__ = [
    "Edge",
    "GraphLike",
    "GraphError",
    "InvalidEdge",
    "MissingNode",
    "AdjacencySetGraph",
    "EdgeListGraph",
    "NetworkXGraph",
]
