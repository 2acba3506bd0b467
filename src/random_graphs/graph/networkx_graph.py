from collections.abc import Hashable, Iterator
from typing import TypeVar

import networkx as nx

from .base import Edge, GraphLike
from .errors import InvalidEdge

N = TypeVar("N", bound=Hashable)


class NetworkXGraph(GraphLike[N]):
    """``GraphLike`` view over a ``networkx.Graph`` or ``networkx.DiGraph``."""

    def __init__(self, directed: bool = False, graph: nx.Graph | None = None):
        if graph is None:
            graph = nx.DiGraph() if directed else nx.Graph()
        if graph.is_multigraph():
            raise ValueError("NetworkXGraph does not support multigraphs")
        self.graph = graph

    def add_node(self, node: N) -> bool:
        if node in self.graph:
            return False
        self.graph.add_node(node)
        return True

    def has_node(self, node: N) -> bool:
        return self.graph.has_node(node)

    def add_edge(self, edge: Edge[N]) -> bool:
        if not self.is_valid_edge(edge):
            raise InvalidEdge(edge)
        if self.graph.has_edge(edge.source, edge.target):
            return False
        self.graph.add_edge(edge.source, edge.target)
        return True

    def has_edge(self, edge: Edge[N]) -> bool:
        return self.graph.has_edge(edge.source, edge.target)

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def node_iter(self) -> Iterator[N]:
        return iter(list(self.graph.nodes))

    def edge_iter(self) -> Iterator[Edge[N]]:
        return iter([Edge(u, v) for u, v in self.graph.edges()])

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()
