from collections.abc import Hashable, Iterator
from typing import TypeVar

from .base import Edge, GraphLike
from .errors import InvalidEdge, MissingNode

N = TypeVar("N", bound=Hashable)


class AdjacencySetGraph(GraphLike[N]):
    """
    Simple graph stored as ``node -> neighbours``.

    Neighbour sets are insertion-ordered dicts so iteration is reproducible
    for a given sequence of insertions. Edge keys are ignored: two edges
    between the same endpoints are the same edge.
    """

    def __init__(self, directed: bool = False):
        self._directed = directed
        self._adj: dict[N, dict[N, None]] = {}
        self._edge_count = 0

    def add_node(self, node: N) -> bool:
        if node in self._adj:
            return False
        self._adj[node] = {}
        return True

    def has_node(self, node: N) -> bool:
        return node in self._adj

    def add_edge(self, edge: Edge[N]) -> bool:
        if not self.is_valid_edge(edge):
            raise InvalidEdge(edge)
        u, v = edge.source, edge.target
        if v in self._adj[u]:
            return False
        self._adj[u][v] = None
        if not self._directed:
            self._adj[v][u] = None
        self._edge_count += 1
        return True

    def has_edge(self, edge: Edge[N]) -> bool:
        return self.is_valid_edge(edge) and edge.target in self._adj[edge.source]

    def is_directed(self) -> bool:
        return self._directed

    def node_iter(self) -> Iterator[N]:
        return iter(list(self._adj))

    def edge_iter(self) -> Iterator[Edge[N]]:
        return self._edges()

    def _edges(self) -> Iterator[Edge[N]]:
        done: set[N] = set()
        for u, nbrs in list(self._adj.items()):
            for v in list(nbrs):
                # undirected edges are stored twice; emit from the first endpoint seen
                if self._directed or v not in done:
                    yield Edge(u, v)
            done.add(u)

    def neighbors(self, node: N) -> Iterator[N]:
        if node not in self._adj:
            raise MissingNode(node)
        return iter(list(self._adj[node]))

    def degree(self, node: N) -> int:
        if node not in self._adj:
            raise MissingNode(node)
        return len(self._adj[node])

    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return self._edge_count


class EdgeListGraph(GraphLike[N]):
    """
    Node set plus an ordered list of distinct edges.

    Edges are identified by ``(source, target, key)``, so keyed parallel edges
    are kept apart. Directed by default.
    """

    def __init__(self, directed: bool = True):
        self._directed = directed
        self._nodes: dict[N, None] = {}
        self._edges: dict[tuple, Edge[N]] = {}

    def _ident(self, edge: Edge[N]) -> tuple:
        if self._directed:
            return (edge.source, edge.target, edge.key)
        return (frozenset((edge.source, edge.target)), edge.key)

    def add_node(self, node: N) -> bool:
        if node in self._nodes:
            return False
        self._nodes[node] = None
        return True

    def has_node(self, node: N) -> bool:
        return node in self._nodes

    def add_edge(self, edge: Edge[N]) -> bool:
        if not self.is_valid_edge(edge):
            raise InvalidEdge(edge)
        ident = self._ident(edge)
        if ident in self._edges:
            return False
        self._edges[ident] = edge
        return True

    def has_edge(self, edge: Edge[N]) -> bool:
        return self.is_valid_edge(edge) and self._ident(edge) in self._edges

    def is_directed(self) -> bool:
        return self._directed

    def node_iter(self) -> Iterator[N]:
        return iter(list(self._nodes))

    def edge_iter(self) -> Iterator[Edge[N]]:
        return iter(list(self._edges.values()))

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)
