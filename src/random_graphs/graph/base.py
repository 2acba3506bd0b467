from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

N = TypeVar("N", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[N]):
    source: N
    target: N
    key: int | None = None

    def reversed(self) -> "Edge[N]":
        return Edge(self.target, self.source, self.key)

    def is_self_loop(self) -> bool:
        return self.source == self.target


class GraphLike(ABC, Generic[N]):
    """
    Storage-agnostic graph contract.

    Random graph models only ever call ``add_node`` / ``add_edge`` on it, so
    any storage strategy implementing these methods can receive samples.
    """

    @abstractmethod
    def add_node(self, node: N) -> bool:
        """Add ``node``; return False if it was already present."""

    @abstractmethod
    def has_node(self, node: N) -> bool: ...

    @abstractmethod
    def add_edge(self, edge: Edge[N]) -> bool:
        """
        Add ``edge``; return False if it was already present.

        Raises ``InvalidEdge`` if either endpoint is not a node of the graph.
        """

    @abstractmethod
    def has_edge(self, edge: Edge[N]) -> bool: ...

    @abstractmethod
    def is_directed(self) -> bool: ...

    def is_undirected(self) -> bool:
        return not self.is_directed()

    @abstractmethod
    def node_iter(self) -> Iterator[N]: ...

    @abstractmethod
    def edge_iter(self) -> Iterator[Edge[N]]: ...

    def is_valid_edge(self, edge: Edge[N]) -> bool:
        return self.has_node(edge.source) and self.has_node(edge.target)

    def node_count(self) -> int:
        return sum(1 for _ in self.node_iter())

    def edge_count(self) -> int:
        return sum(1 for _ in self.edge_iter())

    def add_nodes_from(self, nodes: Iterable[N]) -> int:
        return sum(1 for node in nodes if self.add_node(node))

    def add_edges_from(self, edges: Iterable[Edge[N]]) -> int:
        return sum(1 for edge in edges if self.add_edge(edge))

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        kind = "directed" if self.is_directed() else "undirected"
        return (
            f"{type(self).__name__}({kind}, nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )
