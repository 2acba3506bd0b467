import logging
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator

from random_graphs.graph import AdjacencySetGraph, GraphLike
from random_graphs.randomness import RandomSource

logger = logging.getLogger(__name__)

GraphFactory = Callable[[], GraphLike[int]]


def max_simple_edges(nodes: int) -> int:
    """C(nodes, 2): number of candidate pairs in a simple undirected graph."""
    return nodes * (nodes - 1) // 2


def check_size(name: str, value) -> int:
    """Normalise a non-negative integer size, numpy integers included, to ``int``."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer; got bool")
    try:
        size = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer; got {type(value).__name__}") from None
    if size < 0:
        raise ValueError(f"{name} must be >= 0; got {size}")
    return size


class GraphDistribution(ABC):
    """A random graph model: validated once, sampled any number of times."""

    nodes: int

    @abstractmethod
    def _add_edges(self, graph: GraphLike[int], rng: RandomSource) -> None: ...

    def sample(
        self, rng: RandomSource, graph_factory: GraphFactory = AdjacencySetGraph
    ) -> GraphLike[int]:
        graph = self._empty_graph(graph_factory)
        self._add_edges(graph, rng)
        logger.debug("sampled %r from %r", graph, self)
        return graph

    def sample_iter(
        self,
        rng: RandomSource,
        count: int,
        graph_factory: GraphFactory = AdjacencySetGraph,
    ) -> Iterator[GraphLike[int]]:
        count = check_size("count", count)
        return self._samples(rng, count, graph_factory)

    def _samples(
        self, rng: RandomSource, count: int, graph_factory: GraphFactory
    ) -> Iterator[GraphLike[int]]:
        for _ in range(count):
            yield self.sample(rng, graph_factory)

    def _empty_graph(self, graph_factory: GraphFactory) -> GraphLike[int]:
        graph = graph_factory()
        if graph.is_directed():
            raise ValueError(f"{type(self).__name__} produces undirected graphs")
        if graph.node_count() != 0:
            raise ValueError("graph_factory must return an empty graph")
        graph.add_nodes_from(range(self.nodes))
        return graph
