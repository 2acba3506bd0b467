import math
from dataclasses import dataclass

from random_graphs.graph import Edge, GraphLike
from random_graphs.randomness import RandomSource

from .base import GraphDistribution, check_size, max_simple_edges
from .errors import InvalidProbability


@dataclass(frozen=True)
class BinomialGraphDistribution(GraphDistribution):
    """
    Erdős–Rényi G(n, p): each of the C(n, 2) node pairs becomes an edge
    independently with probability ``p``.

    The expected number of edges is ``C(n, 2) * p``. Sampling costs one
    Bernoulli trial per pair whatever ``p`` is.

    Raises ``InvalidProbability`` if ``p`` is outside ``[0, 1]``.

    Example
    -------
    >>> from random_graphs.randomness import make_rng
    >>> distribution = BinomialGraphDistribution(4, 0.25)
    >>> distribution.sample(make_rng(0)).node_count()
    4
    """

    nodes: int
    p: float

    def __post_init__(self):
        object.__setattr__(self, "nodes", check_size("nodes", self.nodes))
        if math.isnan(self.p) or self.p < 0.0 or self.p > 1.0:
            raise InvalidProbability(self.p)

    @property
    def expected_edges(self) -> float:
        return max_simple_edges(self.nodes) * self.p

    def _add_edges(self, graph: GraphLike[int], rng: RandomSource) -> None:
        for i in range(self.nodes):
            for j in range(i + 1, self.nodes):
                if rng.bernoulli(self.p):
                    graph.add_edge(Edge(i, j))
