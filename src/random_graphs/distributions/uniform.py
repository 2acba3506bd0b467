import math
from dataclasses import dataclass
from itertools import combinations

from random_graphs.graph import Edge, GraphLike
from random_graphs.randomness import RandomSource

from .base import GraphDistribution, check_size, max_simple_edges
from .errors import TooManyEdges


def pair_from_rank(rank: int) -> tuple[int, int]:
    """
    Inverse of ``rank = j * (j - 1) // 2 + i`` for ``0 <= i < j``.

    Enumerates the unordered pairs of ``0..n-1`` as (0, 1), (0, 2), (1, 2),
    (0, 3), ... so the first C(n, 2) ranks are exactly the pairs of n nodes.
    """
    j = (1 + math.isqrt(1 + 8 * rank)) // 2
    i = rank - j * (j - 1) // 2
    return i, j


@dataclass(frozen=True)
class UniformGraphDistribution(GraphDistribution):
    """
    G(n, M): exactly ``edges`` edges chosen uniformly without replacement
    among the C(n, 2) unordered node pairs.

    Every M-subset of pairs is equally likely. Pairs are addressed by rank, so
    only the chosen ranks are drawn and the candidate list is never built.

    Raises ``TooManyEdges`` if ``edges > C(nodes, 2)``.
    """

    nodes: int
    edges: int

    def __post_init__(self):
        object.__setattr__(self, "nodes", check_size("nodes", self.nodes))
        object.__setattr__(self, "edges", check_size("edges", self.edges))
        if self.edges > max_simple_edges(self.nodes):
            raise TooManyEdges(self.nodes, self.edges)

    @property
    def max_edges(self) -> int:
        return max_simple_edges(self.nodes)

    def _add_edges(self, graph: GraphLike[int], rng: RandomSource) -> None:
        if self.edges == 0:
            return
        if self.edges == self.max_edges:
            # the only subset of full size
            for i, j in combinations(range(self.nodes), 2):
                graph.add_edge(Edge(i, j))
            return
        for rank in rng.sample_indices(self.max_edges, self.edges):
            i, j = pair_from_rank(int(rank))
            graph.add_edge(Edge(i, j))
