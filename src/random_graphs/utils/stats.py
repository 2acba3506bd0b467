import numpy as np

from random_graphs.distributions import GraphDistribution
from random_graphs.randomness import RandomSource


def edge_counts(distribution: GraphDistribution, rng: RandomSource, samples: int) -> np.ndarray:
    return np.fromiter(
        (g.edge_count() for g in distribution.sample_iter(rng, samples)),
        dtype=np.int64,
        count=samples,
    )


def mean_edge_count(distribution: GraphDistribution, rng: RandomSource, samples: int) -> float:
    if samples <= 0:
        raise ValueError("samples must be > 0")
    return float(edge_counts(distribution, rng, samples).mean())


def pair_inclusion_counts(
    distribution: GraphDistribution, rng: RandomSource, samples: int
) -> np.ndarray:
    """n x n counts of how often each pair (i < j) was an edge; lower triangle stays 0."""
    n = distribution.nodes
    counts = np.zeros((n, n), dtype=np.int64)
    for g in distribution.sample_iter(rng, samples):
        for e in g.edge_iter():
            i, j = sorted((e.source, e.target))
            counts[i, j] += 1
    return counts


def bucket_spread(counts: np.ndarray) -> float:
    """(max - min) / min over the candidate pairs of an inclusion-count matrix."""
    n = counts.shape[0]
    if n < 2:
        raise ValueError("need at least two nodes to have candidate pairs")
    buckets = counts[np.triu_indices(n, k=1)]
    lo = int(buckets.min())
    if lo == 0:
        return float("inf")
    return (int(buckets.max()) - lo) / lo
