import math

import numpy as np
import pytest

from random_graphs.distributions import BinomialGraphDistribution, InvalidProbability
from random_graphs.graph import AdjacencySetGraph, Edge, NetworkXGraph
from random_graphs.randomness import make_rng
from random_graphs.utils.stats import mean_edge_count


def test_invalid_p_causes_error():
    with pytest.raises(InvalidProbability) as excinfo:
        BinomialGraphDistribution(4, -0.05)
    assert excinfo.value == InvalidProbability(-0.05)
    assert excinfo.value.p == -0.05

    for acceptable_p in (0.0, 0.05, 0.25, 0.4, 0.77, 0.33, 0.999, 1.0):
        BinomialGraphDistribution(4, acceptable_p)

    with pytest.raises(InvalidProbability) as excinfo:
        BinomialGraphDistribution(4, 1.01)
    assert excinfo.value.p == 1.01


def test_nan_probability_is_invalid():
    with pytest.raises(InvalidProbability):
        BinomialGraphDistribution(4, math.nan)


def test_error_message_names_the_probability():
    with pytest.raises(ValueError, match="invalid parameter `p` = 1.5"):
        BinomialGraphDistribution(3, 1.5)


@pytest.mark.parametrize("nodes", [-1, -10])
def test_negative_node_count_is_rejected(nodes):
    with pytest.raises(ValueError):
        BinomialGraphDistribution(nodes, 0.5)


def test_distribution_is_immutable():
    d = BinomialGraphDistribution(4, 0.5)
    with pytest.raises(AttributeError):
        d.p = 0.9


def test_one_trial_per_pair_in_lexicographic_order(scripted):
    # 4 nodes -> pairs (0,1) (0,2) (0,3) (1,2) (1,3) (2,3)
    source = scripted([True, False, False, False, True, True])
    g = BinomialGraphDistribution(4, 0.3).sample(source)
    assert source.seen == [0.3] * 6
    assert source.outcomes == []
    assert g.node_count() == 4
    assert g.edge_count() == 3
    for edge in (Edge(0, 1), Edge(1, 3), Edge(2, 3)):
        assert g.has_edge(edge)
    assert not g.has_edge(Edge(0, 2))


def test_p_zero_gives_empty_graph(rng):
    for g in BinomialGraphDistribution(10, 0.0).sample_iter(rng, 20):
        assert g.node_count() == 10
        assert g.edge_count() == 0


def test_p_one_gives_complete_graph(rng):
    for g in BinomialGraphDistribution(10, 1.0).sample_iter(rng, 20):
        assert g.node_count() == 10
        assert g.edge_count() == 45


@pytest.mark.parametrize("nodes", [0, 1])
def test_fewer_than_two_nodes_have_no_pairs(nodes, no_draw):
    g = BinomialGraphDistribution(nodes, 1.0).sample(no_draw)
    assert g.node_count() == nodes
    assert g.edge_count() == 0


def test_samples_are_simple_and_undirected(rng, undirected_factory):
    d = BinomialGraphDistribution(12, 0.4)
    for g in d.sample_iter(rng, 10, graph_factory=undirected_factory):
        assert g.is_undirected()
        assert sorted(g.node_iter()) == list(range(12))
        pairs = [frozenset((e.source, e.target)) for e in g.edge_iter()]
        assert all(len(p) == 2 for p in pairs)
        assert len(pairs) == len(set(pairs))


def test_same_seed_same_graph():
    d = BinomialGraphDistribution(15, 0.3)
    a = d.sample(make_rng(7))
    b = d.sample(make_rng(7))
    assert sorted((e.source, e.target) for e in a.edge_iter()) == sorted(
        (e.source, e.target) for e in b.edge_iter()
    )


def test_directed_graph_factory_is_rejected(rng):
    with pytest.raises(ValueError, match="undirected"):
        BinomialGraphDistribution(3, 0.5).sample(rng, lambda: AdjacencySetGraph(directed=True))


def test_non_empty_graph_factory_is_rejected(rng):
    def prefilled():
        g = NetworkXGraph()
        g.add_node("x")
        return g

    with pytest.raises(ValueError, match="empty"):
        BinomialGraphDistribution(3, 0.5).sample(rng, prefilled)


def test_expected_edges():
    assert BinomialGraphDistribution(9, 1 / 6).expected_edges == pytest.approx(6.0)
    assert BinomialGraphDistribution(0, 0.5).expected_edges == 0.0


def test_binomial_graph_distribution():
    """
    9 nodes give 36 candidate pairs; with p = 1/6 the mean edge count over
    10,000 samples should sit within 1% of 6.
    """
    d = BinomialGraphDistribution(9, 1.0 / 6.0)
    mean = mean_edge_count(d, make_rng(2024), 10_000)
    assert abs(mean - 6.0) / 6.0 < 0.01


def test_numpy_integer_node_count_is_accepted(rng):
    d = BinomialGraphDistribution(np.int64(2), 0.5)
    assert type(d.nodes) is int
    assert d == BinomialGraphDistribution(2, 0.5)
    assert d.sample(rng).node_count() == 2
    assert BinomialGraphDistribution(np.arange(10)[9], np.float64(1.0)).sample(rng).edge_count() == 36


def test_negative_sample_count_fails_immediately(rng):
    d = BinomialGraphDistribution(3, 0.5)
    with pytest.raises(ValueError, match="count must be >= 0"):
        d.sample_iter(rng, -1)
    assert list(d.sample_iter(rng, 0)) == []
