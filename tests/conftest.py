import pytest

from random_graphs.graph import AdjacencySetGraph, EdgeListGraph, NetworkXGraph
from random_graphs.randomness import make_rng


class NoDrawSource:
    """RandomSource that fails the test if anything is drawn from it."""

    def bernoulli(self, p):
        raise AssertionError("unexpected bernoulli draw")

    def sample_indices(self, population, k):
        raise AssertionError("unexpected selection")

    def choose_multiple(self, items, k):
        raise AssertionError("unexpected selection")


class ScriptedBernoulli:
    """Answers bernoulli trials from a fixed list and records the p values seen."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.seen = []

    def bernoulli(self, p):
        self.seen.append(p)
        return self.outcomes.pop(0)

    def sample_indices(self, population, k):
        raise AssertionError("unexpected selection")

    def choose_multiple(self, items, k):
        raise AssertionError("unexpected selection")


UNDIRECTED_FACTORIES = {
    "adjacency_set": AdjacencySetGraph,
    "edge_list": lambda: EdgeListGraph(directed=False),
    "networkx": NetworkXGraph,
}

ALL_FACTORIES = {
    **UNDIRECTED_FACTORIES,
    "adjacency_set_directed": lambda: AdjacencySetGraph(directed=True),
    "edge_list_directed": EdgeListGraph,
    "networkx_directed": lambda: NetworkXGraph(directed=True),
}


@pytest.fixture(params=list(ALL_FACTORIES), ids=list(ALL_FACTORIES))
def any_graph(request):
    return ALL_FACTORIES[request.param]()


@pytest.fixture(params=list(UNDIRECTED_FACTORIES), ids=list(UNDIRECTED_FACTORIES))
def undirected_factory(request):
    return UNDIRECTED_FACTORIES[request.param]


@pytest.fixture
def rng():
    return make_rng(12345)


@pytest.fixture
def no_draw():
    return NoDrawSource()


@pytest.fixture
def scripted():
    return ScriptedBernoulli
