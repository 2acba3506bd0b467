import networkx as nx
import numpy as np
from scipy import sparse

from random_graphs.graph import GraphLike, NetworkXGraph


def to_networkx(graph: GraphLike) -> nx.Graph:
    if isinstance(graph, NetworkXGraph):
        return graph.graph.copy()
    G = nx.DiGraph() if graph.is_directed() else nx.Graph()
    G.add_nodes_from(graph.node_iter())
    G.add_edges_from((e.source, e.target) for e in graph.edge_iter())
    return G


def to_scipy_sparse(graph: GraphLike) -> sparse.csr_matrix:
    """CSR adjacency in node iteration order; symmetric for undirected graphs."""
    index = {node: i for i, node in enumerate(graph.node_iter())}
    n = len(index)
    rows: list[int] = []
    cols: list[int] = []
    for e in graph.edge_iter():
        i, j = index[e.source], index[e.target]
        rows.append(i)
        cols.append(j)
        if graph.is_undirected() and not e.is_self_loop():
            rows.append(j)
            cols.append(i)
    data = np.ones(len(rows), dtype=np.int8)
    return sparse.csr_matrix((data, (rows, cols)), shape=(n, n))
