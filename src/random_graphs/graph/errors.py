from typing import Any


class GraphError(ValueError):
    """Structural misuse of a graph (unknown nodes, dangling edges)."""


class MissingNode(GraphError):
    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"node `{node!r}` was not found in graph")


class InvalidEdge(GraphError):
    def __init__(self, edge: Any):
        self.edge = edge
        super().__init__(f"edge `{edge!r}` is invalid")
