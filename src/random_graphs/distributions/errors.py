class DistributionError(ValueError):
    """Invalid parameters for a random graph model."""


class InvalidProbability(DistributionError):
    def __init__(self, p: float):
        self.p = p
        super().__init__(f"invalid parameter `p` = {p}, should be 0 <= `p` <= 1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidProbability):
            return NotImplemented
        return self.p == other.p

    __hash__ = DistributionError.__hash__


class TooManyEdges(DistributionError):
    def __init__(self, nodes: int, edges: int):
        self.nodes = nodes
        self.edges = edges
        super().__init__(
            f"too many edges: {edges} requested, a simple graph on {nodes} nodes "
            f"has at most {nodes * (nodes - 1) // 2}"
        )
