"""Injected randomness for the graph models.

Models never touch global random state; they draw everything from a
``RandomSource`` passed in by the caller, so a fixed seed reproduces a graph
exactly and independent sources can be used from parallel workers.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def bernoulli(self, p: float) -> bool: ...

    def sample_indices(self, population: int, k: int) -> Sequence[int]: ...

    def choose_multiple(self, items: Iterable[Any], k: int) -> list[Any]: ...


class NumpyRandomSource:
    """``RandomSource`` backed by a ``numpy.random.Generator``."""

    def __init__(self, generator: np.random.Generator | None = None):
        self.generator = generator if generator is not None else np.random.default_rng()

    def bernoulli(self, p: float) -> bool:
        # random() is in [0, 1): p=0 never succeeds, p=1 always does
        return bool(self.generator.random() < p)

    def sample_indices(self, population: int, k: int) -> np.ndarray:
        """k distinct indices from ``range(population)``; every k-subset equally likely."""
        if population < 0:
            raise ValueError("population must be >= 0")
        if not 0 <= k <= population:
            raise ValueError(f"cannot choose {k} distinct items from {population}")
        if k == 0:
            return np.empty(0, dtype=np.int64)
        return self.generator.choice(population, size=k, replace=False)

    def choose_multiple(self, items: Iterable[Any], k: int) -> list[Any]:
        pool = list(items)
        return [pool[int(i)] for i in self.sample_indices(len(pool), k)]

    def spawn(self, n: int) -> list["NumpyRandomSource"]:
        return [NumpyRandomSource(g) for g in self.generator.spawn(n)]


def make_rng(seed: int | np.random.Generator | NumpyRandomSource | None = None) -> NumpyRandomSource:
    if isinstance(seed, NumpyRandomSource):
        return seed
    return NumpyRandomSource(np.random.default_rng(seed))
