from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .base import GraphDistribution
from .binomial import BinomialGraphDistribution
from .uniform import UniformGraphDistribution


class BinomialGraphParams(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: int = Field(..., ge=0)
    # range is checked by the distribution so callers get InvalidProbability
    p: float
    seed: int | None = None


class UniformGraphParams(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: int = Field(..., ge=0)
    edges: int = Field(..., ge=0)
    seed: int | None = None


def _binomial(p: BinomialGraphParams) -> BinomialGraphDistribution:
    return BinomialGraphDistribution(p.nodes, p.p)


def _uniform(p: UniformGraphParams) -> UniformGraphDistribution:
    return UniformGraphDistribution(p.nodes, p.edges)


_REGISTRY = {
    "binomial": (_binomial, BinomialGraphParams),
    "uniform": (_uniform, UniformGraphParams),
}

_ALIASES = {
    "erdos_renyi": "binomial",
    "gnp": "binomial",
    "gnm": "uniform",
}


def available_models() -> list[str]:
    return list(_REGISTRY)


def get_params_model(name: str) -> type[BaseModel]:
    key = _ALIASES.get(name, name)
    if key not in _REGISTRY:
        raise ValueError(f"Unknown graph model '{name}'. Available: {list(_REGISTRY)}")
    return _REGISTRY[key][1]


def get_distribution(name: str, params: dict[str, Any]) -> tuple[GraphDistribution, BaseModel]:
    key = _ALIASES.get(name, name)
    if key not in _REGISTRY:
        raise ValueError(f"Unknown graph model '{name}'. Available: {list(_REGISTRY)}")
    build, Params = _REGISTRY[key]
    p = Params.model_validate(params)
    return build(p), p
