import secrets

from random_graphs.distributions import GraphDistribution, get_distribution
from random_graphs.randomness import NumpyRandomSource, make_rng
from random_graphs.utils.validation import SamplingParams, sampling_section, validate_config


def prepare_distribution(config: dict) -> GraphDistribution:
    validate_config(config)
    model_cfg = config["model"]
    distribution, _ = get_distribution(model_cfg["name"], model_cfg.get("params") or {})
    return distribution


def prepare_sampling(config: dict) -> SamplingParams:
    return SamplingParams.model_validate(sampling_section(config))


def _model_seed(config: dict) -> int | None:
    return ((config.get("model") or {}).get("params") or {}).get("seed")


def ensure_seed(config: dict) -> int:
    """Record a seed in the config, drawing one from OS entropy if missing."""
    sampling_cfg = sampling_section(config)
    if sampling_cfg.get("seed") is None:
        seed = _model_seed(config)
        sampling_cfg["seed"] = seed if seed is not None else int(secrets.randbits(32))
    return int(sampling_cfg["seed"])


def prepare_rng(config: dict) -> NumpyRandomSource:
    seed = prepare_sampling(config).seed
    if seed is None:
        seed = _model_seed(config)
    return make_rng(seed)
