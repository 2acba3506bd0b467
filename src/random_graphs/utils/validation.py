from pydantic import BaseModel, ConfigDict, Field

from random_graphs.distributions.registry import get_distribution, get_params_model


class SamplingParams(BaseModel):
    model_config = ConfigDict(extra="forbid")
    count: int = Field(1, ge=0)
    seed: int | None = None


def sampling_section(config: dict) -> dict:
    """The ``sampling`` mapping of a config, created in place when missing or null."""
    section = config.get("sampling")
    if section is None:
        section = config["sampling"] = {}
    if not isinstance(section, dict):
        raise ValueError(f"sampling must be a mapping; got {type(section).__name__}")
    return section


def validate_config(config: dict) -> None:
    required = ("model",)
    missing = [key for key in required if key not in config]
    if missing:
        raise ValueError(f"Missing required top-level keys: {missing}")
    extra = set(config) - {"model", "sampling"}
    if extra:
        raise ValueError(f"Unknown top-level keys: {sorted(extra)}")

    model_cfg = config["model"]
    if not isinstance(model_cfg, dict) or "name" not in model_cfg:
        raise ValueError("model.name is required")
    model_params = dict(model_cfg.get("params") or {})
    Params = get_params_model(model_cfg["name"])
    unknown = set(model_params) - set(Params.model_fields)
    if unknown:
        raise ValueError(f"Unknown model parameters: {sorted(unknown)}")
    # constructing the distribution runs its own range checks
    get_distribution(model_cfg["name"], model_params)
    SamplingParams.model_validate(sampling_section(config))
