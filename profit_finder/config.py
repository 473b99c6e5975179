"""
Configuration loading and validation for the profit-finder application.

This module uses standard library dataclasses for configuration objects,
validated by explicit, pure functions before they are built.
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Dict, Any, Optional, Type, cast

__all__ = ["load_config", "Config"]

KNOWN_ALGORITHMS = ("exhaustive", "divide_and_conquer")


# §1. Nested Configuration Dataclasses
# --------------------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    name: str
    seed: int
    output_dir: Path


@dataclass(frozen=True)
class DataConfig:
    input_path: Optional[Path]
    price_low: int
    price_high: int


@dataclass(frozen=True)
class BenchmarkConfig:
    sizes: List[int]
    repeats: int
    algorithms: List[Literal["exhaustive", "divide_and_conquer"]]


@dataclass(frozen=True)
class ReportingConfig:
    output_formats: List[Literal["json", "markdown", "csv"]]


# §2. Top-Level Configuration
# --------------------------------------------------------------------------------------


@dataclass(frozen=True)
class Config:
    """The root configuration object, composing all nested sections."""
    run: RunConfig
    data: DataConfig
    benchmark: BenchmarkConfig
    reporting: ReportingConfig


# §3. Validation and Loading
# --------------------------------------------------------------------------------------


def _from_dict(data_class: Type[Any], data: Any) -> Any:
    """Recursively creates nested dataclasses from a dictionary."""
    if isinstance(data, dict):
        field_types = {f.name: f.type for f in data_class.__dataclass_fields__.values()}

        kwargs = {}
        for k, v in data.items():
            field_type = field_types.get(k)
            # Unknown keys are passed through; the dataclass constructor rejects them.
            kwargs[k] = _from_dict(field_type, v) if field_type else v
        return data_class(**kwargs)

    # Convert path strings to Path objects
    if isinstance(data, str) and data_class in (Path, Optional[Path]):
        return Path(data)
    return data


def _is_int(value: Any) -> bool:
    # YAML booleans load as bool, which is an int subclass.
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_config(cfg: Dict[str, Any]) -> None:
    """
    Performs simple, explicit validation checks on the raw config dictionary.
    Fail fast on any logical inconsistencies.
    """
    if not isinstance(cfg, dict):
        raise ValueError("Configuration must be a YAML object.")

    try:
        price_low = cfg["data"]["price_low"]
        price_high = cfg["data"]["price_high"]
        sizes = cfg["benchmark"]["sizes"]
        repeats = cfg["benchmark"]["repeats"]
        algorithms = cfg["benchmark"]["algorithms"]
        formats = cfg["reporting"]["output_formats"]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Configuration validation failed: missing or invalid key. Details: {e}") from e

    if not (_is_int(price_low) and _is_int(price_high)):
        raise ValueError("data.price_low and data.price_high must be integers")
    if price_low >= price_high:
        raise ValueError("data.price_low must be less than data.price_high")

    if not isinstance(sizes, list) or not all(_is_int(size) for size in sizes):
        raise ValueError("benchmark.sizes must be a list of integers")
    if not sizes or any(size < 2 for size in sizes):
        raise ValueError("benchmark.sizes must be a non-empty list of sizes >= 2")

    if not _is_int(repeats):
        raise ValueError("benchmark.repeats must be an integer")
    if repeats < 1:
        raise ValueError("benchmark.repeats must be at least 1")

    if not algorithms:
        raise ValueError("benchmark.algorithms must not be empty")
    unknown = [a for a in algorithms if a not in KNOWN_ALGORITHMS]
    if unknown:
        raise ValueError(f"Unknown benchmark.algorithms: {unknown}")

    bad_formats = [f for f in formats if f not in ("json", "markdown", "csv")]
    if bad_formats:
        raise ValueError(f"Unknown reporting.output_formats: {bad_formats}")


# impure
def load_config(config_path: Path) -> Config:
    """
    Loads and validates a YAML configuration file into a Config object.
    #impure: Reads from the filesystem.
    """
    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in {config_path}: {e}") from e

    _validate_config(raw_config)

    try:
        # _from_dict is too dynamic for mypy to track types.
        return cast(Config, _from_dict(Config, raw_config))
    except (TypeError, KeyError) as e:
        raise ValueError(f"Configuration validation failed: missing or invalid key. Details: {e}") from e
