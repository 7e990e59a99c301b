"""
Benchmark configuration.

A ``BenchmarkConfig`` is validated once, on construction, so the runner
never has to re-check its fields. Defaults can also be loaded from the
``"benchmark"`` section of a JSON file (see ``config/benchmark.json``).
"""

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

PathLike = Union[str, Path]

DEFAULT_LABEL = "Benchmark"
DEFAULT_WARMUP_ITERATIONS = 3


class ConfigurationError(ValueError):
    """Raised for invalid benchmark options, before any measurement runs."""


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class BenchmarkConfig:
    """Options for a single benchmark run."""

    iterations: Optional[int] = None
    label: str = DEFAULT_LABEL
    verbose: bool = False
    remove_outliers: bool = True
    log_file: Optional[PathLike] = None
    warmup_iterations: int = DEFAULT_WARMUP_ITERATIONS

    def __post_init__(self) -> None:
        if self.iterations is not None:
            if not _is_int(self.iterations):
                raise ConfigurationError(
                    f"Iteration count must be an integer, got {self.iterations!r}."
                )
            if self.iterations <= 0:
                raise ConfigurationError("Iteration count must be positive.")
            object.__setattr__(self, "iterations", int(self.iterations))
        if not _is_int(self.warmup_iterations) or self.warmup_iterations < 0:
            raise ConfigurationError(
                f"Warmup iterations must be a non-negative integer, got {self.warmup_iterations!r}."
            )
        object.__setattr__(self, "warmup_iterations", int(self.warmup_iterations))

        if not isinstance(self.label, str):
            raise ConfigurationError(f"Label must be a string, got {self.label!r}.")
        for name in ("verbose", "remove_outliers"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be true or false, got {value!r}.")
        if self.log_file is not None and not isinstance(self.log_file, (str, Path)):
            raise ConfigurationError(
                f"Log file must be a path string, got {self.log_file!r}."
            )

    def with_overrides(self, **overrides: Any) -> "BenchmarkConfig":
        """Return a copy with the non-None overrides applied (and re-validated)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def config_from_dict(data: Dict[str, Any]) -> BenchmarkConfig:
    """Build a config from a plain mapping, rejecting unknown keys."""
    known = {f.name for f in fields(BenchmarkConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown benchmark option(s): {', '.join(unknown)}")
    return BenchmarkConfig(**data)


def load_config(config_path: PathLike) -> BenchmarkConfig:
    """Load the ``"benchmark"`` section of a JSON config file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as fh:
            config = json.load(fh)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(config, dict):
        raise ConfigurationError(f"{config_path}: top level must be a JSON object")
    section = config.get('benchmark', {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"{config_path}: 'benchmark' must be a JSON object")
    return config_from_dict(section)
