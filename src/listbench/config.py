"""
Benchmark configuration.

Defaults reproduce the fixed battery (5000 operations per phase, static
conclusions only).  A YAML file may override any field::

    operation_count: 20000
    derived_summary: true
    log_level: DEBUG
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_OPERATION_COUNT = 5000

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def validate_operation_count(operation_count: Any) -> int:
    """Return *operation_count* if it is a positive ``int``, else raise ``ValueError``."""
    if isinstance(operation_count, bool) or not isinstance(operation_count, int):
        raise ValueError(
            f"operation_count must be an integer, got {operation_count!r}"
        )
    if operation_count <= 0:
        raise ValueError(
            f"operation_count must be positive, got {operation_count}"
        )
    return operation_count


@dataclass
class BenchmarkConfig:
    """Settings for one benchmark session.

    Attributes
    ----------
    operation_count : int
        Repetitions inside every timed phase.  Shared by all phases and
        both variants so timings are directly comparable.
    derived_summary : bool
        Append a summary computed from the measured timings after the
        static conclusions.
    log_level : str
        Name of the root logging level.
    """

    operation_count: int = DEFAULT_OPERATION_COUNT
    derived_summary: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        validate_operation_count(self.operation_count)
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {self.log_level}. Valid: {list(_LOG_LEVELS)}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BenchmarkConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Valid: {sorted(known)}")
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> BenchmarkConfig:
        """Return a copy with every non-``None`` override applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return BenchmarkConfig(**values)


def load_config(config_path: Optional[Union[str, Path]] = None) -> BenchmarkConfig:
    """
    Load benchmark configuration from a YAML file.

    Args:
        config_path: Path to a YAML mapping. ``None`` returns the defaults.

    Returns:
        A validated :class:`BenchmarkConfig`.
    """
    if config_path is None:
        return BenchmarkConfig()

    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info("Loading configuration from: %s", path)
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a YAML mapping, got {type(data).__name__}")
    return BenchmarkConfig.from_dict(data)
