"""Search configuration."""

import math
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError


class SearchConfig:
    """
    Configuration for a shortest-path search.

    Attributes:
        max_memory_mb: Memory ceiling for a single search in MB, unlimited if None
        collect_metrics: Whether search metrics are recorded
        weight_epsilon: Tolerance used when validating path weights
    """

    def __init__(
        self,
        max_memory_mb: Optional[float] = None,
        collect_metrics: bool = True,
        weight_epsilon: float = 1e-9,
    ):
        if max_memory_mb is not None:
            if isinstance(max_memory_mb, bool) or not isinstance(max_memory_mb, (int, float)):
                raise ConfigurationError("max_memory_mb must be a number")
            if math.isnan(max_memory_mb) or max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")
        if not isinstance(collect_metrics, bool):
            raise ConfigurationError("collect_metrics must be a boolean")
        if isinstance(weight_epsilon, bool) or not isinstance(weight_epsilon, (int, float)):
            raise ConfigurationError("weight_epsilon must be a number")
        if weight_epsilon <= 0:
            raise ConfigurationError("weight_epsilon must be positive")

        self.max_memory_mb = max_memory_mb
        self.collect_metrics = collect_metrics
        self.weight_epsilon = float(weight_epsilon)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        """Build a configuration from a mapping, rejecting unknown keys."""
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a JSON object")
        known = {"max_memory_mb", "collect_metrics", "weight_epsilon"}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_memory_mb": self.max_memory_mb,
            "collect_metrics": self.collect_metrics,
            "weight_epsilon": self.weight_epsilon,
        }

    def __repr__(self) -> str:
        return (
            f"SearchConfig(max_memory_mb={self.max_memory_mb!r}, "
            f"collect_metrics={self.collect_metrics!r}, "
            f"weight_epsilon={self.weight_epsilon!r})"
        )


DEFAULT_CONFIG = SearchConfig()
