"""Configuration helpers for draft value metrics."""

from .metrics import (
    DEFAULT_POSITION_CAPS,
    FinishPoolStrategy,
    MetricConfig,
    default_metric_config,
    resolve_config,
)

__all__ = [
    "DEFAULT_POSITION_CAPS",
    "FinishPoolStrategy",
    "MetricConfig",
    "default_metric_config",
    "resolve_config",
]
