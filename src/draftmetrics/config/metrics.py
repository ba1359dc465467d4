"""Metric configuration: positional finish caps and finish pool strategy."""

from __future__ import annotations

from typing import Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, PositiveInt, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from draftmetrics.models import Position


FinishPoolStrategy = Literal["draftCount", "cap"]

DEFAULT_POSITION_CAPS: Mapping[Position, Optional[int]] = {
    "QB": 24,
    "RB": 60,
    "WR": 60,
    "TE": 30,
    "K": None,
    "DST": None,
}


class MetricConfig(BaseModel):
    """Options for the enrichment pass.

    ``position_caps`` overrides are merged over ``DEFAULT_POSITION_CAPS``; a
    ``None`` value disables capping for that position. ``finish_pool_strategy``
    picks the denominator for finish percentiles and imputed finishes.
    """

    position_caps: Dict[Position, Optional[PositiveInt]] = Field(
        default_factory=lambda: dict(DEFAULT_POSITION_CAPS)
    )
    finish_pool_strategy: FinishPoolStrategy = "draftCount"

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("position_caps", mode="before")
    @classmethod
    def _merge_caps(cls, value: Any) -> Any:
        if value is None:
            return dict(DEFAULT_POSITION_CAPS)
        if not isinstance(value, Mapping):
            return value
        overrides = {str(key).strip().upper(): cap for key, cap in value.items()}
        return {**DEFAULT_POSITION_CAPS, **overrides}

    def cap_for(self, position: Position) -> Optional[int]:
        return self.position_caps.get(position)


def default_metric_config() -> MetricConfig:
    return MetricConfig()


def resolve_config(config: Union[MetricConfig, Mapping[str, Any], None] = None) -> MetricConfig:
    """Accept a ready config, a mapping of (camelCase or snake_case) options, or ``None``."""

    if config is None:
        return MetricConfig()
    if isinstance(config, MetricConfig):
        return config
    return MetricConfig.model_validate(dict(config))
