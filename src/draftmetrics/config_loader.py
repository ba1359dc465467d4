"""Persist and load metric configuration profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from draftmetrics.config import MetricConfig


@dataclass
class MetricProfile:
    position_caps: Dict[str, Optional[int]] = field(default_factory=dict)
    finish_pool_strategy: Optional[str] = None

    @classmethod
    def load(cls, path: Path) -> "MetricProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object")
        return cls(
            position_caps=data.get("positionCaps") or {},
            finish_pool_strategy=data.get("finishPoolStrategy"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "positionCaps": self.position_caps,
            "finishPoolStrategy": self.finish_pool_strategy,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def to_config(self) -> MetricConfig:
        options: dict[str, object] = {"position_caps": self.position_caps}
        if self.finish_pool_strategy:
            options["finish_pool_strategy"] = self.finish_pool_strategy
        return MetricConfig(**options)

    @classmethod
    def from_config(cls, config: MetricConfig) -> "MetricProfile":
        return cls(
            position_caps=dict(config.position_caps),
            finish_pool_strategy=config.finish_pool_strategy,
        )
