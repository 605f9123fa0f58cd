from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.enums import MetricKey


class MetricConfig(BaseModel):
    """Scoring parameters for one metric. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    weight: float = Field(ge=0)
    min: float
    max: float
    inverted: bool = False  # lower raw values are better

    # Presentation only, not read by the scoring functions
    label: str = ""
    icon: str = ""
    unit: Optional[str] = None

    @model_validator(mode="after")
    def _check_range(self) -> MetricConfig:
        if self.min >= self.max:
            raise ValueError(f"min ({self.min}) must be below max ({self.max})")
        return self


class MetricReading(BaseModel):
    key: MetricKey
    value: float
    score: int = Field(ge=0, le=100)
    source: str = ""
    raw: dict[str, Any] = Field(default_factory=dict)
