from __future__ import annotations

from datetime import UTC, datetime
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(UTC)

from pydantic import BaseModel, Field

from models.enums import MetricKey
from models.metric import MetricReading


class ScoreInterpretation(BaseModel):
    label: str
    color: str
    emoji: str


class LocationReport(BaseModel):
    # Location
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    # Scores
    readings: list[MetricReading] = Field(default_factory=list)
    overall_score: int = 0
    interpretation: Optional[ScoreInterpretation] = None

    # Gaps: no value available vs. fetcher raised
    missing: list[MetricKey] = Field(default_factory=list)
    failed: list[MetricKey] = Field(default_factory=list)

    generated_at: datetime = Field(default_factory=_utcnow)

    def scores(self) -> dict[MetricKey, int]:
        """Normalized score per metric that had data."""
        return {r.key: r.score for r in self.readings}

    def reading(self, key: MetricKey) -> Optional[MetricReading]:
        for r in self.readings:
            if r.key == key:
                return r
        return None
