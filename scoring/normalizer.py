"""Metric normalizer — maps one raw measurement to a 0-100 score."""

import logging
import math
from typing import Union

from config.metric_configs import get_metric_config
from models.enums import MetricKey
from models.metric import MetricConfig

logger = logging.getLogger(__name__)

# Target zone: raw values inside it always score 100
TARGET_ZONE_LOW = 30.0
TARGET_ZONE_HIGH = 40.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def clamp_score(score: float) -> int:
    """Round and clamp to an integer in [0, 100]. NaN maps to 0."""
    if math.isnan(score):
        return 0
    if math.isinf(score):
        return 100 if score > 0 else 0
    return max(0, min(100, round_half_up(score)))


def _ratio(numerator: float, denominator: float) -> float:
    # A zero-width span resolves to +/- infinity by the numerator's sign
    if denominator == 0:
        if numerator == 0:
            return 0.0
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def normalize(value: float, metric: Union[MetricKey, str, MetricConfig]) -> int:
    """Normalize a raw metric value to an integer score in [0, 100].

    ``metric`` is either a MetricConfig or a key looked up in METRIC_CONFIGS
    (unknown keys raise UnknownMetricError).

    Every metric is scored against the fixed 30-40 target zone:
      value in [30, 40] → 100
      value < 30        → rises linearly from 0 at ``min`` to 100 at 30
      value > 40        → falls linearly from 100 at 40 to 0 at ``max``

    The zone checks use the raw value, not the clamped one. ``inverted`` and
    the plain percentage-of-range score are computed but do not affect the
    result.
    """
    config = metric if isinstance(metric, MetricConfig) else get_metric_config(metric)

    if math.isnan(value):
        logger.warning(f"NaN raw value for '{config.label}', scoring as 0")
        return 0

    clamped = max(config.min, min(config.max, value))

    # Percentage of range, overridden below for every metric
    score = _ratio(clamped - config.min, config.max - config.min) * 100
    if config.inverted:
        score = 100 - score

    if TARGET_ZONE_LOW <= value <= TARGET_ZONE_HIGH:
        score = 100.0
    elif value < TARGET_ZONE_LOW:
        score = _ratio(value - config.min, TARGET_ZONE_LOW - config.min) * 100
    else:
        score = 100 - _ratio(value - TARGET_ZONE_HIGH, config.max - TARGET_ZONE_HIGH) * 100

    if not math.isfinite(score):
        logger.debug(f"Non-finite score {score} for value {value}, clamping")

    return clamp_score(score)
