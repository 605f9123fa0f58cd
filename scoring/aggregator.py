"""Score aggregator — weighted mean of normalized metric scores."""

import logging
import math
from typing import Mapping, Optional, Union

from config.metric_configs import METRIC_CONFIGS, to_metric_key
from models.enums import MetricKey
from scoring.normalizer import clamp_score

logger = logging.getLogger(__name__)

ScoreMap = Mapping[Union[MetricKey, str], Optional[float]]
WeightMap = Mapping[Union[MetricKey, str], Optional[float]]


def resolve_weights(weights: Optional[WeightMap] = None) -> dict[MetricKey, float]:
    """Merge caller overrides over the configured default weights.

    Negative and non-finite overrides count as 0.
    """
    resolved = {key: config.weight for key, config in METRIC_CONFIGS.items()}
    for key, weight in (weights or {}).items():
        metric_key = to_metric_key(key)
        if weight is None:
            continue
        if not math.isfinite(weight) or weight < 0:
            logger.warning(f"Ignoring weight {weight} for {metric_key.value}")
            weight = 0.0
        resolved[metric_key] = float(weight)
    return resolved


def aggregate(scores: ScoreMap, weights: Optional[WeightMap] = None) -> int:
    """Compute the overall 0-100 score from per-metric scores.

    Metrics with a ``None`` (or NaN) score are left out of both the weighted
    sum and the total weight. Scores outside [0, 100] are clamped first. An
    empty score set, or one whose weights sum to zero, scores 0.
    """
    resolved = resolve_weights(weights)

    total_weight = 0.0
    weighted_sum = 0.0

    for key, score in scores.items():
        metric_key = to_metric_key(key)
        if score is None or math.isnan(score):
            continue
        weight = resolved[metric_key]
        weighted_sum += max(0.0, min(100.0, score)) * weight
        total_weight += weight

    if total_weight <= 0:
        return 0

    return clamp_score(weighted_sum / total_weight)
