"""Location evaluation — raw metric values in, scored LocationReport out."""

import logging
from typing import Any, Callable, Mapping, Optional, Union

from config.metric_configs import METRIC_CONFIGS, to_metric_key
from models.enums import MetricKey
from models.metric import MetricReading
from models.report import LocationReport
from scoring.aggregator import WeightMap, aggregate
from scoring.interpretation import score_interpretation
from scoring.normalizer import normalize

logger = logging.getLogger(__name__)

Fetcher = Callable[[Optional[float], Optional[float]], Optional[float]]


def collect_raw_metrics(
    fetchers: Mapping[MetricKey, Fetcher],
    lat: Optional[float] = None,
    lon: Optional[float] = None,
) -> tuple[dict[MetricKey, Optional[float]], list[MetricKey]]:
    """Run every fetcher for the coordinates with error isolation.

    Fetchers over precomputed counts ignore the coordinates, which may be None.

    Returns the raw values (None where a source had no data) and the keys
    whose fetcher raised.
    """
    values: dict[MetricKey, Optional[float]] = {}
    failed: list[MetricKey] = []

    for key, fetcher in fetchers.items():
        try:
            values[key] = fetcher(lat, lon)
        except Exception as e:
            logger.error(
                f"Fetching {key.value} FAILED: {type(e).__name__}: {e}", exc_info=True
            )
            failed.append(key)

    logger.info(
        f"Collected {sum(v is not None for v in values.values())}/{len(fetchers)} "
        f"metrics for ({lat}, {lon})"
    )
    return values, failed


def evaluate_location(
    raw_values: Mapping[Union[MetricKey, str], Optional[float]],
    weights: Optional[WeightMap] = None,
    *,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    sources: Optional[Mapping[MetricKey, str]] = None,
    raw_payloads: Optional[Mapping[MetricKey, dict[str, Any]]] = None,
    failed: Optional[list[MetricKey]] = None,
) -> LocationReport:
    """Normalize each available raw value and aggregate them into a report."""
    sources = sources or {}
    raw_payloads = raw_payloads or {}

    readings: list[MetricReading] = []
    present = set()
    for key, value in raw_values.items():
        metric_key = to_metric_key(key)
        if value is None:
            continue
        readings.append(
            MetricReading(
                key=metric_key,
                value=value,
                score=normalize(value, metric_key),
                source=sources.get(metric_key, ""),
                raw=dict(raw_payloads.get(metric_key, {})),
            )
        )
        present.add(metric_key)

    failed = list(failed or [])
    missing = [k for k in METRIC_CONFIGS if k not in present and k not in failed]

    overall = aggregate({r.key: r.score for r in readings}, weights)
    logger.info(f"Scored {len(readings)} metrics, overall {overall}")

    return LocationReport(
        latitude=latitude,
        longitude=longitude,
        readings=readings,
        overall_score=overall,
        interpretation=score_interpretation(overall),
        missing=missing,
        failed=failed,
    )
