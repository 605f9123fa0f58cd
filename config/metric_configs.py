"""Per-metric scoring configuration.

These are separated from the scoring logic so they're easy to tune.
"""

from types import MappingProxyType
from typing import Mapping, Union

from models.enums import MetricKey
from models.metric import MetricConfig


class UnknownMetricError(KeyError):
    """Raised when a metric key has no entry in the configuration table."""


# Default weights sum to 1.1; only their ratios matter
METRIC_CONFIGS: Mapping[MetricKey, MetricConfig] = MappingProxyType({
    MetricKey.NOISE: MetricConfig(
        weight=0.2, min=30, max=85, inverted=True,
        label="Noise level", icon="🔊", unit="dB",
    ),
    # Bortle scale, 1 (dark sky) to 9 (inner city)
    MetricKey.LIGHT: MetricConfig(
        weight=0.1, min=1, max=9, inverted=True,
        label="Light pollution", icon="💡",
    ),
    MetricKey.CRIME: MetricConfig(
        weight=0.2, min=0, max=50, inverted=True,
        label="Crime", icon="🛡️", unit="per 1000",
    ),
    MetricKey.INTERNET_SPEED: MetricConfig(
        weight=0.2, min=10, max=1000, inverted=False,
        label="Internet speed", icon="🌐", unit="Mbps",
    ),
    # Target zone of 30-40 years is treated as optimal
    MetricKey.DEMOGRAPHICS: MetricConfig(
        weight=0.05, min=20, max=50, inverted=False,
        label="Demographics", icon="👥", unit="average age",
    ),
    MetricKey.GROCERY_STORES: MetricConfig(
        weight=0.15, min=0, max=15, inverted=False,
        label="Grocery stores", icon="🛒", unit="count",
    ),
    MetricKey.LAUNDROMATS: MetricConfig(
        weight=0.05, min=0, max=5, inverted=False,
        label="Laundromats", icon="🧺", unit="count",
    ),
    MetricKey.PARKING: MetricConfig(
        weight=0.15, min=0, max=10, inverted=False,
        label="Parking", icon="🅿️", unit="count",
    ),
})


def to_metric_key(key: Union[MetricKey, str]) -> MetricKey:
    """Coerce a metric name to its enum member, or raise UnknownMetricError."""
    try:
        return MetricKey(key)
    except ValueError:
        raise UnknownMetricError(key) from None


def get_metric_config(key: Union[MetricKey, str]) -> MetricConfig:
    metric_key = to_metric_key(key)
    try:
        return METRIC_CONFIGS[metric_key]
    except KeyError:
        raise UnknownMetricError(metric_key.value) from None
