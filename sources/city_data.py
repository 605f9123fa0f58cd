"""Static city reference values for civic metrics.

Coordinates are matched against rough bounding boxes. Each city carries one
reference value per metric it publishes.
"""

import logging
from typing import Callable, Optional

from pydantic import BaseModel

from models.enums import MetricKey

logger = logging.getLogger(__name__)

Fetcher = Callable[[float, float], Optional[float]]

# Civic metrics served by city open data
CITY_METRICS = (
    MetricKey.CRIME,
    MetricKey.NOISE,
    MetricKey.INTERNET_SPEED,
    MetricKey.DEMOGRAPHICS,
)


class CityProfile(BaseModel):
    name: str
    lat_range: tuple[float, float]
    lon_range: tuple[float, float]
    values: dict[MetricKey, float]

    def contains(self, lat: float, lon: float) -> bool:
        return (
            self.lat_range[0] <= lat <= self.lat_range[1]
            and self.lon_range[0] <= lon <= self.lon_range[1]
        )

    @property
    def source(self) -> str:
        return f"city_of_{self.name.lower()}_open_data"


CITY_PROFILES: list[CityProfile] = [
    CityProfile(
        name="Berlin",
        lat_range=(52.3, 52.7),
        lon_range=(13.1, 13.8),
        values={
            MetricKey.CRIME: 12.5,
            MetricKey.NOISE: 65.5,
            MetricKey.INTERNET_SPEED: 250,
            MetricKey.DEMOGRAPHICS: 35,
        },
    ),
    CityProfile(
        name="Hamburg",
        lat_range=(53.4, 53.7),
        lon_range=(9.7, 10.3),
        values={
            MetricKey.CRIME: 8.2,
            MetricKey.NOISE: 58.0,
            MetricKey.INTERNET_SPEED: 300,
            MetricKey.DEMOGRAPHICS: 32,
        },
    ),
]


def city_for_coordinates(lat: float, lon: float) -> Optional[CityProfile]:
    for profile in CITY_PROFILES:
        if profile.contains(lat, lon):
            return profile
    return None


def fetch_city_metric(key: MetricKey, lat: float, lon: float) -> Optional[float]:
    """Reference value for ``key`` at the coordinates, or None outside known cities."""
    profile = city_for_coordinates(lat, lon)
    if profile is None:
        logger.info(f"No city data for ({lat}, {lon})")
        return None
    return profile.values.get(key)


def city_fetchers() -> dict[MetricKey, Fetcher]:
    """Per-metric fetchers backed by CITY_PROFILES."""
    return {
        key: (lambda lat, lon, key=key: fetch_city_metric(key, lat, lon))
        for key in CITY_METRICS
    }
