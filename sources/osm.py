"""OpenStreetMap-derived raw metrics.

Fetching from Overpass is left to the caller; this module builds the queries
and turns the returned element counts into raw metric values.
"""

import logging
from typing import Callable, Mapping, Optional, Union

from models.enums import MetricKey

logger = logging.getLogger(__name__)

Fetcher = Callable[[Optional[float], Optional[float]], Optional[float]]

OSM_SOURCE = "osm"

# Search radius in meters for POI count metrics
POI_RADII_M: dict[MetricKey, int] = {
    MetricKey.GROCERY_STORES: 500,
    MetricKey.LAUNDROMATS: 1000,
    MetricKey.PARKING: 500,
}

# Overpass tag filters: key → exact value or list of alternatives
POI_TAGS: dict[MetricKey, dict[str, Union[str, list[str]]]] = {
    MetricKey.GROCERY_STORES: {"shop": ["supermarket", "convenience", "organic", "grocery"]},
    MetricKey.LAUNDROMATS: {"shop": "laundry"},
    MetricKey.PARKING: {"amenity": ["parking", "parking_space", "parking_entrance"]},
}

# Light pollution inputs
STREET_LAMP_RADIUS_M = 1000
URBAN_LANDUSE_RADIUS_M = 2000
STREET_LAMP_TAGS = {"highway": "street_lamp"}
URBAN_LANDUSE_TAGS = {"landuse": ["commercial", "industrial", "retail"]}


def build_overpass_query(
    lat: float,
    lon: float,
    radius_m: int,
    tags: dict[str, Union[str, list[str]]],
    timeout_s: int = 25,
) -> str:
    """Build an Overpass QL query for nodes and ways matching ``tags``."""
    filters = ""
    for key, value in tags.items():
        if isinstance(value, list):
            filters += f'["{key}"~"{"|".join(value)}"]'
        else:
            filters += f'["{key}"="{value}"]'

    around = f"(around:{radius_m},{lat},{lon})"
    return (
        f"[out:json][timeout:{timeout_s}];\n"
        f"(\n"
        f"  node{filters}{around};\n"
        f"  way{filters}{around};\n"
        f");\n"
        f"out center;"
    )


def poi_query(key: MetricKey, lat: float, lon: float) -> str:
    """Overpass query for a POI count metric (grocery stores, laundromats, parking)."""
    if key not in POI_TAGS:
        raise ValueError(f"{key.value} is not a POI count metric")
    return build_overpass_query(lat, lon, POI_RADII_M[key], POI_TAGS[key])


def estimate_light_level(street_lamps: int, urban_features: int) -> float:
    """Estimate a Bortle-scale light pollution level (1-9, lower is darker).

    More street lamps within 1 km and more commercial/industrial/retail
    landuse within 2 km means brighter skies. Lamps contribute up to 5,
    landuse up to 4.
    """
    lamp_part = min(street_lamps / 10, 5)
    urban_part = min(urban_features / 5, 4)
    level = min(lamp_part + urban_part, 9)
    logger.debug(
        f"Light estimate {level:.2f} from {street_lamps} lamps, {urban_features} urban features"
    )
    return level


def osm_payload(key: MetricKey) -> dict:
    """Raw payload stored with an OSM-derived reading."""
    if key == MetricKey.LIGHT:
        return {
            "scale": "bortle",
            "lamp_radius_m": STREET_LAMP_RADIUS_M,
            "landuse_radius_m": URBAN_LANDUSE_RADIUS_M,
        }
    return {"radius_m": POI_RADII_M[key]}


def osm_fetchers(
    poi_counts: Optional[Mapping[MetricKey, float]] = None,
    street_lamps: Optional[int] = None,
    urban_features: Optional[int] = None,
) -> dict[MetricKey, Fetcher]:
    """Per-metric fetchers over element counts already returned by Overpass.

    POI counts become their metric value directly. Light is estimated only
    when both the lamp and the landuse counts are known.
    """
    fetchers: dict[MetricKey, Fetcher] = {}
    for key, count in (poi_counts or {}).items():
        if key not in POI_TAGS:
            raise ValueError(f"{key.value} is not a POI count metric")
        fetchers[key] = lambda lat, lon, count=count: float(count)

    if street_lamps is not None and urban_features is not None:
        fetchers[MetricKey.LIGHT] = (
            lambda lat, lon: estimate_light_level(street_lamps, urban_features)
        )
    return fetchers
