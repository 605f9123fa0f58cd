"""Property Location Scorer — CLI orchestrator.

Usage:
    python main.py noise=65.5 crime=12.5 grocery_stores=4
    python main.py --lat 52.52 --lon 13.405 parking=3     # fill civic metrics from city data
    python main.py noise=55 --weight noise=0.5 --weight crime=0.5
    python main.py --lat 53.55 --lon 10.0 --json          # print the report as JSON
    python main.py grocery_stores=4 --lamps 25 --urban 10  # OSM counts, light estimated
"""

import argparse
import logging
import sys
from typing import Optional

from config.metric_configs import UnknownMetricError, to_metric_key
from config.settings import Settings
from models.enums import MetricKey
from pipeline.evaluate import collect_raw_metrics, evaluate_location
from scoring.interpretation import describe_metric
from sources.city_data import city_for_coordinates, city_fetchers
from sources.osm import OSM_SOURCE, POI_TAGS, osm_fetchers, osm_payload

logger = logging.getLogger("location_scorer")


def parse_pairs(pairs: list[str]) -> dict[MetricKey, float]:
    """Parse ``key=value`` arguments into a metric → number mapping."""
    parsed: dict[MetricKey, float] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got '{pair}'")
        try:
            parsed[to_metric_key(name.strip())] = float(raw)
        except UnknownMetricError:
            raise ValueError(
                f"Unknown metric '{name}'. Available: {[k.value for k in MetricKey]}"
            ) from None
        except ValueError:
            raise ValueError(f"Not a number for {name}: '{raw}'") from None
    return parsed


def main(
    values: list[str],
    weights: Optional[list[str]] = None,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    lamps: Optional[int] = None,
    urban: Optional[int] = None,
    as_json: bool = False,
) -> None:
    settings = Settings()

    # Set up logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        raw_values = parse_pairs(values)
        weight_overrides = parse_pairs(weights) if weights else settings.weight_overrides
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    # Phase 1: POI counts and the lamp/landuse light estimate come from OSM
    poi_counts = {k: v for k, v in raw_values.items() if k in POI_TAGS}
    fetchers = osm_fetchers(poi_counts, street_lamps=lamps, urban_features=urban)
    sources = {key: OSM_SOURCE for key in fetchers}
    raw_values = {k: v for k, v in raw_values.items() if k not in fetchers}
    sources.update({key: "manual" for key in raw_values})

    # Phase 2: Fill missing civic metrics from city data
    if lat is not None and lon is not None and settings.use_city_data:
        city = city_for_coordinates(lat, lon)
        for key, fetcher in city_fetchers().items():
            if key not in raw_values and key not in fetchers:
                fetchers[key] = fetcher
                sources[key] = city.source if city else ""

    fetched, failed = collect_raw_metrics(fetchers, lat, lon)
    for key, value in fetched.items():
        if value is not None:
            raw_values[key] = value
    payloads = {key: osm_payload(key) for key in fetchers if sources[key] == OSM_SOURCE}

    logger.info(f"Raw values: {len(raw_values)} metrics")

    # Phase 3: Score
    try:
        report = evaluate_location(
            raw_values,
            weight_overrides,
            latitude=lat,
            longitude=lon,
            sources=sources,
            raw_payloads=payloads,
            failed=failed,
        )
    except UnknownMetricError as e:
        logger.error(f"Unknown metric in weight overrides: {e}")
        sys.exit(1)

    # Phase 4: Output
    if as_json:
        print(report.model_dump_json(indent=2))
        return

    for reading in sorted(report.readings, key=lambda r: r.score, reverse=True):
        logger.info(f"  [{reading.score:>3}] {describe_metric(reading.key, reading.value, reading.score)}")
    if report.missing:
        logger.info(f"  No data: {', '.join(k.value for k in report.missing)}")
    if report.failed:
        logger.warning(f"  Fetch failed: {', '.join(k.value for k in report.failed)}")
    interp = report.interpretation
    logger.info(f"Overall score: {report.overall_score}/100 {interp.emoji} {interp.label}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Property location scorer")
    parser.add_argument(
        "values",
        nargs="*",
        help="Raw metric values as key=value (e.g. noise=65.5 internet_speed=250)",
    )
    parser.add_argument(
        "--weight",
        action="append",
        default=None,
        help="Weight override as key=value, repeatable (e.g. --weight noise=0.5)",
    )
    parser.add_argument("--lat", type=float, default=None, help="Latitude of the property")
    parser.add_argument("--lon", type=float, default=None, help="Longitude of the property")
    parser.add_argument("--lamps", type=int, default=None, help="OSM street lamps within 1 km")
    parser.add_argument(
        "--urban",
        type=int,
        default=None,
        help="OSM commercial/industrial/retail landuse areas within 2 km",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full report as JSON instead of a summary",
    )
    args = parser.parse_args()
    main(
        values=args.values,
        weights=args.weight,
        lat=args.lat,
        lon=args.lon,
        lamps=args.lamps,
        urban=args.urban,
        as_json=args.json,
    )
