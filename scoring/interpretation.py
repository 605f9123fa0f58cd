"""Human-readable labels and descriptions for scores."""

from typing import Union

from config.metric_configs import get_metric_config, to_metric_key
from models.enums import MetricKey
from models.report import ScoreInterpretation
from scoring.normalizer import round_half_up

# Lower bound → (label, color, emoji), checked from the top down
SCORE_BANDS: list[tuple[int, tuple[str, str, str]]] = [
    (90, ("Excellent", "green", "🌟")),
    (75, ("Very good", "lime", "✅")),
    (60, ("Good", "yellow", "👍")),
    (40, ("Satisfactory", "orange", "⚠️")),
]

FALLBACK_BAND = ("Needs improvement", "red", "⚠️")

# Metrics whose raw value is shown as a whole number
_WHOLE_NUMBER_METRICS = {
    MetricKey.LIGHT,
    MetricKey.GROCERY_STORES,
    MetricKey.LAUNDROMATS,
    MetricKey.PARKING,
}


def score_interpretation(score: float) -> ScoreInterpretation:
    for lower, (label, color, emoji) in SCORE_BANDS:
        if score >= lower:
            return ScoreInterpretation(label=label, color=color, emoji=emoji)
    label, color, emoji = FALLBACK_BAND
    return ScoreInterpretation(label=label, color=color, emoji=emoji)


def describe_metric(key: Union[MetricKey, str], value: float, score: int) -> str:
    """One-sentence description of a metric reading, e.g. for a report card."""
    metric_key = to_metric_key(key)
    config = get_metric_config(metric_key)
    verdict = f"{score_interpretation(score).label} ({score}/100)."

    if metric_key in _WHOLE_NUMBER_METRICS:
        shown = str(round_half_up(value))
    else:
        shown = f"{value:g}"
    value_str = f"{shown} {config.unit}" if config.unit else shown

    if metric_key == MetricKey.NOISE:
        return f"Noise level is {value_str}. {verdict}"
    if metric_key == MetricKey.LIGHT:
        return f"Light pollution at level {shown} on the Bortle scale. {verdict}"
    if metric_key == MetricKey.CRIME:
        return f"Crime rate of {value_str}. {verdict}"
    if metric_key == MetricKey.INTERNET_SPEED:
        return f"Internet speed of {value_str}. {verdict}"
    if metric_key == MetricKey.DEMOGRAPHICS:
        return f"Average age {shown}. {verdict}"
    if metric_key == MetricKey.GROCERY_STORES:
        return f"{shown} grocery stores nearby. {verdict}"
    if metric_key == MetricKey.LAUNDROMATS:
        return f"{shown} laundromats nearby. {verdict}"
    return f"{shown} parking options available. {verdict}"
