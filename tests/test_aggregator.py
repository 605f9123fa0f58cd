"""Tests for the score aggregator."""

import math

import pytest

from config.metric_configs import METRIC_CONFIGS, UnknownMetricError
from models.enums import MetricKey
from scoring.aggregator import aggregate, resolve_weights


class TestWeightedMean:
    def test_equal_weights(self):
        scores = {MetricKey.NOISE: 80, MetricKey.INTERNET_SPEED: 90}
        weights = {MetricKey.NOISE: 0.5, MetricKey.INTERNET_SPEED: 0.5}
        assert aggregate(scores, weights) == 85

    def test_string_keys(self):
        assert aggregate({"noise": 80, "internet_speed": 90}, {"noise": 0.5, "internet_speed": 0.5}) == 85

    def test_all_perfect(self):
        assert aggregate({key: 100 for key in MetricKey}) == 100

    def test_all_zero(self):
        assert aggregate({key: 0 for key in MetricKey}) == 0

    def test_default_weights(self):
        scores = {
            MetricKey.NOISE: 80,
            MetricKey.LIGHT: 75,
            MetricKey.CRIME: 90,
            MetricKey.INTERNET_SPEED: 85,
            MetricKey.GROCERY_STORES: 95,
            MetricKey.PARKING: 75,
        }
        # 16 + 7.5 + 18 + 17 + 14.25 + 11.25, these six weights sum to 1.0
        assert aggregate(scores) == 84

    def test_result_is_int(self):
        assert isinstance(aggregate({MetricKey.NOISE: 33}), int)


class TestPartialData:
    def test_single_metric_returns_its_score(self):
        assert aggregate({MetricKey.CRIME: 80}) == 80

    @pytest.mark.parametrize("key", list(MetricKey))
    def test_single_metric_any_key(self, key):
        assert aggregate({key: 80}) == 80

    def test_none_is_excluded_not_zero(self):
        scores = {MetricKey.NOISE: 80, MetricKey.CRIME: None}
        assert aggregate(scores) == 80

    def test_empty(self):
        assert aggregate({}) == 0

    def test_all_none(self):
        assert aggregate({MetricKey.NOISE: None, MetricKey.CRIME: None}) == 0


class TestWeights:
    def test_custom_weights_shift_result(self):
        scores = {MetricKey.NOISE: 100, MetricKey.CRIME: 0}
        default = aggregate(scores)
        custom = aggregate(scores, {MetricKey.NOISE: 0.9, MetricKey.CRIME: 0.1})
        assert default == 50
        assert custom == 90

    def test_partial_override_falls_back_to_default(self):
        # noise default 0.2, laundromats overridden to 0.2
        scores = {MetricKey.NOISE: 100, MetricKey.LAUNDROMATS: 0}
        assert aggregate(scores, {MetricKey.LAUNDROMATS: 0.2}) == 50

    def test_none_override_uses_default(self):
        scores = {MetricKey.NOISE: 100, MetricKey.LAUNDROMATS: 0}
        # 20 / 0.25
        assert aggregate(scores, {MetricKey.NOISE: None}) == 80

    def test_zero_total_weight(self):
        scores = {MetricKey.NOISE: 70}
        assert aggregate(scores, {MetricKey.NOISE: 0}) == 0

    def test_negative_weight_treated_as_zero(self):
        scores = {MetricKey.NOISE: 100, MetricKey.CRIME: 40}
        assert aggregate(scores, {MetricKey.NOISE: -1.0}) == 40

    def test_weights_need_not_sum_to_one(self):
        scores = {MetricKey.NOISE: 60, MetricKey.CRIME: 90}
        assert aggregate(scores, {MetricKey.NOISE: 2, MetricKey.CRIME: 1}) == 70

    def test_resolve_weights_defaults(self):
        resolved = resolve_weights()
        assert resolved == {k: c.weight for k, c in METRIC_CONFIGS.items()}


class TestMonotonicity:
    @pytest.mark.parametrize("key", list(MetricKey))
    def test_raising_one_score_never_lowers_overall(self, key):
        base = {k: 50 for k in MetricKey}
        results = [aggregate({**base, key: s}) for s in range(0, 101, 5)]
        assert results == sorted(results)

    def test_monotonic_with_custom_weights(self):
        weights = {MetricKey.NOISE: 0.7, MetricKey.PARKING: 0.3}
        results = [
            aggregate({MetricKey.NOISE: s, MetricKey.PARKING: 40}, weights)
            for s in range(0, 101)
        ]
        assert results == sorted(results)


class TestUnknownKeys:
    def test_unknown_score_key(self):
        with pytest.raises(UnknownMetricError):
            aggregate({"air_quality": 50})

    def test_unknown_weight_key(self):
        with pytest.raises(UnknownMetricError):
            aggregate({MetricKey.NOISE: 50}, {"air_quality": 1.0})


class TestNonFiniteInputs:
    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_non_finite_weight_counts_as_zero(self, bad):
        scores = {MetricKey.NOISE: 80, MetricKey.CRIME: 40}
        assert aggregate(scores, {MetricKey.NOISE: bad}) == 40

    @pytest.mark.parametrize("bad", [math.inf, math.nan])
    def test_non_finite_weight_alone_scores_zero(self, bad):
        assert aggregate({MetricKey.NOISE: 60}, {MetricKey.NOISE: bad}) == 0

    def test_resolve_weights_zeroes_non_finite(self):
        resolved = resolve_weights({"noise": math.inf, "crime": math.nan})
        assert resolved[MetricKey.NOISE] == 0.0
        assert resolved[MetricKey.CRIME] == 0.0

    def test_nan_score_is_skipped(self):
        assert aggregate({MetricKey.NOISE: math.nan, MetricKey.CRIME: 70}) == 70


class TestOutOfRangeScores:
    def test_score_above_100_is_clamped(self):
        assert aggregate({MetricKey.NOISE: 150}) == 100
        assert aggregate({MetricKey.NOISE: 150, MetricKey.CRIME: 100}) == 100

    def test_score_below_0_is_clamped(self):
        assert aggregate({MetricKey.NOISE: -40, MetricKey.CRIME: 0}) == 0

    def test_infinite_score_is_clamped(self):
        assert aggregate({MetricKey.NOISE: math.inf}) == 100
