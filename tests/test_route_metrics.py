import math

import pytest

from route_optimizer.models.domain import Stop
from route_optimizer.services.routing.metrics import (
    build_segments,
    compute_savings,
    estimate_duration,
    round_half_up,
    route_length,
    stop_duration,
)


def _stop(sid: str, lat: float, lng: float, **overrides) -> Stop:
    return Stop(id=sid, name=f"Stop {sid}", address=f"Address {sid}", lat=lat, lng=lng, **overrides)


def test_round_half_up_matches_browser_rounding():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(45.7) == 46
    assert round_half_up(0.25, 1) == pytest.approx(0.3)
    assert round_half_up(3.44, 1) == pytest.approx(3.4)


def test_round_half_up_passes_nan_through():
    assert math.isnan(round_half_up(float("nan")))
    assert math.isnan(round_half_up(float("nan"), 1))


def test_estimate_duration_uses_thirty_kmh():
    assert estimate_duration(15) == pytest.approx(30.0)
    assert estimate_duration(0) == 0


def test_stop_duration_defaults_to_five_minutes():
    assert stop_duration(_stop("a", 0, 0)) == 5
    assert stop_duration(_stop("a", 0, 0, estimated_duration=12)) == 12
    assert stop_duration(_stop("a", 0, 0, estimated_duration=0)) == 0


def test_route_length_follows_matrix():
    matrix = [[0, 2, 5], [2, 0, 1], [5, 1, 0]]
    assert route_length([0, 1, 2], matrix) == 3
    assert route_length([0, 2, 1], matrix) == 6
    assert route_length([0], matrix) == 0


def test_build_segments_rounds_distance_and_duration():
    stops = [_stop("a", 0.0, 0.0), _stop("b", 0.0, 0.1), _stop("c", 0.0, 0.3)]
    segments = build_segments(stops)

    assert len(segments) == 2
    first, second = segments
    assert first.from_stop is stops[0]
    assert first.to_stop is stops[1]
    assert first.distance == pytest.approx(11.1)
    assert first.duration == 22
    assert second.distance == pytest.approx(22.2)
    assert second.duration == 44


def test_build_segments_for_single_stop_is_empty():
    assert build_segments([_stop("a", 0, 0)]) == []
    assert build_segments([]) == []


def test_compute_savings():
    savings = compute_savings(10.0, 7.0)
    assert savings.distance == pytest.approx(3.0)
    assert savings.time == 6
    assert savings.percentage == 30


def test_compute_savings_is_clamped_when_route_got_longer():
    savings = compute_savings(5.0, 8.0)
    assert savings.distance == 0
    assert savings.time == 0
    assert savings.percentage == 0


def test_compute_savings_without_naive_distance():
    savings = compute_savings(0.0, 0.0)
    assert (savings.distance, savings.time, savings.percentage) == (0, 0, 0)
