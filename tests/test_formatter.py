import pytest

from route_optimizer import format_distance, format_duration


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (45, "45 min"),
        (90, "1h 30min"),
        (0, "0 min"),
        (45.7, "46 min"),
        (125, "2h 5min"),
        (60, "1h 0min"),
    ],
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


@pytest.mark.parametrize(
    ("km", "expected"),
    [
        (0.5, "500 m"),
        (3.456, "3.5 km"),
        (0, "0 m"),
        (1, "1.0 km"),
        (0.0423, "42 m"),
        (12.04, "12.0 km"),
        (1.25, "1.3 km"),
    ],
)
def test_format_distance(km, expected):
    assert format_distance(km) == expected


def test_format_duration_does_not_raise_on_nan():
    assert format_duration(float("nan")) == "nan min"


def test_format_duration_keeps_minutes_form_for_infinity():
    assert format_duration(float("inf")) == "inf min"
