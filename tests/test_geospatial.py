import math

import pytest

from evac_app.services.geospatial import eta_minutes, haversine_km, is_schedulable_speed


def test_haversine_tenth_of_degree_on_equator():
    assert haversine_km(0.0, 0.0, 0.0, 0.1) == pytest.approx(11.12, abs=0.01)


def test_haversine_is_symmetric_and_zero_on_same_point():
    a = haversine_km(13.75, 100.5, 13.8, 100.6)
    b = haversine_km(13.8, 100.6, 13.75, 100.5)
    assert a == pytest.approx(b)
    assert haversine_km(13.75, 100.5, 13.75, 100.5) == 0.0


def test_haversine_propagates_nan():
    assert math.isnan(haversine_km(float("nan"), 0.0, 0.0, 0.0))


def test_eta_minutes():
    assert eta_minutes(30.0, 60.0) == pytest.approx(30.0)
    assert eta_minutes(11.12, 60.0) == pytest.approx(11.12)


@pytest.mark.parametrize("speed", [0.0, -10.0, float("nan"), float("inf")])
def test_eta_is_infinite_for_unschedulable_speed(speed):
    assert not is_schedulable_speed(speed)
    assert eta_minutes(10.0, speed) == math.inf
