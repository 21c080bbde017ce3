import math
from datetime import date, datetime

import pytest

from praye.astronomy import Coordinates, julian_day, mid_day, rise_set_angle, sun_angle_time, sun_position


def test_julian_day():
    assert julian_day(date(2021, 4, 12)) == 2459316.5
    assert julian_day(date(2021, 3, 20)) == 2459293.5
    # january and february count as months 13 and 14 of the previous year
    assert julian_day(date(2000, 1, 1)) == 2451545.5


def test_julian_day_ignores_time_of_day():
    assert julian_day(datetime(2021, 4, 12, 23, 59)) == julian_day(date(2021, 4, 12))


def test_sun_position_at_epoch():
    decl, eqt = sun_position(2451545.0)
    assert decl == pytest.approx(-23.03, abs=0.05)
    assert eqt * 60 == pytest.approx(-3.3, abs=0.2)


def test_declination_follows_seasons():
    equinox, _ = sun_position(julian_day(date(2021, 3, 20)) + 0.5)
    solstice, _ = sun_position(julian_day(date(2021, 6, 21)) + 0.5)
    assert abs(equinox) < 0.5
    assert solstice == pytest.approx(23.44, abs=0.05)


def test_mid_day_near_noon():
    noon = mid_day(julian_day(date(2021, 4, 12)), 0.5)
    assert 11.5 < noon < 12.5


def test_sun_angle_time_is_symmetric_around_noon():
    jd = julian_day(date(2021, 4, 12))
    noon = mid_day(jd, 0.5)
    rise = sun_angle_time(jd, 30, 0.833, 0.5, True)
    setting = sun_angle_time(jd, 30, 0.833, 0.5, False)
    assert rise < noon < setting
    assert noon - rise == pytest.approx(setting - noon)


def test_sun_angle_time_without_crossing_is_nan():
    jd = julian_day(date(2021, 6, 21))
    assert math.isnan(sun_angle_time(jd, 80, 0.833, 6 / 24, True))
    assert math.isnan(sun_angle_time(jd, 60, 18, 5 / 24, True))


def test_rise_set_angle_grows_with_elevation():
    assert rise_set_angle(0) == 0.833
    assert rise_set_angle(100) > rise_set_angle(0)
    assert rise_set_angle(1000) > rise_set_angle(100)
    assert rise_set_angle(1000) == pytest.approx(0.833 + 1.015, abs=0.01)


def test_coordinates_coerce():
    assert Coordinates.coerce((1, 2)) == Coordinates(1, 2, 0)
    assert Coordinates.coerce([1, 2, 3]).alt == 3
    coords = Coordinates(10, 20)
    assert Coordinates.coerce(coords) is coords
