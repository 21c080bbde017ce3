import math
from dataclasses import dataclass

from .dmath import arccos, arcsin, arctan2, cos, fix_angle, fix_hour, sin

EARTH_RADIUS = 6371008.7714  # meters


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float
    alt: float = 0.0

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        return cls(*value)


def julian_day(day):
    """Julian day at the start of ``day``; any time-of-day part is ignored."""
    y, m, d = day.year, day.month, day.day
    if m < 3:
        y -= 1
        m += 12
    return math.floor(365.2425 * y + 30.6001 * m) + d + 1721027.5


def sun_position(jd):
    """Return ``(declination, equation_of_time)`` for the julian day ``jd``.

    Low precision ephemeris, good to well under an arcminute for dates close
    to the J2000 epoch, which is all prayer times need.
    """
    d = jd - 2451545.0
    q = fix_angle(280.46061837 + 0.98564736 * d)
    g = fix_angle(357.528 + 0.98560028 * d)
    L = fix_angle(q + 1.915 * sin(g) + 0.020 * sin(2 * g))
    e = 23.439 - 0.00000036 * d
    decl = arcsin(sin(e) * sin(L))
    eqt = q / 15.0 - fix_hour(arctan2(cos(e) * sin(L), cos(L)) / 15.0)
    return decl, eqt


def mid_day(jd, time):
    _, eqt = sun_position(jd + time)
    return fix_hour(12 - eqt)


def sun_angle_time(jd, lat, angle, time, ccw):
    """Hour at which the sun crosses ``angle`` degrees for an observer at ``lat``.

    ``time`` is the seed (fraction of a day) the sun position is evaluated
    at; there is no iteration, so the seed has to be close to the event.
    ``ccw`` picks the crossing before solar noon. The result is nan when the
    sun never reaches the angle on that day.
    """
    decl, eqt = sun_position(jd + time)
    numerator = -sin(angle) - sin(decl) * sin(lat)
    denominator = cos(decl) * cos(lat)
    t = arccos(numerator / denominator) / 15.0
    noon = fix_hour(12 - eqt)
    return noon - t if ccw else noon + t


def rise_set_angle(elevation=0.0):
    """Sun depression at sunrise/sunset: refraction plus the horizon dip at ``elevation`` meters."""
    return 0.833 + arccos(EARTH_RADIUS / (EARTH_RADIUS + elevation))
