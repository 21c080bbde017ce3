import logging
import math
from dataclasses import asdict, dataclass

from .astronomy import Coordinates, julian_day, mid_day, rise_set_angle, sun_angle_time, sun_position
from .dmath import arccot, fix_hour, tan
from .methods import HighLatMethod, MidnightMethod, create_calculation_method

logger = logging.getLogger(__name__)

# Seeds for the solver, as fractions of the day.
SEEDS = {
    "imsak": 5 / 24,
    "fajr": 5 / 24,
    "sunrise": 6 / 24,
    "dhuhr": 12 / 24,
    "asr": 13 / 24,
    "sunset": 18 / 24,
    "maghrib": 18 / 24,
    "isha": 18 / 24
}

NIGHT_PORTIONS = {
    HighLatMethod.NIGHT_MIDDLE: lambda angle: 1 / 2,
    HighLatMethod.ANGLE_BASED: lambda angle: angle / 60,
    HighLatMethod.ONE_SEVENTH: lambda angle: 1 / 7,
}


@dataclass
class PrayerTimes:
    """Times in fractional hours for the zone implied by the longitude.

    Values are not wrapped into 0-24: midnight is often above 24 (next day)
    and western longitudes push everything up by ``-lng / 15`` hours.
    """
    imsak: float
    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    sunset: float
    maghrib: float
    isha: float
    midnight: float

    def as_dict(self):
        return asdict(self)


def time_diff(time1, time2):
    return fix_hour(time2 - time1)


def asr_time(jd, lat, factor, time):
    decl, _ = sun_position(jd + time)
    angle = -arccot(factor + tan(abs(lat - decl)))
    return sun_angle_time(jd, lat, angle, time, False)


def adjust_high_lat_time(high_lat, time, base, angle, night, ccw):
    """Pull ``time`` back to ``base`` -/+ its share of the night when it falls inside it.

    ``base`` is sunrise for the ``ccw`` (pre-dawn) side and sunset otherwise.
    A time that never happens (nan) is always replaced.
    """
    portion = NIGHT_PORTIONS[high_lat](angle) * night
    diff = time_diff(time, base) if ccw else time_diff(base, time)
    if not (math.isnan(time) or portion > diff):
        return time
    adjusted = base - portion if ccw else base + portion
    logger.debug("High latitude adjustment: %s -> %s", time, adjusted)
    return adjusted


def _coerce_high_lat(value):
    if value is None or isinstance(value, HighLatMethod):
        return value
    return HighLatMethod(value)


class PrayerManager:
    """Computes prayer times for a calculation method.

    Holds one fully defaulted method and an optional high latitude method.
    Not synchronized: share an instance between threads only if nobody calls
    the setters meanwhile, otherwise give each thread its own manager.

        manager = PrayerManager(get_calculation_method("MWL"))
        times = manager.get_times(date(2021, 4, 12), (38.8976763, -77.036529, 18))
    """

    def __init__(self, method, high_lat_method=None):
        self._method = None
        self._high_lat_method = None
        self.set_calculation_method(method)
        self.high_lat_method = high_lat_method

    def get_calculation_method(self):
        return self._method

    def set_calculation_method(self, method):
        self._method = create_calculation_method(method)
        logger.debug("Calculation method set to %s", self._method)

    @property
    def high_lat_method(self):
        return self._high_lat_method

    @high_lat_method.setter
    def high_lat_method(self, value):
        self._high_lat_method = _coerce_high_lat(value)
        logger.debug("High latitude method set to %s", self._high_lat_method)

    def get_times(self, day, coords):
        coords = Coordinates.coerce(coords)
        method = self._method
        high_lat = self._high_lat_method
        lat = coords.lat
        jd = julian_day(day) - coords.lng / (15 * 24)
        adjust = coords.lng / 15.0
        horizon = rise_set_angle(coords.alt)

        imsak = sun_angle_time(jd, lat, method.imsak.value, SEEDS["imsak"], True) - adjust
        fajr = sun_angle_time(jd, lat, method.fajr, SEEDS["fajr"], True) - adjust
        sunrise = sun_angle_time(jd, lat, horizon, SEEDS["sunrise"], True) - adjust
        dhuhr = mid_day(jd, SEEDS["dhuhr"]) - adjust + method.dhuhr / 60.0
        asr = asr_time(jd, lat, method.asr, SEEDS["asr"]) - adjust
        sunset = sun_angle_time(jd, lat, horizon, SEEDS["sunset"], False) - adjust
        maghrib = sun_angle_time(jd, lat, method.maghrib.value, SEEDS["maghrib"], False) - adjust
        isha = sun_angle_time(jd, lat, method.isha.value, SEEDS["isha"], False) - adjust

        # Clamp before the minute overrides, which read fajr and maghrib.
        if high_lat is not None:
            night = time_diff(sunset, sunrise)
            imsak = adjust_high_lat_time(high_lat, imsak, sunrise, method.imsak.value, night, True)
            fajr = adjust_high_lat_time(high_lat, fajr, sunrise, method.fajr, night, True)
            maghrib = adjust_high_lat_time(high_lat, maghrib, sunset, method.maghrib.value, night, False)
            isha = adjust_high_lat_time(high_lat, isha, sunset, method.isha.value, night, False)

        if method.imsak.is_minutes:
            imsak = fajr - method.imsak.value / 60.0
        if method.maghrib.is_minutes:
            maghrib = sunset - method.maghrib.value / 60.0
        if method.isha.is_minutes:
            isha = maghrib - method.isha.value / 60.0

        if method.midnight == MidnightMethod.JAFARI:
            midnight = sunset + time_diff(sunset, fajr) / 2.0
        else:
            midnight = sunset + time_diff(sunset, sunrise) / 2.0

        times = PrayerTimes(
            imsak=imsak,
            fajr=fajr,
            sunrise=sunrise,
            dhuhr=dhuhr,
            asr=asr,
            sunset=sunset,
            maghrib=maghrib,
            isha=isha,
            midnight=midnight,
        )
        missing = [k for k, v in times.as_dict().items() if math.isnan(v)]
        if missing:
            logger.debug("No solution for %s at %s on %s", ", ".join(missing), coords, day)
        return times
