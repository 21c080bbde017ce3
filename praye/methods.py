from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Optional


class AsrJuristic(IntEnum):
    """Shadow length factor used for Asr."""
    STANDARD = 1  # Shafi'i, Maliki, Hanbali
    HANAFI = 2


class MidnightMethod(Enum):
    STANDARD = "Standard"  # sunset to sunrise
    JAFARI = "Jafari"  # sunset to fajr


class HighLatMethod(Enum):
    """Fallback for fajr/isha when twilight is too long or never ends.

    See http://praytimes.org/calculation#Higher_Latitudes
    """
    NIGHT_MIDDLE = "NightMiddle"
    ANGLE_BASED = "AngleBased"
    ONE_SEVENTH = "OneSeventh"


@dataclass(frozen=True)
class CalculationType:
    """Either a sun angle in degrees or a number of minutes from another time."""
    type: str
    value: float

    @classmethod
    def angle(cls, value):
        return cls("angle", value)

    @classmethod
    def minutes(cls, value):
        return cls("minute", value)

    @property
    def is_minutes(self):
        return self.type == "minute"


@dataclass(frozen=True)
class CalculationMethod:
    fajr: float
    isha: CalculationType
    imsak: Optional[CalculationType] = None
    dhuhr: Optional[float] = None
    asr: Optional[AsrJuristic] = None
    maghrib: Optional[CalculationType] = None
    midnight: Optional[MidnightMethod] = None


def create_calculation_method(method):
    """Return a copy of ``method`` with every unset field given its default.

    Nothing is validated; an odd fajr angle goes through as is.
    """
    return replace(
        method,
        imsak=method.imsak if method.imsak is not None else CalculationType.minutes(10),
        dhuhr=method.dhuhr if method.dhuhr is not None else 0,
        asr=method.asr if method.asr is not None else AsrJuristic.STANDARD,
        maghrib=method.maghrib if method.maghrib is not None else CalculationType.minutes(0),
        midnight=method.midnight if method.midnight is not None else MidnightMethod.STANDARD,
    )


METHODS = {
    "MWL": {"name": "Muslim World League", "params": {"fajr": 18, "isha": 17}},
    "ISNA": {"name": "Islamic Society of North America", "params": {"fajr": 15, "isha": 15}},
    "Egypt": {"name": "Egyptian General Authority of Survey", "params": {"fajr": 19.5, "isha": 17.5}},
    "Makkah": {"name": "Umm Al-Qura University, Makkah", "params": {"fajr": 19.5, "isha": "90 min"}},
    "Karachi": {"name": "University of Islamic Sciences, Karachi", "params": {"fajr": 18, "isha": 18}},
    "Tehran": {
        "name": "Institute of Geophysics, University of Tehran",
        "params": {"fajr": 17.7, "maghrib": 4.5, "isha": 14, "midnight": "Jafari"}
    },
    "Jafari": {
        "name": "Shia Ithna-Ashari, Leva Institute, Qum",
        "params": {"fajr": 16, "maghrib": 4, "isha": 14, "midnight": "Jafari"}
    },
    "MF": {"name": "Muslims of France", "params": {"fajr": 12, "isha": 12}}
}

RAMADAN_ISHA_MINUTES = {"Makkah": 120}


def parse_calculation_type(value):
    """Read ``18`` / ``"18"`` as an angle and ``"90 min"`` as minutes."""
    if isinstance(value, CalculationType):
        return value
    if isinstance(value, str) and "min" in value:
        try:
            return CalculationType.minutes(float(value.split()[0]))
        except (IndexError, ValueError):
            raise ValueError(f"Invalid minute value: {value!r}") from None
    return CalculationType.angle(float(value))


def method_from_params(params):
    """Build a (partial) method from config params: numbers are angles, "N min" strings are minutes."""
    asr = params.get("asr")
    if isinstance(asr, str):
        asr = AsrJuristic.HANAFI if asr.lower() == "hanafi" else AsrJuristic.STANDARD
    elif asr is not None:
        asr = AsrJuristic(asr)
    midnight = params.get("midnight")
    return CalculationMethod(
        fajr=float(params["fajr"]),
        isha=parse_calculation_type(params["isha"]),
        imsak=parse_calculation_type(params["imsak"]) if "imsak" in params else None,
        dhuhr=float(params["dhuhr"]) if "dhuhr" in params else None,
        asr=asr,
        maghrib=parse_calculation_type(params["maghrib"]) if "maghrib" in params else None,
        midnight=MidnightMethod(midnight) if midnight is not None else None,
    )


def get_calculation_method(name, is_ramadan=False):
    """Look up a preset by key, e.g. ``get_calculation_method("Makkah", True)``.

    Returns the partial method, or ``None`` when ``name`` is not a preset.
    ``is_ramadan`` only changes the Makkah isha interval.
    """
    preset = METHODS.get(name)
    if preset is None:
        return None
    method = method_from_params(preset["params"])
    if is_ramadan and name in RAMADAN_ISHA_MINUTES:
        method = replace(method, isha=CalculationType.minutes(RAMADAN_ISHA_MINUTES[name]))
    return method
