from .astronomy import Coordinates
from .calc import PrayerManager, PrayerTimes
from .methods import (
    AsrJuristic,
    CalculationMethod,
    CalculationType,
    HighLatMethod,
    MidnightMethod,
    create_calculation_method,
    get_calculation_method,
)

__all__ = [
    "AsrJuristic",
    "CalculationMethod",
    "CalculationType",
    "Coordinates",
    "HighLatMethod",
    "MidnightMethod",
    "PrayerManager",
    "PrayerTimes",
    "create_calculation_method",
    "get_calculation_method",
]
