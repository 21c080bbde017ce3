"""Degree-based trigonometry used by the solar calculations."""
import math


def _dtr(d):
    return (d * math.pi) / 180.0


def _rtd(r):
    return (r * 180.0) / math.pi


def sin(d):
    return math.sin(_dtr(d))


def cos(d):
    return math.cos(_dtr(d))


def tan(d):
    return math.tan(_dtr(d))


# math.asin/math.acos raise outside [-1, 1]; a sun that never reaches the
# requested angle has to come out as nan instead.
def arcsin(x):
    if not -1.0 <= x <= 1.0:
        return math.nan
    return _rtd(math.asin(x))


def arccos(x):
    if not -1.0 <= x <= 1.0:
        return math.nan
    return _rtd(math.acos(x))


def arctan2(y, x):
    return _rtd(math.atan2(y, x))


def arccot(x):
    return _rtd(math.atan(1.0 / x))


def fix(a, b):
    """Return ``a`` modulo ``b``, always in ``[0, b)`` for positive ``b``."""
    fixed = math.fmod(a, b)
    return fixed + b if fixed < 0 else fixed


def fix_angle(a):
    return fix(a, 360.0)


def fix_hour(h):
    return fix(h, 24.0)
