"""Pick a readable prefix for metric samples

    >>> normalize_value(1.5e9, "B/s")
    (1.5, Unit('GB/s'))

"""
import math
from typing import Tuple

import numpy as np

from .convert import unit_prefix_factor
from .errors import InvalidUnitError
from .measure import COUNT_MEASURES, Measure, TEMPERATURES
from .prefix import Prefix
from .units import Unit, as_unit

DECIMAL_PREFIXES = (
    Prefix.NANO,
    Prefix.MICRO,
    Prefix.MILLI,
    Prefix.BASE,
    Prefix.KILO,
    Prefix.MEGA,
    Prefix.GIGA,
    Prefix.TERA,
    Prefix.PETA,
    Prefix.EXA,
)
BINARY_PREFIXES = (
    Prefix.BASE,
    Prefix.KIBI,
    Prefix.MEBI,
    Prefix.GIBI,
    Prefix.TEBI,
    Prefix.PEBI,
    Prefix.EXBI,
)
UNSCALED_MEASURES = TEMPERATURES | {Measure.PERCENTAGE}


def prefix_ladder(unit: Unit) -> Tuple[Prefix, ...]:
    """Return the prefixes a unit may be normalized to, smallest first"""
    if unit.prefix in BINARY_PREFIXES[1:]:
        return BINARY_PREFIXES
    if unit.measure in COUNT_MEASURES:
        # A fractional prefix on a count would read back as mega
        return DECIMAL_PREFIXES[DECIMAL_PREFIXES.index(Prefix.BASE) :]
    return DECIMAL_PREFIXES


def choose_prefix(magnitude: float, ladder) -> Prefix:
    """Return largest prefix in `ladder` not exceeding `magnitude`"""
    chosen = ladder[0]
    for p in ladder:
        if p.factor <= magnitude:
            chosen = p
    return chosen


def _checked(unit) -> Unit:
    u = as_unit(unit)
    if not u.valid:
        raise InvalidUnitError(unit)
    return u


def normalize_value(value, unit) -> Tuple[float, Unit]:
    """Return (value, unit) rescaled so that 1 ≤ |value| < 1000 if possible

    Percentages and temperatures are returned as is, and so is zero.

    """
    u = _checked(unit)
    value = float(value)
    if u.measure in UNSCALED_MEASURES or value == 0 or not math.isfinite(value):
        return value, u.copy()
    p = choose_prefix(abs(value) * u.prefix.factor, prefix_ladder(u))
    conv, out = unit_prefix_factor(u, p)
    return conv(value), out


def normalize_series(values, unit) -> Tuple[np.ndarray, Unit]:
    """Return (values, unit) rescaled by one prefix for the whole series

    The prefix is chosen from the mean magnitude of the finite samples.

    """
    u = _checked(unit)
    arr = np.asarray(values, dtype=np.float64)
    finite = arr[np.isfinite(arr)]
    if u.measure in UNSCALED_MEASURES or finite.size == 0:
        return arr, u.copy()
    magnitude = np.mean(np.abs(finite))
    if magnitude == 0:
        return arr, u.copy()
    p = choose_prefix(magnitude * u.prefix.factor, prefix_ladder(u))
    conv, out = unit_prefix_factor(u, p)
    return conv(arr), out
