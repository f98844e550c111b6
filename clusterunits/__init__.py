from .errors import (
    UnitError,
    InvalidPrefixError,
    InvalidUnitError,
    IncompatibleUnitsError,
)
from .prefix import Prefix, new_prefix
from .measure import Measure, new_measure
from .units import Unit, INVALID_UNIT, parse, new_unit
from .convert import (
    prefix_factor,
    unit_factor,
    unit_prefix_factor,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    convert_value,
    convert_series,
)
from .normalize import normalize_value, normalize_series
from .quantity import ureg, Quantity, to_pint


# Q is shorter than Quantity, and users will type it a lot in notebooks.
Q = Quantity
