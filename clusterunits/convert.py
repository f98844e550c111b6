"""Conversion functions between units

A conversion function takes one metric sample and returns it expressed in the
output unit, in the same numeric representation as the input: a float stays a
float, an `np.int32` stays an `np.int32` (truncated toward zero), and an array
keeps its dtype.

"""
from numbers import Number
from typing import Callable, Tuple, Union

import numpy as np

from .errors import IncompatibleUnitsError, InvalidPrefixError, InvalidUnitError
from .measure import Measure
from .prefix import Prefix
from .units import INVALID_UNIT, Unit, as_unit, parse


def apply_float(fn, value):
    """Return fn(value) computed in float64 and cast back to value's type"""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected a numeric sample, but was given {value!r}")
    if isinstance(value, (list, tuple)):
        value = np.asarray(value)
    if isinstance(value, (np.ndarray, np.generic)):
        dtype = value.dtype
        if not (
            np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)
        ):
            raise TypeError(
                f"Expected samples with an integer or float dtype, but was given dtype {dtype}"
            )
        if isinstance(value, np.ndarray):
            out = fn(value.astype(np.float64))
        else:
            out = fn(np.float64(value))
        if np.issubdtype(dtype, np.integer):
            out = np.trunc(out)
        if isinstance(value, np.ndarray):
            return out.astype(dtype)
        return dtype.type(out)
    if isinstance(value, int):
        # int() truncates toward zero
        return int(fn(float(value)))
    if isinstance(value, float):
        return float(fn(value))
    raise TypeError(
        f"Expected a numeric sample of type int, float or a numpy number, but was given value of type {type(value)}"
    )


def unchanged(value):
    return value


def as_prefix(p: Union[Prefix, str]) -> Prefix:
    if isinstance(p, Prefix):
        return p
    return Prefix.lookup(p)


def prefix_factor(in_prefix: Union[Prefix, str], out_prefix: Union[Prefix, str]):
    """Return function converting a value from `in_prefix` to `out_prefix`

    Prefixes may also be given by name, e.g. `prefix_factor("K", "M")`.

    """
    pi = as_prefix(in_prefix)
    po = as_prefix(out_prefix)
    if pi is Prefix.INVALID:
        raise InvalidPrefixError(in_prefix)
    if po is Prefix.INVALID:
        raise InvalidPrefixError(out_prefix)
    factor = pi.factor / po.factor

    def conv(value):
        return apply_float(lambda v: v * factor, value)

    conv.factor = factor
    return conv


def celsius_to_fahrenheit(value):
    return apply_float(lambda v: v * 1.8 + 32, value)


def fahrenheit_to_celsius(value):
    return apply_float(lambda v: (v - 32) / 1.8, value)


def unit_factor(in_unit: Union[Unit, str], out_unit: Union[Unit, str]) -> Callable:
    """Return function converting a value from `in_unit` to `out_unit`

    Only the prefix may differ between the two units, except for the
    Celsius ↔ Fahrenheit conversions, which ignore prefixes.  Raise
    `IncompatibleUnitsError` for any other pair.

    """
    ui = as_unit(in_unit)
    uo = as_unit(out_unit)
    if not ui.valid:
        raise InvalidUnitError(in_unit)
    if not uo.valid:
        raise InvalidUnitError(out_unit)
    if ui.measure is Measure.TEMPERATURE_C and uo.measure is Measure.TEMPERATURE_F:
        return celsius_to_fahrenheit
    if ui.measure is Measure.TEMPERATURE_F and uo.measure is Measure.TEMPERATURE_C:
        return fahrenheit_to_celsius
    if ui.measure is not uo.measure or ui.divisor is not uo.divisor:
        raise IncompatibleUnitsError(ui, uo)
    return prefix_factor(ui.prefix, uo.prefix)


def unit_prefix_factor(
    in_unit: Union[Unit, str], out_prefix: Union[Prefix, str]
) -> Tuple[Callable, Unit]:
    """Return conversion function and output unit for a change of prefix

    This is the common case: a value in some unit needs to be shown with a
    different prefix, e.g. "kByte/s" → "MByte/s".  The returned unit describes
    the converted value.  If `in_unit` is not a valid unit, or `out_prefix` is
    not a prefix, return a function that leaves values unchanged together with
    `INVALID_UNIT`.

    """
    ui = as_unit(in_unit)
    po = as_prefix(out_prefix)
    out_unit = parse(ui.short())
    if not out_unit.valid or po is Prefix.INVALID:
        return unchanged, INVALID_UNIT
    out_unit.set_prefix(po)
    return prefix_factor(ui.prefix, po), out_unit


def convert_value(value: Number, in_unit, out_unit):
    return unit_factor(in_unit, out_unit)(value)


def convert_series(values, in_unit, out_unit) -> np.ndarray:
    """Return series of samples converted to `out_unit` as a float array"""
    return unit_factor(in_unit, out_unit)(np.asarray(values, dtype=np.float64))
