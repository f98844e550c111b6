"""Interoperability with pint

pint knows bytes, seconds and degrees, but not the counted things a cluster
reports, like floating point operations or network packets.  These are added
to the application registry as dimensions of their own, so that e.g.
"MFlops/s" can't be silently converted to "MB/s".

"""
import pint

from .errors import InvalidUnitError
from .measure import Measure, TEMPERATURES
from .prefix import Prefix
from .units import Unit, as_unit

PINT_NAMES = {
    Measure.BYTES: "byte",
    Measure.FLOPS: "flop",
    Measure.PERCENTAGE: "percent",
    Measure.TEMPERATURE_C: "degC",
    Measure.TEMPERATURE_F: "degF",
    Measure.ROTATION: "revolutions_per_minute",
    Measure.FREQUENCY: "hertz",
    Measure.TIME: "second",
    Measure.WATT: "watt",
    Measure.JOULE: "joule",
    # pint's "cycle" is an angle
    Measure.CYCLES: "cpu_cycle",
    Measure.REQUESTS: "request",
    Measure.PACKETS: "packet",
    Measure.EVENTS: "event",
}


def fix_pint_registry(ureg: pint.registry.ApplicationRegistry):
    """Add the counted measures to a pint ApplicationRegistry"""
    # Use the _registry parameter for the same reason as
    # https://github.com/hgrecco/pint/pull/1403.  Redefinition is ignored so
    # that this function may be applied more than once.
    on_redefinition = ureg._registry._on_redefinition
    ureg._registry._on_redefinition = "ignore"
    try:
        ureg.define("flop = [flop]")
        ureg.define("cpu_cycle = [cpu_cycle]")
        ureg.define("request = [request]")
        ureg.define("packet = [packet]")
        ureg.define("event = [event]")
    finally:
        ureg._registry._on_redefinition = on_redefinition
    return ureg


def pint_expression(unit: Unit) -> str:
    """Return a pint unit expression for a valid Unit"""
    name = PINT_NAMES[unit.measure]
    if unit.measure in TEMPERATURES or unit.prefix is Prefix.BASE:
        expr = name
    else:
        expr = f"{unit.prefix.long_name.lower()}{name}"
    if unit.divisor is not Measure.INVALID:
        expr += f" / {PINT_NAMES[unit.divisor]}"
    return expr


def to_pint(unit) -> pint.Unit:
    u = as_unit(unit)
    if not u.valid:
        raise InvalidUnitError(unit)
    return ureg.Unit(pint_expression(u))


def Quantity(value, unit) -> pint.Quantity:
    """Return pint Quantity of `value` in `unit`, a Unit or unit literal"""
    return ureg.Quantity(value, to_pint(unit))


# noinspection PyTypeChecker
ureg = fix_pint_registry(pint.get_application_registry())
