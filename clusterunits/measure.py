"""Kinds of quantity measured by cluster monitoring metrics"""
from enum import Enum
import re
from typing import Optional


class Measure(Enum):
    # member = long name, short symbol, accepted input
    INVALID = ("Invalid", "inval", None)
    BYTES = ("Bytes", "B", r"[bB][yY]?[tT]?[eE]?[sS]?")
    FLOPS = ("Flops", "F", r"[fF][lL]?[oO]?[pP]?[sS]?")
    PERCENTAGE = ("Percent", "%", r"%|[pP](?i:ercent)")
    TEMPERATURE_C = ("DegreeC", "degC", r"deg[cC]|°[cC]|[dD]egree[cC]")
    TEMPERATURE_F = ("DegreeF", "degF", r"deg[fF]|°[fF]|[dD]egree[fF]")
    ROTATION = ("RPM", "RPM", r"(?i:rpm)")
    FREQUENCY = ("Hertz", "Hz", r"[hH][zZ]|(?i:hertz)")
    TIME = ("Seconds", "s", r"[sS]|(?i:sec(ond)?s?)")
    WATT = ("Watts", "W", r"[wW]|(?i:watts?)")
    JOULE = ("Joules", "J", r"[jJ]|(?i:joules?)")
    CYCLES = ("Cycles", "cyc", r"(?i:cyc(les)?)")
    REQUESTS = ("Requests", "requests", r"(?i:requests?)")
    PACKETS = ("Packets", "packets", r"(?i:packets?)")
    EVENTS = ("Events", "events", r"(?i:events?)")

    def __init__(self, long_name, symbol, pattern):
        self.long_name = long_name
        self.symbol = symbol
        self.regex = re.compile(pattern) if pattern is not None else None

    def __str__(self):
        return self.long_name

    @property
    def valid(self):
        return self is not Measure.INVALID

    @classmethod
    def lookup(cls, token: Optional[str]) -> "Measure":
        """Return the measure named by `token`, or `Measure.INVALID`"""
        if not isinstance(token, str):
            return cls.INVALID
        for m in cls:
            if m.regex is not None and m.regex.fullmatch(token):
                return m
        return cls.INVALID


def new_measure(token: Optional[str]) -> Measure:
    return Measure.lookup(token)


# There is no such thing as a millibyte, so for these measures a lower case
# "m" prefix means mega.
COUNT_MEASURES = frozenset(
    (
        Measure.BYTES,
        Measure.FLOPS,
        Measure.PACKETS,
        Measure.EVENTS,
        Measure.CYCLES,
        Measure.REQUESTS,
    )
)

TEMPERATURES = frozenset((Measure.TEMPERATURE_C, Measure.TEMPERATURE_F))
