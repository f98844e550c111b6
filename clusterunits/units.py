"""Units for cluster monitoring metrics

A unit is a prefix, a measure and an optional divisor measure, e.g. "MByte/s"
is mega + bytes per seconds.  Units are usually made by parsing a short
literal:

    >>> u = parse("MByte/s")
    >>> str(u), u.short()
    ('MegaBytes/Seconds', 'MB/s')

Parsing never raises.  Unrecognized text gives a unit whose `valid` is False,
so check validity before using a parsed unit.

"""
import logging
import re
from typing import Optional, Tuple, Union

from .measure import COUNT_MEASURES, Measure
from .prefix import PREFIX_TOKEN, Prefix

logger = logging.getLogger(__name__)

re_prefix_split = re.compile(f"^({PREFIX_TOKEN})?(.*)$", re.DOTALL)


class Unit:
    def __init__(
        self,
        prefix: Prefix = Prefix.INVALID,
        measure: Measure = Measure.INVALID,
        divisor: Measure = Measure.INVALID,
    ):
        self._prefix = prefix
        self._measure = measure
        self._divisor = divisor

    @classmethod
    def from_string(cls, s: str) -> "Unit":
        return parse(s)

    @property
    def prefix(self) -> Prefix:
        return self._prefix

    @prefix.setter
    def prefix(self, p: Prefix):
        self._prefix = p

    def set_prefix(self, p: Prefix):
        self._prefix = p

    @property
    def measure(self) -> Measure:
        return self._measure

    @property
    def divisor(self) -> Measure:
        """Measure of the denominator, or `Measure.INVALID` if there is none"""
        return self._divisor

    @property
    def valid(self) -> bool:
        """True if the unit has a prefix and a measure

        The divisor is optional and plays no part in validity.

        """
        return self._prefix is not Prefix.INVALID and self._measure is not Measure.INVALID

    def is_valid(self) -> bool:
        return self.valid

    def add_divisor(self, divisor: Measure) -> "Unit":
        """Divide the unit by `divisor`, in place

        Use this to derive a rate from an amount, e.g. a data volume in
        "kByte" divided by the runtime in seconds is a bandwidth in "kByte/s".

        """
        self._divisor = divisor
        return self

    with_divisor = add_divisor

    def copy(self) -> "Unit":
        return self.__class__(self._prefix, self._measure, self._divisor)

    def __str__(self):
        """Return long form, like 'KiloHertz' or 'MegaBytes/Seconds'"""
        if not self.valid:
            return Prefix.INVALID.long_name
        s = f"{self._prefix.long_name}{self._measure.long_name}"
        if self._divisor is not Measure.INVALID:
            s += f"/{self._divisor.long_name}"
        return s

    def render(self) -> str:
        return str(self)

    def short(self) -> str:
        """Return short form, like 'KHz' or 'MB/s'

        The short form is the canonical text for a unit and parses back to an
        equal unit.

        """
        if not self.valid:
            return Prefix.INVALID.symbol
        s = f"{self._prefix.symbol}{self._measure.symbol}"
        if self._divisor is not Measure.INVALID:
            s += f"/{self._divisor.symbol}"
        return s

    render_short = short

    def __repr__(self):
        return f"{self.__class__.__name__}('{self.short()}')"

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return (self._prefix, self._measure, self._divisor) == (
            other._prefix,
            other._measure,
            other._divisor,
        )

    def __getstate__(self):
        return (self._prefix, self._measure, self._divisor)

    def __setstate__(self, state):
        self._prefix, self._measure, self._divisor = state


# Disambiguation rules applied while parsing a literal.


def resolve_measure(prefix_token: str, measure_text: str) -> Tuple[Prefix, Measure]:
    """Return (prefix, measure) for a split literal

    The peta ("P") and exa ("E") prefix letters are also the first letters of
    measures like "Packets", "Percent" and "Events".  If the text after such a
    letter is not a measure, try again with the letter put back.

    """
    prefix = Prefix.lookup(prefix_token)
    measure = Measure.lookup(measure_text)
    if measure is Measure.INVALID and prefix in (Prefix.PETA, Prefix.EXA):
        joined = Measure.lookup(prefix_token + measure_text)
        if joined is not Measure.INVALID:
            return Prefix.BASE, joined
    return prefix, measure


def remap_milli_for_counts(prefix: Prefix, measure: Measure) -> Prefix:
    """Read milli as mega for counted measures

    Nobody reports millibytes or millipackets.  A lone "m" in front of a
    counted measure is a mistyped "M", so it becomes mega.  A real milli
    prefix on a count can therefore not be parsed.

    """
    if measure in COUNT_MEASURES and prefix is Prefix.MILLI:
        return Prefix.MEGA
    return prefix


def drop_percentage_prefix(prefix: Prefix, measure: Measure) -> Prefix:
    """A percentage is never scaled"""
    if measure is Measure.PERCENTAGE:
        return Prefix.BASE
    return prefix


def split_literal(s: str) -> Optional[Tuple[str, str, Optional[str]]]:
    """Split a unit literal into prefix, measure and divisor text

    Return None if `s` is not a unit literal at all.

    """
    if not isinstance(s, str):
        return None
    m = re_prefix_split.match(s.strip())
    if m is None:
        return None
    prefix_token = m.group(1) or ""
    parts = m.group(2).split("/")
    divisor_text = parts[1] if len(parts) > 1 else None
    return prefix_token, parts[0], divisor_text


def parse(s: str) -> Unit:
    """Return Unit for a literal like 'MByte/s' or 'GHz'"""
    split = split_literal(s)
    if split is None:
        logger.debug("Unit literal %r has no recognizable structure", s)
        return Unit()
    prefix_token, measure_text, divisor_text = split
    prefix, measure = resolve_measure(prefix_token, measure_text)
    prefix = remap_milli_for_counts(prefix, measure)
    prefix = drop_percentage_prefix(prefix, measure)
    if prefix is Prefix.INVALID or measure is Measure.INVALID:
        logger.debug("Unit literal %r has no recognized prefix and measure", s)
        return Unit()
    u = Unit(prefix, measure)
    if divisor_text is not None:
        divisor = Measure.lookup(divisor_text)
        if divisor is Measure.INVALID:
            logger.debug(
                "Dropped unrecognized divisor %r of unit literal %r", divisor_text, s
            )
        u.add_divisor(divisor)
    return u


def new_unit(s: str) -> Unit:
    return parse(s)


def as_unit(u: Union[Unit, str]) -> Unit:
    """Return `u` if it is a Unit, otherwise parse it"""
    if isinstance(u, Unit):
        return u
    return parse(u)


INVALID_UNIT = parse("foobar")
