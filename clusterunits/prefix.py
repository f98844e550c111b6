"""Scale prefixes for metric units

Each prefix knows its long name (used by `Unit.__str__`), its short symbol
(used by `Unit.short`) and its scale factor relative to `Prefix.BASE`.

"""
from enum import Enum
import re
from typing import Optional


class Prefix(Enum):
    # member = long name, short symbol, factor, accepted input
    INVALID = ("Invalid", "inval", 0, None)
    BASE = ("", "", 1, r"([bB][aA][sS][eE])?")
    KILO = ("Kilo", "K", 1e3, r"[kK]|(?i:kilo)")
    KIBI = ("Kibi", "Ki", 1024, r"(?i:ki|kibi)")
    MEGA = ("Mega", "M", 1e6, r"M|(?i:mega)")
    MEBI = ("Mebi", "Mi", 1024**2, r"(?i:mi|mebi)")
    GIGA = ("Giga", "G", 1e9, r"[gG]|(?i:giga)")
    GIBI = ("Gibi", "Gi", 1024**3, r"(?i:gi|gibi)")
    TERA = ("Tera", "T", 1e12, r"[tT]|(?i:tera)")
    TEBI = ("Tebi", "Ti", 1024**4, r"(?i:ti|tebi)")
    PETA = ("Peta", "P", 1e15, r"[pP]|(?i:peta)")
    PEBI = ("Pebi", "Pi", 1024**5, r"(?i:pi|pebi)")
    EXA = ("Exa", "E", 1e18, r"[eE]|(?i:exa)")
    EXBI = ("Exbi", "Ei", 1024**6, r"(?i:ei|exbi)")
    ZETTA = ("Zetta", "Z", 1e21, r"[zZ]|(?i:zetta)")
    ZEBI = ("Zebi", "Zi", 1024**7, r"(?i:zi|zebi)")
    YOTTA = ("Yotta", "Y", 1e24, r"[yY]|(?i:yotta)")
    YOBI = ("Yobi", "Yi", 1024**8, r"(?i:yi|yobi)")
    # Lower case "m" only; upper case "M" is mega
    MILLI = ("Milli", "m", 1e-3, r"m|(?i:milli)")
    MICRO = ("Micro", "u", 1e-6, r"[uµμ]|(?i:micro)")
    NANO = ("Nano", "n", 1e-9, r"n|(?i:nano)")

    def __init__(self, long_name, symbol, factor, pattern):
        self.long_name = long_name
        self.symbol = symbol
        self.factor = factor
        self.regex = re.compile(pattern) if pattern is not None else None

    def __str__(self):
        return self.long_name

    @property
    def valid(self):
        return self is not Prefix.INVALID

    @classmethod
    def lookup(cls, token: Optional[str]) -> "Prefix":
        """Return the prefix named by `token`, or `Prefix.INVALID`"""
        if not isinstance(token, str):
            return cls.INVALID
        for p in cls:
            if p.regex is not None and p.regex.fullmatch(token):
                return p
        return cls.INVALID


def new_prefix(token: Optional[str]) -> Prefix:
    return Prefix.lookup(token)


# Prefix tokens recognized at the start of a unit literal: a long name, or a
# single letter optionally followed by "i" for the binary prefixes.
PREFIX_LONG_NAMES = tuple(
    p.long_name for p in Prefix if p.long_name and p is not Prefix.INVALID
)
PREFIX_LETTERS = "kKmMgGtTpPeEzZyYunµμ"
PREFIX_TOKEN = (
    "(?i:" + "|".join(sorted(PREFIX_LONG_NAMES, key=len, reverse=True)) + ")"
    + f"|[{PREFIX_LETTERS}]i?"
)
