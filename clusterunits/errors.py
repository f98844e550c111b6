class UnitError(ValueError):
    """Base class for errors about unit identities"""

    pass


class InvalidPrefixError(UnitError):
    def __init__(self, prefix, msg="not a recognized prefix"):
        msg = f"Invalid prefix {prefix!r}: {msg}"
        super().__init__(msg)


class InvalidUnitError(UnitError):
    def __init__(self, unit, msg="not a recognized unit"):
        msg = f"Invalid unit {unit!r}: {msg}"
        super().__init__(msg)


class IncompatibleUnitsError(UnitError):
    """Raise this error if two units do not measure the same thing

    Only a prefix change (or a Celsius/Fahrenheit change) can be converted.

    """

    def __init__(self, in_unit, out_unit):
        self.in_unit = in_unit
        self.out_unit = out_unit
        msg = (
            f"Cannot convert '{in_unit}' to '{out_unit}': the measures or "
            "divisors of the two units differ."
        )
        super().__init__(msg)
