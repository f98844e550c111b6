import numpy as np
import pytest

from clusterunits import InvalidUnitError, Prefix, normalize_series, normalize_value, parse
from clusterunits.normalize import DECIMAL_PREFIXES, choose_prefix, prefix_ladder


def test_choose_prefix():
    assert choose_prefix(1.5e9, DECIMAL_PREFIXES) is Prefix.GIGA
    assert choose_prefix(999.0, DECIMAL_PREFIXES) is Prefix.BASE
    assert choose_prefix(1000.0, DECIMAL_PREFIXES) is Prefix.KILO
    assert choose_prefix(0.002, DECIMAL_PREFIXES) is Prefix.MILLI
    # Smaller than the smallest prefix
    assert choose_prefix(1e-12, DECIMAL_PREFIXES) is Prefix.NANO
    # Larger than the largest prefix
    assert choose_prefix(1e30, DECIMAL_PREFIXES) is Prefix.EXA


def test_prefix_ladder():
    assert Prefix.MILLI in prefix_ladder(parse("s"))
    assert Prefix.MILLI not in prefix_ladder(parse("B"))
    assert prefix_ladder(parse("B"))[0] is Prefix.BASE
    assert Prefix.GIBI in prefix_ladder(parse("KiB"))
    assert Prefix.GIGA not in prefix_ladder(parse("KiB"))


def test_normalize_value():
    value, unit = normalize_value(1.5e9, "B/s")
    assert value == pytest.approx(1.5)
    assert unit.short() == "GB/s"
    value, unit = normalize_value(2500, parse("MHz"))
    assert value == pytest.approx(2.5)
    assert unit.short() == "GHz"
    value, unit = normalize_value(0.002, "s")
    assert value == pytest.approx(2.0)
    assert unit.short() == "ms"


def test_normalize_value_negative():
    value, unit = normalize_value(-4200.0, "W")
    assert value == pytest.approx(-4.2)
    assert unit.short() == "KW"


def test_normalize_value_counts_stay_whole():
    value, unit = normalize_value(0.5, "events/s")
    assert value == 0.5
    assert unit.prefix is Prefix.BASE
    value, unit = normalize_value(0.002, "GB")
    assert value == pytest.approx(2.0)
    assert unit.short() == "MB"


def test_normalize_value_binary():
    value, unit = normalize_value(3 * 1024**3, "B")
    assert unit.short() == "GB"
    value, unit = normalize_value(3 * 1024, "MiB")
    assert value == pytest.approx(3.0)
    assert unit.short() == "GiB"


def test_normalize_value_unscaled():
    value, unit = normalize_value(12345.0, "%")
    assert value == 12345.0
    assert unit.short() == "%"
    value, unit = normalize_value(4000, "degC")
    assert value == 4000
    assert unit.short() == "degC"
    value, unit = normalize_value(0, "MB")
    assert value == 0
    assert unit.short() == "MB"


def test_normalize_value_returns_new_unit():
    u = parse("B")
    _, unit = normalize_value(0, u)
    assert unit == u
    assert unit is not u


def test_normalize_value_invalid_unit():
    with pytest.raises(InvalidUnitError):
        normalize_value(1.0, "foobar")


def test_normalize_series():
    values, unit = normalize_series([1e6, 2e6, np.nan, 3e6], "Flops/s")
    assert unit.short() == "MF/s"
    np.testing.assert_allclose(values[[0, 1, 3]], [1.0, 2.0, 3.0])
    assert np.isnan(values[2])


def test_normalize_series_empty():
    values, unit = normalize_series([], "MB")
    assert values.size == 0
    assert unit.short() == "MB"
    values, unit = normalize_series([np.nan, 0.0], "MB")
    assert unit.short() == "MB"
