"""Test interoperability with other libraries"""
import dill
import pickle
import pytest

from clusterunits import INVALID_UNIT, Measure, Prefix, Unit, parse


@pytest.mark.parametrize("version", [0, 1, 2])
def test_pickle_roundtrip_unit(version):
    u1 = parse("MByte/s")
    assert isinstance(u1, Unit)
    u2 = pickle.loads(pickle.dumps(u1, protocol=version))
    assert isinstance(u2, Unit)
    assert u2 == u1
    assert u2.prefix is Prefix.MEGA


def test_dill_roundtrip_unit():
    u1 = parse("KHz")
    u2 = dill.loads(dill.dumps(u1))
    assert isinstance(u2, Unit)
    assert u2 == u1


def test_pickle_roundtrip_invalid_unit():
    u = pickle.loads(pickle.dumps(INVALID_UNIT))
    assert not u.valid
    assert u == INVALID_UNIT


@pytest.mark.parametrize("version", [2, pickle.HIGHEST_PROTOCOL])
def test_pickle_roundtrip_enums(version):
    for p in Prefix:
        assert pickle.loads(pickle.dumps(p, protocol=version)) is p
    for m in Measure:
        assert pickle.loads(pickle.dumps(m, protocol=version)) is m
