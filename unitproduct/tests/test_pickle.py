"""Test interoperability with other libraries"""
import dill
import pickle
import pytest

from unitproduct import Duration, Length, M, Measurement, Speed


@pytest.mark.parametrize("version", [0, 1, 2, pickle.HIGHEST_PROTOCOL])
def test_pickle_roundtrip_unit(version):
    u1 = Speed.kilometers_per_hour
    u2 = pickle.loads(pickle.dumps(u1, protocol=version))
    assert u2 is u1


def test_dill_roundtrip_unit():
    u1 = Duration.hours
    u2 = dill.loads(dill.dumps(u1))
    assert u2 is u1


@pytest.mark.parametrize("version", [0, 1, 2, pickle.HIGHEST_PROTOCOL])
def test_pickle_roundtrip_measurement(version):
    m1 = M(64, Length.kilometers)
    m2 = pickle.loads(pickle.dumps(m1, protocol=version))
    assert isinstance(m2, Measurement)
    assert m2 == m1
    assert m2.unit is Length.kilometers


def test_dill_roundtrip_measurement():
    m1 = M(32, Speed.kilometers_per_hour)
    m2 = dill.loads(dill.dumps(m1))
    assert isinstance(m2, Measurement)
    # Identity of the unit still selects the preferred mapping
    assert (m2 * M(2, Duration.hours)).unit is Length.kilometers
