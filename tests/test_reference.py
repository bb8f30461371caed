"""Tests for the IAPWS-95 reference comparison."""

import pytest

from hydrostate.core.errors import SteamPropertyError
from hydrostate.core.reference import Deviation, ReferenceFluid
from hydrostate.core.state import State


@pytest.fixture(scope="module")
def reference():
    return ReferenceFluid()


class TestDeviation:
    def test_absolute_and_relative(self):
        dev = Deviation("h", 101.0, 100.0)
        assert dev.absolute == pytest.approx(1.0)
        assert dev.relative == pytest.approx(0.01)


class TestReferenceFluid:
    def test_props_in_if97_units(self, reference):
        props = reference.props_at_pT(3.0, 300.0)
        assert props["rho"] == pytest.approx(1.0 / 1.00215168e-3, rel=1e-3)
        assert props["h"] == pytest.approx(115.331273, abs=0.5)

    @pytest.mark.parametrize("p, T", [(3.0, 300.0), (35e-4, 700.0), (10.0, 700.0)])
    def test_if97_close_to_iapws95(self, reference, p, T):
        deviations = {d.prop: d for d in reference.compare(State.from_pT(p, T))}
        assert set(deviations) == {"rho", "u", "h", "s"}
        assert abs(deviations["rho"].relative) < 1e-3
        assert abs(deviations["h"].absolute) < 0.5
        assert abs(deviations["s"].absolute) < 1e-3

    def test_two_phase_rejected(self, reference):
        with pytest.raises(SteamPropertyError):
            reference.compare(State.from_Tx(400.0, 0.5))

    def test_unknown_backend(self):
        with pytest.raises(SteamPropertyError):
            ReferenceFluid("NOSUCHBACKEND")
