"""Tests for expansions and the cycle component models."""

import pytest

from hydrostate import Region, State, UnsupportedError, expand
from hydrostate.cycle.components.turbine import Turbine
from hydrostate.cycle.components.valve import Valve


def _live_steam() -> State:
    """Superheated steam at 3 MPa, 700 K."""
    return State.from_pT(3.0, 700.0)


class TestExpand:
    def test_isentropic_keeps_entropy(self):
        inlet = _live_steam()
        outlet = expand(inlet, 0.1)
        assert outlet.region == Region.R4
        assert outlet.s == pytest.approx(inlet.s, rel=1e-6)
        assert outlet.p == pytest.approx(0.1, rel=1e-6)

    def test_unit_efficiency_matches_isentropic(self):
        inlet = _live_steam()
        ideal = expand(inlet, 0.1)
        real = expand(inlet, 0.1, efficiency=1.0)
        assert real.h == pytest.approx(ideal.h, rel=1e-6)

    def test_partial_efficiency(self):
        inlet = _live_steam()
        ideal = expand(inlet, 0.1)
        real = expand(inlet, 0.1, efficiency=0.8)
        assert real.h == pytest.approx(inlet.h - 0.8 * (inlet.h - ideal.h), abs=0.5)
        assert real.s > inlet.s

    def test_zero_efficiency_is_isenthalpic(self):
        inlet = _live_steam()
        outlet = expand(inlet, 0.1, efficiency=0.0)
        assert outlet.region == Region.R2
        assert outlet.h == pytest.approx(inlet.h, abs=0.5)

    def test_region5_unsupported(self):
        with pytest.raises(UnsupportedError):
            expand(State.from_pT(0.5, 1500.0), 0.1)


class TestTurbine:
    def test_basic_turbine(self):
        turbine = Turbine(name="hp", efficiency=0.85)
        inlet = _live_steam()
        outlet = turbine.compute(inlet, outlet_pressure=0.1, mass_flow=2.0)

        result = turbine.result
        assert outlet.h < inlet.h
        assert result.pressure_ratio == pytest.approx(30.0)
        assert result.specific_work > 0
        assert result.shaft_power == pytest.approx(2.0 * result.specific_work)
        assert result.outlet_isentropic.h < outlet.h

    def test_isentropic_state_computed_once(self, monkeypatch):
        calls = []
        from_ps = State.from_ps

        def counting_from_ps(p, s):
            calls.append((p, s))
            return from_ps(p, s)

        monkeypatch.setattr(State, "from_ps", staticmethod(counting_from_ps))
        turbine = Turbine(efficiency=0.85)
        inlet = _live_steam()
        outlet = turbine.compute(inlet, outlet_pressure=0.1)

        assert len(calls) == 1
        ideal = turbine.result.outlet_isentropic
        assert outlet.h == pytest.approx(inlet.h - 0.85 * (inlet.h - ideal.h), abs=0.5)

    def test_power_sign(self):
        turbine = Turbine()
        assert turbine.power() == 0.0
        turbine.compute(_live_steam(), outlet_pressure=0.5)
        assert turbine.power() < 0

    def test_summary(self):
        turbine = Turbine(name="lp")
        turbine.compute(_live_steam(), outlet_pressure=0.1)
        s = turbine.summary()
        assert s["name"] == "lp"
        assert s["type"] == "turbine"
        assert 0.0 < s["outlet_quality"] <= 1.0
        assert "specific_work_kJ_kg" in s


class TestValve:
    def test_throttling(self):
        valve = Valve(dp=1.0)
        inlet = _live_steam()
        outlet = valve.compute(inlet)
        assert outlet.p == pytest.approx(2.0)
        assert outlet.h == pytest.approx(inlet.h, abs=0.5)
        assert valve.power() == 0.0

    def test_summary(self):
        valve = Valve(name="throttle", dp=1.0)
        valve.compute(_live_steam())
        s = valve.summary()
        assert s["type"] == "valve"
        assert s["pressure_drop_MPa"] == 1.0
        assert s["outlet_temperature_K"] < 700.0
