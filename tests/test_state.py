"""Tests for State construction and property evaluation."""

import dataclasses
import math

import pytest

from hydrostate import OutOfRangeError, Region, State, UnsupportedError
from hydrostate.core import equations as eq
from hydrostate.core.regions import InputPair
from hydrostate.core.state import hs_auxiliary
from hydrostate.utils.constants import P_CRITICAL, T_CRITICAL


def _check(state: State, v: float, u: float, h: float, s: float) -> None:
    assert state.v == pytest.approx(v, rel=1e-8)
    assert state.u == pytest.approx(u, rel=1e-8)
    assert state.h == pytest.approx(h, rel=1e-8)
    assert state.s == pytest.approx(s, rel=1e-8)


class TestFromPT:
    @pytest.mark.parametrize(
        "p, T, v, u, h, s",
        [
            (3.0, 300.0, 1.00215168e-3, 112.324818, 115.331273, 0.392294792),
            (80.0, 300.0, 0.971180894e-3, 106.448356, 184.142828, 0.368563852),
            (3.0, 500.0, 0.120241800e-2, 971.934985, 975.542239, 2.58041912),
        ],
    )
    def test_region1(self, p, T, v, u, h, s):
        state = State.from_pT(p, T)
        assert state.region == Region.R1
        assert state.x == 0.0
        _check(state, v, u, h, s)

    @pytest.mark.parametrize(
        "p, T, v, u, h, s",
        [
            (35e-4, 300.0, 39.4913866, 2411.69160, 2549.91145, 8.52238967),
            (35e-4, 700.0, 92.3015898, 3012.62819, 3335.68375, 10.1749996),
            (30.0, 700.0, 5.42946619e-3, 2468.61076, 2631.49474, 5.17540298),
        ],
    )
    def test_region2(self, p, T, v, u, h, s):
        state = State.from_pT(p, T)
        assert state.region == Region.R2
        assert state.x == 1.0
        _check(state, v, u, h, s)

    @pytest.mark.parametrize(
        "p, T, v, u, h, s",
        [
            (0.5, 1500.0, 1.38455090, 4527.49310, 5219.76855, 9.65408875),
            (30.0, 1500.0, 0.0230761299, 4474.95124, 5167.23514, 7.72970133),
            (30.0, 2000.0, 0.0311385219, 5637.07038, 6571.22604, 8.53640523),
        ],
    )
    def test_region5(self, p, T, v, u, h, s):
        state = State.from_pT(p, T)
        assert state.region == Region.R5
        _check(state, v, u, h, s)

    def test_native_coordinates_returned_unchanged(self):
        state = State.from_pT(3.0, 300.0)
        assert state.p == 3.0
        assert state.T == 300.0
        assert state.rho == pytest.approx(1.0 / state.v)

    def test_region3_pair_unsupported(self):
        with pytest.raises(UnsupportedError):
            State.from_pT(25.5837018, 650.0)

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            State.from_pT(200.0, 300.0)


class TestFromRhoT:
    def test_region3(self):
        state = State.from_rhoT(500.0, 650.0)
        assert state.region == Region.R3
        assert state.p == pytest.approx(25.5837018, rel=1e-8)
        assert state.v == pytest.approx(2e-3)

    def test_quality_undefined(self):
        with pytest.raises(UnsupportedError):
            State.from_rhoT(500.0, 650.0).x

    def test_outside_region3(self):
        with pytest.raises(UnsupportedError):
            State.from_rhoT(500.0, 500.0)


class TestTwoPhase:
    def test_from_Tx_pressure(self):
        assert State.from_Tx(300.0, 1.0).p == pytest.approx(3.53658941e-3, rel=1e-8)
        assert State.from_Tx(500.0, 0.0).p == pytest.approx(2.63889776, rel=1e-8)

    def test_from_Tx_end_points(self):
        liquid = State.from_Tx(300.0, 0.0)
        vapour = State.from_Tx(300.0, 1.0)
        p = eq.p_sat(300.0)
        assert liquid.h == pytest.approx(eq.region1_h(p, 300.0))
        assert vapour.h == pytest.approx(eq.region2_h(p, 300.0))

    def test_mixture_is_linear_in_quality(self):
        liquid = State.from_Tx(400.0, 0.0)
        vapour = State.from_Tx(400.0, 1.0)
        mix = State.from_Tx(400.0, 0.4)
        assert mix.v == pytest.approx(liquid.v + 0.4 * (vapour.v - liquid.v))
        assert mix.s == pytest.approx(liquid.s + 0.4 * (vapour.s - liquid.s))

    def test_from_px(self):
        state = State.from_px(1.0, 0.5)
        assert state.region == Region.R4
        assert state.T == pytest.approx(eq.T_sat(1.0))
        assert state.p == pytest.approx(1.0, rel=1e-6)
        assert state.x == 0.5

    def test_quality_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            State.from_Tx(300.0, 1.2)


class TestFromPH:
    def test_region3(self):
        state = State.from_ph(20.0, 1700.0)
        assert state.region == Region.R3
        assert state.T == pytest.approx(629.3083892, rel=1e-8)
        assert state.v == pytest.approx(1.749903962e-3, rel=1e-8)

    def test_region1_backward(self):
        state = State.from_ph(3.0, 975.542239)
        assert state.region == Region.R1
        assert state.T == pytest.approx(500.0, abs=0.03)

    def test_two_phase(self):
        h = State.from_Tx(eq.T_sat(1.0), 0.3).h
        state = State.from_ph(1.0, h)
        assert state.region == Region.R4
        assert state.x == pytest.approx(0.3, rel=1e-6)

    def test_region5_unsupported(self):
        with pytest.raises(UnsupportedError):
            State.from_ph(0.5, 5219.76855)

    @pytest.mark.parametrize(
        "p, h, tol",
        [
            (3.0, 975.542239, 0.2),
            (35e-4, 3335.68375, 0.1),
            (20.0, 1700.0, 1.0),
            (1.0, 1500.0, 1e-6),
        ],
    )
    def test_enthalpy_round_trip(self, p, h, tol):
        assert State.from_ph(p, h).h == pytest.approx(h, abs=tol)

    def test_below_triple_pressure(self):
        state = State.from_ph(5e-4, 2600.0)
        assert state.region == Region.R2
        assert state.p == 5e-4
        assert state.h == pytest.approx(2600.0, abs=0.1)


class TestFromPS:
    def test_region1_backward(self):
        state = State.from_ps(3.0, 0.392294792)
        assert state.region == Region.R1
        assert state.T == pytest.approx(300.0, abs=0.03)

    def test_region3(self):
        state = State.from_ps(20.0, 3.8)
        assert state.region == Region.R3
        assert state.T == pytest.approx(628.2959869, rel=1e-8)
        assert state.v == pytest.approx(1.733791463e-3, rel=1e-8)

    def test_below_triple_pressure(self):
        s = State.from_pT(5e-4, 400.0).s
        state = State.from_ps(5e-4, s)
        assert state.region == Region.R2
        assert state.T == pytest.approx(400.0, abs=0.05)

    def test_region2_backward(self):
        state = State.from_ps(35e-4, 10.1749996)
        assert state.region == Region.R2
        assert state.T == pytest.approx(700.0, abs=0.03)

    def test_two_phase(self):
        state = State.from_ps(1.0, 4.0)
        assert state.region == Region.R4
        assert state.s == pytest.approx(4.0, rel=1e-9)


class TestFromHS:
    @pytest.mark.parametrize(
        "h, s, T",
        [(1800.0, 5.3, 346.8475498), (2400.0, 6.0, 425.1373305), (2500.0, 5.5, 522.5579013)],
    )
    def test_auxiliary_saturation_temperature(self, h, s, T):
        region, value = hs_auxiliary(h, s)
        assert region == Region.R4
        assert value == pytest.approx(T, rel=1e-8)

    def test_auxiliary_region3_pressure(self):
        region, value = hs_auxiliary(1700.0, 3.8)
        assert region == Region.R3
        assert value == pytest.approx(25.55703246, rel=1e-8)

    def test_two_phase_state(self):
        state = State.from_hs(2400.0, 6.0)
        assert state.region == Region.R4
        assert state.T == pytest.approx(425.1373305, rel=1e-8)
        assert 0.0 < state.x < 1.0

    def test_two_phase_liquid_side(self):
        source = State.from_Tx(500.0, 0.3)
        state = State.from_hs(source.h, source.s)
        assert state.region == Region.R4
        assert state.T == pytest.approx(500.0, abs=1e-6)
        assert state.x == pytest.approx(0.3, rel=1e-6)

    def test_region1(self):
        source = State.from_pT(80.0, 300.0)
        state = State.from_hs(source.h, source.s)
        assert state.region == Region.R1
        assert state.p == pytest.approx(80.0, rel=1e-2)
        assert state.T == pytest.approx(300.0, abs=0.1)

    def test_region3(self):
        state = State.from_hs(1700.0, 3.8)
        assert state.region == Region.R3
        assert state.h == pytest.approx(1700.0, rel=1e-3)
        assert state.s == pytest.approx(3.8, rel=1e-3)

    def test_region2(self):
        source = State.from_pT(35e-4, 700.0)
        state = State.from_hs(source.h, source.s)
        assert state.region == Region.R2
        assert state.p == pytest.approx(35e-4, rel=1e-2)
        assert state.T == pytest.approx(700.0, abs=0.5)

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            State.from_hs(-100.0, 1.0)


class TestCriticalPoint:
    def test_from_Tx_at_critical_temperature(self):
        state = State.from_Tx(T_CRITICAL, 0.5)
        props = state.as_dict()
        assert all(math.isfinite(value) for value in props.values())
        assert state.p == pytest.approx(P_CRITICAL, rel=1e-9)
        assert 1500.0 < state.h < 2700.0

    def test_from_px_at_critical_pressure(self):
        state = State.from_px(P_CRITICAL, 0.5)
        props = state.as_dict()
        assert all(math.isfinite(value) for value in props.values())
        assert state.T == pytest.approx(T_CRITICAL, rel=1e-9)


class TestStateObject:
    def test_frozen(self):
        state = State.from_pT(3.0, 300.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.region = Region.R2

    def test_out_of_range_region_rejected(self):
        with pytest.raises(OutOfRangeError):
            State(Region.OUT_OF_RANGE, (1.0, 1.0))

    @pytest.mark.parametrize(
        "region, coordinates",
        [
            (Region.R4, (300.0, 5.0)),
            (Region.R4, (700.0, 0.5)),
            (Region.R1, (-1.0, 300.0)),
            (Region.R3, (float("nan"), 650.0)),
        ],
    )
    def test_invalid_coordinates_rejected(self, region, coordinates):
        with pytest.raises(OutOfRangeError):
            State(region, coordinates)

    def test_from_pair(self):
        assert State.from_pair(InputPair.PT, 3.0, 300.0) == State.from_pT(3.0, 300.0)
        assert State.from_pair(InputPair.TX, 300.0, 0.5).region == Region.R4

    def test_as_dict_region3_omits_quality(self):
        props = State.from_rhoT(500.0, 650.0).as_dict()
        assert "x" not in props
        assert props["rho"] == 500.0

    def test_as_dict_all_properties(self):
        props = State.from_pT(3.0, 300.0).as_dict()
        assert list(props) == ["p", "T", "x", "rho", "v", "u", "h", "s"]

    def test_get_by_name(self):
        state = State.from_pT(3.0, 300.0)
        assert state.get("h") == state.h

    def test_repr(self):
        assert repr(State.from_rhoT(500.0, 650.0)) == "State(R3, rho=500.0, T=650.0)"
