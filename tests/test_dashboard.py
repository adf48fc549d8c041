"""Tests for dashboard state transitions and the event log."""

import math

import pytest

from fedsim.config import SCENARIO_PRESETS, IndicatorState
from fedsim.dashboard import (
    DashboardState,
    EventLog,
    initial_dashboard,
    regenerate,
    select_scenario,
    set_field,
    set_periods,
    simulate_next_period,
)
from fedsim.engine import ShockEvent


@pytest.fixture
def dash(midpoint):
    return initial_dashboard(midpoint)


class TestEventLog:
    """Tests for the append-only event log."""

    def test_append_returns_new_log(self):
        log = EventLog()
        grown = log.append(ShockEvent(period=3, magnitude=0.2))

        assert len(log) == 0
        assert len(grown) == 1
        assert grown.periods() == [3]

    def test_order_is_preserved(self):
        log = EventLog()
        for period in (2, 5, 9):
            log = log.append(ShockEvent(period=period, magnitude=-0.1))
        assert [e.period for e in log] == [2, 5, 9]

    def test_to_frame(self):
        log = EventLog().append(ShockEvent(period=4, magnitude=-0.3))
        frame = log.to_frame()

        assert list(frame.columns) == ["period", "type", "impact", "magnitude"]
        assert frame.iloc[0]["impact"] == "Negative"
        assert frame.iloc[0]["type"] == "Supply Shock"


class TestInitialDashboard:
    def test_defaults(self, dash):
        assert dash.scenario == "normal"
        assert dash.state == SCENARIO_PRESETS["normal"]
        assert dash.periods == 12
        assert len(dash.series) == 12
        assert len(dash.events) == 0

    def test_unknown_scenario(self, midpoint):
        with pytest.raises(ValueError):
            initial_dashboard(midpoint, scenario="depression")


class TestSelectScenario:
    """Tests for scenario selection."""

    def test_loads_preset_and_clears_events(self, dash, scripted):
        shocked = simulate_next_period(dash, scripted([0.5, 0.95, 0.75]))
        assert len(shocked.events) == 1

        result = select_scenario(shocked, "recession", scripted())

        assert result.scenario == "recession"
        assert result.state == IndicatorState(7.5, 0.5, 0.25)
        assert len(result.events) == 0
        assert len(result.series) == 12

    def test_idempotent(self, dash, rng):
        once = select_scenario(dash, "boom", rng)
        twice = select_scenario(once, "boom", rng)
        assert once.state == twice.state == SCENARIO_PRESETS["boom"]
        assert twice.events == EventLog()

    def test_every_preset(self, dash, rng):
        for name, preset in SCENARIO_PRESETS.items():
            assert select_scenario(dash, name, rng).state == preset

    def test_unknown(self, dash, rng):
        with pytest.raises(ValueError):
            select_scenario(dash, "depression", rng)


class TestSetField:
    """Tests for direct slider overrides."""

    def test_sets_one_field(self, dash):
        result = set_field(dash, "inflation_rate", 3.3)

        assert result.state.inflation_rate == 3.3
        assert result.state.unemployment_rate == dash.state.unemployment_rate
        assert result.state.federal_funds_rate == dash.state.federal_funds_rate

    def test_clamps_per_field(self, dash):
        assert set_field(dash, "unemployment_rate", 9.0).state.unemployment_rate == 6.0
        assert set_field(dash, "unemployment_rate", 1.0).state.unemployment_rate == 3.0
        assert set_field(dash, "inflation_rate", 7.0).state.inflation_rate == 5.0
        assert set_field(dash, "federal_funds_rate", -1.0).state.federal_funds_rate == 0.0

    def test_leaves_series_for_debounce(self, dash):
        result = set_field(dash, "federal_funds_rate", 1.0)
        assert result.series is dash.series

    def test_rejects_bad_input(self, dash):
        with pytest.raises(ValueError):
            set_field(dash, "gdp", 1.0)
        with pytest.raises(ValueError):
            set_field(dash, "inflation_rate", math.nan)


class TestPeriods:
    def test_bounds(self, dash, rng):
        assert set_periods(dash, 0, rng).periods == 1
        assert set_periods(dash, 100, rng).periods == 60

    def test_regenerates(self, dash, rng):
        result = set_periods(dash, 24, rng)
        assert len(result.series) == 24
        assert result.series[12].month == "Jan"

    def test_regenerate_tracks_state(self, dash, midpoint):
        moved = regenerate(set_field(dash, "unemployment_rate", 5.0), midpoint)
        assert all(pt.unemployment_rate == pytest.approx(5.0) for pt in moved.series)


class TestSimulateNextPeriod:
    """Tests for stepping the dashboard."""

    def test_shock_is_logged_against_next_period(self, dash, scripted):
        result = simulate_next_period(dash, scripted([0.5, 0.95, 0.75]))

        (event,) = result.events
        assert event.period == len(dash.series) + 1 == 13
        assert event.impact == "Positive"
        assert result.state.inflation_rate == pytest.approx(2.35)

    def test_no_shock_leaves_log_alone(self, dash, midpoint):
        result = simulate_next_period(dash, midpoint)
        assert result.events is dash.events

    def test_series_follows_new_state(self, dash, midpoint):
        result = simulate_next_period(dash, midpoint)
        assert all(pt.inflation_rate == pytest.approx(1.85) for pt in result.series)

    def test_input_is_not_mutated(self, dash, scripted):
        before = dash.state
        simulate_next_period(dash, scripted([0.5, 0.95, 0.75]))
        assert dash.state == before
        assert len(dash.events) == 0


class TestIntegration:
    """End-to-end scenario with a fixed random source."""

    def test_three_midpoint_steps_from_normal(self, midpoint):
        dash = initial_dashboard(midpoint, scenario="normal")
        states = []
        for _ in range(3):
            dash = simulate_next_period(dash, midpoint)
            states.append(dash.state.as_tuple())

        expected = [(4.3, 1.85, 5.0), (4.3, 1.70, 4.75), (4.3, 1.55, 4.5)]
        for got, want in zip(states, expected):
            assert got == pytest.approx(want)
        assert len(dash.events) == 0

    def test_dashboard_state_is_explicit(self, dash):
        assert isinstance(dash, DashboardState)
        with pytest.raises(AttributeError):
            dash.periods = 5
