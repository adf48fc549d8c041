"""
Dashboard state and the transitions that drive it.

The presentation layer holds one ``DashboardState`` and replaces it with the
result of each transition; nothing here mutates state in place.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Tuple

import numpy as np
import pandas as pd

from .config import (
    DEFAULT_SCENARIO,
    INDICATOR_BY_NAME,
    SCENARIO_PRESETS,
    IndicatorState,
    SimulationParams,
)
from .engine import SeriesPoint, ShockEvent, generate_series, simulate_step

logger = logging.getLogger("fedsim.dashboard")


@dataclass(frozen=True)
class EventLog:
    """Append-only record of shock events, oldest first."""

    events: Tuple[ShockEvent, ...] = ()

    def append(self, event: ShockEvent) -> "EventLog":
        return EventLog(self.events + (event,))

    def periods(self) -> List[int]:
        return [e.period for e in self.events]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "period": [e.period for e in self.events],
                "type": [e.type for e in self.events],
                "impact": [e.impact for e in self.events],
                "magnitude": [e.magnitude for e in self.events],
            }
        )

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[ShockEvent]:
        return iter(self.events)


@dataclass(frozen=True)
class DashboardState:
    """Everything the dashboard renders from."""

    state: IndicatorState
    scenario: str = DEFAULT_SCENARIO
    periods: int = 12
    series: Tuple[SeriesPoint, ...] = ()
    events: EventLog = field(default_factory=EventLog)
    params: SimulationParams = field(default_factory=SimulationParams)


def _preset(name: str) -> IndicatorState:
    try:
        return SCENARIO_PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown scenario {name!r}; expected one of {sorted(SCENARIO_PRESETS)}"
        ) from None


def regenerate(dash: DashboardState, rng: np.random.Generator) -> DashboardState:
    """Rebuild the display series from the current indicator values."""
    series = generate_series(dash.state, dash.periods, rng, dash.params)
    return replace(dash, series=tuple(series))


def initial_dashboard(
    rng: np.random.Generator,
    scenario: str = DEFAULT_SCENARIO,
    periods: int = None,
    params: SimulationParams = None,
) -> DashboardState:
    p = params or SimulationParams()
    n = p.clamp_periods(p.default_periods if periods is None else periods)
    dash = DashboardState(state=_preset(scenario), scenario=scenario, periods=n, params=p)
    return regenerate(dash, rng)


def select_scenario(
    dash: DashboardState, name: str, rng: np.random.Generator
) -> DashboardState:
    """Load a preset and clear the event log."""
    state = _preset(name)
    logger.info("Scenario %s selected", name)
    return regenerate(
        replace(dash, state=state, scenario=name, events=EventLog()), rng
    )


def set_field(dash: DashboardState, name: str, value: float) -> DashboardState:
    """Override one indicator, clamped to its own domain.

    The series is left as is; callers regenerate once edits settle.
    """
    if name not in INDICATOR_BY_NAME:
        raise ValueError(f"Unknown indicator: {name!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    clamped = INDICATOR_BY_NAME[name].clamp(value)
    return replace(dash, state=replace(dash.state, **{name: clamped}))


def set_periods(
    dash: DashboardState, periods: int, rng: np.random.Generator
) -> DashboardState:
    n = dash.params.clamp_periods(periods)
    return regenerate(replace(dash, periods=n), rng)


def simulate_next_period(
    dash: DashboardState, rng: np.random.Generator
) -> DashboardState:
    """Step the model once, logging any supply shock against the next period."""
    period = len(dash.series) + 1
    state, event = simulate_step(dash.state, rng, period, dash.params)
    events = dash.events if event is None else dash.events.append(event)
    if event is not None:
        logger.info("%s (%s) at period %d", event.type, event.impact, event.period)
    return regenerate(replace(dash, state=state, events=events), rng)
