"""
Policy simulation engine.

Models two relationships from introductory macroeconomics:

1. Phillips Curve
   Unemployment below its natural rate -> inflation rises above expectations.
   Expectations are adaptive: last period's inflation is this period's
   expected inflation.

2. Policy Reaction Rule
   Inflation above target -> the Fed raises the funds rate a quarter point,
   otherwise it cuts a quarter point.

Each step also has a 10% chance of an exogenous supply shock that moves
inflation independently of unemployment.

All randomness comes from an explicit random source: anything with a
``random()`` method returning a float in [0, 1), such as a
``numpy.random.Generator``.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from .config import (
    ALPHA,
    INDICATOR_BY_NAME,
    NATURAL_UNEMPLOYMENT_RATE,
    IndicatorState,
    SimulationParams,
    month_labels,
)

logger = logging.getLogger("fedsim.engine")

SUPPLY_SHOCK = "Supply Shock"


def phillips_curve(
    unemployment_rate: float,
    expected_inflation: float,
    supply_shock: float = 0.0,
    natural_rate: float = NATURAL_UNEMPLOYMENT_RATE,
    alpha: float = ALPHA,
) -> float:
    """Inflation implied by the expectations-augmented Phillips curve."""
    return expected_inflation - alpha * (unemployment_rate - natural_rate) + supply_shock


@dataclass(frozen=True)
class ShockEvent:
    """A supply shock drawn during a simulated period."""

    period: int
    magnitude: float
    type: str = SUPPLY_SHOCK

    @property
    def impact(self) -> str:
        return "Positive" if self.magnitude > 0 else "Negative"


@dataclass(frozen=True)
class SeriesPoint:
    """One labelled observation of the displayed series."""

    month: str
    unemployment_rate: float
    inflation_rate: float
    federal_funds_rate: float


def _draw_supply_shock(rng, params: SimulationParams) -> float:
    if rng.random() > 1.0 - params.shock_probability:
        return (rng.random() - 0.5) * params.shock_scale
    return 0.0


def simulate_step(
    state: IndicatorState,
    rng: np.random.Generator,
    period: int,
    params: SimulationParams = None,
) -> Tuple[IndicatorState, Optional[ShockEvent]]:
    """Advance the indicators by one period.

    ``period`` tags any shock event; callers pass the next period index
    (current series length + 1). Returns the new state and the shock event,
    or ``None`` when no shock was drawn.
    """
    p = params or SimulationParams()
    bounds = INDICATOR_BY_NAME

    # 1. Unemployment drifts by a bounded random step
    unemployment = bounds["unemployment_rate"].clamp(
        state.unemployment_rate + (rng.random() - 0.5) * p.unemployment_step_width
    )

    # 2. Supply shock
    shock = _draw_supply_shock(rng, p)

    # 3. Phillips curve with last period's inflation as the expectation
    inflation = bounds["inflation_rate"].clamp(
        phillips_curve(unemployment, state.inflation_rate, shock)
    )

    # 4. Fed reaction rule
    if inflation > p.inflation_target:
        target_rate = state.federal_funds_rate + p.policy_rate_step
    else:
        target_rate = state.federal_funds_rate - p.policy_rate_step
    funds_rate = bounds["federal_funds_rate"].clamp(target_rate)

    new_state = IndicatorState(unemployment, inflation, funds_rate)

    event = None
    if shock != 0:
        event = ShockEvent(period=period, magnitude=shock)
        logger.debug("Supply shock %+.3f at period %d", shock, period)

    return new_state, event


def generate_series(
    state: IndicatorState,
    periods: int,
    rng: np.random.Generator,
    params: SimulationParams = None,
) -> List[SeriesPoint]:
    """Expand a state into ``periods`` jittered points for charting.

    This is display jitter around the current values, not a forecast.
    """
    if periods < 0:
        raise ValueError(f"periods must be non-negative, got {periods}")
    p = params or SimulationParams()

    points = []
    for month in month_labels(periods):
        points.append(
            SeriesPoint(
                month=month,
                unemployment_rate=state.unemployment_rate
                + p.unemployment_noise.offset(rng.random()),
                inflation_rate=state.inflation_rate
                + p.inflation_noise.offset(rng.random()),
                federal_funds_rate=state.federal_funds_rate
                + p.federal_funds_noise.offset(rng.random()),
            )
        )
    return points


def series_frame(series: List[SeriesPoint]) -> pd.DataFrame:
    """Tabular view of a series, indexed by 1-based period."""
    frame = pd.DataFrame(
        {
            "month": [pt.month for pt in series],
            "unemployment_rate": [pt.unemployment_rate for pt in series],
            "inflation_rate": [pt.inflation_rate for pt in series],
            "federal_funds_rate": [pt.federal_funds_rate for pt in series],
        },
        index=pd.RangeIndex(1, len(series) + 1, name="period"),
    )
    return frame
