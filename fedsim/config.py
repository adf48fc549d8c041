"""
Configuration for the Fed Policy Simulator.

Defines the three tracked indicators, model constants, simulation
parameters, and the named scenario presets the dashboard starts from.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


# Phillips curve: pi = pi_e - alpha * (u - u*) + shock
NATURAL_UNEMPLOYMENT_RATE = 4.0
ALPHA = 0.5

MONTHS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


@dataclass(frozen=True)
class IndicatorConfig:
    """An economic indicator with its display label and slider domain."""

    name: str
    label: str
    minimum: float  # percent
    maximum: float  # percent
    slider_step: float

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))


INDICATORS: List[IndicatorConfig] = [
    IndicatorConfig("unemployment_rate", "Unemployment Rate", 3.0, 6.0, 0.1),
    IndicatorConfig("inflation_rate", "Inflation Rate", 0.0, 5.0, 0.1),
    IndicatorConfig("federal_funds_rate", "Federal Funds Rate", 0.0, 8.0, 0.25),
]

INDICATOR_BY_NAME: Dict[str, IndicatorConfig] = {i.name: i for i in INDICATORS}


@dataclass(frozen=True)
class IndicatorState:
    """Current values of the three indicators, in percent."""

    unemployment_rate: float
    inflation_rate: float
    federal_funds_rate: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.unemployment_rate, self.inflation_rate, self.federal_funds_rate)


@dataclass(frozen=True)
class NoiseBand:
    """Display jitter for one field: offset = (draw - center) * scale."""

    scale: float
    center: float = 0.5

    def offset(self, draw: float) -> float:
        return (draw - self.center) * self.scale


@dataclass
class SimulationParams:
    """All tunable parameters for stepping and series generation."""

    # --- Simulation Step ---
    unemployment_step_width: float = 0.5  # perturbation = (draw - 0.5) * width
    shock_probability: float = 0.10
    shock_scale: float = 2.0  # magnitude = (draw - 0.5) * scale
    policy_rate_step: float = 0.25
    inflation_target: float = 2.0

    # --- Display Series ---
    unemployment_noise: NoiseBand = field(default_factory=lambda: NoiseBand(0.1))
    inflation_noise: NoiseBand = field(default_factory=lambda: NoiseBand(0.05))
    # Centered at 0.25, so policy-rate jitter skews upward by 0.025 on average
    federal_funds_noise: NoiseBand = field(
        default_factory=lambda: NoiseBand(0.1, center=0.25)
    )

    # --- Dashboard ---
    default_periods: int = 12
    min_periods: int = 1
    max_periods: int = 60
    debounce_seconds: float = 0.3

    def clamp_periods(self, periods: int) -> int:
        return max(self.min_periods, min(self.max_periods, int(periods)))


DEFAULT_SCENARIO = "normal"

# Named scenario presets; applied verbatim, even where outside slider domains
SCENARIO_PRESETS: Dict[str, IndicatorState] = {
    "normal": IndicatorState(4.3, 2.0, 5.25),
    "recession": IndicatorState(7.5, 0.5, 0.25),
    "recovery": IndicatorState(5.8, 3.2, 2.5),
    "boom": IndicatorState(3.2, 4.5, 6.5),
    "stagflation": IndicatorState(6.5, 7.0, 8.0),
}

SCENARIO_LABELS: Dict[str, str] = {
    "normal": "Normal",
    "recession": "Recession",
    "recovery": "Recovery",
    "boom": "Economic Boom",
    "stagflation": "Stagflation",
}


def clamp_field(name: str, value: float) -> float:
    """Clamp a value to the domain of the named indicator."""
    try:
        indicator = INDICATOR_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown indicator: {name!r}") from None
    return indicator.clamp(value)


def month_labels(periods: int) -> List[str]:
    """Generate month labels like 'Jan', 'Feb', ..., cycling after 'Dec'."""
    return [MONTHS[i % 12] for i in range(periods)]
