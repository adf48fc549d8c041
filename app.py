"""
Fed Policy Simulator - Interactive Dashboard

Explore a simple Phillips Curve economy: move unemployment, inflation and
the Federal Funds Rate by hand, load a scenario, or step the model forward
and watch the Fed react.

Run with: streamlit run app.py
"""

import logging
import time

import numpy as np
import plotly.graph_objects as go
import streamlit as st

from fedsim.config import (
    ALPHA,
    INDICATORS,
    NATURAL_UNEMPLOYMENT_RATE,
    SCENARIO_LABELS,
    SCENARIO_PRESETS,
    SimulationParams,
)
from fedsim.dashboard import (
    initial_dashboard,
    regenerate,
    select_scenario,
    set_field,
    set_periods,
    simulate_next_period,
)
from fedsim.debounce import Debouncer
from fedsim.engine import series_frame

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger("fedsim.app")

# ── Page config ──────────────────────────────────────────────────────
st.set_page_config(
    page_title="Fed Policy Simulator",
    layout="wide",
    initial_sidebar_state="collapsed",
)

COLORS = {
    "unemployment_rate": "#8884d8",
    "inflation_rate": "#82ca9d",
    "federal_funds_rate": "#ffc658",
}
LABELS = {ind.name: ind.label for ind in INDICATORS}

PARAMS = SimulationParams()


def chart_theme(dark):
    return dict(
        template="plotly_dark" if dark else "simple_white",
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )


# ── Session state ────────────────────────────────────────────────────
def _slider_key(name):
    return f"slider_{name}"


def _sync_sliders():
    # Presets may sit outside slider domains; the slider shows the clamped value
    state = st.session_state.dashboard.state
    for ind in INDICATORS:
        st.session_state[_slider_key(ind.name)] = ind.clamp(getattr(state, ind.name))


def _apply(transition, *args):
    try:
        st.session_state.dashboard = transition(st.session_state.dashboard, *args)
        st.session_state.error = None
    except Exception:
        logger.exception("Error generating data")
        st.session_state.error = "Failed to generate data. Showing the last good series."


if "dashboard" not in st.session_state:
    st.session_state.rng = np.random.default_rng()
    st.session_state.debouncer = Debouncer(PARAMS.debounce_seconds)
    st.session_state.error = None
    st.session_state.dashboard = initial_dashboard(st.session_state.rng, params=PARAMS)
    st.session_state.scenario = st.session_state.dashboard.scenario
    st.session_state.periods = st.session_state.dashboard.periods
    _sync_sliders()

rng = st.session_state.rng
debouncer = st.session_state.debouncer


# ── Callbacks ────────────────────────────────────────────────────────
def on_scenario_change():
    debouncer.cancel()
    _apply(select_scenario, st.session_state.scenario, rng)
    _sync_sliders()


def on_periods_change():
    _apply(set_periods, st.session_state.periods, rng)


def on_slider_change(name):
    _apply(set_field, name, st.session_state[_slider_key(name)])
    debouncer.push(st.session_state.dashboard.state)


def on_simulate():
    debouncer.cancel()
    _apply(simulate_next_period, rng)
    _sync_sliders()


# ── Helper: build charts ─────────────────────────────────────────────
def indicators_chart(frame, shock_periods, dark):
    fig = go.Figure()
    for name in ("unemployment_rate", "inflation_rate", "federal_funds_rate"):
        fig.add_trace(
            go.Scatter(
                x=frame.index, y=frame[name], name=LABELS[name], mode="lines",
                line=dict(color=COLORS[name], width=2.5, shape="spline"),
                hovertemplate="%{y:.2f}%<extra></extra>",
            )
        )
    for period in shock_periods:
        fig.add_vline(
            x=period, line_color="red", line_width=1.5,
            annotation_text="Supply Shock", annotation_textangle=90,
            annotation_position="top right",
        )
    fig.update_layout(
        **chart_theme(dark),
        title=dict(text="Economic Indicators Over Time", font=dict(size=14)),
        yaxis=dict(range=[0, 8], title="%"),
        xaxis=dict(tickmode="array", tickvals=list(frame.index), ticktext=list(frame["month"])),
        height=340,
        margin=dict(l=50, r=20, t=35, b=30),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=-0.3),
    )
    return fig


def unemployment_inflation_chart(frame, dark):
    fig = go.Figure()
    for name in ("unemployment_rate", "inflation_rate"):
        fig.add_trace(
            go.Scatter(
                x=frame.index, y=frame[name], name=LABELS[name], stackgroup="one",
                line=dict(color=COLORS[name], width=1), fillcolor=COLORS[name],
                hovertemplate="%{y:.2f}%<extra></extra>",
            )
        )
    fig.update_layout(
        **chart_theme(dark),
        title=dict(text="Unemployment vs Inflation", font=dict(size=14)),
        yaxis_title="%",
        xaxis=dict(tickmode="array", tickvals=list(frame.index), ticktext=list(frame["month"])),
        height=340,
        margin=dict(l=50, r=20, t=35, b=30),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=-0.3),
    )
    return fig


# ── Header ───────────────────────────────────────────────────────────
head, toggle_col = st.columns([5, 1])
head.title("Advanced Economic Dashboard: Federal Reserve Policy Simulation")
dark_mode = toggle_col.toggle("Dark mode", value=False)

ctl1, ctl2, _ = st.columns([2, 2, 4])
ctl1.selectbox(
    "Scenario",
    list(SCENARIO_PRESETS.keys()),
    format_func=SCENARIO_LABELS.get,
    key="scenario",
    on_change=on_scenario_change,
)
ctl2.number_input(
    "Simulation Periods",
    min_value=PARAMS.min_periods,
    max_value=PARAMS.max_periods,
    step=1,
    key="periods",
    on_change=on_periods_change,
)

# ── Indicator cards ──────────────────────────────────────────────────
state = st.session_state.dashboard.state
cards = st.columns(len(INDICATORS))
for col, ind in zip(cards, INDICATORS):
    with col.container(border=True):
        value = getattr(state, ind.name)
        st.metric(ind.label, f"{value:.2f}%")
        st.slider(
            ind.label,
            min_value=ind.minimum,
            max_value=ind.maximum,
            step=ind.slider_step,
            key=_slider_key(ind.name),
            on_change=on_slider_change,
            args=(ind.name,),
            label_visibility="collapsed",
        )
        st.caption(f"Current: {value:.2f}%")

st.button("Simulate Next Period →", on_click=on_simulate, type="primary")

# ── Settle slider edits, then regenerate ─────────────────────────────
if debouncer.pending:
    with st.spinner("Loading..."):
        time.sleep(debouncer.remaining())
    if debouncer.poll() is not None:
        _apply(regenerate, rng)

if st.session_state.error:
    st.error(st.session_state.error)

# ── Charts ───────────────────────────────────────────────────────────
dash = st.session_state.dashboard
frame = series_frame(list(dash.series))

col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(
        indicators_chart(frame, dash.events.periods(), dark_mode),
        use_container_width=True,
    )
with col2:
    st.plotly_chart(
        unemployment_inflation_chart(frame, dark_mode),
        use_container_width=True,
    )

if len(dash.events) > 0:
    with st.container(border=True):
        st.subheader("Random Events")
        for event in dash.events:
            st.markdown(f"- Period {event.period}: {event.type} ({event.impact})")

with st.expander("Series data", expanded=False):
    st.dataframe(
        frame.rename(columns={"month": "Month", **LABELS}).round(2),
        use_container_width=True,
    )

# ── Key concepts ─────────────────────────────────────────────────────
st.header("Key Economic Concepts")
st.markdown(f"""
**Phillips Curve:** π = πe − α(u − u\\*) + ε

Where:
- π is inflation
- πe is expected inflation (last period's inflation)
- u is the unemployment rate
- u\\* is the natural rate of unemployment (assumed {NATURAL_UNEMPLOYMENT_RATE:.1f}% in this simulation)
- α is a positive constant (set to {ALPHA} in this simulation)
- ε represents random supply shocks

**Federal Funds Rate:** The interest rate at which banks lend money to each
other overnight. It's a key tool used by the Federal Reserve to influence the
economy. Here the Fed raises it a quarter point whenever inflation is above
{PARAMS.inflation_target:.0f}% and cuts it a quarter point otherwise.
""")

# ── Footer ───────────────────────────────────────────────────────────
st.divider()
st.caption(
    "This is a simplified model for educational exploration. "
    "Indicator charts add small random jitter around the current values; "
    "they are not forecasts."
)
