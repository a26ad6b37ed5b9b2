# utils/plotting.py

import plotly.graph_objects as go

from config.chart_settings import AGGREGATED_SERIES, PORTFOLIO_COLORS
from utils.currency import format_currency_output


def _empty_figure(title, message="No data available", height=450):
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper", yref="paper", x=0.5, y=0.5,
        showarrow=False, font_size=20
    )
    fig.update_layout(title=title, height=height, template="plotly_white")
    return fig


def _ordinal(p):
    p = int(p)
    suffix = "th" if 10 <= p % 100 <= 20 else {1: "st", 2: "nd", 3: "rd"}.get(p % 10, "th")
    return f"{p}{suffix}"


# ------------------------------------------------------------------
# Simulation percentiles: mean, median and two chosen percentiles
# ------------------------------------------------------------------
def create_projection_figure(points, percentile_a, percentile_b, use_real, height=450):
    title = "Simulation Percentiles"
    if not points:
        return _empty_figure(title, height=height)

    ages = [p["age"] for p in points]
    mode = "Real" if use_real else "Nominal"

    fig = go.Figure()
    # Shaded band between the two percentiles
    fig.add_trace(go.Scatter(
        x=ages, y=[p["percentile2"] for p in points],
        mode='lines', line=dict(color='#94a3b8', width=1.5, dash='dash'),
        name=f"{_ordinal(percentile_b)} Percentile",
        hovertemplate='Age: %{x:.1f}<br>Value: $%{y:,.0f}<extra></extra>'
    ))
    fig.add_trace(go.Scatter(
        x=ages, y=[p["percentile1"] for p in points],
        mode='lines', line=dict(color='#94a3b8', width=1.5, dash='dash'),
        fill='tonexty', fillcolor='rgba(148,163,184,0.2)',
        name=f"{_ordinal(percentile_a)} Percentile",
        hovertemplate='Age: %{x:.1f}<br>Value: $%{y:,.0f}<extra></extra>'
    ))
    fig.add_trace(go.Scatter(
        x=ages, y=[p["median"] for p in points],
        mode='lines', line=dict(color='#10b981', width=3),
        name="Median",
        hovertemplate='Age: %{x:.1f}<br>Median: $%{y:,.0f}<extra></extra>'
    ))
    fig.add_trace(go.Scatter(
        x=ages, y=[p["mean"] for p in points],
        mode='lines', line=dict(color='#3b82f6', width=2),
        name="Mean",
        hovertemplate='Age: %{x:.1f}<br>Mean: $%{y:,.0f}<extra></extra>'
    ))

    fig.update_layout(
        title=f"{title} ({mode})",
        xaxis_title="Age",
        yaxis_title="Portfolio Value ($)",
        template="plotly_white",
        hovermode="x unified",
        height=height,
        legend=dict(x=0, y=1, xanchor="left", yanchor="top", bgcolor="rgba(255,255,255,0.9)")
    )
    return fig


# ------------------------------------------------------------------
# Growth of wealth: stacked area per portfolio plus the aggregate line
# ------------------------------------------------------------------
def create_growth_figure(points, series_names, use_real, height=450):
    title = "Growth of Wealth"
    if not points:
        return _empty_figure(title, "No portfolio data available", height=height)

    ages = [p["age"] for p in points]
    fig = go.Figure()

    # Duplicate display names collapse into one series, keep the first
    for idx, name in enumerate(dict.fromkeys(series_names)):
        color = PORTFOLIO_COLORS[idx % len(PORTFOLIO_COLORS)]
        fig.add_trace(go.Scatter(
            x=ages,
            y=[p.get(name) for p in points],
            mode='lines',
            line=dict(width=0.5, color=color),
            stackgroup='one',
            name=name,
            hovertemplate=f'<b>{name}</b><br>Age: %{{x:.1f}}<br>Mean: $%{{y:,.0f}}<extra></extra>'
        ))

    if any(AGGREGATED_SERIES in p for p in points):
        fig.add_trace(go.Scatter(
            x=ages,
            y=[p.get(AGGREGATED_SERIES) for p in points],
            mode='lines',
            line=dict(color='black', width=2, dash='dash'),
            name=AGGREGATED_SERIES,
            hovertemplate='<b>Aggregated</b><br>Age: %{x:.1f}<br>Mean: $%{y:,.0f}<extra></extra>'
        ))

    fig.update_layout(
        title=f"{title} ({'Real' if use_real else 'Nominal'})",
        xaxis_title="Age",
        yaxis_title="Mean Portfolio Value ($)",
        template="plotly_white",
        hovermode="x unified",
        height=height,
        legend=dict(x=0, y=1, xanchor="left", yanchor="top", bgcolor="rgba(255,255,255,0.9)")
    )
    return fig


# ------------------------------------------------------------------
# Risk of failure over time
# ------------------------------------------------------------------
def create_risk_figure(points, height=450):
    title = "Risk of Failure"
    if not points:
        return _empty_figure(title, "No destitution data available", height=height)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[p["age"] for p in points],
        y=[p["risk"] for p in points],
        mode='lines',
        line=dict(color='#ef4444', width=3),
        name="Probability of Destitution",
        hovertemplate='Age: %{x:.1f}<br>Risk: %{y:.1f}%<extra></extra>'
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Age",
        yaxis_title="Probability of Destitution (%)",
        yaxis=dict(range=[0, 100], ticksuffix="%"),
        template="plotly_white",
        height=height,
    )
    return fig


# ------------------------------------------------------------------
# Final wealth distribution
# ------------------------------------------------------------------
def create_histogram_figure(bins, use_real, height=450):
    title = "Final Wealth Distribution"
    if not bins:
        return _empty_figure(title, "No distribution data available", height=height)

    fig = go.Figure()
    # Numeric midpoints on x: rounded labels of narrow bins can repeat
    fig.add_trace(go.Bar(
        x=[(b.min + b.max) / 2 for b in bins],
        y=[b.count for b in bins],
        marker_color='#3b82f6',
        customdata=[[b.label, format_currency_output(b.min), format_currency_output(b.max)] for b in bins],
        name="Simulations",
        hovertemplate='<b>%{customdata[0]}</b><br>%{customdata[1]} to %{customdata[2]}<br>Simulations: %{y}<extra></extra>'
    ))
    fig.update_layout(
        title=f"{title} ({'Real' if use_real else 'Nominal'})",
        xaxis_title="Final Wealth",
        xaxis=dict(tickprefix="$", tickformat=",.0f"),
        yaxis_title="Number of Simulations",
        bargap=0.05,
        template="plotly_white",
        height=height,
    )
    return fig


def get_figure_ids():
    return [
        "projection-chart", "growth-chart", "risk-chart", "distribution-chart",
    ]
