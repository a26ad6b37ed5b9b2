# utils/ui_components.py
import numpy as np
from dash import html

from utils.currency import format_currency_output, format_percent_output

NO_DATA_COLOR = '#888'

# (lower bound %, colour), checked top down
SUCCESS_BANDS = (
    (85.0, '#1a7f37'),
    (70.0, '#c77c02'),
    (0.0, '#c62828'),
)


def success_color(probability):
    """Header colour for a probability of success given in percent (0-100)."""
    if probability is None or isinstance(probability, bool):
        return NO_DATA_COLOR
    try:
        probability = float(probability)
    except (TypeError, ValueError):
        return NO_DATA_COLOR
    if not np.isfinite(probability):
        return NO_DATA_COLOR

    for lower, color in SUCCESS_BANDS:
        if probability >= lower:
            return color
    return SUCCESS_BANDS[-1][1]


def create_rate_header(success_rate, wealth_summary=None):
    """Creates the header Div with probability of success and final wealth summary."""
    if success_rate is None:
        return html.Div(
            "Upload simulation results to see the probability of success",
            style={'textAlign': 'center', 'padding': '15px', 'color': '#666'}
        )

    style = {
        "color": success_color(success_rate),
        "fontWeight": "bold",
        "fontSize": "22px",
        "margin": "0 10px",
        "textAlign": "center"
    }
    children = [html.H3(f"Probability of Success: {format_percent_output(success_rate / 100)}", style=style)]

    if wealth_summary:
        children.append(html.H3(
            f"Median Final Wealth: {format_currency_output(wealth_summary['median'])}",
            style={**style, "color": "#333"}
        ))

    return html.Div(children, style={'display': 'flex', 'justifyContent': 'center', 'padding': '15px'})
