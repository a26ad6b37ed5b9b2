# results_layout.py
from dash import html, dcc

from utils.plotting import get_figure_ids


def create_results_layout():
    """
    Static layout for the plots section only.
    """
    return html.Div(
        [html.Div([dcc.Graph(id=fig_id)], style={'margin': '40px 0'}) for fig_id in get_figure_ids()],
        style={'maxWidth': '1400px', 'margin': '0 auto'}
    )
