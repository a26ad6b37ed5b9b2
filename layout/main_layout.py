# main_layout.py
from dash import dcc
from dash import html

import dash_ag_grid as dag

from config.chart_settings import AVAILABLE_PERCENTILES
from utils.xml_loader import DEFAULT_PLAN
from utils.currency import pretty_age_input

from layout.results_layout import create_results_layout

BUTTON_STYLE = {
    'padding': '12px 20px',
    'fontSize': '16px',
    'fontWeight': 'bold',
    'backgroundColor': '#3498db',
    'color': 'white',
    'border': 'none',
    'borderRadius': '8px',
    'cursor': 'pointer',
    'boxShadow': '0 4px 8px rgba(0,0,0,0.1)',
    'whiteSpace': 'nowrap',
    'height': '50px',
}

PERCENTILE_OPTIONS = [{'label': f"{p}th", 'value': p} for p in AVAILABLE_PERCENTILES]


def _labelled_dropdown(id, label, value):
    return [
        html.Label(label, style={'fontWeight': 'bold', 'fontSize': 16, 'display': 'block', 'marginBottom': '6px'}),
        dcc.Dropdown(id=id, options=PERCENTILE_OPTIONS, value=value, clearable=False),
    ]


# ----------------------------------------------------------------------
# Application Layout Definition
# ----------------------------------------------------------------------

main_layout = html.Div(
    style={'fontFamily': 'Arial, sans-serif', 'margin': '2%', 'backgroundColor': '#f9f9fb'},
    children=[
        html.H1(
            "Monte Carlo Results Dashboard",
            style={'textAlign': 'center', 'color': 'black', 'marginBottom': 0}
        ),

        # raw simulation response as uploaded (JSON)
        dcc.Store(id="simulation-data-store"),

        # ----------------------------------------------------------------------
        # ROW 1: Upload simulation results
        # ----------------------------------------------------------------------
        html.Div([
            dcc.Upload(
                id='upload-results',
                children=html.Button("Load Simulation Results (JSON)", style={**BUTTON_STYLE, 'backgroundColor': '#f39c12'}),
                multiple=False,
                accept=".json",
            ),
            html.Div(id='upload-status', style={'fontSize': '16px', 'color': '#555'}),
        ], style={
            'display': 'flex',
            'alignItems': 'center',
            'gap': '20px',
            'margin': '30px 0',
            'flexWrap': 'wrap',
        }),

        # ----------------------------------------------------------------------
        # ROW 2: Plan and chart controls
        # ----------------------------------------------------------------------
        html.Div([
            html.Div(
                pretty_age_input('start_age', value=DEFAULT_PLAN['start_age'], label="Start Age"),
                style={'flex': '1', 'minWidth': '150px', 'textAlign': 'center'}
            ),
            html.Div(
                pretty_age_input('plan_end_age', value=DEFAULT_PLAN['plan_end_age'], label="Plan End Age"),
                style={'flex': '1', 'minWidth': '150px', 'textAlign': 'center'}
            ),
            html.Div(
                _labelled_dropdown('percentile-low', "Lower Percentile", DEFAULT_PLAN['percentile_low']),
                style={'flex': '1', 'minWidth': '150px'}
            ),
            html.Div(
                _labelled_dropdown('percentile-high', "Upper Percentile", DEFAULT_PLAN['percentile_high']),
                style={'flex': '1', 'minWidth': '150px'}
            ),
            html.Div([
                html.Label("Values", style={'fontWeight': 'bold', 'fontSize': 16, 'display': 'block', 'marginBottom': '6px'}),
                dcc.RadioItems(
                    id='value-mode',
                    options=[
                        {'label': ' Real (inflation-adjusted)', 'value': 'real'},
                        {'label': ' Nominal', 'value': 'nominal'},
                    ],
                    value='real' if DEFAULT_PLAN['use_real'] else 'nominal',
                    labelStyle={'display': 'block'},
                ),
            ], style={'flex': '1', 'minWidth': '200px'}),
        ], style={
            'display': 'flex',
            'gap': '20px',
            'alignItems': 'flex-end',
            'marginBottom': '30px',
            'flexWrap': 'wrap',
        }),

        # ----------------------------------------------------------------------
        # ROW 3: Portfolio names (individual portfolios arrive keyed by id)
        # ----------------------------------------------------------------------
        html.Div([
            html.H3("Portfolio Names", style={'marginTop': 0}),
            dag.AgGrid(
                id='portfolio-grid',
                columnDefs=[
                    {"field": "id", "headerName": "Portfolio ID", "editable": False, "width": 160},
                    {"field": "name", "headerName": "Display Name", "editable": True, "flex": 1},
                ],
                rowData=[],
                defaultColDef={"resizable": True, "sortable": False},
                dashGridOptions={"rowHeight": 40, "animateRows": False, "singleClickEdit": True},
                style={"height": 220},
                className="ag-theme-alpine",
            ),
        ], style={
            'padding': '25px',
            'border': '2px solid #ddd',
            'borderRadius': '12px',
            'backgroundColor': '#fff',
            'marginBottom': '30px'
        }),

        # Probability of success header
        html.Div(id="success_header"),

        create_results_layout(),
    ]
)
