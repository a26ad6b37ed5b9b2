# callbacks/results_callbacks.py
import logging

from dash import Input, Output

from engine import (
    build_growth_series,
    build_histogram,
    build_percentile_series,
    build_risk_series,
    extract_final_wealth,
    portfolio_series_names,
    probability_of_success,
    summarize_final_wealth,
)
from models import Plan
from utils.plotting import (
    create_growth_figure,
    create_histogram_figure,
    create_projection_figure,
    create_risk_figure,
    get_figure_ids,
)
from utils.result_loader import ResultLoadError, parse_result_dict, portfolio_names_from_rows
from utils.ui_components import create_rate_header

logger = logging.getLogger(__name__)


def build_dashboard(raw_result, start_age, plan_end_age, percentile_low, percentile_high, value_mode, portfolio_rows):
    """
    Rebuilds the success header and every figure from the current inputs.
    Missing or unreadable results give empty-state figures.
    """
    use_real = value_mode != "nominal"
    plan = Plan.from_dict({"start_age": start_age, "plan_end_age": plan_end_age})

    result = None
    if raw_result:
        try:
            result = parse_result_dict(raw_result).result
        except ResultLoadError as e:
            logger.warning("Stored simulation data is unusable: %s", e)

    names = portfolio_names_from_rows(portfolio_rows)
    final_wealth = extract_final_wealth(result, use_real)

    figures = {
        "projection-chart": create_projection_figure(
            build_percentile_series(result, plan, percentile_low, percentile_high, use_real),
            percentile_low, percentile_high, use_real),
        "growth-chart": create_growth_figure(
            build_growth_series(result, plan, names, use_real),
            portfolio_series_names(result, names), use_real),
        "risk-chart": create_risk_figure(build_risk_series(result, plan)),
        "distribution-chart": create_histogram_figure(build_histogram(final_wealth), use_real),
    }

    header = create_rate_header(
        probability_of_success(result, plan),
        summarize_final_wealth(final_wealth) if final_wealth else None,
    )
    return header, [figures[fig_id] for fig_id in get_figure_ids()]


def register_results_callbacks(app):

    FIGURE_OUTPUTS = [Output(fig_id, "figure") for fig_id in get_figure_ids()]

    @app.callback(
        Output("success_header", "children"),
        *FIGURE_OUTPUTS,
        Input("simulation-data-store", "data"),
        Input("start_age", "value"),
        Input("plan_end_age", "value"),
        Input("percentile-low", "value"),
        Input("percentile-high", "value"),
        Input("value-mode", "value"),
        Input("portfolio-grid", "rowData"),
    )
    def update_results(raw_result, start_age, plan_end_age, percentile_low, percentile_high, value_mode, portfolio_rows):
        header, figure_list = build_dashboard(
            raw_result, start_age, plan_end_age, percentile_low, percentile_high, value_mode, portfolio_rows
        )
        return header, *figure_list
