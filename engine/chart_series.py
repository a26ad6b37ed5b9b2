# engine/chart_series.py
#
# Turns precomputed backend statistics into chart-ready series.
# Each point is a flat dict: {"age": ..., <series name>: value, ...}.
#
# Percentile and mean arrays are indexed by timestep VALUE, while the
# destitution array is indexed by POSITION in the timesteps list.
#

import logging
from typing import Any, Dict, List, Mapping, Optional

from config.chart_settings import (
    AGGREGATED_SERIES,
    DEFAULT_PORTFOLIO_ID,
    DEFAULT_PORTFOLIO_NAME,
    MEDIAN_KEY,
)
from engine.series_selector import percentile_key, select_statistic, select_value_set, value_at
from engine.timestep import is_timestep, timestep_to_age
from models import Plan, SimulationResult

logger = logging.getLogger(__name__)

ChartDataPoint = Dict[str, Any]

_MISSING = object()


def _within_plan(points: List[ChartDataPoint], plan: Plan) -> List[ChartDataPoint]:
    return [p for p in points if p["age"] <= plan.plan_end_age]


# ------------------------------------------------------------------
# Percentile projection (mean, median and two chosen percentiles)
# ------------------------------------------------------------------
def build_percentile_series(
    result: Optional[SimulationResult],
    plan: Optional[Plan],
    percentile_a: float,
    percentile_b: float,
    use_real: bool,
) -> List[ChartDataPoint]:
    if result is None or plan is None:
        logger.debug("No simulation result or plan provided")
        return []

    aggregated = result.aggregated
    if aggregated is None:
        logger.debug("No aggregated results found")
        return []

    if select_value_set(result, use_real) is None:
        logger.debug("No %s values found", "real" if use_real else "nominal")
        return []

    timesteps = aggregated.timesteps
    if not timesteps:
        logger.debug("No timesteps found")
        return []

    mean = select_statistic(result, use_real, "mean")
    median = select_statistic(result, use_real, "median")
    low = select_statistic(result, use_real, "percentile", percentile_a)
    high = select_statistic(result, use_real, "percentile", percentile_b)

    logger.debug(
        "Building percentile series: %d timesteps, keys %s/%s/%s, found %s",
        len(timesteps), MEDIAN_KEY, percentile_key(percentile_a), percentile_key(percentile_b),
        [bool(median), bool(low), bool(high)],
    )

    points = [
        {
            "age": timestep_to_age(t, plan.start_age, result.timestep_unit),
            "mean": value_at(mean, t),
            "median": value_at(median, t),
            "percentile1": value_at(low, t),
            "percentile2": value_at(high, t),
        }
        for t in timesteps
        if is_timestep(t)
    ]
    return _within_plan(points, plan)


# ------------------------------------------------------------------
# Growth of wealth (one series per portfolio plus the aggregate)
# ------------------------------------------------------------------
def resolve_portfolio_name(portfolio_id: str, portfolio_name_by_id: Optional[Mapping[str, str]] = None) -> str:
    """Display name for a portfolio id; blank names fall back like missing ones."""
    name = (portfolio_name_by_id or {}).get(str(portfolio_id))
    if name:
        return name
    if portfolio_id == DEFAULT_PORTFOLIO_ID:
        return DEFAULT_PORTFOLIO_NAME
    return f"{DEFAULT_PORTFOLIO_NAME} {portfolio_id}"


def portfolio_series_names(
    result: Optional[SimulationResult],
    portfolio_name_by_id: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Series names in legend order (the order of individual_portfolios)."""
    if result is None:
        return []
    return [resolve_portfolio_name(pid, portfolio_name_by_id) for pid in result.individual_portfolios]


def build_growth_series(
    result: Optional[SimulationResult],
    plan: Optional[Plan],
    portfolio_name_by_id: Optional[Mapping[str, str]],
    use_real: bool,
) -> List[ChartDataPoint]:
    if result is None or plan is None:
        return []

    portfolios = result.individual_portfolios
    if not portfolios:
        logger.debug("No individual portfolio results found")
        return []

    # All portfolios share the first portfolio's timestep grid
    first = next(iter(portfolios.values()))
    timesteps = first.timesteps
    if not timesteps:
        logger.debug("First portfolio has no timesteps")
        return []

    portfolio_means = []
    for pid, portfolio in portfolios.items():
        values = portfolio.real if use_real else portfolio.nominal
        portfolio_means.append((
            resolve_portfolio_name(pid, portfolio_name_by_id),
            values.mean if values is not None else [],
        ))
    aggregated_mean = select_statistic(result, use_real, "mean")

    points = []
    for t in timesteps:
        if not is_timestep(t):
            continue
        point: ChartDataPoint = {"age": timestep_to_age(t, plan.start_age, result.timestep_unit)}
        for name, mean in portfolio_means:
            value = value_at(mean, t, _MISSING)
            if value is not _MISSING:
                point[name] = value
        value = value_at(aggregated_mean, t, _MISSING)
        if value is not _MISSING:
            point[AGGREGATED_SERIES] = value
        points.append(point)

    return _within_plan(points, plan)


# ------------------------------------------------------------------
# Risk of failure (probability of destitution, as a percentage)
# ------------------------------------------------------------------
def build_risk_series(result: Optional[SimulationResult], plan: Optional[Plan]) -> List[ChartDataPoint]:
    if result is None or plan is None:
        return []

    aggregated = result.aggregated
    if aggregated is None:
        logger.debug("No aggregated results found")
        return []

    destitution = aggregated.destitution
    timesteps = aggregated.timesteps
    if destitution is None:
        logger.debug("No destitution data found")
        return []
    if not timesteps:
        logger.debug("No timesteps found")
        return []

    if len(destitution) != len(timesteps):
        logger.warning(
            "Destitution and timesteps arrays have different lengths (%d vs %d)",
            len(destitution), len(timesteps),
        )

    # Positional: destitution[i] belongs to timesteps[i], even when timesteps[i] is skipped
    points = [
        {
            "age": timestep_to_age(t, plan.start_age, result.timestep_unit),
            "risk": value_at(destitution, index) * 100,
        }
        for index, t in enumerate(timesteps)
        if is_timestep(t)
    ]
    return _within_plan(points, plan)
