# engine/percentiles.py
#
# Summary statistics over final wealth outcomes and the risk curve.
#

from typing import Dict, Optional, Sequence

import numpy as np

from engine.chart_series import build_risk_series
from models import Plan, SimulationResult


def calculate_percentile(sorted_values: Sequence[float], percentile: float) -> float:
    """
    Percentile of an ascending sequence, interpolating linearly between the
    two closest ranks. Empty input gives 0.
    """
    n = len(sorted_values)
    if n == 0:
        return 0.0
    if percentile <= 0:
        return float(sorted_values[0])
    if percentile >= 100:
        return float(sorted_values[n - 1])

    index = (percentile / 100) * (n - 1)
    lower = int(np.floor(index))
    upper = int(np.ceil(index))
    if lower == upper:
        return float(sorted_values[lower])
    weight = index - lower
    return float(sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight)


def calculate_mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def calculate_median(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return calculate_percentile(np.sort(np.asarray(values, dtype=float)), 50)


def summarize_final_wealth(values: Sequence[float]) -> Dict[str, float]:
    sorted_values = np.sort(np.asarray(values, dtype=float))
    return {
        "mean": calculate_mean(sorted_values),
        "median": calculate_percentile(sorted_values, 50),
        "p10": calculate_percentile(sorted_values, 10),
        "p90": calculate_percentile(sorted_values, 90),
    }


def probability_of_success(result: Optional[SimulationResult], plan: Optional[Plan] = None) -> Optional[float]:
    """
    Percent of simulations not destitute at the end of the plan, None without data.
    With a plan this is the complement of the last point of the risk series, so
    timesteps past plan_end_age are ignored. Without one the final timestep is used.
    """
    if plan is not None:
        points = build_risk_series(result, plan)
        if not points:
            return None
        return 100.0 - points[-1]["risk"]

    if result is None or result.aggregated is None:
        return None
    destitution = result.aggregated.destitution
    if not destitution or destitution[-1] is None:
        return None
    return (1.0 - destitution[-1]) * 100
