# engine/series_selector.py
#
# Read-only accessors for the statistic arrays inside a SimulationResult.
# Anything missing comes back as an empty list; consumers check length
# (or use value_at) before indexing.
#

import numbers
from typing import Any, List, Optional, Sequence

from config.chart_settings import MEDIAN_KEY
from models import SimulationResult, ValueSet

STATISTICS = ("mean", "median", "percentile", "destitution")


def percentile_key(percentile: float) -> str:
    """Backend percentile keys carry one decimal place: 50 -> '50.0'."""
    return f"{float(percentile):.1f}"


def select_value_set(result: Optional[SimulationResult], use_real: bool) -> Optional[ValueSet]:
    if result is None or result.aggregated is None:
        return None
    return result.aggregated.real if use_real else result.aggregated.nominal


def select_statistic(
    result: Optional[SimulationResult],
    use_real: bool,
    statistic: str,
    percentile: Optional[float] = None,
) -> List[float]:
    """
    Returns the array backing a statistic, or [] when any level is missing.

    statistic is one of 'mean', 'median', 'percentile' (needs `percentile`)
    or 'destitution'. Destitution does not depend on the value mode.
    """
    if statistic not in STATISTICS:
        raise ValueError(f"Unknown statistic: {statistic!r}")
    if statistic == "percentile" and percentile is None:
        raise ValueError("statistic 'percentile' requires a percentile value")

    if result is None or result.aggregated is None:
        return []

    if statistic == "destitution":
        return result.aggregated.destitution or []

    values = select_value_set(result, use_real)
    if values is None:
        return []
    if statistic == "mean":
        return values.mean
    key = MEDIAN_KEY if statistic == "median" else percentile_key(percentile)
    return values.percentiles.get(key, [])


def value_at(values: Sequence[Any], index: Any, default: Any = 0) -> Any:
    """
    Guarded element access. Out-of-range, negative or non-integer indices and
    missing (None) elements all give `default`.
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        if isinstance(index, float) and index.is_integer():
            index = int(index)
        else:
            return default
    if index < 0 or index >= len(values):
        return default
    value = values[index]
    return default if value is None else value
