# engine/timestep.py
#
# Converts simulation timesteps into ages for the chart x-axis.
#

import math
from numbers import Real
from typing import Any, Literal

from config.chart_settings import MONTHS_PER_YEAR

TimestepUnit = Literal["monthly", "annual"]


def is_timestep(value: Any) -> bool:
    """True for a finite real number (bools and None excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def timestep_to_age(timestep: float, start_age: float, unit: TimestepUnit) -> float:
    """
    Converts a timestep value to an age in years.

    Args:
        timestep: The timestep value (0, 1, 2, ...).
        start_age: Age at timestep 0.
        unit: 'monthly' or 'annual'. Fractional ages are expected for monthly grids.
    """
    if unit == "monthly":
        return start_age + timestep / MONTHS_PER_YEAR
    return start_age + timestep
