# engine/histogram.py
#
# Final wealth distribution: clip the top tail of outcomes, then count
# outcomes in equal-width bins.
#

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from config.chart_settings import MAX_HISTOGRAM_BINS, MIN_HISTOGRAM_BINS, OUTLIER_CLIP_QUANTILE
from engine.series_selector import select_value_set
from models import HistogramBin, SimulationResult
from utils.currency import format_currency_output

logger = logging.getLogger(__name__)


def clip_top_outliers(values: Sequence[float], quantile: float = OUTLIER_CLIP_QUANTILE) -> np.ndarray:
    """
    Drops the outcomes above the `quantile` cutoff (top ~1% by default).
    The cutoff is the value at sorted index floor(n * quantile) - 1, or the
    largest value when that index would be negative. NaN and infinite
    outcomes are dropped first. Input order is kept.
    """
    arr = np.asarray(values, dtype=float)
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return arr

    sorted_values = np.sort(arr)
    n = sorted_values.size
    cutoff_index = math.floor(n * quantile) - 1
    cutoff_value = sorted_values[cutoff_index] if cutoff_index >= 0 else sorted_values[n - 1]
    return arr[arr <= cutoff_value]


def default_bin_count(n_values: int) -> int:
    """Square-root rule, kept between MIN_HISTOGRAM_BINS and MAX_HISTOGRAM_BINS."""
    return int(min(MAX_HISTOGRAM_BINS, max(MIN_HISTOGRAM_BINS, round(math.sqrt(n_values)))))


def build_histogram(values: Sequence[float], num_bins: Optional[int] = None) -> List[HistogramBin]:
    """
    Bins final wealth outcomes for the distribution chart.

    Args:
        values: Raw outcomes (not modified).
        num_bins: Number of equal-width bins; chosen from the clipped sample
            size when omitted.

    Returns:
        One HistogramBin per bin, labelled with its currency-formatted midpoint.
        The maximum value lands in the last bin. When every retained value is
        equal the bins have zero width and all values land in bin 0.
    """
    if num_bins is not None and num_bins < 1:
        raise ValueError(f"num_bins must be positive, got {num_bins}")

    retained = clip_top_outliers(values)
    if retained.size == 0:
        return []

    if num_bins is None:
        num_bins = default_bin_count(retained.size)

    vmin = float(retained.min())
    vmax = float(retained.max())
    bin_width = (vmax - vmin) / num_bins

    if bin_width > 0:
        indices = np.floor((retained - vmin) / bin_width).astype(int)
        indices = np.minimum(indices, num_bins - 1)
    else:
        indices = np.zeros(retained.size, dtype=int)
    counts = np.bincount(indices, minlength=num_bins)

    logger.debug("Histogram: %d of %d values retained, %d bins", retained.size, len(values), num_bins)

    bins = []
    for i in range(num_bins):
        lo = vmin + i * bin_width
        hi = vmin + (i + 1) * bin_width
        bins.append(HistogramBin(
            min=lo,
            max=hi,
            count=int(counts[i]),
            label=format_currency_output((lo + hi) / 2),
        ))
    return bins


def extract_final_wealth(result: Optional[SimulationResult], use_real: bool) -> List[float]:
    """
    Final value of every simulated path (last column of simulation_data).
    Paths that stop short of the final column are skipped.
    """
    values = select_value_set(result, use_real)
    if values is None or not values.simulation_data:
        return []

    first = values.simulation_data[0]
    if not isinstance(first, (list, tuple)) or len(first) == 0:
        return []
    final_index = len(first) - 1

    return [
        path[final_index]
        for path in values.simulation_data
        if isinstance(path, (list, tuple)) and len(path) > final_index and path[final_index] is not None
    ]
