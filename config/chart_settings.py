# =============================================================================
# Chart settings used when turning simulation results into chart series
# =============================================================================

# Percentiles published by the simulation backend (1, 99 and every 5th)
AVAILABLE_PERCENTILES = [1, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 99]
MEDIAN_KEY = "50.0"
DEFAULT_PERCENTILES = (10, 90)

# Timesteps
TIMESTEP_UNITS = ("monthly", "annual")
DEFAULT_TIMESTEP_UNIT = "annual"
MONTHS_PER_YEAR = 12

# Final wealth histogram
OUTLIER_CLIP_QUANTILE = 0.99   # keep everything up to the 99th percentile outcome
MIN_HISTOGRAM_BINS = 10
MAX_HISTOGRAM_BINS = 50

# Growth of wealth series
AGGREGATED_SERIES = "Aggregated"
DEFAULT_PORTFOLIO_ID = "default"
DEFAULT_PORTFOLIO_NAME = "Portfolio"

PORTFOLIO_COLORS = [
    '#3b82f6',  # Blue
    '#10b981',  # Green
    '#f59e0b',  # Amber
    '#ef4444',  # Red
    '#8b5cf6',  # Purple
    '#06b6d4',  # Cyan
    '#f97316',  # Orange
    '#ec4899',  # Pink
]
