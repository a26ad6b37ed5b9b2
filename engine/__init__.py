# engine/__init__.py

# Chart series builders used by the results callbacks
from .chart_series import (
    build_growth_series,
    build_percentile_series,
    build_risk_series,
    portfolio_series_names,
    resolve_portfolio_name,
)
from .histogram import build_histogram, extract_final_wealth
from .percentiles import probability_of_success, summarize_final_wealth
from .timestep import timestep_to_age
