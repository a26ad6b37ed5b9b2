import pytest

from engine.percentiles import (
    calculate_mean,
    calculate_median,
    calculate_percentile,
    probability_of_success,
    summarize_final_wealth,
)
from models import Plan, SimulationResult


def test_calculate_percentile_interpolates():
    assert calculate_percentile([1, 2, 3, 4], 50) == pytest.approx(2.5)
    assert calculate_percentile([10, 20, 30], 50) == 20
    assert calculate_percentile([0, 100], 25) == pytest.approx(25)


def test_calculate_percentile_bounds():
    assert calculate_percentile([], 50) == 0
    assert calculate_percentile([1, 2, 3], 0) == 1
    assert calculate_percentile([1, 2, 3], 100) == 3
    assert calculate_percentile([1, 2, 3], 150) == 3


def test_mean_and_median():
    assert calculate_mean([]) == 0
    assert calculate_mean([1, 2, 3]) == 2
    assert calculate_median([]) == 0
    assert calculate_median([3, 1, 2]) == 2
    assert calculate_median([4, 1, 3, 2]) == pytest.approx(2.5)


def test_summarize_final_wealth():
    summary = summarize_final_wealth([float(v) for v in range(11)])
    assert summary == {"mean": 5.0, "median": 5.0, "p10": 1.0, "p90": 9.0}


def test_probability_of_success(result):
    assert probability_of_success(result) == pytest.approx(90.0)
    assert probability_of_success(None) is None
    assert probability_of_success(SimulationResult.from_dict({"aggregated": {"destitution": []}})) is None


def test_probability_of_success_stops_at_plan_end():
    result = SimulationResult.from_dict({
        "aggregated": {"timesteps": [0, 1, 2, 3], "destitution": [0.0, 0.1, 0.5, 0.9]},
    })
    assert probability_of_success(result, Plan(60, 61)) == pytest.approx(90.0)
    assert probability_of_success(result, Plan(60, 95)) == pytest.approx(10.0)
    assert probability_of_success(result) == pytest.approx(10.0)


def test_probability_of_success_with_plan_and_no_data(plan):
    assert probability_of_success(None, plan) is None
    assert probability_of_success(SimulationResult.from_dict({"aggregated": {"timesteps": [0, 1]}}), plan) is None
    # Every timestep lies past the plan end
    late = SimulationResult.from_dict({"aggregated": {"timesteps": [5, 6], "destitution": [0.1, 0.2]}})
    assert probability_of_success(late, Plan(60, 62)) is None
