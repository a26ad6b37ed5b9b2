import pytest

from models import Plan, SimulationResult


@pytest.fixture
def raw_result():
    return {
        "timestep_unit": "annual",
        "aggregated": {
            "timesteps": [0, 1, 2],
            "real": {
                "mean": [100, 110, 121],
                "percentiles": {
                    "50.0": [100, 108, 120],
                    "25.0": [90, 95, 100],
                    "75.0": [110, 120, 130],
                },
                "simulation_data": [
                    [100, 105, 90],
                    [100, 115, 130],
                    [100, 110, 150],
                ],
            },
            "nominal": {
                "mean": [100, 113, 128],
                "percentiles": {
                    "50.0": [100, 111, 126],
                },
            },
            "destitution": [0.0, 0.05, 0.1],
        },
        "individual_portfolios": {
            "1": {
                "timesteps": [0, 1, 2],
                "real": {"mean": [60, 66, 72]},
                "nominal": {"mean": [60, 68, 76]},
            },
            "2": {
                "timesteps": [0, 1, 2],
                "real": {"mean": [40, 44, 49]},
                "nominal": {"mean": [40, 45, 52]},
            },
        },
    }


@pytest.fixture
def result(raw_result):
    return SimulationResult.from_dict(raw_result)


@pytest.fixture
def plan():
    return Plan(start_age=60, plan_end_age=62)
