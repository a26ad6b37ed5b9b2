from models import HistogramBin, Plan, SimulationResponse, SimulationResult


def test_from_dict_reads_full_result(result):
    assert result.timestep_unit == "annual"
    assert result.aggregated.timesteps == [0, 1, 2]
    assert result.aggregated.real.percentiles["25.0"] == [90, 95, 100]
    assert result.aggregated.destitution == [0.0, 0.05, 0.1]
    assert list(result.individual_portfolios) == ["1", "2"]
    assert result.individual_portfolios["2"].nominal.mean == [40, 45, 52]


def test_missing_timestep_unit_defaults_to_annual():
    assert SimulationResult.from_dict({}).timestep_unit == "annual"
    assert SimulationResult.from_dict({"timestep_unit": "weekly"}).timestep_unit == "annual"
    assert SimulationResult.from_dict({"timestep_unit": "monthly"}).timestep_unit == "monthly"


def test_partial_result_never_raises():
    result = SimulationResult.from_dict({
        "aggregated": {"timesteps": "not a list", "real": None, "destitution": 3},
        "individual_portfolios": {"default": None},
    })
    assert result.aggregated.timesteps == []
    assert result.aggregated.real is None
    assert result.aggregated.destitution is None
    assert result.individual_portfolios["default"].timesteps == []


def test_non_dict_result_is_none():
    assert SimulationResult.from_dict(None) is None
    assert SimulationResult.from_dict([1, 2]) is None


def test_response_envelope():
    response = SimulationResponse.from_dict({"success": False, "error": "boom"})
    assert not response.success
    assert response.result is None
    assert response.error == "boom"


def test_plan_from_dict():
    assert Plan.from_dict({"start_age": "60", "plan_end_age": 95}) == Plan(60, 95)
    assert Plan.from_dict({"start_age": None, "plan_end_age": 95}) is None
    assert Plan.from_dict({"start_age": 60}) is None
    assert Plan.from_dict(None) is None


def test_histogram_bin_to_dict():
    b = HistogramBin(min=0.0, max=1.0, count=2, label="$1")
    assert b.to_dict() == {"min": 0.0, "max": 1.0, "count": 2, "label": "$1"}
