from models import HistogramBin
from utils.plotting import (
    create_growth_figure,
    create_histogram_figure,
    create_projection_figure,
    create_risk_figure,
    get_figure_ids,
)


def _annotation_texts(fig):
    return [a.text for a in fig.layout.annotations]


def test_empty_inputs_show_no_data():
    assert _annotation_texts(create_projection_figure([], 10, 90, True)) == ["No data available"]
    assert _annotation_texts(create_growth_figure([], [], True)) == ["No portfolio data available"]
    assert _annotation_texts(create_risk_figure([])) == ["No destitution data available"]
    assert _annotation_texts(create_histogram_figure([], True)) == ["No distribution data available"]


def test_projection_figure_traces():
    points = [
        {"age": 60, "mean": 100, "median": 100, "percentile1": 90, "percentile2": 110},
        {"age": 61, "mean": 110, "median": 108, "percentile1": 95, "percentile2": 120},
    ]
    fig = create_projection_figure(points, 25, 75, False)
    assert [t.name for t in fig.data] == ["75th Percentile", "25th Percentile", "Median", "Mean"]
    assert list(fig.data[2].y) == [100, 108]
    assert "Nominal" in fig.layout.title.text


def test_growth_figure_stacks_portfolios_and_adds_aggregate():
    points = [
        {"age": 60, "Growth": 100, "Income": 50, "Aggregated": 150},
        {"age": 61, "Growth": 200, "Income": 60, "Aggregated": 260},
    ]
    fig = create_growth_figure(points, ["Growth", "Income"], True)
    assert [t.name for t in fig.data] == ["Growth", "Income", "Aggregated"]
    assert fig.data[0].stackgroup == "one"
    assert fig.data[2].stackgroup is None


def test_risk_figure():
    fig = create_risk_figure([{"age": 60, "risk": 0.0}, {"age": 61, "risk": 12.5}])
    assert list(fig.data[0].y) == [0.0, 12.5]


def test_histogram_figure():
    bins = [HistogramBin(0, 10, 3, "$5"), HistogramBin(10, 20, 1, "$15")]
    fig = create_histogram_figure(bins, True)
    assert list(fig.data[0].x) == [5, 15]
    assert list(fig.data[0].y) == [3, 1]


def test_figure_ids_are_unique():
    ids = get_figure_ids()
    assert len(ids) == len(set(ids)) == 4
