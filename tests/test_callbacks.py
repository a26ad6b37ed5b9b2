import base64
import json

import pytest

from callbacks.results_callbacks import build_dashboard
from callbacks.upload_callbacks import handle_upload
from utils.result_loader import ResultLoadError


def _upload(data):
    return "data:application/json;base64," + base64.b64encode(json.dumps(data).encode()).decode()


def test_build_dashboard_with_results(raw_result):
    header, figures = build_dashboard(raw_result, 60, 62, 25, 75, "real", [{"id": "1", "name": "Growth"}])
    projection, growth, risk, distribution = figures

    assert list(projection.data[0].y) == [110, 120, 130]
    assert [t.name for t in growth.data] == ["Growth", "Portfolio 2", "Aggregated"]
    assert [round(y, 6) for y in risk.data[0].y] == [0, 5, 10]
    # 150 is the top outcome and gets clipped
    assert sum(distribution.data[0].y) == 2
    assert "Probability of Success: 90.0%" in str(header)


def test_build_dashboard_before_any_upload():
    header, figures = build_dashboard(None, 60, 95, 10, 90, "real", [])
    assert len(figures) == 4
    assert all(len(fig.data) == 0 for fig in figures)
    assert "Upload simulation results" in str(header)


def test_build_dashboard_with_blank_ages(raw_result):
    _, figures = build_dashboard(raw_result, None, 95, 10, 90, "nominal", None)
    assert all(len(fig.data) == 0 for fig in figures)


def test_handle_upload(raw_result):
    data, status, rows = handle_upload(_upload({"success": True, "result": raw_result}), "run.json")
    assert data["result"] == raw_result
    assert status == "Loaded run.json: 3 timesteps, 2 portfolio(s)"
    assert rows == [{"id": "1", "name": ""}, {"id": "2", "name": ""}]


def test_handle_upload_failed_simulation():
    _, status, rows = handle_upload(_upload({"success": False, "error": "boom"}), "bad.json")
    assert "simulation failed on the backend (boom)" in status
    assert rows == []


def test_handle_upload_rejects_non_json():
    contents = "data:text/plain;base64," + base64.b64encode(b"hello").decode()
    with pytest.raises(ResultLoadError):
        handle_upload(contents, "notes.txt")


def test_build_dashboard_header_uses_plan_end(raw_result):
    header, _ = build_dashboard(raw_result, 60, 61, 25, 75, "real", [])
    assert "Probability of Success: 95.0%" in str(header)
