# utils/result_loader.py
#
# Loads saved simulation responses (JSON) from disk or from dcc.Upload.
#

import base64
import binascii
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from models import SimulationResponse

logger = logging.getLogger(__name__)


class ResultLoadError(ValueError):
    """Raised when a file cannot be read as a simulation response."""


def parse_result_dict(data: Any) -> SimulationResponse:
    """
    Accepts either the backend envelope ({"success": ..., "result": {...}})
    or a bare result object ({"aggregated": ..., ...}).
    """
    if not isinstance(data, dict):
        raise ResultLoadError("Simulation file must contain a JSON object")

    if "result" in data or "success" in data:
        response = SimulationResponse.from_dict(data)
    else:
        response = SimulationResponse.from_dict({"success": True, "result": data})

    if response.success and response.result is None:
        raise ResultLoadError("Simulation response has no result")
    return response


def _load_json(text: Union[str, bytes]) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResultLoadError(f"Invalid JSON: {e}") from e


def parse_result_json(text: Union[str, bytes]) -> SimulationResponse:
    return parse_result_dict(_load_json(text))


def load_result_file(file_path: Union[str, Path]) -> SimulationResponse:
    return parse_result_json(Path(file_path).read_bytes())


def decode_upload_contents(contents: str) -> Dict[str, Any]:
    """
    Decodes a dcc.Upload contents string ('data:application/json;base64,...')
    into the raw JSON object, validating it on the way.
    """
    try:
        _, content_string = contents.split(',', 1)
        decoded = base64.b64decode(content_string, validate=True)
    except (ValueError, binascii.Error) as e:
        raise ResultLoadError("Could not decode uploaded file") from e

    data = _load_json(decoded)
    parse_result_dict(data)
    return data


def portfolio_grid_rows(raw_result: Dict[str, Any]) -> List[Dict[str, str]]:
    """One editable row per individual portfolio id found in a raw response."""
    result = raw_result.get("result", raw_result) if isinstance(raw_result, dict) else None
    portfolios = result.get("individual_portfolios") if isinstance(result, dict) else None
    if not isinstance(portfolios, dict):
        return []
    return [{"id": str(pid), "name": ""} for pid in portfolios]


def portfolio_names_from_rows(rows: List[Dict[str, Any]]) -> Dict[str, str]:
    """Maps portfolio id -> display name from the grid, skipping blank names."""
    names = {}
    for row in rows or []:
        pid = row.get("id")
        name = (row.get("name") or "").strip()
        if pid is not None and name:
            names[str(pid)] = name
    return names
