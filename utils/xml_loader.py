# utils/xml_loader.py
import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict
from pathlib import Path

from config.chart_settings import DEFAULT_PERCENTILES

logger = logging.getLogger(__name__)

FALLBACK_PLAN: Dict[str, Any] = {
    "name": "Default Plan",
    "start_age": 65,
    "plan_end_age": 95,
    "percentile_low": DEFAULT_PERCENTILES[0],
    "percentile_high": DEFAULT_PERCENTILES[1],
    "use_real": True,
}


def try_cast(value: str) -> Any:
    """Try to convert string to bool, int or float if possible, else leave as str."""
    if value is None:
        return None
    value = value.strip()
    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    try:
        if '.' not in value:
            return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def parse_plan_xml(file_path) -> Dict[str, Any]:
    """Load plan display defaults (<plan><start_age>60</start_age>...</plan>)."""
    tree = ET.parse(file_path)
    root = tree.getroot()

    plan_dict: Dict[str, Any] = {}
    for child in root:
        val = try_cast(child.text)
        if child.tag in ["start_age", "plan_end_age"] and val is not None:
            val = int(val)
        plan_dict[child.tag] = val
    return plan_dict


def load_default_plan(file_path) -> Dict[str, Any]:
    """Plan defaults from XML layered over FALLBACK_PLAN; missing file keeps the fallback."""
    plan = FALLBACK_PLAN.copy()
    try:
        plan.update(parse_plan_xml(file_path))
    except FileNotFoundError:
        logger.warning("Default plan XML not found at %s, using built-in defaults", file_path)
    return plan


CONFIG_DIR = Path(__file__).parent.parent / "config"

DEFAULT_PLAN = load_default_plan(CONFIG_DIR / "default_plan.xml")
