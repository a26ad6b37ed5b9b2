from utils.xml_loader import DEFAULT_PLAN, FALLBACK_PLAN, load_default_plan, parse_plan_xml, try_cast


def test_try_cast():
    assert try_cast(" 60 ") == 60
    assert try_cast("0.5") == 0.5
    assert try_cast("TRUE") is True
    assert try_cast("Default Plan") == "Default Plan"
    assert try_cast(None) is None


def test_parse_plan_xml(tmp_path):
    path = tmp_path / "plan.xml"
    path.write_text("<plan><start_age>55</start_age><plan_end_age>90</plan_end_age><use_real>false</use_real></plan>")
    assert parse_plan_xml(path) == {"start_age": 55, "plan_end_age": 90, "use_real": False}


def test_missing_file_keeps_fallback(tmp_path):
    assert load_default_plan(tmp_path / "missing.xml") == FALLBACK_PLAN


def test_shipped_defaults():
    assert DEFAULT_PLAN["start_age"] < DEFAULT_PLAN["plan_end_age"]
    assert DEFAULT_PLAN["percentile_low"] == 10
    assert DEFAULT_PLAN["percentile_high"] == 90
