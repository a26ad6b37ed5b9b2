import pytest

from utils.currency import format_currency_output, format_percent_output, pretty_age_input


@pytest.mark.parametrize("value, expected", [
    (0, "$0"),
    (None, "$0"),
    (1234.4, "$1,234"),
    (2_500_000, "$2,500,000"),
    (-1234, "-$1,234"),
    (-0.2, "$0"),
])
def test_format_currency_output(value, expected):
    assert format_currency_output(value) == expected


def test_format_currency_output_decimals():
    assert format_currency_output(12.5, decimals=2) == "$12.50"


def test_format_percent_output():
    assert format_percent_output(0.23) == "23.0%"
    assert format_percent_output(None) == ""


def test_pretty_age_input_builds_label_and_input():
    label, age_input = pretty_age_input("plan_end_age", value=95)
    assert label.children == "Plan End Age"
    assert age_input.id == "plan_end_age"
    assert age_input.value == 95
