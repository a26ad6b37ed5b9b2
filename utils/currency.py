# utils/currency.py
from dash import dcc, html
from typing import Union


def format_currency_output(val, decimals=0):
    """
    Formats a float/int into a clean currency string ($1,234,567).
    Negative amounts keep the sign in front of the symbol (-$1,234).

    Args:
        val (float): The numerical value to format.
        decimals (int): Number of decimal places.
    """
    if val is None:
        val = 0.0
    val = float(val)
    text = f"${abs(val):,.{decimals}f}"
    # Rounds to zero -> no sign
    if val < 0 and text.strip("$0.,"):
        return "-" + text
    return text


def format_percent_output(value: Union[float, None], decimal_places: int = 1) -> str:
    """Formats a float (0.23) to a display string ('23.0%')."""
    if value is None:
        return ""
    value = float(value)
    return f"{value * 100:.{decimal_places}f}%"


#----------------------------------------------------------------------
# Helper: Pretty Age Input
# ----------------------------------------------------------------------

def pretty_age_input(id, value, label=None, min_val=0, max_val=120, step=1, placeholder="65"):
    """
    Generates a stylized integer age input component.
    Returns a list of children [Label, Input].
    """
    label_text = label

    if label_text is None:
        label_text = " ".join(word.capitalize() for word in id.replace('-', '_').split('_'))

    input_props = {}
    if min_val is not None:
        input_props['min'] = min_val
    if max_val is not None:
        input_props['max'] = max_val
    if step is not None:
        input_props['step'] = step

    children = []

    if label_text:
        children.append(
            html.Label(
                label_text,
                style={
                    'fontWeight': 'bold',
                    'fontSize': 16,
                    'textAlign': 'center',
                    'marginBottom': '6px',
                    'display': 'block'
                }
            )
        )

    children.append(
        dcc.Input(
            id=id,
            type='number',
            value=int(value),
            placeholder=placeholder,
            style={
                'width': '80%',
                'height': '36px',
                'textAlign': 'center',
                'fontSize': '16px',
                'fontFamily': 'monospace',
                'fontWeight': '500',
                'border': '1px solid #ccc',
                'borderRadius': '6px'
            },
            debounce=True,
            **input_props
        )
    )
    return children
