# callbacks/upload_callbacks.py
import logging

from dash import Input, Output, State, no_update
from dash.exceptions import PreventUpdate

from utils.result_loader import ResultLoadError, decode_upload_contents, parse_result_dict, portfolio_grid_rows

logger = logging.getLogger(__name__)


def handle_upload(contents, filename):
    """
    Returns (store data, status message, portfolio grid rows) for an upload.
    Raises ResultLoadError for files that are not simulation responses.
    """
    raw = decode_upload_contents(contents)
    response = parse_result_dict(raw)

    if not response.success:
        status = f"Loaded {filename}: simulation failed on the backend ({response.error or 'no error message'})"
    else:
        n_portfolios = len(response.result.individual_portfolios)
        n_timesteps = len(response.result.aggregated.timesteps) if response.result.aggregated else 0
        status = f"Loaded {filename}: {n_timesteps} timesteps, {n_portfolios} portfolio(s)"

    return raw, status, portfolio_grid_rows(raw)


def register_upload_callbacks(app):

    @app.callback(
        Output('simulation-data-store', 'data'),
        Output('upload-status', 'children'),
        Output('portfolio-grid', 'rowData'),
        Input('upload-results', 'contents'),
        State('upload-results', 'filename'),
        prevent_initial_call=True
    )
    def load_simulation_results(contents, filename):
        if contents is None:
            raise PreventUpdate
        try:
            return handle_upload(contents, filename)
        except ResultLoadError as e:
            logger.warning("Rejected upload %s: %s", filename, e)
            # Keep the current results, only report the problem
            return no_update, f"Error loading file: {filename} ({e})", no_update
