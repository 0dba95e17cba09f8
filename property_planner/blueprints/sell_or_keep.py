"""
Sell-or-Keep blueprint.

API endpoints for running the analysis, exporting and downloading reports,
simulating the property value and fetching the label tables.
"""

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from property_planner.models.sell_or_keep import (
    Language,
    SellOrKeepInputs,
    analyze_sell_or_keep,
    default_inputs,
    get_translations,
)
from property_planner.models.value_simulation import (
    PropertyValueSimulationConfig,
    PropertyValueSimulator,
)
from property_planner.services.report_service import SellOrKeepReportService
from property_planner.storage import StorageNotFoundError, StoragePermissionError

sell_or_keep_bp = Blueprint("sell_or_keep", __name__, url_prefix="/api")


def model_response(model: BaseModel, status: int = 200) -> Any:
    """Serialise a pydantic model; non-finite floats become null."""
    return current_app.response_class(
        model.model_dump_json(), status=status, mimetype="application/json"
    )


def validation_error_response(error: ValidationError) -> Any:
    """Build the 400 response for invalid input."""
    return (
        jsonify(
            {
                "error": "Invalid input",
                "details": error.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            }
        ),
        400,
    )


def request_payload() -> Dict[str, Any]:
    """Return the JSON object body, or an empty dict when there is none."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def inputs_from_request() -> SellOrKeepInputs:
    """Merge a (partial) JSON payload over the default inputs."""
    return SellOrKeepInputs.model_validate(
        {**default_inputs().model_dump(), **request_payload()}
    )


@sell_or_keep_bp.route("/sell-or-keep/defaults", methods=["GET"])
def get_defaults() -> Any:
    """Return the default inputs."""
    return model_response(default_inputs())


@sell_or_keep_bp.route("/sell-or-keep/analysis", methods=["POST"])
def run_analysis() -> Any:
    """Run the Sell-or-Keep analysis.

    Returns:
        JSON response with the full analysis
    """
    try:
        inputs = inputs_from_request()
        return model_response(analyze_sell_or_keep(inputs))

    except ValidationError as e:
        return validation_error_response(e)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error running sell-or-keep analysis: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@sell_or_keep_bp.route("/sell-or-keep/reports", methods=["POST"])
def export_report() -> Any:
    """Run the analysis and store PDF and CSV reports.

    Query parameters:
        language: nl or pt (defaults to the configured language)

    Returns:
        JSON response with the stored report keys
    """
    try:
        language_code = request.args.get(
            "language", current_app.config["DEFAULT_LANGUAGE"]
        )
        try:
            language = Language(language_code)
        except ValueError:
            return jsonify({"error": f"Unsupported language: {language_code}"}), 400

        inputs = inputs_from_request()
        service = SellOrKeepReportService(current_app.extensions["report_storage"])
        exported = service.export(analyze_sell_or_keep(inputs), language)
        return model_response(exported, status=201)

    except ValidationError as e:
        return validation_error_response(e)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error exporting report: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@sell_or_keep_bp.route("/reports/<path:file_path>", methods=["GET"])
def download_report(file_path: str) -> Any:
    """Return a stored report file.

    Args:
        file_path: Storage key below the storage root

    Returns:
        The file content with its stored content type
    """
    storage = current_app.extensions["report_storage"]
    try:
        content = storage.retrieve_file(file_path)
        return current_app.response_class(
            content, mimetype=storage.content_type(file_path)
        )

    except StorageNotFoundError:
        return jsonify({"error": "Report not found"}), 404
    except StoragePermissionError:
        return jsonify({"error": "Invalid report path"}), 400
    except Exception as e:
        current_app.logger.error(f"Error retrieving report {file_path}: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@sell_or_keep_bp.route("/sell-or-keep/value-simulation", methods=["POST"])
def simulate_value() -> Any:
    """Run the Monte Carlo property value simulation.

    Missing fields default to the default inputs and the configured
    path count and volatility.

    Returns:
        JSON response with yearly p10, median and p90 values
    """
    try:
        defaults = default_inputs()
        config_data = {
            "start_value": defaults.current_market_value,
            "years": defaults.investment_horizon,
            "mean_growth": defaults.annual_growth_percent,
            "volatility": current_app.config["MONTE_CARLO_VOLATILITY"],
            "num_paths": current_app.config["MONTE_CARLO_PATHS"],
            **request_payload(),
        }
        config = PropertyValueSimulationConfig.model_validate(config_data)
        return model_response(PropertyValueSimulator(config).simulate())

    except ValidationError as e:
        return validation_error_response(e)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error simulating property value: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@sell_or_keep_bp.route("/translations/<language>", methods=["GET"])
def get_label_table(language: str) -> Any:
    """Return the label table for a language."""
    try:
        return jsonify(get_translations(Language(language)))
    except ValueError:
        return jsonify({"error": f"Unsupported language: {language}"}), 404
