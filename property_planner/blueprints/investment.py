"""
Investment blueprint.

Purchase analysis (yields, DSCR, IRR, risk) and mortgage amortization
schedules.
"""

from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from property_planner.blueprints.sell_or_keep import (
    model_response,
    validation_error_response,
)
from property_planner.models.investment_metrics import (
    InvestmentInputs,
    analyze_investment,
)
from property_planner.models.mortgage_amortization import (
    MortgageCalculator,
    MortgageType,
)

investment_bp = Blueprint("investment", __name__, url_prefix="/api")


class AmortizationRequest(BaseModel):
    """Request body for an amortization schedule."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, description="Loan principal")
    annual_rate: float = Field(..., description="Annual interest rate (%)")
    term_years: int = Field(..., ge=1, le=50, description="Loan term in years")
    mortgage_type: MortgageType = Field(default=MortgageType.ANNUITY)


@investment_bp.route("/investment/analysis", methods=["POST"])
def investment_analysis() -> Any:
    """Analyse a rental property purchase.

    Returns:
        JSON response with metrics, yearly cashflows, exit and risk
    """
    try:
        inputs = InvestmentInputs.model_validate(request.get_json(silent=True) or {})
        return model_response(analyze_investment(inputs))

    except ValidationError as e:
        return validation_error_response(e)
    except Exception as e:
        current_app.logger.error(f"Error analysing investment: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@investment_bp.route("/mortgage/schedule", methods=["POST"])
def amortization_schedule() -> Any:
    """Return the month-by-month amortization schedule of a loan."""
    try:
        body = AmortizationRequest.model_validate(request.get_json(silent=True) or {})
        schedule = MortgageCalculator.generate_amortization_schedule(
            body.principal, body.annual_rate, body.term_years, body.mortgage_type
        )
        return model_response(schedule)

    except ValidationError as e:
        return validation_error_response(e)
    except Exception as e:
        current_app.logger.error(f"Error generating amortization schedule: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
