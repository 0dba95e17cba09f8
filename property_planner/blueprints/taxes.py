"""Portuguese tax blueprint."""

from typing import Any, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from property_planner.blueprints.sell_or_keep import (
    model_response,
    validation_error_response,
)
from property_planner.models.portuguese_tax import (
    IRSInput,
    MunicipalityType,
    PropertyType,
    calculate_total_portuguese_taxes,
    estimate_vpt,
)

taxes_bp = Blueprint("taxes", __name__, url_prefix="/api")


class PortugueseTaxRequest(BaseModel):
    """Request body for the tax summary."""

    model_config = ConfigDict(extra="forbid")

    purchase_price: float = Field(..., description="Purchase price for IMT")
    vpt: Optional[float] = Field(
        default=None, description="Fiscal value; estimated from the price when omitted"
    )
    property_type: PropertyType = Field(default=PropertyType.NON_RESIDENTIAL)
    municipality_type: MunicipalityType = Field(default=MunicipalityType.STANDARD)
    irs: IRSInput


@taxes_bp.route("/taxes/portugal", methods=["POST"])
def portuguese_taxes() -> Any:
    """Calculate IMT, IMI and IRS for a property.

    Returns:
        JSON response with the tax summary
    """
    try:
        body = PortugueseTaxRequest.model_validate(request.get_json(silent=True) or {})
        vpt = body.vpt if body.vpt is not None else estimate_vpt(body.purchase_price)
        summary = calculate_total_portuguese_taxes(
            body.purchase_price,
            vpt,
            body.irs,
            property_type=body.property_type,
            municipality_type=body.municipality_type,
        )
        return model_response(summary)

    except ValidationError as e:
        return validation_error_response(e)
    except Exception as e:
        current_app.logger.error(f"Error calculating Portuguese taxes: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
