"""
Input model for the Sell-or-Keep analysis.

All percentages are expressed on a 0-100 scale. The engine does not validate
ranges: out-of-range values flow through the arithmetic unchanged, so only
types and enum membership are checked here.
"""

from datetime import date
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..mortgage_amortization import MortgageType


class RentalType(str, Enum):
    """How the property is let."""

    LONGTERM = "longterm"
    VACATION = "vacation"


class PropertyManager(str, Enum):
    """Who manages the rental, each with a fixed fee on gross rent."""

    SELF = "self"
    PM_LONGTERM = "pm_longterm"
    PM_VACATION = "pm_vacation"

    @property
    def fee_percent(self) -> float:
        """Management fee as a percentage of gross rent."""
        if self is PropertyManager.PM_LONGTERM:
            return 10.0
        if self is PropertyManager.PM_VACATION:
            return 25.0
        return 0.0


class TaxRegime(str, Enum):
    """Portuguese taxation regime label (the rate fields drive the math)."""

    AUTONOMOUS = "autonomous"
    PROGRESSIVE = "progressive"


class PrimaryGoal(str, Enum):
    """The investor's stated primary goal."""

    CASHFLOW = "cashflow"
    NET_WORTH = "networth"
    PENSION = "pension"
    LEGACY = "legacy"


class RiskProfile(str, Enum):
    """The investor's risk appetite."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SellOrKeepInputs(BaseModel):
    """Everything the analysis needs about one property and its owner."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Property basics
    current_market_value: float = Field(..., description="Estimated sale value today")
    original_purchase_price: float = Field(..., description="Price paid at purchase")
    purchase_date: date = Field(..., description="Date of purchase")
    cadastral_value: float = Field(..., description="Fiscal value (VPT)")
    rental_type: RentalType = Field(default=RentalType.LONGTERM)

    # Financing
    remaining_debt: float = Field(..., description="Outstanding mortgage principal")
    mortgage_rate: float = Field(..., description="Annual mortgage rate (%)")
    mortgage_type: MortgageType = Field(default=MortgageType.ANNUITY)
    remaining_years: int = Field(..., description="Remaining mortgage term in years")

    # Rent and operating costs
    gross_monthly_rent: float = Field(..., description="Gross rent per month")
    maintenance_costs_monthly: float = Field(
        default=0.0, description="Maintenance cost per month"
    )
    renovation_reserve_percent: float = Field(
        default=0.0, description="Renovation reserve (% of gross rent)"
    )
    vacancy_percent: float = Field(default=0.0, description="Vacancy (% of gross rent)")
    property_manager: PropertyManager = Field(default=PropertyManager.SELF)

    # Portuguese taxes
    imi_annual: float = Field(default=0.0, description="Annual IMI property tax")
    rental_tax_type: TaxRegime = Field(default=TaxRegime.AUTONOMOUS)
    rental_tax_rate: float = Field(default=28.0, description="Rental income tax (%)")
    sale_costs_percent: float = Field(
        default=7.0, description="Selling costs (% of sale price)"
    )
    capital_gains_tax_type: TaxRegime = Field(default=TaxRegime.AUTONOMOUS)
    capital_gains_tax_rate: float = Field(
        default=28.0, description="Capital gains tax rate (%)"
    )
    reinvest_in_eu_residence: bool = Field(
        default=False, description="Sale proceeds reinvested in an EU own home"
    )

    # Assumptions and goals
    annual_growth_percent: float = Field(
        default=3.4, description="Annual property value and rent growth (%)"
    )
    alternative_return_percent: float = Field(
        default=7.5, description="Annual return of the alternative investment (%)"
    )
    investment_horizon: Literal[10, 30] = Field(default=10)
    primary_goal: PrimaryGoal = Field(default=PrimaryGoal.NET_WORTH)
    risk_profile: RiskProfile = Field(default=RiskProfile.MEDIUM)

    def with_overrides(self, **changes: Any) -> "SellOrKeepInputs":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)


DEFAULT_INPUTS = SellOrKeepInputs(
    current_market_value=250000,
    original_purchase_price=200000,
    purchase_date=date(2018, 1, 1),
    cadastral_value=150000,
    rental_type=RentalType.LONGTERM,
    remaining_debt=150000,
    mortgage_rate=4.0,
    mortgage_type=MortgageType.ANNUITY,
    remaining_years=25,
    gross_monthly_rent=1200,
    maintenance_costs_monthly=100,
    renovation_reserve_percent=6,
    vacancy_percent=5,
    property_manager=PropertyManager.SELF,
    imi_annual=600,
    rental_tax_type=TaxRegime.AUTONOMOUS,
    rental_tax_rate=28,
    sale_costs_percent=7,
    capital_gains_tax_type=TaxRegime.AUTONOMOUS,
    capital_gains_tax_rate=28,
    reinvest_in_eu_residence=False,
    annual_growth_percent=3.4,
    alternative_return_percent=7.5,
    investment_horizon=10,
    primary_goal=PrimaryGoal.NET_WORTH,
    risk_profile=RiskProfile.MEDIUM,
)


def default_inputs() -> SellOrKeepInputs:
    """Return the shipped default inputs."""
    return DEFAULT_INPUTS
