"""
Year-by-year projections for the three scenarios.

Each year is evaluated directly from the closed-form formulas rather than by
rolling the previous year forward. Property values grow for ``year`` years
while cashflows grow for ``year - 1`` years, so year one shows today's
cashflow.
"""

from typing import List

from ..mortgage_amortization import MortgageType, remaining_balance
from .income import net_sale_proceeds
from .inputs import SellOrKeepInputs
from .result import (
    KeptPropertyProjection,
    PropertyProjection,
    ScenarioAProjection,
    YearlyProjection,
)
from .scenarios import (
    NEW_MORTGAGE_TERM_YEARS,
    SAFE_WITHDRAWAL_RATE,
    compound,
    keep_annual_cashflow,
    new_property_purchase,
)


def generate_yearly_projections(inputs: SellOrKeepInputs) -> List[YearlyProjection]:
    """
    Build one projection row per year of the investment horizon.

    Args:
        inputs: Property inputs

    Returns:
        Rows for years 1..investment_horizon
    """
    proceeds = net_sale_proceeds(inputs)
    purchase = new_property_purchase(inputs)
    keep_cashflow = keep_annual_cashflow(inputs)
    growth = inputs.annual_growth_percent

    projections = []
    for year in range(1, inputs.investment_horizon + 1):
        new_value = compound(purchase.property_value, growth, year)
        new_debt = remaining_balance(
            purchase.loan,
            inputs.mortgage_rate,
            NEW_MORTGAGE_TERM_YEARS,
            year,
            MortgageType.ANNUITY,
        )

        kept_value = compound(inputs.current_market_value, growth, year)
        kept_debt = remaining_balance(
            inputs.remaining_debt,
            inputs.mortgage_rate,
            inputs.remaining_years,
            min(year, inputs.remaining_years),
            inputs.mortgage_type,
        )

        projections.append(
            YearlyProjection(
                year=year,
                scenario_a=ScenarioAProjection(
                    portfolio_value=compound(
                        proceeds, inputs.alternative_return_percent, year
                    ),
                    annual_income=proceeds * SAFE_WITHDRAWAL_RATE,
                ),
                scenario_b=PropertyProjection(
                    property_value=new_value,
                    equity=new_value - new_debt,
                    net_cashflow=compound(purchase.annual_cashflow, growth, year - 1),
                ),
                scenario_c=KeptPropertyProjection(
                    property_value=kept_value,
                    equity=kept_value - kept_debt,
                    net_cashflow=compound(keep_cashflow, growth, year - 1),
                    remaining_debt=kept_debt,
                ),
            )
        )

    return projections
