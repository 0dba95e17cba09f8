"""
Scenario calculators for the Sell-or-Keep analysis.

Three independent models over the same inputs:

- A: sell and invest the net proceeds in an ETF portfolio
- B: sell and use the net proceeds as the deposit on a new, larger property
- C: keep the property as a rental

The returned ``irr`` values are closed-form compound-growth approximations,
not root-finding solutions.
"""

import math

from pydantic import BaseModel, Field

from ..mortgage_amortization import MortgageType, monthly_payment, remaining_balance
from .income import capital_gains_tax, net_rental_income, net_sale_proceeds
from .inputs import PropertyManager, RentalType, SellOrKeepInputs
from .result import Rating, ScenarioResult

SAFE_WITHDRAWAL_RATE = 0.04
NEW_PROPERTY_LTV = 0.70
NEW_PROPERTY_GROSS_YIELD = 0.05
NEW_PROPERTY_IMI_RATE = 0.004
NEW_MORTGAGE_TERM_YEARS = 25


class NewPropertyPurchase(BaseModel):
    """The leveraged purchase assumed by scenario B."""

    net_proceeds: float = Field(..., description="Deposit taken from the sale")
    property_value: float = Field(..., description="Price of the new property")
    loan: float = Field(..., description="New mortgage principal")
    annual_gross_rent: float
    annual_net_rent: float
    annual_mortgage_payment: float
    annual_imi: float
    annual_cashflow: float


def annualized_return(final_value: float, starting_capital: float, years: int) -> float:
    """
    Approximate an annual return from start and end values.

    Computes ``(final / start) ** (1 / years) - 1`` as a percentage. A zero
    starting capital or a negative growth ratio gives ``nan`` rather than an
    exception.
    """
    if years <= 0 or starting_capital == 0:
        return math.nan
    ratio = final_value / starting_capital
    if ratio < 0:
        return math.nan
    return (ratio ** (1 / years) - 1) * 100


def legacy_years(net_worth: float, inputs: SellOrKeepInputs) -> int:
    """Years a net worth could pay twice today's annual gross rent."""
    yearly_support = inputs.gross_monthly_rent * 12 * 2
    if yearly_support <= 0 or not math.isfinite(net_worth):
        return 0
    # Half-up rounding, so 2.5 years counts as 3
    return math.floor(net_worth / yearly_support + 0.5)


def compound(value: float, annual_rate: float, years: float) -> float:
    """Grow a value at an annual percentage rate."""
    return value * (1 + annual_rate / 100) ** years


def calculate_sell_and_invest(inputs: SellOrKeepInputs) -> ScenarioResult:
    """Scenario A: sell and invest the net proceeds in ETFs."""
    years = inputs.investment_horizon
    proceeds = net_sale_proceeds(inputs)

    final_net_worth = compound(proceeds, inputs.alternative_return_percent, years)
    # Constant 4 % draw on the initial capital
    annual_income = proceeds * SAFE_WITHDRAWAL_RATE

    return ScenarioResult(
        name="Verkopen + ETF",
        description="Verkoop het pand en beleg de netto opbrengst in een wereldwijd ETF.",
        monthly_income=annual_income / 12,
        final_net_worth=final_net_worth,
        total_cashflow_received=annual_income * years,
        irr=inputs.alternative_return_percent,
        cashflow_stability=Rating.MEDIUM,
        fiscal_predictability=Rating.HIGH,
        operational_complexity=Rating.LOW,
        legacy_years=legacy_years(final_net_worth, inputs),
        pros=[
            "Volledig liquide vermogen",
            "Geen onderhoud, huurders of leegstand",
            "Brede spreiding over duizenden bedrijven",
        ],
        cons=[
            "Koersschommelingen op de beurs",
            "Verkoopkosten en vermogenswinstbelasting bij verkoop",
            "Geen hefboom en geen huurgroei meer",
        ],
    )


def new_property_purchase(inputs: SellOrKeepInputs) -> NewPropertyPurchase:
    """
    Derive the new property bought in scenario B.

    The net proceeds fund the equity share of a 70 % LTV purchase yielding
    5 % gross. Vacancy, management fee and rental tax are applied as
    successive haircuts on that gross rent.
    """
    proceeds = net_sale_proceeds(inputs)
    property_value = proceeds / (1 - NEW_PROPERTY_LTV)
    loan = property_value * NEW_PROPERTY_LTV

    annual_gross_rent = property_value * NEW_PROPERTY_GROSS_YIELD
    annual_net_rent = (
        annual_gross_rent
        * (1 - inputs.vacancy_percent / 100)
        * (1 - inputs.property_manager.fee_percent / 100)
        * (1 - inputs.rental_tax_rate / 100)
    )
    annual_mortgage = (
        monthly_payment(
            loan, inputs.mortgage_rate, NEW_MORTGAGE_TERM_YEARS, MortgageType.ANNUITY
        )
        * 12
    )
    annual_imi = property_value * NEW_PROPERTY_IMI_RATE

    return NewPropertyPurchase(
        net_proceeds=proceeds,
        property_value=property_value,
        loan=loan,
        annual_gross_rent=annual_gross_rent,
        annual_net_rent=annual_net_rent,
        annual_mortgage_payment=annual_mortgage,
        annual_imi=annual_imi,
        annual_cashflow=annual_net_rent - annual_mortgage - annual_imi,
    )


def calculate_sell_and_reinvest(inputs: SellOrKeepInputs) -> ScenarioResult:
    """Scenario B: sell and buy a new property with a 70 % mortgage."""
    years = inputs.investment_horizon
    purchase = new_property_purchase(inputs)

    final_property_value = compound(
        purchase.property_value, inputs.annual_growth_percent, years
    )
    final_debt = remaining_balance(
        purchase.loan,
        inputs.mortgage_rate,
        NEW_MORTGAGE_TERM_YEARS,
        years,
        MortgageType.ANNUITY,
    )
    final_net_worth = final_property_value - final_debt
    total_cashflow = purchase.annual_cashflow * years

    return ScenarioResult(
        name="Verkopen + Nieuw Vastgoed",
        description="Verkoop het pand en gebruik de opbrengst als 30% eigen inleg voor een groter pand.",
        # Floored for display only
        monthly_income=max(0.0, purchase.annual_cashflow / 12),
        final_net_worth=final_net_worth,
        total_cashflow_received=total_cashflow,
        irr=annualized_return(
            final_net_worth + total_cashflow, purchase.net_proceeds, years
        ),
        cashflow_stability=Rating.MEDIUM,
        fiscal_predictability=Rating.MEDIUM,
        operational_complexity=Rating.HIGH,
        legacy_years=legacy_years(final_net_worth, inputs),
        pros=[
            "Hefboom vergroot het vermogen bij waardestijging",
            "Nieuwer pand met minder onderhoud",
            "Huurinkomsten groeien mee met de markt",
        ],
        cons=[
            "Nieuwe hypotheek en renterisico",
            "Transactiekosten en IMT bij aankoop",
            "Hogere operationele complexiteit",
        ],
    )


def keep_annual_cashflow(inputs: SellOrKeepInputs) -> float:
    """Annual cashflow of the kept property: net rent minus mortgage payments."""
    annual_mortgage = (
        monthly_payment(
            inputs.remaining_debt,
            inputs.mortgage_rate,
            inputs.remaining_years,
            inputs.mortgage_type,
        )
        * 12
    )
    return net_rental_income(inputs) - annual_mortgage


def calculate_keep_as_rental(inputs: SellOrKeepInputs) -> ScenarioResult:
    """
    Scenario C: keep the property and keep renting it out.

    Net worth deducts the capital gains tax and selling costs that a sale at
    the projected value would trigger, even though no sale happens.
    """
    years = inputs.investment_horizon
    annual_cashflow = keep_annual_cashflow(inputs)

    final_property_value = compound(
        inputs.current_market_value, inputs.annual_growth_percent, years
    )
    final_debt = remaining_balance(
        inputs.remaining_debt,
        inputs.mortgage_rate,
        inputs.remaining_years,
        min(years, inputs.remaining_years),
        inputs.mortgage_type,
    )
    latent_cgt = capital_gains_tax(
        final_property_value,
        inputs.original_purchase_price,
        inputs.capital_gains_tax_rate,
    )
    future_sale_costs = final_property_value * (inputs.sale_costs_percent / 100)

    final_net_worth = final_property_value - final_debt - latent_cgt - future_sale_costs
    total_cashflow = annual_cashflow * years
    initial_equity = inputs.current_market_value - inputs.remaining_debt
    self_managed = inputs.property_manager == PropertyManager.SELF

    return ScenarioResult(
        name="Behouden als Huurwoning",
        description="Houd het pand aan en blijf het verhuren.",
        monthly_income=annual_cashflow / 12,
        final_net_worth=final_net_worth,
        total_cashflow_received=total_cashflow,
        irr=annualized_return(final_net_worth + total_cashflow, initial_equity, years),
        cashflow_stability=(
            Rating.HIGH if inputs.rental_type == RentalType.LONGTERM else Rating.MEDIUM
        ),
        fiscal_predictability=Rating.MEDIUM,
        operational_complexity=Rating.HIGH if self_managed else Rating.MEDIUM,
        legacy_years=legacy_years(final_net_worth, inputs),
        pros=[
            "Geen transactiekosten of directe belasting",
            "Bekend pand en bekende huurders",
            "Hypotheek wordt verder afgelost",
        ],
        cons=[
            "Vermogen blijft geconcentreerd in één pand",
            "Latente vermogenswinstbelasting bij latere verkoop",
            "Onderhoud en leegstand blijven je verantwoordelijkheid",
        ],
    )
