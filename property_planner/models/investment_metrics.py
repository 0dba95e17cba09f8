"""
Investment metrics for a rental property purchase.

Year-one yield and coverage ratios (BAR, NAR, cash-on-cash, DSCR, break-even
occupancy), a yearly cashflow projection with an exit at the horizon, and the
internal rate of return of those cashflows found by Newton-Raphson.

This IRR solves NPV = 0 on the actual cashflows. The Sell-or-Keep scenarios
use a closed-form annualized return instead.
"""

import math
from enum import Enum
from typing import List, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .mortgage_amortization import monthly_payment, remaining_balance
from .portuguese_tax import round_cents

DAYS_PER_YEAR = 365
# Mixed letting: six months long-term, six months short-term
MIXED_LONGTERM_MONTHS = 6
MIXED_SHORTTERM_DAYS = 180

IRR_INITIAL_GUESS = 0.1
IRR_TOLERANCE = 0.0001
IRR_MIN_RATE = -0.99
IRR_MAX_RATE = 10.0
IRR_RESET_LOW = -0.5
IRR_RESET_HIGH = 0.5


class RentalStrategy(str, Enum):
    """How the property is let."""

    LONGTERM = "longterm"
    SHORTTERM = "shortterm"
    MIXED = "mixed"


class RiskLevel(str, Enum):
    """Overall verdict of the risk assessment."""

    GOOD = "good"
    MODERATE = "moderate"
    RISKY = "risky"


class InvestmentInputs(BaseModel):
    """Purchase, financing, rent and cost assumptions for one property."""

    model_config = ConfigDict(extra="forbid")

    # Purchase
    purchase_price: float = Field(..., description="Purchase price")
    imt: float = Field(default=0.0, description="IMT transfer tax paid")
    notary_fees: float = Field(default=0.0, description="Notary and registry fees")
    renovation_costs: float = Field(default=0.0, description="Up-front renovation")
    furnishing_costs: float = Field(default=0.0, description="Up-front furnishing")

    # Mortgage
    ltv: float = Field(default=0.0, description="Loan as % of the purchase price")
    interest_rate: float = Field(default=0.0, description="Annual mortgage rate (%)")
    loan_term_years: int = Field(default=30, ge=0, description="Mortgage term")

    # Rental income
    rental_strategy: RentalStrategy = Field(default=RentalStrategy.LONGTERM)
    monthly_rent_longterm: float = Field(default=0.0, description="Long-term rent per month")
    shortterm_occupancy: float = Field(default=0.0, description="Short-term occupancy (%)")
    shortterm_daily_rate: float = Field(default=0.0, description="Average daily rate")

    # Operating costs
    management_percent: float = Field(default=0.0, description="Management fee (% of rent)")
    maintenance_yearly: float = Field(default=0.0)
    imi_yearly: float = Field(default=0.0)
    insurance_yearly: float = Field(default=0.0)
    condo_monthly: float = Field(default=0.0)
    utilities_monthly: float = Field(default=0.0)

    # Assumptions
    rent_growth: float = Field(default=0.0, description="Annual rent growth (%)")
    cost_growth: float = Field(default=0.0, description="Annual cost growth (%)")
    value_growth: float = Field(default=0.0, description="Annual value growth (%)")
    years: int = Field(default=10, ge=1, le=50, description="Holding period")


class YearlyCashflow(BaseModel):
    """Operating result for one holding year."""

    year: int
    gross_rent: float
    opex: float
    noi: float
    debt_service: float
    net_cashflow: float
    cumulative_cashflow: float = Field(
        ..., description="Running total starting from minus the own capital"
    )


class ExitAnalysis(BaseModel):
    """Sale at the end of the holding period."""

    market_value: float
    remaining_debt: float
    net_exit: float
    total_return: float


class RiskAssessment(BaseModel):
    """Verdict and the reasons behind it."""

    level: RiskLevel
    score: int
    reasons: List[str]


class InvestmentAnalysis(BaseModel):
    """Complete output of analyze_investment."""

    total_investment: float
    own_capital: float
    loan_amount: float
    bar: float = Field(..., description="Gross initial yield (%)")
    nar: float = Field(..., description="Net initial yield (%)")
    cash_on_cash: float = Field(..., description="Year-one cashflow on own capital (%)")
    dscr: float = Field(..., description="NOI over debt service; inf without debt")
    irr: float = Field(..., description="Internal rate of return (%)")
    break_even_occupancy: float = Field(..., description="Occupancy needed to break even (%)")
    yearly_cashflows: List[YearlyCashflow]
    exit_analysis: ExitAnalysis
    risk: RiskAssessment


def calculate_dscr(noi: float, annual_debt_service: float) -> float:
    """Debt service coverage ratio; infinite when there is no debt service."""
    if annual_debt_service <= 0:
        return math.inf
    return round_cents(noi / annual_debt_service)


def calculate_bar(annual_gross_rent: float, purchase_price: float) -> float:
    """Gross initial yield in percent of the purchase price."""
    if purchase_price <= 0:
        return 0.0
    return round_cents(annual_gross_rent / purchase_price * 100)


def calculate_nar(annual_noi: float, total_investment: float) -> float:
    """Net initial yield in percent of the total investment."""
    if total_investment <= 0:
        return 0.0
    return round_cents(annual_noi / total_investment * 100)


def calculate_cash_on_cash(annual_net_cashflow: float, own_capital: float) -> float:
    """Year-one net cashflow in percent of the own capital."""
    if own_capital <= 0:
        return 0.0
    return round_cents(annual_net_cashflow / own_capital * 100)


def calculate_break_even_occupancy(
    operating_expenses: float, annual_debt_service: float, potential_gross_income: float
) -> float:
    """
    Occupancy needed to cover costs and debt service.

    Args:
        operating_expenses: Annual operating costs
        annual_debt_service: Annual mortgage payments
        potential_gross_income: Rent at full occupancy

    Returns:
        Percentage, capped at 100 (also 100 without income)
    """
    if potential_gross_income <= 0:
        return 100.0
    ratio = (operating_expenses + annual_debt_service) / potential_gross_income * 100
    return round_cents(min(100.0, ratio))


def calculate_irr(cashflows: Sequence[float], max_iterations: int = 100) -> float:
    """
    Internal rate of return of yearly cashflows by Newton-Raphson.

    The first cashflow is at t=0. A rate that jumps below -99 % or above
    1000 % is reset to -50 % or 50 % and the iteration continues. Without
    convergence the last iterate is returned.

    Args:
        cashflows: Cashflows per year, starting with the investment
        max_iterations: Newton step limit

    Returns:
        IRR in percent, rounded to two decimals (0 for fewer than two flows)
    """
    if len(cashflows) < 2:
        return 0.0

    flows = np.asarray(cashflows, dtype=np.float64)
    periods = np.arange(len(flows))
    rate = IRR_INITIAL_GUESS

    for _ in range(max_iterations):
        discount = (1 + rate) ** -periods
        npv = float(np.sum(flows * discount))
        if abs(npv) < IRR_TOLERANCE:
            break

        derivative = float(np.sum(-periods * flows * discount / (1 + rate)))
        if abs(derivative) < IRR_TOLERANCE:
            break

        rate -= npv / derivative
        if rate < IRR_MIN_RATE:
            rate = IRR_RESET_LOW
        elif rate > IRR_MAX_RATE:
            rate = IRR_RESET_HIGH

    return round_cents(rate * 100)


def annual_gross_rent(inputs: InvestmentInputs) -> float:
    """Year-one gross rent for the chosen letting strategy."""
    shortterm_share = inputs.shortterm_occupancy / 100
    if inputs.rental_strategy == RentalStrategy.LONGTERM:
        return inputs.monthly_rent_longterm * 12
    if inputs.rental_strategy == RentalStrategy.SHORTTERM:
        return DAYS_PER_YEAR * shortterm_share * inputs.shortterm_daily_rate
    return (
        inputs.monthly_rent_longterm * MIXED_LONGTERM_MONTHS
        + MIXED_SHORTTERM_DAYS * shortterm_share * inputs.shortterm_daily_rate
    )


def annual_operating_expenses(gross_rent: float, inputs: InvestmentInputs) -> float:
    """Management fee on the rent plus the fixed yearly and monthly costs."""
    return (
        gross_rent * inputs.management_percent / 100
        + inputs.maintenance_yearly
        + inputs.imi_yearly
        + inputs.insurance_yearly
        + inputs.condo_monthly * 12
        + inputs.utilities_monthly * 12
    )


def assess_risk(
    dscr: float, irr: float, cash_on_cash: float, break_even_occupancy: float
) -> RiskAssessment:
    """
    Score the four headline metrics.

    Each metric adds 0 (comfortable), 1 (tight) or 2 (weak) points. A total
    of at most 1 is good, at most 3 moderate, anything higher risky.
    """
    reasons = []
    score = 0

    if dscr >= 1.2:
        reasons.append("DSCR > 1.2: Goede dekking van hypotheeklasten")
    elif dscr >= 1.0:
        reasons.append("DSCR tussen 1.0-1.2: Krappe marge")
        score += 1
    else:
        reasons.append("DSCR < 1.0: Negatieve cashflow!")
        score += 2

    if irr >= 12:
        reasons.append("IRR > 12%: Uitstekend rendement")
    elif irr >= 8:
        reasons.append("IRR 8-12%: Redelijk rendement")
        score += 1
    else:
        reasons.append("IRR < 8%: Laag rendement")
        score += 2

    if cash_on_cash >= 8:
        reasons.append("Cash-on-Cash > 8%: Goed rendement op eigen geld")
    elif cash_on_cash >= 4:
        reasons.append("Cash-on-Cash 4-8%: Matig rendement")
        score += 1
    else:
        reasons.append("Cash-on-Cash < 4%: Laag rendement")
        score += 2

    if break_even_occupancy <= 60:
        reasons.append("Break-even < 60%: Veel marge bij leegstand")
    elif break_even_occupancy <= 80:
        reasons.append("Break-even 60-80%: Acceptabele marge")
        score += 1
    else:
        reasons.append("Break-even > 80%: Weinig marge bij leegstand")
        score += 2

    if score <= 1:
        level = RiskLevel.GOOD
    elif score <= 3:
        level = RiskLevel.MODERATE
    else:
        level = RiskLevel.RISKY

    return RiskAssessment(level=level, score=score, reasons=reasons)


def analyze_investment(inputs: InvestmentInputs) -> InvestmentAnalysis:
    """
    Project a rental purchase over the holding period.

    Rent and costs grow from year two onwards. The IRR cashflows are the own
    capital at t=0, each year's net cashflow, and the net sale proceeds added
    to the final year. Ratios use year-one figures.

    Args:
        inputs: Purchase, financing and operating assumptions

    Returns:
        Metrics, yearly cashflows, exit and risk verdict
    """
    total_investment = (
        inputs.purchase_price
        + inputs.imt
        + inputs.notary_fees
        + inputs.renovation_costs
        + inputs.furnishing_costs
    )
    loan_amount = inputs.purchase_price * inputs.ltv / 100
    own_capital = total_investment - loan_amount

    annual_debt_service = (
        monthly_payment(loan_amount, inputs.interest_rate, inputs.loan_term_years) * 12
    )

    year_one_rent = annual_gross_rent(inputs)
    year_one_opex = annual_operating_expenses(year_one_rent, inputs)
    year_one_noi = year_one_rent - year_one_opex

    gross_rent = year_one_rent
    opex = year_one_opex
    cumulative = -own_capital
    irr_cashflows = [-own_capital]
    yearly_cashflows = []

    for year in range(1, inputs.years + 1):
        if year > 1:
            gross_rent *= 1 + inputs.rent_growth / 100
            opex *= 1 + inputs.cost_growth / 100

        noi = gross_rent - opex
        net_cashflow = noi - annual_debt_service
        cumulative += net_cashflow
        irr_cashflows.append(net_cashflow)

        yearly_cashflows.append(
            YearlyCashflow(
                year=year,
                gross_rent=round_cents(gross_rent),
                opex=round_cents(opex),
                noi=round_cents(noi),
                debt_service=round_cents(annual_debt_service),
                net_cashflow=round_cents(net_cashflow),
                cumulative_cashflow=round_cents(cumulative),
            )
        )

    market_value = inputs.purchase_price * (1 + inputs.value_growth / 100) ** inputs.years
    debt_at_exit = max(
        0.0,
        remaining_balance(
            loan_amount, inputs.interest_rate, inputs.loan_term_years, inputs.years
        ),
    )
    net_exit = market_value - debt_at_exit
    irr_cashflows[-1] += net_exit

    dscr = calculate_dscr(year_one_noi, annual_debt_service)
    irr = calculate_irr(irr_cashflows)
    cash_on_cash = calculate_cash_on_cash(year_one_noi - annual_debt_service, own_capital)
    break_even = calculate_break_even_occupancy(
        year_one_opex, annual_debt_service, year_one_rent
    )

    return InvestmentAnalysis(
        total_investment=round_cents(total_investment),
        own_capital=round_cents(own_capital),
        loan_amount=round_cents(loan_amount),
        bar=calculate_bar(year_one_rent, inputs.purchase_price),
        nar=calculate_nar(year_one_noi, total_investment),
        cash_on_cash=cash_on_cash,
        dscr=dscr,
        irr=irr,
        break_even_occupancy=break_even,
        yearly_cashflows=yearly_cashflows,
        exit_analysis=ExitAnalysis(
            market_value=round_cents(market_value),
            remaining_debt=round_cents(debt_at_exit),
            net_exit=round_cents(net_exit),
            total_return=round_cents(cumulative + net_exit),
        ),
        risk=assess_risk(dscr, irr, cash_on_cash, break_even),
    )
