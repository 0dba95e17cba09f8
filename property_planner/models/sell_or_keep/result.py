"""
Result models for the Sell-or-Keep analysis.

These models are plain containers: every value is computed by the engine
modules and nothing here recalculates anything.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .inputs import SellOrKeepInputs


class ScenarioId(str, Enum):
    """The three compared options."""

    A = "A"  # sell and invest in ETFs
    B = "B"  # sell and buy a new leveraged property
    C = "C"  # keep as rental


class Rating(str, Enum):
    """Qualitative three-level rating."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def ordinal(self) -> int:
        """Return 3 for high, 2 for medium and 1 for low."""
        if self is Rating.HIGH:
            return 3
        if self is Rating.MEDIUM:
            return 2
        return 1

    def inverse_ordinal(self) -> int:
        """Return 3 for low, 2 for medium and 1 for high (less is better)."""
        return 4 - self.ordinal()


class ScenarioResult(BaseModel):
    """Outcome of one scenario over the investment horizon."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name")
    description: str = Field(..., description="One-line description")
    monthly_income: float = Field(..., description="Monthly income in year one")
    final_net_worth: float = Field(..., description="Net worth at the horizon")
    total_cashflow_received: float = Field(
        ..., description="Cashflow received over the horizon"
    )
    irr: float = Field(..., description="Approximate annual return (%)")
    cashflow_stability: Rating
    fiscal_predictability: Rating
    operational_complexity: Rating
    legacy_years: int = Field(
        ..., description="Years of support at twice today's gross rent"
    )
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)


class ScenarioAProjection(BaseModel):
    """ETF portfolio values for one projection year."""

    portfolio_value: float
    annual_income: float


class PropertyProjection(BaseModel):
    """New-property values for one projection year."""

    property_value: float
    equity: float
    net_cashflow: float


class KeptPropertyProjection(PropertyProjection):
    """Kept-property values for one projection year."""

    remaining_debt: float


class YearlyProjection(BaseModel):
    """All three scenarios at the end of one year."""

    year: int = Field(..., ge=1)
    scenario_a: ScenarioAProjection
    scenario_b: PropertyProjection
    scenario_c: KeptPropertyProjection


class StressTestResult(BaseModel):
    """Final net worth of one scenario under the base case and three shocks."""

    scenario: ScenarioId
    name: str
    base_case: float
    rate_increase: float
    vacancy_increase: float
    zero_growth: float


class Recommendation(BaseModel):
    """Which scenario to prefer, and why."""

    best_for_goal: ScenarioId
    best_overall: ScenarioId
    summary: str
    tradeoffs: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)


class SellOrKeepAnalysis(BaseModel):
    """Complete output of analyze_sell_or_keep."""

    inputs: SellOrKeepInputs
    scenario_a: ScenarioResult
    scenario_b: ScenarioResult
    scenario_c: ScenarioResult
    yearly_projections: List[YearlyProjection]
    stress_tests: List[StressTestResult]
    recommendation: Recommendation

    def scenario(self, scenario_id: ScenarioId) -> ScenarioResult:
        """Look up a scenario result by its identifier."""
        if scenario_id == ScenarioId.A:
            return self.scenario_a
        if scenario_id == ScenarioId.B:
            return self.scenario_b
        return self.scenario_c
