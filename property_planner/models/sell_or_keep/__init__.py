"""
Sell-or-Keep analysis for Portuguese rental property.

Compares selling and investing in ETFs (A), selling and buying a new
leveraged property (B), and keeping the property as a rental (C).
"""

from .inputs import (
    DEFAULT_INPUTS,
    PrimaryGoal,
    PropertyManager,
    RentalType,
    RiskProfile,
    SellOrKeepInputs,
    TaxRegime,
    default_inputs,
)
from .result import (
    KeptPropertyProjection,
    PropertyProjection,
    Rating,
    Recommendation,
    ScenarioAProjection,
    ScenarioId,
    ScenarioResult,
    SellOrKeepAnalysis,
    StressTestResult,
    YearlyProjection,
)
from .income import capital_gains_tax, net_rental_income, net_sale_proceeds
from .scenarios import (
    calculate_keep_as_rental,
    calculate_sell_and_invest,
    calculate_sell_and_reinvest,
)
from .projections import generate_yearly_projections
from .stress_tests import run_stress_tests
from .recommendation import best_for_goal, best_overall, generate_recommendation
from .engine import analyze_sell_or_keep
from .translations import TRANSLATIONS, Language, get_translations

__all__ = [
    "DEFAULT_INPUTS",
    "PrimaryGoal",
    "PropertyManager",
    "RentalType",
    "RiskProfile",
    "SellOrKeepInputs",
    "TaxRegime",
    "default_inputs",
    "KeptPropertyProjection",
    "PropertyProjection",
    "Rating",
    "Recommendation",
    "ScenarioAProjection",
    "ScenarioId",
    "ScenarioResult",
    "SellOrKeepAnalysis",
    "StressTestResult",
    "YearlyProjection",
    "capital_gains_tax",
    "net_rental_income",
    "net_sale_proceeds",
    "calculate_sell_and_invest",
    "calculate_sell_and_reinvest",
    "calculate_keep_as_rental",
    "generate_yearly_projections",
    "run_stress_tests",
    "best_for_goal",
    "best_overall",
    "generate_recommendation",
    "analyze_sell_or_keep",
    "TRANSLATIONS",
    "Language",
    "get_translations",
]
