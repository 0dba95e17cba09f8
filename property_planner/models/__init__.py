"""Calculation models for property sell-or-keep planning."""

from .investment_metrics import (
    InvestmentAnalysis,
    InvestmentInputs,
    RentalStrategy,
    RiskAssessment,
    RiskLevel,
    analyze_investment,
    assess_risk,
    calculate_irr,
)
from .mortgage_amortization import (
    AmortizationSchedule,
    MortgageCalculator,
    MortgageType,
    PaymentBreakdown,
    monthly_payment,
    remaining_balance,
)
from .portuguese_tax import (
    IMIResult,
    IMTResult,
    IRSInput,
    IRSResult,
    MunicipalityType,
    PropertyType,
    TotalTaxSummary,
    calculate_imi,
    calculate_imt,
    calculate_irs,
    calculate_total_portuguese_taxes,
    estimate_vpt,
)
from .value_simulation import (
    PropertyValueSimulationConfig,
    PropertyValueSimulationResult,
    PropertyValueSimulator,
)

__all__ = [
    "InvestmentAnalysis",
    "InvestmentInputs",
    "RentalStrategy",
    "RiskAssessment",
    "RiskLevel",
    "analyze_investment",
    "assess_risk",
    "calculate_irr",
    "AmortizationSchedule",
    "MortgageCalculator",
    "MortgageType",
    "PaymentBreakdown",
    "monthly_payment",
    "remaining_balance",
    "IMIResult",
    "IMTResult",
    "IRSInput",
    "IRSResult",
    "MunicipalityType",
    "PropertyType",
    "TotalTaxSummary",
    "calculate_imi",
    "calculate_imt",
    "calculate_irs",
    "calculate_total_portuguese_taxes",
    "estimate_vpt",
    "PropertyValueSimulationConfig",
    "PropertyValueSimulationResult",
    "PropertyValueSimulator",
]
