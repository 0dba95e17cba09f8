"""Stress tests: final net worth under three single-field shocks."""

from typing import List

from .inputs import SellOrKeepInputs
from .result import ScenarioId, StressTestResult
from .scenarios import (
    calculate_keep_as_rental,
    calculate_sell_and_invest,
    calculate_sell_and_reinvest,
)

RATE_SHOCK_POINTS = 2.0
VACANCY_SHOCK_POINTS = 5.0

SCENARIO_CALCULATORS = (
    (ScenarioId.A, calculate_sell_and_invest),
    (ScenarioId.B, calculate_sell_and_reinvest),
    (ScenarioId.C, calculate_keep_as_rental),
)


def run_stress_tests(inputs: SellOrKeepInputs) -> List[StressTestResult]:
    """
    Re-run every scenario with a higher rate, more vacancy and zero growth.

    Args:
        inputs: Base-case property inputs

    Returns:
        One row per scenario, in A, B, C order
    """
    rate_shock = inputs.with_overrides(
        mortgage_rate=inputs.mortgage_rate + RATE_SHOCK_POINTS
    )
    vacancy_shock = inputs.with_overrides(
        vacancy_percent=inputs.vacancy_percent + VACANCY_SHOCK_POINTS
    )
    no_growth = inputs.with_overrides(annual_growth_percent=0.0)

    results = []
    for scenario_id, calculate in SCENARIO_CALCULATORS:
        base = calculate(inputs)
        results.append(
            StressTestResult(
                scenario=scenario_id,
                name=base.name,
                base_case=base.final_net_worth,
                rate_increase=calculate(rate_shock).final_net_worth,
                vacancy_increase=calculate(vacancy_shock).final_net_worth,
                zero_growth=calculate(no_growth).final_net_worth,
            )
        )
    return results
