"""
Sell-or-Keep analysis entry point.

Runs the three scenario models, the yearly projections, the stress tests and
the recommendation over one set of inputs. The whole analysis is a pure
function of its inputs: the same inputs always give the same result.
"""

import logging

from .inputs import SellOrKeepInputs
from .projections import generate_yearly_projections
from .recommendation import generate_recommendation
from .result import ScenarioId, SellOrKeepAnalysis
from .scenarios import (
    calculate_keep_as_rental,
    calculate_sell_and_invest,
    calculate_sell_and_reinvest,
)
from .stress_tests import run_stress_tests

logger = logging.getLogger(__name__)


def analyze_sell_or_keep(inputs: SellOrKeepInputs) -> SellOrKeepAnalysis:
    """
    Compare selling and investing, selling and reinvesting, and keeping.

    Args:
        inputs: Property inputs

    Returns:
        Complete analysis with scenarios, projections, stress tests and advice
    """
    scenario_a = calculate_sell_and_invest(inputs)
    scenario_b = calculate_sell_and_reinvest(inputs)
    scenario_c = calculate_keep_as_rental(inputs)

    scenarios = {
        ScenarioId.A: scenario_a,
        ScenarioId.B: scenario_b,
        ScenarioId.C: scenario_c,
    }
    for scenario_id, result in scenarios.items():
        logger.debug(
            f"Scenario {scenario_id.value} ({result.name}): "
            f"net worth {result.final_net_worth:.2f}, "
            f"monthly income {result.monthly_income:.2f}, irr {result.irr:.2f}"
        )

    return SellOrKeepAnalysis(
        inputs=inputs,
        scenario_a=scenario_a,
        scenario_b=scenario_b,
        scenario_c=scenario_c,
        yearly_projections=generate_yearly_projections(inputs),
        stress_tests=run_stress_tests(inputs),
        recommendation=generate_recommendation(inputs, scenarios),
    )
