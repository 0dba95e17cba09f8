"""
Recommendation engine for the Sell-or-Keep analysis.

Picks the best scenario for the investor's goal, the best scenario on a
weighted multi-criterion score, and assembles the advice texts. Ties go to
the earlier scenario (A before B before C).
"""

import logging
import math
from typing import Callable, Dict, List

from .inputs import PrimaryGoal, RiskProfile, SellOrKeepInputs
from .result import Recommendation, ScenarioId, ScenarioResult

# Weighted score used for the overall winner
NET_WORTH_WEIGHT = 0.4
INCOME_WEIGHT = 0.25
STABILITY_WEIGHT = 0.2
SIMPLICITY_WEIGHT = 0.15

HIGH_RATE_THRESHOLD = 5.0
HIGH_VACANCY_THRESHOLD = 10.0
HIGH_LEVERAGE_THRESHOLD = 0.8

GOAL_LABELS = {
    PrimaryGoal.CASHFLOW: "maximale cashflow",
    PrimaryGoal.NET_WORTH: "vermogensopbouw",
    PrimaryGoal.PENSION: "pensioen",
    PrimaryGoal.LEGACY: "nalatenschap",
}

TRADEOFFS = [
    "Verkopen + ETF: maximale eenvoud en liquiditeit, maar je geeft de hefboom en huurgroei van vastgoed op.",
    "Verkopen + Nieuw Vastgoed: de sterkste hefboom op waardegroei, maar ook de meeste schuld en operationele drukte.",
    "Behouden als Huurwoning: geen transactiekosten nu, maar je vermogen blijft geconcentreerd en de belastingclaim schuift vooruit.",
]

Scenarios = Dict[ScenarioId, ScenarioResult]

logger = logging.getLogger(__name__)


def format_euro(amount: float) -> str:
    """Format an amount as whole euros with Dutch thousands separators."""
    if not math.isfinite(amount):
        return f"€ {amount}"
    return "€ " + f"{amount:,.0f}".replace(",", ".")


def _rank_value(value: float) -> float:
    return -math.inf if math.isnan(value) else value


def _first_best(values: Dict[ScenarioId, float]) -> ScenarioId:
    best_id = None
    best_value = -math.inf
    for scenario_id, raw in values.items():
        value = _rank_value(raw)
        if best_id is None or value > best_value:
            best_id = scenario_id
            best_value = value
    return best_id


def _argmax(scenarios: Scenarios, metric: Callable[[ScenarioResult], float]) -> ScenarioId:
    return _first_best(
        {scenario_id: metric(result) for scenario_id, result in scenarios.items()}
    )


def best_for_goal(inputs: SellOrKeepInputs, scenarios: Scenarios) -> ScenarioId:
    """
    Pick the scenario that serves the investor's primary goal.

    Args:
        inputs: Property inputs (goal and risk profile)
        scenarios: Scenario results keyed by identifier

    Returns:
        Winning scenario identifier
    """
    goal = inputs.primary_goal
    if goal == PrimaryGoal.CASHFLOW:
        return _argmax(scenarios, lambda s: s.monthly_income)
    elif goal == PrimaryGoal.NET_WORTH:
        return _argmax(scenarios, lambda s: s.final_net_worth)
    elif goal == PrimaryGoal.PENSION:
        if inputs.risk_profile == RiskProfile.LOW:
            return ScenarioId.A
        return _argmax(scenarios, lambda s: s.irr)
    elif goal == PrimaryGoal.LEGACY:
        return _argmax(scenarios, lambda s: s.legacy_years)
    else:
        raise ValueError(f"Unsupported primary goal: {goal}")


def _ratio(value: float, maximum: float) -> float:
    if maximum == 0:
        return 0.0
    return value / maximum


def overall_scores(scenarios: Scenarios) -> Dict[ScenarioId, float]:
    """
    Score each scenario on net worth, income, stability and simplicity.

    Net worth and income are normalised by the best scenario (income with a
    floor of 1 on the divisor); ratings map to 1-3 and are divided by 3.
    """
    max_net_worth = max(_rank_value(s.final_net_worth) for s in scenarios.values())
    max_income = max(max(_rank_value(s.monthly_income) for s in scenarios.values()), 1)

    scores = {}
    for scenario_id, result in scenarios.items():
        scores[scenario_id] = (
            NET_WORTH_WEIGHT * _ratio(result.final_net_worth, max_net_worth)
            + INCOME_WEIGHT * (result.monthly_income / max_income)
            + STABILITY_WEIGHT * (result.cashflow_stability.ordinal() / 3)
            + SIMPLICITY_WEIGHT * (result.operational_complexity.inverse_ordinal() / 3)
        )
    return scores


def best_overall(scenarios: Scenarios) -> ScenarioId:
    """Pick the scenario with the highest weighted score."""
    return _first_best(overall_scores(scenarios))


def build_risks(inputs: SellOrKeepInputs) -> List[str]:
    """Collect the risk warnings that apply to these inputs."""
    risks = [
        (
            "Met een laag risicoprofiel past Scenario A (verkopen + ETF) het best: "
            "geen hypotheek en geen huurdersrisico."
            if inputs.risk_profile == RiskProfile.LOW
            else ""
        ),
        (
            "Je hypotheekrente ligt boven 5%: de vastgoedscenario's zijn gevoelig "
            "voor verdere rentestijgingen."
            if inputs.mortgage_rate > HIGH_RATE_THRESHOLD
            else ""
        ),
        (
            "De leegstand is hoger dan 10%: controleer of huurprijs en "
            "verhuurstrategie marktconform zijn."
            if inputs.vacancy_percent > HIGH_VACANCY_THRESHOLD
            else ""
        ),
        (
            "Je schuld is meer dan 80% van de marktwaarde: een waardedaling kan je "
            "eigen vermogen snel uithollen."
            if inputs.remaining_debt
            > inputs.current_market_value * HIGH_LEVERAGE_THRESHOLD
            else ""
        ),
    ]
    return [risk for risk in risks if risk]


def generate_recommendation(
    inputs: SellOrKeepInputs, scenarios: Scenarios
) -> Recommendation:
    """
    Assemble the full recommendation.

    Args:
        inputs: Property inputs
        scenarios: Scenario results keyed by identifier

    Returns:
        Recommendation with winners, summary, trade-offs and risks
    """
    goal_winner = best_for_goal(inputs, scenarios)
    overall_winner = best_overall(scenarios)
    winner = scenarios[goal_winner]
    logger.debug(
        f"Recommendation for goal {inputs.primary_goal.value}: "
        f"best for goal {goal_winner.value}, best overall {overall_winner.value}"
    )

    summary = (
        f"Voor je doel '{GOAL_LABELS[inputs.primary_goal]}' scoort {winner.name} "
        f"het best, met een verwacht eindvermogen van {format_euro(winner.final_net_worth)} "
        f"na {inputs.investment_horizon} jaar en een maandelijks inkomen van "
        f"{format_euro(winner.monthly_income)}."
    )

    return Recommendation(
        best_for_goal=goal_winner,
        best_overall=overall_winner,
        summary=summary,
        tradeoffs=list(TRADEOFFS),
        risks=build_risks(inputs),
    )
