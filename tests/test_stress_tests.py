"""Tests for the stress tests."""

import pytest

from property_planner.models.sell_or_keep import (
    ScenarioId,
    calculate_keep_as_rental,
    calculate_sell_and_reinvest,
    run_stress_tests,
)


class TestStressTests:
    """Test cases for run_stress_tests."""

    def test_rows_in_scenario_order(self, inputs):
        """One row per scenario, A then B then C."""
        rows = run_stress_tests(inputs)

        assert [row.scenario for row in rows] == [ScenarioId.A, ScenarioId.B, ScenarioId.C]
        assert rows[0].name == "Verkopen + ETF"

    def test_base_case_matches_scenarios(self, inputs):
        """The base case is the unshocked final net worth."""
        rows = run_stress_tests(inputs)

        assert rows[1].base_case == pytest.approx(
            calculate_sell_and_reinvest(inputs).final_net_worth
        )
        assert rows[2].base_case == pytest.approx(
            calculate_keep_as_rental(inputs).final_net_worth
        )

    def test_etf_scenario_is_unaffected(self, inputs):
        """Scenario A depends on none of the shocked fields."""
        row = run_stress_tests(inputs)[0]

        assert row.rate_increase == pytest.approx(row.base_case)
        assert row.vacancy_increase == pytest.approx(row.base_case)
        assert row.zero_growth == pytest.approx(row.base_case)

    def test_property_scenarios_lose_value(self, inputs):
        """Higher rates and no growth reduce property net worth."""
        for row in run_stress_tests(inputs)[1:]:
            assert row.rate_increase < row.base_case
            assert row.zero_growth < row.base_case

    def test_vacancy_does_not_change_net_worth(self, inputs):
        """Net worth excludes cashflow, so vacancy leaves it unchanged."""
        for row in run_stress_tests(inputs):
            assert row.vacancy_increase == pytest.approx(row.base_case)

    def test_zero_growth_value(self, inputs):
        """Without growth scenario B keeps its purchase price."""
        row = run_stress_tests(inputs)[1]

        assert abs(row.zero_growth - (75500 / 0.3 - 125711.47)) < 0.01

    def test_inputs_are_not_mutated(self, inputs):
        """Shocks are applied to copies."""
        before = inputs.model_dump()
        run_stress_tests(inputs)

        assert inputs.model_dump() == before
