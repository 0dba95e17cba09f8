"""Tests for the yearly projections."""

import pytest

from property_planner.models.sell_or_keep import (
    calculate_keep_as_rental,
    calculate_sell_and_invest,
    calculate_sell_and_reinvest,
    generate_yearly_projections,
)
from property_planner.models.sell_or_keep.scenarios import (
    keep_annual_cashflow,
    new_property_purchase,
)


class TestYearlyProjections:
    """Test cases for generate_yearly_projections."""

    def test_one_row_per_year(self, inputs):
        """Rows cover years 1..horizon in order."""
        projections = generate_yearly_projections(inputs)

        assert [p.year for p in projections] == list(range(1, 11))

    def test_thirty_year_horizon(self, inputs):
        """A 30-year horizon gives 30 rows."""
        projections = generate_yearly_projections(
            inputs.with_overrides(investment_horizon=30)
        )

        assert len(projections) == 30
        assert projections[-1].year == 30

    def test_final_year_matches_scenarios(self, inputs):
        """The last row agrees with the scenario end values."""
        last = generate_yearly_projections(inputs)[-1]

        assert last.scenario_a.portfolio_value == pytest.approx(
            calculate_sell_and_invest(inputs).final_net_worth
        )
        assert last.scenario_b.equity == pytest.approx(
            calculate_sell_and_reinvest(inputs).final_net_worth
        )

        kept = calculate_keep_as_rental(inputs)
        assert last.scenario_c.property_value - last.scenario_c.remaining_debt == (
            pytest.approx(last.scenario_c.equity)
        )
        # Equity excludes the latent tax and sale costs
        assert last.scenario_c.equity > kept.final_net_worth

    def test_cashflow_lags_value_by_one_year(self, inputs):
        """Year one shows today's cashflow while values already grew."""
        first, second = generate_yearly_projections(inputs)[:2]

        assert first.scenario_b.net_cashflow == pytest.approx(
            new_property_purchase(inputs).annual_cashflow
        )
        assert first.scenario_c.net_cashflow == pytest.approx(
            keep_annual_cashflow(inputs)
        )
        assert second.scenario_c.net_cashflow == pytest.approx(
            keep_annual_cashflow(inputs) * 1.034
        )
        assert first.scenario_c.property_value == pytest.approx(250000 * 1.034)

    def test_scenario_a_income_is_constant(self, inputs):
        """The withdrawal is a fixed 4% of the initial proceeds."""
        projections = generate_yearly_projections(inputs)

        assert {round(p.scenario_a.annual_income, 6) for p in projections} == {3020.0}

    def test_kept_debt_reaches_zero(self, inputs):
        """After the mortgage term the kept property is debt free."""
        projections = generate_yearly_projections(
            inputs.with_overrides(investment_horizon=30)
        )

        assert projections[24].scenario_c.remaining_debt == 0.0
        assert projections[29].scenario_c.remaining_debt == 0.0
        assert projections[23].scenario_c.remaining_debt > 0

    def test_projection_is_deterministic(self, inputs):
        """Same inputs give identical rows."""
        assert generate_yearly_projections(inputs) == generate_yearly_projections(
            inputs
        )
