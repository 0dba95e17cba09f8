"""Tests for the Monte Carlo property value simulation."""

import numpy as np
import pytest
from pydantic import ValidationError

from property_planner.models.value_simulation import (
    PropertyValueSimulationConfig,
    PropertyValueSimulator,
)


def make_config(**overrides) -> PropertyValueSimulationConfig:
    """Create a small seeded configuration for testing."""
    config = {
        "start_value": 250000,
        "years": 10,
        "mean_growth": 3.4,
        "volatility": 8.0,
        "num_paths": 500,
        "seed": 42,
    }
    config.update(overrides)
    return PropertyValueSimulationConfig(**config)


class TestPropertyValueSimulationConfig:
    """Test cases for the configuration model."""

    def test_invalid_values(self):
        """Years, paths and volatility are bounded."""
        with pytest.raises(ValidationError):
            make_config(years=0)
        with pytest.raises(ValidationError):
            make_config(num_paths=0)
        with pytest.raises(ValidationError):
            make_config(volatility=-1)


class TestPropertyValueSimulator:
    """Test cases for PropertyValueSimulator."""

    def test_growth_rates_shape_and_band(self):
        """Growth rates stay within mean plus or minus volatility."""
        rates = PropertyValueSimulator(make_config()).generate_growth_rates()

        assert rates.shape == (10, 500)
        assert np.all(rates >= 3.4 - 8.0)
        assert np.all(rates <= 3.4 + 8.0)

    def test_year_zero_is_start_value(self):
        """All percentiles start at today's value."""
        result = PropertyValueSimulator(make_config()).simulate()

        assert result.years == list(range(11))
        assert result.p10[0] == result.median[0] == result.p90[0] == 250000

    def test_percentiles_are_ordered(self):
        """p10 <= median <= p90 for every year."""
        result = PropertyValueSimulator(make_config()).simulate()

        for low, mid, high in zip(result.p10, result.median, result.p90):
            assert low <= mid <= high

    def test_seed_is_reproducible(self):
        """The same seed gives the same bands."""
        first = PropertyValueSimulator(make_config(seed=7)).simulate()
        second = PropertyValueSimulator(make_config(seed=7)).simulate()

        assert first == second

    def test_zero_volatility_is_deterministic(self):
        """Without volatility every path compounds at the mean."""
        result = PropertyValueSimulator(make_config(volatility=0.0, seed=None)).simulate()

        expected = 250000 * 1.034**10
        p10, median, p90 = result.final_range()
        assert p10 == pytest.approx(expected)
        assert median == pytest.approx(expected)
        assert p90 == pytest.approx(expected)

    def test_median_near_mean_growth(self):
        """With many paths the median tracks the mean growth."""
        result = PropertyValueSimulator(
            make_config(num_paths=5000, years=5, seed=1)
        ).simulate()

        expected = 250000 * 1.034**5
        assert abs(result.median[-1] - expected) / expected < 0.02

    def test_single_path(self):
        """A single path uses the same value for every percentile."""
        result = PropertyValueSimulator(make_config(num_paths=1)).simulate()

        assert result.p10 == result.median == result.p90
