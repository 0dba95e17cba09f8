"""
Monte Carlo simulation of a property's market value.

Each path compounds a yearly growth rate drawn uniformly from
``mean_growth ± volatility`` percent. The result reports the 10th, 50th and
90th percentile value for every year from today (year 0) to the horizon.
Seeding makes runs reproducible.
"""

import math
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, Field

PERCENTILES = (0.1, 0.5, 0.9)


class PropertyValueSimulationConfig(BaseModel):
    """Configuration for a property value simulation."""

    start_value: float = Field(..., ge=0, description="Market value today")
    years: int = Field(..., ge=1, le=100, description="Number of years to simulate")
    mean_growth: float = Field(
        default=3.4, description="Expected annual value growth (%)"
    )
    volatility: float = Field(
        default=8.0, ge=0, le=100, description="Half-width of the yearly growth band (%)"
    )
    num_paths: int = Field(
        default=1000, ge=1, le=100000, description="Number of simulation paths"
    )
    seed: Optional[int] = Field(
        default=None, ge=0, description="Random seed for reproducibility"
    )


class PropertyValueSimulationResult(BaseModel):
    """Percentile bands of the simulated property value per year."""

    years: List[int] = Field(..., description="Years 0..horizon")
    p10: List[float] = Field(..., description="Pessimistic value per year")
    median: List[float] = Field(..., description="Median value per year")
    p90: List[float] = Field(..., description="Optimistic value per year")
    num_paths: int
    seed: Optional[int] = None

    def final_range(self) -> Tuple[float, float, float]:
        """Return the (p10, median, p90) values at the horizon."""
        return self.p10[-1], self.median[-1], self.p90[-1]


class PropertyValueSimulator:
    """Runs the Monte Carlo value simulation."""

    def __init__(self, config: PropertyValueSimulationConfig):
        """Initialize the simulator.

        Args:
            config: Simulation configuration
        """
        self.config = config

    def generate_growth_rates(self) -> NDArray[np.float64]:
        """
        Draw yearly growth rates for every path.

        Returns:
            Array of shape (years, num_paths) with growth rates in percent
        """
        rng = np.random.default_rng(self.config.seed)
        shocks = rng.uniform(
            -1.0, 1.0, (self.config.years, self.config.num_paths)
        )
        return self.config.mean_growth + self.config.volatility * shocks

    def simulate_paths(self) -> NDArray[np.float64]:
        """
        Simulate value paths.

        Returns:
            Array of shape (years + 1, num_paths); row 0 is the start value
        """
        growth = 1 + self.generate_growth_rates() / 100
        values = self.config.start_value * np.cumprod(growth, axis=0)
        start = np.full((1, self.config.num_paths), self.config.start_value)
        return np.vstack([start, values])

    def simulate(self) -> PropertyValueSimulationResult:
        """Run the simulation and summarise each year by percentile."""
        paths = np.sort(self.simulate_paths(), axis=1)
        num_paths = self.config.num_paths

        # Order statistic at floor(n * q), clamped to the last path
        indices = [min(math.floor(num_paths * q), num_paths - 1) for q in PERCENTILES]
        p10_idx, median_idx, p90_idx = indices

        return PropertyValueSimulationResult(
            years=list(range(self.config.years + 1)),
            p10=paths[:, p10_idx].tolist(),
            median=paths[:, median_idx].tolist(),
            p90=paths[:, p90_idx].tolist(),
            num_paths=num_paths,
            seed=self.config.seed,
        )
