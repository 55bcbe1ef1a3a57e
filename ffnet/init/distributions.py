"""Weight initialization distributions."""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class WeightDistribution(Protocol):
    """Protocol for bias and weight initialization distributions."""

    def sample(self, rng: np.random.Generator) -> float:
        """Sample a single value from the distribution.

        Args:
            rng: Random number generator to draw from. Implementations
                 consume at most one draw per call.

        Returns:
            Sampled value.
        """
        ...


class UniformWeightDistribution:
    """Uniform distribution between low and high.

    Samples come from numpy's ``Generator.uniform``, which covers the
    half-open interval [low, high). Each sample consumes exactly one draw
    from the generator.

    Args:
        low: Lower bound. Default -1.0.
        high: Upper bound. Default 1.0.

    Raises:
        ValueError: If low is greater than high.
    """

    def __init__(self, low: float = -1.0, high: float = 1.0) -> None:
        if low > high:
            raise ValueError(f"low must not exceed high, got low={low}, high={high}")
        self.low = low
        self.high = high

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.uniform(self.low, self.high))

    def __repr__(self) -> str:
        return f"UniformWeightDistribution(low={self.low}, high={self.high})"


class ConstantWeightDistribution:
    """Always returns a constant value without touching the generator."""

    def __init__(self, value: float = 1.0) -> None:
        self.value = value

    def sample(self, rng: np.random.Generator) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantWeightDistribution(value={self.value})"
