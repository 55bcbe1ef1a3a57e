"""Initialization strategies for feedforward networks."""

from ffnet.init.distributions import (
    WeightDistribution,
    UniformWeightDistribution,
    ConstantWeightDistribution,
)

__all__ = [
    "WeightDistribution",
    "UniformWeightDistribution",
    "ConstantWeightDistribution",
]
