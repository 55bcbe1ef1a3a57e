"""Neuron class - a bias and a weight vector with ReLU activation."""

from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import ArrayLike

from ffnet.init.distributions import WeightDistribution, UniformWeightDistribution


def relu(x: np.float32) -> np.float32:
    """ReLU activation function.

    Uses fmax so a NaN pre-activation clamps to zero instead of propagating.
    """
    return np.fmax(x, np.float32(0.0))


@dataclass(frozen=True, eq=False)
class Neuron:
    """A single unit computing ``relu(bias + sum(inputs * weights))``.

    Values are stored as float32. The weight array is read-only once the
    neuron is constructed.

    Attributes:
        bias: Scalar added to the weighted sum before activation.
        weights: 1-D array with one weight per input.
    """
    bias: np.float32
    weights: np.ndarray

    def __post_init__(self) -> None:
        weights = np.array(self.weights, dtype=np.float32)
        if weights.ndim != 1:
            raise AssertionError(f"weights must be 1-D, got shape {weights.shape}")
        weights.setflags(write=False)

        object.__setattr__(self, "bias", np.float32(self.bias))
        object.__setattr__(self, "weights", weights)

    @property
    def input_size(self) -> int:
        """Number of inputs this neuron expects."""
        return len(self.weights)

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        input_size: int,
        distribution: WeightDistribution | None = None,
    ) -> Self:
        """Create a neuron with randomly sampled bias and weights.

        The bias is drawn first, then the weights in index order, so each
        neuron advances ``rng`` by exactly ``1 + input_size`` samples.

        Args:
            rng: Random number generator shared with the caller.
            input_size: Number of weights to draw.
            distribution: Distribution to sample from. Defaults to
                          uniform over [-1.0, 1.0].

        Returns:
            A new Neuron.

        Raises:
            AssertionError: If input_size is negative.
        """
        if input_size < 0:
            raise AssertionError(f"input_size must be non-negative, got {input_size}")

        distribution = distribution or UniformWeightDistribution()

        bias = distribution.sample(rng)
        weights = [distribution.sample(rng) for _ in range(input_size)]

        return cls(bias=bias, weights=weights)

    def propagate(self, inputs: ArrayLike) -> np.float32:
        """Compute the neuron's activation for an input vector.

        Args:
            inputs: Vector of length ``input_size``.

        Returns:
            Non-negative float32 activation.

        Raises:
            AssertionError: If the input length does not match the weights.
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.shape != self.weights.shape:
            raise AssertionError(
                f"Expected input shape {self.weights.shape}, got {inputs.shape}"
            )

        products = inputs * self.weights
        # cumsum accumulates left to right; np.sum would reduce pairwise
        if products.size:
            total = np.cumsum(products, dtype=np.float32)[-1]
        else:
            total = np.float32(0.0)

        return relu(self.bias + total)

    def __repr__(self) -> str:
        weights_str = np.array2string(self.weights, precision=2, separator=', ')
        return f"Neuron(bias={self.bias:.2f}, weights={weights_str})"
