"""Layer class - neurons sharing the same input vector."""

from dataclasses import dataclass
from typing import Iterator, Self

import numpy as np
from numpy.typing import ArrayLike

from ffnet.core.neuron import Neuron
from ffnet.init.distributions import WeightDistribution


@dataclass(frozen=True, eq=False)
class Layer:
    """An ordered collection of neurons evaluated against the same input.

    Attributes:
        neurons: Neurons in output order. All of them expect the same
                 number of inputs.
    """
    neurons: tuple[Neuron, ...]

    def __post_init__(self) -> None:
        neurons = tuple(self.neurons)
        widths = {neuron.input_size for neuron in neurons}
        if len(widths) > 1:
            raise AssertionError(
                f"All neurons in a layer must have the same input size, got {sorted(widths)}"
            )
        object.__setattr__(self, "neurons", neurons)

    @property
    def input_size(self) -> int:
        """Number of inputs each neuron expects (0 for an empty layer)."""
        if not self.neurons:
            return 0
        return self.neurons[0].input_size

    @property
    def output_size(self) -> int:
        """Number of values produced by propagate()."""
        return len(self.neurons)

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        input_neurons: int,
        output_neurons: int,
        distribution: WeightDistribution | None = None,
    ) -> Self:
        """Create a layer of randomly initialized neurons.

        Neurons are built in order from the same generator, which is
        advanced across all of them.

        Args:
            rng: Random number generator shared with the caller.
            input_neurons: Input width of every neuron.
            output_neurons: Number of neurons to create.
            distribution: Distribution passed on to Neuron.random().

        Raises:
            AssertionError: If either width is negative.
        """
        if input_neurons < 0 or output_neurons < 0:
            raise AssertionError(
                f"Layer widths must be non-negative, got {input_neurons} -> {output_neurons}"
            )

        neurons = tuple(
            Neuron.random(rng, input_neurons, distribution)
            for _ in range(output_neurons)
        )
        return cls(neurons=neurons)

    def propagate(self, inputs: ArrayLike) -> np.ndarray:
        """Apply every neuron to the same inputs.

        Args:
            inputs: Vector of length ``input_size``.

        Returns:
            float32 array of shape (output_size,).
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        return np.array(
            [neuron.propagate(inputs) for neuron in self.neurons],
            dtype=np.float32,
        )

    def __iter__(self) -> Iterator[Neuron]:
        """Iterate over neurons."""
        return iter(self.neurons)

    def __len__(self) -> int:
        return len(self.neurons)

    def __repr__(self) -> str:
        return f"Layer(inputs={self.input_size}, neurons={self.output_size})"
