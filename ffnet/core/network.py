"""Network class - layers chained into a feedforward computation."""

import logging
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterator, Self, Sequence

import numpy as np
from numpy.typing import ArrayLike

from ffnet.core.layer import Layer
from ffnet.init.distributions import WeightDistribution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerTopology:
    """Width of one entry in a network topology.

    The first entry of a topology describes the input vector, every later
    entry describes a layer of neurons.

    Attributes:
        neurons: Number of neurons (or inputs, for the first entry).
    """
    neurons: int

    def __post_init__(self) -> None:
        if self.neurons < 0:
            raise AssertionError(
                f"Topology widths must be non-negative, got {self.neurons}"
            )


@dataclass(frozen=True, eq=False)
class Network:
    """A feedforward network: the output of each layer feeds the next one.

    Attributes:
        layers: Layers in evaluation order.
    """
    layers: tuple[Layer, ...]

    def __post_init__(self) -> None:
        layers = tuple(self.layers)
        for i, (prev, layer) in enumerate(pairwise(layers)):
            if not layer.neurons:
                continue
            if layer.input_size != prev.output_size:
                raise AssertionError(
                    f"Layer {i + 1} expects {layer.input_size} inputs "
                    f"but layer {i} produces {prev.output_size}"
                )
        object.__setattr__(self, "layers", layers)

    @property
    def num_layers(self) -> int:
        """Number of layers in the network."""
        return len(self.layers)

    @property
    def input_size(self) -> int:
        """Length of the input vector expected by propagate()."""
        if not self.layers:
            return 0
        return self.layers[0].input_size

    @property
    def output_size(self) -> int:
        """Length of the vector returned by propagate()."""
        if not self.layers:
            return 0
        return self.layers[-1].output_size

    @property
    def topology(self) -> list[LayerTopology]:
        """Topology that reproduces this network's shape via random().

        The input width is read from the first layer's neurons, so it is
        reported as 0 when the first layer is empty.
        """
        if not self.layers:
            return []
        return [LayerTopology(self.input_size)] + [
            LayerTopology(layer.output_size) for layer in self.layers
        ]

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        layers_topology: Sequence[LayerTopology],
        distribution: WeightDistribution | None = None,
    ) -> Self:
        """Create a network with randomly initialized layers.

        One layer is built for every adjacent pair of topology entries.
        Layers are built in order from the same generator, so a fixed seed
        always reproduces the same biases and weights.

        Args:
            rng: Random number generator shared with the caller.
            layers_topology: Input width followed by each layer's width.
                             Must contain at least two entries.
            distribution: Distribution passed on to Layer.random().

        Returns:
            A Network with ``len(layers_topology) - 1`` layers.

        Raises:
            AssertionError: If fewer than two topology entries are given.
        """
        if len(layers_topology) < 2:
            raise AssertionError(
                f"A network topology needs at least two entries, got {len(layers_topology)}"
            )

        layers = tuple(
            Layer.random(rng, inputs.neurons, outputs.neurons, distribution)
            for inputs, outputs in pairwise(layers_topology)
        )

        logger.debug(
            "Built network with topology %s",
            [entry.neurons for entry in layers_topology],
        )
        return cls(layers=layers)

    def propagate(self, inputs: ArrayLike) -> np.ndarray:
        """Forward pass through every layer in order.

        Args:
            inputs: Vector of length ``input_size``.

        Returns:
            float32 array of shape (output_size,).
        """
        outputs = np.asarray(inputs, dtype=np.float32)
        for layer in self.layers:
            outputs = layer.propagate(outputs)
        return outputs

    def __iter__(self) -> Iterator[Layer]:
        """Iterate over layers."""
        return iter(self.layers)

    def __len__(self) -> int:
        return len(self.layers)

    def __repr__(self) -> str:
        widths = [entry.neurons for entry in self.topology]
        return f"Network(layers={self.num_layers}, topology={widths})"
