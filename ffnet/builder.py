"""NetworkBuilder - fluent API for constructing feedforward networks."""

import logging
from typing import Self

import numpy as np

from ffnet.core.network import Network, LayerTopology
from ffnet.init.distributions import WeightDistribution

logger = logging.getLogger(__name__)


class NetworkBuilder:
    """Fluent builder for constructing Network instances.

    Example:
        network = (NetworkBuilder()
            .with_topology(3, 2)
            .with_layer(1)
            .with_seed(42)
            .build())

    The first topology entry is the input width; every later entry adds a
    layer with that many neurons. If an rng is supplied with with_rng() it
    is used as-is and advanced by build(), and any seed is ignored;
    otherwise a fresh generator is created from the seed.
    """

    def __init__(self) -> None:
        self._topology: list[LayerTopology] = []
        self._seed: int | None = None
        self._rng: np.random.Generator | None = None
        self._distribution: WeightDistribution | None = None

    def with_topology(self, *neurons: int) -> Self:
        """Replace the topology with the given widths."""
        self._topology = [LayerTopology(n) for n in neurons]
        return self

    def with_layer(self, neurons: int) -> Self:
        """Append one entry to the topology."""
        self._topology.append(LayerTopology(neurons))
        return self

    def with_seed(self, seed: int) -> Self:
        """Set random seed for reproducibility."""
        self._seed = seed
        return self

    def with_rng(self, rng: np.random.Generator) -> Self:
        """Use an existing generator instead of seeding a new one."""
        self._rng = rng
        return self

    def with_weight_distribution(self, distribution: WeightDistribution) -> Self:
        """Set the distribution biases and weights are sampled from.

        Args:
            distribution: Any object implementing WeightDistribution.
                          Defaults to uniform over [-1.0, 1.0].
        """
        self._distribution = distribution
        return self

    def build(self) -> Network:
        """Construct the network with all configured parameters.

        Returns:
            A randomly initialized Network.

        Raises:
            AssertionError: If the topology has fewer than two entries.
        """
        if self._rng is not None:
            if self._seed is not None:
                logger.debug("Using supplied generator; seed %s is ignored", self._seed)
            rng = self._rng
        elif self._seed is not None:
            logger.debug("Seeding network generator with %s", self._seed)
            rng = np.random.default_rng(self._seed)
        else:
            logger.debug("Seeding network generator from OS entropy")
            rng = np.random.default_rng()

        return Network.random(rng, self._topology, self._distribution)
