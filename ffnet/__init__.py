"""ffnet - a feedforward neural network with seeded random initialization."""

from ffnet.core.neuron import Neuron
from ffnet.core.layer import Layer
from ffnet.core.network import Network, LayerTopology
from ffnet.builder import NetworkBuilder

__all__ = [
    "Neuron",
    "Layer",
    "Network",
    "LayerTopology",
    "NetworkBuilder",
]
