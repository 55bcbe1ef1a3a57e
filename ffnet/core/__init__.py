"""Core components for feedforward networks."""

from ffnet.core.neuron import Neuron
from ffnet.core.layer import Layer
from ffnet.core.network import Network, LayerTopology

__all__ = ["Neuron", "Layer", "Network", "LayerTopology"]
