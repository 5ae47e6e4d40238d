"""
evonet - a minimal neuroevolution substrate.

This package provides a layered feedforward neural network which is evolved
rather than trained: networks can be evaluated, recombined with a
structurally compatible network, and randomly mutated. Population management,
selection and fitness evaluation are left to the caller.

Main components:
- activations: The closed set of activation functions (tanh, identity)
- network:     Neuron and Network, with predict / crossover / mutate
- config:      INI-based configuration of initialization and mutation
- render:      Graphviz rendering of a network (read-only)

Example:
    >>> from evonet import Network
    >>> parent_a = Network(2, 1, [2])
    >>> parent_b = Network(2, 1, [2])
    >>> child = parent_a.crossover(parent_b)
    >>> child.mutate()
    >>> child.predict([0.0, 1.0])
"""

__version__ = "0.1.0"

from evonet.activations import ActivationKind
from evonet.config      import Config
from evonet.errors      import ShapeMismatchError
from evonet.network     import Neuron, Network

__all__ = [
    "ActivationKind",
    "Config",
    "ShapeMismatchError",
    "Neuron",
    "Network",
]
