"""
evonet Network Package

This package implements the layered feedforward network and its neurons,
together with the genetic operators (crossover and mutation) acting on them.

Modules:
    neuron:  Neuron class
    network: Network class

Exported Classes:
    Neuron:  Weighted sum of inputs plus bias, passed through an activation function
    Network: Ordered stack of neuron layers
"""

from evonet.network.neuron  import Neuron
from evonet.network.network import Network

__all__ = ['Neuron',
           'Network']
