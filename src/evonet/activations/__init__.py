"""
Activations Package

This package provides the activation functions available to evonet neurons.
The set is closed: hidden layers squash with tanh, output layers pass the
weighted sum through unchanged.

Exported:
    ActivationKind:      Enumeration of the supported activation functions
    activations:         Dictionary mapping each ActivationKind to its function
    activation_codes:    Dictionary mapping each ActivationKind to a 3-letter code
    identity_activation: Returns its input unchanged
    tanh_activation:     Hyperbolic tangent, bounded in (-1, 1)
"""

from evonet.activations.basic_activations import (
    ActivationKind,
    activations,
    activation_codes,
    identity_activation,
    tanh_activation
)

__all__ = [
    'ActivationKind',
    'activations',
    'activation_codes',
    'identity_activation',
    'tanh_activation'
]
