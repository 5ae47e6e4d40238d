import numpy as np
from enum import Enum

def identity_activation(z):
    return z

def tanh_activation(z):
    return np.tanh(z)

class ActivationKind(Enum):
    """
    The closed set of activation functions a neuron can use.
    """
    TANH     = "tanh"
    IDENTITY = "identity"

    def __call__(self, z):
        return activations[self](z)

    @classmethod
    def from_name(cls, name: str) -> 'ActivationKind':
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown activation function '{name}'") from None

activations = {
    ActivationKind.TANH    : tanh_activation,
    ActivationKind.IDENTITY: identity_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    ActivationKind.TANH    : "TNH",
    ActivationKind.IDENTITY: "IDN"
    }
