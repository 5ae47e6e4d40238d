"""
evonet Neuron Module

This module implements the Neuron class, the atomic computational unit of an
evonet network. A neuron owns both its parameters (the weights of its incoming
connections and a bias) and the genetic operators acting on them.

Classes:
    Neuron: A weighted sum of inputs, a bias, and an activation function
"""

import math
import random
import numpy as np
from typing import Sequence

from evonet.activations import ActivationKind, activation_codes
from evonet.config      import Config
from evonet.errors      import ShapeMismatchError

class Neuron:
    """
    A computational node (neuron) in a layered feedforward network.

    The neuron computes its output as:
        activation(bias + sum(weights[i] * inputs[i]))

    The number of weights equals the number of outputs of the preceding layer
    (or the number of network inputs, for the first layer). Neither the number
    of weights nor the activation function ever change after construction;
    mutation only changes the values of the weights and of the bias.

    Public Properties:
        weights:    Read-only view of the incoming connection weights
        bias:       Bias value added to the weighted input
        activation: The ActivationKind applied to the weighted input
        num_inputs: Number of inputs (and of weights)

    Public Methods:
        activate(inputs): Compute the neuron output for an input vector
        crossover(other): Create a child neuron by picking each gene from either parent
        mutate():         Stochastically mutate the weights and the bias, in place
        copy():           Independent copy of this neuron
        to_dict():        Convert the neuron to a dictionary representation

    Class Methods:
        from_dict(neuron_dict, config): Create a neuron from a dictionary description
    """

    def __init__(self,
                 num_inputs: int,
                 activation: ActivationKind | str,
                 config    : Config,
                 weights   : Sequence[float] | None = None,
                 bias      : float           | None = None):
        """
        Initialize a neuron.
        If 'weights' and 'bias' are not specified, they will be initialized
        with random values, according to the configuration.

        Parameters:
            num_inputs: Number of inputs feeding this neuron
            activation: Activation function (an ActivationKind or its name, e.g. 'tanh')
            config:     Stores configuration parameters
            weights:    Weights of the incoming connections (as many as 'num_inputs')
            bias:       Bias value added to the neuron's weighted input
        """
        if num_inputs < 0:
            raise ValueError(f"Number of inputs must be non-negative, got {num_inputs}")

        if isinstance(activation, str):
            activation = ActivationKind.from_name(activation)

        self._config    : Config         = config
        self._activation: ActivationKind = activation

        if weights is None:
            weights = np.random.normal(config.weight_init_mean, config.weight_init_stdev, num_inputs)
            weights = np.minimum(np.maximum(weights, config.min_weight), config.max_weight)
        weights = np.array(weights, dtype=np.float64)
        if weights.shape != (num_inputs,):
            raise ShapeMismatchError(f"Expected {num_inputs} weights, got {weights.size}")
        self._weights: np.ndarray = weights

        if bias is None:
            bias = np.random.normal(config.bias_init_mean, config.bias_init_stdev)
            bias = np.minimum(np.maximum(bias, config.min_bias), config.max_bias)
        self._bias: float = float(bias)

    @property
    def weights(self) -> np.ndarray:
        """The weights of the incoming connections (read-only view)."""
        view = self._weights.view()
        view.flags.writeable = False
        return view

    @property
    def bias(self) -> float:
        """The neuron bias, used to calculate: output = activation(bias + weighted_input)"""
        return self._bias

    @property
    def activation(self) -> ActivationKind:
        """The neuron activation function, used to calculate: output = activation(bias + weighted_input)"""
        return self._activation

    @property
    def num_inputs(self) -> int:
        """The number of inputs (and weights) of this neuron."""
        return len(self._weights)

    def activate(self, inputs: Sequence[float]) -> float:
        """
        Calculate the output of this neuron.

        Parameters:
            inputs: the outputs of the previous layer (or the network inputs)

        Returns:
            activation(bias + sum(weights[i] * inputs[i]))
        """
        if len(inputs) != len(self._weights):
            raise ShapeMismatchError(f"Expected {len(self._weights)} inputs, got {len(inputs)}")

        weighted_input = self._bias + float(np.dot(self._weights, np.asarray(inputs, dtype=np.float64)))
        return float(self._activation(weighted_input))

    def crossover(self, other: 'Neuron') -> 'Neuron':
        """
        Create a child neuron by recombining this neuron with another.

        Uniform crossover: each weight, and the bias, is inherited independently
        from 'self' (with probability 'crossover_gene_prob') or from 'other'.
        The child never holds a value that is not present in one of the parents.
        Neither parent is modified.

        Parameters:
            other: the other parent; must have the same number of weights and activation

        Returns:
            New child neuron
        """
        if len(self._weights) != len(other._weights):
            raise ShapeMismatchError(f"Cannot cross over neurons with {len(self._weights)} "
                                     f"and {len(other._weights)} weights")
        if self._activation != other._activation:
            raise ShapeMismatchError(f"Cannot cross over neurons with activations "
                                     f"'{self._activation.value}' and '{other._activation.value}'")

        prob = self._config.crossover_gene_prob

        weights = [w_self if random.random() < prob else w_other
                   for w_self, w_other in zip(self._weights, other._weights)]
        bias    = self._bias if random.random() < prob else other._bias

        return Neuron(len(weights), self._activation, self._config, weights=weights, bias=bias)

    def mutate(self) -> None:
        """
        Stochastically mutate the neuron, in place.

        Both whether a mutation occurs and its nature & magnitude are stochastic,
        independently for each weight and for the bias. Mutating a parameter can
        be accomplished in two ways:
         + modifying the current value additively by a small amount
         + replacing the current value by a new one
        """
        config = self._config

        for i in range(len(self._weights)):
            self._weights[i] = self._mutate_value(self._weights[i],
                                                  config.weight_perturb_prob,
                                                  config.weight_replace_prob,
                                                  config.weight_perturb_strength,
                                                  config.weight_init_mean,
                                                  config.weight_init_stdev,
                                                  config.min_weight,
                                                  config.max_weight)

        self._bias = self._mutate_value(self._bias,
                                        config.bias_perturb_prob,
                                        config.bias_replace_prob,
                                        config.bias_perturb_strength,
                                        config.bias_init_mean,
                                        config.bias_init_stdev,
                                        config.min_bias,
                                        config.max_bias)

    @staticmethod
    def _mutate_value(value        : float,
                      perturb_prob : float,
                      replace_prob : float,
                      strength     : float,
                      init_mean    : float,
                      init_stdev   : float,
                      min_value    : float,
                      max_value    : float) -> float:
        """
        Apply the perturb-or-replace mutation policy to a single gene.

        Returns:
            the (possibly unchanged) new value of the gene
        """
        r = random.random()
        if r < perturb_prob:
            new_value = value + random.gauss(0, strength)
            return float(max(min_value, min(max_value, new_value)))  # Clip it

        elif r < perturb_prob + replace_prob:
            # uniform replacement needs finite bounds, otherwise redraw as for a new neuron
            if math.isfinite(min_value) and math.isfinite(max_value):
                return random.uniform(min_value, max_value)
            new_value = random.gauss(init_mean, init_stdev)
            return float(max(min_value, min(max_value, new_value)))

        return value

    def copy(self) -> 'Neuron':
        """Independent copy of this neuron (no shared weight storage)."""
        return Neuron(len(self._weights), self._activation, self._config,
                      weights=self._weights.copy(), bias=self._bias)

    def to_dict(self) -> dict:
        """
        Convert the neuron to a dictionary representation.

        Returns:
            {"activation": "tanh", "bias": 0.1, "weights": [0.5, -0.3]}
        """
        return {
            "activation": self._activation.value,
            "bias"      : self._bias,
            "weights"   : self._weights.tolist()
        }

    @classmethod
    def from_dict(cls, neuron_dict: dict, config: Config) -> 'Neuron':
        """
        Create a neuron from a dictionary description (see 'to_dict').

        Parameters:
            neuron_dict: dictionary with "activation", "bias" and "weights" entries
            config:      Stores configuration parameters

        Returns:
            The neuron described by the dictionary
        """
        try:
            weights    = neuron_dict["weights"]
            bias       = neuron_dict["bias"]
            activation = neuron_dict["activation"]
        except KeyError as e:
            raise ValueError(f"Neuron description is missing the {e} entry") from None

        return cls(len(weights), activation, config, weights=weights, bias=bias)

    def __repr__(self):
        return (f"Neuron(num_inputs={len(self._weights)}, activation=ActivationKind.{self._activation.name}, "
                f"weights={self._weights.tolist()}, bias={self._bias})")

    def __str__(self):
        weights_str = ",".join(f"{w:+.2f}" for w in self._weights)
        return f"[{activation_codes[self._activation]},b={self._bias:+.2f},w=({weights_str})]"
