"""
evonet Network Module

This module implements the Network class: an ordered stack of neuron layers
which can be evaluated, recombined with a structurally compatible network,
and mutated in place.

Classes:
    Network: A layered feedforward neural network
"""

import logging
import numpy as np
from typing import Sequence

from evonet.activations    import ActivationKind
from evonet.config         import Config
from evonet.errors         import ShapeMismatchError
from evonet.network.neuron import Neuron

logger = logging.getLogger(__name__)

class Network:
    """
    A layered feedforward neural network evolved without gradients.

    The network is an ordered sequence of layers, each an ordered sequence of
    neurons. Every neuron in a layer consumes the full output vector of the
    previous layer (or the network inputs, for the first layer). Hidden layers
    use the tanh activation; the output layer uses the identity activation, so
    outputs are unbounded real values.

    The shape of a network (number of inputs, outputs, layers and neurons per
    layer) is fixed at construction: mutation only changes neuron parameters,
    and crossover only combines networks of identical shape.

    Public Properties:
        input_count:        Number of network inputs
        output_count:       Number of network outputs
        layers:             Tuple of layers, each a tuple of neurons
        num_layers:         Number of layers (hidden layers + output layer)
        layer_sizes:        Number of neurons in each layer
        hidden_layer_sizes: Number of neurons in each hidden layer

    Public Methods:
        predict(inputs):        Evaluate the network on one input vector
        predict_batch(inputs):  Evaluate the network on a batch of input vectors
        crossover(other):       Create a child network from two compatible parents
        mutate():               Stochastically mutate every neuron, in place
        is_compatible(other):   Whether two networks have the same shape
        neuron(layer, index):   Access a single neuron
        copy():                 Independent copy of this network
        to_dict():              Convert the network to a dictionary representation

    Class Methods:
        from_config(config):             Create a network with the shape given in the configuration
        from_dict(network_dict, config): Create a network from a dictionary description
    """

    def __init__(self,
                 input_count       : int,
                 output_count      : int,
                 hidden_layer_sizes: Sequence[int] = (),
                 config            : Config | None = None):
        """
        Initialize a network with randomly initialized neurons.

        One tanh layer is created for each entry of 'hidden_layer_sizes', followed
        by one identity layer of 'output_count' neurons. With no hidden layers the
        output layer is fed directly by the inputs.

        Parameters:
            input_count:        Number of network inputs
            output_count:       Number of network outputs
            hidden_layer_sizes: Number of neurons in each hidden layer, input side first
            config:             Stores configuration parameters (defaults to Config())
        """
        if input_count < 0 or output_count < 0:
            raise ValueError(f"Input and output counts must be non-negative, "
                             f"got {input_count} and {output_count}")
        for size in hidden_layer_sizes:
            if size < 0:
                raise ValueError(f"Hidden layer sizes must be non-negative, got {list(hidden_layer_sizes)}")

        self._config      : Config = config if config is not None else Config()
        self._input_count : int    = input_count
        self._output_count: int    = output_count

        layers: list[list[Neuron]] = []
        prev_layer_size = input_count
        for size in hidden_layer_sizes:
            layers.append([Neuron(prev_layer_size, ActivationKind.TANH, self._config) for _ in range(size)])
            prev_layer_size = size
        layers.append([Neuron(prev_layer_size, ActivationKind.IDENTITY, self._config) for _ in range(output_count)])
        self._layers: list[list[Neuron]] = layers

        logger.debug("Created network with layer sizes %s fed by %d inputs", self.layer_sizes, input_count)

    @classmethod
    def from_config(cls, config: Config) -> 'Network':
        """
        Create a randomly initialized network with the shape given in the
        configuration ('num_inputs', 'num_outputs' and 'hidden_layer_sizes').
        """
        return cls(config.num_inputs, config.num_outputs, config.hidden_layer_sizes, config)

    @classmethod
    def _from_layers(cls,
                     input_count : int,
                     output_count: int,
                     layers      : list[list[Neuron]],
                     config      : Config) -> 'Network':
        """
        Assemble a network from already built layers (no random initialization).
        The caller is responsible for the layers being consistent with the counts.
        """
        network = cls.__new__(cls)
        network._config       = config
        network._input_count  = input_count
        network._output_count = output_count
        network._layers       = layers
        return network

    @property
    def input_count(self) -> int:
        """Number of network inputs."""
        return self._input_count

    @property
    def output_count(self) -> int:
        """Number of network outputs."""
        return self._output_count

    @property
    def layers(self) -> tuple[tuple[Neuron, ...], ...]:
        """
        The layers of the network, from the input side to the output layer.

        The tuples are fresh but the neurons are the network's own: a later
        mutate() on the network is visible through them. Use to_dict() for a
        detached snapshot.
        """
        return tuple(tuple(layer) for layer in self._layers)

    @property
    def num_layers(self) -> int:
        """Number of layers (hidden layers plus the output layer)."""
        return len(self._layers)

    @property
    def layer_sizes(self) -> list[int]:
        """Number of neurons in each layer, output layer included."""
        return [len(layer) for layer in self._layers]

    @property
    def hidden_layer_sizes(self) -> list[int]:
        """Number of neurons in each hidden layer."""
        return self.layer_sizes[:-1]

    def neuron(self, layer: int, index: int) -> Neuron:
        """The 'index'-th neuron of the 'layer'-th layer (live, not a copy)."""
        return self._layers[layer][index]

    def predict(self, inputs: Sequence[float]) -> list[float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            the network inputs (as many as 'input_count')

        Returns:
            the results of passing the inputs through the network (as many as 'output_count')
        """
        if len(inputs) != self._input_count:
            raise ShapeMismatchError(f"Expected {self._input_count} inputs, got {len(inputs)}")

        last_activations = [float(x) for x in inputs]
        for layer in self._layers:
            last_activations = [neuron.activate(last_activations) for neuron in layer]

        return last_activations

    def predict_batch(self, inputs: np.ndarray) -> np.ndarray:
        """
        Perform a forward pass for a whole batch of input vectors.

        Parameters:
            inputs: array of shape (batch_size, input_count), or (input_count,)
                    which is auto-reshaped to (1, input_count)

        Returns:
            array of shape (batch_size, output_count)
        """
        values = np.asarray(inputs, dtype=np.float64)
        if values.ndim == 1:
            values = values.reshape(1, -1)
        if values.ndim != 2 or values.shape[1] != self._input_count:
            raise ShapeMismatchError(f"Expected inputs of shape (batch_size, {self._input_count}), "
                                     f"got {values.shape}")

        for layer in self._layers:
            outputs = np.empty((values.shape[0], len(layer)), dtype=np.float64)
            for j, neuron in enumerate(layer):
                outputs[:, j] = neuron.activation(values @ neuron.weights + neuron.bias)
            values = outputs

        return values

    def is_compatible(self, other: 'Network') -> bool:
        """
        Whether two networks are structurally compatible: same number of inputs,
        outputs and layers, and same number of neurons in each layer.
        """
        return self._shape_mismatch(other) is None

    def _shape_mismatch(self, other: 'Network') -> str | None:
        """
        Describe the first difference in shape between two networks.

        Returns:
            None if the networks are structurally compatible, a message otherwise
        """
        if self._input_count != other._input_count:
            return f"input counts differ ({self._input_count} vs {other._input_count})"
        if self._output_count != other._output_count:
            return f"output counts differ ({self._output_count} vs {other._output_count})"
        if len(self._layers) != len(other._layers):
            return f"layer counts differ ({len(self._layers)} vs {len(other._layers)})"
        for i, (layer_self, layer_other) in enumerate(zip(self._layers, other._layers)):
            if len(layer_self) != len(layer_other):
                return f"layer {i} sizes differ ({len(layer_self)} vs {len(layer_other)})"
        return None

    def crossover(self, other: 'Network') -> 'Network':
        """
        Create a child network by crossing over this network with another.

        Each neuron of the child is the crossover of the neurons found at the same
        position (same layer, same index within the layer) in the two parents.
        Neither parent is modified.

        Parameters:
            other: the other parent; must be structurally compatible with 'self'

        Returns:
            New child network, with the same shape as its parents
        """
        mismatch = self._shape_mismatch(other)
        if mismatch is not None:
            raise ShapeMismatchError(f"Cannot cross over incompatible networks: {mismatch}")

        new_layers = [[neuron_self.crossover(neuron_other)
                       for neuron_self, neuron_other in zip(layer_self, layer_other)]
                      for layer_self, layer_other in zip(self._layers, other._layers)]

        logger.debug("Crossed over networks with layer sizes %s", self.layer_sizes)
        return Network._from_layers(self._input_count, self._output_count, new_layers, self._config)

    def mutate(self) -> None:
        """
        Stochastically mutate every neuron of the network, in place.
        The shape of the network never changes.
        """
        for layer in self._layers:
            for neuron in layer:
                neuron.mutate()

        logger.debug("Mutated network with layer sizes %s", self.layer_sizes)

    def copy(self) -> 'Network':
        """Independent copy of this network (no neuron is shared with the original)."""
        new_layers = [[neuron.copy() for neuron in layer] for layer in self._layers]
        return Network._from_layers(self._input_count, self._output_count, new_layers, self._config)

    def to_dict(self) -> dict:
        """
        Convert the network to a dictionary representation.

        This is the inverse operation of from_dict(), producing
        a dictionary that can be used to reconstruct the network.

        Returns:
            Dictionary with the following structure:
            {
                "input_count" : 2,
                "output_count": 1,
                "layers": [
                    [{"activation": "tanh", "bias": 0.1, "weights": [0.5, -0.3]},
                     {"activation": "tanh", "bias": 0.0, "weights": [1.2,  0.7]}],
                    [{"activation": "identity", "bias": -0.4, "weights": [0.9, 2.1]}]
                ]
            }
        """
        return {
            "input_count" : self._input_count,
            "output_count": self._output_count,
            "layers"      : [[neuron.to_dict() for neuron in layer] for layer in self._layers]
        }

    @classmethod
    def from_dict(cls, network_dict: dict, config: Config | None = None) -> 'Network':
        """
        Create a network from a dictionary description (see 'to_dict').

        The description is validated: the last layer must have 'output_count'
        neurons, every neuron must have as many weights as the size of the
        previous layer ('input_count' for the first layer), hidden neurons must
        use the tanh activation and output neurons the identity activation.

        Parameters:
            network_dict: dictionary describing the network
            config:       Stores configuration parameters (defaults to Config())

        Returns:
            The network described by the dictionary
        """
        config = config if config is not None else Config()

        try:
            input_count  = network_dict["input_count"]
            output_count = network_dict["output_count"]
            layer_dicts  = network_dict["layers"]
        except KeyError as e:
            raise ValueError(f"Network description is missing the {e} entry") from None

        if not layer_dicts:
            raise ValueError("Network description must contain at least the output layer")
        if len(layer_dicts[-1]) != output_count:
            raise ValueError(f"Output layer has {len(layer_dicts[-1])} neurons, expected {output_count}")

        layers: list[list[Neuron]] = []
        prev_layer_size = input_count
        for i, layer_dict in enumerate(layer_dicts):
            expected_activation = ActivationKind.IDENTITY if i == len(layer_dicts) - 1 else ActivationKind.TANH
            layer = [Neuron.from_dict(neuron_dict, config) for neuron_dict in layer_dict]
            for neuron in layer:
                if neuron.num_inputs != prev_layer_size:
                    raise ValueError(f"Neuron in layer {i} has {neuron.num_inputs} weights, "
                                     f"expected {prev_layer_size}")
                if neuron.activation is not expected_activation:
                    raise ValueError(f"Neuron in layer {i} uses the '{neuron.activation.value}' activation, "
                                     f"expected '{expected_activation.value}'")
            layers.append(layer)
            prev_layer_size = len(layer)

        return cls._from_layers(input_count, output_count, layers, config)

    def __repr__(self):
        return (f"Network(input_count={self._input_count}, output_count={self._output_count}, "
                f"hidden_layer_sizes={self.hidden_layer_sizes})")

    def __str__(self):
        lines = [f"Inputs: {self._input_count}"]
        for i, layer in enumerate(self._layers):
            neurons_str = "\n".join(f"    {neuron}" for neuron in layer)
            lines.append(f"  Layer {i}:\n{neurons_str}")
        return "\n".join(lines)
