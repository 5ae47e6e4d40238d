"""
evonet Rendering Module

This module draws a Network with Graphviz. It works on the dictionary
snapshot returned by 'Network.to_dict()', so it never holds a live neuron.

Connections are colored from red (most negative weight) to green (most
positive weight), with a pen width proportional to the weight magnitude.
Neurons are colored the same way according to their bias. Input nodes are grey.

Functions:
    lerp_color(c1, c2, frac): Linear interpolation between two RGB colors
    render_network(network):  Build a graphviz.Digraph depicting a network or its snapshot
"""

import graphviz  # type: ignore
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from evonet.network import Network

RED   = (255, 0, 0)
GREEN = (0, 255, 0)
INPUT_COLOR = "#7f7f7f"

MAX_PENWIDTH = 4.0

def lerp_color(c1: tuple[int, int, int], c2: tuple[int, int, int], frac: float) -> str:
    """
    Interpolate between two RGB colors.

    Parameters:
        c1:   color returned when 'frac' is 1
        c2:   color returned when 'frac' is 0
        frac: interpolation fraction, in [0, 1]

    Returns:
        the interpolated color, as a '#rrggbb' string
    """
    if not 0.0 <= frac <= 1.0:
        raise ValueError(f"Interpolation fraction must be in [0, 1], got {frac}")

    r, g, b = (round(x * frac + y * (1.0 - frac)) for x, y in zip(c1, c2))
    return f"#{r:02x}{g:02x}{b:02x}"

def _signed_fraction(value: float, max_abs: float) -> float:
    """Map 'value' from [-max_abs, max_abs] onto [0, 1] (0.5 when max_abs is 0)."""
    if max_abs == 0.0:
        return 0.5
    return (value + max_abs) / (2.0 * max_abs)

def render_network(network: Union['Network', dict], view: bool = False) -> graphviz.Digraph:
    """
    Visualize the network using Graphviz.

    Parameters:
        network: the network to draw, or its 'to_dict()' description
        view:    If True, automatically open the visualization after rendering

    Returns:
        graphviz.Digraph object representing the network
    """
    description = network if isinstance(network, dict) else network.to_dict()
    input_count = description["input_count"]
    layers      = description["layers"]

    weights = [abs(w) for layer in layers for neuron in layer for w in neuron["weights"]]
    biases  = [abs(neuron["bias"]) for layer in layers for neuron in layer]
    max_weight_abs = max(weights, default=0.0)
    max_bias_abs   = max(biases,  default=0.0)

    dot = graphviz.Digraph()
    dot.attr(rankdir='LR')  # Left to right layout
    dot.attr('graph', labelloc='t')

    node_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                  'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}

    with dot.subgraph(name='cluster_input') as input_cluster:
        input_cluster.attr(rank='source', label='Inputs', style='invisible')
        for i in range(input_count):
            input_cluster.node(f"in{i}", label=f"in{i}", fillcolor=INPUT_COLOR, **node_attrs)

    for layer_index, layer in enumerate(layers):
        is_output = layer_index == len(layers) - 1
        with dot.subgraph(name=f"cluster_layer{layer_index}") as layer_cluster:
            layer_cluster.attr(rank='sink' if is_output else 'same',
                               label='Outputs' if is_output else f"Hidden {layer_index}",
                               style='invisible')
            for neuron_index, neuron in enumerate(layer):
                bias  = neuron["bias"]
                color = lerp_color(GREEN, RED, _signed_fraction(bias, max_bias_abs))
                layer_cluster.node(f"n{layer_index}_{neuron_index}",
                                   label=f"b={bias:.2f}", fillcolor=color, **node_attrs)

    # Add edges, one per weight
    for layer_index, layer in enumerate(layers):
        prev_names = ([f"in{i}" for i in range(input_count)] if layer_index == 0 else
                      [f"n{layer_index - 1}_{j}" for j in range(len(layers[layer_index - 1]))])
        for neuron_index, neuron in enumerate(layer):
            for prev_name, weight in zip(prev_names, neuron["weights"]):
                penwidth = 0.0 if max_weight_abs == 0.0 else abs(weight) / max_weight_abs * MAX_PENWIDTH
                dot.edge(prev_name, f"n{layer_index}_{neuron_index}",
                         label=f"w={weight:.2f}",
                         color=lerp_color(GREEN, RED, _signed_fraction(weight, max_weight_abs)),
                         penwidth=f"{penwidth:.2f}",
                         fontsize='5',
                         arrowsize='0.5')

    if view:
        dot.view(cleanup=True)

    return dot
