"""
Neuron / Layer / MLP built directly on graph Nodes.

The network never touches gradients: forward() only assembles new Nodes
from the parameter leaves and the inputs. Parameters are updated from
outside (see training.optim.SGD).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..aad.core.errors import DimensionMismatch
from ..aad.core.node import Node
from .config import Activation, MLPConfig
from .module import Module

logger = logging.getLogger(__name__)


def _as_inputs(inputs) -> List[Node]:
    return [x if isinstance(x, Node) else Node(x) for x in inputs]


class Neuron(Module):
    """
    activation(bias + sum_i w_i * x_i)

    Attributes:
        weights (List[Node]): one learnable leaf per input
        bias (Node): learnable leaf
        activation (Activation): nonlinearity applied to the weighted sum
    """

    def __init__(self, n_inputs: int, activation=Activation.TANH, *,
                 rng: Optional[np.random.Generator] = None,
                 weights: Optional[Sequence[float]] = None,
                 bias: Optional[float] = None,
                 init_scale: float = 1.0, bias_init: float = 0.0):
        if n_inputs < 1:
            raise ValueError(f"Neuron needs at least one input, got {n_inputs}")
        self.activation = Activation(activation)

        if weights is None:
            rng = rng if rng is not None else np.random.default_rng()
            weights = rng.uniform(-init_scale, init_scale, size=n_inputs)
        elif len(weights) != n_inputs:
            raise DimensionMismatch(n_inputs, len(weights), where="Neuron weights")

        self.weights: List[Node] = [Node(w, label="w") for w in weights]
        self.bias = Node(bias_init if bias is None else bias, label="b")

    @property
    def n_inputs(self) -> int:
        return len(self.weights)

    def forward(self, inputs) -> Node:
        inputs = _as_inputs(inputs)
        if len(inputs) != self.n_inputs:
            raise DimensionMismatch(self.n_inputs, len(inputs), where="Neuron.forward")

        act = self.bias
        for w, x in zip(self.weights, inputs):
            act = act + w * x

        if self.activation is Activation.TANH:
            return act.tanh()
        if self.activation is Activation.RELU:
            return act.relu()
        return act

    __call__ = forward

    def parameters(self) -> List[Node]:
        return self.weights + [self.bias]

    def __repr__(self):
        return f"Neuron({self.n_inputs}, {self.activation.value})"


class Layer(Module):
    """Neurons sharing the same inputs; one output Node per Neuron."""

    def __init__(self, n_inputs: int, n_outputs: int, activation=Activation.TANH, *,
                 rng: Optional[np.random.Generator] = None,
                 init_scale: float = 1.0, bias_init: float = 0.0):
        if n_outputs < 1:
            raise ValueError(f"Layer needs at least one neuron, got {n_outputs}")
        rng = rng if rng is not None else np.random.default_rng()
        self.neurons: List[Neuron] = [
            Neuron(n_inputs, activation, rng=rng, init_scale=init_scale, bias_init=bias_init)
            for _ in range(n_outputs)
        ]

    @classmethod
    def from_neurons(cls, neurons: Sequence[Neuron]) -> Layer:
        neurons = list(neurons)
        if not neurons:
            raise ValueError("Layer needs at least one neuron")
        width = neurons[0].n_inputs
        for neuron in neurons[1:]:
            if neuron.n_inputs != width:
                raise DimensionMismatch(width, neuron.n_inputs, where="Layer neurons")
        layer = cls.__new__(cls)
        layer.neurons = neurons
        return layer

    @property
    def n_inputs(self) -> int:
        return self.neurons[0].n_inputs

    @property
    def n_outputs(self) -> int:
        return len(self.neurons)

    def forward(self, inputs) -> List[Node]:
        inputs = _as_inputs(inputs)
        if len(inputs) != self.n_inputs:
            raise DimensionMismatch(self.n_inputs, len(inputs), where="Layer.forward")
        return [neuron(inputs) for neuron in self.neurons]

    __call__ = forward

    def parameters(self) -> List[Node]:
        return [p for neuron in self.neurons for p in neuron.parameters()]

    def __repr__(self):
        return f"Layer([{', '.join(str(n) for n in self.neurons)}])"


class MLP(Module):
    """
    Layers applied in sequence; each layer's outputs are the next layer's inputs.

    Hidden layers use `activation`, the last layer `output_activation`
    (linear by default, so the output is an unsquashed score).
    """

    def __init__(self, n_inputs: int, layer_sizes: Sequence[int], *,
                 activation=Activation.TANH, output_activation=Activation.LINEAR,
                 rng: Optional[np.random.Generator] = None,
                 init_scale: float = 1.0, bias_init: float = 0.0):
        if not layer_sizes:
            raise ValueError("MLP needs at least one layer")
        rng = rng if rng is not None else np.random.default_rng()
        sizes = [n_inputs] + list(layer_sizes)
        n_layers = len(layer_sizes)
        self.layers: List[Layer] = [
            Layer(sizes[i], sizes[i + 1],
                  activation if i != n_layers - 1 else output_activation,
                  rng=rng, init_scale=init_scale, bias_init=bias_init)
            for i in range(n_layers)
        ]
        logger.debug("MLP %s: %d parameters", sizes, self.num_parameters())

    @classmethod
    def from_layers(cls, layers: Sequence[Layer]) -> MLP:
        layers = list(layers)
        if not layers:
            raise ValueError("MLP needs at least one layer")
        for i in range(1, len(layers)):
            if layers[i].n_inputs != layers[i - 1].n_outputs:
                raise DimensionMismatch(layers[i].n_inputs, layers[i - 1].n_outputs,
                                        where=f"MLP layer {i}")
        model = cls.__new__(cls)
        model.layers = layers
        return model

    @classmethod
    def from_config(cls, config: MLPConfig) -> MLP:
        return cls(config.n_inputs, config.layer_sizes,
                   activation=config.activation,
                   output_activation=config.output_activation,
                   rng=np.random.default_rng(config.seed),
                   init_scale=config.init_scale,
                   bias_init=config.bias_init)

    @property
    def n_inputs(self) -> int:
        return self.layers[0].n_inputs

    @property
    def n_outputs(self) -> int:
        return self.layers[-1].n_outputs

    def forward(self, inputs) -> List[Node]:
        x = _as_inputs(inputs)
        if len(x) != self.n_inputs:
            raise DimensionMismatch(self.n_inputs, len(x), where="MLP.forward")
        for layer in self.layers:
            x = layer(x)
        return x

    __call__ = forward

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def summary(self) -> str:
        lines = ["MLP:"]
        for layer in self.layers:
            lines.append("Layer:")
            for neuron in layer.neurons:
                lines.append(f"Neuron: ({neuron.n_inputs}, {neuron.activation.value})")
        return "\n".join(lines)

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
