"""
Network configuration.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Activation(str, Enum):
    """Nonlinearity applied to a Neuron's weighted sum."""
    TANH = "tanh"
    RELU = "relu"
    LINEAR = "linear"


@dataclass
class MLPConfig:
    """Configuration for building an MLP."""
    # Shape
    n_inputs: int = 2
    layer_sizes: List[int] = field(default_factory=lambda: [16, 16, 1])

    # Nonlinearities: hidden layers / last layer
    activation: Activation = Activation.TANH
    output_activation: Activation = Activation.LINEAR

    # Initialisation: weights ~ U(-init_scale, init_scale), biases = bias_init
    init_scale: float = 1.0
    bias_init: float = 0.0
    seed: Optional[int] = None

    def __post_init__(self):
        if self.n_inputs < 1:
            raise ValueError(f"n_inputs must be >= 1, got {self.n_inputs}")
        if not self.layer_sizes:
            raise ValueError("layer_sizes must name at least one layer")
        if any(size < 1 for size in self.layer_sizes):
            raise ValueError(f"layer sizes must be >= 1, got {self.layer_sizes}")
        if self.init_scale < 0.0:
            raise ValueError(f"init_scale must be non-negative, got {self.init_scale}")
        # accept plain strings such as "relu"
        self.activation = Activation(self.activation)
        self.output_activation = Activation(self.output_activation)
