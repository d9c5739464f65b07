# scalar_autodiff/__init__.py
# Scalar reverse-mode automatic differentiation and a small MLP built on it.

__version__ = "0.1.0"

from .aad import (
    AutodiffError,
    NumericDomainError,
    DivisionByZero,
    DimensionMismatch,
    Node,
    Op,
    propagate,
    topological_order,
    zero_grad,
    zero_graph_grad,
)
from .nn import Activation, MLPConfig, Neuron, Layer, MLP

__all__ = [
    'AutodiffError',
    'NumericDomainError',
    'DivisionByZero',
    'DimensionMismatch',
    'Node',
    'Op',
    'propagate',
    'topological_order',
    'zero_grad',
    'zero_graph_grad',
    'Activation',
    'MLPConfig',
    'Neuron',
    'Layer',
    'MLP',
]
