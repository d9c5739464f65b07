# aad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.errors import AutodiffError, NumericDomainError, DivisionByZero, DimensionMismatch
from .core.node import Node, Op
from .core.engine import (
    propagate,
    topological_order,
    zero_grad,
    zero_graph_grad,
)
from .core.seeds import grad, grads, grads_list, value
from .core.checks import check_grads, numerical_grads, GradCheckResult
from .core.graph_utils import get_graph_stats, print_graph_summary, format_graph

from . import ops
from .ops import add, sub, mul, div, neg, pow, exp, log, tanh, relu, sigmoid

__all__ = [
    # Errors
    'AutodiffError',
    'NumericDomainError',
    'DivisionByZero',
    'DimensionMismatch',
    # Core
    'Node',
    'Op',
    # Engine
    'propagate',
    'topological_order',
    'zero_grad',
    'zero_graph_grad',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'check_grads',
    'numerical_grads',
    'GradCheckResult',
    'get_graph_stats',
    'print_graph_summary',
    'format_graph',
    # Operators
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'exp', 'log', 'tanh', 'relu', 'sigmoid',
]
