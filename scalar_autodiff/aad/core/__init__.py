# aad/core/__init__.py

"""
Core public API for the scalar AD engine.

Exports:
    Node              : A differentiable scalar vertex of the computation graph.
    Op                : Closed set of operator tags a Node can carry.
    propagate         : Run a single reverse pass to accumulate gradients.
    topological_order : Operands-first ordering of the graph below a root.
    zero_grad         : Reset the gradients of the given Nodes to zero.
    zero_graph_grad   : Reset every gradient in the graph below a root.
    grad, grads       : Convenience: gradients of plain-number functions.
    value             : Convenience: extract the primal value from a Node.
"""

from .errors import AutodiffError, NumericDomainError, DivisionByZero, DimensionMismatch
from .node import Node, Op
from .engine import propagate, topological_order, zero_grad, zero_graph_grad
from .seeds import grad, grads, grads_list, value

__all__ = [
    "AutodiffError", "NumericDomainError", "DivisionByZero", "DimensionMismatch",
    "Node", "Op",
    "propagate", "topological_order", "zero_grad", "zero_graph_grad",
    "grad", "grads", "grads_list", "value",
]
