# aad/core/node.py
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional, Tuple

import numpy as np

from .errors import NumericDomainError

_NUMERIC_TYPES = (int, float, np.integer, np.floating)


class Op(str, Enum):
    """Closed set of operators a Node can be produced by."""
    LEAF = "leaf"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    NEG = "neg"
    POW = "pow"
    RELU = "relu"
    TANH = "tanh"
    EXP = "exp"
    LOG = "log"
    SIGMOID = "sigmoid"


def _as_float64(value: Any) -> np.float64:
    if isinstance(value, (Node, bool, np.bool_)) or not isinstance(value, _NUMERIC_TYPES):
        raise TypeError(
            f"Node only accepts real scalars (int, float, numpy scalar), "
            f"but got {type(value)}"
        )
    value = np.float64(value)
    if not np.isfinite(value):
        raise NumericDomainError(f"Node value must be finite, got {value!r}")
    return value


class Node:
    """
    One vertex of the scalar computation graph.

    Attributes
    ----------
    value : np.float64
        Forward (primal) value. Fixed at construction for computed Nodes;
        assignable on leaves so that parameter updates can happen in place.
    grad : float
        Gradient accumulator, 0.0 at construction. Only `propagate` adds
        into it; callers reset it with `zero_grad()`.
    op : Op
        Operator that produced this Node (`Op.LEAF` for raw scalars).
    operands : tuple[Node, ...]
        The Nodes this one was computed from, in argument order.
    label : Optional[str]
        Optional debug name.
    """

    # numpy scalars on the left of an operator defer to Node's reflected ops
    __array_ufunc__ = None

    def __init__(self, value: Any, *, label: Optional[str] = None):
        self._value = _as_float64(value)
        self.grad = 0.0
        self.op = Op.LEAF
        # (operand, local partial d(self)/d(operand)) pairs
        self._parents: Tuple[Tuple[Node, np.float64], ...] = ()
        self.label = label

    @classmethod
    def _from_op(cls, value, op: Op, parents: Iterable[Tuple[Node, Any]],
                 label: Optional[str] = None) -> Node:
        out = cls.__new__(cls)
        out._value = np.float64(value)
        out.grad = 0.0
        out.op = op
        out._parents = tuple((p, np.float64(partial)) for p, partial in parents)
        out.label = label
        return out

    # ------------------------------------------------------------------ #
    @property
    def value(self) -> np.float64:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if not self.is_leaf:
            raise AttributeError(
                f"value of a computed Node ({self.op.value}) is fixed at construction"
            )
        self._value = _as_float64(new_value)

    @property
    def operands(self) -> Tuple[Node, ...]:
        return tuple(p for p, _ in self._parents)

    @property
    def local_partials(self) -> Tuple[np.float64, ...]:
        return tuple(partial for _, partial in self._parents)

    @property
    def is_leaf(self) -> bool:
        return not self._parents

    def local_backward(self) -> None:
        """Add this Node's gradient contribution into each operand's grad."""
        g = self.grad
        for operand, partial in self._parents:
            operand.grad += partial * g

    def backward(self) -> None:
        from .engine import propagate
        propagate(self)

    def zero_grad(self) -> None:
        self.grad = 0.0

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self):
        name = f", label={self.label!r}" if self.label is not None else ""
        return f"Node(value={float(self._value)!r}, grad={float(self.grad)!r}, op={self.op.value!r}{name})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    # Nonlinearities
    def relu(self):
        from ..ops.special import relu
        return relu(self)

    def sigmoid(self):
        from ..ops.special import sigmoid
        return sigmoid(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def log(self):
        from ..ops.transcendental import log
        return log(self)
