# aad/ops/arithmetic.py
from contextlib import contextmanager

import numpy as np

from ..core.errors import DivisionByZero, NumericDomainError
from ..core.node import Node, Op


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else Node(x)


@contextmanager
def _domain(op: Op):
    """Evaluate numpy scalar math with floating-point errors raised as NumericDomainError."""
    try:
        with np.errstate(over="raise", divide="raise", invalid="raise", under="ignore"):
            yield
    except FloatingPointError as exc:
        raise NumericDomainError(f"{op.value}: {exc}", op=op.value) from exc


def _check_finite(op: Op, *numbers):
    for n in numbers:
        if not np.isfinite(n):
            raise NumericDomainError(f"{op.value}: result is not finite ({n!r})", op=op.value)


def _unary(x, f, dfdx, op: Op):
    """
    Generic unary primitive:
      - computes out.value = f(x.value)
      - records the local partial dout/dx next to the operand
    """
    x = _as_node(x)
    with _domain(op):
        val = f(x.value)
        partial = dfdx(x.value, val)
    _check_finite(op, val, partial)
    return Node._from_op(val, op, [(x, partial)])


def _binary(x, y, f, dfdx, dfdy, op: Op):
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value)
      - records the local partials (dout/dx, dout/dy) next to the operands
    """
    x = _as_node(x)
    y = _as_node(y)
    a, b = x.value, y.value
    with _domain(op):
        val = f(a, b)
        px = dfdx(a, b)
        py = dfdy(a, b)
    _check_finite(op, val, px, py)
    return Node._from_op(val, op, [(x, px), (y, py)])


def add(x, y): return _binary(x, y, lambda a, b: a + b, lambda a, b: 1.0, lambda a, b: 1.0,  Op.ADD)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, lambda a, b: 1.0, lambda a, b: -1.0, Op.SUB)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, lambda a, b: b,   lambda a, b: a,    Op.MUL)


def div(x, y):
    """
    Division x / y.

    Local partials:
      dout/dx = 1 / y
      dout/dy = -x / y^2
    """
    y = _as_node(y)
    if y.value == 0.0:
        raise DivisionByZero("div: division by a zero-valued Node", op=Op.DIV.value)
    return _binary(x, y, lambda a, b: a / b, lambda a, b: 1.0 / b, lambda a, b: -(a / b) / b, Op.DIV)


def neg(x):
    return _unary(x, lambda a: -a, lambda a, out: -1.0, Op.NEG)


def pow(x, k):
    """
    Power by a constant exponent:
      out.value = x.value ** k
      dout/dx   = k * x^(k-1)

    `k` is a plain number and does not take part in differentiation.
    """
    if isinstance(k, Node) or not isinstance(k, (int, float, np.integer, np.floating)):
        raise TypeError(f"pow: exponent must be a real number, got {type(k)}")
    x = _as_node(x)
    k = np.float64(k)
    base = x.value
    if base == 0.0 and k < 0.0:
        raise DivisionByZero(f"pow: zero base raised to negative power {k}", op=Op.POW.value)
    if base < 0.0 and not float(k).is_integer():
        raise NumericDomainError(
            f"pow: negative base {base} raised to non-integer power {k}", op=Op.POW.value
        )
    if k == 0.0:
        return _unary(x, lambda a: np.float64(1.0), lambda a, out: 0.0, Op.POW)
    return _unary(x, lambda a: a ** k, lambda a, out: k * a ** (k - 1.0), Op.POW)
