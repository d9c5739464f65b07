# aad/ops/transcendental.py
import numpy as np

from ..core.errors import NumericDomainError
from ..core.node import Op
from .arithmetic import _as_node, _unary


def exp(x):
    # dout/dx = exp(x) = out
    return _unary(x, np.exp, lambda a, out: out, Op.EXP)


def log(x):
    x = _as_node(x)
    if x.value <= 0.0:
        raise NumericDomainError(f"log: argument must be positive, got {x.value}", op=Op.LOG.value)
    return _unary(x, np.log, lambda a, out: 1.0 / a, Op.LOG)


def tanh(x):
    # dout/dx = 1 - tanh(x)^2
    return _unary(x, np.tanh, lambda a, out: 1.0 - out * out, Op.TANH)
