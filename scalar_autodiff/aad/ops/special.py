# aad/ops/special.py
import numpy as np

from ..core.node import Op
from .arithmetic import _unary


def relu(x):
    """
    Rectified linear unit: out = max(0, x).
    The gradient passes through only where x is strictly positive.
    """
    return _unary(
        x,
        lambda a: a if a > 0.0 else np.float64(0.0),
        lambda a, out: 1.0 if a > 0.0 else 0.0,
        Op.RELU,
    )


def sigmoid(x):
    """
    Logistic function, evaluated as 0.5 * (1 + tanh(x / 2)) so that large
    negative inputs cannot overflow exp.
    dout/dx = out * (1 - out)
    """
    return _unary(
        x,
        lambda a: 0.5 * (1.0 + np.tanh(0.5 * a)),
        lambda a, out: out * (1.0 - out),
        Op.SIGMOID,
    )
