# aad/ops/__init__.py

# Convenience re-exports so users can do: from scalar_autodiff.aad.ops import mul, tanh, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import exp, log, tanh
from .special import relu, sigmoid

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "log", "tanh",
    "relu", "sigmoid",
]
