"""
Finite-difference gradient checks.

Bumping formula (central):
    df/dx_i ~ [f(x + eps*e_i) - f(x - eps*e_i)] / (2*eps)

The forward variant delegates to scipy.optimize.approx_fprime.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np
from scipy.optimize import approx_fprime

from .engine import propagate
from .node import Node
from .seeds import value


@dataclass
class GradCheckResult:
    """Analytic vs numerical gradient at one point."""
    analytic: np.ndarray
    numerical: np.ndarray
    max_abs_error: float
    ok: bool


def _evaluate(f: Callable[[List[Node]], Node], x: Sequence[float]) -> float:
    """Evaluate f on fresh leaves and return its plain value."""
    return float(value(f([Node(v) for v in x])))


def numerical_grads(f: Callable[[List[Node]], Node], x0: Sequence[float],
                    epsilon: float = 1e-6, method: str = "central") -> np.ndarray:
    """
    Numerical gradient of a scalar Node-valued function f(xs) at x0.

    Args:
        f: function taking a list of Nodes and returning a scalar Node
        x0: point to evaluate at
        epsilon: bump size
        method: 'central' (two evaluations per input) or 'forward'
    """
    x0 = np.asarray(x0, dtype=np.float64)
    if method == "forward":
        return approx_fprime(x0, lambda x: _evaluate(f, x), epsilon)
    if method != "central":
        raise ValueError(f"Unknown finite-difference method: {method}")

    g = np.zeros_like(x0)
    for i in range(x0.size):
        bump = np.zeros_like(x0)
        bump[i] = epsilon
        V_up = _evaluate(f, x0 + bump)
        V_dn = _evaluate(f, x0 - bump)
        g[i] = (V_up - V_dn) / (2.0 * epsilon)
    return g


def check_grads(f: Callable[[List[Node]], Node], x0: Sequence[float], *,
                epsilon: float = 1e-6, rtol: float = 1e-4, atol: float = 1e-6,
                method: str = "central") -> GradCheckResult:
    """
    Compare one reverse pass against finite differences.

    Returns:
        GradCheckResult; `ok` is np.allclose(analytic, numerical, rtol, atol).
    """
    xs = [Node(v, label=f"x{i}") for i, v in enumerate(x0)]
    y = f(xs)
    if not isinstance(y, Node):
        raise TypeError(f"check_grads expects f to return a Node, got {type(y)}")
    propagate(y)
    analytic = np.array([x.grad for x in xs], dtype=np.float64)

    numerical = numerical_grads(f, x0, epsilon=epsilon, method=method)
    max_abs_error = float(np.max(np.abs(analytic - numerical))) if analytic.size else 0.0
    return GradCheckResult(
        analytic=analytic,
        numerical=numerical,
        max_abs_error=max_abs_error,
        ok=bool(np.allclose(analytic, numerical, rtol=rtol, atol=atol)),
    )
