# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .node import Node
from .engine import propagate


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, name: str) -> Node:
    """Wrap a plain value as a leaf Node if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else Node(v, label=name)


def _seed_output(y: Any, fname: str) -> Node:
    if isinstance(y, Node):
        return y
    if isinstance(y, (int, float)) or hasattr(y, "dtype"):
        # constant output: every gradient is zero
        return Node(y, label="y")
    raise TypeError(f"{fname} expects f to return a Node or a number, got {type(y)}")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Builds a fresh graph from a new leaf and runs one reverse pass.
    """
    x = _ensure_node(x0, name="x")
    x.zero_grad()
    y = _seed_output(f(x), "grad(f, x0)")
    propagate(y)
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a scalar Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: number}  # gradients in the same key order as `inputs`
    """
    nodes: Dict[str, Node] = {k: _ensure_node(v, name=k) for k, v in inputs.items()}
    for node in nodes.values():
        node.zero_grad()
    y = _seed_output(f(nodes), "grads(f, inputs)")
    propagate(y)
    return {k: nodes[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    for x in xs:
        x.zero_grad()
    y = _seed_output(f(xs), "grads_list(f, x0_list)")
    propagate(y)
    return [x.grad for x in xs]
