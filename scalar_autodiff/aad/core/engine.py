# aad/core/engine.py
from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np

from .errors import NumericDomainError
from .node import Node

logger = logging.getLogger(__name__)


def topological_order(root: Node) -> List[Node]:
    """
    Every Node reachable from `root`, each exactly once, ordered so that a
    Node's operands come before it (`root` is last).

    Depth-first over `operands` in argument order. The walk keeps its own
    stack, so graph depth is not bounded by the interpreter recursion limit.
    """
    if not isinstance(root, Node):
        raise TypeError(f"expected a Node, got {type(root)}")

    order: List[Node] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        # reversed so the first operand is explored first
        for operand in reversed(node.operands):
            if id(operand) not in visited:
                stack.append((operand, False))
    return order


def propagate(root: Node, seed: float = 1.0) -> None:
    """
    Run a single reverse pass from `root`.

    Args:
        root: the Node treated as the final (loss) output.
        seed: added to root.grad before the sweep (d root / d root = 1).

    Notes:
        - Gradients are accumulated, never overwritten: call `zero_grad` /
          `zero_graph_grad` first if a fresh pass must start from 0.
        - Raises NumericDomainError if a gradient overflows; gradients
          already accumulated before the failure are left in place.
        - Nodes are processed consumers-first, so by the time a Node's
          `local_backward` runs its own grad is complete.
    """
    order = topological_order(root)
    root.grad += seed

    # Backward sweep; overflow or NaN in a gradient aborts the pass
    node = root
    try:
        with np.errstate(over="raise", invalid="raise", under="ignore"):
            for node in reversed(order):
                if node.grad == 0.0:
                    continue  # nothing to propagate
                node.local_backward()
    except FloatingPointError as exc:
        raise NumericDomainError(
            f"propagate: {exc} below a {node.op.value} Node", op=node.op.value
        ) from exc

    logger.debug("propagate: %d nodes from %s", len(order), root.op.value)


def zero_grad(nodes: Iterable[Node]) -> None:
    """Set the gradient of every given Node to zero."""
    for node in nodes:
        node.zero_grad()


def zero_graph_grad(root: Node) -> None:
    """
    Set all gradients in the graph below `root` (inclusive) to zero.
    We walk the graph to find all reachable Nodes and zero their `.grad`.
    """
    zero_grad(topological_order(root))
