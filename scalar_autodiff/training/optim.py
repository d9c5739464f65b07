"""
Plain gradient descent on parameter leaves.
"""

from typing import Iterable

from ..aad.core.engine import zero_grad
from ..aad.core.node import Node


class SGD:
    """
    theta <- theta - lr * dL/dtheta for every parameter leaf.

    Gradients are not reset by step(); call zero_grad() before the next
    propagate, otherwise they accumulate across iterations.
    """

    def __init__(self, parameters: Iterable[Node], lr: float = 0.1):
        self.parameters = list(parameters)
        self.lr = lr

    def step(self) -> None:
        for p in self.parameters:
            p.value = p.value - self.lr * p.grad

    def zero_grad(self) -> None:
        zero_grad(self.parameters)


def linear_decay(epoch: int, total: int, *, start: float = 1.0, end_fraction: float = 0.1) -> float:
    """
    Learning rate decaying linearly from `start` towards `start * end_fraction`.

    Example:
        total=100: epoch 0 -> 1.0, epoch 50 -> 0.55, epoch 99 -> 0.109
    """
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}")
    return start * (1.0 - (1.0 - end_fraction) * epoch / total)
