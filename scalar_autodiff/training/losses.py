"""
Losses composed from graph operations.
"""

from typing import Sequence, Tuple

import numpy as np

from ..aad.core.errors import DimensionMismatch
from ..aad.core.node import Node
from ..nn.module import Module


def _check_lengths(preds, targets, where: str):
    if len(preds) != len(targets):
        raise DimensionMismatch(len(targets), len(preds), where=where)
    if not preds:
        raise ValueError(f"{where}: no predictions")


def accuracy(preds: Sequence[Node], targets: Sequence[float]) -> float:
    """Fraction of predictions whose sign matches the +/-1 target."""
    preds = list(preds)
    _check_lengths(preds, targets, "accuracy")
    matches = [(float(t) > 0.0) == (float(p.value) > 0.0) for p, t in zip(preds, targets)]
    return float(np.mean(matches))


def svm_max_margin_loss(model: Module, preds: Sequence[Node], targets: Sequence[float], *,
                        alpha: float = 1e-4) -> Tuple[Node, float]:
    """
    SVM max-margin loss with L2 regularisation:

        L = mean_i relu(1 - y_i * p_i) + alpha * sum_theta theta^2

    Args:
        model: supplies the parameters for the regularisation term
        preds: one score Node per sample
        targets: labels in {-1, +1}
        alpha: regularisation strength

    Returns:
        (loss Node, accuracy)
    """
    preds = list(preds)
    _check_lengths(preds, targets, "svm_max_margin_loss")

    losses = [(1.0 - float(t) * p).relu() for p, t in zip(preds, targets)]
    data_loss = sum(losses) * (1.0 / len(losses))

    params = model.parameters()
    if params and alpha != 0.0:
        reg_loss = alpha * sum(p * p for p in params)
        total_loss = data_loss + reg_loss
    else:
        total_loss = data_loss

    return total_loss, accuracy(preds, targets)


def mse_loss(preds: Sequence[Node], targets: Sequence[float]) -> Node:
    """Mean squared error."""
    preds = list(preds)
    _check_lengths(preds, targets, "mse_loss")
    return sum((p - float(t)) ** 2 for p, t in zip(preds, targets)) * (1.0 / len(preds))
