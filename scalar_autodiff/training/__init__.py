# training/__init__.py
# Reference driver: dataset, loss, optimiser and training loop.
# Plotting lives in training.plotting and is imported on demand (matplotlib).

from .datasets import make_moons, shuffle_arrays
from .losses import accuracy, mse_loss, svm_max_margin_loss
from .optim import SGD, linear_decay
from .trainer import TrainConfig, TrainResult, train, main

__all__ = [
    "make_moons", "shuffle_arrays",
    "accuracy", "mse_loss", "svm_max_margin_loss",
    "SGD", "linear_decay",
    "TrainConfig", "TrainResult", "train", "main",
]
