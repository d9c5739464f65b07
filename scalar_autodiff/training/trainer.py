"""
Training driver: fit an MLP to the two-moons dataset with the
SVM max-margin loss, one full-batch gradient step per epoch.

Each epoch:
    1. shuffle the dataset
    2. forward every sample (a fresh graph over the shared parameter leaves)
    3. loss = mean hinge + alpha * ||theta||^2
    4. zero gradients, propagate(loss)
    5. lr = linear_decay(epoch), SGD step
"""

import argparse
import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import pandas as pd

from ..aad.core.engine import propagate
from ..nn.config import Activation
from ..nn.layers import MLP
from .datasets import make_moons, shuffle_arrays
from .losses import svm_max_margin_loss
from .optim import SGD, linear_decay

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ['epoch', 'loss', 'accuracy', 'lr', 'time_ms']


@dataclass
class TrainConfig:
    """Configuration for a training run."""
    # Data
    n_samples: int = 100  # per moon
    noise: float = 0.1

    # Model: 2 inputs -> layer_sizes, linear output layer
    layer_sizes: List[int] = field(default_factory=lambda: [16, 16, 1])
    activation: Activation = Activation.RELU

    # Optimisation
    epochs: int = 100
    alpha: float = 1e-4  # L2 strength
    lr_start: float = 1.0
    lr_end_fraction: float = 0.1

    seed: Optional[int] = None

    # Logging
    verbose: bool = True
    log_every: int = 1

    def __post_init__(self):
        if self.epochs < 1:
            raise ValueError(f"epochs must be >= 1, got {self.epochs}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be >= 1, got {self.log_every}")
        if not self.layer_sizes or self.layer_sizes[-1] != 1:
            raise ValueError(f"the last layer must have a single output, got {self.layer_sizes}")
        self.activation = Activation(self.activation)


@dataclass
class TrainResult:
    model: MLP
    history: pd.DataFrame
    final_loss: float
    final_accuracy: float
    X: np.ndarray
    y: np.ndarray


def train(config: TrainConfig) -> TrainResult:
    """Run the full training loop described in the module docstring."""
    rng = np.random.default_rng(config.seed)

    X, y01 = make_moons(config.n_samples, shuffle=True, noise=config.noise, rng=rng)
    y = y01 * 2.0 - 1.0  # labels in {-1, +1}

    model = MLP(2, config.layer_sizes, activation=config.activation,
                output_activation=Activation.LINEAR, rng=rng)
    optimizer = SGD(model.parameters(), lr=config.lr_start)

    if config.verbose:
        print(model.summary())
        print(f"Number of parameters: {model.num_parameters()}")
    logger.info("train: %d samples, %d parameters, %d epochs",
                len(X), model.num_parameters(), config.epochs)

    rows = []
    loss_value, acc = float('nan'), float('nan')
    for epoch in range(config.epochs):
        start = time.perf_counter()
        X, y = shuffle_arrays(X, y, rng=rng)

        preds = [model(x)[0] for x in X]
        total_loss, acc = svm_max_margin_loss(model, preds, y, alpha=config.alpha)

        # backward pass
        optimizer.zero_grad()
        propagate(total_loss)

        # update
        optimizer.lr = linear_decay(epoch, config.epochs,
                                    start=config.lr_start, end_fraction=config.lr_end_fraction)
        optimizer.step()

        time_ms = 1000.0 * (time.perf_counter() - start)
        loss_value = float(total_loss.value)
        rows.append({'epoch': epoch, 'loss': loss_value, 'accuracy': acc,
                     'lr': optimizer.lr, 'time_ms': time_ms})

        if config.verbose and epoch % config.log_every == 0:
            print(f"Epoch: {epoch}, time: {time_ms:.0f}ms, "
                  f"loss: {loss_value:.6f}, accuracy: {acc * 100.0:.4f}%")

    logger.info("train: final loss %.6f, accuracy %.4f", loss_value, acc)
    return TrainResult(
        model=model,
        history=pd.DataFrame(rows, columns=HISTORY_COLUMNS),
        final_loss=loss_value,
        final_accuracy=acc,
        X=X,
        y=y,
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Train a scalar-autodiff MLP on the two-moons dataset',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--epochs', type=int, default=100,
                        help='Number of full-batch gradient steps')
    parser.add_argument('--samples', type=int, default=100,
                        help='Points per moon')
    parser.add_argument('--noise', type=float, default=0.1,
                        help='Gaussian noise added to the moons')
    parser.add_argument('--hidden', type=str, default='16,16',
                        help='Comma-separated hidden layer sizes (e.g., "16,16")')
    parser.add_argument('--activation', type=str, default='relu',
                        choices=[a.value for a in Activation],
                        help='Hidden-layer nonlinearity')
    parser.add_argument('--alpha', type=float, default=1e-4,
                        help='L2 regularisation strength')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for data and initial weights')
    parser.add_argument('--log-every', type=int, default=1,
                        help='Print every N-th epoch')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final result')
    parser.add_argument('--verbose-log', action='store_true',
                        help='Enable INFO-level library logging')
    parser.add_argument('--history-csv', type=str, default=None,
                        help='Write the per-epoch history to this CSV file')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save a loss/accuracy figure to this path')
    parser.add_argument('--plot-data', type=str, default=None,
                        help='Save a scatter plot of the training data to this path')
    return parser.parse_args(argv)


def parse_hidden(hidden_str):
    """Parse '16,16' into [16, 16]; an empty string means no hidden layer."""
    return [int(part) for part in hidden_str.split(',') if part.strip()]


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose_log else logging.WARNING)

    config = TrainConfig(
        n_samples=args.samples,
        noise=args.noise,
        layer_sizes=parse_hidden(args.hidden) + [1],
        activation=args.activation,
        epochs=args.epochs,
        alpha=args.alpha,
        seed=args.seed,
        verbose=not args.quiet,
        log_every=args.log_every,
    )

    if config.verbose:
        print("=" * 70)
        print("TWO-MOONS MLP TRAINING")
        print("=" * 70)

    result = train(config)

    print(f"\nFinal loss: {result.final_loss:.6f}, "
          f"accuracy: {result.final_accuracy * 100.0:.2f}%")

    if args.history_csv:
        result.history.to_csv(args.history_csv, index=False)
        print(f"History saved to: {args.history_csv}")

    if args.plot:
        from .plotting import plot_training_history
        plot_training_history(result.history, save_path=args.plot)

    if args.plot_data:
        from .plotting import plot_moons
        # labels back to {0, 1}
        plot_moons(result.X, (result.y > 0).astype(int), save_path=args.plot_data)

    return result


if __name__ == "__main__":
    main()
