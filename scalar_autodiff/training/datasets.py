"""
Toy datasets for the training driver.
"""

import numpy as np
from typing import Optional, Tuple


def shuffle_arrays(*arrays: np.ndarray, rng: Optional[np.random.Generator] = None):
    """
    Permute equal-length arrays in unison (same permutation for all).

    Returns:
        tuple of permuted copies, in argument order
    """
    if not arrays:
        return ()
    n = len(arrays[0])
    if any(len(a) != n for a in arrays):
        raise ValueError(f"arrays must share one length, got {[len(a) for a in arrays]}")
    rng = rng if rng is not None else np.random.default_rng()
    perm = rng.permutation(n)
    return tuple(np.asarray(a)[perm] for a in arrays)


def make_moons(n_samples: int = 100, *, shuffle: bool = True, noise: float = 0.1,
               rng: Optional[np.random.Generator] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Two interleaving half circles (scikit-learn's make_moons construction).

    Args:
        n_samples: points per moon; the dataset holds 2 * n_samples points
        shuffle: permute points and labels together
        noise: standard deviation of Gaussian noise added to the coordinates
        rng: random generator (a fresh unseeded one if omitted)

    Returns:
        X: (2 * n_samples, 2) coordinates
        y: (2 * n_samples,) labels, 0 for the outer moon and 1 for the inner one
    """
    if n_samples < 1:
        raise ValueError(f"n_samples must be >= 1, got {n_samples}")
    if noise < 0.0:
        raise ValueError(f"noise must be non-negative, got {noise}")
    rng = rng if rng is not None else np.random.default_rng()

    t = np.linspace(0.0, np.pi, n_samples)
    outer = np.column_stack([np.cos(t), np.sin(t)])
    inner = np.column_stack([1.0 - np.cos(t), 0.5 - np.sin(t)])

    X = np.vstack([outer, inner])
    y = np.concatenate([np.zeros(n_samples), np.ones(n_samples)])

    if shuffle:
        X, y = shuffle_arrays(X, y, rng=rng)

    if noise > 0.0:
        X = X + rng.normal(0.0, noise, size=X.shape)

    return X, y
