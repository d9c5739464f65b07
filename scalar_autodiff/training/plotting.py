"""
Figures for the training driver.
"""

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt


def plot_moons(X: np.ndarray, y: np.ndarray, save_path=None):
    """Scatter the two-moons dataset coloured by label."""
    fig, ax = plt.subplots(figsize=(6, 5))
    for label, color in ((0, 'tab:blue'), (1, 'tab:red')):
        mask = y == label
        ax.scatter(X[mask, 0], X[mask, 1], c=color, s=15, label=f'class {label}')
    ax.set_xlabel('x1')
    ax.set_ylabel('x2')
    ax.set_title('Two moons')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"\nFigure saved to: {save_path}")

    plt.close(fig)


def plot_training_history(history: pd.DataFrame, save_path=None):
    """Loss and accuracy per epoch, side by side."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 4))

    axes[0].plot(history['epoch'], history['loss'], 'b-', linewidth=2)
    axes[0].set_xlabel('Epoch')
    axes[0].set_ylabel('Loss')
    axes[0].set_title('Training loss')
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(history['epoch'], 100.0 * history['accuracy'], 'g-', linewidth=2)
    axes[1].set_xlabel('Epoch')
    axes[1].set_ylabel('Accuracy (%)')
    axes[1].set_title('Training accuracy')
    axes[1].set_ylim(0, 100)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"\nFigure saved to: {save_path}")

    plt.close(fig)
