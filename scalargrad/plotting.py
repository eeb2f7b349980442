"""
Decision-region plots for two-feature binary classifiers.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

_REGION_COLORS = ListedColormap([(0.3010, 0.7450, 0.9330), (0.9290, 0.6940, 0.1250)])
_POSITIVE_COLOR = (0.0, 0.4470, 0.7410)
_NEGATIVE_COLOR = (0.8500, 0.3250, 0.0980)


def decision_grid(model, X, nx=25, ny=25, margin=0.4):
    """
    Evaluate ``model.predict`` on a regular grid covering the data.

    The grid spans the bounding box of the first two columns of X, widened
    by ``margin`` on every side.

    Returns:
        (XX, YY, ZZ): meshgrid coordinates, each of shape (ny, nx), and the
        predicted label (-1 or +1) at every grid point
    """
    X = np.asarray(X, dtype=float)
    xs = np.linspace(X[:, 0].min() - margin, X[:, 0].max() + margin, nx)
    ys = np.linspace(X[:, 1].min() - margin, X[:, 1].max() + margin, ny)
    XX, YY = np.meshgrid(xs, ys)

    ZZ = np.zeros_like(XX)
    for i in range(ny):
        for j in range(nx):
            ZZ[i, j] = model.predict([XX[i, j], YY[i, j]])
    return XX, YY, ZZ


def plot_decision_regions(model, X, y, nx=25, ny=25, ax=None):
    """
    Plot the predicted regions of a classifier along with the training points.

    Args:
        model: Anything with a predict(point) -> -1/+1 method
        X: Points, shape (n_points, 2)
        y: Labels in {-1, +1}
        nx, ny: Grid resolution
        ax: Optional matplotlib Axes to draw on

    Returns:
        The matplotlib Axes
    """
    X = np.asarray(X, dtype=float)
    y = np.asarray(y).reshape(-1)
    if ax is None:
        _, ax = plt.subplots()

    XX, YY, ZZ = decision_grid(model, X, nx=nx, ny=ny)
    ax.contourf(XX, YY, ZZ, levels=[-1.5, 0.0, 1.5], cmap=_REGION_COLORS)

    pos, neg = y > 0, y < 0
    ax.scatter(X[pos, 0], X[pos, 1], s=50, color=_POSITIVE_COLOR, label="+1")
    ax.scatter(X[neg, 0], X[neg, 1], s=50, color=_NEGATIVE_COLOR, label="-1")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.legend(loc="best")
    return ax
