import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from scalargrad.classifier import BinaryClassifier  # noqa: E402
from scalargrad.datasets import load_moons  # noqa: E402
from scalargrad.plotting import decision_grid, plot_decision_regions  # noqa: E402


class _SignOfX:
    def predict(self, point):
        return 1 if point[0] > 0 else -1


def test_decision_grid():
    X = np.array([[-1.0, 0.0], [1.0, 2.0]])
    XX, YY, ZZ = decision_grid(_SignOfX(), X, nx=5, ny=3)

    assert XX.shape == YY.shape == ZZ.shape == (3, 5)
    assert float(XX.min()) == pytest.approx(-1.4)
    assert float(XX.max()) == pytest.approx(1.4)
    assert float(YY.min()) == pytest.approx(-0.4)
    assert float(YY.max()) == pytest.approx(2.4)
    assert np.array_equal(ZZ, np.where(XX > 0, 1.0, -1.0))


def test_plot_decision_regions():
    X, y = load_moons()
    model = BinaryClassifier(X, y, [4, 1], rng=np.random.default_rng(0))

    fig, ax = plt.subplots()
    out = plot_decision_regions(model, X, y, nx=6, ny=6, ax=ax)

    assert out is ax
    assert len(ax.collections) >= 2
    assert ax.get_xlabel() == "X"
    plt.close(fig)


def test_plot_decision_regions_creates_axes():
    out = plot_decision_regions(_SignOfX(), [[-1.0, -1.0], [1.0, 1.0]], [-1, 1], nx=4, ny=4)
    assert out.get_ylabel() == "Y"
    plt.close(out.figure)
