"""
Binary classifier trained with a max-margin (SVM) loss.

The model is an MLP whose single linear output is used as a score: the
predicted class is the sign of the score. Training is plain full-batch
gradient descent over scalar Values with a linearly decaying step size.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from scalargrad.engine import Value
from scalargrad.history import History
from scalargrad.nn import MLP

logger = logging.getLogger(__name__)


def _is_positive_int(x) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool) and x > 0


@dataclass
class TrainConfig:
    """
    Settings for ``BinaryClassifier.train``.

    The learning rate at iteration k (1-based) is
    ``lr_start - (lr_start - lr_end) * k / lr_decay_steps``; the defaults
    reproduce ``1.0 - 0.9 * k / 100``.
    """

    max_iter: int = 100
    target_accuracy: float = 100.0
    alpha: float = 1e-4
    n_points: Optional[int] = None
    lr_start: float = 1.0
    lr_end: float = 0.1
    lr_decay_steps: int = 100
    seed: Optional[int] = None

    def __post_init__(self):
        if not _is_positive_int(self.max_iter):
            raise ValueError(f"max_iter must be a positive integer, got {self.max_iter!r}")
        if not self.target_accuracy > 0:
            raise ValueError(f"target_accuracy must be positive, got {self.target_accuracy!r}")
        if not self.alpha > 0:
            raise ValueError(f"alpha must be positive, got {self.alpha!r}")
        if self.n_points is not None and not _is_positive_int(self.n_points):
            raise ValueError(f"n_points must be a positive integer, got {self.n_points!r}")
        if not _is_positive_int(self.lr_decay_steps):
            raise ValueError(
                f"lr_decay_steps must be a positive integer, got {self.lr_decay_steps!r}"
            )

    def learning_rate(self, k: int) -> float:
        return self.lr_start - (self.lr_start - self.lr_end) * k / self.lr_decay_steps


class BinaryClassifier:
    """
    Two-class classifier on top of an MLP.

    Args:
        inputs: Training inputs, shape (n_points, n_features)
        outputs: Training labels, n_points values in {-1, +1}
        nouts: Layer sizes of the MLP; the last one must be 1
        rng: numpy Generator for weight init and point subsampling

    Example:
        >>> X, y = load_moons()
        >>> model = BinaryClassifier(X, y, [16, 16, 1])
        >>> history = model.train(TrainConfig(max_iter=50))
        >>> model.predict([0.0, 0.0])  # -1 or 1
    """

    def __init__(self, inputs, outputs, nouts: Sequence[int], rng: Optional[np.random.Generator] = None):
        inputs = np.asarray(inputs, dtype=float)
        outputs = np.asarray(outputs, dtype=float).reshape(-1)
        nouts = list(nouts)

        if inputs.ndim != 2:
            raise ValueError(f"inputs must be 2-D (n_points, n_features), got shape {inputs.shape}")
        if inputs.shape[0] != outputs.shape[0]:
            raise ValueError(
                f"Number of input and output points must be the same "
                f"({inputs.shape[0]} != {outputs.shape[0]})"
            )
        if not nouts or nouts[-1] != 1:
            raise ValueError("The final layer must have exactly one neuron")

        self.rng = rng if rng is not None else np.random.default_rng()
        self.inputs = inputs
        self.outputs = outputs
        self.net = MLP(inputs.shape[1], nouts, rng=self.rng)

    def decision_function(self, x) -> float:
        """Raw score of the network for a single input point."""
        return self.net([float(v) for v in x]).data

    def predict(self, x) -> int:
        return 1 if self.decision_function(x) > 0 else -1

    def loss(self, alpha: float = 1e-4, indices=None) -> Tuple[Value, float]:
        """
        Max-margin loss with L2 regularisation over the given points.

        loss = mean_i relu(1 - y_i * score_i) + alpha * sum_p p^2

        Args:
            alpha: Regularisation strength
            indices: Optional subset of training point indices (default: all)

        Returns:
            (loss Value, accuracy in percent)
        """
        if not alpha > 0:
            raise ValueError(f"alpha must be positive, got {alpha!r}")
        if indices is None:
            indices = range(self.inputs.shape[0])
        indices = list(indices)
        if not indices:
            raise ValueError("Cannot compute the loss over zero points")

        y_true = [float(self.outputs[i]) for i in indices]
        scores = [self.net([float(v) for v in self.inputs[i]]) for i in indices]

        losses = [(1 - yi * si).relu() for yi, si in zip(y_true, scores)]
        data_loss = sum(losses) * (1.0 / len(losses))

        reg_loss = alpha * sum(p * p for p in self.net.parameters())
        total = data_loss + reg_loss

        correct = [(si.data > 0) == (yi > 0) for yi, si in zip(y_true, scores)]
        accuracy = sum(correct) / len(correct) * 100
        return total, accuracy

    def train(self, config: Optional[TrainConfig] = None) -> History:
        """
        Fit the network with gradient descent.

        Each iteration runs a forward pass over the training points, stops
        if the target accuracy is already met, and otherwise resets the
        gradients, backpropagates and takes one descent step.
        """
        config = config if config is not None else TrainConfig()
        rng = np.random.default_rng(config.seed) if config.seed is not None else self.rng

        n = self.inputs.shape[0]
        indices = np.arange(n)
        if config.n_points is not None:
            if config.n_points > n:
                raise ValueError(f"n_points ({config.n_points}) exceeds the {n} training points")
            indices = rng.permutation(n)[:config.n_points]

        history = History()
        for k in range(1, config.max_iter + 1):
            logger.debug("Performing forward pass for iteration: %d", k)
            loss, accuracy = self.loss(config.alpha, indices)
            history.final_accuracy = accuracy

            if accuracy >= config.target_accuracy:
                history.converged = True
                logger.info("Exit criteria reached: accuracy = %.1f, at iteration %d", accuracy, k)
                break

            self.net.zero_grad()
            logger.debug("Performing backward pass for iteration: %d", k)
            loss.backward()

            lr = config.learning_rate(k)
            for p in self.net.parameters():
                p.data -= lr * p.grad

            history.append(k, loss.data, accuracy, lr)
            logger.info("Iteration %d completed. Loss: %.8f, Accuracy: %.1f", k, loss.data, accuracy)

        return history

    def __repr__(self):
        return f"BinaryClassifier(n_points={self.inputs.shape[0]}, net={self.net!r})"
