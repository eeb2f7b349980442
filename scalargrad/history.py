"""
Training history container.

A small record of per-iteration metrics filled in by
``BinaryClassifier.train``. It does no aggregation of its own: the training
loop appends one entry per completed iteration.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class History:
    """
    Per-iteration training metrics.

    Attributes
    ----------
    iteration : List[int]
        1-based iteration numbers that completed a parameter update.
    loss : List[float]
        Total loss (data + regularisation) seen at each iteration.
    accuracy : List[float]
        Training accuracy in percent at each iteration.
    learning_rate : List[float]
        Step size used for the update at each iteration.
    converged : bool
        True if training stopped because the target accuracy was reached.
    final_accuracy : float
        Accuracy of the last forward pass, including the one that stopped
        training early.
    """

    iteration: List[int] = field(default_factory=list)
    loss: List[float] = field(default_factory=list)
    accuracy: List[float] = field(default_factory=list)
    learning_rate: List[float] = field(default_factory=list)
    converged: bool = False
    final_accuracy: float = 0.0

    def append(self, iteration: int, loss: float, accuracy: float, learning_rate: float) -> None:
        self.iteration.append(int(iteration))
        self.loss.append(float(loss))
        self.accuracy.append(float(accuracy))
        self.learning_rate.append(float(learning_rate))

    def __len__(self) -> int:
        return len(self.iteration)

    def __repr__(self) -> str:
        last = f", last_loss={self.loss[-1]:.6g}" if self.loss else ""
        return (
            f"History(iterations={len(self)}{last}, "
            f"final_accuracy={self.final_accuracy:.1f}, converged={self.converged})"
        )
