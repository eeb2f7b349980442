"""
scalargrad: a minimal reverse-mode autodiff engine over scalar values.

This package provides the scalar Value engine, MLP building blocks on top of
it and a max-margin binary classifier trained with gradient descent.
"""

from scalargrad.engine import Value, leaf, InvalidExponent, GraphIntegrityError
from scalargrad import nn
from scalargrad.classifier import BinaryClassifier, TrainConfig
from scalargrad.history import History
from scalargrad.datasets import load_moons
from scalargrad.utils import draw_dot, trace

__version__ = "0.1.0"
__all__ = [
    "Value",
    "leaf",
    "InvalidExponent",
    "GraphIntegrityError",
    "nn",
    "BinaryClassifier",
    "TrainConfig",
    "History",
    "load_moons",
    "draw_dot",
    "trace",
]
