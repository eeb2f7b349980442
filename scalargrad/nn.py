"""
Neural network building blocks for scalargrad.

Every weight and bias is its own scalar Value, so a forward pass through
these modules builds an explicit graph that Value.backward() can walk.
"""

import numbers

import numpy as np
from scalargrad.engine import Value


class Module:
    """
    Base class for all neural network modules.

    Provides common functionality for managing parameters and gradients.
    """

    def zero_grad(self):
        """
        Reset all gradients to zero.

        backward() accumulates into grad, so call this before each backward
        pass unless accumulation across passes is what you want.
        """
        for p in self.parameters():
            p.zero_grad()

    def parameters(self):
        """
        Return a list of all trainable parameters (weights and biases).

        Override this in subclasses to return actual parameters.
        """
        return []


class Neuron(Module):
    """
    A single unit: act(w . x + b)

    Args:
        nin: Number of inputs
        nonlin: If True, apply ReLU to the output (default: True)
        weights: Optional initial weights (length nin)
        bias: Optional initial bias (default: 0)
        rng: numpy Generator used for the Uniform(-1, 1) weight init
        name: Optional name prefix for the parameters

    Example:
        >>> n = Neuron(2, nonlin=False, weights=[0.5, -1.0])
        >>> n([1.0, -2.0]).data
        2.5
    """

    def __init__(self, nin, nonlin=True, weights=None, bias=None, rng=None, name=""):
        if isinstance(nin, bool) or not isinstance(nin, numbers.Integral) or nin <= 0:
            raise ValueError(f"nin must be a positive integer, got {nin!r}")

        self.name = name
        if weights is not None:
            weights = list(weights)
            if len(weights) != nin:
                raise ValueError(f"Expected {nin} weights, got {len(weights)}")
        else:
            rng = rng if rng is not None else np.random.default_rng()
            weights = rng.uniform(-1.0, 1.0, nin)

        self.w = [Value(wi, name=f"w{i}_{name}") for i, wi in enumerate(weights)]
        self.b = Value(0.0 if bias is None else bias, name=f"b_{name}")
        self.nonlin = nonlin

    def __call__(self, x):
        if len(x) != len(self.w):
            raise ValueError(f"Expected {len(self.w)} inputs, got {len(x)}")

        act = sum((wi * xi for wi, xi in zip(self.w, x)), self.b)
        return act.relu() if self.nonlin else act

    def parameters(self):
        return self.w + [self.b]

    def __repr__(self):
        activation = 'ReLU' if self.nonlin else 'Linear'
        return f"{activation}Neuron({len(self.w)})"


class Layer(Module):
    """
    A fully-connected layer of ``nout`` independent neurons.

    Args:
        nin: Number of inputs to every neuron
        nout: Number of neurons
        nonlin: Apply ReLU on every neuron (default: True)
        weights: Optional per-neuron weights, shape (nout, nin)
        biases: Optional per-neuron biases, length nout
        rng: numpy Generator for weight init
        name: Optional name for debugging
    """

    def __init__(self, nin, nout, nonlin=True, weights=None, biases=None, rng=None, name=""):
        if isinstance(nout, bool) or not isinstance(nout, numbers.Integral) or nout <= 0:
            raise ValueError(f"nout must be a positive integer, got {nout!r}")
        if weights is not None and len(weights) != nout:
            raise ValueError(f"Expected weights for {nout} neurons, got {len(weights)}")
        if biases is not None and len(biases) != nout:
            raise ValueError(f"Expected {nout} biases, got {len(biases)}")

        rng = rng if rng is not None else np.random.default_rng()
        self.name = name
        self.neurons = [
            Neuron(
                nin,
                nonlin=nonlin,
                weights=weights[i] if weights is not None else None,
                bias=biases[i] if biases is not None else None,
                rng=rng,
                name=f"{name}n{i}",
            )
            for i in range(nout)
        ]

    def __call__(self, x):
        """
        Forward pass through every neuron.

        Returns:
            A list of output Values, or the single Value when nout == 1
        """
        out = [n(x) for n in self.neurons]
        return out[0] if len(out) == 1 else out

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer[{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Multi-Layer Perceptron: a sequence of fully-connected layers.

    All layers use ReLU except the last one (linear output), which makes the
    output usable directly as a score for regression or max-margin losses.

    Args:
        nin: Number of input features
        nouts: List of output sizes for each layer
               Example: [16, 16, 1] creates 3 layers: input→16→16→1
        weights: Optional list of per-layer weights, each shape (nout, nin)
        biases: Optional list of per-layer biases
        rng: numpy Generator for weight init

    Example:
        >>> mlp = MLP(nin=2, nouts=[16, 16, 1])
        >>> score = mlp([0.5, -1.0])
        >>> loss = (1 - score).relu()
        >>> mlp.zero_grad()
        >>> loss.backward()
        >>> for p in mlp.parameters():
        ...     p.data -= learning_rate * p.grad
    """

    def __init__(self, nin, nouts, weights=None, biases=None, rng=None):
        nouts = list(nouts)
        if not nouts:
            raise ValueError("nouts must contain at least one layer size")

        if weights is not None and len(weights) != len(nouts):
            raise ValueError(f"Expected weights for {len(nouts)} layers, got {len(weights)}")
        if biases is not None and len(biases) != len(nouts):
            raise ValueError(f"Expected biases for {len(nouts)} layers, got {len(biases)}")

        rng = rng if rng is not None else np.random.default_rng()
        layer_sizes = [nin] + nouts

        self.layers = []
        for i in range(len(nouts)):
            is_output_layer = (i == len(nouts) - 1)

            layer = Layer(
                nin=layer_sizes[i],
                nout=layer_sizes[i + 1],
                nonlin=not is_output_layer,
                weights=weights[i] if weights is not None else None,
                biases=biases[i] if biases is not None else None,
                rng=rng,
                name=f"layer{i}",
            )
            self.layers.append(layer)

    def __call__(self, x):
        """
        Forward pass: pass input through all layers sequentially.

        Args:
            x: Sequence of numbers or Values of length nin
        """
        for layer in self.layers:
            x = layer(x)
            if isinstance(x, Value):
                x = [x]
        return x[0] if len(x) == 1 else x

    def parameters(self):
        """Return all trainable parameters from all layers."""
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        layer_str = ' → '.join(str(layer) for layer in self.layers)
        return f"MLP[\n  {layer_str}\n]"
