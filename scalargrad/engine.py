import numbers

import numpy as np


class InvalidExponent(TypeError):
    """Raised when a Value is raised to something other than a real number."""


class GraphIntegrityError(RuntimeError):
    """Raised when backward() finds a cycle in the operand graph."""


def _power(base, exponent):
    # IEEE semantics: 0**-1 -> inf, (-8)**0.5 -> nan, overflow -> inf
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.power(np.float64(base), exponent))


class Value:
    """
    Wraps a single scalar and tracks the operations applied to it.

    Every arithmetic operation between Values (or a Value and a plain number)
    produces a new Value that remembers its operands and how to push its
    gradient back to them. Calling backward() on the final result then fills
    in ``grad`` for every Value that contributed to it.

    Example:
        >>> x = Value(2.0)
        >>> y = Value(3.0)
        >>> z = x * y + x
        >>> z.backward()
        >>> print(x.grad)  # dz/dx = y + 1 = 4.0
    """

    def __init__(self, data, _children=(), _op='', name=""):
        """
        Initialize a Value object.

        Args:
            data: The scalar value (anything float() accepts)
            _children: Operand Values this one was computed from (internal)
            _op: String describing the operation that created this Value (internal)
            name: Optional name for debugging and visualization
        """
        self.data = float(data)
        self.grad = 0.0
        self.name = name

        # Internal variables for building the computational graph
        self._backward = lambda: None
        self._prev = _unique(_children)
        self._op = _op

    def __add__(self, other):
        """
        Addition: d(a+b)/da = 1, d(a+b)/db = 1

        Example:
            >>> c = Value(1.0) + 2  # c.data = 3.0
        """
        other = _lift(other)
        out = Value(self.data + other.data, (self, other), '+')

        def _backward():
            self.grad += out.grad
            other.grad += out.grad

        out._backward = _backward
        return out

    def __mul__(self, other):
        """
        Multiplication: d(a*b)/da = b, d(a*b)/db = a

        When ``self is other`` the operand is stored once, but both
        contributions still land on the same grad, giving 2 * a.
        """
        other = _lift(other)
        out = Value(self.data * other.data, (self, other), '*')

        def _backward():
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad

        out._backward = _backward
        return out

    def __pow__(self, other):
        """
        Power with a constant real exponent: d(x^n)/dx = n * x^(n-1)

        Raises:
            InvalidExponent: if the exponent is not an int or float.
        """
        if isinstance(other, Value) or not isinstance(other, numbers.Real):
            raise InvalidExponent(
                f"Only int/float exponents are supported, got {type(other).__name__}"
            )

        out = Value(_power(self.data, other), (self,), f'**{other}')

        def _backward():
            self.grad += (other * _power(self.data, other - 1)) * out.grad

        out._backward = _backward
        return out

    def relu(self):
        """
        ReLU activation: max(0, x)

        NaN passes through unchanged. The gradient only flows through when
        the output is positive.
        """
        out = Value(0.0 if self.data < 0 else self.data, (self,), 'ReLU')

        def _backward():
            self.grad += (out.data > 0) * out.grad

        out._backward = _backward
        return out

    def backward(self):
        """
        Perform backpropagation from this Value.

        Sets ``self.grad`` to 1 and accumulates d(self)/d(node) into the grad
        of every node reachable through operand edges. Gradients are added,
        not assigned: call zero_grad() on reused nodes (e.g. parameters)
        before running another pass.

        Raises:
            GraphIntegrityError: if the operand graph contains a cycle.
        """
        topo = _build_topo(self)

        # dL/dL = 1
        self.grad = 1.0

        for v in reversed(topo):
            v._backward()

    def zero_grad(self):
        """Reset the accumulated gradient of this node to zero."""
        self.grad = 0.0

    # Derived operations, composed from the primitives above

    def __neg__(self):
        """Negation: -x = x * -1"""
        return self * -1

    def __radd__(self, other):
        """Right addition: other + self (when other is not a Value)"""
        return self + other

    def __sub__(self, other):
        """Subtraction: a - b = a + (-b)"""
        return self + (-_lift(other))

    def __rsub__(self, other):
        """Right subtraction: other - self"""
        return _lift(other) + (-self)

    def __rmul__(self, other):
        """Right multiplication: other * self (when other is not a Value)"""
        return self * other

    def __truediv__(self, other):
        """Division: a / b = a * b^(-1)"""
        return self * _lift(other) ** -1

    def __rtruediv__(self, other):
        """Right division: other / self"""
        return _lift(other) * self ** -1

    def __repr__(self):
        name_str = f"'{self.name}' " if self.name else ""
        op_str = f" from {self._op}" if self._op else ""
        return f"Value({name_str}data={self.data}, grad={self.grad}{op_str})"


def leaf(x, name=""):
    """Create a Value with no operands from a plain number."""
    return Value(x, name=name)


def _lift(x):
    return x if isinstance(x, Value) else Value(x)


def _unique(children):
    # dedupe by identity, keep order (x * x stores x once)
    prev = []
    for child in children:
        if not any(child is p for p in prev):
            prev.append(child)
    return tuple(prev)


def _build_topo(root):
    """
    Return every node reachable from ``root`` with operands before consumers.

    Iterative post-order DFS: a node is appended once all of its operands
    have been appended. ``on_stack`` holds the nodes whose operands are still
    being explored; meeting one of them again means the graph has a cycle.
    """
    topo = []
    visited = set()
    on_stack = {root}
    stack = [(root, iter(root._prev))]

    while stack:
        node, children = stack[-1]
        for child in children:
            if child in on_stack:
                raise GraphIntegrityError(
                    f"Cycle detected in computation graph at {child!r}"
                )
            if child not in visited:
                on_stack.add(child)
                stack.append((child, iter(child._prev)))
                break
        else:
            stack.pop()
            on_stack.discard(node)
            visited.add(node)
            topo.append(node)

    return topo
