"""
Visualization utilities for scalargrad computational graphs.

This module provides functions to visualize the computational graph created by
Value objects, showing the flow of data and gradients through operations.
"""

from graphviz import Digraph


def trace(root):
    """
    Trace the computational graph starting from a root Value node.

    Args:
        root: A Value object representing the output of a computation

    Returns:
        tuple: (nodes, edges) where:
            - nodes: set of all Value objects in the graph
            - edges: set of (operand, result) tuples

    Example:
        >>> x = Value(2.0)
        >>> y = Value(3.0)
        >>> z = x * y + x
        >>> nodes, edges = trace(z)
        >>> len(nodes)  # x, y, x*y and z
        4
    """
    nodes, edges = set(), set()
    stack = [root]

    while stack:
        v = stack.pop()
        if v in nodes:
            continue
        nodes.add(v)
        for child in v._prev:
            edges.add((child, v))
            stack.append(child)

    return nodes, edges


def _label(v):
    # record fields: name | op | data | grad; the op field is left out for leaves
    fields = [v.name] + ([v._op] if v._op else [])
    fields += [f"data {v.data:.4f}", f"grad {v.grad:.4f}"]
    return "{ " + " | ".join(fields) + " }"


def draw_dot(root, format='svg', rankdir='LR'):
    """
    Render the graph below ``root`` as a graphviz Digraph.

    Each Value is a single record box carrying its name, the op that
    produced it, its data and its grad. Edges run from operand to result.
    Leaves (inputs and parameters) are shaded.

    Example:
        >>> x = Value(2.0, name='x')
        >>> z = x * -3
        >>> z.backward()
        >>> draw_dot(z).render('computation_graph')

    Note:
        Rendering needs the Graphviz binaries; building the Digraph does not.
    """
    if rankdir not in ('LR', 'TB'):
        raise ValueError("rankdir must be 'LR' (left-right) or 'TB' (top-bottom)")

    nodes, edges = trace(root)
    dot = Digraph(format=format, graph_attr={'rankdir': rankdir}, node_attr={'shape': 'record'})

    for v in nodes:
        if v._prev:
            dot.node(str(id(v)), _label(v))
        else:
            dot.node(str(id(v)), _label(v), style='filled', fillcolor='lightgrey')

    for operand, result in edges:
        dot.edge(str(id(operand)), str(id(result)))

    return dot
