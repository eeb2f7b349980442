"""Small built-in datasets."""

import numpy as np

_MOONS_X = [
    [1.82427454, -0.33587658],
    [0.93513636, 0.18499181],
    [0.45033121, -0.27729713],
    [0.27971163, -0.05989899],
    [-0.86555078, 0.02921278],
    [1.70363415, -0.27452339],
    [0.88676578, -0.55232135],
    [1.54220135, -0.2727132],
    [-0.88776955, 0.6637943],
    [-1.14921596, 0.15032604],
    [-0.38073845, 0.82580922],
    [2.07678233, 0.15870648],
    [0.11662765, 0.23409138],
    [0.14418603, 0.43872356],
    [-0.5363544, 0.5995304],
    [0.85577726, 0.5805372],
    [1.65451859, -0.28984739],
    [-0.58852157, 0.73918606],
    [0.87234037, -0.31344718],
    [-0.30284441, 0.79899662],
    [-0.58694304, 0.67324567],
    [-0.97055562, 0.30403289],
    [0.04586288, 0.24073787],
    [0.55970769, -0.24396152],
    [1.35326918, -0.37416619],
    [-0.79805272, 0.48731578],
    [1.80394414, -0.21563669],
    [0.33604268, -0.48267802],
    [0.2467885, 1.1780853],
    [0.28455584, 1.00615099],
    [1.21037563, 0.22406922],
    [0.59555349, -0.42710161],
    [0.8291936, -0.56790715],
    [0.97631769, 0.34746091],
    [0.66926793, 0.7059185],
    [1.11142299, 0.02127485],
    [2.10943472, 0.61548847],
    [0.86776701, 0.50459044],
    [0.01963056, 1.10217204],
    [0.14964279, -0.05456159],
]

_MOONS_Y = [
    1, -1, 1, 1, -1, 1, 1, 1, -1, -1, -1, 1, 1, 1, -1, -1, 1, -1, 1, -1,
    -1, -1, 1, 1, 1, -1, 1, 1, -1, -1, -1, 1, 1, -1, -1, -1, 1, -1, -1, 1,
]


def load_moons():
    """
    Return a 40-point, two-class "moons" training set.

    Returns:
        (X, y) with X of shape (40, 2) and y of shape (40,) holding -1/+1
    """
    return np.array(_MOONS_X, dtype=float), np.array(_MOONS_Y, dtype=float)
