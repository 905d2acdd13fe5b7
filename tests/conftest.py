from itertools import permutations

import numpy as np
import pytest


def cyclic(n):
    r = np.arange(n)
    return np.add.outer(r, r) % n


def symmetric3():
    elems = list(permutations(range(3)))
    index = {p: i for i, p in enumerate(elems)}
    T = np.zeros((6, 6), dtype=np.int64)
    for i, p in enumerate(elems):
        for j, q in enumerate(elems):
            # (p*q)(x) = p(q(x))
            T[i, j] = index[tuple(p[q[x]] for x in range(3))]
    return T


@pytest.fixture
def z4():
    return cyclic(4)


@pytest.fixture
def klein():
    r = np.arange(4)
    return np.bitwise_xor.outer(r, r)


@pytest.fixture
def z6():
    return cyclic(6)


@pytest.fixture
def s3():
    return symmetric3()
