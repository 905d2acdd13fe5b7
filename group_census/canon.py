"""
Canonical forms of group tables under relabelings that send the identity to 0.

A relabeling `mapping` sends old element i to mapping[i]; applying it moves
rows, columns and entries alike:  new[mapping[i], mapping[j]] = mapping[T[i, j]].
"""

import numpy as np

from .axioms import find_identity
from .perm import next_permutation


def relabel(T: np.ndarray, mapping) -> np.ndarray:
    mapping = np.asarray(mapping, dtype=T.dtype)
    out = np.empty_like(T)
    out[np.ix_(mapping, mapping)] = mapping[T]
    return out


def lex_less(a: np.ndarray, b: np.ndarray) -> bool:
    """True iff flat sequence a sorts strictly before b; the first differing position decides."""
    diff = np.flatnonzero(a != b)
    if diff.size == 0:
        return False
    k = diff[0]
    return bool(a[k] < b[k])


def _identity_first_mapping(n: int, e: int, others, perm) -> np.ndarray:
    mapping = np.empty(n, dtype=np.int64)
    mapping[e] = 0
    for i, old in enumerate(others):
        mapping[old] = perm[i] + 1
    return mapping


def canonical_flat(T: np.ndarray, e: int | None = None) -> np.ndarray:
    """
    Lexicographically smallest row-major flattening of T over all (n-1)!
    relabelings that fix the identity to label 0.

    Tables without an identity have no such relabeling; they are returned
    flattened as-is.
    """
    n = T.shape[0]
    if e is None:
        e = find_identity(T)
    if e is None:
        return T.ravel().copy()

    others = [a for a in range(n) if a != e]
    perm = list(range(n - 1))
    best = None
    while True:
        mapping = _identity_first_mapping(n, e, others, perm)
        candidate = relabel(T, mapping).ravel()
        if best is None or lex_less(candidate, best):
            best = candidate
        if not next_permutation(perm):
            break
    return best


def are_isomorphic(A: np.ndarray, B: np.ndarray) -> bool:
    """
    Direct test: try every bijection sending A's identity to B's identity
    and compare the relabeled A with B cell by cell.
    """
    if A.shape != B.shape:
        return False
    n = A.shape[0]
    ea, eb = find_identity(A), find_identity(B)
    if ea is None or eb is None:
        return bool(np.array_equal(A, B))

    others_a = [a for a in range(n) if a != ea]
    others_b = [b for b in range(n) if b != eb]
    perm = list(range(n - 1))
    mapping = np.empty(n, dtype=np.int64)
    mapping[ea] = eb
    while True:
        for i, old in enumerate(others_a):
            mapping[old] = others_b[perm[i]]
        if np.array_equal(relabel(A, mapping), B):
            return True
        if not next_permutation(perm):
            return False
