import numpy as np

# -1 marks a cell the generator has not filled yet
EMPTY = -1

def is_closed(T: np.ndarray) -> bool:
    n = T.shape[0]
    return bool(T.min() >= 0 and T.max() < n)

def is_identity(T: np.ndarray, e: int) -> bool:
    n = T.shape[0]
    for i in range(n):
        if T[i, e] != i or T[e, i] != i:
            return False
    return True

def find_identity(T: np.ndarray) -> int | None:
    """Return the first identity element scanning upward from 0, or None."""
    n = T.shape[0]
    for e in range(n):
        if is_identity(T, e):
            return e
    return None

def has_inverses(T: np.ndarray, e: int) -> bool:
    n = T.shape[0]
    for a in range(n):
        found = False
        for b in range(n):
            if T[a, b] == e and T[b, a] == e:
                found = True
                break
        if not found:
            return False
    return True

def is_associative(T: np.ndarray) -> bool:
    """(a*b)*c == a*(b*c) for every triple.  T must already pass is_closed."""
    n = T.shape[0]
    for a in range(n):
        for b in range(n):
            ab = T[a, b]
            for c in range(n):
                if T[ab, c] != T[a, T[b, c]]:
                    return False
    return True

def is_commutative(T: np.ndarray) -> bool:
    return bool(np.array_equal(T, T.T))

def is_group(T: np.ndarray) -> int | None:
    """
    Run the whole axiom chain on a filled table.
    Returns the identity element if T is a group table, else None.
    """
    if not is_closed(T):
        return None
    e = find_identity(T)
    if e is None:
        return None
    if not has_inverses(T, e):
        return None
    if not is_associative(T):
        return None
    return e

# ---------- partial tables ----------
def fits_latin(T: np.ndarray, row: int, col: int) -> bool:
    """The value at (row, col) does not repeat in the filled part of its row or column."""
    v = T[row, col]
    others_in_row = np.delete(T[row, :], col)
    others_in_col = np.delete(T[:, col], row)
    return not (np.any(others_in_row == v) or np.any(others_in_col == v))

def associative_at(T: np.ndarray, a: int, b: int) -> bool:
    """
    Check every triple (x*y)*z == x*(y*z) that looks up cell (a, b)
    and whose other lookups are already filled; unfilled ones are skipped.
    """
    n = T.shape[0]
    v = T[a, b]

    for c in range(n):
        # (a*b)*c vs a*(b*c)
        bc = T[b, c]
        if bc >= 0:
            left, right = T[v, c], T[a, bc]
            if left >= 0 and right >= 0 and left != right:
                return False
        # (c*a)*b vs c*(a*b)
        ca = T[c, a]
        if ca >= 0:
            left, right = T[ca, b], T[c, v]
            if left >= 0 and right >= 0 and left != right:
                return False

    # (x*y)*b with x*y == a
    xs, ys = np.nonzero(T == a)
    for x, y in zip(xs, ys):
        yb = T[y, b]
        if yb < 0:
            continue
        right = T[x, yb]
        if right >= 0 and right != v:
            return False

    # a*(x*y) with x*y == b
    xs, ys = np.nonzero(T == b)
    for x, y in zip(xs, ys):
        ax = T[a, x]
        if ax < 0:
            continue
        left = T[ax, y]
        if left >= 0 and left != v:
            return False
    return True
