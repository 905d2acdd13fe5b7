def next_permutation(arr) -> bool:
    """
    Rearrange `arr` in place into the next permutation in lexicographic order.

    Returns False (leaving `arr` untouched) when `arr` is already the last,
    descending permutation.
    """
    length = len(arr)
    pivot = length - 2
    while pivot >= 0 and arr[pivot] >= arr[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return False

    successor = length - 1
    while arr[successor] <= arr[pivot]:
        successor -= 1
    arr[pivot], arr[successor] = arr[successor], arr[pivot]

    start, end = pivot + 1, length - 1
    while start < end:
        arr[start], arr[end] = arr[end], arr[start]
        start += 1
        end -= 1
    return True

def lex_permutations(m: int):
    """Yield every permutation of 0..m-1 as a fresh list, in increasing lexicographic order."""
    if m < 0:
        raise ValueError(f"permutation length must be non-negative, got {m}")
    perm = list(range(m))
    while True:
        yield list(perm)
        if not next_permutation(perm):
            return
