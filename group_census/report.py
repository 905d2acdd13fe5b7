import sys

import numpy as np


def format_table(T: np.ndarray) -> str:
    """n lines of n space-separated entries."""
    return "\n".join(" ".join(str(int(val)) for val in row) for row in T)


def print_table(T: np.ndarray, file=None):
    file = sys.stdout if file is None else file
    print(format_table(T), file=file)
    print(file=file)


def print_group(found, file=None):
    """Reporting sink: header with the discovery number, then the table in its original labeling."""
    file = sys.stdout if file is None else file
    print(f"Valid group #{found.index}:", file=file)
    print_table(found.table, file=file)


def print_total(order: int, count: int, file=None):
    file = sys.stdout if file is None else file
    print(f"Total valid groups of size {order}: {count}", file=file)


def print_abelian_notice(file=None):
    file = sys.stdout if file is None else file
    print("n is prime or prime squared, all groups must be abelian.", file=file)
