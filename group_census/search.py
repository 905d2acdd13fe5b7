"""
Backtracking search for group tables of a fixed order.

Cells are filled in row-major order on one reused n x n buffer.  Every
completed table is run through the axiom chain; survivors are canonicalized
and offered to an IsomorphismRegistry, and each first representative of a
class is handed to a reporting sink.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from .arith import must_be_abelian
from .axioms import (
    EMPTY,
    associative_at,
    find_identity,
    fits_latin,
    has_inverses,
    is_associative,
    is_closed,
    is_commutative,
)
from .canon import canonical_flat
from .registry import IsomorphismRegistry

logger = logging.getLogger(__name__)

# largest orders each search mode finishes in practical time
MAX_PRACTICAL_ORDER = 4
MAX_PRACTICAL_EAGER_ORDER = 6


@dataclass(frozen=True)
class SearchConfig:
    order: int
    abelian: bool | None = None    # None: decide from the order
    eager: bool = False            # reject partial tables breaking cancellation/associativity
    check_closure: bool = True

    def __post_init__(self):
        if isinstance(self.order, bool) or not isinstance(self.order, (int, np.integer)):
            raise ValueError(f"order must be an integer, got {self.order!r}")
        if self.order < 1:
            raise ValueError(f"order must be a positive integer, got {self.order}")

    @property
    def forced_abelian(self) -> bool:
        if self.abelian is None:
            return must_be_abelian(self.order)
        return self.abelian

    @property
    def practical_limit(self) -> int:
        return MAX_PRACTICAL_EAGER_ORDER if self.eager else MAX_PRACTICAL_ORDER


@dataclass
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    rejected: Counter = field(default_factory=Counter)
    duplicates: int = 0


@dataclass
class FoundGroup:
    index: int               # 1-based discovery number
    table: np.ndarray        # original labeling
    identity: int
    canonical: np.ndarray    # flattened, identity relabeled to 0


class _Search:
    def __init__(self, config: SearchConfig, sink, registry: IsomorphismRegistry):
        self.config = config
        self.n = config.order
        self.abelian = config.forced_abelian
        self.sink = sink
        self.registry = registry
        self.table = np.full((self.n, self.n), EMPTY, dtype=np.int64)
        self.count = 0
        self.stats = SearchStats()

    def run(self) -> int:
        self._fill(0, 0)
        return self.count

    def _fill(self, row: int, col: int):
        self.stats.nodes += 1
        n = self.n
        T = self.table
        if row == n:
            self._complete()
            return

        next_row, next_col = (row, col + 1) if col + 1 < n else (row + 1, 0)
        for val in range(n):
            T[row, col] = val
            if self.abelian and col < row and T[col, row] != val:
                continue
            if self.config.eager and not (fits_latin(T, row, col) and associative_at(T, row, col)):
                continue
            self._fill(next_row, next_col)
        T[row, col] = EMPTY

    def _reject(self, reason: str):
        self.stats.rejected[reason] += 1

    def _complete(self):
        self.stats.leaves += 1
        T = self.table

        if self.config.check_closure and not is_closed(T):
            return self._reject("closure")
        if self.abelian and not is_commutative(T):
            return self._reject("commutativity")
        e = find_identity(T)
        if e is None:
            return self._reject("identity")
        if not has_inverses(T, e):
            return self._reject("inverses")
        if not is_associative(T):
            return self._reject("associativity")

        canon = canonical_flat(T, e)
        if not self.registry.add(canon):
            self.stats.duplicates += 1
            return

        self.count += 1
        if self.sink is not None:
            self.sink(FoundGroup(index=self.count, table=T.copy(), identity=e, canonical=canon))


def generate_tables(config: SearchConfig, sink=None, registry: IsomorphismRegistry | None = None) -> int:
    """
    Enumerate the group tables of order `config.order`, one per isomorphism class.

    `sink` is called with a FoundGroup for every new class, in discovery order.
    A fresh registry is used unless one is passed in.  Returns the class count.
    """
    if registry is None:
        registry = IsomorphismRegistry()
    n = config.order
    if n > config.practical_limit:
        logger.warning("Order %d is beyond what %s search finishes in practical time",
                       n, "eager" if config.eager else "plain")
    search = _Search(config, sink, registry)
    if search.abelian:
        logger.info("n=%d is prime or prime squared, all groups must be abelian", n)

    count = search.run()

    stats = search.stats
    logger.debug("nodes=%d leaves=%d duplicates=%d rejected=%s",
                 stats.nodes, stats.leaves, stats.duplicates, dict(stats.rejected))
    logger.info("Found %d groups of order %d", count, n)
    return count


def find_groups(order: int, **options) -> list[FoundGroup]:
    found = []
    generate_tables(SearchConfig(order, **options), sink=found.append)
    return found


def count_groups(order: int, **options) -> int:
    return generate_tables(SearchConfig(order, **options))
