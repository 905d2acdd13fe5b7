"""

group_census
============
Brute-force enumeration of finite group tables of a given order,
reduced to one representative per isomorphism class.
"""

# order arithmetic
from .arith import is_prime, is_prime_square, must_be_abelian

# axiom checks
from .axioms import (
    is_closed,
    is_identity,
    find_identity,
    has_inverses,
    is_associative,
    is_commutative,
    is_group,
    fits_latin,
    associative_at,
)

# relabeling + canonical forms
from .perm import next_permutation, lex_permutations
from .canon import relabel, canonical_flat, lex_less, are_isomorphic

# registry + search
from .registry import IsomorphismRegistry
from .search import (
    SearchConfig,
    SearchStats,
    FoundGroup,
    generate_tables,
    find_groups,
    count_groups,
)

__all__ = [
    # arith
    "is_prime",
    "is_prime_square",
    "must_be_abelian",
    # axioms
    "is_closed",
    "is_identity",
    "find_identity",
    "has_inverses",
    "is_associative",
    "is_commutative",
    "is_group",
    "fits_latin",
    "associative_at",
    # canon
    "next_permutation",
    "lex_permutations",
    "relabel",
    "canonical_flat",
    "lex_less",
    "are_isomorphic",
    # search
    "IsomorphismRegistry",
    "SearchConfig",
    "SearchStats",
    "FoundGroup",
    "generate_tables",
    "find_groups",
    "count_groups",
]
