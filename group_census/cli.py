"""
Command line front end.

    python -m group_census 4
    python -m group_census 6 --eager --save out/order6.npz
"""

import argparse
import logging
import sys

from .registry import IsomorphismRegistry
from .report import print_abelian_notice, print_group, print_total
from .search import SearchConfig, generate_tables


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"n must be a positive integer, got {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"n must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="group_census",
        description="Count the groups of order n up to isomorphism by brute-force table search.",
    )
    parser.add_argument("n", type=_positive_int, help="group order")
    parser.add_argument("--eager", action="store_true",
                        help="prune partial tables that break cancellation or associativity")
    parser.add_argument("--no-abelian", action="store_true",
                        help="do not restrict prime and prime-squared orders to symmetric tables")
    parser.add_argument("--quiet", action="store_true", help="print only the total")
    parser.add_argument("--save", metavar="PATH", help="export canonical forms and tables to a .npz")
    parser.add_argument("-v", "--verbose", action="store_true", help="log search statistics")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = SearchConfig(
        order=args.n,
        abelian=False if args.no_abelian else None,
        eager=args.eager,
    )
    if not args.quiet and config.abelian is None and config.forced_abelian:
        print_abelian_notice()
    registry = IsomorphismRegistry()
    tables = []

    def sink(found):
        tables.append(found.table)
        if not args.quiet:
            print_group(found)

    try:
        count = generate_tables(config, sink=sink, registry=registry)
    except MemoryError:
        print("Memory allocation failed.")
        return 1

    print_total(args.n, count)
    if args.save:
        registry.save(args.save, tables=tables)
    return 0
