"""
command line enumerator
prints every tuple of a combinatorial family, in lexicographic order, one per line

    python -m combinq combinations 5 3
    python -m combinq permutations - 2 --items red green blue --format csv
    python -m combinq cwr 100 4 --count-only
"""

import argparse
import csv
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

import pandas as pd

from .errors import ConstructionError
from .extensions.combinations import Combinations
from .extensions.combinations_with_replacement import CombinationsWithReplacement
from .extensions.permutations import Permutations

logger = logging.getLogger(__name__)

FAMILIES = {
    'combinations': Combinations,
    'cwr': CombinationsWithReplacement,
    'permutations': Permutations,
}


@dataclass
class EnumerationConfig:
    """configuration for one enumeration run"""
    family: str = 'combinations'
    n: Optional[int] = None
    k: int = 1
    items: List[str] = field(default_factory=list)
    limit: Optional[int] = None
    output_format: str = 'plain'
    count_only: bool = False
    verbose: bool = False

    @property
    def domain(self):
        # labels win over a bare size
        return self.items if self.items else self.n


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='combinq',
        description='Enumerate combinations, combinations with replacement or permutations')
    parser.add_argument('family', choices=sorted(FAMILIES), help='Combinatorial family')
    parser.add_argument('n', help="Domain size, or '-' when --items is given")
    parser.add_argument('k', type=int, help='Tuple arity')
    parser.add_argument('--items', nargs='+', default=[], help='Labels to project the indices onto')
    parser.add_argument('--limit', type=int, default=None, help='Stop after this many tuples')
    parser.add_argument('--format', dest='output_format', choices=['plain', 'csv', 'table'],
                        default='plain', help='Output format')
    parser.add_argument('--count-only', action='store_true', help='Only print the exact number of tuples')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')

    return parser


def config_from_args(args: argparse.Namespace) -> EnumerationConfig:
    if args.n == '-':
        if not args.items:
            raise ValueError("n may only be '-' when --items is given")
        n = len(args.items)
    else:
        n = int(args.n)
        if args.items and n != len(args.items):
            raise ValueError(f"n is {n} but --items gives {len(args.items)} labels")
    return EnumerationConfig(
        family=args.family,
        n=n,
        k=args.k,
        items=list(args.items),
        limit=args.limit,
        output_format=args.output_format,
        count_only=args.count_only,
        verbose=args.verbose,
    )


def enumerate_rows(config: EnumerationConfig):
    """yield owned rows (labels when items were given, else indices) for the configured run"""
    generator = FAMILIES[config.family](config.domain, config.k)
    emitted = 0
    while config.limit is None or emitted < config.limit:
        if not generator.advance():
            break
        emitted += 1
        yield generator.item_snapshot() if config.items else generator.snapshot()
    logger.debug("%s emitted %d of %d tuples", config.family, emitted, generator.total_count())


def write_rows(config: EnumerationConfig, out: TextIO) -> int:
    """write the enumeration to out, returns the number of rows written"""
    if config.count_only:
        generator = FAMILIES[config.family](config.domain, config.k)
        out.write(f"{generator.total_count()}\n")
        return 0

    count = 0
    if config.output_format == 'csv':
        writer = csv.writer(out)
        for row in enumerate_rows(config):
            writer.writerow(row)
            count += 1
    elif config.output_format == 'table':
        rows = list(enumerate_rows(config))
        frame = pd.DataFrame(rows, columns=[f"p{i}" for i in range(config.k)])
        out.write(frame.to_string(index=False) + "\n")
        count = len(rows)
    else:
        for row in enumerate_rows(config):
            out.write(" ".join(str(value) for value in row) + "\n")
            count += 1
    return count


def main(argv: Optional[List[str]] = None, out: TextIO = None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    parser = create_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        count = write_rows(config, out)
    except ConstructionError as e:
        logger.error("cannot build %s(n=%s, k=%s): %s", config.family, e.n, e.k, e.reason)
        return 2

    if not config.count_only:
        logger.info("wrote %d tuples", count)
    return 0
