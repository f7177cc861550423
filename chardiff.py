#!/usr/bin/env python3


"""Shows the character-level differences between two strings."""


import argparse
import difference
import levenshtein
import logging
import sys


from costs import Costs, LEVENSHTEIN, WeightedCosts
from typing import IO, Iterable, List, Optional, Tuple


def separators(value: str) -> difference.Separators:
    if len(value) != 2:
        raise argparse.ArgumentTypeError(
                f'expected exactly two characters, got {value!r}')
    return difference.make_char_separators(value[0], value[1])


def make_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(description=__doc__)
    arg_parser.add_argument('text1', help='source text (a path with --files)')
    arg_parser.add_argument('text2', help='target text (a path with --files)')
    arg_parser.add_argument('-f', '--files', action='store_true',
            help='Compare two files line by line.')
    arg_parser.add_argument('-s', '--separators', type=separators,
            default=difference.brackets_separators(),
            help='Two characters enclosing each changed span (default: []).')
    arg_parser.add_argument('--shorten-size', type=int, default=20,
            help='Unchanged characters kept around changed spans.')
    arg_parser.add_argument('--shorten-text', default='...',
            help='Text replacing shortened unchanged characters.')
    arg_parser.add_argument('-c', '--color', action='store_true',
            help='Color insertions, deletions and substitutions.')
    arg_parser.add_argument('--insertion-cost', type=int, default=None)
    arg_parser.add_argument('--deletion-cost', type=int, default=None)
    arg_parser.add_argument('--substitution-cost', type=int, default=None)
    arg_parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Verbosity. Give once for progress, twice for debugging.')
    return arg_parser


def make_costs(args: argparse.Namespace) -> Costs:
    weights = (args.insertion_cost, args.deletion_cost, args.substitution_cost)
    if all(w is None for w in weights):
        return LEVENSHTEIN
    return WeightedCosts(*(1 if w is None else w for w in weights))


def make_display_options(args: argparse.Namespace) -> difference.DisplayOptions:
    if args.color:
        display = difference.colored_display_edit_operation
    else:
        display = difference.default_display_edit_operation
    return difference.DisplayOptions(
        separators=args.separators,
        shorten_options=difference.ShortenOptions(args.shorten_size,
                args.shorten_text),
        display_edit_operation=display,
    )


def compare(text1: str, text2: str, costs: Costs,
        options: difference.DisplayOptions) -> Tuple[int, str]:
    matrix = levenshtein.compute_alignment(costs, text1, text2)
    operations = levenshtein.extract_operations(matrix, text1, text2)
    return levenshtein.distance(matrix), difference.display_diffs(options, operations)


def read_lines(f: IO) -> Iterable[str]:
    for line in f:
        yield line.rstrip('\r\n')


def main(argv: Optional[List[str]]=None, out: IO=sys.stdout) -> int:
    arg_parser = make_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    if args.shorten_size < 0:
        arg_parser.error('--shorten-size must be non-negative')
    try:
        costs = make_costs(args)
    except ValueError as e:
        arg_parser.error(str(e))
    options = make_display_options(args)
    if not args.files:
        distance, rendered = compare(args.text1, args.text2, costs, options)
        print(f'{distance}\t{rendered}', file=out)
        return 0
    total_pairs = 0
    total_distance = 0
    with open(args.text1) as f1, open(args.text2) as f2:
        for line1, line2 in zip(read_lines(f1), read_lines(f2)):
            distance, rendered = compare(line1, line2, costs, options)
            logging.info('line %s: distance %s', total_pairs + 1, distance)
            print(f'{distance}\t{rendered}', file=out)
            total_pairs += 1
            total_distance += distance
    print(f'total pairs:       {total_pairs}', file=out)
    print(f'total distance:    {total_distance}', file=out)
    if total_pairs:
        print(f'distance per pair: {total_distance / total_pairs}', file=out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
