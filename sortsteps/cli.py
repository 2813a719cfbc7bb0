"""Command line demonstrations of the sorting algorithms."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from sortsteps.advanced_sorts import (
    bitonic_network_sort,
    bitonic_sort,
    heap_sort,
    merge_sort,
    quick_sort_hoare,
    radix_sort,
)
from sortsteps.deck import SAMPLE_DECK, init_deck, insertion_sort_deck, print_deck, sort_deck
from sortsteps.linked import create_listint
from sortsteps.list_sorts import cocktail_sort_list, insertion_sort_list
from sortsteps.printing import (
    check_array,
    check_list,
    print_array,
    print_list,
    rand_array,
)
from sortsteps.simple_sorts import (
    bubble_sort,
    counting_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

_DEFAULT = (19, 48, 99, 71, 13, 52, 96, 73, 86, 7)
_BITONIC = (100, 93, 40, 57, 14, 58, 85, 54, 31, 56, 46, 39, 15, 26, 78, 13)

_ARRAY_SORTS: Dict[str, Tuple[Callable, Tuple[int, ...]]] = {
    "bubble": (bubble_sort, _DEFAULT),
    "selection": (selection_sort, (19, 1, 0)),
    "quick": (quick_sort, _DEFAULT),
    "shell": (shell_sort, _DEFAULT),
    "counting": (counting_sort, _DEFAULT),
    "merge": (merge_sort, _DEFAULT),
    "heap": (heap_sort, _DEFAULT),
    "radix": (radix_sort, _DEFAULT),
    "bitonic": (bitonic_sort, _BITONIC),
    "bitonic-network": (bitonic_network_sort, _BITONIC),
    "quick-hoare": (quick_sort_hoare, _DEFAULT),
}

_LIST_SORTS: Dict[str, Tuple[Callable, Tuple[int, ...]]] = {
    "insertion": (insertion_sort_list, _DEFAULT),
    "cocktail": (cocktail_sort_list, (39, 31, 19, 42, 12)),
}

_DECK_SORTS: Dict[str, Callable] = {
    "deck": sort_deck,
    "deck-insertion": insertion_sort_deck,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortsteps",
        description="Show each step of a sorting algorithm.",
    )
    parser.add_argument(
        "algorithm",
        choices=sorted([*_ARRAY_SORTS, *_LIST_SORTS, *_DECK_SORTS]),
        help="the algorithm to run",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--random", type=int, metavar="N", help="sort N random integers"
    )
    source.add_argument(
        "--values", type=int, nargs="+", metavar="INT", help="integers to sort"
    )
    parser.add_argument(
        "--max",
        type=int,
        default=0,
        metavar="M",
        help="random integers are below M (0 means no limit)",
    )
    parser.add_argument("--seed", type=int, help="seed for random integers")
    return parser


def _run_array(sort: Callable, values: Sequence[int]) -> int:
    out = sys.stdout
    array: List[int] = list(values)
    print_array(array, out)
    print(file=out)
    sort(array, out)
    print(file=out)
    print_array(array, out)
    check_array(array, out)
    return 0


def _run_list(sort: Callable, values: Sequence[int]) -> int:
    out = sys.stdout
    head = create_listint(values)
    if head is None:
        return 1
    print_list(head, out)
    print(file=out)
    head = sort(head, out)
    print(file=out)
    print_list(head, out)
    check_list(head, out)
    return 0


def _run_deck(sort: Callable) -> int:
    out = sys.stdout
    head = init_deck(SAMPLE_DECK)
    print_deck(head, out)
    print(file=out)
    head = sort(head)
    print(file=out)
    print_deck(head, out)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one sorting demonstration and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.algorithm in _DECK_SORTS:
        if args.random is not None or args.values is not None:
            parser.error("deck sorts use the built-in sample deck")
        return _run_deck(_DECK_SORTS[args.algorithm])

    try:
        if args.algorithm in _ARRAY_SORTS:
            sort, default = _ARRAY_SORTS[args.algorithm]
            runner = _run_array
        else:
            sort, default = _LIST_SORTS[args.algorithm]
            runner = _run_list
        if args.values is not None:
            values: Sequence[int] = args.values
        elif args.random is not None:
            values = rand_array(args.random, args.max, random.Random(args.seed))
        else:
            values = default
        return runner(sort, values)
    except ValueError as error:
        print(f"sortsteps: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())