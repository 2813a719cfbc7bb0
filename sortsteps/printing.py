"""Printing, checking and generating integer sequences."""

from __future__ import annotations

import random
from typing import IO, List, Optional, Sequence, Tuple

from sortsteps.linked import ListNode, list_values

RAND_MAX = 2147483647


def format_array(values: Sequence[int]) -> str:
    """Return the integers joined by ``", "``."""
    return ", ".join(str(value) for value in values)


def print_array(values: Sequence[int], file: Optional[IO[str]] = None) -> None:
    """Print the integers on one line, separated by ``", "``."""
    print(format_array(values), file=file)


def print_list(head: Optional[ListNode], file: Optional[IO[str]] = None) -> None:
    """Print the integers of a linked list on one line."""
    print(format_array(list_values(head)), file=file)


def _report_disorder(
    values: Sequence[int], file: Optional[IO[str]]
) -> List[Tuple[int, int]]:
    violations = [(a, b) for a, b in zip(values, values[1:]) if a > b]
    for a, b in violations:
        print(f"ERROR: [{a}] > [{b}]", file=file)
    return violations


def check_array(
    values: Sequence[int], file: Optional[IO[str]] = None
) -> List[Tuple[int, int]]:
    """Report every adjacent pair out of ascending order and return them."""
    return _report_disorder(list(values), file)


def check_list(
    head: Optional[ListNode], file: Optional[IO[str]] = None
) -> List[Tuple[int, int]]:
    """Report every adjacent pair of a list out of order and return them."""
    return _report_disorder(list_values(head), file)


def rand_array(
    length: int, maximum: int = 0, rng: Optional[random.Random] = None
) -> List[int]:
    """Return ``length`` random integers in ``[0, maximum)``.

    A ``maximum`` of zero means the full non-negative ``int`` range.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if maximum < 0:
        raise ValueError("maximum must not be negative")
    if maximum == 0:
        maximum = RAND_MAX
    source = rng if rng is not None else random.Random()
    return [source.randrange(maximum) for _ in range(length)]