"""Elementary in-place sorts that print the array as they work.

Every function sorts the given list in place, writes the intermediate
states to ``file`` (standard output by default) and returns the list.
"""

from __future__ import annotations

from itertools import accumulate
from typing import IO, List, MutableSequence, Optional

from sortsteps.printing import print_array


def _swap_and_print(
    array: MutableSequence[int], a: int, b: int, file: Optional[IO[str]]
) -> None:
    array[a], array[b] = array[b], array[a]
    print_array(array, file)


def bubble_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Sort by bubbling, printing the array after every swap.

    The sort stops early only when its first pass made no swap at all.
    """
    size = len(array)
    swapped = False
    for done in range(size - 1):
        for i in range(size - done - 1):
            if array[i] > array[i + 1]:
                _swap_and_print(array, i, i + 1, file)
                swapped = True
        if not swapped:
            break
    return array


def selection_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Sort by selection, printing the array after every swap."""
    size = len(array)
    for start in range(size - 1):
        smallest = min(range(start, size), key=array.__getitem__)
        if smallest != start:
            _swap_and_print(array, smallest, start, file)
    return array


def _swap_if_different(
    array: MutableSequence[int], a: int, b: int, file: Optional[IO[str]]
) -> None:
    if array[a] != array[b]:
        _swap_and_print(array, a, b, file)


def quick_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Quick sort with the last element as pivot (Lomuto scheme).

    The array is printed after every swap of two different values.
    """
    if len(array) < 2:
        return array
    pending = [(0, len(array) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = array[right]
        boundary = left
        for j in range(left, right):
            if array[j] <= pivot:
                _swap_if_different(array, j, boundary, file)
                boundary += 1
        _swap_if_different(array, right, boundary, file)
        # The lesser partition is handled fully before the greater one.
        pending.append((boundary + 1, right))
        pending.append((left, boundary - 1))
    return array


def knuth_seq(size: int) -> int:
    """Return the largest gap of the 1, 4, 13, 40, ... sequence for ``size``."""
    counter = 1
    while counter < size:
        counter = counter * 3 + 1
    return (counter - 1) // 3


def shell_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Shell sort over the Knuth gap sequence, printing after each gap."""
    size = len(array)
    gap = knuth_seq(size)
    while gap:
        for i in range(gap, size):
            temp = array[i]
            j = i
            while j >= gap and array[j - gap] > temp:
                array[j] = array[j - gap]
                j -= gap
            array[j] = temp
        print_array(array, file)
        gap = (gap - 1) // 3
    return array


def counting_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Counting sort of non-negative integers.

    Prints the cumulative count array once before placing the values.
    """
    if len(array) < 2:
        return array
    if any(value < 0 for value in array):
        raise ValueError("counting sort needs non-negative integers")
    largest = max(0, max(array))
    counts = [0] * (largest + 1)
    for value in array:
        counts[value] += 1
    positions: List[int] = list(accumulate(counts))
    print_array(positions, file)
    placed = [0] * len(array)
    for value in array:
        placed[positions[value] - 1] = value
        positions[value] -= 1
    array[:] = placed
    return array