"""Divide-and-conquer and heap based sorts that print their progress.

Every function sorts the given list in place, writes its trace to
``file`` (standard output by default) and returns the list.
"""

from __future__ import annotations

from typing import IO, List, MutableSequence, Optional

from sortsteps.printing import format_array, print_array


def _merge(left: List[int], right: List[int]) -> List[int]:
    merged: List[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] >= left[i]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort_range(
    array: MutableSequence[int], left: int, right: int, file: Optional[IO[str]]
) -> None:
    size = right + 1 - left
    if size == 1:
        return
    mid = left + size // 2 - 1
    _merge_sort_range(array, left, mid, file)
    _merge_sort_range(array, mid + 1, right, file)
    lower = list(array[left : mid + 1])
    upper = list(array[mid + 1 : right + 1])
    print("Merging...", file=file)
    print(f"[left]: {format_array(lower)}", file=file)
    print(f"[right]: {format_array(upper)}", file=file)
    array[left : right + 1] = _merge(lower, upper)
    print(f"[Done]: {format_array(array[left : right + 1])}", file=file)


def merge_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Top-down merge sort; the left half is never the larger one."""
    if len(array) > 1:
        _merge_sort_range(array, 0, len(array) - 1, file)
    return array


def _swap_and_print(
    array: MutableSequence[int], a: int, b: int, file: Optional[IO[str]]
) -> None:
    array[a], array[b] = array[b], array[a]
    print_array(array, file)


def _sift_down(
    array: MutableSequence[int], root: int, end: int, file: Optional[IO[str]]
) -> None:
    while root * 2 + 1 <= end:
        child = root * 2 + 1
        largest = root
        if array[largest] < array[child]:
            largest = child
        if child + 1 <= end and array[largest] < array[child + 1]:
            largest = child + 1
        if largest == root:
            return
        _swap_and_print(array, root, largest, file)
        root = largest


def heap_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Heap sort with sift-down, printing the array after every swap."""
    size = len(array)
    if size < 2:
        return array
    for start in range(size // 2 - 1, -1, -1):
        _sift_down(array, start, size - 1, file)
    for last in range(size - 1, 0, -1):
        _swap_and_print(array, last, 0, file)
        _sift_down(array, 0, last - 1, file)
    return array


def radix_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """LSD radix sort of non-negative integers, printing after each digit."""
    if len(array) < 2:
        return array
    if any(value < 0 for value in array):
        raise ValueError("radix sort needs non-negative integers")
    passes = max(len(str(value)) if value else 0 for value in array)
    place = 1
    for _ in range(passes):
        digit = place
        array[:] = sorted(array, key=lambda value: value // digit % 10)
        print_array(array, file)
        place *= 10
    return array


def _bitonic_compare(
    up: bool, array: MutableSequence[int], start: int, end: int
) -> None:
    half = (end - start + 1) // 2
    for i in range(start, start + half):
        if (array[i] > array[i + half]) == up:
            array[i], array[i + half] = array[i + half], array[i]


def _bitonic_merge(
    up: bool, array: MutableSequence[int], start: int, end: int
) -> None:
    if end - start < 1:
        return
    mid = (start + end) // 2
    _bitonic_compare(up, array, start, end)
    _bitonic_merge(up, array, start, mid)
    _bitonic_merge(up, array, mid + 1, end)


def _bitonic_sort_range(
    up: bool,
    array: MutableSequence[int],
    start: int,
    end: int,
    file: Optional[IO[str]],
) -> None:
    if end - start < 1:
        return
    mid = (start + end) // 2
    direction = "UP" if up else "DOWN"
    header = f"[{end - start + 1}/{len(array)}] ({direction}):"
    print(f"Merging {header}", file=file)
    print_array(array[start : end + 1], file)
    _bitonic_sort_range(True, array, start, mid, file)
    _bitonic_sort_range(False, array, mid + 1, end, file)
    _bitonic_merge(up, array, start, end)
    print(f"Result {header}", file=file)
    print_array(array[start : end + 1], file)


def bitonic_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Recursive bitonic sort; sorts fully when the length is a power of two."""
    if len(array) >= 2:
        _bitonic_sort_range(True, array, 0, len(array) - 1, file)
    return array


def bitonic_network_sort(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Iterative bitonic network sort for lengths that are powers of two.

    Each exchange is reported as ``Swapped: [x] [y]``.
    """
    size = len(array)
    if size < 2:
        return array
    if size & (size - 1):
        raise ValueError("bitonic network sort needs a power-of-two length")
    stages = 1
    while size >> (stages + 1):
        stages += 1
    for p in range(stages):
        for q in range(p + 1):
            distance = 1 << (p - q)
            for i in range(size):
                up = ((i >> p) & 2) == 0
                partner = i | distance
                if i & distance == 0 and (array[i] > array[partner]) == up:
                    array[i], array[partner] = array[partner], array[i]
                    print(f"Swapped: [{array[partner]}] [{array[i]}]", file=file)
    return array


def _hoare_partition(
    array: MutableSequence[int], left: int, right: int, file: Optional[IO[str]]
) -> int:
    pivot = array[right]
    low = left - 1
    high = right + 1
    while True:
        low += 1
        while array[low] < pivot:
            low += 1
        high -= 1
        while array[high] > pivot:
            high -= 1
        if low >= high:
            return low
        _swap_and_print(array, low, high, file)


def quick_sort_hoare(
    array: MutableSequence[int], file: Optional[IO[str]] = None
) -> MutableSequence[int]:
    """Quick sort with Hoare partitioning and the last element as pivot."""
    if len(array) < 2:
        return array
    pending = [(0, len(array) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        split = _hoare_partition(array, left, right, file)
        pending.append((split, right))
        pending.append((left, split - 1))
    return array