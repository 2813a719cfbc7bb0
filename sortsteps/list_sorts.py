"""Sorts that rearrange the nodes of a doubly linked list.

Each function prints the whole list after every swap of two nodes and
returns the new head.
"""

from __future__ import annotations

from typing import IO, Optional

from sortsteps.linked import ListNode
from sortsteps.printing import print_list


def _swap_adjacent(left: ListNode, right: ListNode) -> None:
    """Swap two adjacent nodes, ``left`` being directly before ``right``."""
    left.next = right.next
    right.prev = left.prev
    if right.next is not None:
        right.next.prev = left
    if left.prev is not None:
        left.prev.next = right
    right.next = left
    left.prev = right


def _swap_and_report(
    head: ListNode, left: ListNode, right: ListNode, file: Optional[IO[str]]
) -> ListNode:
    _swap_adjacent(left, right)
    if left is head:
        head = right
    print_list(head, file)
    return head


def insertion_sort_list(
    head: Optional[ListNode], file: Optional[IO[str]] = None
) -> Optional[ListNode]:
    """Sort a list in ascending order by insertion; return the new head."""
    if head is None or head.next is None:
        return head
    temp: Optional[ListNode] = head.next
    while temp is not None:
        curr = temp
        prev = temp.prev
        while prev is not None and curr.n < prev.n:
            head = _swap_and_report(head, prev, curr, file)
            prev = curr.prev
        temp = temp.next
    return head


def cocktail_sort_list(
    head: Optional[ListNode], file: Optional[IO[str]] = None
) -> Optional[ListNode]:
    """Sort a list in ascending order by cocktail shaker passes."""
    if head is None or head.next is None:
        return head
    curr: ListNode = head
    stop: Optional[ListNode] = None
    forward = True
    while True:
        swapped = False
        next_stop = curr if stop is not None else None
        if forward:
            while True:
                following = curr.next
                if curr.n > following.n:
                    head = _swap_and_report(head, curr, following, file)
                    swapped = True
                else:
                    curr = following
                if curr.next is stop:
                    break
            if not swapped:
                return head
            curr = curr.prev
        else:
            while curr.prev is not stop:
                preceding = curr.prev
                if curr.n < preceding.n:
                    head = _swap_and_report(head, preceding, curr, file)
                    swapped = True
                else:
                    curr = preceding
            if not swapped:
                return head
            curr = curr.next
        stop = next_stop
        forward = not forward