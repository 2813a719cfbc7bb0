"""Doubly linked list of integers used by the list-based sorts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a doubly linked list holding one integer."""

    n: int
    prev: Optional["ListNode"] = field(default=None, repr=False)
    next: Optional["ListNode"] = field(default=None, repr=False)

    def __iter__(self) -> Iterator["ListNode"]:
        """Yield this node and every node after it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def create_listint(values: Iterable[int]) -> Optional[ListNode]:
    """Build a doubly linked list from ``values`` and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        node = ListNode(value, next=head)
        if head is not None:
            head.prev = node
        head = node
    return head


def list_values(head: Optional[ListNode]) -> List[int]:
    """Return the integers of the list starting at ``head``, in order."""
    if head is None:
        return []
    return [node.n for node in head]