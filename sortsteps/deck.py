"""Playing cards held in a doubly linked list, and two ways to sort them.

A deck is ordered by suit (spades, hearts, clubs, diamonds) and, inside a
suit, by rank from Ace up to King.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import IO, Callable, Iterable, Iterator, List, Optional, Tuple


class Kind(IntEnum):
    """Card suits in sorting order."""

    SPADE = 0
    HEART = 1
    CLUB = 2
    DIAMOND = 3

    @property
    def letter(self) -> str:
        """The one-letter abbreviation used when printing a deck."""
        return self.name[0]


@dataclass(frozen=True)
class Card:
    """A playing card: a rank such as ``"Ace"`` or ``"7"`` and a suit."""

    value: str
    kind: Kind

    def __str__(self) -> str:
        return f"{{{self.value}, {self.kind.letter}}}"


@dataclass(eq=False)
class DeckNode:
    """A node of a doubly linked list of cards."""

    card: Card
    prev: Optional["DeckNode"] = field(default=None, repr=False)
    next: Optional["DeckNode"] = field(default=None, repr=False)

    def __iter__(self) -> Iterator["DeckNode"]:
        """Yield this node and every node after it."""
        node: Optional[DeckNode] = self
        while node is not None:
            yield node
            node = node.next


_FACE_RANKS = {"Ace": 1, "Jack": 11, "Queen": 12, "King": 13}

_DESCENDING_RANKS = (
    "King", "Queen", "Jack", "10", "9", "8", "7",
    "6", "5", "4", "3", "2", "Ace",
)

_CARDS_PER_LINE = 13


def rank_to_int(rank: str) -> int:
    """Return the number of a rank: Ace is 1, Jack 11, Queen 12, King 13.

    Raises ``ValueError`` for anything that is not a rank.
    """
    if rank in _FACE_RANKS:
        return _FACE_RANKS[rank]
    try:
        value = int(rank)
    except (TypeError, ValueError):
        raise ValueError(f"unknown rank: {rank!r}") from None
    if not 1 <= value <= 10:
        raise ValueError(f"unknown rank: {rank!r}")
    return value


def init_deck(cards: Iterable[Card]) -> Optional[DeckNode]:
    """Build a linked deck holding ``cards`` in order and return its head."""
    head: Optional[DeckNode] = None
    for card in reversed(list(cards)):
        node = DeckNode(card, next=head)
        if head is not None:
            head.prev = node
        head = node
    return head


def deck_cards(head: Optional[DeckNode]) -> List[Card]:
    """Return the cards of the deck starting at ``head``, in order."""
    if head is None:
        return []
    return [node.card for node in head]


def format_deck(head: Optional[DeckNode]) -> str:
    """Render the deck as ``{value, S}`` items, thirteen to a line."""
    if head is None:
        return ""
    parts: List[str] = []
    for position, node in enumerate(head):
        column = position % _CARDS_PER_LINE
        if column:
            parts.append(", ")
        parts.append(str(node.card))
        if column == _CARDS_PER_LINE - 1:
            parts.append("\n")
    return "".join(parts)


def print_deck(head: Optional[DeckNode], file: Optional[IO[str]] = None) -> None:
    """Write the deck as rendered by :func:`format_deck`."""
    print(format_deck(head), end="", file=file)


def _swap(head: DeckNode, left: DeckNode, right: DeckNode) -> DeckNode:
    """Swap adjacent nodes (``left`` directly before ``right``); return the head."""
    before = left.prev
    after = right.next
    if before is not None:
        before.next = right
    if after is not None:
        after.prev = left
    right.prev = before
    left.next = after
    right.next = left
    left.prev = right
    return right if left is head else head


def _shake(
    head: DeckNode,
    start: DeckNode,
    key: Callable[[DeckNode], int],
    same_run: Callable[[DeckNode, DeckNode], bool],
) -> Tuple[DeckNode, DeckNode]:
    """Cocktail-shaker sort the run of nodes reachable from ``start``.

    Returns the new head and the node that ended the first forward pass,
    which is the last node of the run.
    """
    curr = start
    end: Optional[DeckNode] = None
    forward = True
    while True:
        swapped = False
        if forward:
            while curr.next is not None and same_run(curr, curr.next):
                following = curr.next
                if key(curr) > key(following):
                    head = _swap(head, curr, following)
                    swapped = True
                else:
                    curr = following
            if end is None:
                end = curr
            if not swapped:
                return head, end
            curr = curr.prev
        else:
            while curr.prev is not None and same_run(curr.prev, curr):
                preceding = curr.prev
                if key(curr) < key(preceding):
                    head = _swap(head, preceding, curr)
                    swapped = True
                else:
                    curr = preceding
            if not swapped:
                return head, end
            curr = curr.next
        forward = not forward


def _suit_key(node: DeckNode) -> int:
    return int(node.card.kind)


def _rank_key(node: DeckNode) -> int:
    return rank_to_int(node.card.value)


def _anywhere(_a: DeckNode, _b: DeckNode) -> bool:
    return True


def _same_suit(a: DeckNode, b: DeckNode) -> bool:
    return a.card.kind == b.card.kind


def sort_deck(head: Optional[DeckNode]) -> Optional[DeckNode]:
    """Sort by suit, then each suit by rank, with cocktail shaker passes.

    Returns the new head of the deck.
    """
    if head is None or head.next is None:
        return head
    head, _ = _shake(head, head, _suit_key, _anywhere)
    next_suit: Optional[DeckNode] = head
    while next_suit is not None:
        head, end = _shake(head, next_suit, _rank_key, _same_suit)
        following = end.next
        if following is not None and following.card.kind != end.card.kind:
            next_suit = following
        else:
            next_suit = None
    return head


def _descending_index(card: Card) -> int:
    try:
        return _DESCENDING_RANKS.index(card.value)
    except ValueError:
        raise ValueError(f"unknown rank: {card.value!r}") from None


def _belongs_before(a: DeckNode, b: DeckNode) -> bool:
    a_index = _descending_index(a.card)
    b_index = _descending_index(b.card)
    if a.card.kind == b.card.kind:
        return a_index > b_index
    return a.card.kind < b.card.kind


def insertion_sort_deck(head: Optional[DeckNode]) -> Optional[DeckNode]:
    """Sort the deck by insertion, in the same order as :func:`sort_deck`."""
    if head is None:
        return None
    start: Optional[DeckNode] = head
    while start is not None:
        curr: Optional[DeckNode] = start
        while curr is not None and curr.prev is not None:
            if _belongs_before(curr, curr.prev):
                head = _swap(head, curr.prev, curr)
            else:
                curr = curr.prev
        start = start.next
    return head


def _cards(*pairs: Tuple[str, Kind]) -> Tuple[Card, ...]:
    return tuple(Card(value, kind) for value, kind in pairs)


_S, _H, _C, _D = Kind.SPADE, Kind.HEART, Kind.CLUB, Kind.DIAMOND

SAMPLE_DECK: Tuple[Card, ...] = _cards(
    ("Jack", _C), ("4", _H), ("3", _H), ("3", _D), ("Queen", _H),
    ("5", _H), ("5", _S), ("10", _H), ("6", _H), ("5", _D),
    ("6", _S), ("9", _H), ("7", _D), ("Jack", _S), ("Ace", _D),
    ("9", _C), ("Jack", _D), ("7", _S), ("King", _D), ("10", _C),
    ("King", _S), ("8", _C), ("9", _S), ("6", _C), ("Ace", _C),
    ("3", _S), ("8", _S), ("9", _D), ("2", _H), ("4", _D),
    ("6", _D), ("3", _C), ("Queen", _C), ("10", _S), ("8", _D),
    ("8", _H), ("Ace", _S), ("Jack", _H), ("2", _C), ("4", _S),
    ("2", _S), ("2", _D), ("King", _C), ("Queen", _S), ("Queen", _D),
    ("7", _C), ("7", _H), ("5", _C), ("10", _D), ("4", _C),
    ("King", _H), ("Ace", _H),
)