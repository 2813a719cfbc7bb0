# sortsteps

Classic sorting algorithms written to be watched. Each sort works on a
Python list of integers, or on a doubly linked list of nodes, and prints
the state of the data as it goes: after swaps, after passes, around
merges. That makes the package useful for studying how the algorithms
behave and for checking a hand trace against a real run.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Sorts on Python lists

Every function below sorts the list in place, writes its trace to
`file` (standard output when `file` is left as `None`) and returns the
same list.

In `sortsteps.simple_sorts`:

- `bubble_sort(array, file)` prints the list after each swap. It stops
  early only when its first pass makes no swap at all.
- `selection_sort(array, file)` prints the list after each swap.
- `quick_sort(array, file)` uses the Lomuto scheme with the last element
  as pivot and prints after each swap of two different values.
- `shell_sort(array, file)` walks the Knuth gap sequence 1, 4, 13, 40, ...
  and prints after each gap. `knuth_seq(size)` returns the largest gap
  it starts from.
- `counting_sort(array, file)` prints the cumulative count array once,
  then places the values. It raises `ValueError` on negative integers.

In `sortsteps.advanced_sorts`:

- `merge_sort(array, file)` is top-down; for every merge it prints
  `Merging...`, the `[left]:` and `[right]:` halves, and the `[Done]:`
  result.
- `heap_sort(array, file)` is a sift-down heap sort and prints after each
  swap.
- `radix_sort(array, file)` is an LSD radix sort and prints after each
  decimal digit. It raises `ValueError` on negative integers.
- `bitonic_sort(array, file)` is the recursive bitonic sort. It prints
  `Merging [n/size] (UP|DOWN):` and `Result [n/size] (UP|DOWN):` with the
  sub-list for each step. It sorts fully only when the length is a power
  of two.
- `bitonic_network_sort(array, file)` is the iterative bitonic network
  and prints `Swapped: [x] [y]` for each exchange. It raises `ValueError`
  when the length is not a power of two.
- `quick_sort_hoare(array, file)` uses the Hoare partition scheme with the
  last element as pivot and prints after each swap.

Lists with fewer than two elements are returned untouched.

```python
import sys

from sortsteps.printing import print_array
from sortsteps.simple_sorts import bubble_sort

numbers = [19, 48, 99, 71, 13, 52, 96, 73, 86, 7]
print_array(numbers, sys.stdout)
bubble_sort(numbers, sys.stdout)
print_array(numbers, sys.stdout)
```

## Sorts on doubly linked lists

`sortsteps.linked` holds `ListNode` (fields `n`, `prev`, `next`;
iterating a node yields it and every node after it), `create_listint`,
which builds a list from any iterable of integers and returns the head
(or `None` when it is empty), and `list_values`, which turns a list back
into a Python list.

`sortsteps.list_sorts` moves whole nodes rather than values, prints the
list after every swap of two nodes, and returns the new head:

- `insertion_sort_list(head, file)`
- `cocktail_sort_list(head, file)`

```python
import sys

from sortsteps.linked import create_listint, list_values
from sortsteps.list_sorts import cocktail_sort_list

head = create_listint([39, 31, 19, 42, 12])
head = cocktail_sort_list(head, sys.stdout)
print(list_values(head))
```

## Printing and checking

`sortsteps.printing` provides:

- `format_array(values)` joins integers with `", "`.
- `print_array(values, file)` and `print_list(head, file)` print that
  line.
- `check_array(values, file)` and `check_list(head, file)` print
  `ERROR: [a] > [b]` for every adjacent pair out of ascending order and
  return those pairs as a list of tuples (empty when sorted).
- `rand_array(length, maximum, rng)` returns `length` random integers in
  `[0, maximum)`; a `maximum` of 0 means up to 2147483647. Pass a
  `random.Random` as `rng` for repeatable results. Negative `length` or
  `maximum` raises `ValueError`.

## Sorting a deck of cards

`sortsteps.deck` models playing cards: `Kind` is an `IntEnum` of suits in
sorting order (`SPADE`, `HEART`, `CLUB`, `DIAMOND`), `Card` is a frozen
dataclass of a rank string (`"Ace"`, `"2"` ... `"10"`, `"Jack"`,
`"Queen"`, `"King"`) and a `Kind`, and `DeckNode` is a doubly linked list
node holding a card.

- `init_deck(cards)` builds a linked deck and returns its head;
  `deck_cards(head)` returns the cards in order.
- `format_deck(head)` renders the deck as `{value, S}` items, thirteen to
  a line; `print_deck(head, file)` writes that text.
- `rank_to_int(rank)` gives Ace 1, Jack 11, Queen 12, King 13 and the
  number for the rest, and raises `ValueError` for anything else.
- `sort_deck(head)` sorts by suit and then each suit by rank, Ace up to
  King, with cocktail shaker passes, and returns the new head.
- `insertion_sort_deck(head)` reaches the same order by insertion sort.

The deck sorts print nothing while they work. `SAMPLE_DECK` is a
shuffled 52-card deck to try them on.

## Command line

The `sortsteps` command runs one algorithm on an input and prints the
input, a blank line, the steps, a blank line, the sorted result and an
`ERROR:` line for any pair still out of order:

```
sortsteps bubble
sortsteps quick-hoare --values 5 3 9 1
sortsteps heap --random 20 --max 100 --seed 1
sortsteps deck
```

Algorithms: `bubble`, `selection`, `quick`, `shell`, `counting`,
`merge`, `heap`, `radix`, `bitonic`, `bitonic-network`, `quick-hoare`,
`insertion` and `cocktail` (the linked-list sorts), and `deck` and
`deck-insertion`.

Options:

- `--values INT [INT ...]` sorts the given integers.
- `--random N` sorts `N` random integers, below `--max M` (0, the
  default, means no limit), seeded by `--seed`.

Without either, each algorithm uses a fixed sample list. The deck
algorithms always sort `SAMPLE_DECK` and reject `--values` and
`--random`. When a sort rejects its input (for instance a negative number
for `counting`), the command prints `sortsteps: <reason>` to standard
error and exits with status 1.

```
sortsteps --help
```