# dsakit

Classic data structures and algorithms in plain Python, with a small
command-line tool for trying them out. No third-party dependencies.

## Installation

    pip install dsakit

## Sorting

`dsakit.sorting` offers `bubble_sort`, `insertion_sort`, `selection_sort`,
`merge_sort` and `quick_sort`. Each takes any iterable of mutually comparable
items and returns a new sorted list; the input is left untouched.

```python
from dsakit.sorting import bubble_sort, merge_sort, quick_sort

bubble_sort([5, 1, 4])                   # [1, 4, 5]
bubble_sort([5, 1, 4], descending=True)  # [5, 4, 1]
merge_sort([40, 100, 12, 26, 55])        # [12, 26, 40, 55, 100]
quick_sort([3, 1, 2])                    # [1, 2, 3]
```

- `bubble_sort` stops early once a pass makes no swap; only it takes a
  `descending` flag.
- `insertion_sort` and `merge_sort` are stable.
- `quick_sort` uses the last element of each range as its pivot.

## Searching

`dsakit.searching` returns the index of the target, or `None` when it is not
present.

```python
from dsakit.searching import linear_search, recursive_linear_search, binary_search

linear_search([17, 42, 90, 110, 1], 1)        # 4
binary_search([22, 31, 44, 410, 498], 44)     # 2
recursive_linear_search([7, 8, 9], 9)         # 2
recursive_linear_search([7, 8, 9], 7, start=1)  # None
```

- `linear_search` accepts any iterable and returns the first match.
- `recursive_linear_search(values, target, start=0)` searches from `start`
  onwards and raises `ValueError` for a negative `start`.
- `binary_search` expects the values in ascending order.

## Containers

### `dsakit.arrays.BoundedArray`

A sequence holding at most `capacity` items (default 100).

- `insert(index, value)` accepts `0 <= index <= len(array)`, shifting later
  items right; raises `IndexError` outside that range and `ArrayFullError`
  when full.
- `update(index, value)` and `delete(index)` raise `IndexError` for
  positions outside the array; `delete` returns the removed item.
- `find(value)` returns the index of the *last* equal item, or `None`.
- `is_full` is a property; the array supports `len()`, iteration, indexing
  and equality.

### `dsakit.stack.Stack`

A LIFO stack of at most `capacity` items (default 10), with `push`, `pop`,
`peek`, `is_empty`, `is_full` and `extend`. Pushing onto a full stack raises
`StackFullError`; popping or peeking at an empty one raises
`StackEmptyError`. Iteration runs from the top down.

```python
from dsakit.stack import Stack

s = Stack(capacity=5)
s.push(1)
s.push(2)
s.pop()      # 2
list(s)      # [1]
```

### `dsakit.queues`

All queues have `enqueue`, `dequeue`, `len()` and iterate front to back.

- `Queue` is unbounded; `dequeue` on an empty queue raises `QueueEmptyError`.
- `LinearQueue(capacity=50)` accepts at most `capacity` enqueues in its
  lifetime: slots freed by `dequeue` are not reused.
- `CircularQueue(capacity=100)` is a ring buffer whose freed slots are reused.

Both bounded queues raise `QueueFullError` when no room is left and
`QueueEmptyError` when empty.

### `dsakit.linked_list.LinkedList`

A singly linked list, optionally built from an iterable.

- `push(value)` adds at the front, `append(value)` at the back.
- `find(value)` returns the 0-based position of the first match, or `None`.
- `remove(value)` and `insert_after(key, value)` raise `ValueError` when the
  value or key is absent.
- `delete_at(index)` removes and returns the value at a 0-based index,
  raising `IndexError` when out of bounds.

## Command line

The `dsakit` command has three subcommands.

Sort integers (`-a` picks `bubble` (default), `insertion`, `selection`,
`merge` or `quick`; `-d` sorts descending):

    dsakit sort 5 1 4
    dsakit sort -a merge -d 5 1 4

Search for a value (`-m linear` (default) or `-m binary`). Without values it
searches `7 8 9 10 11`. The exit status is 1 when the value is not found:

    dsakit search 9
    dsakit search -m binary 44 22 31 44 410 498

Drive a `stack`, `queue` (a `LinearQueue`) or `circular` queue from numbers on
standard input: `1 ITEM` adds an item, `2` removes one, `3` displays the
contents, `4` exits; any other number prints `wrong choice`. `-c` sets the
capacity (defaults: stack 100, queue 50, circular 100):

    printf '1 10 1 20 3 2 4' | dsakit menu stack
    printf '1 10 1 20 2 3 4' | dsakit menu circular -c 5

The menu reads all of standard input at once; it is not an interactive
prompt, and it has no mode for linked lists or bounded arrays, which are
available only from Python.