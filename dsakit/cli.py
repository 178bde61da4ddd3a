"""Command-line front end: sort numbers, search them, or drive a stack or queue."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from dsakit.queues import CircularQueue, LinearQueue, QueueEmptyError, QueueFullError
from dsakit.searching import binary_search, linear_search
from dsakit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from dsakit.stack import Stack, StackEmptyError, StackFullError

__all__ = ["main"]

_SORTERS: dict[str, Callable[[Iterable[int]], list[int]]] = {
    "insertion": insertion_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}

_SEARCHERS: dict[str, tuple[str, Callable[[Sequence[int], int], int | None]]] = {
    "linear": ("Linear Search", linear_search),
    "binary": ("Binary Search", binary_search),
}

_DEFAULT_SEARCH_VALUES = [7, 8, 9, 10, 11]

_DEFAULT_CAPACITY = {"stack": 100, "queue": 50, "circular": 100}

_ADD, _REMOVE, _DISPLAY, _EXIT = 1, 2, 3, 4


class _InvalidNumber(Exception):
    """Raised when a token on standard input is not an integer."""


@dataclass
class _Session:
    """One interactive data structure together with its menu messages."""

    add: Callable[[int], None]
    remove: Callable[[], Any]
    items: Callable[[], Iterable[Any]]
    full_errors: tuple[type[Exception], ...]
    empty_errors: tuple[type[Exception], ...]
    full_message: str
    empty_message: str
    display_empty_message: str
    separator: str

    def do_add(self, item: int, out: TextIO) -> None:
        try:
            self.add(item)
        except self.full_errors:
            print(self.full_message, file=out)

    def do_remove(self, out: TextIO) -> None:
        try:
            value = self.remove()
        except self.empty_errors:
            print(self.empty_message, file=out)
        else:
            print(f"the deleted element is {value}", file=out)

    def do_display(self, out: TextIO) -> None:
        items = [str(item) for item in self.items()]
        if not items:
            print(self.display_empty_message, file=out)
        else:
            print(self.separator.join(items), file=out)


def _stack_session(capacity: int) -> _Session:
    stack = Stack(capacity)
    return _Session(
        add=stack.push,
        remove=stack.pop,
        items=lambda: stack,
        full_errors=(StackFullError,),
        empty_errors=(StackEmptyError,),
        full_message="the stack is full",
        empty_message="the stack is empty",
        display_empty_message="stack is empty",
        separator="\n",
    )


def _queue_session(queue: LinearQueue | CircularQueue) -> _Session:
    return _Session(
        add=queue.enqueue,
        remove=queue.dequeue,
        items=lambda: queue,
        full_errors=(QueueFullError,),
        empty_errors=(QueueEmptyError,),
        full_message="Q is full",
        empty_message="Q is empty",
        display_empty_message="Q is empty",
        separator="\t",
    )


def _make_session(kind: str, capacity: int) -> _Session:
    if kind == "stack":
        return _stack_session(capacity)
    if kind == "queue":
        return _queue_session(LinearQueue(capacity))
    return _queue_session(CircularQueue(capacity))


def _integers(tokens: Iterable[str]) -> Iterator[int]:
    for token in tokens:
        try:
            yield int(token)
        except ValueError:
            raise _InvalidNumber(token) from None


def _run_menu(session: _Session, numbers: Iterator[int], out: TextIO) -> None:
    for choice in numbers:
        if choice == _EXIT:
            return
        if choice == _ADD:
            item = next(numbers, None)
            if item is None:
                return
            session.do_add(item, out)
        elif choice == _REMOVE:
            session.do_remove(out)
        elif choice == _DISPLAY:
            session.do_display(out)
        else:
            print("wrong choice", file=out)


def _cmd_sort(args: argparse.Namespace) -> int:
    if args.algorithm == "bubble":
        result = bubble_sort(args.values, descending=args.descending)
    else:
        result = _SORTERS[args.algorithm](args.values)
        if args.descending:
            result.reverse()
    print("Sorted array:")
    print(" ".join(str(value) for value in result))
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    values = args.values if args.values else _DEFAULT_SEARCH_VALUES
    label, search = _SEARCHERS[args.method]
    index = search(values, args.data)
    if index is None:
        print(f"Data not found using {label}.")
        return 1
    print(f"Data found at index {index} using {label}.")
    return 0


def _cmd_menu(args: argparse.Namespace) -> int:
    capacity = args.capacity
    if capacity is None:
        capacity = _DEFAULT_CAPACITY[args.structure]
    try:
        session = _make_session(args.structure, capacity)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    try:
        _run_menu(session, _integers(sys.stdin.read().split()), sys.stdout)
    except _InvalidNumber as exc:
        print(f"error: not a number: {exc}", file=sys.stderr)
        return 2
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Sort, search and play with basic data structures."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="sort integers")
    sort.add_argument("values", nargs="*", type=int)
    sort.add_argument("-d", "--descending", action="store_true")
    sort.add_argument(
        "-a",
        "--algorithm",
        choices=["bubble", *_SORTERS],
        default="bubble",
    )
    sort.set_defaults(handler=_cmd_sort)

    search = commands.add_parser("search", help="search integers for a value")
    search.add_argument("data", type=int)
    search.add_argument("values", nargs="*", type=int)
    search.add_argument("-m", "--method", choices=list(_SEARCHERS), default="linear")
    search.set_defaults(handler=_cmd_search)

    menu = commands.add_parser(
        "menu",
        help="drive a stack or queue from numeric choices on standard input "
        "(1 ITEM add, 2 remove, 3 display, 4 exit)",
    )
    menu.add_argument("structure", choices=list(_DEFAULT_CAPACITY))
    menu.add_argument("-c", "--capacity", type=int, default=None)
    menu.set_defaults(handler=_cmd_menu)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())