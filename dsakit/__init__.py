"""Classic data structures and algorithms: sorts, searches, a bounded array,
a stack, queues, a linked list and a small command-line tool."""

__version__ = "0.1.0"
__all__ = ["arrays", "cli", "linked_list", "queues", "searching", "sorting", "stack"]