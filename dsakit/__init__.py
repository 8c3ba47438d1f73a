"""Classic data structures and algorithms: arrays, linked lists, stacks, queues, sorting, expressions and brace matching."""

__version__ = "0.1.0"