"""Classic algorithm exercises: sorting, arrays, strings, hashing, linked lists, stacks, graphs and binary trees."""

__version__ = "0.1.0"