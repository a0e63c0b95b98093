"""Classic algorithm and data-structure routines: number theory, sorting, array
problems, binary search and a singly linked list."""

__version__ = "0.1.0"