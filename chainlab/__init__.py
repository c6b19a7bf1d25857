"""Linked-list data structures and small command-line programs built on them."""

__version__ = "0.1.0"