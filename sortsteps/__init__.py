"""Sorting algorithms on lists, linked lists and card decks that print their steps."""

__version__ = "0.1.0"