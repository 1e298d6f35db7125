"""Tavern characters, a tavern roster, a fixed-capacity bag and a doubly linked list."""

__version__ = "0.1.0"