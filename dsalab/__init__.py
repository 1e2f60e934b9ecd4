"""Classic data structures and algorithms: trees, lists, heaps, hash tables, graphs and sorts."""

__version__ = "0.1.0"