"""Classic data structures and algorithms: trees, hash tables, graphs and record files."""

__version__ = "0.1.0"