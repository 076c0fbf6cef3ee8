"""JavaScript syntax trees, JSON encoding, traversal, bytecode generation and memory bookkeeping."""

__version__ = "0.1.0"