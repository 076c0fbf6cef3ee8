"""A simple garbage collector that accounts for allocated heap space."""

from __future__ import annotations

__all__ = ["Collector"]


class Collector:
    """Tracks total heap usage and a mark flag per managed object."""

    def __init__(self) -> None:
        self._heap_size = 0
        self._objects: dict[int, bool] = {}

    def allocate(self, size: int) -> int:
        """Add ``size`` units to the heap and return the new heap size."""
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError("size must be an integer")
        if size < 0:
            raise ValueError("size must not be negative")
        self._heap_size += size
        return self._heap_size

    def collect(self) -> None:
        """Drop every unmarked object and clear the marks of the survivors."""
        self._objects = {object_id: False for object_id, marked in self._objects.items() if marked}

    def heap_size(self) -> int:
        """Total number of units allocated so far."""
        return self._heap_size