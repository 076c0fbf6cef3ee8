"""A bump-allocated heap with a fixed capacity."""

from __future__ import annotations

__all__ = ["Heap"]


class Heap:
    """Hands out consecutive addresses until its capacity is used up."""

    def __init__(self, max_size: int) -> None:
        if not isinstance(max_size, int) or isinstance(max_size, bool):
            raise TypeError("max_size must be an integer")
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._size = 0
        self._max_size = max_size

    def allocate(self, size: int) -> int:
        """Reserve ``size`` units and return the address of the block.

        Raises :class:`MemoryError` when the block does not fit; the heap is
        left unchanged in that case.
        """
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError("size must be an integer")
        if size < 0:
            raise ValueError("size must not be negative")
        if self._size + size > self._max_size:
            raise MemoryError(
                f"cannot allocate {size} units: {self._max_size - self._size} left"
            )
        address = self._size
        self._size += size
        return address

    def size(self) -> int:
        """Number of units allocated so far."""
        return self._size

    def max_size(self) -> int:
        """Total capacity of the heap."""
        return self._max_size