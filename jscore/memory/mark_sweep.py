"""Mark-and-sweep bookkeeping of reachable object identifiers."""

from __future__ import annotations

__all__ = ["MarkSweepCollector"]


class MarkSweepCollector:
    """Records which objects were marked reachable during a collection."""

    def __init__(self) -> None:
        self._marked: set[int] = set()

    def mark(self, object_id: int) -> None:
        """Mark ``object_id`` as reachable."""
        self._marked.add(object_id)

    def is_marked(self, object_id: int) -> bool:
        """Whether ``object_id`` has been marked since the last collection."""
        return object_id in self._marked

    def sweep(self) -> list[int]:
        """Return the identifiers reclaimed by the sweep phase.

        This collector knows only the objects that were marked, all of which
        survive, so the sweep reclaims nothing on its own.
        """
        return []

    def collect(self) -> None:
        """Finish a collection cycle, forgetting every mark."""
        self._marked.clear()