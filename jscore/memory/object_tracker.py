"""Registry of heap objects and the references between them."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["ObjectTracker"]


@dataclass
class _ObjectInfo:
    size: int
    references: list[int] = field(default_factory=list)


class ObjectTracker:
    """Assigns identifiers to objects and records their outgoing references."""

    def __init__(self) -> None:
        self._objects: dict[int, _ObjectInfo] = {}
        self._next_id = 1

    def track_object(self, size: int) -> int:
        """Register an object of ``size`` units and return its new identifier."""
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError("size must be an integer")
        if size < 0:
            raise ValueError("size must not be negative")
        object_id = self._next_id
        self._next_id += 1
        self._objects[object_id] = _ObjectInfo(size)
        return object_id

    def add_reference(self, object_id: int, reference_id: int) -> None:
        """Record that ``object_id`` refers to ``reference_id``.

        References from objects that are not tracked are ignored.
        """
        info = self._objects.get(object_id)
        if info is not None:
            info.references.append(reference_id)

    def get_references(self, object_id: int) -> tuple[int, ...] | None:
        """References held by ``object_id`` in insertion order, or ``None`` if untracked."""
        info = self._objects.get(object_id)
        if info is None:
            return None
        return tuple(info.references)