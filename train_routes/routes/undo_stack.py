"""Bounded LIFO of recently inserted route handles."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from train_routes.routes.record import RouteHandle, RouteRecord
from train_routes.utils.logging import log

if TYPE_CHECKING:
    from train_routes.routes.catalog import RouteCatalog


DEFAULT_CAPACITY = 10


class UndoStack:
    """Tracks the most recent insertions so they can be reversed.

    Once full, further pushes are ignored: the insertion that triggered
    them still happened, it just cannot be undone.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Initialize the stack.

        Args:
            capacity: Maximum number of tracked insertions.

        Raises:
            ValueError: If capacity is negative.
        """
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self.capacity = int(capacity)
        self._handles: List[RouteHandle] = []

    def __len__(self) -> int:
        return len(self._handles)

    def is_empty(self) -> bool:
        return not self._handles

    def is_full(self) -> bool:
        return len(self._handles) >= self.capacity

    def push(self, handle: RouteHandle) -> bool:
        """Track a handle on top of the stack.

        Returns:
            True if tracked, False if the stack was full.
        """
        if self.is_full():
            log("[UndoStack] Stack is full, insertion cannot be undone", level="WARNING")
            return False
        self._handles.append(handle)
        return True

    def pop(self) -> Optional[RouteHandle]:
        """Remove and return the top handle, or None if empty."""
        if not self._handles:
            return None
        return self._handles.pop()

    def clear(self) -> None:
        self._handles.clear()

    def undo_last_insert(self, catalog: "RouteCatalog") -> Optional[RouteRecord]:
        """Reverse the most recent tracked insertion.

        The top handle is consumed exactly once, whether or not its
        record is still in the catalog.

        Args:
            catalog: Catalog the handles were issued by.

        Returns:
            The removed record, or None if nothing was undone.
        """
        handle = self.pop()
        if handle is None:
            log("[UndoStack] Stack is empty, nothing to undo", level="DEBUG")
            return None

        record = catalog.get(handle)
        if record is None or not catalog.remove_by_identity(handle):
            log(f"[UndoStack] Route #{handle} already removed, nothing to undo", level="WARNING")
            return None
        return record
