"""Route Catalog - Ordered in-memory collection of route records.

Records keep their insertion order. Lookup and deletion by
(start, destination) act on the first match; undo removes a specific
instance through its handle.
"""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator, List, Optional, Tuple

from train_routes.routes.record import RouteHandle, RouteRecord
from train_routes.utils.logging import log


class RouteCatalog:
    """Manages the ordered sequence of route records.

    Handles:
    - Appending new records and issuing stable handles
    - First-match search and deletion by (start, destination)
    - Removal of an exact record instance by handle
    - Read-only listing in insertion order
    """

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._entries: List[Tuple[RouteHandle, RouteRecord]] = []
        self._next_handle = itertools.count(1)

    @classmethod
    def from_records(cls, records: Iterable[RouteRecord]) -> "RouteCatalog":
        """Build a catalog holding the given records in order.

        Args:
            records: Records to append.

        Returns:
            A new catalog.
        """
        catalog = cls()
        catalog.extend(records)
        return catalog

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RouteRecord]:
        return iter(self.list())

    def __contains__(self, handle: object) -> bool:
        return any(h == handle for h, _ in self._entries)

    def _append(self, record: RouteRecord) -> RouteHandle:
        handle = RouteHandle(next(self._next_handle))
        self._entries.append((handle, record))
        return handle

    def insert(
        self,
        start: str,
        destination: str,
        stoppages: int,
        duration: float,
    ) -> RouteHandle:
        """Append a new route.

        Args:
            start: Start station name.
            destination: Destination station name.
            stoppages: Number of stoppages.
            duration: Duration in hours.

        Returns:
            Handle of the stored record.

        Raises:
            ValueError: If a field is empty or negative.
        """
        record = RouteRecord(start, destination, stoppages, duration)
        handle = self._append(record)
        log(f"[RouteCatalog] Inserted route {start} -> {destination} (#{handle})", level="DEBUG")
        return handle

    def extend(self, records: Iterable[RouteRecord]) -> List[RouteHandle]:
        """Append already-built records, e.g. when loading from disk.

        Args:
            records: Records to append in order.

        Returns:
            The handles issued, in the same order.
        """
        return [self._append(record) for record in records]

    def _index_of_key(self, start: str, destination: str) -> Optional[int]:
        for i, (_, record) in enumerate(self._entries):
            if record.matches(start, destination):
                return i
        return None

    def delete(self, start: str, destination: str) -> bool:
        """Delete the first route matching start and destination.

        Args:
            start: Start station name (exact, case-sensitive).
            destination: Destination station name (exact, case-sensitive).

        Returns:
            True if deleted, False if not found.
        """
        index = self._index_of_key(start, destination)
        if index is None:
            log(f"[RouteCatalog] Route not found for deletion: {start} -> {destination}", level="DEBUG")
            return False

        del self._entries[index]
        log(f"[RouteCatalog] Deleted route {start} -> {destination}", level="DEBUG")
        return True

    def find(self, start: str, destination: str) -> Optional[RouteRecord]:
        """Get the first route matching start and destination.

        Returns:
            The record or None if not found.
        """
        index = self._index_of_key(start, destination)
        if index is None:
            return None
        return self._entries[index][1]

    def get(self, handle: RouteHandle) -> Optional[RouteRecord]:
        """Get the record stored under a handle, or None if it was removed."""
        for h, record in self._entries:
            if h == handle:
                return record
        return None

    def list(self) -> Tuple[RouteRecord, ...]:
        """Get all routes in insertion order.

        Returns:
            A tuple of records, empty when the catalog is empty.
        """
        return tuple(record for _, record in self._entries)

    def remove_by_identity(self, handle: RouteHandle) -> bool:
        """Remove the exact record instance behind a handle.

        Unlike delete(), this never falls back to key matching, so with
        duplicate keys the addressed instance is the one removed.

        Args:
            handle: Handle returned by insert() or extend().

        Returns:
            True if removed, False if the handle is no longer present.
        """
        for i, (h, record) in enumerate(self._entries):
            if h == handle:
                del self._entries[i]
                log(f"[RouteCatalog] Removed route {record.start} -> {record.destination} (#{handle})", level="DEBUG")
                return True
        return False
