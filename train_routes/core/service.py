"""Route service - the operation set the shell calls into.

Wires the catalog, the undo stack and the store together. Every
mutating operation resyncs the data file before returning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple

from train_routes.routes.catalog import RouteCatalog
from train_routes.routes.record import RouteRecord
from train_routes.routes.route_store import RouteStore, RouteStoreError
from train_routes.routes.undo_stack import DEFAULT_CAPACITY, UndoStack
from train_routes.utils.logging import log

if TYPE_CHECKING:
    from train_routes.config.settings import SettingsManager


class Outcome(Enum):
    """Result tag of a service operation."""

    INSERTED = "inserted"
    DELETED = "deleted"
    FOUND = "found"
    NOT_FOUND = "not_found"
    LISTED = "listed"
    EMPTY = "empty"
    UNDONE = "undone"
    NOTHING_TO_UNDO = "nothing_to_undo"


@dataclass(frozen=True)
class OperationResult:
    """What an operation did.

    Attributes:
        outcome: Result tag.
        record: Record inserted, deleted, found or undone, if any.
        records: Listing for LISTED, empty otherwise.
        persisted: False when the follow-up save failed.
        undoable: For INSERTED, whether the undo stack tracked it.
        error: Save failure message, if any.
    """

    outcome: Outcome
    record: Optional[RouteRecord] = None
    records: Tuple[RouteRecord, ...] = ()
    persisted: bool = True
    undoable: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.INSERTED, Outcome.DELETED, Outcome.FOUND,
                                Outcome.LISTED, Outcome.UNDONE)


class RouteService:
    """Catalog operations with undo tracking and save-after-mutation."""

    def __init__(
        self,
        store: RouteStore,
        catalog: Optional[RouteCatalog] = None,
        undo_stack: Optional[UndoStack] = None,
    ) -> None:
        """Initialize the service.

        Args:
            store: Persistence adapter.
            catalog: Initial catalog. If None, it is loaded from the store.
            undo_stack: Undo stack (default: empty, capacity 10).
        """
        self.store = store
        self.catalog = catalog if catalog is not None else store.load()
        self.undo_stack = undo_stack if undo_stack is not None else UndoStack()

    @classmethod
    def from_settings(
        cls,
        settings: "SettingsManager",
        routes_file: Optional[Path] = None,
        undo_capacity: Optional[int] = None,
    ) -> "RouteService":
        """Build a service from configuration.

        Args:
            settings: Loaded settings.
            routes_file: Overrides the routesFile setting.
            undo_capacity: Overrides the undoCapacity setting.
        """
        path = Path(routes_file) if routes_file else settings.routes_path()
        if undo_capacity is None:
            undo_capacity = int(settings.get("undoCapacity", DEFAULT_CAPACITY))
        return cls(RouteStore(path), undo_stack=UndoStack(undo_capacity))

    def _sync(self) -> Optional[str]:
        try:
            self.store.save(self.catalog)
        except RouteStoreError as e:
            log(f"[RouteService] Changes kept in memory only: {e}", level="ERROR")
            return str(e)
        return None

    def insert(
        self,
        start: str,
        destination: str,
        stoppages: int,
        duration: float,
    ) -> OperationResult:
        """Insert a route, track it for undo and save.

        Raises:
            ValueError: If a field is empty or negative.
        """
        handle = self.catalog.insert(start, destination, stoppages, duration)
        undoable = self.undo_stack.push(handle)
        error = self._sync()
        return OperationResult(
            Outcome.INSERTED,
            record=self.catalog.get(handle),
            persisted=error is None,
            undoable=undoable,
            error=error,
        )

    def delete(self, start: str, destination: str) -> OperationResult:
        """Delete the first matching route and save."""
        record = self.catalog.find(start, destination)
        if record is None or not self.catalog.delete(start, destination):
            return OperationResult(Outcome.NOT_FOUND)
        error = self._sync()
        return OperationResult(Outcome.DELETED, record=record, persisted=error is None, error=error)

    def search(self, start: str, destination: str) -> OperationResult:
        record = self.catalog.find(start, destination)
        if record is None:
            return OperationResult(Outcome.NOT_FOUND)
        return OperationResult(Outcome.FOUND, record=record)

    def list_routes(self) -> OperationResult:
        records = self.catalog.list()
        if not records:
            return OperationResult(Outcome.EMPTY)
        return OperationResult(Outcome.LISTED, records=records)

    def undo_last_insert(self) -> OperationResult:
        """Reverse the most recent tracked insertion and save."""
        record = self.undo_stack.undo_last_insert(self.catalog)
        if record is None:
            return OperationResult(Outcome.NOTHING_TO_UNDO)
        error = self._sync()
        return OperationResult(Outcome.UNDONE, record=record, persisted=error is None, error=error)
