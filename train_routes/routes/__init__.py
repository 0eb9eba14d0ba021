"""Routes management module.

Provides the route record type, the catalog, the undo stack and
flat-file persistence.
"""

from train_routes.routes.record import RouteHandle, RouteRecord
from train_routes.routes.catalog import RouteCatalog
from train_routes.routes.undo_stack import UndoStack
from train_routes.routes.route_store import RouteStore, RouteStoreError

__all__ = [
    "RouteHandle",
    "RouteRecord",
    "RouteCatalog",
    "UndoStack",
    "RouteStore",
    "RouteStoreError",
]
