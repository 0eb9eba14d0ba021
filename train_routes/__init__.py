"""Train Routes Catalog Package.

This package provides an ordered route catalog with undo of the last
insertions, flat-file persistence and an interactive shell.
"""

from train_routes.config.settings import SettingsManager
from train_routes.core.service import Outcome, OperationResult, RouteService
from train_routes.routes.catalog import RouteCatalog
from train_routes.routes.record import RouteHandle, RouteRecord
from train_routes.routes.route_store import RouteStore, RouteStoreError
from train_routes.routes.undo_stack import UndoStack

__all__ = [
    "SettingsManager",
    "Outcome",
    "OperationResult",
    "RouteService",
    "RouteCatalog",
    "RouteHandle",
    "RouteRecord",
    "RouteStore",
    "RouteStoreError",
    "UndoStack",
]

__version__ = "1.0.0"
