"""Core service modules."""

from train_routes.core.service import Outcome, OperationResult, RouteService

__all__ = ["Outcome", "OperationResult", "RouteService"]
