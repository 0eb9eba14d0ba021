"""Utility modules."""

from train_routes.utils.logging import log, set_level

__all__ = ["log", "set_level"]
