"""Configuration management modules."""

from train_routes.config.settings import SettingsManager
from train_routes.config.defaults import DEFAULT_CONFIG, DEFAULT_INI_TEMPLATE, SEED_ROUTES

__all__ = ["SettingsManager", "DEFAULT_CONFIG", "DEFAULT_INI_TEMPLATE", "SEED_ROUTES"]
