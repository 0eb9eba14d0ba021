"""Logging utilities for the train_routes package.

Provides a centralized logging function with timestamp prefix and a
process-wide level threshold.
"""

import sys
from datetime import datetime

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

_threshold = LEVELS["INFO"]


def set_level(level: str) -> None:
    """Set the minimum level that gets printed.
    
    Args:
        level: One of DEBUG, INFO, WARNING, ERROR (case-insensitive).
        
    Raises:
        ValueError: If the level name is unknown.
    """
    global _threshold
    name = str(level).upper()
    if name not in LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    _threshold = LEVELS[name]


def log(message: str, level: str = "INFO") -> None:
    """Print message with timestamp prefix.
    
    Args:
        message: The message to log.
        level: Severity of the message (default: INFO).
    """
    name = level.upper()
    if LEVELS.get(name, LEVELS["INFO"]) < _threshold:
        return
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    prefix = "" if name == "INFO" else f"{name}: "
    print(f"[{timestamp}] {prefix}{message}", file=sys.stdout, flush=True)
