"""Default configuration values and the factory seed dataset."""

from typing import Any, Dict, List, Tuple

DEFAULT_CONFIG: Dict[str, Any] = {
    # Storage
    "routesFile": "train_routes.txt",
    # Undo
    "undoCapacity": 10,
    # Access
    "adminPin": "123",
    # Logging
    "logLevel": "WARNING",
}

# Keys whose INI values are kept verbatim instead of being type-coerced.
STRING_KEYS = frozenset({"adminPin", "routesFile", "logLevel"})

DEFAULT_INI_TEMPLATE = """\
; Train routes factory configuration.
; Values in user-settings.json override the ones below.

[Storage]
routesFile = train_routes.txt

[Undo]
undoCapacity = 10

[Access]
; Leave empty to disable the administrator gate.
adminPin = 123

[Logging]
logLevel = WARNING
"""

# (start, destination, stoppages, duration in hours)
SEED_ROUTES: List[Tuple[str, str, int, float]] = [
    ("Sealdah", "Bongaon", 13, 1.75),
    ("Sealdah", "Kolkata", 5, 0.45),
    ("Sealdah", "Howrah", 8, 0.65),
    ("Sealdah", "Naihati", 10, 1.10),
    ("Sealdah", "Baranagar", 6, 0.50),
    ("Sealdah", "Dum Dum", 4, 0.30),
    ("Sealdah", "Bidhan Sarani", 3, 0.20),
    ("Sealdah", "North Dumdum", 7, 0.55),
    ("Sealdah", "Chandannagar", 15, 2.00),
    ("Sealdah", "Kamarhati", 9, 0.75),
    ("Sealdah", "Garia", 14, 1.85),
    ("Sealdah", "Sodepur", 12, 1.65),
]
