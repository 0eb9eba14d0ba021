"""Route Store - Flat-file persistence for the route catalog.

One record per line: ``<start> <destination> <stoppages> <duration>``.
Every save rewrites the whole file.
"""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from train_routes.config.defaults import SEED_ROUTES
from train_routes.routes.catalog import RouteCatalog
from train_routes.routes.record import RouteRecord
from train_routes.utils.logging import log


DEFAULT_ROUTES_FILE = "train_routes.txt"


class RouteStoreError(OSError):
    """Raised when the routes file cannot be written."""


def format_line(record: RouteRecord) -> str:
    """Serialize one record to its file representation (no newline)."""
    return f"{record.start} {record.destination} {record.stoppages} {record.duration:.2f}"


def parse_line(line: str) -> RouteRecord:
    """Parse one file line into a record.

    Station names cannot contain whitespace; such lines do not have
    exactly four fields and are rejected.

    Raises:
        ValueError: If the line is malformed.
    """
    fields = line.split()
    if len(fields) != 4:
        raise ValueError(f"expected 4 fields, got {len(fields)}")
    start, destination, stoppages, duration = fields
    return RouteRecord(start, destination, int(stoppages), float(duration))


class RouteStore:
    """Loads and saves the full catalog to a text file.

    Handles:
    - Loading records until the first malformed line
    - Seeding the default dataset when no file exists
    - Full-file overwrite on every save
    """

    def __init__(
        self,
        routes_file: Optional[Path] = None,
        seed: Optional[Iterable[Tuple[str, str, int, float]]] = None,
    ) -> None:
        """Initialize the store.

        Args:
            routes_file: Path to the data file. If None, uses
                train_routes.txt in the working directory.
            seed: Records used when the file is absent (default: SEED_ROUTES).
        """
        self.path = Path(routes_file) if routes_file else Path(DEFAULT_ROUTES_FILE)
        self.seed = list(SEED_ROUTES if seed is None else seed)
        self.read_only = False

    def exists(self) -> bool:
        return self.path.exists()

    def _seed_catalog(self) -> RouteCatalog:
        return RouteCatalog.from_records(RouteRecord(*row) for row in self.seed)

    def _read_records(self) -> List[RouteRecord]:
        records: List[RouteRecord] = []
        with open(self.path, 'rb') as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    # a decode error counts as a malformed line
                    line = raw.decode('utf-8')
                    if not line.strip():
                        continue
                    records.append(parse_line(line))
                except ValueError as e:
                    log(
                        f"[RouteStore] Stopped reading {self.path} at line {lineno}: {e}",
                        level="WARNING",
                    )
                    break
        return records

    def load(self) -> RouteCatalog:
        """Load the catalog from disk.

        If the file is absent, the default dataset is seeded and saved
        immediately. If it exists but cannot be read, the seed is used in
        memory and saves are refused until a later load succeeds, so the
        unreadable file is never overwritten.

        Returns:
            The loaded catalog.
        """
        self.read_only = False
        if not self.path.exists():
            log(f"[RouteStore] No routes file found at {self.path}, creating initial database")
            catalog = self._seed_catalog()
            try:
                self.save(catalog)
            except RouteStoreError as e:
                log(f"[RouteStore] Could not write initial database: {e}", level="ERROR")
            return catalog

        try:
            records = self._read_records()
        except OSError as e:
            log(f"[RouteStore] Error loading routes: {e}, using default dataset", level="ERROR")
            self.read_only = True
            return self._seed_catalog()

        log(f"[RouteStore] Loaded {len(records)} routes from {self.path}")
        return RouteCatalog.from_records(records)

    def save(self, catalog: Iterable[RouteRecord]) -> None:
        """Overwrite the file with the full catalog.

        The content goes to a sibling temp file first and replaces the
        target in one step.

        Args:
            catalog: Records to write, in order.

        Raises:
            RouteStoreError: If the file cannot be written, or the last
                load could not read it.
        """
        if self.read_only:
            log(f"[RouteStore] Not overwriting unreadable file {self.path}", level="ERROR")
            raise RouteStoreError(f"{self.path} could not be read, refusing to overwrite it")

        records = list(catalog)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                for record in records:
                    f.write(format_line(record) + "\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            log(f"[RouteStore] Error saving routes: {e}", level="ERROR")
            raise RouteStoreError(f"cannot write {self.path}: {e}") from e

        log(f"[RouteStore] Saved {len(records)} routes to {self.path}", level="DEBUG")
