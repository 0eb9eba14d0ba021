"""Interactive menu over the route service.

Reads menu choices and field values, calls RouteService and prints the
outcome. All decisions are taken on the returned Outcome tags.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from train_routes.cli.access import AccessGate
from train_routes.core.service import Outcome, OperationResult, RouteService


MENU = (
    "1. Insert Route",
    "2. Delete Route",
    "3. Search Route",
    "4. Display All Routes",
    "5. Undo Last Route Addition",
    "6. Exit",
)

MUTATING_CHOICES = frozenset({"1", "2", "5"})


class RouteShell:
    """Menu loop for one user session.

    Args:
        service: The route service to drive.
        gate: Administrator gate (default: disabled, everyone is admin).
        input_fn: Line reader, raises EOFError at end of input.
        output: Line writer.
    """

    def __init__(
        self,
        service: RouteService,
        gate: Optional[AccessGate] = None,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.service = service
        self.gate = gate or AccessGate(None)
        self.input = input_fn
        self.output = output
        self.is_admin = not self.gate.enabled

    # ---------- prompts ---------- #
    def _prompt_station(self, label: str) -> str:
        while True:
            value = self.input(label).strip()
            if not value:
                self.output("Station name must not be empty.")
            elif len(value.split()) > 1:
                self.output("Station names cannot contain spaces.")
            else:
                return value

    def _prompt_number(self, label: str, cast: Callable[[str], float]):
        while True:
            raw = self.input(label).strip()
            try:
                value = cast(raw)
            except ValueError:
                self.output("Please enter a valid number.")
                continue
            if not math.isfinite(value):
                self.output("Please enter a finite number.")
                continue
            if value < 0:
                self.output("Value must not be negative.")
                continue
            return value

    def _prompt_key(self, verb: str) -> tuple[str, str]:
        start = self._prompt_station(f"Enter start station{verb}: ")
        destination = self._prompt_station(f"Enter destination{verb}: ")
        return start, destination

    # ---------- session ---------- #
    def login(self) -> bool:
        """Ask who is using the shell and set is_admin accordingly."""
        if not self.gate.enabled:
            self.is_admin = True
            return True

        self.output("Who are you?\n1. Normal user\n2. Administrator")
        choice = self.input("Enter your choice: ").strip()
        if choice == "2":
            pin = self.input("Enter password: ")
            if self.gate.check(pin):
                self.output("Access granted.")
                self.is_admin = True
                return True
            self.output("Wrong password, continuing as normal user.")
        self.is_admin = False
        return False

    def run(self) -> int:
        """Run the menu loop until Exit or end of input.

        Returns:
            Exit code (always 0).
        """
        try:
            self.login()
            while self.handle(self._read_choice()):
                pass
        except EOFError:
            self.output("")
        return 0

    def _read_choice(self) -> str:
        self.output("")
        self.output("\n".join(MENU))
        return self.input("Enter your choice: ").strip()

    def handle(self, choice: str) -> bool:
        """Execute one menu choice.

        Returns:
            False when the session should end.
        """
        if choice == "6":
            self.output("Exiting...")
            return False
        if choice in MUTATING_CHOICES and not self.is_admin:
            self.output("Administrator access required.")
            return True

        if choice == "1":
            start, destination = self._prompt_key("")
            stoppages = self._prompt_number("Enter number of stoppages: ", int)
            duration = self._prompt_number("Enter duration (hours): ", float)
            self.report(self.service.insert(start, destination, stoppages, duration))
        elif choice == "2":
            self.report(self.service.delete(*self._prompt_key(" to delete")))
        elif choice == "3":
            self.report(self.service.search(*self._prompt_key(" to search")))
        elif choice == "4":
            self.report(self.service.list_routes())
        elif choice == "5":
            self.report(self.service.undo_last_insert())
        else:
            self.output("Invalid choice. Please try again.")
        return True

    # ---------- rendering ---------- #
    def report(self, result: OperationResult) -> None:
        """Print a human readable line for a service result."""
        record = result.record
        outcome = result.outcome

        if outcome is Outcome.INSERTED:
            self.output(f"Route from {record.start} to {record.destination} added.")
            if not result.undoable:
                self.output("Undo history is full, this insertion cannot be undone.")
        elif outcome is Outcome.DELETED:
            self.output(f"Route from {record.start} to {record.destination} deleted.")
        elif outcome is Outcome.FOUND:
            self.output(f"Route Found: {record.describe()}")
        elif outcome is Outcome.NOT_FOUND:
            self.output("No matching route found.")
        elif outcome is Outcome.LISTED:
            for route in result.records:
                self.output(route.describe())
        elif outcome is Outcome.EMPTY:
            self.output("No routes available.")
        elif outcome is Outcome.UNDONE:
            self.output("Last route addition undone.")
        elif outcome is Outcome.NOTHING_TO_UNDO:
            self.output("Nothing to undo.")

        if not result.persisted:
            self.output(f"Warning: changes could not be saved ({result.error}).")
