"""Administrator capability check for the interactive shell.

The catalog itself has no notion of users; the shell asks the gate
before offering mutating commands.
"""

from typing import Optional


class AccessGate:
    """Compares an entered PIN against the configured administrator PIN."""

    def __init__(self, admin_pin: Optional[str]) -> None:
        """Initialize the gate.

        Args:
            admin_pin: Required PIN. Empty or None disables the gate.
        """
        self.admin_pin = "" if admin_pin is None else str(admin_pin).strip()

    @property
    def enabled(self) -> bool:
        return bool(self.admin_pin)

    def check(self, pin: str) -> bool:
        """Return True if pin grants administrator access."""
        if not self.enabled:
            return True
        return pin.strip() == self.admin_pin
