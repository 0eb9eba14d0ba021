"""Interactive command-line shell."""

from train_routes.cli.access import AccessGate
from train_routes.cli.shell import RouteShell

__all__ = ["AccessGate", "RouteShell"]
