"""Main entry point for the train routes catalog.

This module provides the command-line interface for starting the
interactive shell.

Usage:
    python -m train_routes [--data-file PATH] [--config-dir DIR]

Example:
    python -m train_routes --data-file ./train_routes.txt --undo-capacity 5
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from train_routes.cli.access import AccessGate
from train_routes.cli.shell import RouteShell
from train_routes.config.settings import SettingsManager
from train_routes.core.service import RouteService
from train_routes.utils.logging import LEVELS, set_level


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments (default: sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="train-routes",
        description="Train route catalog with undo and flat-file storage"
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Routes file (default: routesFile setting)"
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory for configuration files (default: current directory)"
    )
    parser.add_argument(
        "--undo-capacity",
        type=int,
        default=None,
        help="Number of insertions that can be undone (default: undoCapacity setting)"
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(LEVELS, key=LEVELS.get),
        type=str.upper,
        default=None,
        help="Log threshold (default: logLevel setting)"
    )

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 for success).
    """
    parsed = parse_args(args)

    try:
        settings = SettingsManager(parsed.config_dir)
        set_level(parsed.log_level or settings.get("logLevel", "WARNING"))

        service = RouteService.from_settings(
            settings,
            routes_file=parsed.data_file,
            undo_capacity=parsed.undo_capacity,
        )
        shell = RouteShell(service, AccessGate(settings.get("adminPin")))
        return shell.run()
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
