"""tuido command-line entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings
from .logging_setup import setup_logging
from .storage import StoreError, TaskStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser (no options beyond --help)."""
    return argparse.ArgumentParser(
        prog="tuido",
        description="Keyboard-driven terminal task list.",
        epilog="Environment: TUIDO_FILE, TUIDO_LOG_FILE, TUIDO_LOG_LEVEL.",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point. Loads the task file, then runs the TUI."""
    build_parser().parse_args(argv)
    settings = Settings.from_env()

    try:
        setup_logging(settings.log_path, settings.log_level)
    except OSError as err:
        print(f"Warning: logging disabled: {err}", file=sys.stderr)

    store = TaskStore(settings.tasks_path)
    try:
        tasks = store.load()
    except StoreError as err:
        logger.error("Error loading tasks: %s", err)
        sys.exit(f"Error loading tasks: {err}")

    from .tui import main as tui_main

    tui_main(store, tasks)


if __name__ == "__main__":
    main()
