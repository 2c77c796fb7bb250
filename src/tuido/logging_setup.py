"""Logging configuration.

curses owns the terminal while the session runs, so logs only go to a file.
"""

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_file: Union[str, Path],
    level: int = logging.INFO,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Configure the root logger (or the given one) with a single file handler.

    Call this once, before the first log record.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logger if logger is not None else logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
