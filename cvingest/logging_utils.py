"""
Logging helpers for cvingest.

Defines the package logger and simple utilities for configuring
console and optional file logging.
"""

from __future__ import annotations

import logging
from typing import List, Optional

LOG = logging.getLogger("cvingest")

# Verbosity levels
VERBOSITY_QUIET = 0    # Minimal output (default)
VERBOSITY_NORMAL = 1   # Standard output with status icons
VERBOSITY_VERBOSE = 2  # Detailed debug output

# pdfminer reports every recoverable glyph/CropBox issue at WARNING
NOISY_LOGGERS = ("pdfminer", "pdfplumber")


def quiet_third_party_loggers() -> None:
    """Raise noisy PDF backend loggers to ERROR."""
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)


def setup_logging(debug: bool, log_file: Optional[str] = None, verbosity: int = VERBOSITY_QUIET) -> None:
    """
    Setup logging with verbosity control.

    Args:
        debug: Debug flag (overrides verbosity to VERBOSITY_VERBOSE)
        log_file: Optional log file path
        verbosity: Verbosity level (0=quiet, 1=normal, 2=verbose)
    """
    if debug:
        verbosity = VERBOSITY_VERBOSE

    if verbosity >= VERBOSITY_VERBOSE:
        level = logging.DEBUG
    elif verbosity >= VERBOSITY_NORMAL:
        level = logging.INFO
    else:
        level = logging.WARNING

    fmt = "%(levelname)s: %(message)s" if verbosity >= VERBOSITY_NORMAL else "%(message)s"

    # Handlers may already be configured (e.g. by pytest); only adjust them then
    if logging.root.handlers:
        for handler in logging.root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
                handler.setFormatter(logging.Formatter(fmt))
        logging.root.setLevel(level)
    else:
        handlers: List[logging.Handler] = []

        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(fmt))
        handlers.append(console)

        logging.basicConfig(level=level, handlers=handlers, force=True)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # always full detail in file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logging.root.addHandler(file_handler)

    quiet_third_party_loggers()


def fmt_sections(sections) -> str:
    """
    Compact section list for the one-line-per-file log.
    """
    if not sections:
        return "no sections"
    return "sections: " + ", ".join(getattr(kind, "value", kind) for kind in sections)
