"""
Logging configuration for xorheat.

Only the ``xorheat.*`` loggers follow the verbosity setting. The root logger
stays at WARNING so ``-v`` shows the geometry and state debug trail (distance
fallbacks, cleared selections, transitions) without numpy, starlette or
httpx chatter. Records render through rich on stderr, keeping ``--json`` and
``--svg`` output on stdout clean.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "xorheat"

# Verbosity names match VizConfig.verbosity
LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

# uvicorn has no debug trail worth showing; verbose gets its access log
UVICORN_LEVELS = {
    "quiet": "error",
    "normal": "warning",
    "verbose": "info",
}


def verbosity_from_flags(verbose: bool = False, quiet: bool = False) -> str:
    """Map the ``-v`` / ``-q`` flags onto a verbosity name; quiet wins."""
    if quiet:
        return "quiet"
    return "verbose" if verbose else "normal"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route xorheat records through rich at the level ``verbosity`` names.

    Args:
        verbosity: One of ``quiet``, ``normal``, ``verbose``
        log_file: Optional file that also receives every xorheat record

    Returns:
        The ``xorheat`` logger
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.WARNING, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``xorheat`` namespace (``"geometry"`` -> ``xorheat.geometry``)."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
