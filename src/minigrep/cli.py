"""
Command-line entry point for minigrep.

Usage: minigrep [-i] <query> <file_path>
"""

import os
import sys
import logging
from typing import Mapping, Optional, Sequence

from .config.parser import load_config
from .exceptions import ConfigError, MinigrepError
from .runner import run


logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = 'MINIGREP_LOG_LEVEL'
LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"

_logging_initialized = False


def setup_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Send log records to stderr, once per process.

    The level comes from MINIGREP_LOG_LEVEL; unknown names fall back to
    WARNING.
    """
    global _logging_initialized

    if _logging_initialized:
        return

    if environ is None:
        environ = os.environ

    level_name = environ.get(LOG_LEVEL_ENV, 'WARNING').upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    _logging_initialized = True


def main(argv: Optional[Sequence[str]] = None,
         environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run minigrep and return the process exit status.

    Args:
        argv: Full argument list including the program name (defaults to sys.argv)
        environ: Environment mapping (defaults to os.environ)
    """
    setup_logging(environ)

    try:
        config = load_config(argv, environ)
    except ConfigError as e:
        print(f"Problem parsing arguments: {e.message}", file=sys.stderr)
        return 1

    logger.debug(f"Searching with {config}")

    try:
        run(config)
    except MinigrepError as e:
        print(f"Application error: {e.message}", file=sys.stderr)
        return 1

    return 0
