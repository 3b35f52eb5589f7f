"""
Run orchestration for minigrep.

Loads the target file, filters its lines and writes the matches to an
output stream.
"""

import sys
import logging
from typing import List, Optional, TextIO

from .exceptions import FileReadError
from .models.config import SearchConfig
from .tools.line_search import search_config


logger = logging.getLogger(__name__)


def read_contents(file_path: str) -> str:
    """
    Read a whole file as UTF-8 text.

    Newline translation is disabled so line splitting sees the original
    terminators.

    Raises:
        FileReadError: If the file is missing, unreadable or not valid UTF-8
    """
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(file_path, f"invalid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e


def run(config: SearchConfig, out: Optional[TextIO] = None) -> List[str]:
    """
    Execute a search and print each matching line.

    Args:
        config: Validated search configuration
        out: Stream to write matches to (defaults to sys.stdout)

    Returns:
        The matching lines, in file order

    Raises:
        FileReadError: If the target file cannot be loaded
    """
    if out is None:
        out = sys.stdout

    contents = read_contents(config.file_path)
    results = search_config(config, contents)
    logger.info(f"{len(results)} matching line(s) in {config.file_path}")

    for line in results:
        out.write(line + '\n')
    out.flush()

    return results
