"""
Line filtering for minigrep.

Both search functions take the whole file contents as one string and return
the matching lines in file order, with terminators stripped. Neither can
fail; an empty query matches every line.
"""

from typing import List

from ..models.config import SearchConfig


def split_lines(contents: str) -> List[str]:
    """
    Split text into lines on '\\n' boundaries.

    A '\\r' directly before the '\\n' is removed with it. A trailing
    terminator does not produce an extra empty line, and empty text has
    no lines.
    """
    if not contents:
        return []

    lines = contents.split('\n')
    last = lines.pop()

    # CRLF; only lines ended by '\n' lose a trailing '\r'
    lines = [line[:-1] if line.endswith('\r') else line for line in lines]
    if last:
        lines.append(last)
    return lines


def search(query: str, contents: str) -> List[str]:
    """Return every line that contains query exactly."""
    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Return every line that contains query, ignoring case.

    The query is lowercased once and compared against a lowercased copy of
    each line; results keep their original casing.
    """
    query = query.lower()
    return [line for line in split_lines(contents) if query in line.lower()]


def search_config(config: SearchConfig, contents: str) -> List[str]:
    """Dispatch to the search matching the configuration's case mode."""
    if config.ignore_case:
        return search_case_insensitive(config.query, contents)
    return search(config.query, contents)
