"""
Search tools for minigrep.
"""

from .line_search import search, search_case_insensitive, search_config, split_lines

__all__ = ['search', 'search_case_insensitive', 'search_config', 'split_lines']
