"""
minigrep - Core Package

A small line-oriented text search utility: prints every line of a file
that contains a query string, optionally ignoring case.
"""

__version__ = "0.1.0"
__author__ = "minigrep Team"
