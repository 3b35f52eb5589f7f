"""
Data models for minigrep.
"""

from .config import SearchConfig

__all__ = ['SearchConfig']
