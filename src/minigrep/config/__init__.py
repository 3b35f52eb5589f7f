"""
Configuration package for minigrep.

This package turns the process argument list and environment into a
validated SearchConfig.
"""

from .parser import (
    ConfigBuilder,
    build_config,
    load_config,
    ignore_case_from_env
)

__all__ = [
    'ConfigBuilder',
    'build_config',
    'load_config',
    'ignore_case_from_env'
]
