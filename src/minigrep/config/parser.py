"""
Command-line configuration builder for minigrep.

This module extracts the case-insensitivity flag from the argument list,
assigns the remaining positional arguments to the query and file path, and
combines the flag with the IGNORE_CASE environment override.
"""

import os
import sys
import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from ..exceptions import MissingFilePathError, MissingQueryError
from ..models.config import SearchConfig


logger = logging.getLogger(__name__)


class ConfigBuilder:
    """
    Builds a SearchConfig from an argument sequence.

    The first argument is the program name and is always skipped. Every
    occurrence of the ignore-case flag after it is removed wherever it
    appears; the first two remaining arguments are the query and the
    file path, and anything after them is ignored.
    """

    IGNORE_CASE_FLAG = '-i'
    IGNORE_CASE_ENV = 'IGNORE_CASE'

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def build(self, args: Sequence[str], env_ignore_case: bool) -> SearchConfig:
        """
        Build a configuration from raw arguments.

        Args:
            args: Process arguments, program name at position 0
            env_ignore_case: Whether the IGNORE_CASE override is present

        Returns:
            Immutable SearchConfig

        Raises:
            MissingQueryError: If no query argument remains after flag extraction
            MissingFilePathError: If no file path argument remains
        """
        flag_present, positionals = self._split_arguments(args)

        if not positionals or not positionals[0]:
            raise MissingQueryError({'argc': len(args)})
        if len(positionals) < 2 or not positionals[1]:
            raise MissingFilePathError({'argc': len(args), 'query': positionals[0]})

        if len(positionals) > 2:
            self.logger.info(f"Ignoring {len(positionals) - 2} extra argument(s): {positionals[2:]}")

        config = SearchConfig(
            query=positionals[0],
            file_path=positionals[1],
            ignore_case=flag_present or env_ignore_case
        )
        self.logger.debug(f"Built configuration: {config}")
        return config

    def _split_arguments(self, args: Sequence[str]) -> Tuple[bool, List[str]]:
        """
        Separate the ignore-case flag from positional arguments.

        Returns:
            Tuple of (flag_present, positional arguments in order)
        """
        flag_present = False
        positionals = []

        for arg in list(args)[1:]:
            if arg == self.IGNORE_CASE_FLAG:
                flag_present = True
            else:
                positionals.append(arg)

        return flag_present, positionals


def ignore_case_from_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Check whether the IGNORE_CASE override is set.

    Only presence matters; an empty value still enables case-insensitive
    matching.
    """
    if environ is None:
        environ = os.environ
    return ConfigBuilder.IGNORE_CASE_ENV in environ


def build_config(args: Sequence[str], env_ignore_case: bool = False) -> SearchConfig:
    """
    Convenience function to build a configuration.

    Args:
        args: Process arguments, program name at position 0
        env_ignore_case: Whether the IGNORE_CASE override is present

    Returns:
        Immutable SearchConfig

    Raises:
        ConfigError: If the query or file path is missing
    """
    return ConfigBuilder().build(args, env_ignore_case)


def load_config(args: Optional[Sequence[str]] = None,
                environ: Optional[Mapping[str, str]] = None) -> SearchConfig:
    """
    Build a configuration from the running process.

    Args:
        args: Argument list (defaults to sys.argv)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Immutable SearchConfig

    Raises:
        ConfigError: If the query or file path is missing
    """
    if args is None:
        args = sys.argv
    return build_config(args, ignore_case_from_env(environ))
