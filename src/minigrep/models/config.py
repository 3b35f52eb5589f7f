"""
Configuration data model for minigrep.

A SearchConfig is built once per invocation from the argument list and the
environment, and is immutable afterwards.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field


class SearchConfig(BaseModel):
    """
    Validated settings for a single search run.

    Attributes:
        query: Substring to look for in each line
        file_path: Path of the file to scan
        ignore_case: Whether matching lowercases both query and line
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, description="Substring to search for")
    file_path: str = Field(..., min_length=1, description="File to search in")
    ignore_case: bool = Field(False, description="Match without regard to case")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchConfig':
        """Create a SearchConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        mode = "case-insensitive" if self.ignore_case else "case-sensitive"
        return f"Query: '{self.query}' | File: {self.file_path} | Mode: {mode}"
