"""
Data model shared by the archive readers, the aggregator and the writers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Entry:
    """One item listed inside an archive.

    Attributes:
        name: Path inside the archive, always separated by forward slashes
            and already decoded to text
        is_directory: True for directory markers, which are never counted
    """

    name: str
    is_directory: bool = False


@dataclass(frozen=True)
class FolderCount:
    """Number of files found directly inside one folder."""

    path: str
    count: int


@dataclass
class ReportResult:
    """Outcome of one report run."""

    folders: List[FolderCount] = field(default_factory=list)
    total_files: int = 0
    threshold: int = 0
    destination: Optional[str] = None
