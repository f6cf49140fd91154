"""
Folder aggregation.

Groups archive entries by their containing folder, keeps the folders
whose file count meets a threshold and ranks them. Everything here is
pure: no I/O and no mutation of the inputs.
"""

from __future__ import annotations

import posixpath
from typing import Dict, Iterable, List, Tuple

from folder_census.config.constants import (
    ARCHIVE_SEPARATOR,
    DISPLAY_SEPARATOR,
    ROOT_FOLDER_LABEL,
)
from folder_census.core.models import Entry, FolderCount


def containing_folder(name: str) -> str:
    """
    Return the display key of the folder that holds an archive entry.

    The final path segment is dropped and the remainder is cleaned
    lexically (duplicate slashes, ``.`` and ``..`` segments). Entries at
    the archive root map to ``(Root)``; every other folder is rendered
    with backslashes.

    Examples:
        >>> containing_folder("dir1/sub/file.txt")
        'dir1\\\\sub'
        >>> containing_folder("file.txt")
        '(Root)'
    """
    folder = posixpath.dirname(name)
    if folder:
        folder = posixpath.normpath(folder)
        # normpath keeps exactly two leading slashes; collapse them to one
        if folder.startswith("//"):
            folder = folder[1:]

    if folder in ("", "."):
        return ROOT_FOLDER_LABEL

    return folder.replace(ARCHIVE_SEPARATOR, DISPLAY_SEPARATOR)


def count_folders(entries: Iterable[Entry]) -> Dict[str, int]:
    """Count files per containing folder, ignoring directory entries."""
    counts: Dict[str, int] = {}
    for entry in entries:
        if entry.is_directory:
            continue
        folder = containing_folder(entry.name)
        counts[folder] = counts.get(folder, 0) + 1
    return counts


def rank_folders(folders: Iterable[FolderCount]) -> List[FolderCount]:
    """Order folders by count descending, then by path ascending."""
    return sorted(folders, key=lambda folder: (-folder.count, folder.path))


def aggregate_folders(
    entries: Iterable[Entry], threshold: int
) -> Tuple[List[FolderCount], int]:
    """
    Aggregate archive entries into a ranked folder list.

    Args:
        entries: Archive entries, files and directory markers mixed
        threshold: Minimum file count for a folder to be reported. Any
            integer is accepted and compared literally.

    Returns:
        Tuple of (ranked folders, number of file entries processed).
        The ranked list is empty when no folder meets the threshold.
    """
    entries = list(entries)
    processed_files = sum(1 for entry in entries if not entry.is_directory)

    counts = count_folders(entries)
    matching = [
        FolderCount(path=path, count=count)
        for path, count in counts.items()
        if count >= threshold
    ]

    return rank_folders(matching), processed_files
