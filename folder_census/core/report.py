"""
Report writers.

Render a ranked folder list either as a spreadsheet-friendly CSV table
or as a fixed-width text listing for the terminal.
"""

from __future__ import annotations

import csv
from typing import Iterable, TextIO

from folder_census.config.constants import (
    BYTE_ORDER_MARK,
    CSV_HEADER,
    CSV_LINE_TERMINATOR,
    TEXT_COLUMN_SEPARATOR,
    TEXT_PATH_WIDTH,
    TEXT_RULE_WIDTH,
)
from folder_census.core.models import FolderCount


class WriteError(Exception):
    """Raised when a report destination cannot be created or written."""

    pass


def write_csv(stream: TextIO, folders: Iterable[FolderCount]) -> None:
    """
    Write folders as CSV preceded by a UTF-8 byte order mark.

    The stream should be opened with ``newline=""`` and a UTF-8 encoding
    so the mark and the line endings reach the file untouched.

    Raises:
        WriteError: If writing to the stream fails
    """
    try:
        stream.write(BYTE_ORDER_MARK)
        writer = csv.writer(stream, lineterminator=CSV_LINE_TERMINATOR)
        writer.writerow(CSV_HEADER)
        for folder in folders:
            writer.writerow([folder.path, str(folder.count)])
        stream.flush()
    except OSError as e:
        raise WriteError(f"Failed to write CSV report: {e}") from e


def format_text_row(path: str, count: object) -> str:
    """Format one fixed-width row of the text report."""
    return f"{path:<{TEXT_PATH_WIDTH}}{TEXT_COLUMN_SEPARATOR}{count}\n"


def write_text(stream: TextIO, folders: Iterable[FolderCount]) -> None:
    """
    Write folders as a fixed-width text table.

    Layout: a blank line, the header row, a rule of dashes, then one row
    per folder with the path left-justified to 60 characters.

    Raises:
        WriteError: If writing to the stream fails
    """
    try:
        stream.write("\n")
        stream.write(format_text_row(CSV_HEADER[0], CSV_HEADER[1]))
        stream.write("-" * TEXT_RULE_WIDTH + "\n")
        for folder in folders:
            stream.write(format_text_row(folder.path, folder.count))
        stream.flush()
    except OSError as e:
        raise WriteError(f"Failed to write text report: {e}") from e
