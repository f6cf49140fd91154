"""
Core business logic for Folder Census.
"""

from .aggregator import aggregate_folders, containing_folder, count_folders
from .archives import (
    ArchiveOpenError,
    IArchiveReader,
    TarArchiveReader,
    ZipArchiveReader,
    decode_legacy_name,
    get_archive_reader,
)
from .models import Entry, FolderCount, ReportResult
from .orchestrator import ReportOrchestrator
from .report import WriteError, write_csv, write_text
