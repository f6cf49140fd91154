"""
Report orchestration.

Wires the configured archive reader, the folder aggregator and one of
the report writers into a single linear run.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from folder_census.config.constants import CSV_ENCODING, MESSAGES
from folder_census.config.settings import ConfigError, Settings
from folder_census.core.aggregator import aggregate_folders
from folder_census.core.archives import IArchiveReader
from folder_census.core.models import ReportResult
from folder_census.core.report import WriteError, write_csv, write_text


class ReportOrchestrator:
    """
    Runs one archive report from configuration to output.

    The reader and the logger are injected so tests can substitute an
    in-memory reader and a discarding logger.
    """

    def __init__(
        self, reader: IArchiveReader, logger: Optional[logging.Logger] = None
    ):
        self.reader = reader
        self.logger = logger or logging.getLogger(__name__)

    def run(self, config: Settings, out_stream: TextIO) -> ReportResult:
        """
        Read the archive, aggregate its folders and write the report.

        The CSV writer is used when ``config.csv_path`` is set; otherwise
        the text report goes to ``out_stream``.

        Raises:
            ConfigError: If no archive path is configured
            ArchiveOpenError: If the archive cannot be read
            WriteError: If the report cannot be written
        """
        if not config.archive_path:
            raise ConfigError("archive path is required")

        self.logger.info(
            "%s: %s", MESSAGES["ANALYSIS_STARTED"], config.archive_path
        )
        entries = self.reader.read_entries(config.archive_path)

        folders, total_files = aggregate_folders(entries, config.threshold)
        self.logger.info(
            "%s: total_files=%d extracted_folders=%d",
            MESSAGES["ANALYSIS_FINISHED"],
            total_files,
            len(folders),
        )

        result = ReportResult(
            folders=folders,
            total_files=total_files,
            threshold=config.threshold,
            destination=config.csv_path,
        )

        if config.csv_path:
            self._write_csv_file(config.csv_path, result)
        else:
            write_text(out_stream, folders)

        return result

    def _write_csv_file(self, csv_path: str, result: ReportResult) -> None:
        try:
            stream = open(csv_path, "w", encoding=CSV_ENCODING, newline="")
        except OSError as e:
            raise WriteError(f"Failed to create CSV file '{csv_path}': {e}") from e

        with stream:
            write_csv(stream, result.folders)

        self.logger.info("%s: %s", MESSAGES["CSV_WRITTEN"], csv_path)
