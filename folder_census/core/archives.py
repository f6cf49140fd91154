"""
Archive reading module.

Provides readers that list the entries of ZIP and TAR archives as
plain Entry values, so the aggregation never depends on a concrete
archive format.

Encoding handling:
- ZIP entries carry a UTF-8 flag (general purpose bit 11)
- Names without the flag are usually written in a regional code page
  (Shift_JIS on Japanese Windows) and are re-decoded here
- A name that cannot be re-decoded is kept as-is instead of failing
"""

from __future__ import annotations

import logging
import tarfile
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from folder_census.config.constants import (
    DEFAULT_LEGACY_ENCODING,
    TAR_ALIASES,
    TAR_COMPOUND_EXTENSIONS,
    TAR_EXTENSIONS,
    ZIP_EXTENSIONS,
    ZIP_FALLBACK_ENCODING,
    ZIP_UTF8_FLAG,
)
from folder_census.core.models import Entry

logger = logging.getLogger(__name__)


class ArchiveOpenError(Exception):
    """Raised when an archive is missing, unreadable or corrupt."""

    pass


class IArchiveReader(ABC):
    """
    Interface for archive readers.

    Implementations turn an archive location into a list of entries with
    forward-slash separated, already decoded names.
    """

    @abstractmethod
    def read_entries(self, archive_path: str | Path) -> List[Entry]:
        """
        List every item stored in the archive.

        Args:
            archive_path: Path to the archive file

        Returns:
            Entries in archive order

        Raises:
            ArchiveOpenError: If the archive cannot be opened or parsed
        """
        pass

    @abstractmethod
    def is_supported(self, file_path: Path) -> bool:
        """
        Check if this reader supports the given file type.

        Args:
            file_path: Path to check (only extension is evaluated)

        Returns:
            True if this reader can process the file type
        """
        pass


def decode_legacy_name(name: str, encoding: str = DEFAULT_LEGACY_ENCODING) -> str:
    """
    Re-decode a ZIP entry name stored in a legacy encoding.

    zipfile decodes names without the UTF-8 flag as CP437. This recovers
    the original bytes and decodes them with ``encoding``.

    Args:
        name: Name as decoded by zipfile
        encoding: Encoding the archive was created with

    Returns:
        The decoded name, or ``name`` unchanged if decoding fails
    """
    try:
        raw = name.encode(ZIP_FALLBACK_ENCODING)
        return raw.decode(encoding)
    except (UnicodeError, LookupError) as e:
        logger.debug("Keeping undecodable entry name %r (%s): %s", name, encoding, e)
        return name


class ZipArchiveReader(IArchiveReader):
    """
    Reader for ZIP archives.

    Supports: .zip files (case-insensitive)
    """

    SUPPORTED_EXTENSIONS: list[str] = ZIP_EXTENSIONS

    def __init__(self, legacy_encoding: str = DEFAULT_LEGACY_ENCODING):
        self.legacy_encoding = legacy_encoding

    def is_supported(self, file_path: Path) -> bool:
        """Check if file is a ZIP archive based on extension."""
        return file_path.suffix.lower() in self.SUPPORTED_EXTENSIONS

    def _entry_name(self, info: zipfile.ZipInfo) -> str:
        # Pure ASCII names read the same in every code page
        if info.flag_bits & ZIP_UTF8_FLAG or info.orig_filename.isascii():
            return info.filename
        # filename has os.sep already rewritten to "/", which corrupts
        # double-byte characters whose trail byte is 0x5C on Windows
        return decode_legacy_name(info.orig_filename, self.legacy_encoding)

    def read_entries(self, archive_path: str | Path) -> List[Entry]:
        """List ZIP entries, decoding legacy file names."""
        try:
            with zipfile.ZipFile(archive_path, "r") as zf:
                entries = []
                for info in zf.infolist():
                    name = self._entry_name(info)
                    entries.append(Entry(name=name, is_directory=name.endswith("/")))
                return entries
        except zipfile.BadZipFile as e:
            raise ArchiveOpenError(
                f"Invalid or corrupted ZIP archive: {archive_path}"
            ) from e
        except OSError as e:
            raise ArchiveOpenError(
                f"Failed to open ZIP archive '{archive_path}': {e}"
            ) from e


class TarArchiveReader(IArchiveReader):
    """
    Reader for TAR archives (compressed variants).

    Supports: .tar, .tar.gz, .tgz, .tar.bz2, .tar.xz (case-insensitive)
    """

    SUPPORTED_EXTENSIONS: list[str] = TAR_EXTENSIONS
    SUPPORTED_COMPOUND_EXTENSIONS: list[str] = TAR_COMPOUND_EXTENSIONS
    SUPPORTED_ALIASES: list[str] = TAR_ALIASES

    def is_supported(self, file_path: Path) -> bool:
        """Check if file is a TAR archive based on extension."""
        name_lower = file_path.name.lower()

        # Check compound extensions first (e.g., .tar.gz)
        for ext in self.SUPPORTED_COMPOUND_EXTENSIONS:
            if name_lower.endswith(ext):
                return True

        suffix = file_path.suffix.lower()
        return suffix in self.SUPPORTED_ALIASES or suffix in self.SUPPORTED_EXTENSIONS

    def read_entries(self, archive_path: str | Path) -> List[Entry]:
        """List TAR members, auto-detecting compression."""
        try:
            with tarfile.open(archive_path, "r:*") as tf:
                return [
                    Entry(name=member.name, is_directory=member.isdir())
                    for member in tf.getmembers()
                ]
        except tarfile.TarError as e:
            raise ArchiveOpenError(
                f"Invalid or corrupted TAR archive: {archive_path}"
            ) from e
        except OSError as e:
            raise ArchiveOpenError(
                f"Failed to open TAR archive '{archive_path}': {e}"
            ) from e


def get_archive_reader(
    file_path: str | Path, legacy_encoding: str = DEFAULT_LEGACY_ENCODING
) -> IArchiveReader:
    """
    Factory function to get the appropriate reader for an archive file.

    TAR extensions get a TarArchiveReader; anything else is treated as
    ZIP, so a mislabelled file still fails with ArchiveOpenError rather
    than being skipped.

    Example:
        reader = get_archive_reader(Path("backup.tar.gz"))
        entries = reader.read_entries("backup.tar.gz")
    """
    tar_reader = TarArchiveReader()
    if tar_reader.is_supported(Path(file_path)):
        return tar_reader
    return ZipArchiveReader(legacy_encoding=legacy_encoding)
