"""
Pytest configuration and shared fixtures
"""

import io
import logging
import sys
import tarfile
import zipfile
from pathlib import Path
from typing import List, Optional

import pytest

from folder_census.config.settings import settings
from folder_census.core.archives import ArchiveOpenError, IArchiveReader
from folder_census.core.models import Entry

# Add parent directory to path so we can import folder_census
sys.path.insert(0, str(Path(__file__).parent.parent))


class InMemoryArchiveReader(IArchiveReader):
    """Archive reader returning fixed entries, or failing on demand."""

    def __init__(
        self,
        entries: Optional[List[Entry]] = None,
        error: Optional[Exception] = None,
    ):
        self.entries = entries or []
        self.error = error
        self.calls: List[str] = []

    def is_supported(self, file_path: Path) -> bool:
        return True

    def read_entries(self, archive_path) -> List[Entry]:
        self.calls.append(str(archive_path))
        if self.error is not None:
            raise self.error
        return list(self.entries)


@pytest.fixture
def memory_reader():
    """
    Factory fixture for in-memory archive readers.

    Usage:
        reader = memory_reader([Entry("a/b.txt")])
        failing = memory_reader(error=ArchiveOpenError("boom"))
    """

    def _create(entries=None, error=None) -> InMemoryArchiveReader:
        return InMemoryArchiveReader(entries=entries, error=error)

    return _create


@pytest.fixture
def failing_reader():
    """Reader that always fails like an unreadable archive."""
    return InMemoryArchiveReader(error=ArchiveOpenError("mock read error"))


@pytest.fixture
def null_logger():
    """Logger that discards every record."""
    logger = logging.getLogger("folder_census.tests.null")
    logger.handlers = [logging.NullHandler()]
    logger.propagate = False
    return logger


@pytest.fixture
def create_zip_archive(tmp_path):
    """
    Factory fixture to create ZIP archives with specified contents.

    Names ending with "/" are stored as directory entries.

    Usage:
        zip_path = create_zip_archive({"file.txt": "content", "dir/": ""})
    """

    def _create(files: dict, name: str = "test.zip") -> Path:
        zip_path = tmp_path / name
        with zipfile.ZipFile(zip_path, "w") as zf:
            for filename, content in files.items():
                zf.writestr(filename, content)
        return zip_path

    return _create


@pytest.fixture
def create_legacy_zip_archive(tmp_path):
    """
    Factory fixture to create ZIP archives whose names are stored in a
    legacy encoding without the UTF-8 flag.

    Usage:
        zip_path = create_legacy_zip_archive(["資料/報告.txt"], encoding="shift_jis")
    """

    def _create(
        names: List[str], encoding: str = "shift_jis", name: str = "legacy.zip"
    ) -> Path:
        # zipfile always flags non-ASCII names as UTF-8, so entries are
        # written under ASCII placeholders of the same byte length and
        # the raw legacy bytes are patched in afterwards
        buffer = io.BytesIO()
        replacements = []
        with zipfile.ZipFile(buffer, "w") as zf:
            for index, entry_name in enumerate(names):
                raw = entry_name.encode(encoding)
                placeholder = chr(ord("A") + index) * len(raw)
                replacements.append((placeholder.encode("ascii"), raw))
                zf.writestr(placeholder, b"content")

        data = buffer.getvalue()
        for placeholder, raw in replacements:
            data = data.replace(placeholder, raw)

        zip_path = tmp_path / name
        zip_path.write_bytes(data)
        return zip_path

    return _create


@pytest.fixture
def create_tar_archive(tmp_path):
    """
    Factory fixture to create TAR archives with specified contents.

    Names ending with "/" are stored as directory members.

    Usage:
        tar_path = create_tar_archive({"file.txt": "content"}, compression="gz")
    """

    def _create(files: dict, name: str = "test.tar", compression: str = "") -> Path:
        if compression:
            name = f"{name}.{compression}"
            mode = f"w:{compression}"
        else:
            mode = "w"

        tar_path = tmp_path / name
        with tarfile.open(tar_path, mode) as tf:
            for filename, content in files.items():
                if filename.endswith("/"):
                    info = tarfile.TarInfo(name=filename.rstrip("/"))
                    info.type = tarfile.DIRTYPE
                    tf.addfile(info)
                    continue
                data = content.encode("utf-8")
                info = tarfile.TarInfo(name=filename)
                info.size = len(data)
                tf.addfile(info, io.BytesIO(data))
        return tar_path

    return _create


@pytest.fixture(autouse=True)
def reset_global_settings():
    """
    Reset the global settings before each test.

    Prevents state leakage between tests that go through the CLI.
    """
    settings.reset_to_defaults()
    yield
    settings.reset_to_defaults()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs on the package logger."""
    yield
    package_logger = logging.getLogger("folder_census")
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
