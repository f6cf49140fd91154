"""
Unit tests for CLI parser module.
"""

from io import StringIO
from unittest.mock import patch

import pytest

from folder_census.cli.parser import create_parser


class TestArgumentParser:
    """Test ArgumentParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = create_parser()

    def test_default_arguments(self):
        """Test parsing with default arguments."""
        args = self.parser.parse_args([])

        assert args.zip == ""
        assert args.threshold == 10000
        assert args.csv == ""
        assert args.encoding == "shift_jis"
        assert args.verbose is False
        assert args.quiet is False

    def test_zip_argument(self):
        """Test archive path parsing."""
        args = self.parser.parse_args(["--zip", "backup.zip"])
        assert args.zip == "backup.zip"

        args = self.parser.parse_args(["-z", "other.tar.gz"])
        assert args.zip == "other.tar.gz"

    def test_threshold_argument(self):
        """Test threshold parsing."""
        args = self.parser.parse_args(["--threshold", "50"])
        assert args.threshold == 50

        args = self.parser.parse_args(["-t", "0"])
        assert args.threshold == 0

    def test_negative_threshold_is_accepted(self):
        """Negative numbers are values, not options."""
        args = self.parser.parse_args(["--threshold", "-5"])
        assert args.threshold == -5

        args = self.parser.parse_args(["--threshold=-1"])
        assert args.threshold == -1

    def test_invalid_threshold(self):
        """Test non-numeric threshold is rejected."""
        with patch("sys.stderr", new=StringIO()) as mock_stderr:
            with pytest.raises(SystemExit) as exc_info:
                self.parser.parse_args(["--threshold", "many"])

        assert exc_info.value.code == 2
        assert "many" in mock_stderr.getvalue()

    def test_csv_argument(self):
        """Test CSV path parsing."""
        args = self.parser.parse_args(["--csv", "report.csv"])
        assert args.csv == "report.csv"

        args = self.parser.parse_args(["-c", "out.csv"])
        assert args.csv == "out.csv"

    def test_encoding_argument(self):
        """Test encoding parsing and normalization."""
        args = self.parser.parse_args(["--encoding", "GBK"])
        assert args.encoding == "gbk"

        args = self.parser.parse_args(["-e", "cp932"])
        assert args.encoding == "cp932"

    def test_unknown_encoding(self):
        """Test unknown encodings are rejected."""
        with patch("sys.stderr", new=StringIO()):
            with pytest.raises(SystemExit):
                self.parser.parse_args(["--encoding", "klingon"])

    def test_boolean_flags(self):
        """Test boolean flag arguments."""
        args = self.parser.parse_args(["--verbose"])
        assert args.verbose is True

        args = self.parser.parse_args(["--quiet"])
        assert args.quiet is True

        args = self.parser.parse_args(["-q"])
        assert args.quiet is True

    def test_combined_arguments(self):
        """Test multiple arguments together."""
        args = self.parser.parse_args(
            ["-z", "a.zip", "-t", "100", "-c", "out.csv", "-e", "cp932", "-q"]
        )

        assert args.zip == "a.zip"
        assert args.threshold == 100
        assert args.csv == "out.csv"
        assert args.encoding == "cp932"
        assert args.quiet is True

    def test_help_argument(self):
        """Test help prints custom text and exits 0."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            with pytest.raises(SystemExit) as exc_info:
                self.parser.parse_args(["--help"])

        assert exc_info.value.code == 0
        output = mock_stdout.getvalue()
        assert "Folder Census" in output
        assert "--threshold" in output

    def test_version_argument(self):
        """Test version prints and exits 0."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            with pytest.raises(SystemExit) as exc_info:
                self.parser.parse_args(["-v"])

        assert exc_info.value.code == 0
        assert "folder-census" in mock_stdout.getvalue()

    def test_unknown_argument(self):
        """Test unknown options are rejected."""
        with patch("sys.stderr", new=StringIO()):
            with pytest.raises(SystemExit):
                self.parser.parse_args(["--depth", "3"])
