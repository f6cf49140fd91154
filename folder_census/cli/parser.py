"""
Command line argument parser.

Handles parsing and validation of CLI arguments.
"""

import argparse
import sys
from typing import List, Optional

from folder_census.config.constants import (
    AUTHOR,
    DEFAULT_LEGACY_ENCODING,
    DEFAULT_THRESHOLD,
    HELP_TEXT,
    VERSION,
)
from folder_census.utils.parsers import parse_encoding, parse_threshold


class ArgumentParser:
    """Custom argument parser for Folder Census."""

    def __init__(self):
        """Initialize argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser."""
        parser = argparse.ArgumentParser(
            prog="folder-census",
            description="Count files per folder inside an archive",
            add_help=False,  # We'll handle help ourselves
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "-h", "--help", action="store_true", help="Show this help"
        )

        parser.add_argument(
            "-v", "--version", action="store_true", help="Show version"
        )

        parser.add_argument(
            "-z",
            "--zip",
            type=str,
            default="",
            metavar="ARCHIVE",
            help="Archive to analyse (required)",
        )

        parser.add_argument(
            "-t",
            "--threshold",
            type=str,
            default=str(DEFAULT_THRESHOLD),
            metavar="N",
            help="Minimum number of files per folder",
        )

        parser.add_argument(
            "-c",
            "--csv",
            type=str,
            default="",
            metavar="FILE",
            help="Write the report as CSV (default: text on standard output)",
        )

        parser.add_argument(
            "-e",
            "--encoding",
            type=str,
            default=DEFAULT_LEGACY_ENCODING,
            metavar="NAME",
            help="Encoding of ZIP entry names without the UTF-8 flag",
        )

        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug log messages",
        )

        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Only show warnings and errors",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command line arguments.

        Args:
            args: Optional list of arguments (for testing)

        Returns:
            Parsed arguments namespace
        """
        parsed = self.parser.parse_args(args)

        # Handle special cases
        if parsed.help:
            self.print_help()
            sys.exit(0)

        if parsed.version:
            self.print_version()
            sys.exit(0)

        # Validate and convert values
        try:
            parsed.threshold = parse_threshold(parsed.threshold)
            parsed.encoding = parse_encoding(parsed.encoding)
        except ValueError as e:
            self.parser.error(str(e))

        return parsed

    def print_help(self) -> None:
        """Print custom help text."""
        print(HELP_TEXT)

    def print_version(self) -> None:
        """Print version information."""
        print(f"folder-census {VERSION}")
        print(f"By {AUTHOR}")


def create_parser() -> ArgumentParser:
    """Create and return a configured argument parser."""
    return ArgumentParser()
