"""
CLI application.

Coordinates argument parsing, logging setup, the console interface and
the report orchestrator.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler

from folder_census.cli.interface import create_console_interface
from folder_census.cli.parser import create_parser
from folder_census.config.constants import LOG_DATE_FORMAT, LOG_FORMAT, MESSAGES
from folder_census.config.settings import configure_from_args, settings
from folder_census.core.archives import get_archive_reader
from folder_census.core.orchestrator import ReportOrchestrator

PACKAGE_LOGGER = "folder_census"

logger = logging.getLogger(__name__)


def configure_logging(
    verbose: bool = False, quiet: bool = False, console: Optional[Console] = None
) -> logging.Logger:
    """Route package log records to standard error through rich.

    Args:
        verbose: Enable DEBUG records
        quiet: Only let WARNING and above through

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        log_time_format=LOG_DATE_FORMAT,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


class FolderCensusCLI:
    """CLI application for archive folder reports."""

    def __init__(self, out_stream: Optional[TextIO] = None):
        """Initialize CLI application.

        Args:
            out_stream: Stream for the text report (default: standard output)
        """
        self.parser = create_parser()
        self.interface = create_console_interface()
        self.out_stream = out_stream

    def run(self, args: Optional[list] = None) -> int:
        """Run the CLI application.

        Args:
            args: Optional command line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            parsed_args = self.parser.parse_args(args)
            configure_from_args(parsed_args)
            configure_logging(verbose=settings.verbose, quiet=settings.quiet)

            self.interface.show_welcome()
            return self._execute_report()

        except KeyboardInterrupt:
            self.interface.show_message(
                MESSAGES["OPERATION_CANCELLED"], message_type="warning"
            )
            return 1

        except Exception as e:
            logger.error("Report failed: %s", e)
            logger.debug("Report failure details", exc_info=True)
            self.interface.show_message(
                MESSAGES["ERROR"].format(error=e), message_type="error"
            )
            return 1

    def _execute_report(self) -> int:
        """Build the report for the configured archive.

        Returns:
            Exit code
        """
        reader = get_archive_reader(
            settings.archive_path or "", legacy_encoding=settings.legacy_encoding
        )
        orchestrator = ReportOrchestrator(
            reader, logger=logging.getLogger(f"{PACKAGE_LOGGER}.report")
        )

        out_stream = self.out_stream if self.out_stream is not None else sys.stdout
        result = orchestrator.run(settings, out_stream)

        self.interface.show_summary(result)
        return 0


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Optional command line arguments

    Returns:
        Exit code
    """
    app = FolderCensusCLI()
    return app.run(args)


if __name__ == "__main__":
    sys.exit(main())
