"""
Command line interface module.

Handles status messages and the run summary. Messages go to standard
error so the text report on standard output stays clean.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.style import Style

from folder_census.config.constants import MESSAGES, VERSION
from folder_census.config.settings import Settings, settings
from folder_census.core.models import ReportResult


class IUserInterface(ABC):
    """Interface for user interaction."""

    @abstractmethod
    def show_welcome(self) -> None:
        """Show welcome message."""
        pass

    @abstractmethod
    def show_message(self, message: str, message_type: str = "info") -> None:
        """Show a message to the user."""
        pass

    @abstractmethod
    def show_summary(self, result: ReportResult) -> None:
        """Show report summary."""
        pass


class ConsoleInterface(IUserInterface):
    """Console-based user interface implementation."""

    def __init__(
        self,
        console: Optional[Console] = None,
        config: Optional[Settings] = None,
    ):
        """Initialize console interface."""
        self.console = console or Console(stderr=True)
        self.config = config or settings

        # Theme styles (minimalist - no bold/dim modifiers)
        self.success_style = Style(color="green")
        self.error_style = Style(color="red")
        self.warning_style = Style(color="yellow")
        self.info_style = Style(color="white")

    def _print(self, renderable, style=None) -> None:
        """Print directly to console.

        Markup is off and lines are not wrapped so archive paths print
        verbatim.
        """
        if style:
            self.console.print(
                renderable,
                style=style,
                highlight=False,
                markup=False,
                soft_wrap=True,
            )
        else:
            self.console.print(
                renderable, highlight=False, markup=False, soft_wrap=True
            )

    def show_welcome(self) -> None:
        """Show welcome message in minimalist Unix style."""
        if self.config.get("quiet", False):
            return
        self._print(MESSAGES["WELCOME"].format(version=VERSION), style="blue")

    def show_message(self, message: str, message_type: str = "info") -> None:
        """Show a message to the user.

        Errors are always shown; other types respect the quiet setting.

        Args:
            message: Message to display
            message_type: Type of message (info, success, error, warning)
        """
        if message_type != "error" and self.config.get("quiet", False):
            return

        if message_type == "success":
            self._print(message, style=self.success_style)
        elif message_type == "error":
            self._print(message, style=self.error_style)
        elif message_type == "warning":
            self._print(message, style=self.warning_style)
        elif message_type == "info":
            self._print(message, style=self.info_style)
        else:
            # Unknown message types - print without styling
            self._print(message)

    def show_summary(self, result: ReportResult) -> None:
        """Show report summary.

        Args:
            result: Outcome of the report run
        """
        if self.config.get("quiet", False):
            return

        self._print(
            MESSAGES["SUMMARY"].format(
                total=result.total_files,
                folders=len(result.folders),
                threshold=result.threshold,
            ),
            style=self.info_style,
        )

        if not result.folders:
            self._print(
                MESSAGES["NO_FOLDERS"].format(threshold=result.threshold),
                style=self.warning_style,
            )

        if result.destination:
            self._print(
                MESSAGES["SUMMARY_CSV"].format(path=result.destination),
                style=self.success_style,
            )


def create_console_interface(config: Optional[Settings] = None) -> ConsoleInterface:
    """Create and return a console interface."""
    return ConsoleInterface(config=config)
