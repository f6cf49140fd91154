"""
Runtime settings and configuration management.

This module handles runtime configuration that can be modified
during execution, unlike constants which are fixed.
"""

from typing import Any, Dict, Optional

from folder_census.config.constants import DEFAULT_LEGACY_ENCODING, DEFAULT_THRESHOLD


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


class Settings:
    """Runtime settings manager."""

    def __init__(self):
        """Initialize default settings."""
        self.reset_to_defaults()

    def reset_to_defaults(self):
        """Reset all settings to default values."""
        self._settings = {
            # Input
            "archive_path": None,
            "legacy_encoding": DEFAULT_LEGACY_ENCODING,
            # Aggregation
            "threshold": DEFAULT_THRESHOLD,
            # Output
            "csv_path": None,
            "verbose": False,
            "quiet": False,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value."""
        self._settings[key] = value

    def update(self, settings: Dict[str, Any]) -> None:
        """Update multiple settings at once."""
        self._settings.update(settings)

    def to_dict(self) -> Dict[str, Any]:
        """Export settings as dictionary."""
        return self._settings.copy()

    @property
    def archive_path(self) -> Optional[str]:
        return self._settings["archive_path"]

    @property
    def legacy_encoding(self) -> str:
        return self._settings["legacy_encoding"]

    @property
    def threshold(self) -> int:
        return self._settings["threshold"]

    @property
    def csv_path(self) -> Optional[str]:
        return self._settings["csv_path"]

    @property
    def verbose(self) -> bool:
        return self._settings["verbose"]

    @property
    def quiet(self) -> bool:
        return self._settings["quiet"]


# Global settings instance
settings = Settings()


def configure_from_args(args, target: Optional[Settings] = None) -> Settings:
    """Configure settings from command line arguments."""
    target = settings if target is None else target

    target.set("archive_path", args.zip or None)
    target.set("threshold", args.threshold)
    target.set("csv_path", args.csv or None)
    target.set("legacy_encoding", args.encoding)

    quiet = getattr(args, "quiet", False)
    target.set("quiet", quiet)
    # --quiet wins over --verbose
    target.set("verbose", getattr(args, "verbose", False) and not quiet)

    return target
