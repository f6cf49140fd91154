"""
Constants and configuration values for Folder Census.

This module centralizes all constants, making them easy to modify
and test. Report layout values live here because users diff the
text output by eye and the widths must not drift.
"""

# Version Information
VERSION = "1.0.0"
AUTHOR = "Folder Census Contributors"


# Aggregation
DEFAULT_THRESHOLD = 10000
ROOT_FOLDER_LABEL = "(Root)"
ARCHIVE_SEPARATOR = "/"
DISPLAY_SEPARATOR = "\\"


# Archive Handling
# General purpose bit 11: filename and comment are UTF-8
ZIP_UTF8_FLAG = 0x800
# zipfile decodes names without the UTF-8 flag as CP437
ZIP_FALLBACK_ENCODING = "cp437"
DEFAULT_LEGACY_ENCODING = "shift_jis"

ZIP_EXTENSIONS = [".zip"]
TAR_EXTENSIONS = [".tar"]
TAR_COMPOUND_EXTENSIONS = [".tar.gz", ".tar.bz2", ".tar.xz"]
TAR_ALIASES = [".tgz", ".tbz2", ".txz"]


# Report Output
CSV_HEADER = ("Folder Path", "File Count")
CSV_ENCODING = "utf-8"
CSV_LINE_TERMINATOR = "\n"
BYTE_ORDER_MARK = "\ufeff"

TEXT_PATH_WIDTH = 60
TEXT_RULE_WIDTH = 80
TEXT_COLUMN_SEPARATOR = " | "


# Logging
LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"


# User Interface Messages
MESSAGES = {
    "WELCOME": "Folder Census v{version}\n----------------------",
    "ANALYSIS_STARTED": "Starting archive analysis",
    "ANALYSIS_FINISHED": "Aggregation finished",
    "CSV_WRITTEN": "Report written to CSV",
    "SUMMARY": "{total} files scanned, {folders} folders at or above {threshold}",
    "SUMMARY_CSV": "Report saved to {path}",
    "NO_FOLDERS": "No folder reached the threshold of {threshold} files.",
    "OPERATION_CANCELLED": "Operation cancelled.",
    "ERROR": "Error: {error}",
}


# Help Text
HELP_TEXT = """
Folder Census - count files per folder inside an archive

Usage:
    folder-census --zip ARCHIVE [OPTIONS]

Options:
    -h, --help              Show this help
    -v, --version           Show version
    -z, --zip ARCHIVE       Archive to analyse (ZIP or TAR, required)
    -t, --threshold N       Minimum number of files per folder (default: 10000)
    -c, --csv FILE          Write the report as CSV to FILE
                            (default: fixed-width text on standard output)
    -e, --encoding NAME     Encoding of legacy ZIP file names (default: shift_jis)
    --verbose               Show debug log messages
    -q, --quiet             Only show warnings and errors

Examples:
    # Folders holding at least 10000 files, printed as a table
    folder-census --zip backup.zip

    # Every folder with at least 50 files, saved for a spreadsheet
    folder-census --zip backup.zip --threshold 50 --csv report.csv

    # Archive created on a Chinese Windows system
    folder-census --zip legacy.zip --encoding gbk
"""
