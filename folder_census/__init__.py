"""
Folder Census - count files per folder inside an archive.
"""

from folder_census.config.constants import VERSION

__version__ = VERSION
