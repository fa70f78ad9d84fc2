"""folder2txt: flatten a folder into one text file and restore it back.

This package walks a directory, writes every non-ignored text file into a
single aggregate file behind a ``// File: <path>`` header, and rebuilds the
directory tree from such a file.
"""

from folder2txt.archive import archive
from folder2txt.cli import main
from folder2txt.ignore_rules import IgnoreRules
from folder2txt.models import ArchiveSettings
from folder2txt.restore import restore

__version__ = "0.1.0"
__all__ = ["main", "archive", "restore", "ArchiveSettings", "IgnoreRules"]
