"""Header lines that mark file boundaries inside an aggregate artifact."""

import posixpath
import re

from folder2txt.constants import (
    BLOCK_COMMENT_EXTENSIONS,
    BLOCK_COMMENT_PREFIX,
    BLOCK_COMMENT_SUFFIX,
    LINE_COMMENT_PREFIX,
)
from folder2txt.models import Content, Header

LINE_BREAK = re.compile(r"\r?\n")


def make_header(relative_path: str) -> str:
    """Build the header line for a file, without the trailing newline.

    Args:
        relative_path: Path to record, using ``/`` separators

    Returns:
        A block comment header for stylesheet and JSON files,
        a line comment header for everything else

    Examples:
        >>> make_header("src/a.js")
        '// File: src/a.js'
        >>> make_header("src/b.css")
        '/* File: src/b.css */'
    """
    ext = posixpath.splitext(relative_path)[1].lower()
    if ext in BLOCK_COMMENT_EXTENSIONS:
        return f"{BLOCK_COMMENT_PREFIX} {relative_path} {BLOCK_COMMENT_SUFFIX}"
    return f"{LINE_COMMENT_PREFIX} {relative_path}"


def parse_header(line: str) -> str | None:
    """Extract the path from a header line.

    Returns:
        The recorded path, or None if the line is not a header or
        its path is empty
    """
    trimmed = line.strip()

    if trimmed.startswith(LINE_COMMENT_PREFIX):
        path = trimmed[len(LINE_COMMENT_PREFIX) :].strip()
        return path or None

    if trimmed.startswith(BLOCK_COMMENT_PREFIX):
        path = trimmed[len(BLOCK_COMMENT_PREFIX) :].strip()
        if path.endswith(BLOCK_COMMENT_SUFFIX):
            path = path[: -len(BLOCK_COMMENT_SUFFIX)].strip()
        return path or None

    return None


def classify_line(line: str) -> Header | Content:
    """Tag a line as a file header or as ordinary content."""
    path = parse_header(line)
    if path is None:
        return Content(line)
    return Header(path, line)


def has_header(content: str) -> bool:
    """Check whether a file already starts with a header line.

    A first line such as ``// File:`` with no path does not count, since
    the restorer would not split on it either.
    """
    first_line = LINE_BREAK.split(content, maxsplit=1)[0]
    return parse_header(first_line) is not None
