"""Rebuild a folder tree from an aggregate artifact."""

import pathlib
import re

from folder2txt.headers import LINE_BREAK, classify_line
from folder2txt.models import Header, Segment

ROOT_PREFIX = re.compile(r"^([A-Za-z]:)?[\\/]+")


def split_segments(lines: list[str]) -> list[Segment]:
    """Group artifact lines into file segments.

    Each header opens a segment and stays as its first line. Lines before
    the first header belong to no segment and are dropped.
    """
    segments: list[Segment] = []
    current: Segment | None = None

    for line in lines:
        kind = classify_line(line)
        if isinstance(kind, Header):
            current = Segment(kind.path, [kind.text])
            segments.append(current)
        elif current is not None:
            current.lines.append(kind.text)

    return segments


def sanitize_path(path: str) -> str:
    """Strip a leading drive letter and slashes so the path stays relative.

    Examples:
        >>> sanitize_path("/home/me/a.txt")
        'home/me/a.txt'
        >>> sanitize_path("C:\\\\src\\\\a.js")
        'src\\\\a.js'
    """
    return ROOT_PREFIX.sub("", path)


def write_segment(segment: Segment, target_dir: pathlib.Path) -> pathlib.Path | None:
    """Write a segment to disk, replacing any existing file.

    Returns:
        The written path, or None for a segment without lines or
        without a usable path
    """
    relative_path = sanitize_path(segment.path)
    if not segment.lines or not relative_path:
        return None

    file_path = target_dir / relative_path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write("\n".join(segment.lines))
    return file_path


def restore(input_path: pathlib.Path, target_dir: pathlib.Path | None = None) -> int:
    """Recreate every file recorded in an aggregate artifact.

    Args:
        input_path: Artifact produced by the archiver
        target_dir: Directory that header paths are relative to
            (current working directory by default)

    Returns:
        Number of files written

    Raises:
        OSError: If the artifact cannot be read or a file cannot be written.
            Files written before the failure stay on disk.
    """
    target_dir = target_dir or pathlib.Path.cwd()

    with open(input_path, encoding="utf-8", newline="") as f:
        lines = LINE_BREAK.split(f.read())

    # A final line break terminates the last line rather than opening a new one
    if lines and lines[-1] == "":
        lines.pop()

    written = 0
    for segment in split_segments(lines):
        file_path = write_segment(segment, target_dir)
        if file_path is not None:
            print(f"✓ {segment.path}")
            written += 1
    return written
