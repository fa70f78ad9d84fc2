"""Data models for folder2txt."""

import pathlib
from dataclasses import dataclass, field

from folder2txt.constants import DEFAULT_LANG, MAX_FILES, MESSAGES
from folder2txt.ignore_rules import IgnoreRules


@dataclass(frozen=True)
class ArchiveSettings:
    """Configuration of a single archiver run.

    Attributes:
        folder: Directory to archive
        output: Path of the aggregate artifact to write
        lang: Locale code for console messages
        limit: Maximum number of files the archiver accepts
        rules: Ignore rules applied during the walk
        clean: Whether to sanitize file contents before writing them
    """

    folder: pathlib.Path
    output: pathlib.Path
    lang: str = DEFAULT_LANG
    limit: int = MAX_FILES
    rules: IgnoreRules = field(default_factory=IgnoreRules.defaults)
    clean: bool = False

    @property
    def messages(self) -> dict[str, str]:
        """Message table for this run's locale."""
        return get_messages(self.lang)


def get_messages(lang: str | None) -> dict[str, str]:
    """Return the message table for a locale, falling back to English."""
    return MESSAGES.get(lang or DEFAULT_LANG, MESSAGES[DEFAULT_LANG])


@dataclass(frozen=True)
class Header:
    """A line that opens a new file segment."""

    path: str
    text: str


@dataclass(frozen=True)
class Content:
    """Any line that is not a header."""

    text: str


@dataclass
class Segment:
    """A file being rebuilt from the aggregate artifact.

    Attributes:
        path: Relative path recorded in the header
        lines: Accumulated lines, starting with the header line itself
    """

    path: str
    lines: list[str] = field(default_factory=list)
