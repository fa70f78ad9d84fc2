"""Ignore rules for files and folders, matched against bare entry names."""

import json
import pathlib
import re
from dataclasses import dataclass, field

import pathspec

from folder2txt.constants import (
    DEFAULT_IGNORE_FILES,
    DEFAULT_IGNORE_FOLDERS,
    IGNORE_FILE_NAME,
)


def wildcard_to_regex(pattern: str) -> str:
    """Translate a ``*``-only wildcard pattern into an anchored regex.

    Every literal piece is escaped; ``*`` becomes ``.*``.

    Examples:
        >>> wildcard_to_regex("*.log")
        '^(?:.*\\\\.log)\\\\Z'
    """
    body = ".*".join(re.escape(piece) for piece in pattern.split("*"))
    return rf"^(?:{body})\Z"


def compile_patterns(patterns: tuple[str, ...]) -> pathspec.PathSpec:
    """Build a PathSpec whose members match a whole bare name."""
    return pathspec.PathSpec(
        pathspec.RegexPattern(wildcard_to_regex(p)) for p in patterns
    )


@dataclass(frozen=True)
class IgnoreRules:
    """Name patterns for folders and files that are left out of an archive.

    Attributes:
        folders: Patterns checked against directory names
        files: Patterns checked against file names
    """

    folders: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    _folder_spec: pathspec.PathSpec = field(init=False, repr=False, compare=False)
    _file_spec: pathspec.PathSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "folders", tuple(self.folders))
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(self, "_folder_spec", compile_patterns(self.folders))
        object.__setattr__(self, "_file_spec", compile_patterns(self.files))

    @classmethod
    def defaults(cls) -> "IgnoreRules":
        """Rules built from the default folder and file patterns."""
        return cls(folders=DEFAULT_IGNORE_FOLDERS, files=DEFAULT_IGNORE_FILES)

    def should_ignore(self, name: str, is_directory: bool = False) -> bool:
        """Check whether an entry name must be skipped.

        Args:
            name: Last path segment of the entry
            is_directory: Whether to test against folder rules instead of file rules

        Returns:
            True if a pattern of the matching rule set accepts the name
        """
        patterns = self.folders if is_directory else self.files
        if name in patterns:
            return True
        spec = self._folder_spec if is_directory else self._file_spec
        return spec.match_file(name)


def load_ignore_rules(path: pathlib.Path) -> IgnoreRules:
    """Read an ignore configuration file.

    The file is a JSON object with ``folders`` and ``files`` lists.

    Args:
        path: Path to the JSON file

    Returns:
        IgnoreRules built from the file

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a valid ignore configuration
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid ignore configuration {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Invalid ignore configuration {path}: expected an object")

    lists = {}
    for key in ("folders", "files"):
        value = data.get(key, [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(
                f"Invalid ignore configuration {path}: '{key}' must be a list of strings"
            )
        lists[key] = tuple(value)

    return IgnoreRules(folders=lists["folders"], files=lists["files"])


def resolve_ignore_rules(
    ignore_path: pathlib.Path | None = None, cwd: pathlib.Path | None = None
) -> IgnoreRules:
    """Pick the ignore rules for a run.

    An explicit path wins, then ``ignore.json`` in the working directory,
    then the built-in defaults.
    """
    if ignore_path is not None:
        return load_ignore_rules(ignore_path)

    local = (cwd or pathlib.Path.cwd()) / IGNORE_FILE_NAME
    if local.is_file():
        return load_ignore_rules(local)

    return IgnoreRules.defaults()
