"""File system walking and file reading utilities."""

import errno
import os
import pathlib
import stat
from collections.abc import Iterable, Iterator

from folder2txt.ignore_rules import IgnoreRules


def iter_files(
    root: pathlib.Path,
    rules: IgnoreRules,
    skip: Iterable[pathlib.Path] = (),
) -> Iterator[pathlib.Path]:
    """Yield every non-ignored file under a directory.

    Entries are visited in name order; a subdirectory is walked completely
    before its next sibling. Files are checked against the file rules,
    directories against the folder rules.

    Args:
        root: Directory to walk
        rules: Ignore rules
        skip: Files that must never be yielded (e.g. the archive being written)

    Yields:
        Paths of files to archive, rooted at ``root``

    Raises:
        OSError: If an entry cannot be listed or inspected, or if a symbolic
            link leads back into a directory that is already being walked
    """
    skip_resolved = {pathlib.Path(p).resolve() for p in skip}
    yield from _walk(pathlib.Path(root), rules, skip_resolved, set())


def _walk(
    directory: pathlib.Path,
    rules: IgnoreRules,
    skip: set[pathlib.Path],
    ancestors: set[tuple[int, int]],
) -> Iterator[pathlib.Path]:
    dir_stat = directory.stat()
    key = (dir_stat.st_dev, dir_stat.st_ino)
    if key in ancestors:
        raise OSError(errno.ELOOP, "Directory cycle detected", str(directory))
    ancestors.add(key)

    try:
        for name in sorted(os.listdir(directory)):
            entry = directory / name
            mode = entry.stat().st_mode

            if stat.S_ISREG(mode):
                if rules.should_ignore(name, is_directory=False):
                    continue
                if skip and entry.resolve() in skip:
                    continue
                yield entry
            elif stat.S_ISDIR(mode):
                if rules.should_ignore(name, is_directory=True):
                    continue
                yield from _walk(entry, rules, skip, ancestors)
    finally:
        ancestors.discard(key)


def count_files(
    root: pathlib.Path,
    rules: IgnoreRules,
    limit: int,
    skip: Iterable[pathlib.Path] = (),
) -> int:
    """Count the files an archive of ``root`` would contain.

    Counting stops as soon as the total goes over ``limit``, so any
    returned value greater than ``limit`` means "too many".

    Args:
        root: Directory to walk
        rules: Ignore rules
        limit: Ceiling on the number of files
        skip: Files left out of the count

    Returns:
        Number of files, at most ``limit + 1``
    """
    count = 0
    for _ in iter_files(root, rules, skip):
        count += 1
        if count > limit:
            break
    return count


def header_path(file_path: pathlib.Path, base: pathlib.Path | None = None) -> str:
    """Path of a file as recorded in its header.

    Relative to ``base`` (the working directory by default), with ``/``
    separators.
    """
    base = base or pathlib.Path.cwd()
    relative = os.path.relpath(file_path.absolute(), base.absolute())
    return relative.replace(os.sep, "/")


def read_text(file_path: pathlib.Path) -> str:
    """Read a file as UTF-8 text, keeping its line endings untouched."""
    with open(file_path, encoding="utf-8", errors="ignore", newline="") as f:
        return f.read()
