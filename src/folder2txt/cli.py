"""Command-line interfaces for folder2txt."""

import argparse
import pathlib
import sys
import time

from folder2txt.archive import archive
from folder2txt.constants import DEFAULT_LANG, MAX_FILES
from folder2txt.ignore_rules import resolve_ignore_rules
from folder2txt.models import ArchiveSettings, get_messages
from folder2txt.restore import restore
from folder2txt.sanitize import strip_comments

ARCHIVE_KEYS = ("folder", "output", "lang", "limit", "ignore", "clean")


def parse_option(value: str) -> tuple[str, str]:
    """Split a ``key=value`` command-line argument."""
    key, sep, val = value.partition("=")
    if not sep or key not in ARCHIVE_KEYS:
        raise argparse.ArgumentTypeError(
            f"expected one of {', '.join(k + '=...' for k in ARCHIVE_KEYS)}, got {value!r}"
        )
    return key, val


def parse_bool(value: str) -> bool:
    """Interpret a ``clean=`` value; anything but 1/true/yes/on is False."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def build_archive_parser() -> argparse.ArgumentParser:
    """Build the parser for the archiver's ``key=value`` arguments."""
    parser = argparse.ArgumentParser(
        prog="folder2txt",
        description="Concatenate a folder's text files into one file with per-file headers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "options:\n"
            "  folder=PATH   folder to archive (required)\n"
            "  output=PATH   aggregate file to write (required)\n"
            f"  lang=CODE     message language (default: {DEFAULT_LANG})\n"
            f"  limit=N       maximum number of files (default: {MAX_FILES})\n"
            "  ignore=PATH   JSON file with 'folders' and 'files' patterns\n"
            "  clean=BOOL    strip BOMs, zero-width characters and code fences"
        ),
    )
    parser.add_argument("options", nargs="*", type=parse_option, metavar="KEY=VALUE")
    return parser


def main(argv: list[str] | None = None):
    """Entry point of the archiver: ``folder2txt folder=... output=... [lang=...]``."""
    parser = build_archive_parser()
    options = dict(parser.parse_args(argv).options)
    messages = get_messages(options.get("lang"))

    if not options.get("folder") or not options.get("output"):
        print(messages["Usage"], file=sys.stderr)
        sys.exit(1)

    folder = pathlib.Path(options["folder"]).resolve()
    if not folder.is_dir():
        print(f"Error: Directory not found: {options['folder']}", file=sys.stderr)
        sys.exit(1)

    try:
        limit = int(options.get("limit", MAX_FILES))
    except ValueError:
        print(f"Error: limit must be an integer, got {options['limit']!r}", file=sys.stderr)
        sys.exit(1)

    ignore_path = options.get("ignore")
    try:
        rules = resolve_ignore_rules(pathlib.Path(ignore_path) if ignore_path else None)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    settings = ArchiveSettings(
        folder=folder,
        output=pathlib.Path(options["output"]).resolve(),
        lang=options.get("lang") or DEFAULT_LANG,
        limit=limit,
        rules=rules,
        clean=parse_bool(options.get("clean", "false")),
    )

    if not archive(settings):
        sys.exit(1)


def restore_main(argv: list[str] | None = None):
    """Entry point of the restorer: ``txt2folder <aggregate file>``."""
    parser = argparse.ArgumentParser(
        prog="txt2folder",
        description="Recreate the files recorded in an aggregate file produced by folder2txt.",
    )
    parser.add_argument("input", help="The aggregate file to restore.")
    parser.add_argument(
        "--into",
        default=None,
        help="Directory the recorded paths are relative to (default: current directory).",
    )
    args = parser.parse_args(argv)

    target_dir = pathlib.Path(args.into) if args.into else None
    started = time.perf_counter()
    written = restore(pathlib.Path(args.input), target_dir)
    elapsed = time.perf_counter() - started
    print(f"\n✅ Restored {written} files in {elapsed:.4f} seconds")


def strip_main(argv: list[str] | None = None):
    """Entry point of the comment stripper: ``folder2txt-strip <input> <output>``."""
    parser = argparse.ArgumentParser(
        prog="folder2txt-strip",
        description=(
            "Remove comments that are not file headers from an aggregate file, "
            "trim lines and collapse blank lines."
        ),
    )
    parser.add_argument("input", help="The aggregate file to clean.")
    parser.add_argument("output", help="Where to write the cleaned copy.")
    args = parser.parse_args(argv)

    output_path = pathlib.Path(args.output)
    strip_comments(pathlib.Path(args.input), output_path)
    print(f"Done! Wrote cleaned content to {output_path}")


if __name__ == "__main__":
    main()
