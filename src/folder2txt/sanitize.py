"""Clean-up helpers for pasted source files and aggregate artifacts."""

import pathlib
import re

from folder2txt.headers import LINE_BREAK

ZERO_WIDTH = re.compile("[\u200b-\u200d\u2060]+")

SEPARATOR_PATTERNS = (
    re.compile(r"^\s*//\s*File:\s*\S+"),
    re.compile(r"^\s*/\*\s*File:\s*\S+.*\*/\s*$"),
    re.compile(r"^\s*--\s*File:\s*\S+"),
)

COMMENT_PREFIXES = ("//", "/*", "--")


def remove_artifacts(text: str) -> str:
    """Drop a leading BOM and zero-width characters, straighten curly quotes."""
    if text.startswith("\ufeff"):
        text = text[1:]
    text = ZERO_WIDTH.sub("", text)
    text = text.replace("\u201c", '"').replace("\u201d", '"')
    text = text.replace("\u2018", "'").replace("\u2019", "'")
    return text


def strip_code_fences(text: str) -> str:
    """Unwrap a file that was pasted whole inside a ``` fence."""
    trimmed = text.strip()
    if not trimmed.startswith("```"):
        return text

    lines = LINE_BREAK.split(trimmed)
    lines.pop(0)
    if lines and lines[-1].startswith("```"):
        lines.pop()
    return "\n".join(lines)


def clean_content(text: str) -> str:
    """Apply every clean-up step and normalize line endings to LF."""
    return strip_code_fences(remove_artifacts(text)).replace("\r\n", "\n")


def is_separator(line: str) -> bool:
    """Check whether a line is a recognized file separator."""
    return any(p.search(line) for p in SEPARATOR_PATTERNS)


def is_comment(line: str) -> bool:
    """Check whether a line starts with a //, /* or -- comment."""
    return line.lstrip().startswith(COMMENT_PREFIXES)


def strip_lines(lines: list[str]) -> list[str]:
    """Remove stray comments, trim lines and collapse runs of blank lines.

    File separator lines are kept even though they are comments.
    """
    kept: list[str] = []
    blank_run = 0

    for line in lines:
        if is_comment(line) and not is_separator(line):
            continue

        trimmed = line.strip()
        if not trimmed:
            blank_run += 1
            if blank_run > 1:
                continue
        else:
            blank_run = 0

        kept.append(trimmed)

    return kept


def strip_comments(input_path: pathlib.Path, output_path: pathlib.Path) -> None:
    """Write a copy of an aggregate artifact without unwanted comments.

    Args:
        input_path: Artifact to read
        output_path: Where to write the cleaned copy
    """
    with open(input_path, encoding="utf-8", newline="") as f:
        lines = LINE_BREAK.split(f.read())

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write("\n".join(strip_lines(lines)))
