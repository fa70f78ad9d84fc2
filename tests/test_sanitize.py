# tests/test_sanitize.py
from pathlib import Path

from folder2txt.sanitize import (
    clean_content,
    remove_artifacts,
    strip_code_fences,
    strip_comments,
    strip_lines,
)


def test_remove_artifacts():
    text = "\ufeffsay(\u201chi\u201d, \u2018x\u2019)\u200b\u2060"

    assert remove_artifacts(text) == "say(\"hi\", 'x')"


def test_strip_code_fences_unwraps_whole_file():
    assert strip_code_fences("```python\nprint(1)\n```\n") == "print(1)"
    assert strip_code_fences("\n```\na\nb\n```") == "a\nb"


def test_strip_code_fences_leaves_other_text_alone():
    text = "before\n```\ncode\n```\n"

    assert strip_code_fences(text) == text


def test_clean_content_normalizes_line_endings():
    assert clean_content("a\r\nb\r\n") == "a\nb\n"


def test_strip_lines_keeps_separators():
    lines = [
        "// File: src/a.js",
        "// a stray comment",
        "   const x = 1;   ",
        "/* File: src/b.css */",
        "/* another comment */",
        "-- File: db/schema.sql",
        "-- select comment",
        "body{}",
    ]

    assert strip_lines(lines) == [
        "// File: src/a.js",
        "const x = 1;",
        "/* File: src/b.css */",
        "-- File: db/schema.sql",
        "body{}",
    ]


def test_strip_lines_collapses_blank_runs():
    lines = ["a", "", "  ", "", "b", "", "c"]

    assert strip_lines(lines) == ["a", "", "b", "", "c"]


def test_strip_comments_writes_cleaned_copy(tmp_path: Path):
    source = tmp_path / "all.txt"
    source.write_bytes(b"// File: a.js\r\n// todo\r\nx();\r\n\r\n\r\n// File: b.js\r\ny();\r\n")
    target = tmp_path / "clean" / "all.txt"

    strip_comments(source, target)

    assert target.read_text(encoding="utf-8") == "// File: a.js\nx();\n\n// File: b.js\ny();\n"
