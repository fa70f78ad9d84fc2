# tests/test_headers.py
import pytest

from folder2txt.headers import classify_line, has_header, make_header, parse_header
from folder2txt.models import Content, Header


@pytest.mark.parametrize(
    "path, expected",
    [
        ("src/a.js", "// File: src/a.js"),
        ("src/b.css", "/* File: src/b.css */"),
        ("styles/site.SCSS", "/* File: styles/site.SCSS */"),
        ("package.json", "/* File: package.json */"),
        ("Makefile", "// File: Makefile"),
        ("notes.unknownext", "// File: notes.unknownext"),
    ],
)
def test_make_header_picks_comment_style(path, expected):
    assert make_header(path) == expected


@pytest.mark.parametrize(
    "path",
    ["src/a.js", "src/b.css", "deep/dir with spaces/x.json", "README", "a/b.c/d.less"],
)
def test_header_round_trip(path):
    assert parse_header(make_header(path)) == path


def test_parse_header_tolerates_surrounding_whitespace():
    assert parse_header("   // File:   src/a.js  \r") == "src/a.js"
    assert parse_header("\t/* File: x.css*/") == "x.css"


@pytest.mark.parametrize(
    "line",
    ["", "const x = 1;", "// file: a.js", "# File: a.py", "// File:", "/* File: */", "// File:    "],
)
def test_parse_header_rejects_non_headers(line):
    assert parse_header(line) is None


def test_classify_line():
    assert classify_line("// File: a.js") == Header("a.js", "// File: a.js")
    assert classify_line("body{}") == Content("body{}")
    assert classify_line("// File:") == Content("// File:")


def test_has_header_only_checks_first_line():
    assert has_header("// File: a.js\nconst x = 1;")
    assert has_header("  /* File: a.css */\r\nbody{}")
    assert not has_header("const x = 1;\n// File: a.js")
    assert not has_header("")


def test_has_header_ignores_header_without_path():
    assert not has_header("// File:\nbeta")
    assert not has_header("/* File: */\nbody{}")
