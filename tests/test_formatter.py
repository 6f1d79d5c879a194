"""Tests for obsidian_lint.formatter."""

from __future__ import annotations

import json
import sys

import pytest

from obsidian_lint.errors import UnsupportedFormatError
from obsidian_lint.formatter import display_path, format_json, format_text, get_formatter
from obsidian_lint.models import BrokenLink, ValidationResult


@pytest.fixture
def result() -> ValidationResult:
    return ValidationResult(
        broken_links={
            "/vault/file2.md": [BrokenLink(link="![[missing.png]]", line=3)],
            "/vault/file1.md": [
                BrokenLink(link="[[Dead1]]", line=5),
                BrokenLink(link="[[Dead2]]", line=10),
            ],
        }
    )


class TestFormatText:
    def test_clean_vault(self):
        assert format_text(ValidationResult()) == "No broken links found.\n"

    def test_report_layout(self, result):
        assert format_text(result) == (
            "Broken links found in vault:\n"
            "\n"
            "/vault/file1.md:\n"
            "  Line 5: [[Dead1]]\n"
            "  Line 10: [[Dead2]]\n"
            "\n"
            "/vault/file2.md:\n"
            "  Line 3: ![[missing.png]]\n"
            "\n"
        )

    def test_files_sorted_by_path(self):
        result = ValidationResult(
            broken_links={
                f"/vault/{name}.md": [BrokenLink(link="[[X]]", line=1)] for name in ["zebra", "alpha", "middle"]
            }
        )

        output = format_text(result)

        assert output.index("alpha") < output.index("middle") < output.index("zebra")


class TestFormatJson:
    def test_grouped_by_file(self, result):
        parsed = json.loads(format_json(result))

        assert parsed == {
            "/vault/file2.md": [{"link": "![[missing.png]]", "line": 3}],
            "/vault/file1.md": [
                {"link": "[[Dead1]]", "line": 5},
                {"link": "[[Dead2]]", "line": 10},
            ],
        }

    def test_clean_vault_is_empty_object(self):
        output = format_json(ValidationResult())

        assert json.loads(output) == {}
        assert output.endswith("\n")


class TestDisplayPath:
    def test_plain_path_unchanged(self):
        assert display_path("/vault/Ünïcode note.md") == "/vault/Ünïcode note.md"

    @pytest.mark.skipif(sys.platform == "win32", reason="surrogateescape file names are POSIX-only")
    def test_undecodable_bytes_escaped(self):
        """Surrogate-escaped file names become printable \\xNN escapes."""
        path = "/vault/bad" + "\udcff" + "name.md"

        assert display_path(path) == "/vault/bad\\xffname.md"

    def test_report_with_undecodable_path_is_encodable(self):
        result = ValidationResult(broken_links={"/vault/\udcff.md": [BrokenLink(link="[[X]]", line=1)]})

        format_text(result).encode("utf-8")
        format_json(result).encode("utf-8")


class TestGetFormatter:
    @pytest.mark.parametrize(("name", "expected"), [("text", format_text), ("json", format_json)])
    def test_known_formats(self, name, expected):
        assert get_formatter(name) is expected

    def test_unknown_format_raises(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            get_formatter("xml")

        assert "xml" in exc_info.value.message
        assert exc_info.value.to_dict()["error"]["code"] == "UNSUPPORTED_FORMAT"
