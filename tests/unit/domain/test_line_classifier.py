"""Tests for diagnostic line classification."""

import pytest

from moz60check.domain.services.line_classifier import classify_line
from moz60check.domain.value_objects.diagnostic_line import DiagnosticKind

PATH = "/home/user/ext/a@b/extension.js"


class TestClassifyLine:
    """Tests for classify_line."""

    def test_location_line(self) -> None:
        """Location lines give line, column and message."""
        result = classify_line(PATH, f"{PATH}:12:4: Lang.Class is deprecated")

        assert result.kind == DiagnosticKind.LOCATION
        assert result.line == 12
        assert result.column == 4
        assert result.message == "Lang.Class is deprecated"

    def test_location_message_may_contain_colons(self) -> None:
        """Colons in the message are kept."""
        result = classify_line(PATH, f"{PATH}:1:2: use this: not that")

        assert result.kind == DiagnosticKind.LOCATION
        assert result.message == "use this: not that"

    def test_location_with_other_path(self) -> None:
        """A location for another file keeps its full text."""
        result = classify_line(PATH, "/other/file.js:1:2: message")

        assert result.kind == DiagnosticKind.OTHER

    @pytest.mark.parametrize(
        "line",
        [
            f"{PATH}:x:4: bad line number",
            f"{PATH}:12: missing column",
            f"{PATH}",
        ],
    )
    def test_malformed_location_falls_back_to_other(self, line: str) -> None:
        """Unparsable location lines are OTHER."""
        result = classify_line(PATH, line)

        assert result.kind == DiagnosticKind.OTHER
        assert result.text == line

    def test_recommendation_line(self) -> None:
        """Indented lines are recommendations."""
        result = classify_line(PATH, "  CORRECT: class Foo {")

        assert result.kind == DiagnosticKind.RECOMMENDATION

    def test_summary_line(self) -> None:
        """Lines ending in found. are summaries."""
        result = classify_line(PATH, "3 errors found.")

        assert result.kind == DiagnosticKind.SUMMARY

    def test_other_line(self) -> None:
        """Anything else is OTHER."""
        result = classify_line(PATH, "something else")

        assert result.kind == DiagnosticKind.OTHER
        assert result.line is None
