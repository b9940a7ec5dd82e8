import json

from pydantic import Field, RootModel


class DiagnosticReport(RootModel[dict[str, list[str]]]):
    """Diagnostic lines reported by the linter, grouped by source file.

    Keys are file paths as printed by the linter, values keep the lines in
    emission order, duplicates included. A file without diagnostics has no
    entry at all.
    """

    root: dict[str, list[str]] = Field(default_factory=dict)

    def add(self, path: str, line: str) -> None:
        self.root.setdefault(path, []).append(line)

    @property
    def is_clean(self) -> bool:
        return not self.root

    @property
    def files(self) -> list[str]:
        return list(self.root)

    @property
    def line_count(self) -> int:
        return sum(len(lines) for lines in self.root.values())

    def lines_for(self, path: str) -> list[str]:
        return list(self.root.get(path, []))

    def to_handoff_line(self) -> str:
        """Serialize as the single JSON line sent to a presentation process."""
        return json.dumps(self.root) + "\n"

    @classmethod
    def from_handoff_line(cls, data: str) -> "DiagnosticReport":
        """Parse a hand-off line; raises ValueError on empty or malformed input."""
        if not data.strip():
            raise ValueError("Empty diagnostic report")
        report = cls.model_validate_json(data)
        # Drop empty entries so the no-empty-file invariant holds for foreign input too
        return cls({path: lines for path, lines in report.root.items() if lines})
