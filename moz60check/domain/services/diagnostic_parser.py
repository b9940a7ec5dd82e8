"""Parse moz60tool output into a per-file diagnostic report.

The linter prints one block per scanned file::

    Scanning /path/to/file.js
    /path/to/file.js:12:4: some problem
      WRONG: old code
      CORRECT: new code
    1 errors found.

Everything that is not a ``Scanning`` marker, an empty line or the literal
zero-count summary is kept verbatim under the most recently scanned file.
Non-zero summaries such as ``3 errors found.`` are kept as diagnostics.
"""

from loguru import logger

from moz60check.domain.entities.diagnostic_report import DiagnosticReport

SCANNING_MARKER = "Scanning "
ZERO_ERRORS_LINE = "0 errors found."


def parse(raw_text: str) -> DiagnosticReport:
    """Build a DiagnosticReport from raw linter output. Never raises."""
    report = DiagnosticReport()
    current_file: str | None = None
    dropped = 0

    for raw_line in raw_text.split("\n"):
        line = raw_line.rstrip("\r")

        if line.startswith(SCANNING_MARKER):
            tokens = line.split()
            current_file = tokens[1] if len(tokens) > 1 else None
        elif line == ZERO_ERRORS_LINE or not line:
            continue
        elif current_file is None:
            # No file scanned yet, nothing to attach the line to
            dropped += 1
        else:
            report.add(current_file, line)

    if dropped:
        logger.debug("Dropped {} diagnostic line(s) emitted before any Scanning marker", dropped)

    return report
