from moz60check.domain.value_objects.diagnostic_line import ClassifiedLine, DiagnosticKind

RECOMMENDATION_INDENT = "  "
SUMMARY_SUFFIX = "found."


def classify_line(path: str, line: str) -> ClassifiedLine:
    """Recognise the shape of one diagnostic line reported for path.

    Location lines repeat the file path followed by ``:line:column:message``.
    Lines that look like a location but cannot be split that way are
    returned as OTHER.
    """
    if line.startswith("/"):
        return _classify_location(path, line)
    if line.startswith(RECOMMENDATION_INDENT):
        return ClassifiedLine(kind=DiagnosticKind.RECOMMENDATION, text=line)
    if line.endswith(SUMMARY_SUFFIX):
        return ClassifiedLine(kind=DiagnosticKind.SUMMARY, text=line)
    return ClassifiedLine(kind=DiagnosticKind.OTHER, text=line)


def _classify_location(path: str, line: str) -> ClassifiedLine:
    remainder = line[len(path) :] if line.startswith(path) else line.replace(path, "", 1)
    parts = remainder.split(":", 3)

    # Expected: ["", line, column, message]
    if len(parts) < 4 or parts[0]:
        return ClassifiedLine(kind=DiagnosticKind.OTHER, text=line)

    try:
        line_no = int(parts[1])
        column = int(parts[2])
    except ValueError:
        return ClassifiedLine(kind=DiagnosticKind.OTHER, text=line)

    return ClassifiedLine(
        kind=DiagnosticKind.LOCATION,
        text=line,
        line=line_no,
        column=column,
        message=parts[3].strip(),
    )
