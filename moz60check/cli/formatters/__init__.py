from moz60check.cli.formatters.report_formatter import (
    display_name,
    format_file,
    format_read_error,
    format_report,
)
from moz60check.cli.formatters.status_formatter import (
    format_results_table,
    format_status,
    format_targets_table,
)

__all__ = [
    "display_name",
    "format_file",
    "format_read_error",
    "format_report",
    "format_results_table",
    "format_status",
    "format_targets_table",
]
