"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for moz60check CLI."""

    # -------------------------------------------------------------------------
    # Status colors (for success/error/warning indicators)
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING = "yellow"
    INFO = "cyan"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    HEADER = "bold"
    DIM = "grey62"
    DIM_ITALIC = "grey62 italic"

    # -------------------------------------------------------------------------
    # Table columns
    # -------------------------------------------------------------------------
    TABLE_ID = "cyan"
    TABLE_LABEL = "grey62"
    TABLE_VALUE = "bold"

    # -------------------------------------------------------------------------
    # Target status
    # -------------------------------------------------------------------------
    STATUS_UNCHECKED = "grey62"
    STATUS_CHECKING = "bold yellow"
    STATUS_CLEAN = "bold green"
    STATUS_ERRORS = "bold red"

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------
    DIAG_FILE = "bold cyan"
    DIAG_LOCATION = "bold"
    DIAG_RECOMMENDATION = "grey74"
    DIAG_CORRECT = "bold green"
    DIAG_WRONG = "bold red"
    DIAG_SUMMARY = "yellow"

    # -------------------------------------------------------------------------
    # Panel borders
    # -------------------------------------------------------------------------
    BORDER_INFO = "blue"
    BORDER_ERROR = "red"


# Default theme instance - import this in other modules
theme = Theme()
