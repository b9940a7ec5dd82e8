"""Domain services."""

from moz60check.domain.services.diagnostic_parser import parse
from moz60check.domain.services.line_classifier import classify_line

__all__ = ["classify_line", "parse"]
