from enum import Enum

from pydantic import BaseModel


class DiagnosticKind(str, Enum):
    LOCATION = "location"
    RECOMMENDATION = "recommendation"
    SUMMARY = "summary"
    OTHER = "other"


class ClassifiedLine(BaseModel, frozen=True):
    """A raw diagnostic line together with the shape it was recognised as."""

    kind: DiagnosticKind
    text: str
    line: int | None = None
    column: int | None = None
    message: str | None = None
