from enum import Enum


class TargetStatus(str, Enum):
    UNCHECKED = "unchecked"
    CHECKING = "checking"
    CLEAN = "clean"
    ERRORS = "errors"
