from moz60check.infrastructure.presentation.subprocess_presenter import (
    ProcessPresentationHandle,
    SubprocessPresenter,
    default_command,
    template_command,
    validate_template,
)

__all__ = [
    "ProcessPresentationHandle",
    "SubprocessPresenter",
    "default_command",
    "template_command",
    "validate_template",
]
