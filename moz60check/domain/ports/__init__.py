from moz60check.domain.ports.presenter_port import (
    PresentationHandle,
    PresentationLaunchError,
    PresenterPort,
)
from moz60check.domain.ports.status_sink_port import StatusSinkPort
from moz60check.domain.ports.tool_runner_port import ToolLaunchError, ToolRunnerPort

__all__ = [
    "PresentationHandle",
    "PresentationLaunchError",
    "PresenterPort",
    "StatusSinkPort",
    "ToolLaunchError",
    "ToolRunnerPort",
]
