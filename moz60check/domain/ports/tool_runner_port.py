from abc import ABC, abstractmethod

from moz60check.domain.value_objects.check_target import CheckTarget


class ToolLaunchError(Exception):
    """Raised when the linter could not be started or its output not read."""

    def __init__(self, target_uuid: str, reason: str) -> None:
        super().__init__(f"moz60tool failed for {target_uuid}: {reason}")
        self.target_uuid = target_uuid
        self.reason = reason


class ToolRunnerPort(ABC):
    """Port for running the linter over a target directory."""

    @abstractmethod
    async def run(self, target: CheckTarget) -> str:
        """Run the linter over every source file of the target.

        Returns the concatenated standard output. Raises ToolLaunchError when
        the tool cannot be launched or read.
        """
