from typing import Protocol

from moz60check.domain.value_objects.check_target import CheckTarget


class PresentationLaunchError(Exception):
    """Raised when a presentation process could not be started."""


class PresentationHandle(Protocol):
    """A live presentation process showing one target's report."""

    @property
    def pid(self) -> int:
        """Process id of the presentation process."""
        ...

    @property
    def returncode(self) -> int | None:
        """Exit code, or None while the process is running."""
        ...

    async def send(self, data: str) -> None:
        """Write data to the process' stdin and close it."""
        ...

    def kill(self) -> None:
        """Forcibly terminate the process."""
        ...

    async def wait(self) -> int:
        """Wait for the process to exit and return its exit code."""
        ...


class PresenterPort(Protocol):
    async def launch(self, target: CheckTarget) -> PresentationHandle:
        """Start a presentation process for target.

        Raises PresentationLaunchError on failure.
        """
        ...
