import asyncio
import sys
from collections.abc import Callable, Sequence

from loguru import logger

from moz60check.domain.ports.presenter_port import PresentationLaunchError
from moz60check.domain.value_objects.check_target import CheckTarget

CommandFactory = Callable[[CheckTarget], list[str]]

TEMPLATE_FIELDS = ("name", "uuid", "url", "path")

# What str.format raises for a malformed template
TEMPLATE_ERRORS = (KeyError, IndexError, AttributeError, TypeError, ValueError)


def default_command(target: CheckTarget) -> list[str]:
    """Run the bundled ``show`` command with the current interpreter."""
    return [
        sys.executable,
        "-m",
        "moz60check.cli.main",
        "show",
        target.name,
        target.uuid,
        target.url or "",
    ]


def template_command(template: Sequence[str]) -> CommandFactory:
    """Build a command factory from a configured argv template.

    ``{name}``, ``{uuid}``, ``{url}`` and ``{path}`` are substituted per target.
    """

    def factory(target: CheckTarget) -> list[str]:
        values = {
            "name": target.name,
            "uuid": target.uuid,
            "url": target.url or "",
            "path": str(target.path),
        }
        return [arg.format(**values) for arg in template]

    return factory


def validate_template(template: Sequence[str]) -> None:
    """Raise ValueError when template cannot be formatted for a target.

    Literal braces must be doubled (``{{`` and ``}}``).
    """
    values = {field: field for field in TEMPLATE_FIELDS}
    for arg in template:
        try:
            arg.format(**values)
        except TEMPLATE_ERRORS as e:
            raise ValueError(f"Invalid presenter command argument {arg!r}: {e!r}") from e


class ProcessPresentationHandle:
    """A presentation child process with a stdin pipe."""

    def __init__(self, process: asyncio.subprocess.Process) -> None:
        self._process = process

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def returncode(self) -> int | None:
        return self._process.returncode

    async def send(self, data: str) -> None:
        stdin = self._process.stdin
        if stdin is None:
            return
        try:
            stdin.write(data.encode("utf-8"))
            await stdin.drain()
        except OSError:
            # Child already gone, nobody left to read the report
            logger.debug("Presentation process {} exited before reading its input", self.pid)
        finally:
            stdin.close()

    def kill(self) -> None:
        try:
            self._process.kill()
        except ProcessLookupError:
            pass

    async def wait(self) -> int:
        return await self._process.wait()


class SubprocessPresenter:
    """Launch one presentation process per target."""

    def __init__(self, command_factory: CommandFactory | None = None) -> None:
        self._command_factory = command_factory or default_command

    async def launch(self, target: CheckTarget) -> ProcessPresentationHandle:
        try:
            argv = self._command_factory(target)
        except TEMPLATE_ERRORS as e:
            raise PresentationLaunchError(f"Invalid presentation command: {e!r}") from e
        if not argv:
            raise PresentationLaunchError("Empty presentation command")

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            raise PresentationLaunchError(f"Cannot launch {argv[0]}: {e}") from e

        logger.debug("Launched presentation process {} for {}", process.pid, target.uuid)
        return ProcessPresentationHandle(process)
