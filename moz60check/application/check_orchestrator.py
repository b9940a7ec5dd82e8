import asyncio
from collections.abc import Iterable, Mapping
from types import MappingProxyType, TracebackType

from loguru import logger

from moz60check.domain.entities.diagnostic_report import DiagnosticReport
from moz60check.domain.ports.presenter_port import (
    PresentationHandle,
    PresentationLaunchError,
    PresenterPort,
)
from moz60check.domain.ports.status_sink_port import StatusSinkPort
from moz60check.domain.ports.tool_runner_port import ToolLaunchError, ToolRunnerPort
from moz60check.domain.services.diagnostic_parser import parse
from moz60check.domain.value_objects.check_target import CheckTarget
from moz60check.domain.value_objects.target_status import TargetStatus


class CheckOrchestrator:
    """Run checks and keep at most one live presentation per target.

    All state is owned by the event loop thread. Handles are replaced
    without an await between looking up the old handle and dropping it, so
    two presentations for the same target are never registered together.
    """

    def __init__(
        self,
        tool_runner: ToolRunnerPort,
        presenter: PresenterPort | None = None,
        status_sink: StatusSinkPort | None = None,
    ) -> None:
        self._tool_runner = tool_runner
        self._presenter = presenter
        self._status_sink = status_sink
        self._handles: dict[str, PresentationHandle] = {}
        self._watchers: set[asyncio.Task[None]] = set()
        self._checks: set[asyncio.Task[DiagnosticReport]] = set()
        self._launch_failures: set[str] = set()
        self._closed = False

    @property
    def live_handles(self) -> Mapping[str, PresentationHandle]:
        return MappingProxyType(self._handles)

    @property
    def launch_failures(self) -> frozenset[str]:
        """UUIDs of targets whose last check could not run the linter."""
        return frozenset(self._launch_failures)

    def set_status_sink(self, status_sink: StatusSinkPort | None) -> None:
        self._status_sink = status_sink

    async def check_target(self, target: CheckTarget) -> DiagnosticReport:
        """Run the linter over target and parse its output.

        Launch failures are logged and produce an empty report.
        """
        try:
            output = await self._tool_runner.run(target)
        except (ToolLaunchError, OSError) as e:
            logger.error("Checking {} failed: {}", target.uuid, e)
            self._launch_failures.add(target.uuid)
            return DiagnosticReport()

        self._launch_failures.discard(target.uuid)
        return parse(output)

    async def check_one(self, target: CheckTarget) -> DiagnosticReport:
        logger.info("moz60tool: Checking {}...", target.uuid)
        self._mark(target, TargetStatus.CHECKING)

        report = await self.check_target(target)

        if report.is_clean:
            self._mark(target, TargetStatus.CLEAN)
        else:
            logger.info(
                "{}: {} diagnostic line(s) in {} file(s)",
                target.uuid,
                report.line_count,
                len(report.files),
            )
            self._mark(target, TargetStatus.ERRORS)
            await self.open_presentation(target, report)

        return report

    def check_all(self, targets: Iterable[CheckTarget]) -> list[asyncio.Task[DiagnosticReport]]:
        """Start an independent check for every target.

        Returns the scheduled tasks; completion order is unspecified.
        """
        logger.info("moz60tool: Checking all extensions")

        tasks = []
        for target in targets:
            task = asyncio.create_task(self.check_one(target), name=f"check-{target.uuid}")
            self._checks.add(task)
            task.add_done_callback(self._checks.discard)
            tasks.append(task)
        return tasks

    async def open_presentation(
        self,
        target: CheckTarget,
        report: DiagnosticReport,
    ) -> PresentationHandle | None:
        """Show report in a new presentation process for target.

        Any presentation already open for target is killed first. Returns the
        new handle, or None when no presenter is configured or the process
        could not be launched.
        """
        if self._presenter is None:
            return None
        if self._closed:
            logger.debug("Not presenting {}, orchestrator is shut down", target.uuid)
            return None

        self._drop_handle(target.uuid)

        try:
            handle = await self._presenter.launch(target)
        except PresentationLaunchError as e:
            logger.error("Cannot show results for {}: {}", target.uuid, e)
            return None

        # Another check of the same target may have registered while we were launching
        self._drop_handle(target.uuid)
        self._handles[target.uuid] = handle

        watcher = asyncio.create_task(
            self._watch(target.uuid, handle), name=f"presentation-{target.uuid}"
        )
        self._watchers.add(watcher)
        watcher.add_done_callback(self._watchers.discard)

        try:
            await handle.send(report.to_handoff_line())
        except (OSError, RuntimeError) as e:
            logger.debug("Could not send results to presentation for {}: {}", target.uuid, e)

        return handle

    async def shutdown(self) -> None:
        """Cancel pending checks and kill every live presentation."""
        self._closed = True

        for task in list(self._checks):
            task.cancel()
        if self._checks:
            await asyncio.gather(*self._checks, return_exceptions=True)

        for uuid in list(self._handles):
            self._drop_handle(uuid)
        if self._watchers:
            await asyncio.gather(*self._watchers, return_exceptions=True)

    async def __aenter__(self) -> "CheckOrchestrator":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()

    async def wait_presentations(self) -> None:
        """Wait until every presentation process has exited."""
        while self._watchers:
            await asyncio.gather(*self._watchers, return_exceptions=True)

    def _drop_handle(self, uuid: str) -> None:
        handle = self._handles.pop(uuid, None)
        if handle is not None:
            logger.debug("Closing previous presentation {} for {}", handle.pid, uuid)
            handle.kill()

    async def _watch(self, uuid: str, handle: PresentationHandle) -> None:
        try:
            returncode = await handle.wait()
            logger.debug("Presentation {} for {} exited with {}", handle.pid, uuid, returncode)
        except Exception as e:
            logger.error("Waiting for presentation of {} failed: {}", uuid, e)
        finally:
            if self._handles.get(uuid) is handle:
                del self._handles[uuid]

    def _mark(self, target: CheckTarget, status: TargetStatus) -> None:
        if self._status_sink is not None:
            self._status_sink.mark(target, status)
