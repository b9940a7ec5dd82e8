"""Indicator state: the list of extensions and their latest check status.

Front ends drive the indicator instead of subclassing a panel widget: they
call ``populate`` when the menu is first opened, ``activate`` or
``activate_all`` from menu items, and ``destroy`` on teardown. Status changes
are pushed to the ``on_change`` render callback.
"""

import asyncio
from collections.abc import Callable

from loguru import logger

from moz60check.application.check_orchestrator import CheckOrchestrator
from moz60check.domain.entities.diagnostic_report import DiagnosticReport
from moz60check.domain.value_objects.check_target import CheckTarget
from moz60check.domain.value_objects.target_status import TargetStatus
from moz60check.infrastructure.catalog.extension_catalog import ExtensionCatalog

RenderCallback = Callable[[CheckTarget, TargetStatus], None]


class UnknownTargetError(Exception):
    """Raised when activating a target the indicator does not know."""


class Indicator:
    def __init__(
        self,
        orchestrator: CheckOrchestrator,
        catalog: ExtensionCatalog,
        on_change: RenderCallback | None = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._catalog = catalog
        self._on_change = on_change
        self._targets: dict[str, CheckTarget] = {}
        self._statuses: dict[str, TargetStatus] = {}
        self._populated = False

        orchestrator.set_status_sink(self)

    @property
    def populated(self) -> bool:
        return self._populated

    @property
    def targets(self) -> list[CheckTarget]:
        return list(self._targets.values())

    def status(self, uuid: str) -> TargetStatus:
        if uuid not in self._statuses:
            raise UnknownTargetError(uuid)
        return self._statuses[uuid]

    def populate(self) -> None:
        """Load targets from the catalog, once.

        Extensions loaded after us would be missed if this ran at startup, so
        front ends call it when the menu is first opened.
        """
        if self._populated:
            return
        self._populated = True

        for target in self._catalog.discover():
            self._targets[target.uuid] = target
            self._statuses[target.uuid] = TargetStatus.UNCHECKED

        logger.debug("Indicator populated with {} extension(s)", len(self._targets))

    def add_target(self, target: CheckTarget) -> None:
        """Track a target that is not in the catalog, e.g. a path given on the command line."""
        self._targets[target.uuid] = target
        self._statuses.setdefault(target.uuid, TargetStatus.UNCHECKED)

    async def activate(self, uuid: str) -> DiagnosticReport:
        target = self._targets.get(uuid)
        if target is None:
            raise UnknownTargetError(uuid)
        return await self._orchestrator.check_one(target)

    def activate_all(self) -> list[asyncio.Task[DiagnosticReport]]:
        return self._orchestrator.check_all(self.targets)

    def mark(self, target: CheckTarget, status: TargetStatus) -> None:
        self._statuses[target.uuid] = status
        if self._on_change is not None:
            self._on_change(target, status)

    async def destroy(self) -> None:
        await self._orchestrator.shutdown()
        self._orchestrator.set_status_sink(None)
        self._targets.clear()
        self._statuses.clear()
        self._populated = False
