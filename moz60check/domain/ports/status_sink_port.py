from typing import Protocol

from moz60check.domain.value_objects.check_target import CheckTarget
from moz60check.domain.value_objects.target_status import TargetStatus


class StatusSinkPort(Protocol):
    def mark(self, target: CheckTarget, status: TargetStatus) -> None:
        """Record the latest check status of a target."""
        ...
