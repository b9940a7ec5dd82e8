from moz60check.application.check_orchestrator import CheckOrchestrator
from moz60check.application.indicator import Indicator, UnknownTargetError

__all__ = ["CheckOrchestrator", "Indicator", "UnknownTargetError"]
