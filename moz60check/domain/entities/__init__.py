from moz60check.domain.entities.diagnostic_report import DiagnosticReport

__all__ = ["DiagnosticReport"]
