"""Diagnostics for dropped or trimmed style definitions."""

from .schemas import ERROR_CODE, Diagnostic, DiagnosticKind
from .reporter import DiagnosticsReporter, collecting_sink, log_diagnostic

__all__ = [
    "ERROR_CODE",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsReporter",
    "collecting_sink",
    "log_diagnostic",
]
