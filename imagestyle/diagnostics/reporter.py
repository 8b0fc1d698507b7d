"""
Diagnostics reporter - the side channel for dropped definitions.

Every diagnostic is recorded on the reporter (so callers can inspect what was
dropped) and forwarded to a sink. The default sink writes a warning through
the standard logging module. Reporting never raises.
"""

import logging
from typing import Any, Callable, Optional

from ..styles.schemas import Capability, GroupDefinition, StyleDefinition
from .schemas import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: log the diagnostic as a warning."""
    payload = diagnostic.model_dump_json(exclude_none=True, exclude={"code", "kind"})
    logger.warning(f"{diagnostic.code} ({diagnostic.kind.value}): {payload}")


class DiagnosticsReporter:
    """Collects diagnostics and forwards them to a sink."""

    def __init__(self, sink: Optional[DiagnosticSink] = None):
        self._sink = sink or log_diagnostic
        self.diagnostics: list[Diagnostic] = []

    def report(
        self,
        kind: DiagnosticKind,
        *,
        arrangement: Optional[StyleDefinition] = None,
        group: Optional[GroupDefinition] = None,
        missing_capabilities: Optional[list[Capability]] = None,
        entry: Optional[Any] = None,
        detail: Optional[str] = None,
    ) -> Diagnostic:
        """Record a diagnostic and hand it to the sink."""
        diagnostic = Diagnostic(
            kind=kind,
            arrangement=arrangement.model_copy(deep=True) if arrangement is not None else None,
            group=group.model_copy(deep=True) if group is not None else None,
            missing_capabilities=list(missing_capabilities or []),
            entry=_json_safe(entry),
            detail=detail,
        )
        self.diagnostics.append(diagnostic)

        try:
            self._sink(diagnostic)
        except Exception as e:
            logger.error(f"Diagnostic sink failed for {diagnostic.kind.value}: {e}")

        return diagnostic

    def clear(self) -> None:
        self.diagnostics.clear()


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool, list, dict)):
        return value
    return repr(value)


def collecting_sink(collected: list[Diagnostic]) -> DiagnosticSink:
    """Build a sink that appends diagnostics to ``collected`` instead of logging."""
    return collected.append
