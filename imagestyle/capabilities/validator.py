"""Capability validator for normalized arrangements.

An arrangement is usable when:
- it has a name and a non-empty model_elements list, and
- at least one of its model elements is supported by the active capabilities.

Arrangements that declare both block and inline elements are accepted as a
whole when either capability is active; unsupported element kinds are not
pruned.
"""

import logging
from typing import Optional

from ..diagnostics.reporter import DiagnosticsReporter
from ..diagnostics.schemas import DiagnosticKind
from ..styles.schemas import StyleDefinition
from .schemas import CapabilitySet, required_capability

logger = logging.getLogger(__name__)


def is_valid_arrangement(
    arrangement: StyleDefinition,
    capabilities: CapabilitySet,
    reporter: Optional[DiagnosticsReporter] = None,
) -> bool:
    """Check whether an arrangement can be used with the active capabilities.

    Invalid arrangements are reported once through the reporter (a logging
    reporter when none is given).
    """
    reporter = reporter or DiagnosticsReporter()
    model_elements = arrangement.model_elements

    if not model_elements or not arrangement.name:
        reporter.report(
            DiagnosticKind.INVALID_STYLE,
            arrangement=arrangement,
            detail="Arrangement needs a name and at least one model element",
        )
        return False

    supported = capabilities.supported_elements()
    if not any(element in supported for element in model_elements):
        reporter.report(
            DiagnosticKind.INVALID_STYLE,
            arrangement=arrangement,
            missing_capabilities=[required_capability(e) for e in model_elements],
            detail=f"None of {model_elements} is supported by the active capabilities",
        )
        return False

    return True
