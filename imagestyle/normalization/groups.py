"""Group resolver - cross-references group items with surviving arrangements."""

import logging
from typing import Optional, Sequence

from ..diagnostics.reporter import DiagnosticsReporter
from ..diagnostics.schemas import DiagnosticKind
from ..styles.schemas import GroupDefinition, StyleDefinition

logger = logging.getLogger(__name__)


def validate_group_items(
    group: GroupDefinition,
    arrangements: Sequence[StyleDefinition],
    reporter: Optional[DiagnosticsReporter] = None,
) -> GroupDefinition:
    """Drop group items that do not name one of the given arrangements.

    A missing ``items`` list is treated as empty. The group is reported when
    any item was dropped or nothing is left; dropping an emptied group is up
    to the caller.

    Returns:
        A copy of the group with the filtered items, in their original order.
    """
    items = group.items or []
    known = {arrangement.name for arrangement in arrangements}
    valid_items = [item for item in items if item in known]

    if not valid_items or len(valid_items) != len(items):
        dropped = [item for item in items if item not in known]
        (reporter or DiagnosticsReporter()).report(
            DiagnosticKind.INVALID_GROUP,
            group=group,
            detail=(
                f"Dropped items {dropped}" if dropped else "Group has no items"
            ),
        )

    return group.model_copy(update={"items": valid_items}, deep=True)
