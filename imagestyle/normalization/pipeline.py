"""Styles normalization pipeline.

raw config -> parse entries -> normalize definitions -> validate arrangements
-> resolve groups -> NormalizedStyles

Nothing here raises for malformed user configuration. Dropped or trimmed
definitions are reported through the DiagnosticsReporter and returned on
the result.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from ..capabilities.defaults import get_default_styles_configuration
from ..capabilities.schemas import CapabilitySet
from ..capabilities.validator import is_valid_arrangement
from ..diagnostics.reporter import DiagnosticsReporter
from ..diagnostics.schemas import Diagnostic, DiagnosticKind
from ..styles.registry import DefaultCatalog, get_default_catalog
from ..styles.schemas import (
    DefinitionKind,
    GroupDefinition,
    StyleDefinition,
    StylesConfig,
)
from .groups import validate_group_items
from .normalizer import normalize_definition, parse_entry

logger = logging.getLogger(__name__)

ConfiguredStyles = Union[StylesConfig, Mapping[str, Any], None]


class NormalizedStyles(BaseModel):
    """Fully resolved arrangements and groups, plus what was dropped on the way."""
    arrangements: list[StyleDefinition] = Field(default_factory=list)
    groups: list[GroupDefinition] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    def arrangement_names(self) -> list[str]:
        return [a.name for a in self.arrangements]

    def group_names(self) -> list[str]:
        return [g.name for g in self.groups]


def normalize_styles(
    configured_styles: ConfiguredStyles,
    capabilities: CapabilitySet,
    catalog: Optional[DefaultCatalog] = None,
    reporter: Optional[DiagnosticsReporter] = None,
) -> NormalizedStyles:
    """Return the normalized and validated arrangements and groups.

    - Every arrangement carries concrete icon markup where an alias was used.
    - Arrangements not supported by the active capabilities are dropped.
    - Group items that are not surviving arrangements are dropped.
    - Groups left without items are dropped.

    Args:
        configured_styles: StylesConfig, a mapping with 'arrangements' and
            'groups' keys, or None
        capabilities: Active block/inline capabilities
        catalog: Default catalog (the global one when omitted)
        reporter: Diagnostics reporter (a logging one when omitted)
    """
    catalog = catalog or get_default_catalog()
    reporter = reporter or DiagnosticsReporter()
    first_diagnostic = len(reporter.diagnostics)

    if configured_styles is not None and not isinstance(configured_styles, (StylesConfig, Mapping)):
        reporter.report(
            DiagnosticKind.INVALID_STYLE,
            entry=configured_styles,
            detail=f"Styles configuration must be a mapping, got {type(configured_styles).__name__}",
        )
        configured_styles = None

    configured_arrangements = _section(configured_styles, "arrangements", reporter)

    arrangements = []
    for raw in configured_arrangements:
        entry = parse_entry(raw, DefinitionKind.ARRANGEMENT, reporter)
        if entry is None:
            continue
        arrangement = normalize_definition(
            catalog.arrangements, entry, DefinitionKind.ARRANGEMENT, catalog.icons
        )
        if is_valid_arrangement(arrangement, capabilities, reporter):
            arrangements.append(arrangement)

    configured_groups = _section(configured_styles, "groups", reporter)
    groups = []
    for raw in configured_groups:
        entry = parse_entry(raw, DefinitionKind.GROUP, reporter)
        if entry is None:
            continue
        group = normalize_definition(catalog.groups, entry, DefinitionKind.GROUP)
        group = validate_group_items(group, arrangements, reporter)
        if group.items:
            groups.append(group)

    result = NormalizedStyles(
        arrangements=arrangements,
        groups=groups,
        diagnostics=reporter.diagnostics[first_diagnostic:],
    )
    logger.debug(
        f"Normalized styles: {len(arrangements)}/{len(configured_arrangements)} arrangements, "
        f"{len(groups)}/{len(configured_groups)} groups, {len(result.diagnostics)} diagnostics"
    )
    return result


def resolve_styles(
    configured_styles: ConfiguredStyles,
    capabilities: CapabilitySet,
    catalog: Optional[DefaultCatalog] = None,
    reporter: Optional[DiagnosticsReporter] = None,
) -> NormalizedStyles:
    """Normalize the configured styles, or the defaults when nothing is configured."""
    if configured_styles is None:
        configured_styles = get_default_styles_configuration(
            capabilities.block, capabilities.inline
        )
    return normalize_styles(configured_styles, capabilities, catalog, reporter)


def _section(
    configured_styles: ConfiguredStyles,
    key: str,
    reporter: DiagnosticsReporter,
) -> list:
    """Pull the list of entries for one section out of the configuration."""
    if configured_styles is None:
        return []
    if isinstance(configured_styles, StylesConfig):
        return list(getattr(configured_styles, key))

    value = configured_styles.get(key) if isinstance(configured_styles, Mapping) else None
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)

    kind = DiagnosticKind.INVALID_STYLE if key == "arrangements" else DiagnosticKind.INVALID_GROUP
    reporter.report(
        kind,
        entry=value,
        detail=f"'{key}' must be a list, got {type(value).__name__}",
    )
    return []
