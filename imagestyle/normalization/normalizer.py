"""Definition normalizer.

Collapses configuration entries (a bare name or a partial definition object)
into complete arrangement/group definitions, filling unset fields from the
default catalog and resolving icon aliases.

Two steps:
1. parse_entry() - raw configuration value -> NameOnly | PartialOverride
2. normalize_definition() - StyleEntry -> StyleDefinition | GroupDefinition

normalize_definition() is total: every entry yields some definition. Whether
that definition is usable is decided downstream by the capability validator
and the group resolver.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ..diagnostics.reporter import DiagnosticsReporter
from ..diagnostics.schemas import DiagnosticKind
from ..styles.registry import get_default_catalog
from ..styles.schemas import (
    Definition,
    DefinitionKind,
    GroupDefinition,
    NameOnly,
    PartialOverride,
    StyleDefinition,
    StyleEntry,
)

logger = logging.getLogger(__name__)

_MODELS = {
    DefinitionKind.ARRANGEMENT: StyleDefinition,
    DefinitionKind.GROUP: GroupDefinition,
}

_DIAGNOSTIC_KINDS = {
    DefinitionKind.ARRANGEMENT: DiagnosticKind.INVALID_STYLE,
    DefinitionKind.GROUP: DiagnosticKind.INVALID_GROUP,
}


def parse_entry(
    raw: Any,
    kind: DefinitionKind,
    reporter: Optional[DiagnosticsReporter] = None,
) -> Optional[StyleEntry]:
    """Interpret a raw configuration value as a typed entry.

    Returns None (after reporting) when the value cannot be interpreted at
    all, e.g. a number, or a mapping whose fields have the wrong types.
    """
    model = _MODELS[kind]

    if isinstance(raw, (NameOnly, PartialOverride)):
        return raw
    if isinstance(raw, str):
        return NameOnly(name=raw)
    if isinstance(raw, model):
        return PartialOverride(definition=raw)
    if isinstance(raw, Mapping):
        try:
            return PartialOverride(definition=model.model_validate(dict(raw)))
        except ValidationError as e:
            detail = f"Invalid {kind.value} definition: {e.error_count()} validation error(s)"
            _report_unparsable(reporter, kind, raw, f"{detail}\n{e}")
            return None

    _report_unparsable(
        reporter, kind, raw,
        f"Expected a name or a {kind.value} definition, got {type(raw).__name__}",
    )
    return None


def _report_unparsable(
    reporter: Optional[DiagnosticsReporter],
    kind: DefinitionKind,
    raw: Any,
    detail: str,
) -> None:
    (reporter or DiagnosticsReporter()).report(
        _DIAGNOSTIC_KINDS[kind],
        entry=raw,
        detail=detail,
    )


def normalize_definition(
    defaults: Mapping[str, Definition],
    entry: StyleEntry,
    kind: DefinitionKind,
    icons: Optional[Mapping[str, str]] = None,
) -> Definition:
    """Resolve a configuration entry into a complete definition.

    Args:
        defaults: Catalog table for this kind (arrangements or groups)
        entry: A bare name or a partial override
        kind: Whether the entry is an arrangement or a group
        icons: Icon alias table (defaults to the default catalog's icons)

    Returns:
        A fresh definition. Never one of the catalog objects themselves.
    """
    if isinstance(entry, NameOnly):
        default = defaults.get(entry.name)
        if default is None:
            # Unknown name: keep just the name and let validation reject it.
            definition = _MODELS[kind](name=entry.name)
        else:
            definition = default.model_copy(deep=True)
    else:
        default = defaults.get(entry.name) if entry.name is not None else None
        definition = extend_definition(default, entry)

    if kind is DefinitionKind.ARRANGEMENT and isinstance(getattr(definition, "icon", None), str):
        if icons is None:
            icons = get_default_catalog().icons
        definition.icon = icons.get(definition.icon, definition.icon)

    return definition


def extend_definition(source: Optional[Definition], override: PartialOverride) -> Definition:
    """Fill the fields absent from an override with a catalog default.

    Every field explicitly present on the override wins, even when its value
    is None. Without a source the override is copied unchanged.
    """
    if source is None:
        return override.definition.model_copy(deep=True)

    merged = source.model_dump()
    merged.update(override.explicit_fields())
    return type(override.definition).model_validate(merged)
