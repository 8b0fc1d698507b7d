"""Tests for entry parsing and definition normalization."""

from imagestyle.capabilities.validator import is_valid_arrangement
from imagestyle.diagnostics.schemas import DiagnosticKind
from imagestyle.normalization.normalizer import (
    extend_definition,
    normalize_definition,
    parse_entry,
)
from imagestyle.normalization.pipeline import normalize_styles
from imagestyle.styles.registry import get_default_catalog
from imagestyle.styles.schemas import (
    DefinitionKind,
    GroupDefinition,
    NameOnly,
    PartialOverride,
    StyleDefinition,
)

ARRANGEMENT = DefinitionKind.ARRANGEMENT
GROUP = DefinitionKind.GROUP


def normalize_arrangement(catalog, entry):
    return normalize_definition(catalog.arrangements, entry, ARRANGEMENT, catalog.icons)


class TestParseEntry:
    """Raw configuration values collapse into NameOnly | PartialOverride."""

    def test_string_is_name_only(self, reporter):
        entry = parse_entry("alignLeft", ARRANGEMENT, reporter)
        assert entry == NameOnly(name="alignLeft")

    def test_mapping_is_partial_override(self, reporter):
        entry = parse_entry({"name": "alignLeft", "title": "Custom"}, ARRANGEMENT, reporter)
        assert isinstance(entry, PartialOverride)
        assert isinstance(entry.definition, StyleDefinition)
        assert entry.name == "alignLeft"
        assert entry.explicit_fields() == {"name": "alignLeft", "title": "Custom"}

    def test_group_mapping_builds_group_definition(self, reporter):
        entry = parse_entry({"name": "mine", "items": ["full"]}, GROUP, reporter)
        assert isinstance(entry.definition, GroupDefinition)
        assert entry.definition.items == ["full"]

    def test_definition_instance_is_wrapped(self, reporter):
        definition = StyleDefinition(name="custom", model_elements=["image"])
        entry = parse_entry(definition, ARRANGEMENT, reporter)
        assert isinstance(entry, PartialOverride)
        assert entry.definition == definition

    def test_typed_entry_passes_through(self, reporter):
        entry = NameOnly(name="full")
        assert parse_entry(entry, ARRANGEMENT, reporter) is entry

    def test_wrong_type_is_dropped_and_reported(self, reporter):
        assert parse_entry(42, ARRANGEMENT, reporter) is None

        [diagnostic] = reporter.diagnostics
        assert diagnostic.kind is DiagnosticKind.INVALID_STYLE
        assert diagnostic.entry == 42
        assert "int" in diagnostic.detail

    def test_malformed_mapping_is_dropped_and_reported(self, reporter):
        raw = {"name": "broken", "model_elements": 5}
        assert parse_entry(raw, ARRANGEMENT, reporter) is None
        [diagnostic] = reporter.diagnostics
        assert diagnostic.kind is DiagnosticKind.INVALID_STYLE
        assert diagnostic.entry == raw
        assert "validation error" in diagnostic.detail

    def test_malformed_group_reports_invalid_group(self, reporter):
        assert parse_entry({"name": "g", "items": 3}, GROUP, reporter) is None
        [diagnostic] = reporter.diagnostics
        assert diagnostic.kind is DiagnosticKind.INVALID_GROUP


class TestNormalizeNameOnly:
    """Bare names resolve to catalog copies or minimal definitions."""

    def test_catalog_name_yields_copy(self, catalog):
        result = normalize_arrangement(catalog, NameOnly(name="alignLeft"))

        assert result == catalog.arrangements["alignLeft"]
        assert result is not catalog.arrangements["alignLeft"]

    def test_mutating_result_leaves_catalog_alone(self, catalog):
        result = normalize_arrangement(catalog, NameOnly(name="alignBlockLeft"))
        result.model_elements.append("imageInline")
        result.class_name = "mine"

        default = catalog.arrangements["alignBlockLeft"]
        assert default.model_elements == ["image"]
        assert default.class_name == "image-style-block-align-left"

    def test_unknown_name_yields_minimal_definition(self, catalog, both, reporter):
        result = normalize_arrangement(catalog, NameOnly(name="mystery"))

        assert result == StyleDefinition(name="mystery")
        assert result.model_dump(exclude_none=True) == {"name": "mystery"}
        assert not is_valid_arrangement(result, both, reporter)
        [diagnostic] = reporter.diagnostics
        assert diagnostic.missing_capabilities == []

    def test_unknown_group_name(self, catalog):
        result = normalize_definition(catalog.groups, NameOnly(name="mystery"), GROUP)
        assert result == GroupDefinition(name="mystery")
        assert result.items is None


class TestNormalizePartialOverride:
    """Partial objects are merged over matching catalog defaults."""

    def test_title_override_keeps_other_fields(self, catalog):
        entry = PartialOverride(definition=StyleDefinition(name="alignLeft", title="Custom"))
        result = normalize_arrangement(catalog, entry)

        default = catalog.arrangements["alignLeft"]
        assert result.title == "Custom"
        assert result.model_dump(exclude={"title"}) == default.model_dump(exclude={"title"})
        assert default.title == "Left aligned image"

    def test_explicit_none_wins(self, catalog):
        entry = PartialOverride(definition=StyleDefinition(name="alignLeft", class_name=None))
        result = normalize_arrangement(catalog, entry)

        assert result.class_name is None
        assert result.title == "Left aligned image"

    def test_model_elements_override(self, catalog):
        entry = parse_entry({"name": "alignLeft", "model_elements": ["image"]}, ARRANGEMENT)
        result = normalize_arrangement(catalog, entry)

        assert result.model_elements == ["image"]
        assert catalog.arrangements["alignLeft"].model_elements == ["image", "imageInline"]

    def test_unknown_name_passes_through(self, catalog):
        definition = StyleDefinition(
            name="custom", title="Custom", icon="not-an-alias", model_elements=["image"]
        )
        result = normalize_arrangement(catalog, PartialOverride(definition=definition))

        assert result == definition
        assert result is not definition
        assert result.class_name is None
        assert result.is_default is None

    def test_extra_fields_are_carried(self, catalog):
        entry = parse_entry({"name": "alignLeft", "tooltip": "Float left"}, ARRANGEMENT)
        result = normalize_arrangement(catalog, entry)

        assert result.model_extra == {"tooltip": "Float left"}
        assert result.class_name == "image-style-align-left"

    def test_group_override(self, catalog):
        entry = parse_entry({"name": "breakText", "items": ["alignCenter"]}, GROUP)
        result = normalize_definition(catalog.groups, entry, GROUP)

        assert result.items == ["alignCenter"]
        assert result.title == "Break text"
        assert result.default_item == "alignCenter"
        assert catalog.groups["breakText"].items == [
            "alignBlockLeft", "alignCenter", "alignBlockRight",
        ]

    def test_override_without_name(self, catalog):
        entry = parse_entry({"title": "Nameless"}, ARRANGEMENT)
        result = normalize_arrangement(catalog, entry)
        assert result.name is None
        assert result.title == "Nameless"


class TestIconResolution:
    """String icons are resolved against the icon alias table."""

    def test_alias_resolves_to_markup(self, catalog):
        entry = parse_entry(
            {"name": "custom", "icon": "left", "model_elements": ["image"]}, ARRANGEMENT
        )
        result = normalize_arrangement(catalog, entry)
        assert result.icon == catalog.icons["left"]

    def test_override_icon_on_catalog_style(self, catalog):
        entry = parse_entry({"name": "side", "icon": "center"}, ARRANGEMENT)
        result = normalize_arrangement(catalog, entry)
        assert result.icon == catalog.icons["center"]

    def test_unknown_alias_kept_literally(self, catalog):
        entry = parse_entry({"name": "custom", "icon": "not-an-alias"}, ARRANGEMENT)
        result = normalize_arrangement(catalog, entry)
        assert result.icon == "not-an-alias"

    def test_custom_markup_kept(self, catalog):
        markup = '<svg viewBox="0 0 20 20"><circle r="4"/></svg>'
        entry = parse_entry({"name": "custom", "icon": markup}, ARRANGEMENT)
        assert normalize_arrangement(catalog, entry).icon == markup

    def test_default_icon_table(self):
        entry = parse_entry({"name": "custom", "icon": "inline"}, ARRANGEMENT)
        result = normalize_definition({}, entry, ARRANGEMENT)
        assert result.icon == get_default_catalog().icons["inline"]

    def test_groups_are_not_icon_resolved(self, catalog):
        entry = parse_entry({"name": "g", "icon": "left", "items": []}, GROUP)
        result = normalize_definition(catalog.groups, entry, GROUP, catalog.icons)
        assert result.model_extra == {"icon": "left"}


def test_extend_definition_without_source():
    override = PartialOverride(definition=StyleDefinition(name="x", title="X"))
    result = extend_definition(None, override)
    assert result == override.definition
    assert result is not override.definition


class TestCamelCaseFields:
    """Configs may spell fields the way editor configs do (modelElements, className...)."""

    def test_camel_case_override_replaces_catalog_value(self, catalog):
        entry = parse_entry({"name": "alignLeft", "className": "my-left"}, ARRANGEMENT)
        assert entry.explicit_fields() == {"name": "alignLeft", "class_name": "my-left"}

        result = normalize_arrangement(catalog, entry)
        assert result.class_name == "my-left"
        assert result.model_elements == ["image", "imageInline"]
        assert result.model_extra == {}

    def test_camel_case_custom_arrangement_is_valid(self, catalog, both, reporter):
        entry = parse_entry(
            {"name": "custom", "title": "C", "modelElements": ["image"], "className": "c", "isDefault": False},
            ARRANGEMENT,
            reporter,
        )
        result = normalize_arrangement(catalog, entry)

        assert result.model_elements == ["image"]
        assert result.class_name == "c"
        assert result.is_default is False
        assert is_valid_arrangement(result, both, reporter)
        assert reporter.diagnostics == []

    def test_camel_case_group_default_item(self, catalog):
        entry = parse_entry({"name": "wrapText", "defaultItem": "alignRight"}, GROUP)
        result = normalize_definition(catalog.groups, entry, GROUP, catalog.icons)
        assert result.default_item == "alignRight"
        assert result.items == ["alignLeft", "alignRight"]

    def test_pipeline_keeps_camel_case_entries(self, catalog, both, reporter):
        result = normalize_styles(
            {
                "arrangements": [
                    {"name": "custom", "title": "C", "modelElements": ["image"], "className": "c"},
                    {"name": "alignLeft", "className": "my-left"},
                ],
                "groups": [],
            },
            both,
            catalog,
            reporter,
        )

        assert result.arrangement_names() == ["custom", "alignLeft"]
        assert result.arrangements[1].class_name == "my-left"
        assert result.diagnostics == []
