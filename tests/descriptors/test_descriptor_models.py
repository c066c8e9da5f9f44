"""Tests for the frozen descriptor graph, metadata and diagnostics."""

import dataclasses

import pytest

from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.builders import TagHelperDescriptorBuilder
from taghelpers.descriptors.diagnostics import DiagnosticSeverity, TagHelperDiagnostics
from taghelpers.descriptors.metadata import MetadataCollection
from taghelpers.descriptors.models import TagHelperDescriptor, TagHelperKind


def _build(tag: str = "p", *, attribute_name: str = "value") -> TagHelperDescriptor:
    builder = TagHelperDescriptorBuilder(TagHelperKind.DEFAULT, "Test.PTagHelper", "TestAssembly")
    builder.set_type_name("Test.PTagHelper", "Test", "PTagHelper")
    builder.tag_matching_rule(tag).attribute("class")
    attribute = builder.bind_attribute()
    attribute.name = attribute_name
    attribute.type_name = "System.String"
    attribute.set_property_name("Value")
    return builder.build()


class TestMetadataCollection:
    def test_given_same_items_in_any_order_when_compared_then_equal(self) -> None:
        # Given
        first = MetadataCollection({"a": "1", "b": "2"})
        second = MetadataCollection([("b", "2"), ("a", "1")])

        # Then
        assert first == second
        assert hash(first) == hash(second)
        assert first == {"a": "1", "b": "2"}

    def test_given_collection_when_iterated_then_behaves_as_mapping(self) -> None:
        collection = MetadataCollection({"z": "1", "a": "2"})

        assert list(collection) == ["a", "z"]
        assert collection.get("missing") is None
        assert len(collection) == 2

    def test_given_bool_when_stringified_then_matches_wire_form(self) -> None:
        assert keys.bool_string(True) == "True"
        assert keys.bool_string(False) == "False"


class TestDescriptorEquality:
    def test_given_identical_builds_when_compared_then_equal_and_hash_equal(self) -> None:
        # Given
        first, second = _build(), _build()

        # Then
        assert first == second
        assert hash(first) == hash(second)

    def test_given_different_rule_when_compared_then_not_equal(self) -> None:
        assert _build("p") != _build("div")

    def test_given_descriptor_when_mutated_then_rejected(self) -> None:
        descriptor = _build()

        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.name = "Other"  # type: ignore[misc]

    def test_given_built_descriptor_when_inspected_then_children_link_to_parent(self) -> None:
        descriptor = _build()

        assert descriptor.bound_attributes[0].parent is descriptor

    def test_given_no_rules_when_constructed_directly_then_rejected(self) -> None:
        with pytest.raises(ValueError):
            TagHelperDescriptor(
                kind=TagHelperKind.DEFAULT,
                name="Test.Empty",
                assembly_name="TestAssembly",
                display_name="Test.Empty",
                type_name="Test.Empty",
                tag_matching_rules=(),
            )


class TestDiagnosticsAggregation:
    def test_given_nested_diagnostics_when_collected_then_rules_then_attributes_then_self(self) -> None:
        # Given
        builder = TagHelperDescriptorBuilder(TagHelperKind.DEFAULT, "Test.Bad", "TestAssembly")
        builder.tag_matching_rule("b@d").attribute("x=")
        attribute = builder.bind_attribute()
        attribute.name = "a/b"
        attribute.type_name = "System.String"
        builder.allow_child_tag("")

        # When
        ids = [d.id for d in builder.build().get_all_diagnostics()]

        # Then
        assert ids == ["RZ3012", "RZ3008", "RZ3003", "RZ3000"]

    def test_given_valid_descriptor_when_checked_then_no_errors(self) -> None:
        assert not _build().has_errors

    def test_given_bad_attribute_when_checked_then_descriptor_has_errors(self) -> None:
        assert _build(attribute_name="a b").has_errors


class TestDiagnostic:
    def test_given_factory_when_created_then_message_formatted(self) -> None:
        # When
        diagnostic = TagHelperDiagnostics.invalid_targeted_tag_name("p@", "@")

        # Then
        assert diagnostic.id == "RZ3008"
        assert diagnostic.severity is DiagnosticSeverity.ERROR
        assert diagnostic.is_error
        assert diagnostic.message == "Tag helpers cannot target tag name 'p@' because it contains a '@' character."
        assert str(diagnostic).startswith("RZ3008: ")

    def test_given_diagnostic_when_to_dict_then_args_stringified(self) -> None:
        result = TagHelperDiagnostics.invalid_restricted_child("Test.List", "l i", " ").to_dict()

        assert result["id"] == "RZ3001"
        assert result["args"] == ["Test.List", "l i", " "]
        assert result["severity"] == "error"

    def test_given_same_inputs_when_created_twice_then_equal(self) -> None:
        assert TagHelperDiagnostics.invalid_targeted_tag_name("x!", "!") == TagHelperDiagnostics.invalid_targeted_tag_name(
            "x!", "!"
        )


class TestSerialization:
    def test_given_descriptor_when_to_dict_then_nested_graph_serialized(self) -> None:
        result = _build().to_dict()

        assert result["kind"] == "Default"
        assert result["tag_matching_rules"][0]["tag_name"] == "p"
        assert result["tag_matching_rules"][0]["attributes"][0]["name"] == "class"
        assert result["bound_attributes"][0]["name"] == "value"
        assert result["has_errors"] is False
