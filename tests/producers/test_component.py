"""Tests for component and child-content descriptors."""

from collections.abc import Callable

import pytest

from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.models import TagHelperDescriptor, TagHelperKind
from taghelpers.producers.component import (
    ComponentTagHelperProducer,
    PropertyKind,
    classify_property,
    collect_parameters,
    format_type_parameter_constraints,
)
from taghelpers.symbols import wellknown
from taghelpers.symbols.facade import TypeKind
from taghelpers.symbols.model import (
    SymbolAttribute,
    SymbolProperty,
    SymbolType,
    SymbolTypeParameter,
    SymbolTypeReference,
)
from taghelpers.typenames.global_qualified import GlobalQualifiedTypeNameRewriter

PARAMETER = SymbolAttribute(wellknown.PARAMETER_ATTRIBUTE)
STRING = SymbolTypeReference("System.String")
RENDER_FRAGMENT = SymbolTypeReference(wellknown.RENDER_FRAGMENT, kind=TypeKind.DELEGATE)


def parameter(name: str, type_ref: SymbolTypeReference = STRING, **kwargs) -> SymbolProperty:
    attributes = kwargs.pop("attributes", (PARAMETER,))
    return SymbolProperty(name, type_ref, attributes=attributes, **kwargs)


def render_fragment_of(argument: str) -> SymbolTypeReference:
    return SymbolTypeReference(
        f"Microsoft.AspNetCore.Components.RenderFragment<{argument}>",
        kind=TypeKind.DELEGATE,
        constructed_from=wellknown.RENDER_FRAGMENT_OF_T,
        has_type_parameter=argument.startswith("T"),
    )


def attribute_named(descriptor: TagHelperDescriptor, name: str):
    return next(a for a in descriptor.bound_attributes if a.name == name)


class TestClassifyProperty:
    @pytest.mark.parametrize(
        ("prop", "expected"),
        [
            (parameter("Title"), PropertyKind.DEFAULT),
            (parameter("Mode", SymbolTypeReference("Test.Mode", kind=TypeKind.ENUM)), PropertyKind.ENUM),
            (parameter("ChildContent", RENDER_FRAGMENT), PropertyKind.CHILD_CONTENT),
            (parameter("Row", render_fragment_of("TItem")), PropertyKind.CHILD_CONTENT),
            (
                parameter("OnClick", SymbolTypeReference(wellknown.EVENT_CALLBACK, kind=TypeKind.STRUCT)),
                PropertyKind.EVENT_CALLBACK,
            ),
            (
                parameter("OnSave", SymbolTypeReference("System.Action", kind=TypeKind.DELEGATE)),
                PropertyKind.DELEGATE,
            ),
            (parameter("Hidden", attributes=()), PropertyKind.IGNORED),
            (parameter("Private", is_public=False), PropertyKind.IGNORED),
            (parameter("Static", is_static=True), PropertyKind.IGNORED),
            (parameter("ReadOnly", has_setter=False), PropertyKind.IGNORED),
            (parameter("PrivateSet", has_public_setter=False), PropertyKind.IGNORED),
            (parameter("this[]", is_indexer=True), PropertyKind.IGNORED),
        ],
    )
    def test_given_property_when_classified_then_kind_returned(
        self, prop: SymbolProperty, expected: PropertyKind
    ) -> None:
        assert classify_property(prop) is expected


class TestCollectParameters:
    def test_given_hierarchy_when_collected_then_stops_at_component_base(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        component_base = SymbolType(
            "ComponentBase",
            namespace="Microsoft.AspNetCore.Components",
            properties=(parameter("Framework"),),
        )
        base = make_component("Base", base_type=component_base, properties=[parameter("Title"), parameter("Size")])
        derived = make_component(
            "Derived",
            base_type=base,
            properties=[
                parameter("Title", is_override=True, attributes=()),
                parameter("Size", attributes=()),
                parameter("Own"),
            ],
        )

        # When
        found = [(p.name, kind) for p, kind in collect_parameters(derived)]

        # Then
        assert found == [
            ("Size", PropertyKind.IGNORED),
            ("Own", PropertyKind.DEFAULT),
            ("Title", PropertyKind.DEFAULT),
        ]


class TestTypeParameterConstraints:
    @pytest.mark.parametrize(
        ("type_parameter", "expected"),
        [
            (SymbolTypeParameter("T"), None),
            (SymbolTypeParameter("T", has_reference_type_constraint=True), "where T : class"),
            (
                SymbolTypeParameter("T", has_unmanaged_type_constraint=True, has_value_type_constraint=True),
                "where T : unmanaged",
            ),
            (SymbolTypeParameter("T", has_value_type_constraint=True), "where T : struct"),
            (
                SymbolTypeParameter(
                    "T",
                    has_reference_type_constraint=True,
                    has_not_null_constraint=True,
                    constraint_types=("System.IDisposable", "Test.IHas<TOther>"),
                    has_constructor_constraint=True,
                ),
                "where T : class, notnull, global::System.IDisposable, global::Test.IHas<TOther>, new()",
            ),
        ],
    )
    def test_given_type_parameter_when_formatted_then_constraints_in_clause_order(
        self, type_parameter: SymbolTypeParameter, expected: str | None
    ) -> None:
        rewriter = GlobalQualifiedTypeNameRewriter(["T", "TOther"])

        assert format_type_parameter_constraints(type_parameter, rewriter) == expected


class TestComponentTagHelperProducer:
    def test_given_component_when_produced_then_short_and_fully_qualified_descriptors(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        symbol = make_component("MyComponent", properties=[parameter("Title")])

        # When
        short_name, fully_qualified = ComponentTagHelperProducer().produce(symbol)

        # Then
        for descriptor in (short_name, fully_qualified):
            assert descriptor.kind is TagHelperKind.COMPONENT
            assert descriptor.name == "Test.MyComponent"
            assert descriptor.assembly_name == "TestAssembly"
            assert descriptor.type_name == "Test.MyComponent"
            assert descriptor.case_sensitive
            assert not descriptor.classify_attributes_only
            assert descriptor.metadata[keys.Runtime.NAME] == keys.Runtime.COMPONENT
            assert descriptor.type_namespace == "Test"
            assert descriptor.type_name_identifier == "MyComponent"
            assert not descriptor.has_errors

        assert short_name.tag_matching_rules[0].tag_name == "MyComponent"
        assert not short_name.is_fully_qualified_name_match
        assert fully_qualified.tag_matching_rules[0].tag_name == "Test.MyComponent"
        assert fully_qualified.is_fully_qualified_name_match
        assert short_name.bound_attributes == fully_qualified.bound_attributes

    def test_given_parameters_when_produced_then_bound_attributes_carry_metadata(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        symbol = make_component(
            "MyComponent",
            properties=[
                parameter("Title", attributes=(PARAMETER, SymbolAttribute(wellknown.EDITOR_REQUIRED_ATTRIBUTE))),
                parameter("Mode", SymbolTypeReference("Test.Mode", kind=TypeKind.ENUM)),
                parameter(
                    "OnClick",
                    SymbolTypeReference(
                        "Microsoft.AspNetCore.Components.EventCallback<System.Int32>",
                        kind=TypeKind.STRUCT,
                        constructed_from=wellknown.EVENT_CALLBACK_OF_T,
                    ),
                ),
                parameter(
                    "OnSave",
                    SymbolTypeReference(
                        "System.Func<System.Threading.Tasks.Task>", kind=TypeKind.DELEGATE, returns_awaitable=True
                    ),
                ),
                parameter("Ignored", attributes=()),
            ],
        )

        # When
        descriptor, _ = ComponentTagHelperProducer().produce(symbol)

        # Then
        assert [a.name for a in descriptor.bound_attributes] == ["Title", "Mode", "OnClick", "OnSave"]

        title = attribute_named(descriptor, "Title")
        assert title.is_editor_required
        assert title.is_string_property
        assert title.metadata[keys.Common.PROPERTY_NAME] == "Title"
        assert title.metadata[keys.Common.GLOBALLY_QUALIFIED_TYPE_NAME] == "global::System.String"

        assert attribute_named(descriptor, "Mode").is_enum
        assert attribute_named(descriptor, "OnClick").is_event_callback_property

        on_save = attribute_named(descriptor, "OnSave")
        assert on_save.is_delegate_property
        assert on_save.metadata[keys.Components.DELEGATE_WITH_AWAITABLE_RESULT] == keys.TRUE
        assert (
            on_save.metadata[keys.Common.GLOBALLY_QUALIFIED_TYPE_NAME]
            == "global::System.Func<global::System.Threading.Tasks.Task>"
        )

    def test_given_generic_component_when_produced_then_type_parameters_bound(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        symbol = make_component(
            "Grid",
            type_parameters=(
                SymbolTypeParameter("TItem", has_reference_type_constraint=True),
                SymbolTypeParameter("TKey"),
            ),
            attributes=(SymbolAttribute(wellknown.CASCADING_TYPE_PARAMETER_ATTRIBUTE, ("TItem",)),),
            properties=[
                parameter(
                    "Items",
                    SymbolTypeReference("System.Collections.Generic.List<TItem>", has_type_parameter=True),
                ),
            ],
        )

        # When
        descriptor, fully_qualified = ComponentTagHelperProducer().produce(symbol)

        # Then
        assert descriptor.name == "Test.Grid<TItem>"
        assert descriptor.tag_matching_rules[0].tag_name == "Grid"
        assert fully_qualified.tag_matching_rules[0].tag_name == "Test.Grid"
        assert descriptor.metadata[keys.Components.GENERIC_TYPED] == keys.TRUE
        assert [a.name for a in descriptor.bound_attributes] == ["TItem", "TKey", "Items"]

        item = attribute_named(descriptor, "TItem")
        assert item.type_name == wellknown.SYSTEM_TYPE
        assert item.metadata[keys.Components.TYPE_PARAMETER] == keys.TRUE
        assert item.metadata[keys.Components.TYPE_PARAMETER_IS_CASCADING] == keys.TRUE
        assert item.metadata[keys.Components.TYPE_PARAMETER_CONSTRAINTS] == "where TItem : class"
        assert item.documentation == (
            "Specifies the type of the type parameter TItem for the Test.Grid<TItem> component."
        )

        key = attribute_named(descriptor, "TKey")
        assert key.metadata[keys.Components.TYPE_PARAMETER_IS_CASCADING] == keys.FALSE
        assert keys.Components.TYPE_PARAMETER_CONSTRAINTS not in key.metadata

        items = attribute_named(descriptor, "Items")
        assert items.metadata[keys.Components.GENERIC_TYPED] == keys.TRUE
        assert (
            items.metadata[keys.Common.GLOBALLY_QUALIFIED_TYPE_NAME]
            == "global::System.Collections.Generic.List<TItem>"
        )

    def test_given_child_content_when_produced_then_child_descriptors_per_variant(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        symbol = make_component(
            "Grid",
            type_parameters=(SymbolTypeParameter("TItem"),),
            properties=[
                parameter("ChildContent", RENDER_FRAGMENT),
                parameter("Row", render_fragment_of("TItem")),
            ],
        )

        # When
        descriptors = ComponentTagHelperProducer().produce(symbol)

        # Then
        assert [d.kind for d in descriptors] == [TagHelperKind.COMPONENT] * 2 + [TagHelperKind.CHILD_CONTENT] * 4
        short_name = descriptors[0]
        assert [a.name for a in short_name.bound_attributes] == ["TItem", "ChildContent", "Row", "Context"]
        context = attribute_named(short_name, "Context")
        assert context.metadata[keys.Components.CHILD_CONTENT_PARAMETER_NAME] == keys.TRUE
        assert context.documentation == "Specifies the parameter name for all child content expressions."

        child, child_fq, row, row_fq = descriptors[2:]
        assert child.name == "Test.Grid<TItem>.ChildContent"
        assert child.tag_matching_rules[0].tag_name == "ChildContent"
        assert child.tag_matching_rules[0].parent_tag == "Grid"
        assert child.metadata[keys.Components.SPECIAL_KIND] == "ChildContent"
        assert child.metadata[keys.Runtime.NAME] == keys.Runtime.NONE
        assert child.bound_attributes == ()
        assert not child.is_fully_qualified_name_match

        assert child_fq.tag_matching_rules[0].parent_tag == "Test.Grid"
        assert child_fq.is_fully_qualified_name_match

        assert row.name == "Test.Grid<TItem>.Row"
        [row_context] = row.bound_attributes
        assert row_context.name == "Context"
        assert row_context.type_name == wellknown.SYSTEM_STRING
        assert row_context.documentation == "Specifies the parameter name for the 'Row' child content expression."
        assert row_fq.is_fully_qualified_name_match

    def test_given_user_context_parameter_when_produced_then_no_implicit_context(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        symbol = make_component(
            "List",
            properties=[parameter("Context"), parameter("Template", render_fragment_of("System.String"))],
        )

        # When
        descriptor = ComponentTagHelperProducer().produce(symbol)[0]

        # Then
        assert [a.name for a in descriptor.bound_attributes] == ["Context", "Template"]
        assert keys.Components.CHILD_CONTENT_PARAMETER_NAME not in attribute_named(descriptor, "Context").metadata

    def test_given_documentation_enabled_when_produced_then_doc_comments_copied(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        symbol = make_component(
            "MyComponent",
            doc_comment="<summary>A component.</summary>",
            properties=[parameter("Title", doc_comment="<summary>The title.</summary>")],
        )

        # When
        with_docs = ComponentTagHelperProducer(include_documentation=True).produce(symbol)[0]
        without_docs = ComponentTagHelperProducer().produce(symbol)[0]

        # Then
        assert with_docs.documentation == "<summary>A component.</summary>"
        assert with_docs.bound_attributes[0].documentation == "<summary>The title.</summary>"
        assert without_docs.documentation is None
        assert without_docs.bound_attributes[0].documentation is None
