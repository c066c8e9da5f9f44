"""Tests for candidate type filtering."""

from collections.abc import Callable

import pytest

from taghelpers.discovery.visitor import TagHelperTypeVisitor, component_type_visitor
from taghelpers.symbols import wellknown
from taghelpers.symbols.facade import TypeKind
from taghelpers.symbols.model import SymbolType, SymbolTypeParameter

MakeTagHelper = Callable[..., SymbolType]


class TestTagHelperTypeVisitor:
    def test_given_public_implementation_when_filtered_then_included(self, make_tag_helper: MakeTagHelper) -> None:
        # Given
        symbol = make_tag_helper("ValidTagHelper")

        # When
        result = TagHelperTypeVisitor().filter([symbol])

        # Then
        assert result == [symbol]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"is_public": False},
            {"is_abstract": True},
            {"kind": TypeKind.STRUCT},
            {"kind": TypeKind.INTERFACE},
            {"interfaces": ()},
            {"type_parameters": (SymbolTypeParameter("T"),)},
        ],
        ids=["internal", "abstract", "struct", "interface", "no-interface", "generic"],
    )
    def test_given_ineligible_type_when_filtered_then_excluded(
        self, make_tag_helper: MakeTagHelper, overrides: dict
    ) -> None:
        symbol = make_tag_helper("SkippedTagHelper", **overrides)

        assert TagHelperTypeVisitor().filter([symbol]) == []

    def test_given_nested_in_private_type_when_filtered_then_excluded(self, make_tag_helper: MakeTagHelper) -> None:
        # Given
        outer = SymbolType("Outer", namespace="TestNamespace", is_public=False)
        nested = make_tag_helper("NestedTagHelper", containing_type=outer)

        # Then
        assert not TagHelperTypeVisitor().is_candidate(nested)

    def test_given_nested_in_public_type_when_filtered_then_included(self, make_tag_helper: MakeTagHelper) -> None:
        outer = SymbolType("Outer", namespace="TestNamespace")
        nested = make_tag_helper("NestedTagHelper", containing_type=outer)

        assert TagHelperTypeVisitor().is_candidate(nested)
        assert nested.full_name == "TestNamespace.Outer.NestedTagHelper"

    def test_given_interface_on_base_when_filtered_then_included(self, make_tag_helper: MakeTagHelper) -> None:
        base = make_tag_helper("BaseTagHelper", is_abstract=True)
        derived = make_tag_helper("DerivedTagHelper", base_type=base)

        assert TagHelperTypeVisitor().filter([base, derived]) == [derived]

    def test_given_mixed_input_when_filtered_then_order_kept(self, make_tag_helper: MakeTagHelper) -> None:
        # Given
        symbols = [
            make_tag_helper("BTagHelper"),
            make_tag_helper("Hidden", is_public=False),
            make_tag_helper("ATagHelper"),
        ]

        # When
        names = [s.name for s in TagHelperTypeVisitor().filter(symbols)]

        # Then
        assert names == ["BTagHelper", "ATagHelper"]


class TestComponentTypeVisitor:
    def test_given_generic_component_when_filtered_then_included(self, make_component: Callable[..., SymbolType]) -> None:
        symbol = make_component("Grid", type_parameters=(SymbolTypeParameter("TItem"),))

        assert component_type_visitor().filter([symbol]) == [symbol]

    def test_given_system_assembly_when_filtered_then_excluded_by_default(
        self, make_component: Callable[..., SymbolType]
    ) -> None:
        # Given
        symbol = make_component("Router", assembly_name="System.Components")

        # Then
        assert component_type_visitor().filter([symbol]) == []
        assert component_type_visitor(exclude_system_assemblies=False).filter([symbol]) == [symbol]

    def test_given_tag_helper_when_component_filter_then_excluded(self, make_tag_helper: MakeTagHelper) -> None:
        assert component_type_visitor().filter([make_tag_helper("InputTagHelper")]) == []

    def test_given_custom_interface_when_filtered_then_used(self, make_component: Callable[..., SymbolType]) -> None:
        symbol = make_component("Widget", interfaces=("Test.IWidget",))

        assert TagHelperTypeVisitor("Test.IWidget").filter([symbol]) == [symbol]
        assert TagHelperTypeVisitor(wellknown.ICOMPONENT).filter([symbol]) == []
