"""Component descriptors.

Every component type yields two descriptors that differ only in their
tag: the short type name (``Grid``) and the namespace-qualified one
(``Test.Grid``). Each ``RenderFragment`` parameter adds a child-content
descriptor per variant, matching a child element named after the
parameter.
"""

from __future__ import annotations

from enum import Enum

from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.builders import BoundAttributeDescriptorBuilder, TagHelperDescriptorBuilder
from taghelpers.descriptors.models import (
    BoundAttributeDescriptor,
    TagHelperDescriptor,
    TagHelperKind,
)
from taghelpers.producers import documentation as docs
from taghelpers.symbols import wellknown
from taghelpers.symbols.facade import (
    PropertySymbol,
    TypeKind,
    TypeParameterSymbol,
    TypeSymbol,
    find_attributes,
    has_attribute,
    self_and_base_types,
)
from taghelpers.typenames.global_qualified import GlobalQualifiedTypeNameRewriter

CHILD_CONTENT_PARAMETER_ATTRIBUTE_NAME = "Context"
RENDER_FRAGMENT_OF_T_PREFIX = wellknown.RENDER_FRAGMENT + "<"


class PropertyKind(Enum):
    IGNORED = "ignored"
    DEFAULT = "default"
    ENUM = "enum"
    CHILD_CONTENT = "child_content"
    DELEGATE = "delegate"
    EVENT_CALLBACK = "event_callback"


def classify_property(prop: PropertySymbol) -> PropertyKind:
    if (
        not prop.is_public
        or prop.is_indexer
        or not prop.has_setter
        or not prop.has_public_setter
        or prop.is_static
        or not has_attribute(prop.attributes, wellknown.PARAMETER_ATTRIBUTE)
    ):
        return PropertyKind.IGNORED

    prop_type = prop.type
    if prop_type.kind is TypeKind.ENUM:
        return PropertyKind.ENUM
    if prop_type.display_name == wellknown.RENDER_FRAGMENT or (
        prop_type.constructed_from == wellknown.RENDER_FRAGMENT_OF_T
    ):
        return PropertyKind.CHILD_CONTENT
    if prop_type.display_name == wellknown.EVENT_CALLBACK or (
        prop_type.constructed_from == wellknown.EVENT_CALLBACK_OF_T
    ):
        return PropertyKind.EVENT_CALLBACK
    if prop_type.kind is TypeKind.DELEGATE:
        return PropertyKind.DELEGATE
    return PropertyKind.DEFAULT


def collect_parameters(symbol: TypeSymbol) -> list[tuple[PropertySymbol, PropertyKind]]:
    """Visible parameters, most derived first, stopping at ``ComponentBase``.

    A name is claimed by its most derived declaration even when that one is
    ignored, except for an override lacking ``[Parameter]``, which defers to
    the declaration it overrides.
    """
    seen: set[str] = set()
    found: list[tuple[PropertySymbol, PropertyKind]] = []
    for current in self_and_base_types(symbol):
        if current.full_name == wellknown.COMPONENT_BASE:
            break
        for prop in current.properties:
            if prop.name in seen:
                continue
            if prop.is_override and not has_attribute(prop.attributes, wellknown.PARAMETER_ATTRIBUTE):
                continue
            seen.add(prop.name)
            found.append((prop, classify_property(prop)))
    return found


def format_type_parameter_constraints(
    parameter: TypeParameterSymbol, rewriter: GlobalQualifiedTypeNameRewriter
) -> str | None:
    """``where T : class, global::X, new()`` in the order C# requires, or ``None``."""
    constraints: list[str] = []
    if parameter.has_reference_type_constraint:
        constraints.append("class")
    if parameter.has_not_null_constraint:
        constraints.append("notnull")
    if parameter.has_unmanaged_type_constraint:
        constraints.append("unmanaged")
    elif parameter.has_value_type_constraint:
        constraints.append("struct")
    constraints.extend(rewriter.rewrite(t) for t in parameter.constraint_types)
    if parameter.has_constructor_constraint:
        constraints.append("new()")
    if not constraints:
        return None
    return f"where {parameter.name} : {', '.join(constraints)}"


def _is_parameterized_child_content(attribute: BoundAttributeDescriptorBuilder) -> bool:
    return attribute.metadata.get(keys.Components.CHILD_CONTENT) == keys.TRUE and (
        attribute.type_name or ""
    ).startswith(RENDER_FRAGMENT_OF_T_PREFIX)


class ComponentTagHelperProducer:
    def __init__(self, *, include_documentation: bool = False) -> None:
        self.include_documentation = include_documentation

    def produce(self, symbol: TypeSymbol) -> list[TagHelperDescriptor]:
        short_name = self._create_short_name_descriptor(symbol)
        fully_qualified = self._create_fully_qualified_name_descriptor(symbol)
        results = [short_name, fully_qualified]
        for child_content in short_name.get_child_content_properties():
            results.append(self._create_child_content_descriptor(short_name, child_content))
            results.append(self._create_child_content_descriptor(fully_qualified, child_content))
        return results

    def _create_short_name_descriptor(self, symbol: TypeSymbol) -> TagHelperDescriptor:
        builder = self._create_builder(symbol)
        builder.tag_matching_rule(symbol.name)
        return builder.build()

    def _create_fully_qualified_name_descriptor(self, symbol: TypeSymbol) -> TagHelperDescriptor:
        builder = self._create_builder(symbol)
        tag_name = f"{symbol.namespace}.{symbol.name}" if symbol.namespace else symbol.name
        builder.tag_matching_rule(tag_name)
        builder.metadata[keys.Components.NAME_MATCH] = keys.Components.FULLY_QUALIFIED_NAME_MATCH
        return builder.build()

    def _create_builder(self, symbol: TypeSymbol) -> TagHelperDescriptorBuilder:
        builder = TagHelperDescriptorBuilder(TagHelperKind.COMPONENT, symbol.full_name, symbol.assembly_name)
        builder.set_type_name(symbol.full_name, symbol.namespace, symbol.name)
        builder.case_sensitive = True
        builder.metadata[keys.Runtime.NAME] = keys.Runtime.COMPONENT

        type_parameter_names = [p.name for p in symbol.type_parameters]
        rewriter = GlobalQualifiedTypeNameRewriter(type_parameter_names)

        if symbol.type_parameters:
            builder.metadata[keys.Components.GENERIC_TYPED] = keys.TRUE
            cascading = {
                a.constructor_arguments[0]
                for a in find_attributes(symbol.attributes, wellknown.CASCADING_TYPE_PARAMETER_ATTRIBUTE)
                if a.constructor_arguments
            }
            for parameter in symbol.type_parameters:
                self._add_type_parameter(builder, parameter, parameter.name in cascading, rewriter)

        if self.include_documentation and symbol.doc_comment:
            builder.documentation = symbol.doc_comment

        for prop, kind in collect_parameters(symbol):
            if kind is PropertyKind.IGNORED:
                continue
            self._add_parameter(builder, prop, kind, rewriter)

        has_context = any(
            (a.name or "").lower() == CHILD_CONTENT_PARAMETER_ATTRIBUTE_NAME.lower() for a in builder.bound_attributes
        )
        if not has_context and any(_is_parameterized_child_content(a) for a in builder.bound_attributes):
            # A user-declared Context parameter takes precedence.
            self._add_context_parameter(builder, child_content_name=None)

        return builder

    def _add_type_parameter(
        self,
        builder: TagHelperDescriptorBuilder,
        parameter: TypeParameterSymbol,
        cascade: bool,
        rewriter: GlobalQualifiedTypeNameRewriter,
    ) -> None:
        attribute = builder.bind_attribute()
        attribute.display_name = parameter.name
        attribute.name = parameter.name
        attribute.type_name = wellknown.SYSTEM_TYPE
        attribute.set_property_name(parameter.name)
        attribute.metadata[keys.Components.TYPE_PARAMETER] = keys.TRUE
        attribute.metadata[keys.Components.TYPE_PARAMETER_IS_CASCADING] = keys.bool_string(cascade)
        constraints = format_type_parameter_constraints(parameter, rewriter)
        if constraints is not None:
            attribute.metadata[keys.Components.TYPE_PARAMETER_CONSTRAINTS] = constraints
        attribute.documentation = docs.COMPONENT_TYPE_PARAMETER.format(parameter.name, builder.name)

    def _add_parameter(
        self,
        builder: TagHelperDescriptorBuilder,
        prop: PropertySymbol,
        kind: PropertyKind,
        rewriter: GlobalQualifiedTypeNameRewriter,
    ) -> None:
        attribute = builder.bind_attribute()
        attribute.name = prop.name
        attribute.type_name = prop.type.display_name
        attribute.set_property_name(prop.name)
        attribute.is_editor_required = has_attribute(prop.attributes, wellknown.EDITOR_REQUIRED_ATTRIBUTE)
        attribute.metadata[keys.Common.GLOBALLY_QUALIFIED_TYPE_NAME] = rewriter.rewrite(prop.type.display_name)

        if kind is PropertyKind.ENUM:
            attribute.is_enum = True
        elif kind is PropertyKind.CHILD_CONTENT:
            attribute.metadata[keys.Components.CHILD_CONTENT] = keys.TRUE
        elif kind is PropertyKind.EVENT_CALLBACK:
            attribute.metadata[keys.Components.EVENT_CALLBACK] = keys.TRUE
        elif kind is PropertyKind.DELEGATE:
            attribute.metadata[keys.Components.DELEGATE_SIGNATURE] = keys.TRUE
            attribute.metadata[keys.Components.DELEGATE_WITH_AWAITABLE_RESULT] = keys.bool_string(
                prop.type.returns_awaitable
            )

        if prop.type.has_type_parameter:
            attribute.metadata[keys.Components.GENERIC_TYPED] = keys.TRUE

        if self.include_documentation and prop.doc_comment:
            attribute.documentation = prop.doc_comment

    def _add_context_parameter(self, builder: TagHelperDescriptorBuilder, child_content_name: str | None) -> None:
        attribute = builder.bind_attribute()
        attribute.name = CHILD_CONTENT_PARAMETER_ATTRIBUTE_NAME
        attribute.type_name = wellknown.SYSTEM_STRING
        attribute.set_property_name(CHILD_CONTENT_PARAMETER_ATTRIBUTE_NAME)
        attribute.metadata[keys.Components.CHILD_CONTENT_PARAMETER_NAME] = keys.TRUE
        if child_content_name is None:
            attribute.documentation = docs.CHILD_CONTENT_PARAMETER_NAME_TOP_LEVEL
        else:
            attribute.documentation = docs.CHILD_CONTENT_PARAMETER_NAME.format(child_content_name)

    def _create_child_content_descriptor(
        self, component: TagHelperDescriptor, attribute: BoundAttributeDescriptor
    ) -> TagHelperDescriptor:
        type_name = f"{component.type_name}.{attribute.name}"

        builder = TagHelperDescriptorBuilder(TagHelperKind.CHILD_CONTENT, type_name, component.assembly_name)
        builder.set_type_name(type_name, component.type_namespace, component.type_name_identifier)
        builder.case_sensitive = True
        builder.metadata[keys.Runtime.NAME] = keys.Runtime.NONE
        builder.metadata[keys.Components.SPECIAL_KIND] = TagHelperKind.CHILD_CONTENT.value
        if attribute.documentation:
            builder.documentation = attribute.documentation

        # Only as a direct child of the component.
        rule = builder.tag_matching_rule(attribute.name)
        rule.parent_tag = component.tag_matching_rules[0].tag_name

        if attribute.is_parameterized_child_content_property:
            self._add_context_parameter(builder, child_content_name=attribute.name)

        if component.is_fully_qualified_name_match:
            builder.metadata[keys.Components.NAME_MATCH] = keys.Components.FULLY_QUALIFIED_NAME_MATCH

        return builder.build()
