"""Descriptor creation for ``ITagHelper`` types.

``DescriptorFactory`` turns one candidate type into a ``TagHelperDescriptor``:

- Tag matching rules come from ``HtmlTargetElement`` declarations, or from
  the HTML-cased type name (minus a ``TagHelper`` suffix) when there are none.
- Bound attributes come from the type's properties, walking the base chain
  with the most derived declaration of a name winning.
- Allowed children, output hint and target elements are inherited from the
  nearest base type declaring them unless the type redeclares them.

Malformed declarations never raise; they surface as diagnostics on the
built descriptor.

Usage::

    factory = DescriptorFactory(include_documentation=True)
    descriptor = factory.create_descriptor(symbol)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from taghelpers.core.logging import get_logger
from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.builders import (
    BoundAttributeDescriptorBuilder,
    TagHelperDescriptorBuilder,
)
from taghelpers.descriptors.conventions import (
    ELEMENT_CATCH_ALL_NAME,
    strip_tag_helper_suffix,
    to_html_case,
)
from taghelpers.descriptors.diagnostics import TagHelperDiagnostics
from taghelpers.descriptors.models import TagHelperDescriptor, TagHelperKind, TagStructure
from taghelpers.discovery.required_attributes import add_required_attributes
from taghelpers.symbols import wellknown
from taghelpers.symbols.facade import (
    AttributeData,
    PropertySymbol,
    TypeKind,
    TypeSymbol,
    find_attribute,
    find_attributes,
    has_attribute,
    self_and_base_types,
)

log = get_logger(__name__)


class Resolution(Enum):
    UNSET = "unset"
    INHERITED = "inherited"
    DECLARED = "declared"


@dataclass(frozen=True, slots=True)
class InheritedAttributes:
    """Declarations of one attribute type, resolved along the base chain."""

    resolution: Resolution
    attributes: tuple[AttributeData, ...] = ()
    declared_on: str | None = None

    @property
    def first(self) -> AttributeData | None:
        return self.attributes[0] if self.attributes else None


def resolve_inherited(symbol: TypeSymbol, attribute_type: str) -> InheritedAttributes:
    """Nearest declaration of ``attribute_type`` on ``symbol`` or its bases.

    A redeclaration replaces the inherited value outright; values are never
    merged across levels.
    """
    for index, current in enumerate(self_and_base_types(symbol)):
        declared = find_attributes(current.attributes, attribute_type)
        if declared:
            resolution = Resolution.DECLARED if index == 0 else Resolution.INHERITED
            return InheritedAttributes(resolution, tuple(declared), current.full_name)
    return InheritedAttributes(Resolution.UNSET)


def _named_argument(attribute: AttributeData, name: str) -> tuple[bool, Any]:
    if name in attribute.named_arguments:
        return True, attribute.named_arguments[name]
    return False, None


def _string_argument(value: Any) -> str | None:
    # Manifests can carry any scalar where the attribute declares a string.
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _is_never_browsable(attribute: AttributeData | None) -> bool:
    if attribute is None or not attribute.constructor_arguments:
        return False
    value = attribute.constructor_arguments[0]
    return value == wellknown.EDITOR_BROWSABLE_NEVER or value == "Never"


def _tag_structure(value: Any) -> TagStructure:
    if value is None:
        return TagStructure.UNSPECIFIED
    if isinstance(value, str):
        for member in TagStructure:
            if member.name.replace("_", "").lower() == value.replace("_", "").lower():
                return member
        return TagStructure.UNSPECIFIED
    try:
        return TagStructure(int(value))
    except ValueError:
        return TagStructure.UNSPECIFIED


def _dictionary_argument_types(prop: PropertySymbol) -> tuple[str, str] | None:
    key, value = prop.type.dictionary_key_type, prop.type.dictionary_value_type
    if key is None or value is None:
        return None
    return key, value


def _is_potential_dictionary_property(prop: PropertySymbol) -> bool:
    arguments = _dictionary_argument_types(prop)
    return arguments is not None and arguments[0] == wellknown.SYSTEM_STRING


def _is_accessible_property(prop: PropertySymbol) -> bool:
    if prop.is_indexer or prop.is_static or not prop.has_public_getter:
        return False
    if has_attribute(prop.attributes, wellknown.HTML_ATTRIBUTE_NOT_BOUND_ATTRIBUTE):
        return False
    return (
        has_attribute(prop.attributes, wellknown.HTML_ATTRIBUTE_NAME_ATTRIBUTE)
        or prop.has_public_setter
        or _is_potential_dictionary_property(prop)
    )


def collect_accessible_properties(symbol: TypeSymbol) -> list[PropertySymbol]:
    """Bindable properties, most derived declaration of each name first."""
    names: set[str] = set()
    found: list[PropertySymbol] = []
    for current in self_and_base_types(symbol):
        for prop in current.properties:
            if not _is_accessible_property(prop) or prop.name in names:
                continue
            names.add(prop.name)
            found.append(prop)
    return found


class DescriptorFactory:
    def __init__(self, *, include_documentation: bool = False, exclude_hidden: bool = False) -> None:
        self.include_documentation = include_documentation
        self.exclude_hidden = exclude_hidden

    def create_descriptor(self, symbol: TypeSymbol) -> TagHelperDescriptor | None:
        """Describe ``symbol``, or ``None`` when hidden types are excluded and it is hidden."""
        if self._is_hidden_type(symbol):
            log.debug("tag_helper_hidden", type_name=symbol.full_name)
            return None

        builder = TagHelperDescriptorBuilder(TagHelperKind.DEFAULT, symbol.full_name, symbol.assembly_name)
        builder.set_type_name(symbol.full_name, symbol.namespace, symbol.name)
        builder.metadata[keys.Runtime.NAME] = keys.Runtime.TAG_HELPER

        self._add_bound_attributes(symbol, builder)
        self._add_tag_matching_rules(symbol, builder)
        self._add_allowed_children(symbol, builder)
        self._add_documentation(symbol, builder)
        self._add_tag_output_hint(symbol, builder)

        return builder.build()

    # Visibility

    def _is_hidden_type(self, symbol: TypeSymbol) -> bool:
        if not self.exclude_hidden:
            return False
        return _is_never_browsable(resolve_inherited(symbol, wellknown.EDITOR_BROWSABLE_ATTRIBUTE).first)

    def _is_hidden_property(self, symbol: TypeSymbol, prop: PropertySymbol) -> bool:
        if not self.exclude_hidden:
            return False
        # Overrides without their own declaration keep the overridden visibility.
        for current in self_and_base_types(symbol):
            declaration = next((p for p in current.properties if p.name == prop.name), None)
            if declaration is None:
                continue
            attribute = find_attribute(declaration.attributes, wellknown.EDITOR_BROWSABLE_ATTRIBUTE)
            if attribute is not None:
                return _is_never_browsable(attribute)
            if not declaration.is_override:
                return False
        return False

    # Rules

    def _add_tag_matching_rules(self, symbol: TypeSymbol, builder: TagHelperDescriptorBuilder) -> None:
        targets = resolve_inherited(symbol, wellknown.HTML_TARGET_ELEMENT_ATTRIBUTE)

        if targets.resolution is Resolution.UNSET:
            rule = builder.tag_matching_rule()
            rule.tag_name = to_html_case(strip_tag_helper_suffix(symbol.name))
            return

        for attribute in targets.attributes:
            args = attribute.constructor_arguments
            rule = builder.tag_matching_rule()
            rule.tag_name = args[0] if args and isinstance(args[0], str) else ELEMENT_CATCH_ALL_NAME
            _, parent_tag = _named_argument(attribute, wellknown.HTML_TARGET_ELEMENT_PARENT_TAG)
            rule.parent_tag = _string_argument(parent_tag)
            _, structure = _named_argument(attribute, wellknown.HTML_TARGET_ELEMENT_TAG_STRUCTURE)
            rule.tag_structure = _tag_structure(structure)
            _, required = _named_argument(attribute, wellknown.HTML_TARGET_ELEMENT_ATTRIBUTES)
            add_required_attributes(_string_argument(required), rule)

    def _add_allowed_children(self, symbol: TypeSymbol, builder: TagHelperDescriptorBuilder) -> None:
        restrict = resolve_inherited(symbol, wellknown.RESTRICT_CHILDREN_ATTRIBUTE).first
        if restrict is None or not restrict.constructor_arguments:
            return

        first, *rest = restrict.constructor_arguments
        builder.allow_child_tag(_string_argument(first))
        for value in rest:
            # params string[] arrives either flattened or as one sequence
            if isinstance(value, (list, tuple)):
                for child in value:
                    builder.allow_child_tag(_string_argument(child))
            else:
                builder.allow_child_tag(_string_argument(value))

    def _add_documentation(self, symbol: TypeSymbol, builder: TagHelperDescriptorBuilder) -> None:
        if self.include_documentation and symbol.doc_comment:
            builder.documentation = symbol.doc_comment

    def _add_tag_output_hint(self, symbol: TypeSymbol, builder: TagHelperDescriptorBuilder) -> None:
        hint = resolve_inherited(symbol, wellknown.OUTPUT_ELEMENT_HINT_ATTRIBUTE).first
        if hint is not None and hint.constructor_arguments and isinstance(hint.constructor_arguments[0], str):
            builder.tag_output_hint = hint.constructor_arguments[0]

    # Bound attributes

    def _add_bound_attributes(self, symbol: TypeSymbol, builder: TagHelperDescriptorBuilder) -> None:
        for prop in collect_accessible_properties(symbol):
            if self._is_hidden_property(symbol, prop):
                continue
            self._configure_bound_attribute(builder.bind_attribute(), prop, symbol)

    def _configure_bound_attribute(
        self,
        builder: BoundAttributeDescriptorBuilder,
        prop: PropertySymbol,
        containing_type: TypeSymbol,
    ) -> None:
        name_attribute = find_attribute(prop.attributes, wellknown.HTML_ATTRIBUTE_NAME_ATTRIBUTE)
        explicit_name = _explicit_attribute_name(name_attribute)
        has_explicit_name = explicit_name is not None
        attribute_name = explicit_name if explicit_name is not None else to_html_case(prop.name)

        builder.type_name = prop.type.display_name
        builder.set_property_name(prop.name)

        if prop.has_public_setter:
            builder.name = attribute_name
            builder.is_enum = prop.type.kind is TypeKind.ENUM
            if self.include_documentation and prop.doc_comment:
                builder.documentation = prop.doc_comment
        elif has_explicit_name and not _is_potential_dictionary_property(prop):
            builder.diagnostics.append(
                TagHelperDiagnostics.invalid_attribute_name_null_or_empty(containing_type.full_name, prop.name)
            )

        self._configure_dictionary(builder, prop, containing_type, name_attribute, attribute_name)

    def _configure_dictionary(
        self,
        builder: BoundAttributeDescriptorBuilder,
        prop: PropertySymbol,
        containing_type: TypeSymbol,
        name_attribute: AttributeData | None,
        attribute_name: str,
    ) -> None:
        prefix_set, declared_prefix = (
            _named_argument(name_attribute, wellknown.HTML_ATTRIBUTE_NAME_DICTIONARY_PREFIX)
            if name_attribute is not None
            else (False, None)
        )
        declared_prefix = _string_argument(declared_prefix)

        arguments = _dictionary_argument_types(prop)
        if arguments is not None:
            prefix = declared_prefix if prefix_set else attribute_name + "-"
            if prefix is not None:
                builder.as_dictionary(prefix, arguments[1])

        if arguments is None or arguments[0] != wellknown.SYSTEM_STRING:
            if declared_prefix is not None:
                builder.diagnostics.append(
                    TagHelperDiagnostics.invalid_attribute_prefix_not_null(containing_type.full_name, prop.name)
                )
            return

        if not prop.has_public_setter and name_attribute is not None and not prefix_set:
            builder.diagnostics.append(
                TagHelperDiagnostics.invalid_attribute_prefix_null(containing_type.full_name, prop.name)
            )


def _explicit_attribute_name(attribute: AttributeData | None) -> str | None:
    """The declared attribute name, including an explicitly empty one."""
    if attribute is None:
        return None
    args: Sequence[Any] = attribute.constructor_arguments
    if args and isinstance(args[0], str):
        return args[0]
    return None
