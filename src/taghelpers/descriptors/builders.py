"""Mutable builders that freeze into descriptors.

Builders are where name validation happens: ``build()`` inspects the names
it was given and attaches diagnostics to the smallest enclosing construct.

Validation rules:
- Tag, parent tag, restricted child, bound attribute and parameter names
  report each distinct forbidden character once, in first-occurrence order.
- Required attribute names (selector text) report every occurrence.
- Bound attribute names and indexer prefixes starting with ``data-``
  (any case) are reserved: the attribute is dropped from the built
  descriptor and the diagnostic lands on the tag helper itself. A
  reserved-prefix violation is checked first and suppresses the character
  checks for that attribute.

Usage::

    builder = TagHelperDescriptorBuilder(TagHelperKind.DEFAULT, "Test.MyTagHelper", "TestAssembly")
    builder.set_type_name("Test.MyTagHelper", "Test", "MyTagHelper")
    rule = builder.tag_matching_rule()
    rule.tag_name = "my"
    descriptor = builder.build()
"""

from __future__ import annotations

from collections.abc import Iterable

from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.conventions import (
    ELEMENT_CATCH_ALL_NAME,
    has_reserved_prefix,
    invalid_name_characters,
    is_null_or_whitespace,
    strip_directive_prefix,
)
from taghelpers.descriptors.diagnostics import Diagnostic, TagHelperDiagnostics
from taghelpers.descriptors.metadata import MetadataCollection
from taghelpers.descriptors.models import (
    BoundAttributeDescriptor,
    BoundAttributeParameterDescriptor,
    NameComparison,
    RequiredAttributeDescriptor,
    TagHelperDescriptor,
    TagHelperKind,
    TagMatchingRuleDescriptor,
    TagStructure,
    ValueComparison,
)


class RequiredAttributeDescriptorBuilder:
    def __init__(self) -> None:
        self.name: str | None = None
        self.name_comparison = NameComparison.FULL_MATCH
        self.value: str | None = None
        self.value_comparison = ValueComparison.NONE
        self.is_directive_attribute = False
        self.metadata: dict[str, str] = {}
        self.diagnostics: list[Diagnostic] = []

    def build(self) -> RequiredAttributeDescriptor:
        diagnostics = [*self._validate(), *self.diagnostics]
        return RequiredAttributeDescriptor(
            name=self.name or "",
            name_comparison=self.name_comparison,
            value=self.value,
            value_comparison=self.value_comparison,
            is_directive_attribute=self.is_directive_attribute,
            metadata=MetadataCollection(self.metadata),
            diagnostics=tuple(diagnostics),
        )

    def _validate(self) -> list[Diagnostic]:
        if is_null_or_whitespace(self.name):
            return [TagHelperDiagnostics.invalid_targeted_attribute_name_null_or_whitespace()]
        assert self.name is not None
        name = strip_directive_prefix(self.name, self.is_directive_attribute)
        return [
            TagHelperDiagnostics.invalid_targeted_attribute_name(self.name, ch)
            for ch in invalid_name_characters(name, distinct=False)
        ]


class TagMatchingRuleDescriptorBuilder:
    def __init__(self) -> None:
        self.tag_name: str | None = None
        self.parent_tag: str | None = None
        self.tag_structure = TagStructure.UNSPECIFIED
        self.diagnostics: list[Diagnostic] = []
        self._attributes: list[RequiredAttributeDescriptorBuilder] = []

    @property
    def attributes(self) -> list[RequiredAttributeDescriptorBuilder]:
        return self._attributes

    def attribute(
        self,
        name: str | None = None,
        *,
        name_comparison: NameComparison = NameComparison.FULL_MATCH,
        value: str | None = None,
        value_comparison: ValueComparison = ValueComparison.NONE,
        is_directive_attribute: bool = False,
    ) -> RequiredAttributeDescriptorBuilder:
        builder = RequiredAttributeDescriptorBuilder()
        builder.name = name
        builder.name_comparison = name_comparison
        builder.value = value
        builder.value_comparison = value_comparison
        builder.is_directive_attribute = is_directive_attribute
        self._attributes.append(builder)
        return builder

    def build(self) -> TagMatchingRuleDescriptor:
        diagnostics = [*self._validate_tag_name(), *self._validate_parent_tag(), *self.diagnostics]
        return TagMatchingRuleDescriptor(
            tag_name=self.tag_name or "",
            parent_tag=self.parent_tag,
            tag_structure=self.tag_structure,
            attributes=tuple(b.build() for b in self._attributes),
            diagnostics=tuple(diagnostics),
        )

    def _validate_tag_name(self) -> list[Diagnostic]:
        if is_null_or_whitespace(self.tag_name):
            return [TagHelperDiagnostics.invalid_targeted_tag_name_null_or_whitespace()]
        assert self.tag_name is not None
        if self.tag_name == ELEMENT_CATCH_ALL_NAME:
            return []
        return [
            TagHelperDiagnostics.invalid_targeted_tag_name(self.tag_name, ch)
            for ch in invalid_name_characters(self.tag_name)
        ]

    def _validate_parent_tag(self) -> list[Diagnostic]:
        if self.parent_tag is None:
            return []
        if is_null_or_whitespace(self.parent_tag):
            return [TagHelperDiagnostics.invalid_targeted_parent_tag_name_null_or_whitespace()]
        return [
            TagHelperDiagnostics.invalid_targeted_parent_tag_name(self.parent_tag, ch)
            for ch in invalid_name_characters(self.parent_tag)
        ]


class BoundAttributeParameterDescriptorBuilder:
    def __init__(self) -> None:
        self.name: str | None = None
        self.property_name: str | None = None
        self.type_name: str | None = None
        self.documentation: str | None = None
        self.is_bind_attribute_get_set = False
        self.metadata: dict[str, str] = {}
        self.diagnostics: list[Diagnostic] = []

    def build(self, attribute_name: str) -> BoundAttributeParameterDescriptor:
        diagnostics = [*self._validate(attribute_name), *self.diagnostics]
        return BoundAttributeParameterDescriptor(
            name=self.name or "",
            property_name=self.property_name or self.name or "",
            type_name=self.type_name or "",
            documentation=self.documentation,
            is_bind_attribute_get_set=self.is_bind_attribute_get_set,
            metadata=MetadataCollection(self.metadata),
            diagnostics=tuple(diagnostics),
        )

    def _validate(self, attribute_name: str) -> list[Diagnostic]:
        if is_null_or_whitespace(self.name):
            return [TagHelperDiagnostics.invalid_bound_attribute_parameter_null_or_whitespace(attribute_name)]
        assert self.name is not None
        return [
            TagHelperDiagnostics.invalid_bound_attribute_parameter_name(attribute_name, self.name, ch)
            for ch in invalid_name_characters(self.name)
        ]


class BoundAttributeDescriptorBuilder:
    def __init__(self, parent: TagHelperDescriptorBuilder) -> None:
        self._parent = parent
        self.name: str | None = None
        self.property_name: str | None = None
        self.type_name: str | None = None
        self.display_name: str | None = None
        self.documentation: str | None = None
        self.containing_type: str | None = None
        self.is_enum = False
        self.is_directive_attribute = False
        self.is_weakly_typed = False
        self.is_editor_required = False
        self.has_indexer = False
        self.indexer_name_prefix: str | None = None
        self.indexer_type_name: str | None = None
        self.metadata: dict[str, str] = {}
        self.diagnostics: list[Diagnostic] = []
        self._parameters: list[BoundAttributeParameterDescriptorBuilder] = []

    @property
    def parameters(self) -> list[BoundAttributeParameterDescriptorBuilder]:
        return self._parameters

    def as_dictionary(self, prefix: str, value_type_name: str) -> None:
        self.has_indexer = True
        self.indexer_name_prefix = prefix
        self.indexer_type_name = value_type_name

    def set_property_name(self, property_name: str) -> None:
        self.property_name = property_name
        self.metadata[keys.Common.PROPERTY_NAME] = property_name

    def bind_attribute_parameter(
        self,
        name: str | None = None,
        *,
        property_name: str | None = None,
        type_name: str | None = None,
        documentation: str | None = None,
    ) -> BoundAttributeParameterDescriptorBuilder:
        builder = BoundAttributeParameterDescriptorBuilder()
        builder.name = name
        builder.property_name = property_name
        builder.type_name = type_name
        builder.documentation = documentation
        self._parameters.append(builder)
        return builder

    def get_display_name(self) -> str:
        if self.display_name is not None:
            return self.display_name
        containing_type = self.containing_type or self._parent.type_name or self._parent.name
        return f"{self.type_name or ''} {containing_type}.{self.property_name or ''}"

    def reserved_prefix_diagnostics(self, tag_helper_display_name: str) -> list[Diagnostic]:
        """Diagnostics for ``data-`` names; non-empty means the attribute is dropped."""
        property_display_name = self.get_display_name()
        diagnostics = []
        if has_reserved_prefix(self.name):
            assert self.name is not None
            diagnostics.append(
                TagHelperDiagnostics.invalid_bound_attribute_name_starts_with(
                    tag_helper_display_name, property_display_name, self.name
                )
            )
        if self.has_indexer and has_reserved_prefix(self.indexer_name_prefix):
            assert self.indexer_name_prefix is not None
            diagnostics.append(
                TagHelperDiagnostics.invalid_bound_attribute_prefix_starts_with(
                    tag_helper_display_name, property_display_name, self.indexer_name_prefix
                )
            )
        return diagnostics

    def build(self, tag_helper_display_name: str) -> BoundAttributeDescriptor:
        attribute_name = self.name or ""
        diagnostics = [*self._validate(tag_helper_display_name), *self.diagnostics]
        if self.is_directive_attribute:
            self.metadata.setdefault(keys.Common.DIRECTIVE_ATTRIBUTE, keys.TRUE)
        return BoundAttributeDescriptor(
            name=attribute_name,
            property_name=self.property_name or "",
            type_name=self.type_name or "",
            display_name=self.get_display_name(),
            documentation=self.documentation,
            containing_type=self.containing_type,
            is_enum=self.is_enum,
            has_indexer=self.has_indexer,
            indexer_name_prefix=self.indexer_name_prefix,
            indexer_type_name=self.indexer_type_name,
            is_directive_attribute=self.is_directive_attribute,
            is_weakly_typed=self.is_weakly_typed,
            is_editor_required=self.is_editor_required,
            parameters=tuple(p.build(attribute_name) for p in self._parameters),
            metadata=MetadataCollection(self.metadata),
            diagnostics=tuple(diagnostics),
        )

    def _validate(self, tag_helper_display_name: str) -> list[Diagnostic]:
        property_display_name = self.get_display_name()
        diagnostics: list[Diagnostic] = []

        if is_null_or_whitespace(self.name):
            # A dictionary-only binding has no name of its own.
            if not (self.name is None and self.has_indexer):
                diagnostics.append(
                    TagHelperDiagnostics.invalid_bound_attribute_null_or_whitespace(
                        tag_helper_display_name, property_display_name
                    )
                )
        else:
            assert self.name is not None
            name = strip_directive_prefix(self.name, self.is_directive_attribute)
            diagnostics.extend(
                TagHelperDiagnostics.invalid_bound_attribute_name(
                    tag_helper_display_name, property_display_name, self.name, ch
                )
                for ch in invalid_name_characters(name)
            )

        if self.has_indexer and self.indexer_name_prefix:
            prefix = strip_directive_prefix(self.indexer_name_prefix, self.is_directive_attribute)
            diagnostics.extend(
                TagHelperDiagnostics.invalid_bound_attribute_prefix(
                    tag_helper_display_name, property_display_name, self.indexer_name_prefix, ch
                )
                for ch in invalid_name_characters(prefix)
            )

        return diagnostics


class TagHelperDescriptorBuilder:
    def __init__(self, kind: TagHelperKind, name: str, assembly_name: str) -> None:
        if not name:
            raise ValueError("Tag helper name is required")
        self.kind = kind
        self.name = name
        self.assembly_name = assembly_name
        self.type_name: str | None = None
        self.display_name: str | None = None
        self.documentation: str | None = None
        self.case_sensitive = False
        self.classify_attributes_only = False
        self.tag_output_hint: str | None = None
        self.allowed_child_tags: list[str | None] = []
        self.metadata: dict[str, str] = {}
        self.diagnostics: list[Diagnostic] = []
        self._rules: list[TagMatchingRuleDescriptorBuilder] = []
        self._attributes: list[BoundAttributeDescriptorBuilder] = []

    @property
    def tag_matching_rules(self) -> list[TagMatchingRuleDescriptorBuilder]:
        return self._rules

    @property
    def bound_attributes(self) -> list[BoundAttributeDescriptorBuilder]:
        return self._attributes

    def set_type_name(
        self,
        type_name: str,
        type_namespace: str | None = None,
        type_name_identifier: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.metadata[keys.Common.TYPE_NAME] = type_name
        if type_namespace is not None:
            self.metadata[keys.Common.TYPE_NAMESPACE] = type_namespace
        if type_name_identifier is not None:
            self.metadata[keys.Common.TYPE_NAME_IDENTIFIER] = type_name_identifier

    def tag_matching_rule(self, tag_name: str | None = None) -> TagMatchingRuleDescriptorBuilder:
        builder = TagMatchingRuleDescriptorBuilder()
        builder.tag_name = tag_name
        self._rules.append(builder)
        return builder

    def bind_attribute(self) -> BoundAttributeDescriptorBuilder:
        builder = BoundAttributeDescriptorBuilder(self)
        self._attributes.append(builder)
        return builder

    def allow_child_tag(self, name: str | None) -> None:
        self.allowed_child_tags.append(name)

    def get_display_name(self) -> str:
        return self.display_name or self.type_name or self.name

    def build(self) -> TagHelperDescriptor:
        if not self._rules:
            raise ValueError(f"Tag helper '{self.name}' has no tag matching rules")

        display_name = self.get_display_name()
        diagnostics = [*self._validate_allowed_child_tags(display_name)]

        bound_attributes = []
        for attribute_builder in self._attributes:
            reserved = attribute_builder.reserved_prefix_diagnostics(display_name)
            if reserved:
                diagnostics.extend(reserved)
                continue
            bound_attributes.append(attribute_builder.build(display_name))

        diagnostics.extend(self.diagnostics)

        metadata = dict(self.metadata)
        if self.classify_attributes_only:
            metadata.setdefault(keys.Common.CLASSIFY_ATTRIBUTES_ONLY, keys.TRUE)

        return TagHelperDescriptor(
            kind=self.kind,
            name=self.name,
            assembly_name=self.assembly_name,
            display_name=display_name,
            type_name=self.type_name or self.name,
            documentation=self.documentation,
            case_sensitive=self.case_sensitive,
            classify_attributes_only=self.classify_attributes_only,
            tag_output_hint=self.tag_output_hint,
            allowed_child_tags=tuple(name or "" for name in self.allowed_child_tags),
            tag_matching_rules=tuple(_dedupe(r.build() for r in self._rules)),
            bound_attributes=tuple(bound_attributes),
            metadata=MetadataCollection(metadata),
            diagnostics=tuple(diagnostics),
        )

    def _validate_allowed_child_tags(self, display_name: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for child in self.allowed_child_tags:
            if is_null_or_whitespace(child):
                diagnostics.append(
                    TagHelperDiagnostics.invalid_restricted_child_null_or_whitespace(display_name)
                )
                continue
            assert child is not None
            diagnostics.extend(
                TagHelperDiagnostics.invalid_restricted_child(display_name, child, ch)
                for ch in invalid_name_characters(child)
            )
        return diagnostics


def _dedupe(rules: Iterable[TagMatchingRuleDescriptor]) -> list[TagMatchingRuleDescriptor]:
    """Collapse structurally equal rules, keeping first-seen order."""
    seen: list[TagMatchingRuleDescriptor] = []
    for rule in rules:
        if rule not in seen:
            seen.append(rule)
    return seen
