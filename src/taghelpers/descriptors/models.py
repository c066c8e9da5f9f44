"""Immutable tag helper descriptor graph.

Descriptors are frozen dataclasses compared field by field. Child
descriptors keep a back-reference to their owner (``parent``) for lookup
only; it takes no part in equality, hashing or repr.

Build these through ``taghelpers.descriptors.builders`` rather than by hand:
the builders run name validation and attach diagnostics.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.diagnostics import Diagnostic
from taghelpers.descriptors.metadata import EMPTY_METADATA, MetadataCollection

STRING_TYPE_NAME = "System.String"
BOOLEAN_TYPE_NAME = "System.Boolean"
OBJECT_TYPE_NAME = "System.Object"


class TagHelperKind(Enum):
    DEFAULT = "Default"
    BIND = "Bind"
    EVENT_HANDLER = "EventHandler"
    REF = "Ref"
    KEY = "Key"
    SPLAT = "Splat"
    COMPONENT = "Component"
    CHILD_CONTENT = "ChildContent"


class TagStructure(Enum):
    UNSPECIFIED = 0
    NORMAL_OR_SELF_CLOSING = 1
    WITHOUT_END_TAG = 2


class NameComparison(Enum):
    FULL_MATCH = "FullMatch"
    PREFIX_MATCH = "PrefixMatch"


class ValueComparison(Enum):
    NONE = "None"
    FULL_MATCH = "FullMatch"
    PREFIX_MATCH = "PrefixMatch"
    SUFFIX_MATCH = "SuffixMatch"


def _any_errors(diagnostics: tuple[Diagnostic, ...]) -> bool:
    return any(d.is_error for d in diagnostics)


@dataclass(frozen=True, slots=True)
class RequiredAttributeDescriptor:
    """One attribute a tag must carry for a matching rule to apply."""

    name: str
    name_comparison: NameComparison = NameComparison.FULL_MATCH
    value: str | None = None
    value_comparison: ValueComparison = ValueComparison.NONE
    is_directive_attribute: bool = False
    metadata: MetadataCollection = EMPTY_METADATA
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def display_name(self) -> str:
        if self.name_comparison is NameComparison.PREFIX_MATCH:
            return self.name + "..."
        return self.name

    @property
    def has_errors(self) -> bool:
        return _any_errors(self.diagnostics)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "name_comparison": self.name_comparison.value,
            "value": self.value,
            "value_comparison": self.value_comparison.value,
            "display_name": self.display_name,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True, slots=True)
class TagMatchingRuleDescriptor:
    """A (tag, parent, structure, required attributes) combination."""

    tag_name: str
    parent_tag: str | None = None
    tag_structure: TagStructure = TagStructure.UNSPECIFIED
    attributes: tuple[RequiredAttributeDescriptor, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def get_all_diagnostics(self) -> Iterator[Diagnostic]:
        for attribute in self.attributes:
            yield from attribute.diagnostics
        yield from self.diagnostics

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.get_all_diagnostics())

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag_name": self.tag_name,
            "parent_tag": self.parent_tag,
            "tag_structure": self.tag_structure.name,
            "attributes": [a.to_dict() for a in self.attributes],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True, slots=True)
class BoundAttributeParameterDescriptor:
    """Sub-parameter of a directive attribute, e.g. ``format`` in ``@bind:format``."""

    name: str
    property_name: str
    type_name: str
    documentation: str | None = None
    is_bind_attribute_get_set: bool = False
    metadata: MetadataCollection = EMPTY_METADATA
    diagnostics: tuple[Diagnostic, ...] = ()
    parent: BoundAttributeDescriptor | None = field(
        default=None, compare=False, hash=False, repr=False
    )

    @property
    def is_string_property(self) -> bool:
        return self.type_name == STRING_TYPE_NAME

    @property
    def is_boolean_property(self) -> bool:
        return self.type_name == BOOLEAN_TYPE_NAME

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "property_name": self.property_name,
            "type_name": self.type_name,
            "documentation": self.documentation,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True, slots=True)
class BoundAttributeDescriptor:
    """An HTML attribute bound to a property of the tag helper type."""

    name: str
    property_name: str
    type_name: str
    display_name: str
    documentation: str | None = None
    containing_type: str | None = None
    is_enum: bool = False
    has_indexer: bool = False
    indexer_name_prefix: str | None = None
    indexer_type_name: str | None = None
    is_directive_attribute: bool = False
    is_weakly_typed: bool = False
    is_editor_required: bool = False
    parameters: tuple[BoundAttributeParameterDescriptor, ...] = ()
    metadata: MetadataCollection = EMPTY_METADATA
    diagnostics: tuple[Diagnostic, ...] = ()
    parent: TagHelperDescriptor | None = field(
        default=None, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        for parameter in self.parameters:
            object.__setattr__(parameter, "parent", self)

    @property
    def is_string_property(self) -> bool:
        return self.type_name == STRING_TYPE_NAME

    @property
    def is_boolean_property(self) -> bool:
        return self.type_name == BOOLEAN_TYPE_NAME

    @property
    def is_indexer_string_property(self) -> bool:
        return self.indexer_type_name == STRING_TYPE_NAME

    @property
    def is_indexer_boolean_property(self) -> bool:
        return self.indexer_type_name == BOOLEAN_TYPE_NAME

    @property
    def is_child_content_property(self) -> bool:
        return self.metadata.get(keys.Components.CHILD_CONTENT) == keys.TRUE

    @property
    def is_parameterized_child_content_property(self) -> bool:
        return self.is_child_content_property and self.type_name.startswith(
            "Microsoft.AspNetCore.Components.RenderFragment<"
        )

    @property
    def is_event_callback_property(self) -> bool:
        return self.metadata.get(keys.Components.EVENT_CALLBACK) == keys.TRUE

    @property
    def is_delegate_property(self) -> bool:
        return self.metadata.get(keys.Components.DELEGATE_SIGNATURE) == keys.TRUE

    def get_all_diagnostics(self) -> Iterator[Diagnostic]:
        for parameter in self.parameters:
            yield from parameter.diagnostics
        yield from self.diagnostics

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.get_all_diagnostics())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "property_name": self.property_name,
            "type_name": self.type_name,
            "display_name": self.display_name,
            "documentation": self.documentation,
            "is_enum": self.is_enum,
            "is_string_property": self.is_string_property,
            "is_boolean_property": self.is_boolean_property,
            "has_indexer": self.has_indexer,
            "indexer_name_prefix": self.indexer_name_prefix,
            "indexer_type_name": self.indexer_type_name,
            "is_directive_attribute": self.is_directive_attribute,
            "parameters": [p.to_dict() for p in self.parameters],
            "metadata": dict(self.metadata),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True, slots=True)
class TagHelperDescriptor:
    """Everything code generation needs to know about one tag helper."""

    kind: TagHelperKind
    name: str
    assembly_name: str
    display_name: str
    type_name: str
    tag_matching_rules: tuple[TagMatchingRuleDescriptor, ...]
    documentation: str | None = None
    case_sensitive: bool = False
    classify_attributes_only: bool = False
    tag_output_hint: str | None = None
    allowed_child_tags: tuple[str, ...] = ()
    bound_attributes: tuple[BoundAttributeDescriptor, ...] = ()
    metadata: MetadataCollection = EMPTY_METADATA
    diagnostics: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        if not self.tag_matching_rules:
            raise ValueError(f"Tag helper '{self.name}' must have at least one tag matching rule")
        for attribute in self.bound_attributes:
            object.__setattr__(attribute, "parent", self)

    @property
    def type_namespace(self) -> str | None:
        return self.metadata.get(keys.Common.TYPE_NAMESPACE)

    @property
    def type_name_identifier(self) -> str | None:
        return self.metadata.get(keys.Common.TYPE_NAME_IDENTIFIER)

    @property
    def is_fully_qualified_name_match(self) -> bool:
        return (
            self.metadata.get(keys.Components.NAME_MATCH)
            == keys.Components.FULLY_QUALIFIED_NAME_MATCH
        )

    def get_child_content_properties(self) -> Iterator[BoundAttributeDescriptor]:
        return (a for a in self.bound_attributes if a.is_child_content_property)

    def get_all_diagnostics(self) -> Iterator[Diagnostic]:
        """Walk rules, required attributes, bound attributes, then self."""
        for rule in self.tag_matching_rules:
            yield from rule.get_all_diagnostics()
        for attribute in self.bound_attributes:
            yield from attribute.get_all_diagnostics()
        yield from self.diagnostics

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.get_all_diagnostics())

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "assembly_name": self.assembly_name,
            "display_name": self.display_name,
            "type_name": self.type_name,
            "documentation": self.documentation,
            "case_sensitive": self.case_sensitive,
            "classify_attributes_only": self.classify_attributes_only,
            "tag_output_hint": self.tag_output_hint,
            "allowed_child_tags": list(self.allowed_child_tags),
            "tag_matching_rules": [r.to_dict() for r in self.tag_matching_rules],
            "bound_attributes": [a.to_dict() for a in self.bound_attributes],
            "metadata": dict(self.metadata),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "has_errors": self.has_errors,
        }
