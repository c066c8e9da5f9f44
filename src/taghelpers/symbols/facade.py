"""Read-only view of compiled type symbols.

Discovery never talks to a compiler directly. It asks these protocols the
handful of questions it needs (modifiers, attributes, base chain,
properties, doc comments), so any host that can answer them can drive it:
the manifest loader in ``taghelpers.symbols.manifest`` is one such host.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from typing import Any, Protocol


class TypeKind(Enum):
    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"
    DELEGATE = "delegate"
    TYPE_PARAMETER = "type_parameter"
    ARRAY = "array"


class AttributeData(Protocol):
    """An attribute instance applied to a type or property."""

    @property
    def attribute_type(self) -> str: ...

    @property
    def constructor_arguments(self) -> Sequence[Any]: ...

    @property
    def named_arguments(self) -> Mapping[str, Any]: ...


class TypeReference(Protocol):
    """The declared type of a property."""

    @property
    def display_name(self) -> str: ...

    @property
    def kind(self) -> TypeKind: ...

    @property
    def constructed_from(self) -> str | None: ...

    @property
    def dictionary_key_type(self) -> str | None: ...

    @property
    def dictionary_value_type(self) -> str | None: ...

    @property
    def has_type_parameter(self) -> bool: ...

    @property
    def returns_awaitable(self) -> bool: ...


class TypeParameterSymbol(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def has_reference_type_constraint(self) -> bool: ...

    @property
    def has_not_null_constraint(self) -> bool: ...

    @property
    def has_unmanaged_type_constraint(self) -> bool: ...

    @property
    def has_value_type_constraint(self) -> bool: ...

    @property
    def has_constructor_constraint(self) -> bool: ...

    @property
    def constraint_types(self) -> Sequence[str]: ...


class PropertySymbol(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def type(self) -> TypeReference: ...

    @property
    def is_public(self) -> bool: ...

    @property
    def has_public_getter(self) -> bool: ...

    @property
    def has_setter(self) -> bool: ...

    @property
    def has_public_setter(self) -> bool: ...

    @property
    def is_static(self) -> bool: ...

    @property
    def is_indexer(self) -> bool: ...

    @property
    def is_override(self) -> bool: ...

    @property
    def attributes(self) -> Sequence[AttributeData]: ...

    @property
    def doc_comment(self) -> str | None: ...


class TypeSymbol(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def full_name(self) -> str: ...

    @property
    def namespace(self) -> str: ...

    @property
    def assembly_name(self) -> str: ...

    @property
    def kind(self) -> TypeKind: ...

    @property
    def is_public(self) -> bool:
        """Declared accessibility of this type alone."""
        ...

    @property
    def is_abstract(self) -> bool: ...

    @property
    def is_static(self) -> bool: ...

    @property
    def arity(self) -> int: ...

    @property
    def type_parameters(self) -> Sequence[TypeParameterSymbol]: ...

    @property
    def containing_type(self) -> TypeSymbol | None: ...

    @property
    def base_type(self) -> TypeSymbol | None: ...

    @property
    def interfaces(self) -> Sequence[str]:
        """Full names of interfaces declared on this type (not inherited)."""
        ...

    @property
    def attributes(self) -> Sequence[AttributeData]: ...

    @property
    def properties(self) -> Sequence[PropertySymbol]: ...

    @property
    def doc_comment(self) -> str | None: ...


def base_types(symbol: TypeSymbol) -> Iterator[TypeSymbol]:
    """Yield the base-type chain, nearest first, excluding ``symbol``."""
    current = symbol.base_type
    while current is not None:
        yield current
        current = current.base_type


def self_and_base_types(symbol: TypeSymbol) -> Iterator[TypeSymbol]:
    yield symbol
    yield from base_types(symbol)


def is_accessible(symbol: TypeSymbol) -> bool:
    """Public, and public through every enclosing type."""
    current: TypeSymbol | None = symbol
    while current is not None:
        if not current.is_public:
            return False
        current = current.containing_type
    return True


def implements(symbol: TypeSymbol, interface_name: str) -> bool:
    return any(interface_name in t.interfaces for t in self_and_base_types(symbol))


def find_attribute(attributes: Sequence[AttributeData], attribute_type: str) -> AttributeData | None:
    for attribute in attributes:
        if attribute.attribute_type == attribute_type:
            return attribute
    return None


def find_attributes(attributes: Sequence[AttributeData], attribute_type: str) -> list[AttributeData]:
    return [a for a in attributes if a.attribute_type == attribute_type]


def has_attribute(attributes: Sequence[AttributeData], attribute_type: str) -> bool:
    return find_attribute(attributes, attribute_type) is not None
