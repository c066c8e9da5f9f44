"""Plain in-memory symbols satisfying the facade protocols.

The manifest loader produces these, and tests build them directly.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from taghelpers.symbols.facade import TypeKind


@dataclass(frozen=True, slots=True)
class SymbolAttribute:
    attribute_type: str
    constructor_arguments: Sequence[Any] = ()
    named_arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SymbolTypeReference:
    display_name: str
    kind: TypeKind = TypeKind.CLASS
    constructed_from: str | None = None
    dictionary_key_type: str | None = None
    dictionary_value_type: str | None = None
    has_type_parameter: bool = False
    returns_awaitable: bool = False


@dataclass(frozen=True, slots=True)
class SymbolTypeParameter:
    name: str
    has_reference_type_constraint: bool = False
    has_not_null_constraint: bool = False
    has_unmanaged_type_constraint: bool = False
    has_value_type_constraint: bool = False
    has_constructor_constraint: bool = False
    constraint_types: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class SymbolProperty:
    name: str
    type: SymbolTypeReference
    is_public: bool = True
    has_public_getter: bool = True
    has_setter: bool = True
    has_public_setter: bool = True
    is_static: bool = False
    is_indexer: bool = False
    is_override: bool = False
    attributes: Sequence[SymbolAttribute] = ()
    doc_comment: str | None = None


@dataclass(eq=False, slots=True)
class SymbolType:
    """A named type. ``base_type`` and ``containing_type`` are linked objects."""

    name: str
    namespace: str = ""
    assembly_name: str = ""
    kind: TypeKind = TypeKind.CLASS
    is_public: bool = True
    is_abstract: bool = False
    is_static: bool = False
    type_parameters: Sequence[SymbolTypeParameter] = ()
    containing_type: SymbolType | None = None
    base_type: SymbolType | None = None
    interfaces: Sequence[str] = ()
    attributes: Sequence[SymbolAttribute] = ()
    properties: Sequence[SymbolProperty] = ()
    doc_comment: str | None = None

    @property
    def arity(self) -> int:
        return len(self.type_parameters)

    @property
    def full_name(self) -> str:
        """Metadata name with type parameters, e.g. ``Test.Grid<TItem>``."""
        if self.containing_type is not None:
            prefix = self.containing_type.full_name + "."
        elif self.namespace:
            prefix = self.namespace + "."
        else:
            prefix = ""
        name = self.name
        if self.type_parameters:
            name += "<" + ", ".join(p.name for p in self.type_parameters) + ">"
        return prefix + name

    def __repr__(self) -> str:
        return f"SymbolType({self.full_name!r})"
