"""Symbol facade and the manifest-backed symbol table."""

from taghelpers.symbols.facade import (
    AttributeData,
    PropertySymbol,
    TypeKind,
    TypeParameterSymbol,
    TypeReference,
    TypeSymbol,
    base_types,
    find_attribute,
    find_attributes,
    has_attribute,
    implements,
    is_accessible,
    self_and_base_types,
)
from taghelpers.symbols.manifest import SymbolTable, load_manifest, parse_manifest
from taghelpers.symbols.model import (
    SymbolAttribute,
    SymbolProperty,
    SymbolType,
    SymbolTypeParameter,
    SymbolTypeReference,
)

__all__ = [
    # Protocols
    "AttributeData",
    "PropertySymbol",
    "TypeKind",
    "TypeParameterSymbol",
    "TypeReference",
    "TypeSymbol",
    # Helpers
    "base_types",
    "find_attribute",
    "find_attributes",
    "has_attribute",
    "implements",
    "is_accessible",
    "self_and_base_types",
    # In-memory symbols
    "SymbolAttribute",
    "SymbolProperty",
    "SymbolType",
    "SymbolTypeParameter",
    "SymbolTypeReference",
    # Manifests
    "SymbolTable",
    "load_manifest",
    "parse_manifest",
]
