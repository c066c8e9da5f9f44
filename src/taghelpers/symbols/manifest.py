"""Type manifests: symbols described in YAML or JSON.

A manifest lists the types of one or more assemblies with just enough
detail for discovery. Base and containing types are referenced by full
name and must themselves appear in the manifest.

Usage::

    table = load_manifest(Path("types.yaml"))
    for symbol in table:
        ...

Example document::

    assembly: TestAssembly
    types:
      - name: TagHelper
        namespace: Microsoft.AspNetCore.Razor.TagHelpers
        abstract: true
        interfaces: [Microsoft.AspNetCore.Razor.TagHelpers.ITagHelper]
      - name: BoldTagHelper
        namespace: Test
        base_type: Microsoft.AspNetCore.Razor.TagHelpers.TagHelper
        attributes:
          - type: Microsoft.AspNetCore.Razor.TagHelpers.HtmlTargetElementAttribute
            args: [b]
        properties:
          - name: Title
            type: System.String
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from taghelpers.core.errors import ManifestError
from taghelpers.core.logging import get_logger
from taghelpers.symbols.facade import TypeKind
from taghelpers.symbols.model import (
    SymbolAttribute,
    SymbolProperty,
    SymbolType,
    SymbolTypeParameter,
    SymbolTypeReference,
)

log = get_logger(__name__)

Accessibility = Literal["public", "internal", "protected", "private"]
Accessor = Literal["public", "private", "none"]

_CONSTRAINT_KEYWORDS = {"class", "notnull", "unmanaged", "struct", "new()"}


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class DictionaryManifest(_Strict):
    key: str
    value: str


class TypeReferenceManifest(_Strict):
    name: str = Field(description="Display name, e.g. System.Collections.Generic.List<System.String>")
    kind: TypeKind = TypeKind.CLASS
    constructed_from: str | None = None
    dictionary: DictionaryManifest | None = Field(
        default=None, description="Key/value types when the type implements IDictionary<TKey, TValue>"
    )
    has_type_parameter: bool = False
    returns_awaitable: bool = False

    def to_symbol(self) -> SymbolTypeReference:
        return SymbolTypeReference(
            display_name=self.name,
            kind=self.kind,
            constructed_from=self.constructed_from,
            dictionary_key_type=self.dictionary.key if self.dictionary else None,
            dictionary_value_type=self.dictionary.value if self.dictionary else None,
            has_type_parameter=self.has_type_parameter or self.kind is TypeKind.TYPE_PARAMETER,
            returns_awaitable=self.returns_awaitable,
        )


class AttributeManifest(_Strict):
    type: str
    args: list[Any] = Field(default_factory=list)
    named: dict[str, Any] = Field(default_factory=dict)

    def to_symbol(self) -> SymbolAttribute:
        return SymbolAttribute(self.type, tuple(self.args), dict(self.named))


class TypeParameterManifest(_Strict):
    name: str
    constraints: list[str] = Field(
        default_factory=list,
        description="Keywords (class, notnull, unmanaged, struct, new()) or constraint type names",
    )

    @field_validator("constraints")
    @classmethod
    def strip_constraints(cls, v: list[str]) -> list[str]:
        return [c.strip() for c in v if c.strip()]

    def to_symbol(self) -> SymbolTypeParameter:
        keywords = {c for c in self.constraints if c in _CONSTRAINT_KEYWORDS}
        return SymbolTypeParameter(
            name=self.name,
            has_reference_type_constraint="class" in keywords,
            has_not_null_constraint="notnull" in keywords,
            has_unmanaged_type_constraint="unmanaged" in keywords,
            has_value_type_constraint="struct" in keywords,
            has_constructor_constraint="new()" in keywords,
            constraint_types=tuple(c for c in self.constraints if c not in _CONSTRAINT_KEYWORDS),
        )


class PropertyManifest(_Strict):
    name: str
    type: TypeReferenceManifest
    accessibility: Accessibility = "public"
    getter: Accessor = Field(default="public", alias="get")
    setter: Accessor = Field(default="public", alias="set")
    static: bool = False
    indexer: bool = False
    override: bool = False
    attributes: list[AttributeManifest] = Field(default_factory=list)
    doc: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type_name(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {"name": v}
        return v

    def to_symbol(self) -> SymbolProperty:
        public = self.accessibility == "public"
        return SymbolProperty(
            name=self.name,
            type=self.type.to_symbol(),
            is_public=public,
            has_public_getter=public and self.getter == "public",
            has_setter=self.setter != "none",
            has_public_setter=public and self.setter == "public",
            is_static=self.static,
            is_indexer=self.indexer,
            is_override=self.override,
            attributes=tuple(a.to_symbol() for a in self.attributes),
            doc_comment=self.doc,
        )


class TypeManifest(_Strict):
    name: str
    namespace: str = ""
    assembly: str | None = None
    kind: TypeKind = TypeKind.CLASS
    accessibility: Accessibility = "public"
    abstract: bool = False
    static: bool = False
    type_parameters: list[TypeParameterManifest] = Field(default_factory=list)
    containing_type: str | None = Field(default=None, description="Full name of the enclosing type")
    base_type: str | None = Field(default=None, description="Full name of the direct base type")
    interfaces: list[str] = Field(default_factory=list)
    attributes: list[AttributeManifest] = Field(default_factory=list)
    properties: list[PropertyManifest] = Field(default_factory=list)
    doc: str | None = None

    @field_validator("type_parameters", mode="before")
    @classmethod
    def coerce_type_parameter_names(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [{"name": p} if isinstance(p, str) else p for p in v]
        return v


class ManifestDocument(_Strict):
    assembly: str | None = Field(default=None, description="Default assembly for every type")
    types: list[TypeManifest] = Field(default_factory=list)


class SymbolTable:
    """Resolved types in manifest order, indexed by full name."""

    def __init__(self, types: list[SymbolType]) -> None:
        self._types = list(types)
        self._by_name = {t.full_name: t for t in self._types}

    @classmethod
    def from_document(cls, document: ManifestDocument) -> SymbolTable:
        pending: list[tuple[TypeManifest, SymbolType]] = []
        for index, entry in enumerate(document.types):
            assembly = entry.assembly or document.assembly
            if not assembly:
                raise ManifestError.invalid_entry(f"types[{index}]", f"type '{entry.name}' has no assembly")
            symbol = SymbolType(
                name=entry.name,
                namespace=entry.namespace,
                assembly_name=assembly,
                kind=entry.kind,
                is_public=entry.accessibility == "public",
                is_abstract=entry.abstract,
                is_static=entry.static,
                type_parameters=tuple(p.to_symbol() for p in entry.type_parameters),
                interfaces=tuple(entry.interfaces),
                attributes=tuple(a.to_symbol() for a in entry.attributes),
                properties=tuple(p.to_symbol() for p in entry.properties),
                doc_comment=entry.doc,
            )
            pending.append((entry, symbol))

        _link_containing_types(pending)
        by_name = {symbol.full_name: symbol for _, symbol in pending}

        for entry, symbol in pending:
            if entry.base_type is None:
                continue
            base = by_name.get(entry.base_type)
            if base is None:
                raise ManifestError.unresolved_type(entry.base_type, symbol.full_name)
            symbol.base_type = base

        for _, symbol in pending:
            _check_base_cycle(symbol)

        return cls([symbol for _, symbol in pending])

    def get(self, full_name: str) -> SymbolType | None:
        return self._by_name.get(full_name)

    def __iter__(self) -> Iterator[SymbolType]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, full_name: object) -> bool:
        return full_name in self._by_name


def _link_containing_types(pending: list[tuple[TypeManifest, SymbolType]]) -> None:
    """Resolve nested types outward-in; full names depend on the enclosing type."""
    unresolved = [(e, s) for e, s in pending if e.containing_type is not None]
    resolved = {s.full_name: s for e, s in pending if e.containing_type is None}

    while unresolved:
        remaining = []
        for entry, symbol in unresolved:
            container = resolved.get(entry.containing_type or "")
            if container is None:
                remaining.append((entry, symbol))
                continue
            symbol.containing_type = container
            resolved[symbol.full_name] = symbol
        if len(remaining) == len(unresolved):
            entry, _ = remaining[0]
            raise ManifestError.unresolved_type(entry.containing_type or "", entry.name)
        unresolved = remaining


def _check_base_cycle(symbol: SymbolType) -> None:
    seen = {id(symbol)}
    current = symbol.base_type
    while current is not None:
        if id(current) in seen:
            raise ManifestError.invalid_entry(symbol.full_name, "base type chain is cyclic")
        seen.add(id(current))
        current = current.base_type


def parse_manifest(data: Any, source: str = "<memory>") -> SymbolTable:
    """Validate an already-decoded manifest and resolve it."""
    if not isinstance(data, dict):
        raise ManifestError.parse_error(source, "top-level value must be a mapping")
    try:
        document = ManifestDocument.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        location = ".".join(str(loc) for loc in err["loc"])
        raise ManifestError.invalid_entry(location, err["msg"]) from e

    table = SymbolTable.from_document(document)
    log.debug("manifest_loaded", source=source, types=len(table))
    return table


def load_manifest(path: Path) -> SymbolTable:
    """Read a ``.yaml``/``.yml`` or ``.json`` manifest from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError.parse_error(str(path), e.strerror or str(e)) from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ManifestError.parse_error(str(path), str(e)) from e

    return parse_manifest(data, source=str(path))
