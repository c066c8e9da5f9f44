"""Immutable metadata map and the well-known keys stored in it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class MetadataCollection(Mapping[str, str]):
    """Read-only, hashable ``str -> str`` map with order-insensitive equality."""

    __slots__ = ("_items", "_lookup")

    def __init__(self, items: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        lookup = dict(items or {})
        self._items: tuple[tuple[str, str], ...] = tuple(sorted(lookup.items()))
        self._lookup = lookup

    def __getitem__(self, key: str) -> str:
        return self._lookup[key]

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MetadataCollection):
            return self._items == other._items
        if isinstance(other, Mapping):
            return dict(self._items) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"MetadataCollection({dict(self._items)!r})"


EMPTY_METADATA = MetadataCollection()

TRUE = "True"
FALSE = "False"


def bool_string(value: bool) -> str:
    return TRUE if value else FALSE


class Common:
    TYPE_NAME = "Common.TypeName"
    TYPE_NAMESPACE = "Common.TypeNamespace"
    TYPE_NAME_IDENTIFIER = "Common.TypeNameIdentifier"
    PROPERTY_NAME = "Common.PropertyName"
    DIRECTIVE_ATTRIBUTE = "Common.DirectiveAttribute"
    CLASSIFY_ATTRIBUTES_ONLY = "Common.ClassifyAttributesOnly"
    GLOBALLY_QUALIFIED_TYPE_NAME = "Common.GloballyQualifiedTypeName"


class Runtime:
    NAME = "Runtime.Name"
    TAG_HELPER = "ITagHelper"
    COMPONENT = "Components.IComponent"
    NONE = "Components.None"


class Components:
    SPECIAL_KIND = "Components.IsSpecialKind"
    NAME_MATCH = "Components.NameMatch"
    FULLY_QUALIFIED_NAME_MATCH = "Components.FullyQualifiedNameMatch"
    GENERIC_TYPED = "Components.GenericTyped"
    TYPE_PARAMETER = "Components.TypeParameter"
    TYPE_PARAMETER_IS_CASCADING = "Components.TypeParameterIsCascading"
    TYPE_PARAMETER_CONSTRAINTS = "Components.TypeParameterConstraints"
    CHILD_CONTENT = "Components.ChildContent"
    CHILD_CONTENT_PARAMETER_NAME = "Components.ChildContentParameterName"
    EVENT_CALLBACK = "Components.EventCallback"
    DELEGATE_SIGNATURE = "Components.DelegateSignature"
    DELEGATE_WITH_AWAITABLE_RESULT = "Components.DelegateWithAwaitableResult"


class Bind:
    VALUE_ATTRIBUTE = "Components.Bind.ValueAttribute"
    CHANGE_ATTRIBUTE = "Components.Bind.ChangeAttribute"
    EXPRESSION_ATTRIBUTE = "Components.Bind.ExpressionAttribute"
    IS_INVARIANT_CULTURE = "Components.Bind.IsInvariantCulture"
    FORMAT = "Components.Bind.Format"
    TYPE_ATTRIBUTE = "Components.Bind.TypeAttribute"
    FALLBACK = "Components.Bind.Fallback"


class EventHandler:
    EVENT_ARGS_TYPE = "Components.EventHandler.EventArgs"
