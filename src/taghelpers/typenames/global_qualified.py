"""Prefix type references with ``global::``.

Usage::

    rewriter = GlobalQualifiedTypeNameRewriter({"TItem"})
    rewriter.rewrite("System.Collections.Generic.List<TItem>")
    # -> "global::System.Collections.Generic.List<TItem>"
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from taghelpers.typenames.tokenizer import (
    Token,
    TokenKind,
    is_reference_start,
    next_significant,
    tokenize,
)

GLOBAL_PREFIX = "global::"

# Keyword types cannot be namespace-qualified.
PREDEFINED_TYPE_KEYWORDS = frozenset(
    {
        "bool",
        "byte",
        "char",
        "decimal",
        "double",
        "dynamic",
        "float",
        "int",
        "long",
        "nint",
        "nuint",
        "object",
        "sbyte",
        "short",
        "string",
        "uint",
        "ulong",
        "ushort",
        "var",
        "void",
    }
)


class GlobalQualifiedTypeNameRewriter:
    """Qualify every type reference that is not a known type parameter.

    The prefix goes once, before the first segment of a reference. A
    reference led by a type parameter stays as written, while its type
    arguments are still visited on their own. Alias-qualified names
    (``global::X``, ``alias::X``) and keyword types are left alone.
    """

    def __init__(self, type_parameters: Iterable[str] = ()) -> None:
        self._type_parameters = frozenset(type_parameters)

    def rewrite(self, type_name: str) -> str:
        tokens = tokenize(type_name)
        parts: list[str] = []
        for index, token in enumerate(tokens):
            if token.kind is TokenKind.IDENTIFIER and self._needs_prefix(tokens, index):
                parts.append(GLOBAL_PREFIX)
            parts.append(token.text)
        return "".join(parts)

    def _needs_prefix(self, tokens: Sequence[Token], index: int) -> bool:
        text = tokens[index].text
        if text in self._type_parameters or text in PREDEFINED_TYPE_KEYWORDS:
            return False
        if not is_reference_start(tokens, index):
            return False
        following = next_significant(tokens, index)
        return following is None or following.kind is not TokenKind.DOUBLE_COLON


def global_qualify_type_name(type_name: str, type_parameters: Iterable[str] = ()) -> str:
    return GlobalQualifiedTypeNameRewriter(type_parameters).rewrite(type_name)
