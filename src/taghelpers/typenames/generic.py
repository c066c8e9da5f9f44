"""Substitute type arguments for type parameters in a type name.

Usage::

    rewriter = GenericTypeNameRewriter({"TItem": "System.String", "TKey": None})
    rewriter.rewrite("Dictionary<TKey, List<TItem>>")
    # -> "Dictionary<System.Object, List<System.String>>"
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from taghelpers.typenames.tokenizer import (
    Token,
    TokenKind,
    is_reference_start,
    next_significant,
    tokenize,
)

UNSPECIFIED_TYPE_NAME = "System.Object"

_NOT_A_PARAMETER_WHEN_FOLLOWED_BY = frozenset({TokenKind.DOT, TokenKind.DOUBLE_COLON, TokenKind.LESS_THAN})


class GenericTypeNameRewriter:
    """Replace bound type parameters; ``None`` marks an unspecified argument.

    Only a bare simple name is a type parameter reference: an identifier
    that starts a reference and is neither qualified further (``T.X``,
    ``T::X``) nor given type arguments of its own (``T<X>``). Everything
    else, comments and whitespace included, is copied through unchanged.
    """

    def __init__(self, bindings: Mapping[str, str | None]) -> None:
        self._bindings = dict(bindings)

    def rewrite(self, type_name: str) -> str:
        tokens = tokenize(type_name)
        parts: list[str] = []
        for index, token in enumerate(tokens):
            if (
                token.kind is TokenKind.IDENTIFIER
                and token.text in self._bindings
                and self._is_parameter(tokens, index)
            ):
                replacement = self._bindings[token.text]
                parts.append(UNSPECIFIED_TYPE_NAME if replacement is None else replacement)
            else:
                parts.append(token.text)
        return "".join(parts)

    @staticmethod
    def _is_parameter(tokens: Sequence[Token], index: int) -> bool:
        if not is_reference_start(tokens, index):
            return False
        following = next_significant(tokens, index)
        return following is None or following.kind not in _NOT_A_PARAMETER_WHEN_FOLLOWED_BY


def rewrite_generic_type_name(type_name: str, bindings: Mapping[str, str | None]) -> str:
    return GenericTypeNameRewriter(bindings).rewrite(type_name)
