"""Lexer for type-name strings.

Splits text such as ``System.Collections.Generic.Dictionary<TKey, (int, TValue[])>``
into tokens in a single left-to-right pass. Concatenating the ``text`` of
every token reproduces the input exactly, so rewriters can edit a token
list and join it back without disturbing anything they did not touch.

A stack of open brackets tracks nesting, which is enough to tell a comma
separating generic arguments from one separating tuple elements or array
ranks. Line and block comments are accepted anywhere whitespace is.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    IDENTIFIER = "identifier"
    DOT = "dot"
    DOUBLE_COLON = "double_colon"
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"
    COMMA = "comma"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    WHITESPACE = "whitespace"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    OTHER = "other"


class ListKind(Enum):
    """What an enclosing bracket pair delimits."""

    NONE = "none"
    TYPE_ARGUMENTS = "type_arguments"
    TUPLE = "tuple"
    ARRAY_RANK = "array_rank"


TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT})

_PUNCTUATION = {
    ".": TokenKind.DOT,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    ",": TokenKind.COMMA,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
}

_OPENERS = {
    TokenKind.LESS_THAN: ListKind.TYPE_ARGUMENTS,
    TokenKind.OPEN_PAREN: ListKind.TUPLE,
    TokenKind.OPEN_BRACKET: ListKind.ARRAY_RANK,
}

_CLOSERS = {
    TokenKind.GREATER_THAN: ListKind.TYPE_ARGUMENTS,
    TokenKind.CLOSE_PAREN: ListKind.TUPLE,
    TokenKind.CLOSE_BRACKET: ListKind.ARRAY_RANK,
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    start: int
    list_kind: ListKind = ListKind.NONE

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA


def _is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch in "_@"


def _is_identifier_part(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


class TypeNameTokenizer:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._stack: list[ListKind] = []

    def __iter__(self) -> Iterator[Token]:
        while self._pos < len(self._text):
            yield self._next_token()

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self._text[index] if index < len(self._text) else ""

    def _make(self, kind: TokenKind, start: int) -> Token:
        list_kind = self._stack[-1] if self._stack else ListKind.NONE
        return Token(kind, self._text[start : self._pos], start, list_kind)

    def _next_token(self) -> Token:
        start = self._pos
        ch = self._peek()

        if ch.isspace():
            while self._peek().isspace():
                self._pos += 1
            return self._make(TokenKind.WHITESPACE, start)

        if ch == "/" and self._peek(1) == "/":
            end = self._text.find("\n", self._pos)
            self._pos = len(self._text) if end == -1 else end
            return self._make(TokenKind.LINE_COMMENT, start)

        if ch == "/" and self._peek(1) == "*":
            end = self._text.find("*/", self._pos + 2)
            self._pos = len(self._text) if end == -1 else end + 2
            return self._make(TokenKind.BLOCK_COMMENT, start)

        if _is_identifier_start(ch):
            self._pos += 1
            while _is_identifier_part(self._peek()):
                self._pos += 1
            return self._make(TokenKind.IDENTIFIER, start)

        if ch == ":" and self._peek(1) == ":":
            self._pos += 2
            return self._make(TokenKind.DOUBLE_COLON, start)

        kind = _PUNCTUATION.get(ch, TokenKind.OTHER)
        self._pos += 1

        if kind in _CLOSERS and self._stack and self._stack[-1] is _CLOSERS[kind]:
            # Brackets report the list enclosing the one they delimit.
            self._stack.pop()
            return self._make(kind, start)

        token = self._make(kind, start)
        if kind in _OPENERS:
            self._stack.append(_OPENERS[kind])
        return token


def tokenize(text: str) -> list[Token]:
    return list(TypeNameTokenizer(text))


def previous_significant(tokens: Sequence[Token], index: int) -> Token | None:
    for i in range(index - 1, -1, -1):
        if not tokens[i].is_trivia:
            return tokens[i]
    return None


def next_significant(tokens: Sequence[Token], index: int) -> Token | None:
    for i in range(index + 1, len(tokens)):
        if not tokens[i].is_trivia:
            return tokens[i]
    return None


_REFERENCE_START_PREDECESSORS = frozenset({TokenKind.LESS_THAN, TokenKind.OPEN_PAREN})
_ELEMENT_LISTS = frozenset({ListKind.TYPE_ARGUMENTS, ListKind.TUPLE})


def is_reference_start(tokens: Sequence[Token], index: int) -> bool:
    """Whether the identifier at ``index`` begins a type reference.

    Dotted segments, alias-qualified segments and tuple element names all
    follow some other significant token and so are excluded. A comma only
    starts a reference when it separates type arguments or tuple elements.
    """
    previous = previous_significant(tokens, index)
    if previous is None or previous.kind in _REFERENCE_START_PREDECESSORS:
        return True
    return previous.kind is TokenKind.COMMA and previous.list_kind in _ELEMENT_LISTS
