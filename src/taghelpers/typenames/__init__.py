"""Type-name tokenizing and rewriting."""

from taghelpers.typenames.generic import (
    UNSPECIFIED_TYPE_NAME,
    GenericTypeNameRewriter,
    rewrite_generic_type_name,
)
from taghelpers.typenames.global_qualified import (
    GLOBAL_PREFIX,
    GlobalQualifiedTypeNameRewriter,
    global_qualify_type_name,
)
from taghelpers.typenames.tokenizer import ListKind, Token, TokenKind, TypeNameTokenizer, tokenize

__all__ = [
    # Tokenizer
    "ListKind",
    "Token",
    "TokenKind",
    "TypeNameTokenizer",
    "tokenize",
    # Rewriters
    "GLOBAL_PREFIX",
    "UNSPECIFIED_TYPE_NAME",
    "GenericTypeNameRewriter",
    "GlobalQualifiedTypeNameRewriter",
    "global_qualify_type_name",
    "rewrite_generic_type_name",
]
