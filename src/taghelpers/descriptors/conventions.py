"""Naming conventions shared by the descriptor builders and producers.

HTML casing turns a CLR-style identifier into a lowercase, hyphen separated
tag or attribute name::

    SingleAttribute  -> single-attribute
    CAPSOnOUTSIDE    -> caps-on-outside
    One1Two2Three3   -> one1-two2-three3
    ONE1TWO2THREE3   -> one1two2three3

A hyphen goes before an uppercase letter that either follows a lowercase
letter, or follows a letter/digit and is itself followed by a lowercase
letter. Digits never start a word.
"""

from __future__ import annotations

import re

ELEMENT_CATCH_ALL_NAME = "*"
TAG_HELPER_NAME_SUFFIX = "TagHelper"
RESERVED_ATTRIBUTE_PREFIX = "data-"
DIRECTIVE_ATTRIBUTE_PREFIX = "@"

_HTML_CASE_PATTERN = re.compile(r"(?<=[a-zA-Z0-9])[A-Z](?=[a-z])|(?<=[a-z])[A-Z]")

INVALID_NON_WHITESPACE_NAME_CHARACTERS = frozenset("!@/<>?[]=\"'*")


def to_html_case(name: str) -> str:
    return _HTML_CASE_PATTERN.sub(lambda m: "-" + m.group(0), name).lower()


def strip_tag_helper_suffix(name: str) -> str:
    """Drop a trailing ``TagHelper`` (any case) from a type name."""
    if name.lower().endswith(TAG_HELPER_NAME_SUFFIX.lower()):
        return name[: -len(TAG_HELPER_NAME_SUFFIX)]
    return name


def is_null_or_whitespace(value: str | None) -> bool:
    return value is None or not value.strip()


def is_invalid_name_character(ch: str) -> bool:
    return ch.isspace() or ch in INVALID_NON_WHITESPACE_NAME_CHARACTERS


def invalid_name_characters(name: str, *, distinct: bool = True) -> list[str]:
    """Return the forbidden characters of ``name`` in scan order.

    With ``distinct`` each character is reported once, at its first
    occurrence; otherwise every occurrence is reported.
    """
    found: list[str] = []
    for ch in name:
        if not is_invalid_name_character(ch):
            continue
        if distinct and ch in found:
            continue
        found.append(ch)
    return found


def has_reserved_prefix(name: str | None) -> bool:
    return name is not None and name.lower().startswith(RESERVED_ATTRIBUTE_PREFIX)


def strip_directive_prefix(name: str, is_directive_attribute: bool) -> str:
    """Directive attribute names are validated without their leading ``@``."""
    if is_directive_attribute and name.startswith(DIRECTIVE_ATTRIBUTE_PREFIX):
        return name[len(DIRECTIVE_ATTRIBUTE_PREFIX) :]
    return name
