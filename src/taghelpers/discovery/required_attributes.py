"""Required-attribute selector parsing.

Grammar (comma separated, whitespace insignificant outside names/quotes)::

    selectors := selector ("," selector)*
    selector  := plain | css
    plain     := NAME ["*"]                    # "*" suffix = prefix match
    css       := "[" NAME [op value] "]"
    op        := "=" | "^=" | "$="               # full, prefix, suffix
    value     := QUOTED | UNQUOTED

Each selector becomes one required attribute on the rule being built. A
malformed selector still yields an attribute holding whatever was scanned,
with the diagnostics attached, and scanning resumes after the next comma.
Name validation (forbidden characters, empty names) happens when the rule
builder freezes the attribute.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from taghelpers.descriptors.builders import TagMatchingRuleDescriptorBuilder
from taghelpers.descriptors.diagnostics import Diagnostic, TagHelperDiagnostics
from taghelpers.descriptors.models import (
    NameComparison,
    RequiredAttributeDescriptor,
    ValueComparison,
)

WILDCARD_SUFFIX = "*"

_CSS_VALUE_COMPARISONS = {
    "=": ValueComparison.FULL_MATCH,
    "^": ValueComparison.PREFIX_MATCH,
    "$": ValueComparison.SUFFIX_MATCH,
}

_WHITESPACE = frozenset(" \t")
_PLAIN_NAME_TERMINATORS = _WHITESPACE | {",", WILDCARD_SUFFIX}
_CSS_NAME_TERMINATORS = _WHITESPACE | {",", "]"} | set(_CSS_VALUE_COMPARISONS)
_QUOTELESS_VALUE_TERMINATORS = _WHITESPACE | {"]"}


@dataclass
class _Selector:
    name: str = ""
    name_comparison: NameComparison = NameComparison.FULL_MATCH
    value: str | None = None
    value_comparison: ValueComparison = ValueComparison.NONE
    diagnostics: list[Diagnostic] = field(default_factory=list)


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    @property
    def current(self) -> str:
        return self._text[self._pos]

    def at(self, ch: str) -> bool:
        return not self.at_end and self.current == ch

    def move_next(self) -> None:
        self._pos += 1

    def skip_whitespace(self) -> None:
        while not self.at_end and self.current in _WHITESPACE:
            self._pos += 1

    def read_until(self, terminators: set[str] | frozenset[str]) -> str:
        start = self._pos
        while not self.at_end and self.current not in terminators:
            self._pos += 1
        return self._text[start : self._pos]

    def skip_past_next_comma(self) -> None:
        index = self._text.find(",", self._pos)
        self._pos = len(self._text) if index == -1 else index + 1

    def parse_next(self) -> _Selector | None:
        """Scan one selector; ``None`` once the input is exhausted."""
        if self.at_end:
            return None

        self.skip_whitespace()
        selector = _Selector()

        if self.at("["):
            if not self._parse_css_selector(selector):
                self.skip_past_next_comma()
                return selector
        else:
            self._parse_plain_selector(selector)

        self.skip_whitespace()

        if self.at(","):
            self.move_next()
            if self.at_end:
                selector.diagnostics.append(
                    TagHelperDiagnostics.could_not_find_matching_end_brace(self._text)
                )
        elif not self.at_end:
            selector.diagnostics.append(
                TagHelperDiagnostics.invalid_required_attribute_character(self.current, self._text)
            )
            self.skip_past_next_comma()

        return selector

    def _parse_plain_selector(self, selector: _Selector) -> None:
        selector.name = self.read_until(_PLAIN_NAME_TERMINATORS)
        if self.at(WILDCARD_SUFFIX):
            selector.name_comparison = NameComparison.PREFIX_MATCH
            self.move_next()

    def _ensure_not_at_end(self, selector: _Selector) -> bool:
        if not self.at_end:
            return True
        selector.diagnostics.append(
            TagHelperDiagnostics.could_not_find_matching_end_brace(self._text)
        )
        return False

    def _parse_css_selector(self, selector: _Selector) -> bool:
        self.move_next()  # "["
        self.skip_whitespace()
        selector.name = self.read_until(_CSS_NAME_TERMINATORS)
        self.skip_whitespace()

        if not self._ensure_not_at_end(selector):
            return False
        if not self._parse_value_comparison(selector):
            return False

        self.skip_whitespace()
        if not self._ensure_not_at_end(selector):
            return False

        if selector.value_comparison is not ValueComparison.NONE and not self._parse_value(selector):
            return False

        self.skip_whitespace()

        if self.at("]"):
            self.move_next()
            return True

        if self.at_end:
            selector.diagnostics.append(
                TagHelperDiagnostics.could_not_find_matching_end_brace(self._text)
            )
        else:
            selector.diagnostics.append(
                TagHelperDiagnostics.invalid_required_attribute_character(self.current, self._text)
            )
        return False

    def _parse_value_comparison(self, selector: _Selector) -> bool:
        ch = self.current
        comparison = _CSS_VALUE_COMPARISONS.get(ch)

        if comparison is not None:
            self.move_next()
            if ch == "=" or self.at("="):
                if ch != "=":
                    self.move_next()
                selector.value_comparison = comparison
                return True
            # "^" or "$" without "="
            selector.diagnostics.append(
                TagHelperDiagnostics.partial_required_attribute_operator(ch, self._text)
            )
            return False

        if not self.at("]"):
            selector.diagnostics.append(
                TagHelperDiagnostics.invalid_required_attribute_operator(ch, self._text)
            )
            return False

        return True

    def _parse_value(self, selector: _Selector) -> bool:
        if self.at("'") or self.at('"'):
            quote = self.current
            self.move_next()
            end = self._text.find(quote, self._pos)
            if end == -1:
                selector.diagnostics.append(
                    TagHelperDiagnostics.invalid_required_attribute_mismatched_quotes(quote, self._text)
                )
                return False
            selector.value = self._text[self._pos : end]
            self._pos = end + 1
            return True

        selector.value = self.read_until(_QUOTELESS_VALUE_TERMINATORS)
        return True


def add_required_attributes(text: str | None, rule: TagMatchingRuleDescriptorBuilder) -> None:
    """Parse ``text`` and append one required attribute per selector to ``rule``."""
    if not text:
        return

    parser = _Parser(text)
    while (selector := parser.parse_next()) is not None:
        attribute = rule.attribute(
            selector.name,
            name_comparison=selector.name_comparison,
            value=selector.value,
            value_comparison=selector.value_comparison,
        )
        attribute.diagnostics.extend(selector.diagnostics)


def parse_required_attributes(text: str | None) -> tuple[RequiredAttributeDescriptor, ...]:
    """Standalone parse, returning frozen descriptors in input order."""
    rule = TagMatchingRuleDescriptorBuilder()
    add_required_attributes(text, rule)
    return tuple(attribute.build() for attribute in rule.attributes)
