"""Structured diagnostics for malformed tag helper declarations.

A diagnostic is data, not an exception: it carries a stable ``RZ`` id, a
severity and the format arguments. Message rendering is a convenience for
logs and the CLI; consumers key off ``id`` and ``args``.

Usage::

    from taghelpers.descriptors.diagnostics import TagHelperDiagnostics

    diag = TagHelperDiagnostics.invalid_targeted_tag_name("p@", "@")
    diag.id       # "RZ3008"
    diag.message  # "Tag helpers cannot target tag name 'p@' because it contains a '@' character."
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

DIAGNOSTIC_PREFIX = "RZ"


class DiagnosticSeverity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class DiagnosticDescriptor:
    """Id, default message template and severity for one diagnostic kind."""

    id: str
    message_format: str
    severity: DiagnosticSeverity = DiagnosticSeverity.ERROR

    def create(self, *args: Any) -> Diagnostic:
        return Diagnostic(self, tuple(args))


@dataclass(frozen=True, slots=True)
class Diagnostic:
    descriptor: DiagnosticDescriptor
    args: tuple[Any, ...] = ()

    @property
    def id(self) -> str:
        return self.descriptor.id

    @property
    def severity(self) -> DiagnosticSeverity:
        return self.descriptor.severity

    @property
    def is_error(self) -> bool:
        return self.descriptor.severity is DiagnosticSeverity.ERROR

    @property
    def message(self) -> str:
        return self.descriptor.message_format.format(*self.args)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "severity": self.severity.value,
            "message": self.message,
            "args": [str(arg) for arg in self.args],
        }

    def __str__(self) -> str:
        return f"{self.id}: {self.message}"


def _descriptor(number: int, message_format: str) -> DiagnosticDescriptor:
    return DiagnosticDescriptor(f"{DIAGNOSTIC_PREFIX}{number}", message_format)


# Name validation (30xx)
INVALID_RESTRICTED_CHILD_NULL_OR_WHITESPACE = _descriptor(
    3000, "Tag helper '{0}' restricted child tag names cannot be null or whitespace."
)
INVALID_RESTRICTED_CHILD = _descriptor(
    3001,
    "Invalid restricted child tag name '{1}' on tag helper '{0}'. "
    "Restricted child tag names cannot contain a '{2}' character.",
)
INVALID_BOUND_ATTRIBUTE_NULL_OR_WHITESPACE = _descriptor(
    3002,
    "Invalid tag helper bound property '{1}' on tag helper '{0}'. "
    "Tag helpers cannot bind to HTML attributes with a null or empty name.",
)
INVALID_BOUND_ATTRIBUTE_NAME = _descriptor(
    3003,
    "Invalid tag helper bound property '{1}' on tag helper '{0}'. Tag helpers cannot "
    "bind to HTML attributes with name '{2}' because the name contains a '{3}' character.",
)
INVALID_BOUND_ATTRIBUTE_NAME_STARTS_WITH = _descriptor(
    3004,
    "Invalid tag helper bound property '{1}' on tag helper '{0}'. Tag helpers cannot "
    "bind to HTML attributes with name '{2}' because the name starts with '{3}'.",
)
INVALID_BOUND_ATTRIBUTE_PREFIX = _descriptor(
    3005,
    "Invalid tag helper bound property '{1}' on tag helper '{0}'. Tag helpers cannot "
    "bind to HTML attributes with prefix '{2}' because the prefix contains a '{3}' character.",
)
INVALID_BOUND_ATTRIBUTE_PREFIX_STARTS_WITH = _descriptor(
    3006,
    "Invalid tag helper bound property '{1}' on tag helper '{0}'. Tag helpers cannot "
    "bind to HTML attributes with prefix '{2}' because the prefix starts with '{3}'.",
)
INVALID_TARGETED_TAG_NAME_NULL_OR_WHITESPACE = _descriptor(
    3007, "Targeted tag name cannot be null or whitespace."
)
INVALID_TARGETED_TAG_NAME = _descriptor(
    3008, "Tag helpers cannot target tag name '{0}' because it contains a '{1}' character."
)
INVALID_TARGETED_PARENT_TAG_NAME_NULL_OR_WHITESPACE = _descriptor(
    3009, "Targeted parent tag name cannot be null or whitespace."
)
INVALID_TARGETED_PARENT_TAG_NAME = _descriptor(
    3010,
    "Tag helpers cannot target parent tag name '{0}' because it contains a '{1}' character.",
)
INVALID_TARGETED_ATTRIBUTE_NAME_NULL_OR_WHITESPACE = _descriptor(
    3011, "Targeted attribute name cannot be null or whitespace."
)
INVALID_TARGETED_ATTRIBUTE_NAME = _descriptor(
    3012,
    "Tag helpers cannot target attribute name '{0}' because it contains a '{1}' character.",
)
INVALID_BOUND_ATTRIBUTE_PARAMETER_NULL_OR_WHITESPACE = _descriptor(
    3013, "Bound attribute '{0}' cannot have a parameter with a null or whitespace name."
)
INVALID_BOUND_ATTRIBUTE_PARAMETER_NAME = _descriptor(
    3014,
    "Invalid parameter '{1}' on bound attribute '{0}'. "
    "Parameter names cannot contain a '{2}' character.",
)

# Required-attribute selector grammar (31xx)
COULD_NOT_FIND_MATCHING_END_BRACE = _descriptor(
    3101, "Could not find matching ']' for required attribute '{0}'."
)
INVALID_REQUIRED_ATTRIBUTE_CHARACTER = _descriptor(
    3102, "Invalid character '{0}' in required attribute '{1}'. Expected supported CSS operator or ']'."
)
PARTIAL_REQUIRED_ATTRIBUTE_OPERATOR = _descriptor(
    3103,
    "Required attribute '{1}' has a partial CSS operator. '{0}' must be followed by an equals.",
)
INVALID_REQUIRED_ATTRIBUTE_OPERATOR = _descriptor(
    3104,
    "Invalid character '{0}' in required attribute '{1}'. Expected supported CSS operator or ']'.",
)
INVALID_REQUIRED_ATTRIBUTE_MISMATCHED_QUOTES = _descriptor(
    3105, "Required attribute '{1}' has mismatched quotes '{0}' around value."
)

# Binding shape (32xx)
INVALID_ATTRIBUTE_NAME_NULL_OR_EMPTY = _descriptor(
    3201,
    "Invalid tag helper bound property '{0}.{1}'. "
    "'HtmlAttributeNameAttribute.Name' must be null or empty if property has no public setter.",
)
INVALID_ATTRIBUTE_PREFIX_NOT_NULL = _descriptor(
    3202,
    "Invalid tag helper bound property '{0}.{1}'. 'HtmlAttributeNameAttribute.DictionaryAttributePrefix' "
    "must be null if property type is not compatible with 'IDictionary<string, TValue>'.",
)
INVALID_ATTRIBUTE_PREFIX_NULL = _descriptor(
    3203,
    "Invalid tag helper bound property '{0}.{1}'. 'HtmlAttributeNameAttribute.DictionaryAttributePrefix' "
    "must not be null if property has no public setter.",
)

RESERVED_DATA_PREFIX = "data-"


class TagHelperDiagnostics:
    """Factory methods producing diagnostics with the right argument order."""

    @staticmethod
    def invalid_restricted_child_null_or_whitespace(tag_helper: str) -> Diagnostic:
        return INVALID_RESTRICTED_CHILD_NULL_OR_WHITESPACE.create(tag_helper)

    @staticmethod
    def invalid_restricted_child(tag_helper: str, child: str, ch: str) -> Diagnostic:
        return INVALID_RESTRICTED_CHILD.create(tag_helper, child, ch)

    @staticmethod
    def invalid_bound_attribute_null_or_whitespace(tag_helper: str, prop: str) -> Diagnostic:
        return INVALID_BOUND_ATTRIBUTE_NULL_OR_WHITESPACE.create(tag_helper, prop)

    @staticmethod
    def invalid_bound_attribute_name(tag_helper: str, prop: str, name: str, ch: str) -> Diagnostic:
        return INVALID_BOUND_ATTRIBUTE_NAME.create(tag_helper, prop, name, ch)

    @staticmethod
    def invalid_bound_attribute_name_starts_with(tag_helper: str, prop: str, name: str) -> Diagnostic:
        return INVALID_BOUND_ATTRIBUTE_NAME_STARTS_WITH.create(tag_helper, prop, name, RESERVED_DATA_PREFIX)

    @staticmethod
    def invalid_bound_attribute_prefix(tag_helper: str, prop: str, prefix: str, ch: str) -> Diagnostic:
        return INVALID_BOUND_ATTRIBUTE_PREFIX.create(tag_helper, prop, prefix, ch)

    @staticmethod
    def invalid_bound_attribute_prefix_starts_with(tag_helper: str, prop: str, prefix: str) -> Diagnostic:
        return INVALID_BOUND_ATTRIBUTE_PREFIX_STARTS_WITH.create(tag_helper, prop, prefix, RESERVED_DATA_PREFIX)

    @staticmethod
    def invalid_targeted_tag_name_null_or_whitespace() -> Diagnostic:
        return INVALID_TARGETED_TAG_NAME_NULL_OR_WHITESPACE.create()

    @staticmethod
    def invalid_targeted_tag_name(name: str, ch: str) -> Diagnostic:
        return INVALID_TARGETED_TAG_NAME.create(name, ch)

    @staticmethod
    def invalid_targeted_parent_tag_name_null_or_whitespace() -> Diagnostic:
        return INVALID_TARGETED_PARENT_TAG_NAME_NULL_OR_WHITESPACE.create()

    @staticmethod
    def invalid_targeted_parent_tag_name(name: str, ch: str) -> Diagnostic:
        return INVALID_TARGETED_PARENT_TAG_NAME.create(name, ch)

    @staticmethod
    def invalid_targeted_attribute_name_null_or_whitespace() -> Diagnostic:
        return INVALID_TARGETED_ATTRIBUTE_NAME_NULL_OR_WHITESPACE.create()

    @staticmethod
    def invalid_targeted_attribute_name(name: str, ch: str) -> Diagnostic:
        return INVALID_TARGETED_ATTRIBUTE_NAME.create(name, ch)

    @staticmethod
    def invalid_bound_attribute_parameter_null_or_whitespace(attribute: str) -> Diagnostic:
        return INVALID_BOUND_ATTRIBUTE_PARAMETER_NULL_OR_WHITESPACE.create(attribute)

    @staticmethod
    def invalid_bound_attribute_parameter_name(attribute: str, name: str, ch: str) -> Diagnostic:
        return INVALID_BOUND_ATTRIBUTE_PARAMETER_NAME.create(attribute, name, ch)

    @staticmethod
    def could_not_find_matching_end_brace(text: str) -> Diagnostic:
        return COULD_NOT_FIND_MATCHING_END_BRACE.create(text)

    @staticmethod
    def invalid_required_attribute_character(ch: str, text: str) -> Diagnostic:
        return INVALID_REQUIRED_ATTRIBUTE_CHARACTER.create(ch, text)

    @staticmethod
    def partial_required_attribute_operator(ch: str, text: str) -> Diagnostic:
        return PARTIAL_REQUIRED_ATTRIBUTE_OPERATOR.create(ch, text)

    @staticmethod
    def invalid_required_attribute_operator(ch: str, text: str) -> Diagnostic:
        return INVALID_REQUIRED_ATTRIBUTE_OPERATOR.create(ch, text)

    @staticmethod
    def invalid_required_attribute_mismatched_quotes(quote: str, text: str) -> Diagnostic:
        return INVALID_REQUIRED_ATTRIBUTE_MISMATCHED_QUOTES.create(quote, text)

    @staticmethod
    def invalid_attribute_name_null_or_empty(containing_type: str, prop: str) -> Diagnostic:
        return INVALID_ATTRIBUTE_NAME_NULL_OR_EMPTY.create(containing_type, prop)

    @staticmethod
    def invalid_attribute_prefix_not_null(containing_type: str, prop: str) -> Diagnostic:
        return INVALID_ATTRIBUTE_PREFIX_NOT_NULL.create(containing_type, prop)

    @staticmethod
    def invalid_attribute_prefix_null(containing_type: str, prop: str) -> Diagnostic:
        return INVALID_ATTRIBUTE_PREFIX_NULL.create(containing_type, prop)
