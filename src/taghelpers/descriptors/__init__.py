"""Tag helper descriptor model, builders, diagnostics and naming conventions."""

from taghelpers.descriptors.builders import (
    BoundAttributeDescriptorBuilder,
    BoundAttributeParameterDescriptorBuilder,
    RequiredAttributeDescriptorBuilder,
    TagHelperDescriptorBuilder,
    TagMatchingRuleDescriptorBuilder,
)
from taghelpers.descriptors.conventions import (
    ELEMENT_CATCH_ALL_NAME,
    invalid_name_characters,
    strip_tag_helper_suffix,
    to_html_case,
)
from taghelpers.descriptors.diagnostics import (
    Diagnostic,
    DiagnosticDescriptor,
    DiagnosticSeverity,
    TagHelperDiagnostics,
)
from taghelpers.descriptors.metadata import MetadataCollection
from taghelpers.descriptors.models import (
    BoundAttributeDescriptor,
    BoundAttributeParameterDescriptor,
    NameComparison,
    RequiredAttributeDescriptor,
    TagHelperDescriptor,
    TagHelperKind,
    TagMatchingRuleDescriptor,
    TagStructure,
    ValueComparison,
)

__all__ = [
    # Models
    "BoundAttributeDescriptor",
    "BoundAttributeParameterDescriptor",
    "MetadataCollection",
    "NameComparison",
    "RequiredAttributeDescriptor",
    "TagHelperDescriptor",
    "TagHelperKind",
    "TagMatchingRuleDescriptor",
    "TagStructure",
    "ValueComparison",
    # Builders
    "BoundAttributeDescriptorBuilder",
    "BoundAttributeParameterDescriptorBuilder",
    "RequiredAttributeDescriptorBuilder",
    "TagHelperDescriptorBuilder",
    "TagMatchingRuleDescriptorBuilder",
    # Diagnostics
    "Diagnostic",
    "DiagnosticDescriptor",
    "DiagnosticSeverity",
    "TagHelperDiagnostics",
    # Conventions
    "ELEMENT_CATCH_ALL_NAME",
    "invalid_name_characters",
    "strip_tag_helper_suffix",
    "to_html_case",
]
