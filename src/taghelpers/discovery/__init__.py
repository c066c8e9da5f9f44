"""Descriptor discovery: candidate filtering, the descriptor factory,
required-attribute parsing and the end-to-end pipeline."""

from taghelpers.discovery.factory import (
    DescriptorFactory,
    InheritedAttributes,
    Resolution,
    collect_accessible_properties,
    resolve_inherited,
)
from taghelpers.discovery.pipeline import discover_tag_helpers
from taghelpers.discovery.required_attributes import (
    add_required_attributes,
    parse_required_attributes,
)
from taghelpers.discovery.visitor import TagHelperTypeVisitor, component_type_visitor

__all__ = [
    # Visitor
    "TagHelperTypeVisitor",
    "component_type_visitor",
    # Factory
    "DescriptorFactory",
    "InheritedAttributes",
    "Resolution",
    "collect_accessible_properties",
    "resolve_inherited",
    # Required attributes
    "add_required_attributes",
    "parse_required_attributes",
    # Pipeline
    "discover_tag_helpers",
]
