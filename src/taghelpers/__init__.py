"""taghelpers - tag helper descriptor extraction.

Usage::

    from taghelpers import discover_tag_helpers, load_manifest

    descriptors = discover_tag_helpers(load_manifest(Path("types.yaml")))
"""

from taghelpers.config.loader import load_config
from taghelpers.config.models import TagHelpersConfig
from taghelpers.descriptors.models import (
    BoundAttributeDescriptor,
    RequiredAttributeDescriptor,
    TagHelperDescriptor,
    TagHelperKind,
    TagMatchingRuleDescriptor,
)
from taghelpers.discovery.factory import DescriptorFactory
from taghelpers.discovery.pipeline import discover_tag_helpers
from taghelpers.discovery.required_attributes import parse_required_attributes
from taghelpers.symbols.manifest import SymbolTable, load_manifest, parse_manifest
from taghelpers.typenames.generic import rewrite_generic_type_name
from taghelpers.typenames.global_qualified import global_qualify_type_name

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Discovery
    "DescriptorFactory",
    "discover_tag_helpers",
    "parse_required_attributes",
    # Descriptors
    "BoundAttributeDescriptor",
    "RequiredAttributeDescriptor",
    "TagHelperDescriptor",
    "TagHelperKind",
    "TagMatchingRuleDescriptor",
    # Symbols
    "SymbolTable",
    "load_manifest",
    "parse_manifest",
    # Type names
    "global_qualify_type_name",
    "rewrite_generic_type_name",
    # Config
    "TagHelpersConfig",
    "load_config",
]
