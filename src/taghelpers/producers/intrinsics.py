"""Fixed ``@ref``, ``@key`` and ``@attributes`` descriptors."""

from __future__ import annotations

from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.builders import TagHelperDescriptorBuilder
from taghelpers.descriptors.models import TagHelperDescriptor, TagHelperKind
from taghelpers.producers import documentation as docs
from taghelpers.symbols import wellknown


def _create_directive_descriptor(
    kind: TagHelperKind,
    identifier: str,
    directive_name: str,
    documentation: str,
) -> TagHelperDescriptor:
    type_name = f"{wellknown.COMPONENTS_NAMESPACE}.{identifier}"

    builder = TagHelperDescriptorBuilder(kind, identifier, wellknown.COMPONENTS_ASSEMBLY_NAME)
    builder.set_type_name(type_name, wellknown.COMPONENTS_NAMESPACE, identifier)
    builder.case_sensitive = True
    builder.classify_attributes_only = True
    builder.documentation = documentation
    builder.metadata[keys.Runtime.NAME] = keys.Runtime.NONE
    builder.metadata[keys.Components.SPECIAL_KIND] = kind.value

    builder.tag_matching_rule("*").attribute(directive_name, is_directive_attribute=True)

    attribute = builder.bind_attribute()
    attribute.documentation = documentation
    attribute.name = directive_name
    attribute.type_name = wellknown.SYSTEM_OBJECT
    attribute.is_directive_attribute = True
    attribute.set_property_name(identifier)

    return builder.build()


def create_ref_descriptor() -> TagHelperDescriptor:
    return _create_directive_descriptor(TagHelperKind.REF, "Ref", "@ref", docs.REF)


def create_key_descriptor() -> TagHelperDescriptor:
    return _create_directive_descriptor(TagHelperKind.KEY, "Key", "@key", docs.KEY)


def create_splat_descriptor() -> TagHelperDescriptor:
    return _create_directive_descriptor(TagHelperKind.SPLAT, "Attributes", "@attributes", docs.SPLAT)
