"""``@bind`` descriptors.

Three sources feed this producer:

- ``BindElement`` / ``BindInputElement`` declarations on a public
  ``BindAttributes`` type, one descriptor each.
- A fallback descriptor matching any ``@bind-...`` attribute.
- Component descriptors exposing a ``Value``/``ValueChanged`` parameter
  pair, one descriptor per pair.
"""

from __future__ import annotations

from typing import Any

from taghelpers.core.logging import get_logger
from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.builders import BoundAttributeDescriptorBuilder, TagHelperDescriptorBuilder
from taghelpers.descriptors.models import (
    NameComparison,
    TagHelperDescriptor,
    TagHelperKind,
    ValueComparison,
)
from taghelpers.producers import documentation as docs
from taghelpers.symbols import wellknown
from taghelpers.symbols.facade import TypeSymbol

log = get_logger(__name__)

BIND_ATTRIBUTES_TYPE_NAME = "BindAttributes"
BIND_ATTRIBUTE_PREFIX = "@bind-"
CHANGED_SUFFIX = "Changed"
EXPRESSION_SUFFIX = "Expression"

FALLBACK_TYPE_NAME = "Microsoft.AspNetCore.Components.Bind"
FALLBACK_DICTIONARY_TYPE_NAME = "System.Collections.Generic.Dictionary<string, object>"


def _add_get_set_after_parameters(attribute: BoundAttributeDescriptorBuilder) -> None:
    get = attribute.bind_attribute_parameter(
        "get", property_name="Get", type_name=wellknown.SYSTEM_OBJECT, documentation=docs.BIND_ELEMENT_GET
    )
    get.is_bind_attribute_get_set = True
    attribute.bind_attribute_parameter(
        "set", property_name="Set", type_name=wellknown.SYSTEM_DELEGATE, documentation=docs.BIND_ELEMENT_SET
    )
    attribute.bind_attribute_parameter(
        "after", property_name="After", type_name=wellknown.SYSTEM_DELEGATE, documentation=docs.BIND_ELEMENT_AFTER
    )


def _arg(args: Any, index: int) -> Any:
    return args[index] if index < len(args) else None


class BindTagHelperProducer:
    def is_candidate_type(self, symbol: TypeSymbol) -> bool:
        return symbol.is_public and symbol.name == BIND_ATTRIBUTES_TYPE_NAME

    def produce(self, symbol: TypeSymbol) -> list[TagHelperDescriptor]:
        """One descriptor per well-formed bind declaration on ``symbol``.

        Declarations with an unexpected argument count are skipped.
        """
        if not self.is_candidate_type(symbol):
            return []

        results = []
        for attribute in symbol.attributes:
            args = attribute.constructor_arguments
            if attribute.attribute_type == wellknown.BIND_ELEMENT_ATTRIBUTE and len(args) == 4:
                element, type_attribute = args[0], None
            elif attribute.attribute_type == wellknown.BIND_INPUT_ELEMENT_ATTRIBUTE and len(args) in (4, 6):
                element, type_attribute = "input", args[0]
            else:
                continue

            results.append(
                self._create_element_bind(
                    symbol,
                    element=element,
                    type_attribute=type_attribute,
                    suffix=args[1],
                    value_attribute=args[2],
                    change_attribute=args[3],
                    is_invariant_culture=bool(_arg(args, 4)),
                    bind_format=_arg(args, 5),
                )
            )
        return results

    def _create_element_bind(
        self,
        symbol: TypeSymbol,
        *,
        element: str | None,
        type_attribute: str | None,
        suffix: str | None,
        value_attribute: str | None,
        change_attribute: str | None,
        is_invariant_culture: bool = False,
        bind_format: str | None = None,
    ) -> TagHelperDescriptor:
        if suffix is not None:
            name = "Bind_" + suffix
            attribute_name = "@bind-" + suffix
        else:
            name = "Bind"
            attribute_name = "@bind"
            suffix = value_attribute or ""
        format_name = "Format_" + suffix
        format_attribute_name = "format-" + suffix
        event_name = "Event_" + suffix

        builder = TagHelperDescriptorBuilder(TagHelperKind.BIND, name, wellknown.COMPONENTS_ASSEMBLY_NAME)
        builder.set_type_name(symbol.full_name, symbol.namespace, symbol.name)
        builder.case_sensitive = True
        builder.classify_attributes_only = True
        builder.documentation = docs.BIND_ELEMENT.format(value_attribute, change_attribute)

        builder.metadata[keys.Runtime.NAME] = keys.Runtime.NONE
        builder.metadata[keys.Components.SPECIAL_KIND] = TagHelperKind.BIND.value
        builder.metadata[keys.Bind.VALUE_ATTRIBUTE] = value_attribute or ""
        builder.metadata[keys.Bind.CHANGE_ATTRIBUTE] = change_attribute or ""
        builder.metadata[keys.Bind.IS_INVARIANT_CULTURE] = keys.bool_string(is_invariant_culture)
        if bind_format is not None:
            builder.metadata[keys.Bind.FORMAT] = bind_format
        if type_attribute is not None:
            # Lets <input type="x"> bindings win over the plain <input> one.
            builder.metadata[keys.Bind.TYPE_ATTRIBUTE] = type_attribute

        for directive_names in ([attribute_name], [f"{attribute_name}:get", f"{attribute_name}:set"]):
            rule = builder.tag_matching_rule(element)
            if type_attribute is not None:
                rule.attribute("type", value=type_attribute, value_comparison=ValueComparison.FULL_MATCH)
            for directive_name in directive_names:
                rule.attribute(directive_name, is_directive_attribute=True)

        attribute = builder.bind_attribute()
        attribute.documentation = docs.BIND_ELEMENT.format(value_attribute, change_attribute)
        attribute.name = attribute_name
        attribute.type_name = wellknown.SYSTEM_OBJECT
        attribute.is_directive_attribute = True
        attribute.set_property_name(name)
        attribute.bind_attribute_parameter(
            "format",
            property_name=format_name,
            type_name=wellknown.SYSTEM_STRING,
            documentation=docs.BIND_ELEMENT_FORMAT.format(attribute_name),
        )
        attribute.bind_attribute_parameter(
            "event",
            property_name=event_name,
            type_name=wellknown.SYSTEM_STRING,
            documentation=docs.BIND_ELEMENT_EVENT.format(attribute_name),
        )
        attribute.bind_attribute_parameter(
            "culture",
            property_name="Culture",
            type_name=wellknown.SYSTEM_CULTURE_INFO,
            documentation=docs.BIND_ELEMENT_CULTURE,
        )
        _add_get_set_after_parameters(attribute)

        # Legacy format-x attribute; kept so a later pass can report its use.
        legacy = builder.bind_attribute()
        legacy.name = format_attribute_name
        legacy.type_name = wellknown.SYSTEM_STRING
        legacy.documentation = docs.BIND_ELEMENT_FORMAT.format(attribute_name)
        legacy.set_property_name(format_name)

        return builder.build()

    def create_fallback_descriptor(self) -> TagHelperDescriptor:
        """Catch-all ``@bind-...`` descriptor used when nothing more specific matches."""
        builder = TagHelperDescriptorBuilder(TagHelperKind.BIND, "Bind", wellknown.COMPONENTS_ASSEMBLY_NAME)
        builder.set_type_name(FALLBACK_TYPE_NAME, wellknown.COMPONENTS_NAMESPACE, "Bind")
        builder.case_sensitive = True
        builder.classify_attributes_only = True
        builder.documentation = docs.BIND_FALLBACK
        builder.metadata[keys.Runtime.NAME] = keys.Runtime.NONE
        builder.metadata[keys.Components.SPECIAL_KIND] = TagHelperKind.BIND.value
        builder.metadata[keys.Bind.FALLBACK] = keys.TRUE

        rule = builder.tag_matching_rule("*")
        rule.attribute(
            BIND_ATTRIBUTE_PREFIX,
            name_comparison=NameComparison.PREFIX_MATCH,
            is_directive_attribute=True,
        )

        attribute = builder.bind_attribute()
        attribute.documentation = docs.BIND_FALLBACK
        attribute.name = BIND_ATTRIBUTE_PREFIX + "..."
        attribute.as_dictionary(BIND_ATTRIBUTE_PREFIX, wellknown.SYSTEM_OBJECT)
        attribute.type_name = FALLBACK_DICTIONARY_TYPE_NAME
        attribute.is_directive_attribute = True
        attribute.set_property_name("Bind")
        attribute.bind_attribute_parameter(
            "format", property_name="Format", type_name=wellknown.SYSTEM_STRING, documentation=docs.BIND_FALLBACK_FORMAT
        )
        attribute.bind_attribute_parameter(
            "event",
            property_name="Event",
            type_name=wellknown.SYSTEM_STRING,
            documentation=docs.BIND_FALLBACK_EVENT.format("@bind-..."),
        )
        attribute.bind_attribute_parameter(
            "culture",
            property_name="Culture",
            type_name=wellknown.SYSTEM_CULTURE_INFO,
            documentation=docs.BIND_ELEMENT_CULTURE,
        )

        return builder.build()

    def produce_for_component(self, component: TagHelperDescriptor) -> list[TagHelperDescriptor]:
        """Bind descriptors for every ``X``/``XChanged`` parameter pair of a component."""
        if component.kind is not TagHelperKind.COMPONENT:
            return []

        results = []
        by_name = {attribute.name: attribute for attribute in component.bound_attributes}
        tag_name = component.tag_matching_rules[0].tag_name

        for change in component.bound_attributes:
            if not change.name.endswith(CHANGED_SUFFIX):
                continue
            if not (change.is_delegate_property or change.is_event_callback_property):
                continue

            value_name = change.name[: -len(CHANGED_SUFFIX)]
            value = by_name.get(value_name)
            if value is None:
                continue
            expression = by_name.get(value_name + EXPRESSION_SUFFIX)

            builder = TagHelperDescriptorBuilder(TagHelperKind.BIND, component.name, component.assembly_name)
            builder.set_type_name(component.type_name, component.type_namespace, component.type_name_identifier)
            builder.display_name = component.display_name
            builder.case_sensitive = True
            builder.documentation = docs.BIND_COMPONENT.format(value.name, change.name)

            builder.metadata[keys.Runtime.NAME] = keys.Runtime.NONE
            builder.metadata[keys.Components.SPECIAL_KIND] = TagHelperKind.BIND.value
            builder.metadata[keys.Bind.VALUE_ATTRIBUTE] = value.name
            builder.metadata[keys.Bind.CHANGE_ATTRIBUTE] = change.name
            if expression is not None:
                builder.metadata[keys.Bind.EXPRESSION_ATTRIBUTE] = expression.name
            if component.is_fully_qualified_name_match:
                builder.metadata[keys.Components.NAME_MATCH] = keys.Components.FULLY_QUALIFIED_NAME_MATCH

            bind_name = BIND_ATTRIBUTE_PREFIX + value.name
            builder.tag_matching_rule(tag_name).attribute(bind_name, is_directive_attribute=True)
            get_set_rule = builder.tag_matching_rule(tag_name)
            get_set_rule.attribute(bind_name + ":get", is_directive_attribute=True)
            get_set_rule.attribute(bind_name + ":set", is_directive_attribute=True)

            attribute = builder.bind_attribute()
            attribute.documentation = docs.BIND_COMPONENT.format(value.name, change.name)
            attribute.name = bind_name
            attribute.type_name = change.type_name
            attribute.is_enum = value.is_enum
            attribute.containing_type = value.containing_type
            attribute.is_directive_attribute = True
            attribute.set_property_name(value.property_name)
            _add_get_set_after_parameters(attribute)

            results.append(builder.build())

        if results:
            log.debug("component_bind_produced", component=component.name, count=len(results))
        return results
