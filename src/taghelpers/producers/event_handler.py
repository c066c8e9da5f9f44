"""``@onxxx`` event handler descriptors from ``EventHandler`` declarations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from taghelpers.descriptors import metadata as keys
from taghelpers.descriptors.builders import TagHelperDescriptorBuilder
from taghelpers.descriptors.models import TagHelperDescriptor, TagHelperKind
from taghelpers.producers import documentation as docs
from taghelpers.symbols import wellknown
from taghelpers.symbols.facade import TypeSymbol

EVENT_HANDLERS_TYPE_NAME = "EventHandlers"
EVENT_CALLBACK_TYPE_FORMAT = "Microsoft.AspNetCore.Components.EventCallback<{0}>"
PREVENT_DEFAULT = "preventDefault"
STOP_PROPAGATION = "stopPropagation"


class EventHandlerTagHelperProducer:
    def is_candidate_type(self, symbol: TypeSymbol) -> bool:
        return symbol.is_public and symbol.name == EVENT_HANDLERS_TYPE_NAME

    def produce(self, symbol: TypeSymbol) -> list[TagHelperDescriptor]:
        if not self.is_candidate_type(symbol):
            return []

        results = []
        for attribute in symbol.attributes:
            if attribute.attribute_type != wellknown.EVENT_HANDLER_ATTRIBUTE:
                continue
            descriptor = self._create(symbol, attribute.constructor_arguments)
            if descriptor is not None:
                results.append(descriptor)
        return results

    def _create(self, symbol: TypeSymbol, args: Sequence[Any]) -> TagHelperDescriptor | None:
        # (attribute, eventArgsType) or (attribute, eventArgsType, preventDefault, stopPropagation)
        if len(args) == 2:
            enable_prevent_default = enable_stop_propagation = False
        elif len(args) == 4:
            enable_prevent_default, enable_stop_propagation = bool(args[2]), bool(args[3])
        else:
            return None

        attribute_name, event_args_type = args[0], args[1]
        if not isinstance(attribute_name, str) or not isinstance(event_args_type, str):
            return None

        directive_name = "@" + attribute_name
        documentation = docs.EVENT_HANDLER.format(directive_name, event_args_type)

        builder = TagHelperDescriptorBuilder(
            TagHelperKind.EVENT_HANDLER, attribute_name, wellknown.COMPONENTS_ASSEMBLY_NAME
        )
        builder.set_type_name(symbol.full_name, symbol.namespace, symbol.name)
        builder.case_sensitive = True
        builder.classify_attributes_only = True
        builder.documentation = documentation
        builder.metadata[keys.Runtime.NAME] = keys.Runtime.NONE
        builder.metadata[keys.Components.SPECIAL_KIND] = TagHelperKind.EVENT_HANDLER.value
        builder.metadata[keys.EventHandler.EVENT_ARGS_TYPE] = event_args_type

        builder.tag_matching_rule("*").attribute(directive_name, is_directive_attribute=True)
        if enable_prevent_default:
            builder.tag_matching_rule("*").attribute(
                f"{directive_name}:{PREVENT_DEFAULT}", is_directive_attribute=True
            )
        if enable_stop_propagation:
            builder.tag_matching_rule("*").attribute(
                f"{directive_name}:{STOP_PROPAGATION}", is_directive_attribute=True
            )

        attribute = builder.bind_attribute()
        attribute.documentation = documentation
        attribute.name = directive_name
        attribute.type_name = EVENT_CALLBACK_TYPE_FORMAT.format(event_args_type)
        attribute.is_directive_attribute = True
        attribute.is_weakly_typed = True
        attribute.set_property_name(attribute_name)

        if enable_prevent_default:
            attribute.bind_attribute_parameter(
                PREVENT_DEFAULT,
                property_name="PreventDefault",
                type_name=wellknown.SYSTEM_BOOLEAN,
                documentation=docs.EVENT_HANDLER_PREVENT_DEFAULT.format(directive_name),
            )
        if enable_stop_propagation:
            attribute.bind_attribute_parameter(
                STOP_PROPAGATION,
                property_name="StopPropagation",
                type_name=wellknown.SYSTEM_BOOLEAN,
                documentation=docs.EVENT_HANDLER_STOP_PROPAGATION.format(directive_name),
            )

        return builder.build()
